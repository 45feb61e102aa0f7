#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Transformation affine entre coordonnees monde (courbe) et ecran.

    ecran = echelle * monde + translation

La matrice homogene 3x3 (echelle puis translation) et son inverse sont
recalculees a chaque modification : l'objet est toujours coherent.
Les echelles sont non nulles ; une echelle negative en y retourne l'axe
(y vers le haut dans le monde, vers le bas a l'ecran).

Usage::

    tr = Transformer()
    tr.set_scale(400, -300)
    tr.set_position(50, 350)
    tr.to_display([1, 1])           # ndarray([450., 50.])
    tr.to_local([450, 50])          # ndarray([1., 1.])
    tr.zoom(1.1, anchor=[200, 100]) # zoom centre sur un point ecran

@author: Nervures
@date: 2026-10
"""

import logging

import numpy as np

from .exceptions import InvalidArgument

logger = logging.getLogger(__name__)


def _apply(matrix, points):
    u"""Applique une matrice homogene a un point (2,) ou a des points (n, 2)."""
    pts = np.asarray(points, dtype=float)
    if pts.shape == (2,):
        return matrix[:2, :2].dot(pts) + matrix[:2, 2]
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise InvalidArgument(
            u"points doit etre de shape (2,) ou (n, 2), recu %s"
            % str(pts.shape))
    return pts.dot(matrix[:2, :2].T) + matrix[:2, 2]


class Transformer(object):
    u"""Translation + echelle par axe, avec matrice et inverse."""

    def __init__(self, position=(0.0, 0.0), scale=(1.0, 1.0)):
        u"""
        :param position: translation (tx, ty) en coordonnees ecran
        :type position: array-like
        :param scale: echelle (sx, sy), composantes non nulles
        :type scale: array-like
        """
        self._position = np.zeros(2)
        self._scale = np.ones(2)
        self._matrix = np.identity(3)
        self._inverse = np.identity(3)
        self.set_scale(*scale)
        self.set_position(*position)

    def __repr__(self):
        return "Transformer(position=(%g, %g), scale=(%g, %g))" % (
            self._position[0], self._position[1],
            self._scale[0], self._scale[1])

    # ------------------------------------------------------------------
    #  Properties
    # ------------------------------------------------------------------

    @property
    def position(self):
        u"""Translation (tx, ty), ndarray(2,) (copie)."""
        return self._position.copy()

    @position.setter
    def position(self, value):
        self.set_position(*value)

    @property
    def scale(self):
        u"""Echelle (sx, sy), ndarray(2,) (copie)."""
        return self._scale.copy()

    @scale.setter
    def scale(self, value):
        self.set_scale(*value)

    # ------------------------------------------------------------------
    #  Mutations
    # ------------------------------------------------------------------

    def set_position(self, x, y):
        u"""Remplace la translation.

        :returns: self (pour chainage)
        :rtype: Transformer
        """
        pos = np.array([x, y], dtype=float)
        if not np.all(np.isfinite(pos)):
            raise InvalidArgument(
                u"Translation invalide (NaN/Infinity) : %s" % pos)
        self._position = pos
        self._refresh()
        return self

    def set_scale(self, x, y):
        u"""Remplace l'echelle.

        :raises InvalidArgument: composante nulle, NaN ou Infinity
        :returns: self (pour chainage)
        :rtype: Transformer
        """
        scale = np.array([x, y], dtype=float)
        if not np.all(np.isfinite(scale)) or np.any(scale == 0.0):
            raise InvalidArgument(
                u"L'echelle doit etre finie et non nulle, recu %s" % scale)
        self._scale = scale
        self._refresh()
        return self

    def move(self, dx, dy):
        u"""Ajoute (dx, dy) a la translation (deplacement ecran).

        :returns: self (pour chainage)
        :rtype: Transformer
        """
        return self.set_position(self._position[0] + dx,
                                 self._position[1] + dy)

    def _refresh(self):
        u"""Recalcule la matrice (echelle puis translation) et son inverse."""
        sx, sy = self._scale
        tx, ty = self._position
        self._matrix = np.array([[sx, 0.0, tx],
                                 [0.0, sy, ty],
                                 [0.0, 0.0, 1.0]])
        self._inverse = np.array([[1.0 / sx, 0.0, -tx / sx],
                                  [0.0, 1.0 / sy, -ty / sy],
                                  [0.0, 0.0, 1.0]])

    # ------------------------------------------------------------------
    #  Conversions
    # ------------------------------------------------------------------

    def current_matrix(self):
        u"""Matrice homogene monde -> ecran, ndarray(3, 3) (copie)."""
        return self._matrix.copy()

    def inverse_matrix(self):
        u"""Matrice homogene ecran -> monde, ndarray(3, 3) (copie)."""
        return self._inverse.copy()

    def to_local(self, display_point):
        u"""Coordonnees ecran -> monde.

        :param display_point: point (2,) ou points (n, 2) ecran
        :rtype: numpy.ndarray
        """
        return _apply(self._inverse, display_point)

    def to_display(self, world_point):
        u"""Coordonnees monde -> ecran.

        :param world_point: point (2,) ou points (n, 2) monde
        :rtype: numpy.ndarray
        """
        return _apply(self._matrix, world_point)

    # ------------------------------------------------------------------
    #  Vue
    # ------------------------------------------------------------------

    def zoom(self, factor, anchor=None, axis='both'):
        u"""Multiplie l'echelle en gardant fixe le point monde sous anchor.

        :param factor: facteur multiplicatif (> 0)
        :type factor: float
        :param anchor: point ecran fixe (None = origine ecran)
        :type anchor: array-like or None
        :param axis: 'both', 'x' ou 'y'
        :type axis: str
        :returns: self (pour chainage)
        :rtype: Transformer
        """
        if not factor > 0 or not np.isfinite(factor):
            raise InvalidArgument(
                u"Le facteur de zoom doit etre > 0, recu %g" % factor)
        if axis not in ('both', 'x', 'y'):
            raise InvalidArgument(
                u"Axe inconnu '%s'. Attendu : 'both', 'x', 'y'" % axis)
        if anchor is None:
            anchor = (0.0, 0.0)
        anchor = np.asarray(anchor, dtype=float)
        world = self.to_local(anchor)
        scale = self._scale.copy()
        if axis in ('both', 'x'):
            scale[0] *= factor
        if axis in ('both', 'y'):
            scale[1] *= factor
        position = anchor - world * scale
        # Etat inchange si l'echelle ou la translation deborde
        if not (np.all(np.isfinite(scale)) and np.all(scale != 0.0)
                and np.all(np.isfinite(position))):
            raise InvalidArgument(
                u"Zoom %g hors limites : echelle %s, translation %s"
                % (factor, scale, position))
        self._scale = scale
        self._position = position
        self._refresh()
        return self

    def fit(self, bounds, width, height, stretch=True, flip_y=True):
        u"""Cadre une boite monde dans une fenetre ecran width x height.

        - stretch=True : echelles independantes, la boite occupe toute
          la fenetre
        - stretch=False : echelle uniforme, boite centree

        Un cote de longueur nulle est remplace par 1 (cas degenere).

        :param bounds: (min_x, min_y, max_x, max_y) en coordonnees monde
        :type bounds: tuple
        :param width: largeur ecran (> 0)
        :param height: hauteur ecran (> 0)
        :param flip_y: y monde vers le haut (echelle y negative)
        :type flip_y: bool
        :returns: self (pour chainage)
        :rtype: Transformer
        """
        if not (width > 0 and height > 0):
            raise InvalidArgument(
                u"Taille de fenetre invalide : %g x %g" % (width, height))
        min_x, min_y, max_x, max_y = [float(v) for v in bounds]
        len_x = max_x - min_x
        len_y = max_y - min_y
        if len_x <= 0:
            logger.warning(u"Boite de largeur nulle, largeur 1 utilisee")
            len_x = 1.0
        if len_y <= 0:
            logger.warning(u"Boite de hauteur nulle, hauteur 1 utilisee")
            len_y = 1.0

        if stretch:
            sx = width / len_x
            sy = height / len_y
        else:
            sx = sy = min(width / len_x, height / len_y)
        if flip_y:
            sy = -sy

        # Centre de la boite au centre de la fenetre
        cx = (min_x + max_x) / 2.0
        cy = (min_y + max_y) / 2.0
        self.set_scale(sx, sy)
        self.set_position(width / 2.0 - sx * cx, height / 2.0 - sy * cy)
        return self
