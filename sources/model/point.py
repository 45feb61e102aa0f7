#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Point de controle d'une courbe de Bezier par morceaux.

Un point porte une position et deux poignees relatives :

- poignee gauche : tangente entrante (segment precedent)
- poignee droite : tangente sortante (segment suivant)

En mode symetrique, modifier une poignee impose a l'autre d'etre son
oppose exact : la tangente reste droite a travers le point.

Creation::

    p = ControlPoint(0.5, 0.2)
    p.right_handle = [0.3, 0.1]
    p.symmetric = True
    p.reset_handles()             # left = -right, longueur moyenne

@author: Nervures
@date: 2026-10
"""

import math

import numpy as np

from .exceptions import InvalidArgument

DEFAULT_LEFT_HANDLE = (-0.5, 0.0)
DEFAULT_RIGHT_HANDLE = (0.5, 0.0)

LEFT = 'left'
RIGHT = 'right'


def as_finite_vector(value, what=u'vecteur'):
    u"""Convertit en ndarray(2,) fini.

    :param value: couple (x, y)
    :type value: array-like
    :param what: nom de la grandeur pour le message d'erreur
    :type what: str
    :returns: copie en flottants
    :rtype: numpy.ndarray, shape (2,)
    :raises InvalidArgument: forme incorrecte, NaN ou Infinity
    """
    try:
        vec = np.array(value, dtype=float)
    except (TypeError, ValueError):
        raise InvalidArgument(u"%s invalide : %r" % (what, value))
    if vec.shape != (2,):
        raise InvalidArgument(
            u"%s doit etre un couple (x, y), recu shape %s"
            % (what, str(vec.shape)))
    if not np.all(np.isfinite(vec)):
        raise InvalidArgument(
            u"%s ne peut contenir ni NaN ni Infinity : %s" % (what, vec))
    return vec


class ControlPoint(object):
    u"""Point de controle avec poignees gauche/droite.

    Les poignees sont stockees en relatif a la position.
    """

    def __init__(self, x=0.0, y=0.0, symmetric=False):
        u"""
        :param x: abscisse
        :type x: float
        :param y: ordonnee
        :type y: float
        :param symmetric: poignees liees (defaut False)
        :type symmetric: bool
        """
        self._position = as_finite_vector((x, y), u'position')
        self._left = np.array(DEFAULT_LEFT_HANDLE, dtype=float)
        self._right = np.array(DEFAULT_RIGHT_HANDLE, dtype=float)
        self._symmetric = bool(symmetric)

    def __repr__(self):
        return "ControlPoint(%g, %g%s)" % (
            self._position[0], self._position[1],
            ', symetrique' if self._symmetric else '')

    # ------------------------------------------------------------------
    #  Position
    # ------------------------------------------------------------------

    @property
    def position(self):
        u"""Position (x, y), ndarray(2,) (copie)."""
        return self._position.copy()

    @position.setter
    def position(self, value):
        self._position = as_finite_vector(value, u'position')

    @property
    def x(self):
        return float(self._position[0])

    @property
    def y(self):
        return float(self._position[1])

    # ------------------------------------------------------------------
    #  Poignees
    # ------------------------------------------------------------------

    @property
    def left_handle(self):
        u"""Poignee gauche relative (tangente entrante), ndarray(2,)."""
        return self._left.copy()

    @left_handle.setter
    def left_handle(self, value):
        self._left = as_finite_vector(value, u'poignee gauche')
        if self._symmetric:
            self._right = -self._left

    @property
    def right_handle(self):
        u"""Poignee droite relative (tangente sortante), ndarray(2,)."""
        return self._right.copy()

    @right_handle.setter
    def right_handle(self, value):
        self._right = as_finite_vector(value, u'poignee droite')
        if self._symmetric:
            self._left = -self._right

    @property
    def absolute_left(self):
        u"""Extremite de la poignee gauche en coordonnees absolues."""
        return self._position + self._left

    @absolute_left.setter
    def absolute_left(self, value):
        self.left_handle = as_finite_vector(value, u'poignee gauche') \
            - self._position

    @property
    def absolute_right(self):
        u"""Extremite de la poignee droite en coordonnees absolues."""
        return self._position + self._right

    @absolute_right.setter
    def absolute_right(self, value):
        self.right_handle = as_finite_vector(value, u'poignee droite') \
            - self._position

    def handle(self, side):
        u"""Poignee relative du cote donne ('left' ou 'right')."""
        if side == LEFT:
            return self.left_handle
        if side == RIGHT:
            return self.right_handle
        raise InvalidArgument(
            u"Cote inconnu '%s'. Attendu : 'left', 'right'" % side)

    def set_handle(self, side, vector):
        u"""Modifie la poignee relative du cote donne.

        En mode symetrique, l'autre poignee devient son oppose.

        :param side: 'left' ou 'right'
        :type side: str
        :param vector: poignee relative (dx, dy)
        :type vector: array-like
        :returns: self (pour chainage)
        :rtype: ControlPoint
        """
        if side == LEFT:
            self.left_handle = vector
        elif side == RIGHT:
            self.right_handle = vector
        else:
            raise InvalidArgument(
                u"Cote inconnu '%s'. Attendu : 'left', 'right'" % side)
        return self

    # ------------------------------------------------------------------
    #  Symetrie
    # ------------------------------------------------------------------

    @property
    def symmetric(self):
        u"""Poignees liees (True) ou independantes (False)."""
        return self._symmetric

    @symmetric.setter
    def symmetric(self, value):
        self._symmetric = bool(value)

    def reset_handles(self):
        u"""Rend les poignees symetriques.

        Sans effet si le point n'est pas en mode symetrique.

        - longueur commune = moyenne des deux longueurs
        - la poignee gauche garde sa direction (horizontale si nulle)
        - la poignee droite devient l'oppose exact de la gauche
        - si les deux poignees sont nulles : poignees par defaut

        :returns: self (pour chainage)
        :rtype: ControlPoint
        """
        if not self._symmetric:
            return self
        left_len = math.hypot(self._left[0], self._left[1])
        right_len = math.hypot(self._right[0], self._right[1])
        avg = (left_len + right_len) / 2.0
        if avg > 0:
            if left_len > 0:
                self._left = self._left / left_len * avg
            else:
                self._left = np.array([-avg, 0.0])
            self._right = -self._left
        else:
            self._left = np.array(DEFAULT_LEFT_HANDLE, dtype=float)
            self._right = np.array(DEFAULT_RIGHT_HANDLE, dtype=float)
        return self

    def copy(self):
        u"""Copie independante (position, poignees, symetrie)."""
        other = ControlPoint(self._position[0], self._position[1],
                             symmetric=self._symmetric)
        other._left = self._left.copy()
        other._right = self._right.copy()
        return other


def default_point_factory(position):
    u"""Fabrique par defaut : un ControlPoint simple a la position donnee.

    :param position: (x, y)
    :type position: array-like
    :rtype: ControlPoint
    """
    return ControlPoint(position[0], position[1])


def symmetric_point_factory(position):
    u"""Fabrique de points a poignees symetriques (mode editeur)."""
    return ControlPoint(position[0], position[1], symmetric=True)
