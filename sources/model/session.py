#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Session d'edition interactive d'une courbe.

Regroupe la courbe, la transformation monde <-> ecran, la taille de la
vue, le point selectionne et l'etat de drag. Aucune dependance graphique :
la couche d'affichage transmet des positions ecran (pixels) et relit la
courbe, la selection et la matrice de vue.

Etats de drag :

- None      : repos
- 'view'    : deplacement de la vue (pan)
- 'point'   : deplacement du point selectionne
- 'left'    : deplacement de la poignee gauche du point selectionne
- 'right'   : deplacement de la poignee droite du point selectionne

Usage::

    s = EditSession(on_apply=callback)
    s.resize(800, 600)
    s.reset_view()
    s.press([400, 300])      # clic sur un point, une poignee ou le vide
    s.drag([420, 310])
    s.release()
    s.apply()

@author: Nervures
@date: 2026-10
"""

import logging

import numpy as np

from .curve import BezierCurve
from .curveconfig import editor_params
from .exceptions import InvalidState
from .point import LEFT, RIGHT, default_point_factory, symmetric_point_factory
from .transformer import Transformer

logger = logging.getLogger(__name__)

VIEW = 'view'
POINT = 'point'


class EditSession(object):
    u"""Contexte d'edition : courbe + vue + selection + drag."""

    def __init__(self, curve=None, transformer=None, on_apply=None,
                 params=None):
        u"""
        :param curve: courbe a editer (None = courbe par defaut). La
            session travaille sur une copie, rendue par :meth:`apply`.
        :type curve: BezierCurve or None
        :param transformer: transformation de vue (None = nouvelle)
        :type transformer: Transformer or None
        :param on_apply: callback ``on_apply(curve)`` appele par apply()
        :type on_apply: callable or None
        :param params: surcharges des parametres defaults_editor.cfg
        :type params: dict or None
        """
        self.params = editor_params(params)
        factory = (symmetric_point_factory
                   if self.params['SYMMETRIC_HANDLES']
                   else default_point_factory)
        if curve is None:
            curve = BezierCurve(point_factory=factory,
                                max_iterations=self.params['MAX_ITERATIONS'],
                                tolerance=self.params['TOLERANCE'])
        else:
            curve = curve.copy(point_factory=factory)
        self._curve = curve
        self.transformer = transformer or Transformer()
        self.on_apply = on_apply
        self._width = float(self.params['VIEW_WIDTH'])
        self._height = float(self.params['VIEW_HEIGHT'])
        self._selected = None
        self._state = None
        self._last = None

    def __repr__(self):
        return "EditSession(%r, selection=%r, etat=%s)" % (
            self._curve, self._selected, self._state)

    # ------------------------------------------------------------------
    #  Properties
    # ------------------------------------------------------------------

    @property
    def curve(self):
        u"""Courbe editee."""
        return self._curve

    @property
    def selected(self):
        u"""Point selectionne (ou None)."""
        return self._selected

    @property
    def state(self):
        u"""Etat de drag courant (None, 'view', 'point', 'left', 'right')."""
        return self._state

    @property
    def is_dragging_point(self):
        u"""True pendant le drag d'un point ou d'une poignee."""
        return self._state in (POINT, LEFT, RIGHT)

    @property
    def size(self):
        u"""Taille de la vue (largeur, hauteur) en pixels."""
        return self._width, self._height

    # ------------------------------------------------------------------
    #  Selection, ajout, suppression
    # ------------------------------------------------------------------

    def select(self, point):
        u"""Selectionne un point de la courbe (None = aucun).

        :raises InvalidState: si le point n'appartient pas a la courbe
        """
        if point is not None and not any(p is point for p in self._curve):
            raise InvalidState(
                u"Le point %r n'appartient pas a la courbe" % point)
        self._selected = point

    def add_point(self, position):
        u"""Ajoute un point en coordonnees monde et le selectionne.

        :param position: (x, y) monde
        :returns: le nouveau point
        :rtype: ControlPoint
        """
        index, point = self._curve.add_point(position)
        self._selected = point
        logger.info(u"Point ajoute en (%.3f, %.3f), index %d",
                    point.x, point.y, index)
        return point

    def add_point_at(self, display_point):
        u"""Ajoute un point a une position ecran et le selectionne."""
        return self.add_point(self.transformer.to_local(display_point))

    def add_point_at_center(self):
        u"""Ajoute un point au centre de la vue."""
        return self.add_point_at([self._width / 2.0, self._height / 2.0])

    def delete_selected(self):
        u"""Supprime le point selectionne.

        :returns: True si le point a ete supprime
        :rtype: bool
        """
        if self._selected is None:
            return False
        deleted = self._curve.delete_point(self._selected)
        if deleted:
            logger.info(u"Point supprime : %r", self._selected)
        else:
            logger.info(u"Suppression refusee (%d points)", len(self._curve))
        self._selected = None
        return deleted

    def set_symmetric(self, symmetric):
        u"""Active/desactive la symetrie du point selectionne."""
        if self._selected is None:
            return
        self._curve.set_symmetric(self._selected, symmetric)

    # ------------------------------------------------------------------
    #  Interaction
    # ------------------------------------------------------------------

    def hit_test(self, display_point, radius=None):
        u"""Cherche le point ou la poignee le plus proche en pixels.

        A distance egale, l'ancre passe avant ses poignees.

        :param display_point: position ecran
        :param radius: rayon de detection en pixels (None = PICK_RADIUS)
        :returns: (point, cote) avec cote None pour l'ancre, 'left' ou
            'right' pour une poignee ; (None, None) si rien n'est touche
        :rtype: tuple
        """
        if radius is None:
            radius = self.params['PICK_RADIUS']
        target = np.asarray(display_point, dtype=float)
        best = (None, None)
        best_dist = float(radius)
        for point in self._curve:
            for side, world in ((None, point.position),
                                (LEFT, point.absolute_left),
                                (RIGHT, point.absolute_right)):
                screen = self.transformer.to_display(world)
                dist = np.linalg.norm(screen - target)
                if dist <= best_dist and (best[0] is None or dist < best_dist):
                    best = (point, side)
                    best_dist = dist
        return best

    def press(self, display_point):
        u"""Debut d'interaction (bouton presse) a une position ecran.

        Sur un point ou une poignee : selection et debut du drag ; un point
        symetrique voit ses poignees recalees. Ailleurs : debut de pan.

        :returns: etat de drag choisi
        :rtype: str
        """
        point, side = self.hit_test(display_point)
        self._last = np.asarray(display_point, dtype=float)
        if point is None:
            self._state = VIEW
            return self._state
        self._selected = point
        if point.symmetric:
            self._curve.set_symmetric(point, True)
        self._state = side if side is not None else POINT
        logger.debug(u"Debut du drag '%s' sur %r", self._state, point)
        return self._state

    def drag(self, display_point):
        u"""Deplacement pendant le drag.

        - 'view' : translation de la vue du delta ecran
        - 'point' : translation du point du delta monde (courbe re-triee)
        - 'left'/'right' : translation de l'extremite de la poignee du
          delta monde (l'autre poignee suit en mode symetrique)
        """
        position = np.asarray(display_point, dtype=float)
        if self._state is None or self._last is None:
            self._last = position
            return
        if self._state == VIEW:
            delta = position - self._last
            self.transformer.move(delta[0], delta[1])
        elif self._selected is not None:
            delta = (self.transformer.to_local(position)
                     - self.transformer.to_local(self._last))
            point = self._selected
            if self._state == POINT:
                new = point.position + delta
                self._curve.set_position(point, new[0], new[1])
            else:
                self._curve.set_handle(point, self._state,
                                       point.handle(self._state) + delta)
        self._last = position

    def release(self):
        u"""Fin d'interaction : retour au repos."""
        self._state = None
        self._last = None

    # ------------------------------------------------------------------
    #  Vue
    # ------------------------------------------------------------------

    def resize(self, width, height):
        u"""Change la taille de la vue en pixels."""
        if not (width > 0 and height > 0):
            raise ValueError(
                u"Taille de vue invalide : %g x %g" % (width, height))
        self._width = float(width)
        self._height = float(height)

    def reset_view(self, stretch=True):
        u"""Cadre la courbe dans la vue.

        :param stretch: True = echelles independantes (remplit la vue),
            False = echelle uniforme centree
        :type stretch: bool
        """
        self.transformer.fit(self._curve.bounding_range(),
                             self._width, self._height, stretch=stretch)
        logger.info(u"Vue recadree : %r", self.transformer)

    def zoom(self, direction, anchor=None, axis='both'):
        u"""Zoom avant (direction > 0) ou arriere (direction < 0).

        :param direction: signe du cran de molette
        :param anchor: point ecran fixe (None = centre de la vue)
        :param axis: 'both', 'x' ou 'y'
        """
        if direction == 0:
            return
        factor = self.params['ZOOM_FACTOR']
        if direction < 0:
            factor = 1.0 / factor
        if anchor is None:
            anchor = [self._width / 2.0, self._height / 2.0]
        self.transformer.zoom(factor, anchor=anchor, axis=axis)

    def visible_range(self):
        u"""Zone monde visible.

        :returns: (min_x, min_y, max_x, max_y) en coordonnees monde
        :rtype: tuple
        """
        corners = self.transformer.to_local(
            [[0.0, 0.0], [self._width, self._height]])
        mins = corners.min(axis=0)
        maxs = corners.max(axis=0)
        return float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1])

    # ------------------------------------------------------------------
    #  Resultats
    # ------------------------------------------------------------------

    def sample_table(self, step=None):
        u"""Table (x, y) de la courbe avec un pas en x (None = SAMPLE_STEP).

        :rtype: numpy.ndarray, shape (m, 2)
        """
        if step is None:
            step = self.params['SAMPLE_STEP']
        return self._curve.sample(step)

    def apply(self):
        u"""Transmet la courbe editee au callback on_apply.

        :returns: la courbe editee
        :rtype: BezierCurve
        """
        logger.info(u"Application de la courbe %r", self._curve)
        if self.on_apply is not None:
            self.on_apply(self._curve)
        return self._curve
