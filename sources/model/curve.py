#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Courbe de Bezier par morceaux y = f(x).

Une suite ordonnee de points de controle (tries par x croissant), chaque
paire de points consecutifs definissant un segment cubique :

    p0 = P[i]                      p1 = P[i] + poignee droite de P[i]
    p2 = P[i+1] + poignee gauche   p3 = P[i+1]

La requete :meth:`BezierCurve.value_at` localise le segment encadrant x,
resout x(t) = x (bissection + Newton) puis evalue y(t).

Creation::

    c = BezierCurve()                          # (0, 0) et (1, 1)
    index, p = c.add_point([0.5, 0.2])         # index = 1
    c.value_at(0.25)
    c.set_position(p, 0.6, 0.3)                # re-tri automatique
    c.delete_point(p)

Invariants :

- au moins 2 points (delete_point refuse en dessous)
- points tries par x croissant ; les x egaux sont permis, un nouveau
  point se place avant les points de meme x
- la courbe ne se re-trie pas quand un point est modifie directement :
  appeler :meth:`BezierCurve.sort` ensuite

@author: Nervures
@date: 2026-10
"""

import logging

import numpy as np

from .bernstein import evaluate_cubic_y
from .bezier import Bezier
from .exceptions import InvalidArgument, InvalidState
from .locator import find_t_for_x
from .point import as_finite_vector, default_point_factory

logger = logging.getLogger(__name__)


class BezierCurve(object):
    u"""Courbe de Bezier par morceaux, parametree par l'abscisse x.

    La construction des points est deleguee a une fabrique
    ``point_factory(position) -> ControlPoint`` fournie a la creation.
    """

    def __init__(self, positions=None, point_factory=None, name='Sans nom',
                 max_iterations=20, tolerance=1e-10):
        u"""
        :param positions: positions initiales (None ou moins de 2 points :
            points par defaut (0, 0) et (1, 1))
        :type positions: list or numpy.ndarray or None
        :param point_factory: fabrique de points (None = ControlPoint simple)
        :type point_factory: callable or None
        :param name: nom de la courbe
        :type name: str
        :param max_iterations: iterations max de Newton pour value_at
        :type max_iterations: int
        :param tolerance: tolerance de la localisation inverse
        :type tolerance: float
        """
        self._name = name
        self._factory = point_factory or default_point_factory
        self._points = []
        self._listeners = []
        self._version = 0
        self.max_iterations = int(max_iterations)
        self.tolerance = float(tolerance)
        if positions is None or len(positions) < 2:
            positions = [(0.0, 0.0), (1.0, 1.0)]
        for position in positions:
            self.add_point(position)
        self._version = 0

    def __repr__(self):
        return "BezierCurve('%s', %d pts)" % (self._name, len(self._points))

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(tuple(self._points))

    def __getitem__(self, index):
        return self._points[index]

    # ------------------------------------------------------------------
    #  Properties
    # ------------------------------------------------------------------

    @property
    def name(self):
        u"""Nom de la courbe."""
        return self._name

    @name.setter
    def name(self, value):
        self._name = str(value)

    @property
    def points(self):
        u"""Points de controle dans l'ordre, tuple (lecture seule)."""
        return tuple(self._points)

    @property
    def positions(self):
        u"""Positions des points de controle, ndarray(n, 2)."""
        return np.array([p.position for p in self._points], dtype=float)

    @property
    def point_factory(self):
        u"""Fabrique utilisee par add_point."""
        return self._factory

    @property
    def version(self):
        u"""Compteur incremente a chaque mutation de la courbe."""
        return self._version

    # ------------------------------------------------------------------
    #  Notification
    # ------------------------------------------------------------------

    def add_listener(self, callback):
        u"""Enregistre un callback ``callback(curve)`` appele apres
        chaque mutation."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _changed(self):
        self._version += 1
        for callback in list(self._listeners):
            callback(self)

    # ------------------------------------------------------------------
    #  Mutations
    # ------------------------------------------------------------------

    def add_point(self, position):
        u"""Ajoute un point de controle en conservant le tri par x.

        L'index d'insertion est le nombre de points d'abscisse strictement
        inferieure : un point de meme x qu'un point existant est place
        avant lui.

        :param position: position (x, y) du nouveau point
        :type position: array-like
        :returns: (index d'insertion, nouveau point)
        :rtype: tuple(int, ControlPoint)
        :raises InvalidArgument: si une coordonnee est NaN ou Infinity
        """
        position = as_finite_vector(position, u'position')
        point = self._factory(position)
        index = sum(1 for p in self._points if p.x < position[0])
        self._points.insert(index, point)
        self._changed()
        return index, point

    def delete_point(self, point):
        u"""Supprime un point de controle.

        Refuse si le point est absent ou si la courbe n'a plus que 2 points
        (une courbe doit garder au moins un segment).

        :param point: point a supprimer (None accepte)
        :type point: ControlPoint or None
        :returns: True si le point a ete supprime
        :rtype: bool
        """
        if point is None or len(self._points) <= 2:
            return False
        if not any(p is point for p in self._points):
            return False
        self._points = [p for p in self._points if p is not point]
        self._changed()
        return True

    def sort(self):
        u"""Tri stable des points par x croissant.

        :returns: self (pour chainage)
        :rtype: BezierCurve
        """
        self._points.sort(key=lambda p: p.x)
        self._changed()
        return self

    def _check_owned(self, point):
        if not any(p is point for p in self._points):
            raise InvalidState(
                u"Le point %r n'appartient pas a la courbe" % point)

    def set_position(self, point, x, y, resort=True):
        u"""Deplace un point de controle.

        :param point: point de la courbe
        :type point: ControlPoint
        :param x: nouvelle abscisse
        :param y: nouvelle ordonnee
        :param resort: re-trier la courbe apres le deplacement (defaut
            True). Passer False pendant un drag puis appeler sort().
        :type resort: bool
        """
        self._check_owned(point)
        point.position = (x, y)
        if resort:
            self.sort()
        else:
            self._changed()

    def set_handle(self, point, side, vector):
        u"""Modifie la poignee relative ('left' ou 'right') d'un point.

        En mode symetrique l'autre poignee suit (oppose exact).
        """
        self._check_owned(point)
        point.set_handle(side, vector)
        self._changed()

    def set_symmetric(self, point, symmetric):
        u"""Active/desactive la symetrie des poignees d'un point.

        A l'activation, les poignees sont recalees (:meth:`reset_handles`).
        """
        self._check_owned(point)
        point.symmetric = symmetric
        if symmetric:
            point.reset_handles()
        self._changed()

    # ------------------------------------------------------------------
    #  Requetes
    # ------------------------------------------------------------------

    def bounding_range(self):
        u"""Boite englobante des positions.

        :returns: (min_x, min_y, max_x, max_y)
        :rtype: tuple(float, float, float, float)
        """
        pts = self.positions
        if len(pts) == 0:
            raise InvalidState(u"La courbe ne contient aucun point")
        mins = pts.min(axis=0)
        maxs = pts.max(axis=0)
        return float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1])

    def segment(self, index):
        u"""Les 4 points de controle du segment index (P[index] -> P[index+1]).

        Supporte l'indexation negative.

        :param index: index du segment (0 a n-2)
        :type index: int
        :returns: points de controle p0, p1, p2, p3
        :rtype: numpy.ndarray, shape (4, 2)
        """
        n_seg = len(self._points) - 1
        if index < -n_seg or index >= n_seg:
            raise IndexError(
                u"Index %d hors limites pour %d segments" % (index, n_seg))
        if index < 0:
            index += n_seg
        return self._segment(self._points[index], self._points[index + 1])

    @staticmethod
    def _segment(start, end):
        return np.array([start.position, start.absolute_right,
                         end.absolute_left, end.position], dtype=float)

    def segment_bezier(self, index):
        u"""Segment index sous forme de cubique :class:`Bezier`."""
        return Bezier(self.segment(index),
                      name='%s [%d]' % (self._name, index))

    def value_at(self, x):
        u"""Ordonnee de la courbe en x.

        - x <= premier x : ordonnee du premier point (exacte)
        - x >= dernier x : ordonnee du dernier point (exacte)
        - sinon : segment encadrant x, t tel que x(t) = x, puis y(t)

        :param x: abscisse
        :type x: float
        :returns: ordonnee
        :rtype: float
        :raises InvalidState: si la courbe est vide
        """
        points = tuple(self._points)
        if not points:
            raise InvalidState(u"La courbe ne contient aucun point")
        x = float(x)
        if x <= points[0].x:
            return points[0].y
        if x >= points[-1].x:
            return points[-1].y

        for start, end in zip(points[:-1], points[1:]):
            if start.x <= x <= end.x:
                if start.x == end.x:
                    logger.debug(u"Intervalle de largeur nulle en x=%g", x)
                    return start.y
                p0, p1, p2, p3 = self._segment(start, end)
                t = find_t_for_x(x, p0, p1, p2, p3,
                                 max_iterations=self.max_iterations,
                                 tolerance=self.tolerance)
                return evaluate_cubic_y(t, p0, p1, p2, p3)

        logger.debug(u"Aucun segment n'encadre x=%g (courbe non triee ?)", x)
        return points[0].y

    def values_at(self, xs):
        u"""Ordonnees de la courbe pour un tableau d'abscisses.

        :param xs: abscisses
        :type xs: array-like
        :rtype: numpy.ndarray
        """
        xs = np.asarray(xs, dtype=float)
        return np.array([self.value_at(x) for x in xs.ravel()],
                        dtype=float).reshape(xs.shape)

    def sample(self, step):
        u"""Table d'echantillonnage (x, y) du premier au dernier point.

        Les x partent du premier point avec un pas constant ; le dernier x
        est toujours inclus.

        :param step: pas en x (> 0)
        :type step: float
        :returns: points echantillonnes, ndarray(m, 2)
        :rtype: numpy.ndarray
        """
        step = float(step)
        if not step > 0 or not np.isfinite(step):
            raise InvalidArgument(u"Le pas doit etre > 0, recu %g" % step)
        min_x = self._points[0].x
        max_x = self._points[-1].x
        count = int((max_x - min_x) / step)
        xs = [min_x + step * i for i in range(count + 1)]
        if abs(xs[-1] - max_x) > 1e-6:
            xs.append(max_x)
        xs = np.array(xs)
        return np.column_stack([xs, self.values_at(xs)])

    # ------------------------------------------------------------------
    #  Copie
    # ------------------------------------------------------------------

    def copy(self, point_factory=None):
        u"""Copie independante de la courbe (poignees et symetrie comprises).

        :param point_factory: fabrique de la copie (None = celle de self)
        :type point_factory: callable or None
        :rtype: BezierCurve
        """
        other = BezierCurve(point_factory=point_factory or self._factory,
                            name=self._name,
                            max_iterations=self.max_iterations,
                            tolerance=self.tolerance)
        other._points = []
        for p in self._points:
            q = other._factory(p.position)
            q.symmetric = False
            q.left_handle = p.left_handle
            q.right_handle = p.right_handle
            q.symmetric = p.symmetric
            other._points.append(q)
        return other

    # ------------------------------------------------------------------
    #  Visualisation
    # ------------------------------------------------------------------

    def plot(self, ax=None, show=True, handles=True, n=50):
        u"""Trace la courbe segment par segment.

        :param ax: axes matplotlib existants (None = creation)
        :param show: appeler plt.show() a la fin
        :param handles: afficher les poignees des points
        :param n: nombre de points d'evaluation par segment
        :returns: axes matplotlib
        """
        import matplotlib.pyplot as plt

        if ax is None:
            fig, ax = plt.subplots(1, 1, figsize=(10, 6))

        t_vals = np.linspace(0, 1, n)
        for i in range(len(self._points) - 1):
            pts = self.segment_bezier(i).evaluate(t_vals)
            ax.plot(pts[:, 0], pts[:, 1], 'b-', linewidth=1.5,
                    label=self._name if i == 0 else None)

        pos = self.positions
        ax.plot(pos[:, 0], pos[:, 1], 'ko', markersize=5)
        if handles:
            for p in self._points:
                seg = np.array([p.absolute_left, p.position,
                                p.absolute_right])
                ax.plot(seg[:, 0], seg[:, 1], 'o--', color='gray',
                        linewidth=0.8, markersize=3)

        ax.set_title(self._name)
        ax.grid(True, alpha=0.3)
        ax.legend(fontsize=8)

        if show:
            plt.show()

        return ax
