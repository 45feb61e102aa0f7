#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Segment de Bezier isole, extrait d'une courbe par morceaux.

Un segment garde ses points de controle (copie) et s'evalue par la somme
ponderee de Bernstein, pour un t ou un tableau de t. C'est la forme
renvoyee par :meth:`curve.BezierCurve.segment_bezier` et utilisee pour le
trace.

    seg = courbe.segment_bezier(0)
    seg.evaluate(0.5)                        # ndarray(2,)
    seg.evaluate(np.linspace(0, 1, 50))      # ndarray(50, 2)

@author: Nervures
@date: 2026-10
"""

import numpy as np

from .bernstein import bezier_sum
from .exceptions import InvalidArgument


class Bezier(object):
    u"""Segment de Bezier 2D (P0..Pn), evalue par :func:`bezier_sum`."""

    def __init__(self, control_points, name='Sans nom'):
        u"""
        :param control_points: P0..Pn, au moins 2 couples (x, y) finis
        :type control_points: array-like, shape (n+1, 2)
        :param name: nom du segment
        :type name: str
        :raises InvalidArgument: forme incorrecte, moins de 2 points,
            NaN ou Infinity
        """
        cpts = np.array(control_points, dtype=float)
        if cpts.ndim != 2 or cpts.shape[1] != 2 or cpts.shape[0] < 2:
            raise InvalidArgument(
                u"Segment invalide : %s (au moins 2 couples (x, y))"
                % str(cpts.shape))
        if not np.all(np.isfinite(cpts)):
            raise InvalidArgument(
                u"Point de controle NaN ou Infinity dans %s" % name)
        self._cpts = cpts
        self.name = name

    def __repr__(self):
        return "Bezier('%s', degre=%d)" % (self.name, self.degree)

    def __len__(self):
        return len(self._cpts)

    @property
    def control_points(self):
        u"""Copie des points de controle, ndarray(n+1, 2)."""
        return self._cpts.copy()

    @property
    def degree(self):
        return len(self._cpts) - 1

    def evaluate(self, t):
        u"""Point(s) du segment.

        t scalaire -> ndarray(2,) ; t tableau de m valeurs -> ndarray(m, 2).
        Aux bornes (t <= 0, t >= 1), P0 et Pn sont renvoyes exactement.
        """
        ts = np.asarray(t, dtype=float)
        if ts.ndim == 0:
            return bezier_sum(ts, self._cpts)
        return np.array([bezier_sum(ti, self._cpts) for ti in ts.ravel()])
