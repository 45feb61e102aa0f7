#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Evaluation des polynomes de Bernstein.

- ligne du triangle de Pascal (coefficients binomiaux, recurrence
  multiplicative sans factorielle)
- somme ponderee generalisee sur N points de controle
- forme fermee de la cubique (coefficients monomiaux + schema de Horner),
  avec variantes scalaires par axe

Politique aux bornes : t <= 0 renvoie P0 et t >= 1 renvoie Pn exactement,
sans evaluer le polynome.

Usage::

    pascal_row(4)                                # [1, 4, 6, 4, 1]
    bezier_sum(0.5, [[0, 0], [1, 2], [2, 0]])    # ndarray(2,)
    evaluate_cubic_y(0.5, p0, p1, p2, p3)        # float

@author: Nervures
@date: 2026-10
"""

import numpy as np

from .exceptions import InvalidArgument


def pascal_row(n):
    u"""Ligne n du triangle de Pascal.

    c[0] = 1, c[i] = c[i-1] * (n - i + 1) / i

    :param n: index de la ligne (>= 0)
    :type n: int
    :returns: n+1 coefficients C(n, i)
    :rtype: numpy.ndarray, shape (n+1,)
    :raises InvalidArgument: si n n'est pas un entier >= 0
    """
    whole = isinstance(n, (int, np.integer)) and not isinstance(n, bool)
    if not whole and isinstance(n, (float, np.floating)):
        whole = float(n).is_integer()
    if not whole:
        raise InvalidArgument(
            u"L'index de ligne doit etre un entier, recu %r" % (n,))
    if n < 0:
        raise InvalidArgument(
            u"L'index de ligne doit etre >= 0, recu %r" % (n,))
    n = int(n)
    row = np.ones(n + 1)
    for i in range(1, n + 1):
        row[i] = row[i - 1] * (n - i + 1) / i
    return row


def bezier_sum(t, points):
    u"""Somme ponderee de Bernstein sur N points de controle.

    B(t) = sum_i C(N-1, i) * (1-t)^(N-1-i) * t^i * P[i]

    :param t: parametre scalaire
    :type t: float
    :param points: points de controle, shape (N, ...) avec N >= 1
    :type points: numpy.ndarray or list
    :returns: point sur la courbe (copie de P0 ou Pn aux bornes)
    :rtype: numpy.ndarray
    """
    pts = np.asarray(points, dtype=float)
    if pts.ndim == 0 or len(pts) == 0:
        raise InvalidArgument(u"Il faut au moins 1 point de controle")
    t = float(t)
    if t <= 0.0:
        return pts[0].copy()
    if t >= 1.0:
        return pts[-1].copy()
    n = len(pts) - 1
    i = np.arange(n + 1)
    weights = pascal_row(n) * (1.0 - t)**(n - i) * t**i
    return np.tensordot(weights, pts, axes=1)


# --------------------------------------------------------------------------
#  Cubique : forme monomiale
# --------------------------------------------------------------------------

def _monomial(c0, c1, c2, c3):
    u"""Coefficients (a, b, c, d) de la cubique en base monomiale."""
    a = -c0 + 3.0 * c1 - 3.0 * c2 + c3
    b = 3.0 * c0 - 6.0 * c1 + 3.0 * c2
    c = -3.0 * c0 + 3.0 * c1
    return a, b, c, c0


def evaluate_cubic(t, p0, p1, p2, p3):
    u"""Point de la cubique en t (schema de Horner).

    :param t: parametre dans [0, 1]
    :type t: float
    :param p0, p1, p2, p3: points de controle, array-like shape (2,)
    :returns: point sur la courbe
    :rtype: numpy.ndarray, shape (2,)
    """
    if t <= 0.0:
        return np.array(p0, dtype=float)
    if t >= 1.0:
        return np.array(p3, dtype=float)
    a, b, c, d = _monomial(*[np.asarray(p, dtype=float)
                             for p in (p0, p1, p2, p3)])
    return ((a * t + b) * t + c) * t + d


def evaluate_cubic_x(t, p0, p1, p2, p3):
    u"""Abscisse de la cubique en t, sans vecteur intermediaire.

    :rtype: float
    """
    if t <= 0.0:
        return float(p0[0])
    if t >= 1.0:
        return float(p3[0])
    a, b, c, d = _monomial(float(p0[0]), float(p1[0]),
                           float(p2[0]), float(p3[0]))
    return ((a * t + b) * t + c) * t + d


def evaluate_cubic_y(t, p0, p1, p2, p3):
    u"""Ordonnee de la cubique en t, sans vecteur intermediaire.

    :rtype: float
    """
    if t <= 0.0:
        return float(p0[1])
    if t >= 1.0:
        return float(p3[1])
    a, b, c, d = _monomial(float(p0[1]), float(p1[1]),
                           float(p2[1]), float(p3[1]))
    return ((a * t + b) * t + c) * t + d


def derivative_cubic_x(t, p0, p1, p2, p3):
    u"""Derivee dx/dt de la cubique en t.

    x'(t) = (3a*t + 2b)*t + c, sans traitement particulier aux bornes.

    :rtype: float
    """
    a, b, c, _d = _monomial(float(p0[0]), float(p1[0]),
                            float(p2[0]), float(p3[0]))
    return (3.0 * a * t + 2.0 * b) * t + c
