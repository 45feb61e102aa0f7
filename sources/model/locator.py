#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Localisation inverse sur un segment cubique.

Pour une abscisse cible x, cherche le parametre t tel que x(t) = x.
Deux phases :

1. Bissection sur [0, 1] (10 iterations) : localisation grossiere.
2. Newton-Raphson depuis le resultat de la bissection : precision.

Precondition (non verifiee) : x(t) est monotone sur [0, 1], c'est-a-dire
que les poignees ne font pas revenir le segment en arriere sur l'axe x.
Sinon le t renvoye est deterministe mais pas forcement celui attendu.

@author: Nervures
@date: 2026-10
"""

import logging

from .bernstein import evaluate_cubic_x, derivative_cubic_x

logger = logging.getLogger(__name__)

BISECTION_STEPS = 10
FLAT_DERIVATIVE = 1e-15


def find_t_for_x(target_x, p0, p1, p2, p3, max_iterations=20,
                 tolerance=1e-10):
    u"""Parametre t du segment (p0, p1, p2, p3) dont l'abscisse vaut target_x.

    :param target_x: abscisse cible
    :type target_x: float
    :param p0, p1, p2, p3: points de controle du segment, shape (2,)
    :param max_iterations: iterations max de Newton (defaut 20)
    :type max_iterations: int
    :param tolerance: tolerance sur x et sur le pas de Newton (defaut 1e-10)
    :type tolerance: float
    :returns: parametre t dans [0, 1]
    :rtype: float
    """
    target_x = float(target_x)
    if float(p3[0]) == float(p0[0]):
        logger.debug(u"Segment de largeur nulle en x=%g : t=0", target_x)
        return 0.0

    # --- Bissection ---
    low = 0.0
    high = 1.0
    t = 0.5
    for _ in range(BISECTION_STEPS):
        t = (low + high) / 2.0
        x = evaluate_cubic_x(t, p0, p1, p2, p3)
        if abs(x - target_x) < tolerance:
            return t
        if x < target_x:
            low = t
        else:
            high = t

    # --- Raffinement Newton ---
    for _ in range(int(max_iterations)):
        x = evaluate_cubic_x(t, p0, p1, p2, p3)
        dx = derivative_cubic_x(t, p0, p1, p2, p3)
        if abs(dx) < FLAT_DERIVATIVE:
            logger.debug(u"Derivee plate en t=%g, resultat de la "
                         u"bissection conserve", t)
            break
        delta = (x - target_x) / dx
        t -= delta
        if t < 0.0:
            t = 0.0
        elif t > 1.0:
            t = 1.0
        if abs(delta) < tolerance:
            break
    return t
