#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Exceptions du package beziertools.

Les violations d'invariants structurels (coordonnees invalides, index de
ligne negatif...) sont rejetees a l'entree de l'appel qui mute.
Les cas numeriques degeneres (derivee plate, intervalle de largeur nulle)
ne levent rien : ils sont absorbes et traces par le logger.

@author: Nervures
@date: 2026-10
"""


class InvalidArgument(ValueError):
    u"""Argument refuse : NaN/Infinity, index negatif, echelle nulle..."""


class InvalidState(RuntimeError):
    u"""Requete incompatible avec l'etat courant (courbe vide, point absent)."""
