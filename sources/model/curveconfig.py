#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Parametres de l'editeur de courbes.

Fichiers .cfg au format CLE=valeur, une par ligne. Les lignes commencant
par # sont ignorees, de meme que la fin d'une ligne apres ' #'.
Les types sont inferes automatiquement (bool, int, float, str).

Usage::

    params = editor_params({'ZOOM_FACTOR': 1.25})
    params['MAX_ITERATIONS']     # 20 (defaults_editor.cfg)

@author: Nervures
@date: 2026-10
"""

import os
import logging

logger = logging.getLogger(__name__)

# Parametres numeriques qui doivent etre strictement positifs
_POSITIVE_KEYS = ('MAX_ITERATIONS', 'TOLERANCE', 'SAMPLE_STEP',
                  'ZOOM_FACTOR', 'PICK_RADIUS', 'VIEW_WIDTH', 'VIEW_HEIGHT')


def _parse_value(value_str):
    u"""Infere le type d'une valeur depuis sa representation texte.

    :param value_str: valeur brute lue depuis le fichier
    :type value_str: str
    :returns: valeur typee (bool, int, float ou str)
    """
    s = value_str.strip()
    if s.lower() in ('true', 'yes', 'on'):
        return True
    if s.lower() in ('false', 'no', 'off'):
        return False
    for cast in (int, float):
        try:
            return cast(s)
        except ValueError:
            pass
    return s


def load_config(filepath):
    u"""Charge un fichier de configuration cle=valeur.

    Les lignes sans '=' sont ignorees avec un avertissement.

    :param filepath: chemin du fichier .cfg
    :type filepath: str
    :returns: dictionnaire des parametres
    :rtype: dict
    :raises IOError: si le fichier n'existe pas
    """
    if not os.path.isfile(filepath):
        raise IOError(u"Fichier de configuration introuvable : %s" % filepath)
    params = {}
    with open(filepath, 'r') as f:
        for lineno, line in enumerate(f, 1):
            line = line.split(' #', 1)[0].strip()
            if not line or line.startswith('#'):
                continue
            if '=' not in line:
                logger.warning(u"%s:%d : ligne ignoree '%s'",
                               filepath, lineno, line)
                continue
            key, value = line.split('=', 1)
            params[key.strip().upper()] = _parse_value(value)
    return params


def load_defaults(name='editor'):
    u"""Charge le fichier defaults_<name>.cfg du package.

    :param name: nom du jeu de parametres
    :type name: str
    :rtype: dict
    """
    cfg_dir = os.path.dirname(os.path.abspath(__file__))
    return load_config(os.path.join(cfg_dir, 'defaults_%s.cfg' % name))


def merge_params(defaults, user_params):
    u"""Fusionne les parametres utilisateur avec les defauts.

    Les cles utilisateur sont mises en majuscules et surchargent les defauts.

    :param defaults: parametres par defaut
    :type defaults: dict
    :param user_params: parametres utilisateur (peuvent etre None)
    :type user_params: dict or None
    :rtype: dict
    """
    merged = dict(defaults)
    if user_params:
        for key, value in user_params.items():
            merged[key.upper()] = value
    return merged


def editor_params(user_params=None):
    u"""Parametres de l'editeur : defauts + surcharges, valides.

    :param user_params: surcharges utilisateur
    :type user_params: dict or None
    :returns: parametres fusionnes
    :rtype: dict
    :raises ValueError: si un parametre numerique n'est pas > 0
    """
    params = merge_params(load_defaults('editor'), user_params)
    for key in _POSITIVE_KEYS:
        value = params.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)) \
                or not value > 0:
            raise ValueError(
                u"Parametre %s invalide : %r (nombre > 0 attendu)"
                % (key, value))
    return params
