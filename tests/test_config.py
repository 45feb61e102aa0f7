#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Tests du chargement des parametres .cfg.

Lance :
    python test_config.py

@author: Nervures
@date: 2026-10
"""

import os
import sys
import shutil
import tempfile
import unittest

_here = os.path.dirname(os.path.abspath(__file__))
_src = os.path.normpath(os.path.join(_here, '..', 'sources'))
if _src not in sys.path:
    sys.path.insert(0, _src)

from model.curveconfig import (load_config, load_defaults, merge_params,
                               editor_params)


class TestLoadConfig(unittest.TestCase):
    u"""Lecture d'un fichier CLE=valeur."""

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def _write(self, text):
        path = os.path.join(self.tmpdir, 'essai.cfg')
        with open(path, 'w') as f:
            f.write(text)
        return path

    def test_type_inference(self):
        path = self._write(
            "# commentaire\n"
            "ENTIER=12\n"
            "REEL=1e-3\n"
            "OUI=true\n"
            "NON=Off\n"
            "TEXTE=bonjour\n"
            "\n")
        params = load_config(path)
        self.assertEqual(params['ENTIER'], 12)
        self.assertIsInstance(params['ENTIER'], int)
        self.assertEqual(params['REEL'], 1e-3)
        self.assertIs(params['OUI'], True)
        self.assertIs(params['NON'], False)
        self.assertEqual(params['TEXTE'], 'bonjour')

    def test_inline_comment_and_keys(self):
        u"""Fin de ligne apres ' #' ignoree, cles en majuscules."""
        path = self._write("pas = 0.25   # pas en x\nA=b=c\n")
        params = load_config(path)
        self.assertEqual(params['PAS'], 0.25)
        self.assertEqual(params['A'], 'b=c')

    def test_line_without_equal_warns(self):
        path = self._write("VALIDE=1\nligne invalide\n")
        with self.assertLogs('model.curveconfig', level='WARNING') as cm:
            params = load_config(path)
        self.assertEqual(params, {'VALIDE': 1})
        self.assertIn(':2', cm.output[0])

    def test_missing_file(self):
        with self.assertRaises(IOError):
            load_config(os.path.join(self.tmpdir, 'absent.cfg'))


class TestEditorParams(unittest.TestCase):
    u"""Parametres par defaut de l'editeur et surcharges."""

    def test_defaults_file(self):
        params = load_defaults()
        self.assertEqual(params['MAX_ITERATIONS'], 20)
        self.assertEqual(params['TOLERANCE'], 1e-10)
        self.assertEqual(params['SAMPLE_STEP'], 0.1)
        self.assertEqual(params['ZOOM_FACTOR'], 1.1)
        self.assertEqual(params['PICK_RADIUS'], 8)
        self.assertEqual((params['VIEW_WIDTH'], params['VIEW_HEIGHT']),
                         (800, 600))
        self.assertIs(params['SYMMETRIC_HANDLES'], True)

    def test_unknown_defaults_set(self):
        with self.assertRaises(IOError):
            load_defaults('inexistant')

    def test_merge_upper_cases(self):
        merged = merge_params({'A': 1, 'B': 2}, {'b': 3, 'c': 4})
        self.assertEqual(merged, {'A': 1, 'B': 3, 'C': 4})
        self.assertEqual(merge_params({'A': 1}, None), {'A': 1})

    def test_editor_params_override(self):
        params = editor_params({'zoom_factor': 1.5})
        self.assertEqual(params['ZOOM_FACTOR'], 1.5)
        self.assertEqual(params['MAX_ITERATIONS'], 20)

    def test_editor_params_invalid(self):
        u"""Parametre numerique <= 0, booleen ou texte : ValueError."""
        for bad in ({'TOLERANCE': 0}, {'SAMPLE_STEP': -0.1},
                    {'VIEW_WIDTH': True}, {'PICK_RADIUS': 'huit'},
                    {'ZOOM_FACTOR': None}):
            with self.assertRaises(ValueError):
                editor_params(bad)


if __name__ == '__main__':
    unittest.main()
