#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Tests de la transformation monde <-> ecran.

Lance :
    python test_transformer.py

@author: Nervures
@date: 2026-10
"""

import os
import sys
import unittest

import numpy as np

_here = os.path.dirname(os.path.abspath(__file__))
_src = os.path.normpath(os.path.join(_here, '..', 'sources'))
if _src not in sys.path:
    sys.path.insert(0, _src)

from model.exceptions import InvalidArgument
from model.transformer import Transformer


class TestTransformerMatrix(unittest.TestCase):
    u"""Matrice, inverse et conversions."""

    def test_identity_by_default(self):
        tr = Transformer()
        np.testing.assert_array_equal(tr.current_matrix(), np.identity(3))
        np.testing.assert_array_equal(tr.to_display([3, 4]), [3, 4])

    def test_matrix_layout(self):
        u"""Echelle puis translation."""
        tr = Transformer(position=(50, 350), scale=(400, -300))
        np.testing.assert_array_equal(
            tr.current_matrix(),
            [[400, 0, 50], [0, -300, 350], [0, 0, 1]])
        np.testing.assert_allclose(
            tr.current_matrix().dot(tr.inverse_matrix()), np.identity(3),
            atol=1e-12)

    def test_docstring_example(self):
        tr = Transformer()
        tr.set_scale(400, -300)
        tr.set_position(50, 350)
        np.testing.assert_allclose(tr.to_display([1, 1]), [450, 50])
        np.testing.assert_allclose(tr.to_local([450, 50]), [1, 1])

    def test_round_trip(self):
        u"""to_local(to_display(p)) = p."""
        tr = Transformer(position=(-12.5, 300.25), scale=(3.7, -0.02))
        pts = np.array([[0, 0], [1.5, -2.25], [1e3, 7.0]])
        np.testing.assert_allclose(tr.to_local(tr.to_display(pts)), pts,
                                   rtol=1e-12, atol=1e-9)
        np.testing.assert_allclose(tr.to_display(tr.to_local(pts)), pts,
                                   rtol=1e-12, atol=1e-9)

    def test_array_shape(self):
        tr = Transformer(scale=(2, 2))
        out = tr.to_display([[0, 0], [1, 1], [2, 3]])
        self.assertEqual(out.shape, (3, 2))
        np.testing.assert_array_equal(out[2], [4, 6])
        with self.assertRaises(InvalidArgument):
            tr.to_display([1, 2, 3])

    def test_matrices_are_copies(self):
        tr = Transformer()
        m = tr.current_matrix()
        m[0, 0] = 99.0
        self.assertEqual(tr.current_matrix()[0, 0], 1.0)


class TestTransformerMutations(unittest.TestCase):

    def test_move(self):
        tr = Transformer(position=(10, 20))
        self.assertIs(tr.move(5, -5), tr)
        np.testing.assert_array_equal(tr.position, [15, 15])
        np.testing.assert_array_equal(tr.to_display([0, 0]), [15, 15])

    def test_properties(self):
        tr = Transformer()
        tr.scale = (2, -1)
        tr.position = (1, 1)
        np.testing.assert_array_equal(tr.scale, [2, -1])
        np.testing.assert_array_equal(tr.to_display([1, 1]), [3, 0])
        self.assertIn('scale=(2, -1)', repr(tr))

    def test_invalid_scale_raises(self):
        u"""Echelle nulle, NaN ou infinie : InvalidArgument, etat conserve."""
        tr = Transformer(scale=(2, 3))
        for bad in ((0, 1), (1, 0), (float('nan'), 1), (1, float('inf'))):
            with self.assertRaises(InvalidArgument):
                tr.set_scale(*bad)
        np.testing.assert_array_equal(tr.scale, [2, 3])
        with self.assertRaises(ValueError):
            Transformer(scale=(0, 0))

    def test_invalid_position_raises(self):
        tr = Transformer()
        with self.assertRaises(InvalidArgument):
            tr.set_position(float('nan'), 0)


class TestTransformerView(unittest.TestCase):
    u"""Zoom et cadrage."""

    def test_zoom_keeps_anchor(self):
        u"""Le point monde sous l'ancre ne bouge pas a l'ecran."""
        tr = Transformer(position=(10, 20), scale=(2, -3))
        anchor = np.array([100.0, 50.0])
        world = tr.to_local(anchor)
        tr.zoom(1.5, anchor=anchor)
        np.testing.assert_allclose(tr.scale, [3, -4.5])
        np.testing.assert_allclose(tr.to_display(world), anchor, atol=1e-9)

    def test_zoom_single_axis(self):
        tr = Transformer(scale=(2, 3))
        anchor = [40.0, 60.0]
        world = tr.to_local(anchor)
        tr.zoom(2.0, anchor=anchor, axis='x')
        np.testing.assert_allclose(tr.scale, [4, 3])
        np.testing.assert_allclose(tr.to_display(world), anchor, atol=1e-9)
        tr.zoom(0.5, axis='y')
        np.testing.assert_allclose(tr.scale, [4, 1.5])

    def test_zoom_invalid(self):
        tr = Transformer()
        with self.assertRaises(InvalidArgument):
            tr.zoom(0.0)
        with self.assertRaises(InvalidArgument):
            tr.zoom(-1.1)
        with self.assertRaises(InvalidArgument):
            tr.zoom(1.1, axis='z')

    def test_zoom_overflow_keeps_state(self):
        u"""Translation qui deborde : InvalidArgument, echelle conservee."""
        tr = Transformer(position=(-1e300, 0))
        matrix = tr.current_matrix()
        with self.assertRaises(InvalidArgument):
            tr.zoom(1e10, anchor=(1e300, 0))
        np.testing.assert_array_equal(tr.scale, [1, 1])
        np.testing.assert_array_equal(tr.position, [-1e300, 0])
        np.testing.assert_array_equal(tr.current_matrix(), matrix)

    def test_zoom_scale_underflow_keeps_state(self):
        tr = Transformer(scale=(1e-300, 1))
        with self.assertRaises(InvalidArgument):
            tr.zoom(1e-100, axis='x')
        np.testing.assert_array_equal(tr.scale, [1e-300, 1])

    def test_fit_stretch(self):
        u"""stretch : la boite remplit la fenetre, y retourne."""
        tr = Transformer().fit((0, 0, 1, 1), 800, 600)
        np.testing.assert_allclose(tr.to_display([0, 0]), [0, 600])
        np.testing.assert_allclose(tr.to_display([1, 1]), [800, 0])

    def test_fit_uniform_centered(self):
        tr = Transformer().fit((0, 0, 2, 1), 800, 600, stretch=False)
        sx, sy = tr.scale
        self.assertEqual(sx, -sy)
        np.testing.assert_allclose(tr.to_display([0, 0]), [0, 500])
        np.testing.assert_allclose(tr.to_display([2, 1]), [800, 100])
        np.testing.assert_allclose(tr.to_display([1, 0.5]), [400, 300])

    def test_fit_without_flip(self):
        tr = Transformer().fit((0, 0, 1, 1), 100, 100, flip_y=False)
        np.testing.assert_allclose(tr.scale, [100, 100])
        np.testing.assert_allclose(tr.to_display([1, 1]), [100, 100])

    def test_fit_degenerate_box(self):
        u"""Largeur nulle : longueur 1, avertissement, pas d'erreur."""
        tr = Transformer()
        with self.assertLogs('model.transformer', level='WARNING'):
            tr.fit((0.5, 0, 0.5, 1), 800, 600)
        np.testing.assert_allclose(tr.scale, [800, -600])
        np.testing.assert_allclose(tr.to_display([0.5, 0.5]), [400, 300])

    def test_fit_invalid_window(self):
        with self.assertRaises(InvalidArgument):
            Transformer().fit((0, 0, 1, 1), 0, 600)


if __name__ == '__main__':
    unittest.main()
