#!/usr/bin/python
#-*-coding: utf-8 -*-

u"""
Package beziertools : courbes de Bezier par morceaux y = f(x).

Points de controle a poignees, evaluation de Bernstein, localisation
inverse (bissection + Newton), transformation de vue et session d'edition.

Usage::

    from beziertools import BezierCurve

    c = BezierCurve()
    index, p = c.add_point([0.5, 0.2])
    c.value_at(0.25)

@author: Nervures
@date: 2026-10
"""

from .exceptions import InvalidArgument, InvalidState
from .bernstein import (pascal_row, bezier_sum, evaluate_cubic,
                        evaluate_cubic_x, evaluate_cubic_y,
                        derivative_cubic_x)
from .locator import find_t_for_x
from .bezier import Bezier
from .point import (ControlPoint, default_point_factory,
                    symmetric_point_factory)
from .curve import BezierCurve
from .transformer import Transformer
from .session import EditSession
from .curveconfig import load_config, load_defaults, merge_params, editor_params
