#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Demonstration beziertools : edition d'une courbe et trace."""

import sys
import os
import logging

# Ajouter sources/ au path pour les imports model.*
_root = os.path.dirname(os.path.abspath(__file__))
_src = os.path.join(_root, 'sources')
if _src not in sys.path:
    sys.path.insert(0, _src)

from model.session import EditSession


def main():
    logging.basicConfig(
        level=logging.INFO,
        format='%(name)-20s %(levelname)-8s %(message)s'
    )
    session = EditSession()
    session.add_point([0.3, 0.8])
    session.add_point([0.7, 0.1])
    session.reset_view()
    for x, y in session.sample_table(0.1):
        print("x = %6.3f   y = %8.5f" % (x, y))
    session.curve.plot()


if __name__ == '__main__':
    main()
