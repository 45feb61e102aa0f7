#!/usr/bin/python
#-*-coding: utf-8 -*-

from setuptools import setup

setup(
    name='beziertools',
    version='0.1.0',
    description='Piecewise cubic Bezier curves y = f(x) - evaluation, inverse lookup, view transform',
    author='Nervures',
    author_email='be@nervures.com',
    license='LGPL-3.0',
    package_dir={
        'beziertools': 'sources/model',
    },
    packages=['beziertools'],
    package_data={
        'beziertools': ['*.cfg'],
    },
    install_requires=[
        'numpy>=1.20',
        'matplotlib>=3.5',
    ],
    python_requires='>=3.8',
)
