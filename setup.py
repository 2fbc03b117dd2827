#!/usr/bin/env python

from setuptools import setup

setup(  name = "SpaceGroups",
        version = '0.1',
        description = 'Exact space group quotients, Wyckoff positions and Bragg peak orbits.',
        packages = ['spaceGroups',
                    'spaceGroups.structure',
                    'spaceGroups.util',
                   ],
        python_requires = '>=3.8',
        install_requires = ['numpy', 'sympy'],
        extras_require = { 'test' : ['pytest'] },
     )
