"""
spaceGroups

Exact computations with crystallographic space groups in any dimension:
finite space group quotients, Wyckoff positions and the classification
of Bragg peak orbits.
"""

from spaceGroups.structure import *
