"""
structure Subpackage

Exact symmetry structures: finite groups, space group elements,
Wyckoff positions and plane wave orbits.
"""

# Collect submodules into unified module namespace.

from .core import (
    MAX_GROUP_ORDER,
    RATIONALIZE_TOLERANCE,
    DimensionMismatchError,
    GroupTooLargeError,
    InvalidGeometryError,
    TypeConstraintError )
from .finiteGroup import FiniteGroup, GroupElement, greedyGenerators
from .symmetry import SpaceGroupElement, SpaceGroupQuotient
from .wyckoff import (
    WyckoffPosition,
    act_on_position,
    is_valid_wyckoff,
    normalize,
    stabilizer_quotient )
from .orbit import (
    AffinePhase,
    ComplexOrbit,
    ExtinctOrbit,
    FormalOrbit,
    PhysicalOrbit,
    RealOrbit,
    act_on_phase,
    make_orbit )
