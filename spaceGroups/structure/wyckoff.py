""" Wyckoff positions and their stabilizers """

from spaceGroups.structure.core import (
    DimensionMismatchError,
    InvalidGeometryError,
    exactRank,
    identityMatrix,
    integerMatrix,
    rationalVector,
    toInteger )
from spaceGroups.structure.symmetry import SpaceGroupElement, SpaceGroupQuotient
from spaceGroups.util.tracing import debug

import numpy as np
import sympy as sym

class WyckoffPosition(object):
    """
    An affine family of sites, anchor + directions * t.

    The anchor is a point of N exact rationals. The directions form an
    N-by-M integer matrix whose M columns are linearly independent; M is
    the number of free parameters of the position. M = 0 describes a
    fixed site, M = N the general position.
    """

    def __init__(self, anchor, directions=None):
        """
        Parameters
        ----------
        anchor : 1D array-like of exact rationals
            The anchor point, in fractional coordinates.
        directions : 2D array-like of int (optional)
            N rows by M columns; column j is the j-th free direction.
            If omitted, the position has no free parameters.

        Raises
        ------
        DimensionMismatchError :
            If directions does not have one row per anchor component.
        InvalidGeometryError :
            If the columns of directions are linearly dependent.
        """
        self._anchor = rationalVector(anchor, label="anchor")
        dim = len(self._anchor)
        if directions is None:
            self._directions = tuple( () for i in range(dim) )
            self._nfree = 0
        else:
            self._directions = integerMatrix(directions, rows=dim, label="directions")
            self._nfree = len(self._directions[0]) if dim > 0 else 0
        if not exactRank(self._directions, self._nfree) == self._nfree:
            raise(InvalidGeometryError("The directions must be linearly independent."))

    @classmethod
    def generalPosition(cls, dim):
        """ The position with dim free parameters, anchored at the origin. """
        return cls([0] * dim, identityMatrix(dim))

    @property
    def dim(self):
        return len(self._anchor)

    @property
    def freeParameters(self):
        """ The number of free parameters (direction columns). """
        return self._nfree

    @property
    def anchor(self):
        """ The anchor point as a tuple of sympy.Rational. """
        return self._anchor

    @property
    def directions(self):
        """ The direction matrix as a tuple of row tuples. """
        return self._directions

    def __eq__(self, other):
        if isinstance(other, WyckoffPosition):
            return ( self._anchor == other._anchor
                    and self._nfree == other._nfree
                    and self._directions == other._directions )
        return NotImplemented

    def __hash__(self):
        return hash((self._anchor, self._directions, self._nfree))

    def __repr__(self):
        anchor = "[" + ", ".join(str(x) for x in self._anchor) + "]"
        dirs = "[" + ", ".join( "[" + ", ".join(str(x) for x in row) + "]" for row in self._directions ) + "]"
        return "WyckoffPosition({}, {})".format(anchor, dirs)

def act_on_position(element, position):
    """
    Apply a space group element to a Wyckoff position.

    Returns WyckoffPosition(a*anchor + b, a*directions). Since a is
    invertible the directions stay independent.
    """
    if not isinstance(element, SpaceGroupElement):
        raise(TypeError("Cannot act on a Wyckoff position with {}.".format(type(element).__name__)))
    if not element.dim == position.dim:
        msg = "Cannot apply a {}D element to a {}D Wyckoff position."
        raise(DimensionMismatchError(msg.format(element.dim, position.dim)))
    a = element.pointOperator
    anchor = (a @ np.array(position.anchor, dtype=object)) + element.translationVector
    if position.freeParameters == 0:
        return WyckoffPosition(anchor)
    dirs = a @ np.array(position.directions, dtype=object)
    return WyckoffPosition(anchor, dirs)

def normalize(position):
    """
    Separate a Wyckoff position into a unit cell representative and a lattice translation.

    Returns
    -------
    position : WyckoffPosition
        Same directions, anchor replaced by its fractional part.
    shift : tuple of int
        The integer part (floor) of the anchor.
    """
    shift = tuple( toInteger(sym.floor(x)) for x in position.anchor )
    anchor = [ x - t for (x, t) in zip(position.anchor, shift) ]
    if position.freeParameters == 0:
        return WyckoffPosition(anchor), shift
    return WyckoffPosition(anchor, position.directions), shift

def stabilizer_quotient(position, group):
    """
    Quotient of the stabilizer of a Wyckoff position by lattice translations.

    An element g of group is kept when g maps the unit cell representative
    of the position onto itself, up to a lattice translation.

    Parameters
    ----------
    position : WyckoffPosition
    group : SpaceGroupQuotient

    Returns
    -------
    stabilizer : SpaceGroupQuotient
        Subgroup of group.
    """
    _fn_ = "wyckoff.stabilizer_quotient"
    if not isinstance(group, SpaceGroupQuotient):
        raise(TypeError("Expected a SpaceGroupQuotient, not {}.".format(type(group).__name__)))
    w0, _ = normalize(position)
    members = []
    for g in group:
        u, _ = normalize(act_on_position(g, w0))
        if u == w0:
            members.append(g)
    debug(_fn_,"{} elements of {} stabilize {}",len(members),len(group),position)
    return group.subgroup(members)

def is_valid_wyckoff(position, group):
    """
    Check that a Wyckoff position matches its own site symmetry.

    The common kernel of (a - I) over the stabilizer is the subspace along
    which the site can move while keeping its symmetry. The position is
    valid when its number of free parameters equals the dimension of that
    kernel.

    Parameters
    ----------
    position : WyckoffPosition
    group : SpaceGroupQuotient

    Returns
    -------
    valid : bool
    """
    dim = position.dim
    rows = []
    for g in stabilizer_quotient(position, group):
        a = g.a
        for i in range(dim):
            rows.append([ a[i][j] - int(i == j) for j in range(dim) ])
    kernel_dim = dim - exactRank(rows, dim)
    return kernel_dim == position.freeParameters
