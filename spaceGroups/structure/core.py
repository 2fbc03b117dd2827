""" Shared constants, exceptions and exact-value conversions """

import numbers
import numpy as np
import sympy as sym

## Configuration

# Largest closure FiniteGroup will build before giving up.
# None disables the check.
MAX_GROUP_ORDER = 100000

# Default tolerance when rationalizing floating point translations.
RATIONALIZE_TOLERANCE = 1E-2

## Exceptions

class DimensionMismatchError(ValueError):
    """ Raised when matrix, vector or group dimensions are inconsistent. """
    pass

class InvalidGeometryError(ValueError):
    """ Raised when Wyckoff directions are not linearly independent. """
    pass

class TypeConstraintError(TypeError):
    """ Raised when a value can not be represented exactly as required. """
    pass

class GroupTooLargeError(Exception):
    """ Exception raised when a group exceeds its allowed size.

    Attributes
    ----------
    maxsize : int
        The maximum number of members in the group.
    source :
        The object raising the exception.
    message : str
        Explanation of the error.
    """

    def __init__(self, maxsize, source, message=None):
        if message is None:
            message = "{} exceeded allowed size, {}".format(source, maxsize)
        self.maxsize = maxsize
        self.source = source
        self.message = message
        super().__init__(self.message)

## Exact conversions

def toInteger(value):
    """ Return value as a Python int, refusing anything non-integral. """
    if isinstance(value, (numbers.Integral, sym.Integer)):
        return int(value)
    msg = "Expected an integer value, got {} of type {}."
    raise(TypeConstraintError(msg.format(value, type(value).__name__)))

def toRational(value):
    """
    Return value as a sympy.Rational.

    Accepts integers, fractions.Fraction, sympy.Rational and numeric
    strings ("1/2", "0.25"). Floats are refused since they can not be
    converted without choosing a tolerance.
    """
    if isinstance(value, sym.Rational):
        return value
    if isinstance(value, numbers.Integral):
        return sym.Integer(int(value))
    if isinstance(value, numbers.Rational):
        return sym.Rational(int(value.numerator), int(value.denominator))
    if isinstance(value, str):
        try:
            out = sym.Rational(value)
        except (TypeError, ValueError) as err:
            msg = "Unable to read '{}' as a rational value."
            raise(TypeConstraintError(msg.format(value))) from err
        return out
    msg = "Expected an exact rational value, got {} of type {}."
    raise(TypeConstraintError(msg.format(value, type(value).__name__)))

def _asObjectArray(values, ndim, label):
    try:
        arr = np.array(values, dtype=object)
    except ValueError as err:
        raise(DimensionMismatchError("{} has an irregular shape.".format(label))) from err
    if not arr.ndim == ndim:
        msg = "{} must be {}-dimensional; got shape {}."
        raise(DimensionMismatchError(msg.format(label, ndim, arr.shape)))
    return arr

def integerMatrix(matrix, rows=None, label="Matrix"):
    """
    Convert a 2D array-like of integers to a tuple of row tuples.

    Parameters
    ----------
    matrix : 2D array-like
        The matrix entries, indexed [row][column].
    rows : int (optional)
        If given, the required number of rows.
    label : str (optional)
        Name used in error messages.

    Returns
    -------
    matrix : tuple of tuple of int

    Raises
    ------
    DimensionMismatchError :
        If the input is not two-dimensional, or has the wrong row count.
    TypeConstraintError :
        If any entry is not an integer.
    """
    arr = _asObjectArray(matrix, 2, label)
    if rows is not None and not arr.shape[0] == rows:
        msg = "{} must have {} rows; got {}."
        raise(DimensionMismatchError(msg.format(label, rows, arr.shape[0])))
    return tuple( tuple(toInteger(x) for x in row) for row in arr )

def squareIntegerMatrix(matrix, label="Matrix"):
    """ As integerMatrix, additionally requiring a square shape. """
    arr = _asObjectArray(matrix, 2, label)
    if not arr.shape[0] == arr.shape[1]:
        msg = "{} must be square; got shape {}."
        raise(DimensionMismatchError(msg.format(label, arr.shape)))
    return integerMatrix(arr, label=label)

def integerVector(vector, dim=None, label="Vector"):
    """ Convert a 1D array-like of integers to a tuple of int. """
    arr = _asObjectArray(vector, 1, label)
    if dim is not None and not len(arr) == dim:
        msg = "{} must have length {}; got {}."
        raise(DimensionMismatchError(msg.format(label, dim, len(arr))))
    return tuple(toInteger(x) for x in arr)

def rationalVector(vector, dim=None, label="Vector"):
    """ Convert a 1D array-like of exact values to a tuple of sympy.Rational. """
    arr = _asObjectArray(vector, 1, label)
    if dim is not None and not len(arr) == dim:
        msg = "{} must have length {}; got {}."
        raise(DimensionMismatchError(msg.format(label, dim, len(arr))))
    return tuple(toRational(x) for x in arr)

def identityMatrix(dim):
    """ The dim-by-dim identity as a tuple of row tuples. """
    return tuple( tuple(int(i == j) for j in range(dim)) for i in range(dim) )

def exactRank(rows, ncols):
    """
    Rank of a matrix, computed exactly.

    Parameters
    ----------
    rows : sequence of sequences
        Matrix entries (integers or rationals), one sequence per row.
    ncols : int
        The number of columns; needed when there are no rows or the
        rows are empty.
    """
    flat = [x for row in rows for x in row]
    if len(flat) == 0:
        return 0
    return sym.Matrix(len(rows), ncols, flat).rank()

def fractionalPart(value):
    """ value - floor(value), always in [0,1). """
    return value - sym.floor(value)
