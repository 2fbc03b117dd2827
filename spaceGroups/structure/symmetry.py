""" Module defining space group elements and space group quotients """

from spaceGroups.structure.core import (
    MAX_GROUP_ORDER,
    RATIONALIZE_TOLERANCE,
    DimensionMismatchError,
    TypeConstraintError,
    fractionalPart,
    identityMatrix,
    rationalVector,
    squareIntegerMatrix,
    toRational )
from spaceGroups.structure.finiteGroup import FiniteGroup, GroupElement
from spaceGroups.util.stringTools import str_to_num, wordsGenerator
from spaceGroups.util.tracing import debug

import numpy as np
import pathlib
import sympy as sym

class SpaceGroupElement(GroupElement):
    """
    An element x -> a*x + b of a space group in N dimensions.

    The linear part a is an N-by-N integer matrix, the translation b a
    vector of N exact rationals. Instances are immutable.

    Two compositions are defined:
        e1 * e2, e1.compose(e2) : the affine composition (a1*a2, a1*b2 + b1).
        e1 @ e2                 : the reduced composition, whose translation
                                  is brought inside the unit cell [0,1).
    The reduced composition is the group operation of SpaceGroupQuotient.
    """

    def __init__(self, pointOperation=None, translation=None, dim=None):
        """
        Parameters
        ----------
        pointOperation : 2D array-like of int (optional)
            The linear part, indexed [row][column]. Defaults to the
            identity matrix.
        translation : 1D array-like of exact rationals (optional)
            The translation part. Defaults to the zero vector.
            Entries may be int, fractions.Fraction, sympy.Rational or
            strings such as "1/2".
        dim : int (optional)
            Required only if neither pointOperation nor translation
            is given.

        Raises
        ------
        DimensionMismatchError :
            If the matrix is not square, its size differs from the length
            of translation, or either differs from dim.
        TypeConstraintError :
            If a matrix entry is not an integer or a translation entry is
            not an exact rational.
        """
        if pointOperation is not None:
            point = squareIntegerMatrix(pointOperation, label="pointOperation")
            if dim is None:
                dim = len(point)
        if translation is not None:
            trans = rationalVector(translation, label="translation")
            if dim is None:
                dim = len(trans)
        if dim is None:
            raise(DimensionMismatchError("Unable to infer dimension of SpaceGroupElement."))
        dim = int(dim)
        if pointOperation is None:
            point = identityMatrix(dim)
        if translation is None:
            trans = (sym.Integer(0),) * dim
        if not len(point) == dim:
            msg = "pointOperation of size {} does not match dimension {}."
            raise(DimensionMismatchError(msg.format(len(point), dim)))
        if not len(trans) == dim:
            msg = "Translation of length {} does not match dimension {}."
            raise(DimensionMismatchError(msg.format(len(trans), dim)))
        self._dim = dim
        self._point = point
        self._trans = trans

    @classmethod
    def _exact(cls, point, trans):
        """ Construct from already validated tuples, skipping checks. """
        out = cls.__new__(cls)
        out._dim = len(trans)
        out._point = point
        out._trans = trans
        return out

    @classmethod
    def fromFloats(cls, pointOperation, translation, tolerance=RATIONALIZE_TOLERANCE):
        """
        Construct an element from floating point data.

        Each translation component is replaced by the simplest rational
        within tolerance of it; the point operation entries are rounded
        to the nearest integer, and must lie within tolerance of it.

        Parameters
        ----------
        pointOperation : 2D array-like
        translation : 1D array-like of float
        tolerance : float (optional)
            Defaults to core.RATIONALIZE_TOLERANCE.
        """
        pt = np.array(pointOperation, dtype=float)
        rounded = np.rint(pt)
        if not np.all(np.absolute(pt - rounded) <= tolerance):
            raise(TypeConstraintError("pointOperation {} is not an integer matrix.".format(pointOperation)))
        tr = [ sym.nsimplify(float(x), tolerance=tolerance, rational=True)
                for x in np.array(translation, dtype=float).ravel() ]
        return cls(rounded.astype(np.int64), tr)

    @classmethod
    def getUnitTranslations(cls, dim):
        """ The dim pure translations by one lattice vector. """
        oplist = []
        for i in range(dim):
            tr = [0] * dim
            tr[i] = 1
            oplist.append(cls(translation=tr))
        return oplist

    ## Accessors

    @property
    def dim(self):
        return self._dim

    @property
    def pointOperator(self):
        """ The {dim}x{dim} linear part, as an integer object array. """
        return np.array(self._point, dtype=object).reshape(self._dim, self._dim)

    @property
    def translationVector(self):
        """ The {dim} translation vector, as an object array of sympy.Rational. """
        return np.array(self._trans, dtype=object)

    @property
    def a(self):
        """ The linear part as a tuple of row tuples. """
        return self._point

    @property
    def b(self):
        """ The translation part as a tuple of sympy.Rational. """
        return self._trans

    def asMatrix(self):
        """ The full ({dim}+1)x({dim}+1) augmented matrix of the operation. """
        dim = self._dim
        out = np.zeros((dim+1, dim+1), dtype=object)
        out[0:dim,0:dim] = self.pointOperator
        out[0:dim,dim] = self.translationVector
        out[dim,dim] = 1
        return out

    @property
    def isReduced(self):
        """ True if every translation component lies in [0,1). """
        return all( 0 <= x < 1 for x in self._trans )

    ## Group operations

    def identity(self):
        return SpaceGroupElement(dim=self._dim)

    def compose(self, other):
        """ Affine composition: (a1*a2, a1*b2 + b1), translation not reduced. """
        if not isinstance(other, SpaceGroupElement):
            msg = "Cannot compose SpaceGroupElement with {}."
            raise(TypeError(msg.format(type(other).__name__)))
        if not other._dim == self._dim:
            raise(DimensionMismatchError("Cannot compose SpaceGroupElements of differing dimensionality"))
        a1 = self.pointOperator
        pt = a1 @ other.pointOperator
        tr = (a1 @ other.translationVector) + self.translationVector
        point = tuple( tuple(int(x) for x in row) for row in pt )
        trans = tuple( toRational(x) for x in tr )
        return SpaceGroupElement._exact(point, trans)

    def reduce(self):
        """ A copy with each translation component replaced by its fractional part. """
        trans = tuple( fractionalPart(x) for x in self._trans )
        return SpaceGroupElement._exact(self._point, trans)

    def __mul__(self, other):
        if isinstance(other, SpaceGroupElement):
            return self.compose(other)
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, SpaceGroupElement):
            return self.compose(other).reduce()
        return NotImplemented

    ## Comparison and output

    def __eq__(self, other):
        if isinstance(other, SpaceGroupElement):
            return self._point == other._point and self._trans == other._trans
        return NotImplemented

    def __hash__(self):
        return hash((self._point, self._trans))

    def __str__(self):
        pt = "[" + ", ".join( "[" + ", ".join(str(x) for x in row) + "]" for row in self._point ) + "]"
        tr = "[" + ", ".join( str(x) for x in self._trans ) + "]"
        return "({}, {})".format(pt, tr)

    def __repr__(self):
        return "SpaceGroupElement{}".format(str(self))

    def write(self, outstream):
        """ Write the operation to a filestream.

        The operation first prints the point symmetry matrix
        (as a {dim}-by-{dim} matrix for {dim}=self.dim).
        In the line immediately following, the translation
        component is listed as a row vector of exact rationals.
        Thus, a 2D operation with augmented matrix

            -1    0    0
             0    1   1/2
             0    0    1

        will be printed as

            -1  0
             0  1
             0  1/2

        Parameters
        ----------
        outstream : File
            Writable open file object.
        """
        gap = "  "
        outstream.write("\n")
        for row in self._point:
            outstream.write("".join( "{}{}".format(gap,x) for x in row ) + "\n")
        outstream.write("".join( "{}{}".format(gap,x) for x in self._trans ) + "\n")
        return outstream

class SpaceGroupQuotient(FiniteGroup):
    """
    The factor group of a space group by its subgroup of pure translations.

    Elements are SpaceGroupElements with translations reduced into the
    unit cell, combined with the reduced composition. The group is
    isomorphic to the point group, but its elements keep the translation
    data needed to reconstruct the space group, so symmorphic and
    non-symmorphic groups with the same point group have different
    elements.
    """

    def __init__(self, generators=(), dim=None, maxOrder=MAX_GROUP_ORDER):
        """
        Initialize a new SpaceGroupQuotient instance.

        Parameters
        ----------
        generators : iterable of SpaceGroupElement
            Generators of the space group. Translations need not be
            reduced; they are brought inside the unit cell first.
        dim : int (optional)
            Dimension of the space. Required when generators is empty,
            in which case the trivial group is built.
        maxOrder : int or None (optional)
            Closure size cap passed to FiniteGroup.

        Raises
        ------
        TypeConstraintError :
            If a generator is not a SpaceGroupElement.
        DimensionMismatchError :
            If generators differ in dimension, or differ from dim, or
            no dimension can be determined.
        """
        gens = []
        for g in generators:
            if not isinstance(g, SpaceGroupElement):
                msg = "SpaceGroupQuotient generators must be SpaceGroupElements, not {}."
                raise(TypeConstraintError(msg.format(type(g).__name__)))
            if dim is None:
                dim = g.dim
            if not g.dim == dim:
                msg = "Generator of dimension {} in SpaceGroupQuotient of dimension {}."
                raise(DimensionMismatchError(msg.format(g.dim, dim)))
            gens.append(g.reduce())
        if dim is None:
            raise(DimensionMismatchError("Dimension is required to build a SpaceGroupQuotient without generators."))
        self._dim = int(dim)
        super().__init__(gens, SpaceGroupElement(dim=self._dim), maxOrder)

    def _rebuild(self, generators):
        return SpaceGroupQuotient(generators, self._dim, self.maxOrder)

    @classmethod
    def fromFile(cls, filename, *args, **kwargs):
        """ Instantiate the group from a file.

        The file starts with a header:

            dim     { dimension of the space }
            size    { number of operations listed }

        followed by the operations in the format written by
        SpaceGroupElement.write(). The listed operations are used as
        generators, so a partial list is completed by closure.

        Parameters
        ----------
        filename : str or pathlib.Path
            The name of the file to read from.
        args, kwargs :
            All other arguments to the class constructor.
        """
        _fn_ = "SpaceGroupQuotient.fromFile"
        filename = pathlib.Path(filename)
        filename = filename.resolve()

        def read_operation(stream, dim):
            pt = [ [ str_to_num(next(stream)) for j in range(dim) ] for i in range(dim) ]
            tr = [ str_to_num(next(stream)) for i in range(dim) ]
            return SpaceGroupElement(pt, tr)

        with open(filename) as f:
            words = wordsGenerator(f)
            try:
                key = next(words)
                if not key == "dim":
                    msg = "Expected key 'dim', got '{}' in symmetry group file {}."
                    raise(ValueError(msg.format(key,filename)))
                dim = int(next(words))
                key = next(words)
                if not key == "size":
                    msg = "Expected key 'size', got '{}' in symmetry group file {}."
                    raise(ValueError(msg.format(key,filename)))
                size = int(next(words))
                ops = [ read_operation(words, dim) for i in range(size) ]
            except StopIteration:
                raise(ValueError("Symmetry group file {} ended unexpectedly.".format(filename))) from None
        debug(_fn_,"read {} operations of dimension {} from {}",size,dim,filename)
        return cls(ops, dim, *args, **kwargs)

    @property
    def dim(self):
        return self._dim

    def write(self, outstream):
        """ Write every element of the group to a stream.

        File format matches that read in the fromFile() method.

        Parameters
        ----------
        outstream : stream
            The writable stream to which to save the group.
        """
        outstream.write("dim \t{}\n".format(self.dim))
        outstream.write("size\t{}\n".format(self.order))
        for op in self:
            op.write(outstream)
        return outstream

    def __str__(self):
        return "SpaceGroupQuotient (dimension {}, order {})".format(self.dim, self.order)
