"""
Orbits of plane waves under a space group, and their classification
into complex, real and extinct (systematically absent) Bragg peaks.
"""

from spaceGroups.structure.core import (
    DimensionMismatchError,
    fractionalPart,
    integerVector,
    toRational )
from spaceGroups.structure.symmetry import SpaceGroupElement, SpaceGroupQuotient
from spaceGroups.util.tracing import debug

from abc import ABC, abstractmethod
import sympy as sym

class AffinePhase(object):
    """
    The phase of a plane wave x -> exp(2 pi i (k.x + phi)).

    The wave vector k is a vector of integers (reciprocal lattice
    coordinates); the phase phi is an exact rational, always reduced
    into [0,1) on construction.
    """

    def __init__(self, k, phi=0):
        self._k = integerVector(k, label="wave vector")
        self._phi = fractionalPart(toRational(phi))

    @property
    def k(self):
        """ The wave vector as a tuple of int. """
        return self._k

    @property
    def phi(self):
        """ The phase offset, a sympy.Rational in [0,1). """
        return self._phi

    @property
    def dim(self):
        return len(self._k)

    def __eq__(self, other):
        if isinstance(other, AffinePhase):
            return self._k == other._k and self._phi == other._phi
        return NotImplemented

    def __hash__(self):
        return hash((self._k, self._phi))

    def __str__(self):
        return "AP({}, {})".format(list(self._k), self._phi)

    def __repr__(self):
        return "AffinePhase(k = {}, phi = {})".format(list(self._k), self._phi)

def act_on_phase(element, phase):
    """
    Apply a symmetry operation (a, b) to an AffinePhase.

    The result has wave vector transpose(a)*k and phase phi + b.k,
    reduced modulo 1.
    """
    if not isinstance(element, SpaceGroupElement):
        raise(TypeError("Cannot act on an AffinePhase with {}.".format(type(element).__name__)))
    if not element.dim == phase.dim:
        msg = "Cannot apply a {}D element to a {}D AffinePhase."
        raise(DimensionMismatchError(msg.format(element.dim, phase.dim)))
    a = element.a
    k = phase.k
    dim = len(k)
    newk = [ sum(a[i][j] * k[i] for i in range(dim)) for j in range(dim) ]
    shift = sum( (b * kk for (b, kk) in zip(element.b, k)), sym.Integer(0) )
    return AffinePhase(newk, phase.phi + shift)

class FormalOrbit(ABC):
    """
    Base of the orbit types returned by make_orbit.

    Covers every outcome, including orbits that are physically
    unobservable because of extinction.
    """

    isPhysical = False

    @abstractmethod
    def __len__(self):
        pass

    def __str__(self):
        return "{} with {} elements".format(type(self).__name__, len(self))

    def __repr__(self):
        return str(self)

class PhysicalOrbit(FormalOrbit):
    """ An orbit corresponding to an observable Bragg peak. """

    isPhysical = True

    def __init__(self, phases):
        self._phases = tuple(phases)

    @property
    def phases(self):
        """ The AffinePhases of the orbit. """
        return list(self._phases)

    @property
    def waveVectors(self):
        return [ap.k for ap in self._phases]

    def __len__(self):
        return len(self._phases)

    def __iter__(self):
        return iter(self._phases)

    def __eq__(self, other):
        if type(other) is type(self):
            return self._phases == other._phases
        return NotImplemented

    def __hash__(self):
        return hash((type(self).__name__, self._phases))

class ComplexOrbit(PhysicalOrbit):
    """
    An orbit of plane waves whose phase is unconstrained.

    For no wave vector k in the orbit is the antipode -k present. The
    phases are defined up to one global phase.
    """
    pass

class RealOrbit(PhysicalOrbit):
    """
    An orbit of plane waves whose phase is fixed modulo a sign.

    For every wave vector k in the orbit the antipode -k is also present,
    and the phases are chosen so that the superposition of antipodal
    waves is a real function.
    """
    pass

class ExtinctOrbit(FormalOrbit):
    """
    An orbit of wave vectors subject to systematic extinction.

    Extinctions arise in non-symmorphic groups when an operation keeps
    a wave vector but shifts its phase, so the waves cancel.
    """

    def __init__(self, waveVectors):
        self._k = tuple( tuple(k) for k in waveVectors )

    @property
    def waveVectors(self):
        return list(self._k)

    def __len__(self):
        return len(self._k)

    def __iter__(self):
        return iter(self._k)

    def __eq__(self, other):
        if isinstance(other, ExtinctOrbit):
            return self._k == other._k
        return NotImplemented

    def __hash__(self):
        return hash(("ExtinctOrbit", self._k))

def make_orbit(k, group):
    """
    Generate and classify the orbit of a wave vector under a space group quotient.

    1. Extinction: if an operation maps k to itself with a nonzero phase
       shift, the orbit is an ExtinctOrbit. Antipodes are added when the
       orbit does not already contain them.
    2. Real: if the orbit contains -k, it is a RealOrbit; the phase of each
       wave k' is (phi(k') - phi(-k'))/2, making antipodal pairs sum to a
       real function.
    3. Otherwise the orbit is a ComplexOrbit with the phases as generated.

    When two operations send k to the same wave vector with different
    phases, the one met last in group order is kept. Since group is
    closed, two such operations differ by one that fixes k with a phase
    shift, so the orbit is then classified as extinct and the kept phase
    is never reported.

    Parameters
    ----------
    k : 1D array-like of int
        The starting wave vector.
    group : SpaceGroupQuotient

    Returns
    -------
    orbit : ComplexOrbit, RealOrbit or ExtinctOrbit

    Example
    -------
    >>> g = SpaceGroupElement([[-1, 0], [0, 1]], ["0", "1/2"])
    >>> G = SpaceGroupQuotient([g])
    >>> str(make_orbit([1, -1], G))
    'ComplexOrbit with 2 elements'
    >>> str(make_orbit([1, 0], G))
    'RealOrbit with 2 elements'
    >>> str(make_orbit([0, 1], G))
    'ExtinctOrbit with 2 elements'
    """
    _fn_ = "orbit.make_orbit"
    if not isinstance(group, SpaceGroupQuotient):
        raise(TypeError("Expected a SpaceGroupQuotient, not {}.".format(type(group).__name__)))
    k = integerVector(k, dim=group.dim, label="wave vector")
    antipode = tuple(-x for x in k)
    phases = {}
    isextinct = False
    isreal = False
    ap0 = AffinePhase(k, 0)
    for e in group:
        ap = act_on_phase(e, ap0)
        phases[ap.k] = ap.phi
        if ap.k == k and not ap.phi == 0:
            # same wave vector with a shifted phase: destructive interference
            isextinct = True
        if ap.k == antipode:
            isreal = True
    if isextinct:
        debug(_fn_,"wave vector {} is extinct",list(k))
        ks = list(phases)
        if isreal:
            return ExtinctOrbit(ks)
        return ExtinctOrbit(ks + [ tuple(-x for x in kk) for kk in ks ])
    if isreal:
        debug(_fn_,"wave vector {} has a real orbit of {} elements",list(k),len(phases))
        return RealOrbit([ AffinePhase(kk, (phases[kk] - phases[tuple(-x for x in kk)]) / 2)
                            for kk in phases ])
    debug(_fn_,"wave vector {} has a complex orbit of {} elements",list(k),len(phases))
    return ComplexOrbit([ AffinePhase(kk, phases[kk]) for kk in phases ])
