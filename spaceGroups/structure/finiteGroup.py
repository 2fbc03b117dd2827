""" Module defining a generic finite group generated by closure """

from spaceGroups.structure.core import MAX_GROUP_ORDER, GroupTooLargeError
from spaceGroups.util.tracing import debug, event

from abc import ABC, abstractmethod
import numpy as np
import threading

class GroupElement(ABC):
    """
    Base class for elements usable with FiniteGroup.

    Deriving classes define the group operation as the @ operator, which
    must be associative, and identity(), returning the neutral element of
    the same kind of group. Elements are used as dictionary keys, so they
    should be immutable, and equality (with a matching hash) must coincide
    with equality of the group elements they represent.
    """

    @abstractmethod
    def identity(self):
        """ The neutral element of the group this element belongs to. """
        pass

    @abstractmethod
    def __matmul__(self, other):
        pass

    @abstractmethod
    def __eq__(self, other):
        pass

    @abstractmethod
    def __hash__(self):
        pass

class _OperationCache(object):
    """ Multiplication and inverse tables, by element index. """

    def __init__(self, group):
        _fn_ = "finiteGroup._OperationCache"
        elements = group.elements
        index = group._index
        n = len(elements)
        debug(_fn_,"building {0}x{0} multiplication table",n)
        table = np.zeros((n,n), dtype=np.int64)
        inverse = np.zeros(n, dtype=np.int64)
        for i in range(n):
            for j in range(n):
                k = index[elements[i] @ elements[j]]
                table[i,j] = k
                if k == 0:
                    inverse[i] = j
        table.flags.writeable = False
        inverse.flags.writeable = False
        self.table = table
        self.inverse = inverse

class _ConjugacyCache(object):
    """ Conjugacy class label of each index, and the index list of each class. """

    def __init__(self, group):
        _fn_ = "finiteGroup._ConjugacyCache"
        table = group.multiplicationTable
        inverse = group.inverseTable
        n = len(inverse)
        labels = np.full(n, -1, dtype=np.int64)
        nclass = 0
        for i in range(n):
            if labels[i] >= 0:
                continue
            # i starts a new class; label everything conjugate to it
            labels[i] = nclass
            for j in range(n):
                k = table[inverse[j], table[i,j]]
                labels[k] = nclass
            nclass += 1
        classes = [[] for c in range(nclass)]
        for i in range(n):
            classes[labels[i]].append(i)
        labels.flags.writeable = False
        debug(_fn_,"found {} conjugacy classes with sizes {}",nclass,[len(c) for c in classes])
        self.labels = labels
        self.classes = classes

class FiniteGroup(object):
    """
    A finite group generated by closing a set of generators.

    The elements are found when the group is constructed, and are fixed
    from then on. Each element is assigned an index; the identity always
    has index 0, the other indices are arbitrary but stable for the life
    of the object. Tables derived from the elements (multiplication,
    inverses, conjugacy classes) are built on first request and cached.
    Cache construction is guarded by a lock, so the tables may be
    requested from several threads.

    Generators must produce a finite closure under @. With a closure cap
    (maxOrder) an infinite closure raises GroupTooLargeError; without one
    it does not terminate.
    """

    def __init__(self, generators=(), identity=None, maxOrder=MAX_GROUP_ORDER):
        """
        Initialize a new FiniteGroup instance.

        Parameters
        ----------
        generators : iterable of GroupElement
            The generating set. May be empty if identity is given, in
            which case the trivial group is built.
        identity : GroupElement (optional)
            The neutral element. If omitted, taken from the first generator.
        maxOrder : int or None (optional)
            The maximum number of elements the closure may reach.
            Defaults to core.MAX_GROUP_ORDER. None removes the cap.

        Raises
        ------
        ValueError :
            If no identity is given and there are no generators, or if
            maxOrder is not positive.
        GroupTooLargeError :
            If the closure exceeds maxOrder.
        """
        self._generators = tuple(generators)
        if identity is None:
            if len(self._generators) == 0:
                raise(ValueError("An identity element is required to build a group without generators."))
            identity = self._generators[0].identity()
        if maxOrder is not None:
            maxOrder = int(maxOrder)
            if maxOrder <= 0:
                raise(ValueError("maxOrder must be a positive integer. Gave {}.".format(maxOrder)))
        self._maxOrder = maxOrder
        members = self._generate(identity)
        # By convention, the neutral element has index 0
        self._elements = (identity,) + tuple(g for g in members if not g == identity)
        self._index = { g : i for (i, g) in enumerate(self._elements) }
        self._operation_cache = None
        self._conjugacy_cache = None
        self._lock = threading.RLock()

    def _generate(self, identity):
        """ Close the generators under the group operation, breadth first. """
        _fn_ = "FiniteGroup._generate"
        found = { identity : None }
        frontier = [identity]
        while True:
            newElements = {}
            for x in self._generators:
                for y in frontier:
                    z = x @ y
                    if z not in found and z not in newElements:
                        newElements[z] = None
            if len(newElements) == 0:
                break
            found.update(newElements)
            frontier = list(newElements)
            debug(_fn_,"closure grew by {} to {} elements",len(newElements),len(found))
            if self._maxOrder is not None and len(found) > self._maxOrder:
                msg = "Group closure exceeded maximum order {} after reaching {} elements."
                msg = msg.format(self._maxOrder, len(found))
                raise(GroupTooLargeError(self._maxOrder, type(self).__name__, msg))
        event(_fn_,"closed group of order {} from {} generators",len(found),len(self._generators))
        return found

    def _rebuild(self, generators):
        """ A new group of the same kind as self from the given generators. """
        return FiniteGroup(generators, self.identity, self._maxOrder)

    ## Accessors

    @property
    def order(self):
        """ The number of elements in the group. """
        return len(self._elements)

    @property
    def identity(self):
        return self._elements[0]

    @property
    def generators(self):
        return list(self._generators)

    @property
    def elements(self):
        """ The group elements, in index order. """
        return self._elements

    @property
    def maxOrder(self):
        return self._maxOrder

    def element(self, index):
        """ The element with the given index. """
        return self._elements[index]

    def index(self, element):
        """ The index of element in the group. """
        try:
            return self._index[element]
        except KeyError:
            raise(ValueError("{} is not a member of the group.".format(element))) from None

    def __getitem__(self, key):
        return self._elements[key]

    def __contains__(self, element):
        return element in self._index

    def __iter__(self):
        return iter(self._elements)

    def __len__(self):
        return len(self._elements)

    def __str__(self):
        return "< {} of order {} >".format(type(self).__name__, self.order)

    ## Cached tables

    def _ensureCache(self, name, builder):
        cache = getattr(self, name)
        if cache is None:
            with self._lock:
                cache = getattr(self, name)
                if cache is None:
                    cache = builder(self)
                    setattr(self, name, cache)
        return cache

    @property
    def multiplicationTable(self):
        """
        Read-only array; entry [i,j] is the index of element(i) @ element(j).
        """
        return self._ensureCache("_operation_cache", _OperationCache).table

    @property
    def inverseTable(self):
        """ Read-only array; entry [i] is the index of the inverse of element(i). """
        return self._ensureCache("_operation_cache", _OperationCache).inverse

    @property
    def conjugacyLabels(self):
        """ Read-only array; entry [i] is the conjugacy class id of element(i). """
        return self._ensureCache("_conjugacy_cache", _ConjugacyCache).labels

    @property
    def conjugacyClasses(self):
        """ List of conjugacy classes, each as a sorted list of element indices. """
        classes = self._ensureCache("_conjugacy_cache", _ConjugacyCache).classes
        return [list(c) for c in classes]

    ## Operations

    def inverse(self, element):
        """ The inverse of element within the group. """
        return self._elements[self.inverseTable[self.index(element)]]

    def conjugacyClass(self, element):
        """ List of all elements conjugate to element, in index order. """
        label = self.conjugacyLabels[self.index(element)]
        classes = self._ensureCache("_conjugacy_cache", _ConjugacyCache).classes
        return [self._elements[i] for i in classes[label]]

    def subgroup(self, elements):
        """
        Return the subgroup generated by a set of member elements.

        Parameters
        ----------
        elements : iterable of GroupElement
            Members of this group. A set already closed under the group
            operation (e.g. a stabilizer) is returned as a group directly.

        Raises
        ------
        ValueError :
            If any element is not a member of this group.
        """
        elements = list(elements)
        for g in elements:
            if g not in self:
                raise(ValueError("{} is not a member of the group.".format(g)))
        return self._rebuild(elements)

    def expanded(self, element):
        """ The group generated by all elements of self together with element. """
        if not isinstance(element, GroupElement):
            raise(TypeError("Cannot expand a group with {}.".format(type(element).__name__)))
        return self._rebuild(list(self._elements) + [element])

def greedyGenerators(elements, identity=None, maxOrder=MAX_GROUP_ORDER):
    """
    Choose a small generating set for a complete list of group elements.

    At each step the candidate which enlarges the generated group the
    most is added to the generators, and everything the generators
    already produce is removed from the candidates.

    Parameters
    ----------
    elements : iterable of GroupElement
        Every element of the group (closed under the group operation).
    identity : GroupElement (optional)
        The neutral element; taken from the first element if omitted.

    Returns
    -------
    generators : list of GroupElement

    Raises
    ------
    ValueError :
        If the elements are empty with no identity, or the chosen
        generators produce more elements than were given (the input is
        not closed).
    """
    _fn_ = "finiteGroup.greedyGenerators"
    elements = list(dict.fromkeys(elements))
    if identity is None:
        if len(elements) == 0:
            raise(ValueError("An identity element is required when no elements are given."))
        identity = elements[0].identity()
    group = FiniteGroup((), identity, maxOrder)
    generators = []
    candidates = [g for g in elements if g not in group]
    while len(candidates) > 0:
        best = None
        bestGroup = None
        for candidate in candidates:
            trial = group.expanded(candidate)
            if bestGroup is None or len(trial) > len(bestGroup):
                best = candidate
                bestGroup = trial
        generators.append(best)
        group = bestGroup
        debug(_fn_,"added generator {}; group order now {}",best,len(group))
        candidates = [g for g in candidates if g not in group]
    if len(group) > len(set(elements) | {identity}):
        raise(ValueError("Generated group is larger than the given element set."))
    return generators
