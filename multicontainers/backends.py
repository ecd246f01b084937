"""Backing stores for the multi-containers

Adapters that implement the capability interfaces on top of concrete
containers. HashMap and HashSet use the builtin dict and set, TreeMap
and TreeSet use SortedDict and SortedSet from sortedcontainers.
MappingAdapter and SetAdapter accept any mutable mapping or mutable
set, e.g. a pqdict.

Every adapter class can be called without arguments, so the class
itself serves as a factory for a builder.
"""

from collections.abc import MutableMapping, MutableSet

from sortedcontainers import SortedDict, SortedSet

from .interfaces import Map, SortedMap, Set


class MappingAdapter(Map):
    """Map on top of any collections.abc.MutableMapping"""
    def __init__(self, mapping=None):
        self._mapping = self.new_mapping() if mapping is None else mapping

    @staticmethod
    def new_mapping():
        """Create the wrapped mapping when none is given"""
        return dict()

    def insert(self, key, value):
        previous = self._mapping.get(key)
        self._mapping[key] = value
        return previous

    def remove(self, key):
        return self._mapping.pop(key, None)

    def lookup(self, key, default=None):
        return self._mapping.get(key, default)

    def contains(self, key):
        return key in self._mapping

    def __len__(self):
        return len(self._mapping)

    def items(self):
        return iter(self._mapping.items())

    def keys(self):
        return iter(self._mapping.keys())

    def values(self):
        return iter(self._mapping.values())

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self._mapping)


class HashMap(MappingAdapter):
    """Hash-based map backed by a dict"""


class TreeMap(MappingAdapter, SortedMap):
    """Ordered map backed by a sortedcontainers.SortedDict"""
    @staticmethod
    def new_mapping():
        return SortedDict()

    def range(self, minimum=None, maximum=None, inclusive=(True, True)):
        mapping = self._mapping
        return ((key, mapping[key])
                for key in mapping.irange(minimum, maximum, inclusive))


class SetAdapter(Set):
    """Set on top of any collections.abc.MutableSet"""
    def __init__(self, container=None):
        self._set = self.new_set() if container is None else container

    @staticmethod
    def new_set():
        """Create the wrapped set when none is given"""
        return set()

    def insert(self, value):
        if value in self._set:
            return False
        self._set.add(value)
        return True

    def remove(self, value):
        if value not in self._set:
            return False
        self._set.discard(value)
        return True

    def contains(self, value):
        return value in self._set

    def __len__(self):
        return len(self._set)

    def __iter__(self):
        return iter(self._set)

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self._set)


class HashSet(SetAdapter):
    """Hash-based set backed by a set"""


class TreeSet(SetAdapter):
    """Ordered set backed by a sortedcontainers.SortedSet"""
    @staticmethod
    def new_set():
        return SortedSet()


def as_map(obj):
    """Coerce factory output into a Map.

    Capability objects are returned as they are, mutable mappings get
    wrapped. Anything else raises TypeError.
    """
    if isinstance(obj, Map):
        return obj
    elif isinstance(obj, SortedDict):
        return TreeMap(obj)
    elif isinstance(obj, MutableMapping):
        return MappingAdapter(obj)
    raise TypeError("%s is neither a Map nor a mutable mapping"
                    % type(obj).__name__)


def as_set(obj):
    """Coerce factory output into a Set (c.f. as_map)"""
    if isinstance(obj, Set):
        return obj
    elif isinstance(obj, SortedSet):
        return TreeSet(obj)
    elif isinstance(obj, MutableSet):
        return SetAdapter(obj)
    raise TypeError("%s is neither a Set nor a mutable set"
                    % type(obj).__name__)
