"""Builders for configured multi-containers

A builder captures the factories of the backing stores and produces
empty containers from them:

>>> builder = MultiMapBuilder().sorted_keys().hash_values()
>>> mmap = builder.build()
>>> mmap.insert('a', 1)
True

Builders are immutable. Every configuration method returns a new
builder and leaves the receiver untouched, so a partially configured
builder can be shared. Each call of build() returns a new, independent
container.
"""

import logging

from .backends import HashMap, HashSet, TreeMap, TreeSet
from .structures import HashMultiSet, MultiMap, MultiSet, TreeMultiSet


def _check_factory(factory):
    if not callable(factory):
        raise TypeError("factory must be callable, got %r." % (factory,))
    return factory


def _name(factory):
    return getattr(factory, '__name__', repr(factory))


class MultiMapBuilder(object):
    """Configure and build MultiMap instances

    The map factory creates the outer map from keys to value sets,
    the value set factory creates a new set for every key. Both are
    called without arguments.
    """
    def __init__(self, map_factory=None, set_factory=None):
        self._map_factory = map_factory
        self._set_factory = set_factory

    @property
    def map_factory(self):
        return self._map_factory

    @property
    def set_factory(self):
        return self._set_factory

    def hash_keys(self):
        """Store keys in a hash-based map"""
        return self.with_map_factory(HashMap)

    def sorted_keys(self):
        """Store keys in a sorted map"""
        return self.with_map_factory(TreeMap)

    def with_map_factory(self, factory):
        """Store keys in maps created by factory"""
        return type(self)(_check_factory(factory), self._set_factory)

    def hash_values(self):
        """Store the values of each key in a hash-based set"""
        return self.with_value_set_factory(HashSet)

    def sorted_values(self):
        """Store the values of each key in a sorted set"""
        return self.with_value_set_factory(TreeSet)

    def multiset_values(self, ordered=False):
        """Count the values of each key in a multiset"""
        return self.with_value_set_factory(TreeMultiSet if ordered else HashMultiSet)

    def with_value_set_factory(self, factory):
        """Store the values of each key in sets created by factory"""
        return type(self)(self._map_factory, _check_factory(factory))

    def build(self):
        """Create a new, empty MultiMap"""
        if self._map_factory is None:
            raise ValueError("MultiMapBuilder has no map factory configured.")
        if self._set_factory is None:
            raise ValueError("MultiMapBuilder has no value set factory configured.")
        logging.debug("Building MultiMap from %s and %s",
                      _name(self._map_factory), _name(self._set_factory))
        return MultiMap(self._map_factory, self._set_factory)

    __call__ = build

    def __repr__(self):
        return '%s(%r, %r)' % (type(self).__name__,
                               self._map_factory, self._set_factory)


class MultiSetBuilder(object):
    """Configure and build MultiSet instances

    The map factory creates the map from values to counts. It is
    called without arguments.
    """
    def __init__(self, map_factory=None):
        self._map_factory = map_factory

    @property
    def map_factory(self):
        return self._map_factory

    def hash_values(self):
        """Count values in a hash-based map"""
        return self.with_map_factory(HashMap)

    def sorted_values(self):
        """Count values in a sorted map"""
        return self.with_map_factory(TreeMap)

    def with_map_factory(self, factory):
        """Count values in maps created by factory"""
        return type(self)(_check_factory(factory))

    def build(self):
        """Create a new, empty MultiSet"""
        if self._map_factory is None:
            raise ValueError("MultiSetBuilder has no map factory configured.")
        logging.debug("Building MultiSet from %s", _name(self._map_factory))
        return MultiSet(map_factory=self._map_factory)

    __call__ = build

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self._map_factory)
