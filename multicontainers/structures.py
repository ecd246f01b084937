# Copyright 2018 Harold Fellermann
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY
# CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
# SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
"""Multi-valued maps and multisets

This module provides the two duplicate-aware containers of the
package. MultiMap maps every key to a set of distinct values,
MultiSet maps every value to a positive occurrence count.
(c.f. https://en.wikipedia.org/wiki/Multimap and
https://en.wikipedia.org/wiki/Multiset)

Both containers are written against the capability interfaces of
multicontainers.interfaces and obtain their backing stores from
zero-argument factories. The factories are class attributes that can
be overridden in subclasses or passed to the constructor; the builders
of multicontainers.builders are a third way of configuring them.
HashMultiMap, TreeMultiMap, HashMultiSet and TreeMultiSet are ready
made configurations for hash-based and sorted storage.

Both containers maintain the same invariant: an entry only exists as
long as it is non-empty. A key whose last value is removed disappears
from a MultiMap, and a value whose count drops to zero disappears from
a MultiSet.
"""

import logging
from collections.abc import Mapping
from numbers import Integral

from pqdict import pqdict

from .backends import HashMap, HashSet, TreeMap, TreeSet, as_map, as_set
from .interfaces import Set, SortedMap
from .iterators import SetView, flattened, grouped, repeated


def _sorted(backing, owner):
    if not isinstance(backing, SortedMap):
        raise TypeError("%s.range requires a sorted backing map."
                        % type(owner).__name__)
    return backing


class MultiMap(object):
    """Map from keys to sets of distinct values

    MultiMap associates each key with a set of values. Values are
    unique per key, but the same value can be stored under several
    keys. The sets obtained by get() are read-only views; all
    modifications go through insert, remove and remove_all.

    >>> mmap = HashMultiMap()
    >>> mmap.insert('a', 1)
    True
    >>> mmap.insert('a', 1)
    False
    >>> sorted(mmap.get('a'))
    [1]

    len() is the number of keys. Iterating over a MultiMap yields
    (key, value) pairs, one for each stored value, but the in operator
    tests keys, like contains_key. Use contains(key, value) to test
    for a pair:

    >>> 'a' in mmap, ('a', 1) in mmap, mmap.contains('a', 1)
    (True, False, True)

    With multiset value sets (see MultiMapBuilder.multiset_values),
    equality and repr take the value counts into account.
    """
    map_factory = HashMap
    set_factory = HashSet

    def __init__(self, map_factory=None, set_factory=None, pairs=()):
        """Create an empty MultiMap and insert the given (key, value) pairs.

        map_factory and set_factory default to the class attributes
        of the same name. Each is called without arguments and must
        return a Map/Set or a mutable mapping/set.
        """
        self._map_factory = map_factory or type(self).map_factory
        self._set_factory = set_factory or type(self).set_factory
        self._map = as_map(self._map_factory())
        self.extend(pairs)

    def _new_set(self):
        return as_set(self._set_factory())

    def insert(self, key, value):
        """Add value to the values of key.

        Returns True if the pair was not present before.
        """
        inner = self._map.lookup(key)
        if inner is None:
            inner = self._new_set()
            inner.insert(value)
            self._map.insert(key, inner)
            return True
        return inner.insert(value)

    def extend(self, pairs):
        """Insert all (key, value) pairs of an iterable"""
        for key, value in pairs:
            self.insert(key, value)

    def remove(self, key, value):
        """Remove value from the values of key.

        Returns True if the pair was present. The key is dropped once
        its last value is removed.
        """
        inner = self._map.lookup(key)
        if inner is None or not inner.remove(value):
            return False
        if inner.is_empty():
            self._map.remove(key)
            logging.debug("MultiMap dropped exhausted key %r", key)
        return True

    def remove_all(self, key):
        """Remove key together with all its values.

        Returns a read-only view of the removed values, which is empty
        if key was not present.
        """
        inner = self._map.remove(key)
        if inner is None:
            inner = self._new_set()
        return SetView(inner)

    def clear(self):
        """Remove all keys"""
        self._map = as_map(self._map_factory())

    def get(self, key):
        """Read-only view of the values of key, or None if key is absent"""
        inner = self._map.lookup(key)
        return None if inner is None else SetView(inner)

    def contains(self, key, value):
        """True if value is stored under key"""
        inner = self._map.lookup(key)
        return inner is not None and inner.contains(value)

    def contains_key(self, key):
        """True if at least one value is stored under key"""
        return self._map.contains(key)

    __contains__ = contains_key

    def __len__(self):
        return len(self._map)

    num_keys = __len__

    def total_len(self):
        """Number of (key, value) pairs"""
        return sum(len(inner) for inner in self._map.values())

    def is_empty(self):
        return self._map.is_empty()

    def __bool__(self):
        return not self.is_empty()

    def iter_grouped(self):
        """Iterate over (key, values) pairs, values being a read-only view"""
        return grouped(self._map.items())

    items = iter_grouped

    def iter_flat(self):
        """Iterate over (key, value) pairs, one for each stored value"""
        return flattened(self._map.items())

    __iter__ = iter_flat

    def keys(self):
        """Iterate over keys"""
        return self._map.keys()

    def values(self):
        """Iterate over the values of all keys"""
        return (value for _, value in self.iter_flat())

    def range(self, minimum=None, maximum=None, inclusive=(True, True)):
        """Iterate over (key, values) pairs for keys within bounds.

        Only available for sorted backing maps. Bounds follow
        SortedMap.range.
        """
        backing = _sorted(self._map, self)
        return grouped(backing.range(minimum, maximum, inclusive))

    def flat_range(self, minimum=None, maximum=None, inclusive=(True, True)):
        """Iterate over (key, value) pairs for keys within bounds"""
        backing = _sorted(self._map, self)
        return flattened(backing.range(minimum, maximum, inclusive))

    def check_invariants(self):
        """Raise AssertionError if a key maps to an empty value set"""
        for key, inner in self._map.items():
            if inner.is_empty():
                raise AssertionError("key %r maps to an empty set" % (key,))
            if hasattr(inner, 'check_invariants'):
                inner.check_invariants()

    def __eq__(self, other):
        if not isinstance(other, MultiMap):
            return NotImplemented
        if len(self) != len(other):
            return False
        for key, values in self.iter_grouped():
            theirs = other.get(key)
            if theirs is None or len(theirs) != len(values):
                return False
            # multiset value sets have to agree on counts as well
            if any(theirs.count(value) != values.count(value) for value in values):
                return False
        return True

    def __repr__(self):
        return '%s({%s})' % (
            type(self).__name__,
            ', '.join('%r: {%s}' % (key, ', '.join(repr(v) for v in values
                                                   for _ in range(values.count(v))))
                      for key, values in self.iter_grouped()))


class MultiSet(Set):
    """A set that counts the occurrences of its values

    MultiSet maps each value to a strictly positive count. Values
    whose count drops to zero are removed. len() is the number of
    distinct values, total() the sum of all counts. Iteration yields
    every distinct value once; iter_repeated() yields each value as
    often as it occurs.

    >>> mset = HashMultiSet(['a', 'b', 'a'])
    >>> mset.count('a'), mset.count('z'), len(mset), mset.total()
    (2, 0, 2, 3)

    Counts are non-negative integers. insert_some, remove_some and
    set_count raise ValueError for negative counts and TypeError for
    non-integer counts. remove_some saturates: removing more
    occurrences than present removes the value altogether.

    A MultiSet implements the Set interface and can therefore be used
    as value set of a MultiMap.
    """
    map_factory = HashMap

    def __init__(self, iterable=None, map_factory=None):
        """Create a MultiSet and insert the given values.

        iterable can either be a sequence of values or a mapping from
        values to counts.
        """
        self._map_factory = map_factory or type(self).map_factory
        self._counts = as_map(self._map_factory())
        self._total = 0
        if iterable is not None:
            self.extend(iterable)

    @staticmethod
    def _check_count(count):
        if isinstance(count, bool) or not isinstance(count, Integral):
            raise TypeError("multiset counts must be integers.")
        if count < 0:
            raise ValueError("multiset counts must not be negative.")

    def insert(self, value):
        """Add one occurrence of value.

        Returns True if value was not present before.
        """
        return self.insert_some(value, 1)

    def insert_some(self, value, count):
        """Add count occurrences of value.

        Returns True if a new entry was created. Inserting zero
        occurrences does nothing.
        """
        self._check_count(count)
        if not count:
            return False
        previous = self._counts.lookup(value, 0)
        self._counts.insert(value, previous + count)
        self._total += count
        return not previous

    def extend(self, iterable):
        """Insert all values of an iterable or a value->count mapping"""
        if isinstance(iterable, MultiSet):
            pairs = iterable.iter_unique()
        elif isinstance(iterable, Mapping):
            pairs = iterable.items()
        else:
            pairs = ((value, 1) for value in iterable)
        for value, count in pairs:
            self.insert_some(value, count)

    def remove(self, value):
        """Remove one occurrence of value.

        Returns True if value was present before.
        """
        return self.remove_some(value, 1)

    def remove_some(self, value, count):
        """Remove up to count occurrences of value.

        Returns True if value was present before. If count is not
        smaller than the current count, value is removed entirely.
        """
        self._check_count(count)
        previous = self._counts.lookup(value, 0)
        if not previous:
            return False
        if count >= previous:
            self._counts.remove(value)
            self._total -= previous
            logging.debug("MultiSet dropped exhausted value %r", value)
        elif count:
            self._counts.insert(value, previous - count)
            self._total -= count
        return True

    def remove_all(self, value):
        """Remove all occurrences of value and return their number"""
        previous = self._counts.remove(value)
        if previous is None:
            return 0
        self._total -= previous
        return previous

    def set_count(self, value, count):
        """Set the count of value and return the previous count.

        Setting the count to zero removes value.
        """
        self._check_count(count)
        if not count:
            return self.remove_all(value)
        previous = self._counts.insert(value, count) or 0
        self._total += count - previous
        return previous

    def clear(self):
        """Remove all values"""
        self._counts = as_map(self._map_factory())
        self._total = 0

    def count(self, value):
        """Number of occurrences of value, 0 if absent"""
        return self._counts.lookup(value, 0)

    def contains(self, value):
        return self._counts.contains(value)

    def __len__(self):
        return len(self._counts)

    num_values = __len__

    def total(self):
        """Sum of all counts"""
        return self._total

    def __iter__(self):
        return self._counts.keys()

    def iter_unique(self):
        """Iterate over (value, count) pairs"""
        return self._counts.items()

    counts = iter_unique

    def iter_repeated(self):
        """Iterate over values, repeating each value count times"""
        return repeated(self._counts.items())

    elements = iter_repeated

    def range(self, minimum=None, maximum=None, inclusive=(True, True)):
        """Iterate over repeated values within bounds.

        Only available for sorted backing maps. Bounds follow
        SortedMap.range.
        """
        backing = _sorted(self._counts, self)
        return repeated(backing.range(minimum, maximum, inclusive))

    def range_counts(self, minimum=None, maximum=None, inclusive=(True, True)):
        """Iterate over (value, count) pairs for values within bounds"""
        backing = _sorted(self._counts, self)
        return backing.range(minimum, maximum, inclusive)

    def most_common(self, n=None):
        """List the n most common (value, count) pairs, most common first.

        All pairs are listed if n is None. The order of values with
        equal counts is arbitrary.
        """
        queue = pqdict(list(self._counts.items()), reverse=True)
        limit = len(queue) if n is None else min(n, len(queue))
        return [queue.popitem() for _ in range(limit)]

    def check_invariants(self):
        """Raise AssertionError if a stored count is not positive"""
        total = 0
        for value, count in self._counts.items():
            if count < 1:
                raise AssertionError("value %r stored with count %r"
                                     % (value, count))
            total += count
        if total != self._total:
            raise AssertionError("total %d does not match the sum of counts %d"
                                 % (self._total, total))

    def __eq__(self, other):
        if not isinstance(other, MultiSet):
            return NotImplemented
        return (len(self) == len(other)
                and all(other.count(value) == count
                        for value, count in self.iter_unique()))

    def __repr__(self):
        return '%s({%s})' % (
            type(self).__name__,
            ', '.join('%r: %r' % pair for pair in self.iter_unique()))


class HashMultiMap(MultiMap):
    """MultiMap backed by dict and set"""
    map_factory = HashMap
    set_factory = HashSet


class TreeMultiMap(MultiMap):
    """MultiMap with sorted keys and sorted values

    Backed by SortedDict and SortedSet, so that iteration is ordered
    and range queries are available.
    """
    map_factory = TreeMap
    set_factory = TreeSet


class HashMultiSet(MultiSet):
    """MultiSet backed by a dict"""
    map_factory = HashMap


class TreeMultiSet(MultiSet):
    """MultiSet with sorted values, backed by a SortedDict"""
    map_factory = TreeMap
