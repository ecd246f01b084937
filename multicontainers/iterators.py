"""Read-only views and lazy iterator adapters

The multi-containers expose their contents through the generators of
this module. grouped and flattened serve MultiMap, repeated serves MultiSet.
They are lazy, finite and good for a single pass; ask the container
for a fresh one to iterate again.
"""

from collections.abc import Set as AbstractSet
from itertools import chain, repeat


class SetView(AbstractSet):
    """Read-only view of an inner value set

    SetView gives access to the values stored under a MultiMap key
    without allowing to modify them. It supports membership tests,
    len, iteration and comparison with other sets. Set operations
    such as | and & return frozensets. The view is live: it reflects
    later changes of the underlying set.
    """
    __slots__ = ('_inner',)

    def __init__(self, inner):
        self._inner = inner

    @classmethod
    def _from_iterable(cls, iterable):
        return frozenset(iterable)

    def __contains__(self, value):
        return self._inner.contains(value)

    def __len__(self):
        return len(self._inner)

    def __iter__(self):
        return iter(self._inner)

    def count(self, value):
        """Multiplicity of value (0 or 1 unless the set is a multiset)"""
        if hasattr(self._inner, 'count'):
            return self._inner.count(value)
        return int(self._inner.contains(value))

    def __repr__(self):
        return '%s({%s})' % (type(self).__name__,
                             ', '.join(repr(value) for value in self))


def grouped(pairs):
    """Yield (key, SetView) for each (key, inner set) pair"""
    for key, inner in pairs:
        yield key, SetView(inner)


def flattened(pairs):
    """Yield (key, value) for every value of every (key, values) pair"""
    return chain.from_iterable(zip(repeat(key), values) for key, values in pairs)


def repeated(pairs):
    """Yield every value of (value, count) pairs count times"""
    return chain.from_iterable(repeat(value, count) for value, count in pairs)
