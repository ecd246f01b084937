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
"""Capability interfaces for backing containers

MultiMap and MultiSet never talk to a dict or a sorted dict directly.
They are written against the abstract base classes of this module,
which list the handful of operations a backing store has to provide.
Any class that implements Map (or SortedMap) and Set can be plugged
into the multi-containers through a builder. See multicontainers.backends
for the adapters around dict, set and the sortedcontainers types.

All operations are total: looking up, removing or testing an absent
key never raises.
"""

import abc


class Map(object, metaclass=abc.ABCMeta):
    """Abstract base class for backing maps.

    A Map associates keys with values. Iteration yields keys, like it
    does for ordinary dictionaries; use items() for (key, value) pairs.
    The iteration order is whatever the implementation provides.
    """
    @abc.abstractmethod
    def insert(self, key, value):
        """Bind value to key and return the previous value or None."""
        return None

    @abc.abstractmethod
    def remove(self, key):
        """Remove key and return its value, or None if key was absent."""
        return None

    @abc.abstractmethod
    def lookup(self, key, default=None):
        """Return the value bound to key, or default if key is absent."""
        return default

    @abc.abstractmethod
    def contains(self, key):
        """True if key is present."""
        return False

    @abc.abstractmethod
    def __len__(self):
        return 0

    @abc.abstractmethod
    def items(self):
        """Iterate over (key, value) pairs."""
        return iter(())

    def keys(self):
        """Iterate over keys."""
        return (key for key, _ in self.items())

    def values(self):
        """Iterate over values."""
        return (value for _, value in self.items())

    def get_or_insert(self, key, factory):
        """Return the value for key, inserting factory() if key is absent."""
        if not self.contains(key):
            self.insert(key, factory())
        return self.lookup(key)

    def is_empty(self):
        return not len(self)

    def __iter__(self):
        return self.keys()

    def __contains__(self, key):
        return self.contains(key)

    def __bool__(self):
        return not self.is_empty()


class SortedMap(Map):
    """A Map that keeps its keys in ascending order.

    items(), keys() and values() are sorted by key, and range() gives
    access to contiguous slices of the key space.
    """
    @abc.abstractmethod
    def range(self, minimum=None, maximum=None, inclusive=(True, True)):
        """Iterate over (key, value) pairs with keys within bounds.

        A bound of None is unbounded. inclusive is a pair of booleans
        that tells whether minimum and maximum themselves are included.
        """
        return iter(())


class Set(object, metaclass=abc.ABCMeta):
    """Abstract base class for inner value sets."""
    @abc.abstractmethod
    def insert(self, value):
        """Add value. True if value was not present before."""
        return False

    @abc.abstractmethod
    def remove(self, value):
        """Remove value. True if value was present before."""
        return False

    @abc.abstractmethod
    def contains(self, value):
        """True if value is present."""
        return False

    @abc.abstractmethod
    def __len__(self):
        return 0

    @abc.abstractmethod
    def __iter__(self):
        return iter(())

    def is_empty(self):
        return not len(self)

    def __contains__(self, value):
        return self.contains(value)

    def __bool__(self):
        return not self.is_empty()
