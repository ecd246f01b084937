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

"""Duplicate-aware containers with pluggable backing stores

This package offers two containers. A MultiMap associates every key
with a set of distinct values, a MultiSet associates every value with
the number of its occurrences:

>>> mmap = HashMultiMap()
>>> mmap.extend([('a', 1), ('a', 2), ('b', 3)])
>>> len(mmap), len(mmap.get('a')), mmap.total_len()
(2, 2, 3)

>>> mset = TreeMultiSet([1, 1, 2, 2, 2])
>>> mset.count(1), mset.count(2), len(mset)
(2, 3, 2)
>>> list(mset.iter_repeated())
[1, 1, 2, 2, 2]

Both containers are written against the abstract Map and Set
interfaces and can therefore be backed by any map or set
implementation. The Hash* classes use dict and set, the Tree* classes
use the sorted containers of the sortedcontainers package. Use
MultiMapBuilder and MultiSetBuilder to combine backing stores freely,
e.g. sorted keys with hashed values:

>>> mmap = MultiMapBuilder().sorted_keys().hash_values().build()

The modules of the package are:

interfaces  -- capability interfaces of backing maps and sets
backends    -- backing stores based on dict, set and sortedcontainers
iterators   -- read-only value views and lazy iterators
structures  -- MultiMap, MultiSet and their ready made configurations
builders    -- MultiMapBuilder and MultiSetBuilder
"""

__version__ = "0.3.0"

from .interfaces import Map, SortedMap, Set
from .backends import HashMap, TreeMap, HashSet, TreeSet, MappingAdapter, SetAdapter
from .iterators import SetView
from .structures import MultiMap, MultiSet
from .structures import HashMultiMap, TreeMultiMap, HashMultiSet, TreeMultiSet
from .builders import MultiMapBuilder, MultiSetBuilder
