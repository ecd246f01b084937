"""Tests for multicontainers.builders"""
import unittest

from sortedcontainers import SortedDict

from multicontainers.backends import HashMap, HashSet, TreeMap, TreeSet
from multicontainers.builders import MultiMapBuilder, MultiSetBuilder
from multicontainers.interfaces import SortedMap
from multicontainers.structures import MultiMap, MultiSet, HashMultiSet, TreeMultiSet


class TestMultiMapBuilder(unittest.TestCase):
    """MultiMapBuilder specification"""
    def test_configuration(self):
        """configuration methods capture the factories"""
        builder = MultiMapBuilder().hash_keys().sorted_values()
        self.assertIs(builder.map_factory, HashMap)
        self.assertIs(builder.set_factory, TreeSet)
        builder = MultiMapBuilder().sorted_keys().hash_values()
        self.assertIs(builder.map_factory, TreeMap)
        self.assertIs(builder.set_factory, HashSet)

    def test_value_order_independent(self):
        """keys and values can be configured in any order"""
        builder = MultiMapBuilder().hash_values().sorted_keys()
        self.assertIs(builder.map_factory, TreeMap)
        self.assertIs(builder.set_factory, HashSet)

    def test_multiset_values(self):
        """multiset_values selects hashed or sorted multisets"""
        self.assertIs(MultiMapBuilder().multiset_values().set_factory, HashMultiSet)
        self.assertIs(MultiMapBuilder().multiset_values(ordered=True).set_factory,
                      TreeMultiSet)

    def test_immutable(self):
        """configuration returns new builders"""
        base = MultiMapBuilder().hash_keys()
        hashed = base.hash_values()
        self.assertIsNot(base, hashed)
        self.assertIsNone(base.set_factory)
        self.assertIs(hashed.set_factory, HashSet)

    def test_build(self):
        """build returns a new, empty MultiMap on every call"""
        builder = MultiMapBuilder().sorted_keys().sorted_values()
        first = builder.build()
        second = builder()
        self.assertIsInstance(first, MultiMap)
        self.assertIsNot(first, second)
        self.assertTrue(first.is_empty())
        first.insert(1, 2)
        self.assertTrue(second.is_empty())

    def test_built_backing(self):
        """built maps use the configured backing stores"""
        mmap = MultiMapBuilder().sorted_keys().sorted_values().build()
        self.assertIsInstance(mmap._map, SortedMap)
        mmap.extend([(2, 'b'), (1, 'z'), (1, 'a')])
        self.assertEqual(list(mmap), [(1, 'a'), (1, 'z'), (2, 'b')])

    def test_raw_factories(self):
        """plain mapping and set types are accepted as factories"""
        mmap = MultiMapBuilder().with_map_factory(SortedDict) \
                                .with_value_set_factory(set).build()
        mmap.extend([(2, 'b'), (1, 'a')])
        self.assertEqual(list(mmap.keys()), [1, 2])
        self.assertEqual(list(mmap.flat_range(maximum=1)), [(1, 'a')])

    def test_unconfigured(self):
        """building requires both factories"""
        with self.assertRaises(ValueError):
            MultiMapBuilder().build()
        with self.assertRaises(ValueError):
            MultiMapBuilder().hash_keys().build()
        with self.assertRaises(ValueError):
            MultiMapBuilder().hash_values().build()

    def test_not_callable(self):
        """factories must be callable"""
        with self.assertRaises(TypeError):
            MultiMapBuilder().with_map_factory({})
        with self.assertRaises(TypeError):
            MultiMapBuilder().with_value_set_factory(None)

    def test_wrong_factory_output(self):
        """factories must produce maps and sets"""
        with self.assertRaises(TypeError):
            MultiMapBuilder().with_map_factory(list).hash_values().build()
        mmap = MultiMapBuilder().hash_keys().with_value_set_factory(list).build()
        with self.assertRaises(TypeError):
            mmap.insert('a', 1)
        self.assertTrue(mmap.is_empty())

    def test_repr(self):
        """repr shows the factories"""
        self.assertIn('HashMap', repr(MultiMapBuilder().hash_keys()))


class TestMultiSetBuilder(unittest.TestCase):
    """MultiSetBuilder specification"""
    def test_configuration(self):
        """configuration methods capture the factory"""
        self.assertIs(MultiSetBuilder().hash_values().map_factory, HashMap)
        self.assertIs(MultiSetBuilder().sorted_values().map_factory, TreeMap)
        self.assertIs(MultiSetBuilder().with_map_factory(dict).map_factory, dict)

    def test_build(self):
        """build returns a new, empty MultiSet on every call"""
        builder = MultiSetBuilder().sorted_values()
        first = builder.build()
        second = builder()
        self.assertIsInstance(first, MultiSet)
        first.insert_some(3, 2)
        first.insert(1)
        self.assertEqual(list(first.iter_repeated()), [1, 3, 3])
        self.assertTrue(second.is_empty())

    def test_unconfigured(self):
        """building requires a map factory"""
        with self.assertRaises(ValueError):
            MultiSetBuilder().build()

    def test_not_callable(self):
        """factories must be callable"""
        with self.assertRaises(TypeError):
            MultiSetBuilder().with_map_factory(3)

    def test_wrong_factory_output(self):
        """factories must produce maps"""
        with self.assertRaises(TypeError):
            MultiSetBuilder().with_map_factory(set).build()


if __name__ == '__main__':
    unittest.main()
