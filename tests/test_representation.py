import unittest

import numpy as np

from lineargraph.config import Representation
from lineargraph.exceptions import UndefinedElementError, VertexOutOfBoundsError
from lineargraph.representation import ArrayMapping, HashMapping, get_mapping_class


class _MappingContract:
    mapping_cls = None

    def test_from_pairs_and_index(self):
        m = self.mapping_cls.from_pairs((0, 2), [(0, "a"), (1, "b"), (2, "c")])
        self.assertEqual(m[1], "b")
        self.assertEqual(m.domain(), [0, 1, 2])
        self.assertEqual(m.domain_bounds(), (0, 2))
        self.assertEqual(len(m), 3)

    def test_offset_bounds(self):
        m = self.mapping_cls.from_pairs((3, 5), [(5, "z"), (3, "x"), (4, "y")])
        self.assertEqual(m.values(), ["x", "y", "z"])
        self.assertEqual(m.items()[0], (3, "x"))

    def test_lists_stored_as_single_values(self):
        m = self.mapping_cls.from_pairs((0, 1), [(0, [1, 2]), (1, [])])
        self.assertEqual(m[0], [1, 2])
        self.assertEqual(m[1], [])

    def test_last_pair_wins(self):
        m = self.mapping_cls.from_pairs((0, 0), [(0, "first"), (0, "second")])
        self.assertEqual(m[0], "second")

    def test_empty(self):
        m = self.mapping_cls.empty()
        self.assertTrue(m.is_empty())
        self.assertEqual(m.domain_bounds(), (0, -1))
        self.assertEqual(m.domain(), [])
        self.assertEqual(len(m), 0)
        with self.assertRaises(VertexOutOfBoundsError):
            m[0]

    def test_out_of_bounds(self):
        m = self.mapping_cls.from_pairs((0, 1), [(0, 1), (1, 2)])
        with self.assertRaises(VertexOutOfBoundsError):
            m[2]
        with self.assertRaises(IndexError):
            m[-1]
        self.assertNotIn(2, m)
        self.assertIn(1, m)

    def test_pair_outside_bounds_rejected(self):
        with self.assertRaises(VertexOutOfBoundsError):
            self.mapping_cls.from_pairs((0, 1), [(2, "x")])

    def test_undefined_slot(self):
        m = self.mapping_cls.from_pairs((0, 1), [(0, "x")])
        with self.assertRaises(UndefinedElementError):
            m[1]


class TestArrayMapping(_MappingContract, unittest.TestCase):
    mapping_cls = ArrayMapping

    def test_to_numpy_integer_table(self):
        m = ArrayMapping.from_pairs((0, 2), [(0, 3), (1, 0), (2, 1)])
        arr = m.to_numpy()
        self.assertEqual(arr.dtype, np.int64)
        self.assertEqual(arr.tolist(), [3, 0, 1])


class TestHashMapping(_MappingContract, unittest.TestCase):
    mapping_cls = HashMapping


class TestRegistry(unittest.TestCase):

    def test_backends(self):
        self.assertIs(get_mapping_class(Representation.ARRAY), ArrayMapping)
        self.assertIs(get_mapping_class("hashmap"), HashMapping)

    def test_unknown_backend(self):
        with self.assertRaises(ValueError):
            get_mapping_class("btree")

    def test_backends_compare_equal(self):
        pairs = [(0, [1]), (1, [])]
        self.assertEqual(ArrayMapping.from_pairs((0, 1), pairs), HashMapping.from_pairs((0, 1), pairs))


if __name__ == "__main__":
    unittest.main()
