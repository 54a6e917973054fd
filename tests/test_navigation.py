"""Tests for RBNavigationMixin: extremes, successor/predecessor and bound queries"""

import random
import unittest
from unittest import mock

from rb_trees import rb_tree_base
from rb_trees.base import Item
from rb_trees.factory import create_rbtree
from tests.test_base import SCENARIO_KEYS, RBTreeTestCase


class TestExtremes(RBTreeTestCase):
    def test_empty_tree(self):
        self.assertIsNone(self.tree.minimum())
        self.assertIsNone(self.tree.maximum())
        self.assertIsNone(self.tree.min_node())
        self.assertIsNone(self.tree.max_node())

    def test_single_item(self):
        self.tree.insert(3, "c")
        self.assertEqual(self.tree.minimum(), Item(3, "c"))
        self.assertEqual(self.tree.maximum(), Item(3, "c"))

    def test_random_keys(self):
        rng = random.Random(7)
        keys = rng.sample(range(10_000), 300)
        self.insert_keys(self.tree, keys)
        self.assertEqual(self.tree.minimum().key, min(keys))
        self.assertEqual(self.tree.maximum().key, max(keys))
        self.expected_keys = keys


class TestSuccessorPredecessor(RBTreeTestCase):
    def setUp(self):
        super().setUp()
        self.insert_keys(self.tree, SCENARIO_KEYS)
        self.sorted_keys = sorted(SCENARIO_KEYS)

    def test_successor_chain_covers_all_keys(self):
        keys = [node.key for node in self.tree.iter_from()]
        self.assertEqual(keys, self.sorted_keys)

    def test_successor_of_each_key(self):
        for i, key in enumerate(self.sorted_keys):
            with self.subTest(key=key):
                succ = self.tree.successor(self.tree.find_node(key))
                if i + 1 < len(self.sorted_keys):
                    self.assertEqual(succ.key, self.sorted_keys[i + 1])
                else:
                    self.assertIsNone(succ)

    def test_predecessor_of_each_key(self):
        for i, key in enumerate(self.sorted_keys):
            with self.subTest(key=key):
                pred = self.tree.predecessor(self.tree.find_node(key))
                if i > 0:
                    self.assertEqual(pred.key, self.sorted_keys[i - 1])
                else:
                    self.assertIsNone(pred)

    def test_walk_from_middle(self):
        start = self.tree.find_node(7)
        keys = [node.key for node in self.tree.iter_from(start)]
        self.assertEqual(keys, [7, 9, 13, 15, 17, 18, 20])

    def test_sentinel_and_none_rejected(self):
        with self.assertRaises(ValueError):
            self.tree.successor(self.tree.nil)
        with self.assertRaises(ValueError):
            self.tree.predecessor(None)

    def test_foreign_node_rejected_in_debug_mode(self):
        other = create_rbtree()
        self.insert_keys(other, [1, 2, 3])
        foreign = other.find_node(2)
        with mock.patch.object(rb_tree_base, "DEBUG", True):
            with self.assertRaises(ValueError):
                self.tree.successor(foreign)
            # own nodes still pass the ownership check
            self.assertEqual(self.tree.successor(self.tree.find_node(9)).key, 13)
        self.validate_tree(other, [1, 2, 3])

    def test_deleted_node_rejected_in_debug_mode(self):
        node = self.tree.find_node(2)
        self.tree.delete(2)
        with mock.patch.object(rb_tree_base, "DEBUG", True):
            with self.assertRaises(ValueError):
                self.tree.successor(node)


class TestBoundQueries(RBTreeTestCase):
    def setUp(self):
        super().setUp()
        for key, value in [(10, "a"), (20, "b"), (20, "c"), (20, "d"), (30, "e")]:
            self.tree.insert(key, value)

    def test_first_greater_skips_equal_cluster(self):
        self.assertEqual(self.tree.first_greater(20), Item(30, "e"))
        self.assertEqual(self.tree.first_greater(10).key, 20)
        self.assertIsNone(self.tree.first_greater(30))

    def test_first_greater_absent_key(self):
        self.assertEqual(self.tree.first_greater(15).key, 20)
        self.assertEqual(self.tree.first_greater(-1), Item(10, "a"))
        self.assertIsNone(self.tree.first_greater(99))

    def test_first_at_least_returns_leftmost_duplicate(self):
        self.assertEqual(self.tree.first_at_least(20), Item(20, "b"))
        self.assertEqual(self.tree.first_at_least(11), Item(20, "b"))
        self.assertEqual(self.tree.first_at_least(10), Item(10, "a"))
        self.assertIsNone(self.tree.first_at_least(31))

    def test_bounds_on_empty_tree(self):
        empty = create_rbtree()
        self.assertIsNone(empty.first_greater(1))
        self.assertIsNone(empty.first_at_least(1))

    def test_bounds_match_sorted_reference(self):
        rng = random.Random(11)
        tree = create_rbtree()
        keys = [rng.randint(0, 50) for _ in range(200)]
        self.insert_keys(tree, keys)
        ref = sorted(keys)
        for probe in range(-2, 53):
            with self.subTest(probe=probe):
                above = [k for k in ref if k > probe]
                at_least = [k for k in ref if k >= probe]
                got = tree.first_greater(probe)
                self.assertEqual(None if got is None else got.key, above[0] if above else None)
                got = tree.first_at_least(probe)
                self.assertEqual(None if got is None else got.key, at_least[0] if at_least else None)
        self.validate_tree(tree, keys)


if __name__ == "__main__":
    unittest.main()
