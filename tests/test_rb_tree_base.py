"""Tests for insertion, search and deletion on RBTreeBase"""

import unittest

from rb_trees.base import BLACK, RED, Item
from rb_trees.factory import create_rbtree
from rb_trees.rb_tree_base import NIL_KEY, RBTreeBase
from tests.test_base import SCENARIO_KEYS, RBTreeTestCase


class TestConstruction(unittest.TestCase):
    def test_new_tree_is_empty(self):
        tree = create_rbtree()
        self.assertTrue(tree.is_empty())
        self.assertIs(tree.root, tree.nil)
        self.assertEqual(tree.size(), 0)
        self.assertEqual(len(tree), 0)
        self.assertEqual(str(tree), "Empty RBTree")

    def test_sentinel_is_black_and_private(self):
        t1 = create_rbtree()
        t2 = create_rbtree()
        self.assertEqual(t1.nil.color, BLACK)
        self.assertIs(t1.nil.key, NIL_KEY)
        self.assertIsNot(t1.nil, t2.nil)

    def test_non_callable_predicates_rejected(self):
        with self.assertRaises(TypeError):
            RBTreeBase(None, lambda a, b: a < b)
        with self.assertRaises(TypeError):
            RBTreeBase(lambda a, b: a == b, "less")


class TestInsert(RBTreeTestCase):
    def test_single_insert_is_black_root(self):
        self.tree.insert(1, "one")
        self.assertEqual(self.tree.root.key, 1)
        self.assertEqual(self.tree.root.color, BLACK)
        self.assertIs(self.tree.root.left, self.tree.nil)
        self.assertIs(self.tree.root.right, self.tree.nil)
        self.expected_keys = [1]

    def test_ascending_inserts_rebalance(self):
        self.tree.insert(1)
        self.tree.insert(2)
        self.tree.insert(3)
        root = self.tree.root
        self.assertEqual(root.key, 2)
        self.assertEqual(root.color, BLACK)
        self.assertEqual(root.left.key, 1)
        self.assertEqual(root.left.color, RED)
        self.assertEqual(root.right.key, 3)
        self.assertEqual(root.right.color, RED)
        self.expected_keys = [1, 2, 3]

    def test_descending_inserts_rebalance(self):
        self.insert_keys(self.tree, [3, 2, 1])
        self.assertEqual(self.tree.root.key, 2)
        self.assertEqual(self.tree.root.left.key, 1)
        self.assertEqual(self.tree.root.right.key, 3)
        self.expected_keys = [1, 2, 3]

    def test_inner_child_cases(self):
        # 1, 3, 2 and 3, 1, 2 both need the double rotation
        self.insert_keys(self.tree, [1, 3, 2])
        self.assertEqual(self.tree.root.key, 2)
        other = create_rbtree()
        self.insert_keys(other, [3, 1, 2])
        self.assertEqual(other.root.key, 2)
        self.validate_tree(other, [1, 2, 3])
        self.expected_keys = [1, 2, 3]

    def test_uncle_red_recolors(self):
        self.insert_keys(self.tree, [2, 1, 3, 4])
        root = self.tree.root
        self.assertEqual(root.key, 2)
        self.assertEqual(root.color, BLACK)
        self.assertEqual(root.left.color, BLACK)
        self.assertEqual(root.right.color, BLACK)
        self.assertEqual(root.right.right.key, 4)
        self.assertEqual(root.right.right.color, RED)
        self.expected_keys = [1, 2, 3, 4]

    def test_sequential_inserts_keep_height_logarithmic(self):
        n = 1024
        self.insert_keys(self.tree, range(n))
        max_depth, _ = self.tree.depth()
        # h <= 2 * log2(n + 1)
        self.assertLessEqual(max_depth, 2 * 11)
        self.assertEqual(self.tree.size(), n)
        self.expected_keys = list(range(n))

    def test_size_counts_duplicates(self):
        self.insert_keys(self.tree, [5, 5, 5, 1, 9, 1])
        self.assertEqual(self.tree.size(), 6)
        self.expected_keys = [1, 1, 5, 5, 5, 9]

    def test_value_defaults_to_none(self):
        self.tree.insert("k")
        self.assertEqual(self.tree.search("k"), Item("k", None))
        self.expected_keys = ["k"]


class TestSearch(RBTreeTestCase):
    def test_search_empty(self):
        self.assertIsNone(self.tree.search(1))
        self.assertIsNone(self.tree.find_node(1))

    def test_insert_then_search(self):
        self.tree.insert(42, "answer")
        self.assertEqual(self.tree.search(42), (42, "answer"))
        self.assertIn(42, self.tree)
        self.assertNotIn(41, self.tree)

    def test_search_absent_between_keys(self):
        self.insert_keys(self.tree, [10, 20, 30])
        self.assertIsNone(self.tree.search(15))
        self.assertIsNone(self.tree.search(35))
        self.assertIsNone(self.tree.search(5))

    def test_search_returns_first_match_on_descent(self):
        self.tree.insert(5, "a")
        self.tree.insert(5, "b")
        self.tree.insert(5, "c")
        # after rebalancing the middle duplicate is the root
        self.assertEqual(self.tree.root.value, "b")
        self.assertEqual(self.tree.search(5), Item(5, "b"))
        self.assertEqual(list(self.tree.values()), ["a", "b", "c"])

    def test_find_node_returns_live_node(self):
        self.insert_keys(self.tree, SCENARIO_KEYS)
        node = self.tree.find_node(13)
        self.assertEqual(node.key, 13)
        self.assertEqual(node.item, Item(13, "val_13"))


class TestDelete(RBTreeTestCase):
    def test_delete_absent_returns_none(self):
        self.insert_keys(self.tree, [1, 2, 3])
        before = self.tree.list()
        self.assertIsNone(self.tree.delete(99))
        self.assertEqual(self.tree.list(), before)
        self.assertEqual(self.tree.size(), 3)
        self.expected_keys = [1, 2, 3]

    def test_delete_from_empty(self):
        self.assertIsNone(self.tree.delete(1))
        self.assertTrue(self.tree.is_empty())

    def test_delete_only_node(self):
        self.tree.insert(1, "one")
        self.assertEqual(self.tree.delete(1), (1, "one"))
        self.assertTrue(self.tree.is_empty())
        self.assertIs(self.tree.root, self.tree.nil)

    def test_insert_delete_search(self):
        self.tree.insert(7, "seven")
        self.assertEqual(self.tree.delete(7), Item(7, "seven"))
        self.assertIsNone(self.tree.search(7))

    def test_delete_red_leaf(self):
        self.insert_keys(self.tree, [1, 2, 3])
        self.assertEqual(self.tree.delete(3), (3, "val_3"))
        self.expected_keys = [1, 2]

    def test_delete_node_with_two_children_moves_successor(self):
        self.insert_keys(self.tree, [1, 2, 3])
        root = self.tree.root
        removed = self.tree.delete(2)
        self.assertEqual(removed, (2, "val_2"))
        # the root node object survives and now holds the successor pair
        self.assertIs(self.tree.root, root)
        self.assertEqual(root.item, Item(3, "val_3"))
        self.expected_keys = [1, 3]

    def test_sentinel_scratch_is_reset(self):
        self.insert_keys(self.tree, range(20))
        for key in range(0, 20, 3):
            self.tree.delete(key)
            self.assertIs(self.tree.nil.parent, self.tree.nil)
            self.assertEqual(self.tree.nil.color, BLACK)
        self.expected_keys = [k for k in range(20) if k % 3]

    def test_delete_duplicates_one_at_a_time(self):
        for value in "abc":
            self.tree.insert(5, value)
        self.tree.insert(4, "x")
        removed = {self.tree.delete(5).value for _ in range(3)}
        self.assertEqual(removed, {"a", "b", "c"})
        self.assertIsNone(self.tree.delete(5))
        self.expected_keys = [4]

    def test_delete_everything_in_insertion_order(self):
        keys = list(range(50))
        self.insert_keys(self.tree, keys)
        for i, key in enumerate(keys):
            with self.subTest(key=key):
                self.assertEqual(self.tree.delete(key), (key, f"val_{key}"))
                self.validate_tree(self.tree, keys[i + 1:])
        self.assertTrue(self.tree.is_empty())

    def test_delete_everything_in_reverse_order(self):
        keys = list(range(50))
        self.insert_keys(self.tree, keys)
        for i, key in enumerate(reversed(keys)):
            with self.subTest(key=key):
                self.assertEqual(self.tree.delete(key), (key, f"val_{key}"))
                self.validate_tree(self.tree, keys[:len(keys) - i - 1])
        self.assertTrue(self.tree.is_empty())


class TestScenario(RBTreeTestCase):
    """Textbook sequence 15, 6, 18, 3, 7, 17, 20, 2, 4, 13, 9."""

    def setUp(self):
        super().setUp()
        self.insert_keys(self.tree, SCENARIO_KEYS)

    def test_listing_and_extremes(self):
        self.assertEqual(self.tree.list_keys(), [2, 3, 4, 6, 7, 9, 13, 15, 17, 18, 20])
        self.assertEqual(self.tree.minimum().key, 2)
        self.assertEqual(self.tree.maximum().key, 20)
        self.expected_keys = SCENARIO_KEYS

    def test_successor_and_predecessor_of_nine(self):
        node = self.tree.find_node(9)
        self.assertEqual(self.tree.successor(node).key, 13)
        self.assertEqual(self.tree.predecessor(node).key, 7)

    def test_delete_six(self):
        self.assertEqual(self.tree.delete(6), (6, "val_6"))
        self.assertIsNone(self.tree.search(6))
        self.assertEqual(self.tree.size(), 10)
        self.assertIsNotNone(self.tree.validate())
        self.expected_keys = [k for k in SCENARIO_KEYS if k != 6]


if __name__ == "__main__":
    unittest.main()
