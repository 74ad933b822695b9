"""Randomized and property-based tests for OrderedTree."""

import sys
import os
import unittest

import numpy as np
from hypothesis import given, settings, strategies as st

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from ordered_tree import OrderedTree

SEED = 42

keys = st.integers(min_value=-200, max_value=200)
operations = st.lists(st.tuples(st.booleans(), st.integers(min_value=0, max_value=60)), max_size=200)


class TestInsertProperties(unittest.TestCase):

    @given(st.lists(keys, max_size=150))
    @settings(deadline=None)
    def test_contains_matches_inserted_values(self, values):
        tree = OrderedTree()
        seen = set()
        accepted = 0
        for value in values:
            inserted = tree.insert(value)
            self.assertEqual(inserted, value not in seen)
            if inserted:
                accepted += 1
            seen.add(value)
        self.assertEqual(tree.size(), accepted)
        for probe in range(-210, 211):
            self.assertEqual(tree.contains(probe), probe in seen)
        self.assertTrue(tree.is_valid())

    @given(st.lists(keys, min_size=1, max_size=100), st.data())
    def test_duplicate_insert_changes_nothing(self, values, data):
        tree = OrderedTree()
        for value in values:
            tree.insert(value)
        snapshot = tree.copy()
        duplicate = data.draw(st.sampled_from(values))
        self.assertFalse(tree.insert(duplicate))
        self.assertEqual(tree.size(), snapshot.size())
        self.assertEqual(tree, snapshot)


class TestRemoveProperties(unittest.TestCase):

    @given(operations)
    @settings(max_examples=200, deadline=None)
    def test_mixed_operations_agree_with_set(self, ops):
        tree = OrderedTree()
        model = set()
        for is_insert, value in ops:
            if is_insert:
                self.assertEqual(tree.insert(value), value not in model)
                model.add(value)
            else:
                present = value in model
                size_before = tree.size()
                self.assertEqual(tree.remove(value), present)
                model.discard(value)
                self.assertEqual(tree.size(), size_before - (1 if present else 0))
                self.assertFalse(tree.contains(value))
            self.assertTrue(tree.is_valid())
            self.assertEqual(tree.size(), len(model))
        for probe in range(61):
            self.assertEqual(tree.contains(probe), probe in model)

    @given(st.lists(keys, max_size=100), keys)
    def test_removing_absent_value_leaves_tree_identical(self, values, probe):
        tree = OrderedTree()
        for value in values:
            if value != probe:
                tree.insert(value)
        snapshot = tree.copy()
        self.assertFalse(tree.remove(probe))
        self.assertEqual(tree, snapshot)

    @given(st.lists(keys, min_size=3, max_size=100, unique=True))
    def test_removing_node_with_two_children_keeps_others(self, values):
        tree = OrderedTree()
        for value in values:
            tree.insert(value)
        root_value = values[0]
        has_two_children = tree._root.left is not None and tree._root.right is not None
        self.assertTrue(tree.remove(root_value))
        self.assertTrue(tree.is_valid())
        self.assertEqual(tree.size(), len(values) - 1)
        for value in values[1:]:
            self.assertTrue(tree.contains(value))
        self.assertFalse(tree.contains(root_value))
        if has_two_children:
            # The successor moved into the root slot.
            self.assertEqual(tree._root.value, min(v for v in values if v > root_value))


class TestBulkAndCopyProperties(unittest.TestCase):

    @given(st.lists(keys, max_size=300))
    def test_bulk_build_has_minimal_height(self, values):
        tree = OrderedTree(values)
        distinct = len(set(values))
        self.assertEqual(tree.size(), distinct)
        self.assertEqual(tree.height(), distinct.bit_length())
        self.assertTrue(tree.is_valid())

    @given(st.permutations(list(range(20))))
    def test_bulk_build_shape_ignores_input_order(self, values):
        self.assertEqual(OrderedTree(values), OrderedTree(range(20)))

    @given(st.lists(keys, max_size=150))
    def test_copy_agrees_with_source(self, values):
        tree = OrderedTree()
        for value in values:
            tree.insert(value)
        clone = tree.copy()
        self.assertEqual(clone.size(), tree.size())
        for probe in range(-210, 211, 3):
            self.assertEqual(clone.contains(probe), tree.contains(probe))
        self.assertEqual(clone, tree)

    @given(st.lists(keys, max_size=50, unique=True))
    def test_key_set_equality_is_not_tree_equality(self, values):
        inserted = OrderedTree()
        for value in values:
            inserted.insert(value)
        balanced = OrderedTree(values)
        # Same keys always; same shape only when insertion happened to match.
        self.assertEqual(inserted.size(), balanced.size())
        for value in values:
            self.assertTrue(balanced.contains(value))
        if inserted.height() != balanced.height():
            self.assertNotEqual(inserted, balanced)

    @given(st.lists(keys, max_size=100))
    def test_move_empties_source(self, values):
        source = OrderedTree(values)
        size = source.size()
        moved = source.move()
        self.assertEqual(moved.size(), size)
        self.assertEqual(source.size(), 0)
        for value in values:
            self.assertFalse(source.contains(value))
            self.assertTrue(moved.contains(value))


class TestRandomizedChurn(unittest.TestCase):

    def test_large_random_churn(self):
        rng = np.random.default_rng(SEED)
        values = rng.permutation(5000).tolist()
        tree = OrderedTree()
        for value in values:
            self.assertTrue(tree.insert(value))
        self.assertEqual(tree.size(), 5000)

        removed = rng.choice(5000, size=2500, replace=False).tolist()
        for value in removed:
            self.assertTrue(tree.remove(value))
        self.assertEqual(tree.size(), 2500)
        self.assertTrue(tree.is_valid())

        removed_set = set(removed)
        for value in range(5000):
            self.assertEqual(tree.contains(value), value not in removed_set)

    def test_random_tree_is_taller_than_bulk_tree(self):
        rng = np.random.default_rng(SEED)
        values = rng.permutation(1023).tolist()
        inserted = OrderedTree()
        for value in values:
            inserted.insert(value)
        balanced = OrderedTree(values)
        self.assertEqual(balanced.height(), 10)
        self.assertGreater(inserted.height(), balanced.height())
        self.assertNotEqual(inserted, balanced)


if __name__ == "__main__":
    unittest.main()
