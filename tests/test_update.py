"""
Incremental Update Tests

An in-place leaf update must leave the tree identical to a full rebuild over
the modified leaves, while only hashing the ancestors of that leaf.
"""

import unittest
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from merkle_paths import IndexOutOfRange, MerkleTree, verify_proof
from merkle_paths.merkle import build_levels, update_leaf

from helpers import ConcatOracle, CountingOracle, ceil_log2, letters


class TestUpdateLeaf(unittest.TestCase):
    """Level-matrix update function."""

    def test_matches_rebuild_for_every_size_and_index(self):
        oracle = ConcatOracle()
        for n in range(1, 18):
            for i in range(n):
                items = letters(n)
                levels = build_levels(items, oracle)
                update_leaf(levels, i, b"X", oracle)

                items[i] = b"X"
                self.assertEqual(levels, build_levels(items, oracle), f"n={n} index={i}")

    def test_oracle_calls_are_logarithmic(self):
        for n in (2, 3, 7, 16, 17, 100, 1000):
            levels = build_levels([bytes([i % 256, i // 256]) for i in range(n)], CountingOracle())
            oracle = CountingOracle()
            for i in (0, n // 2, n - 1):
                oracle.calls = 0
                calls = update_leaf(levels, i, b"new", oracle)
                self.assertEqual(calls, oracle.calls)
                self.assertLessEqual(oracle.calls, ceil_log2(n))

    def test_single_leaf(self):
        oracle = ConcatOracle()
        levels = build_levels([b"a"], oracle)
        self.assertEqual(update_leaf(levels, 0, b"b", oracle), 0)
        self.assertEqual(levels, [[b"b"]])

    def test_promoted_leaf_update(self):
        oracle = ConcatOracle()
        levels = build_levels([b"a", b"b", b"c"], oracle)
        update_leaf(levels, 2, b"Z", oracle)
        self.assertEqual(levels, [[b"((a,b),Z)"], [b"(a,b)", b"Z"], [b"a", b"b", b"Z"]])


class TestMerkleTreeUpdate(unittest.TestCase):
    """Updates through the tree facade."""

    def test_root_equals_rebuilt_root(self):
        for n in range(1, 18):
            for i in range(n):
                items = letters(n)
                tree = MerkleTree(items)
                tree.update_leaf(b"replacement", i)

                items[i] = b"replacement"
                rebuilt = MerkleTree(items)
                self.assertEqual(tree.root(), rebuilt.root(), f"n={n} index={i}")
                self.assertEqual(tree.levels, rebuilt.levels)
                self.assertEqual(tree.leaves, rebuilt.leaves)

    def test_proofs_after_update(self):
        tree = MerkleTree(letters(11))
        old_root = tree.root()
        tree.update_leaf(b"new", 6)
        self.assertNotEqual(tree.root(), old_root)

        for i in range(11):
            item = b"new" if i == 6 else letters(11)[i]
            self.assertTrue(verify_proof(tree.prove_inclusion(i), tree.leaf_hash(item), tree.root()))

        stale = tree.leaf_hash(letters(11)[6])
        self.assertFalse(verify_proof(tree.prove_inclusion(6), stale, tree.root()))

    def test_repeated_updates(self):
        items = letters(13)
        tree = MerkleTree(items)
        for i, value in [(0, b"p"), (12, b"q"), (5, b"r"), (0, b"s")]:
            tree.update_leaf(value, i)
            items[i] = value
        self.assertEqual(tree.root(), MerkleTree(items).root())

    def test_update_without_hashing(self):
        tree = MerkleTree([b"a", b"b", b"c"], oracle=ConcatOracle())
        tree.update_leaf(b"raw", 1, hash_leaves=False)
        self.assertEqual(tree.root(), b"((h(a),raw),h(c))")

    def test_update_after_append(self):
        items = letters(4)
        tree = MerkleTree(items)
        tree.append_leaves([b"e", b"f", b"g"])
        tree.update_leaf(b"z", 6)
        self.assertEqual(tree.root(), MerkleTree(items + [b"e", b"f", b"z"]).root())

    def test_out_of_range(self):
        tree = MerkleTree(letters(4))
        root = tree.root()
        with self.assertRaises(IndexOutOfRange):
            tree.update_leaf(b"x", 4)
        self.assertEqual(tree.root(), root)


if __name__ == '__main__':
    unittest.main()
