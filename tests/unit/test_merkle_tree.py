"""
Batch Merkle Tree Unit Tests
Tests for incmerkle/merkle/merkle_tree.py

Tests:
1. Empty leaves - build_merkle_root([]) raises EmptyInputException
2. Single leaf - root equals leaf
3. Root determinism and order sensitivity
4. Carry-through correctness - odd tail is promoted, never duplicated
5. Leaf width checks
6. Tree depth under carry-through
"""
import logging

import pytest

from incmerkle.crypto.hashing import SHA256, SHA3_256, HashFunction, sha256
from incmerkle.merkle.merkle_tree import (
    BatchMerkleTree,
    merkle_parent,
    build_merkle_root,
    compute_tree_depth,
)
from incmerkle.merkle.incremental import IncrementalMerkleTree
from incmerkle.schemas.errors import DigestSizeException, EmptyInputException, ErrorCodes

from fixtures import make_leaves


class TestEmptyTree:
    """Tests for empty input behavior."""

    def test_empty_leaves_raises(self):
        with pytest.raises(EmptyInputException) as exc_info:
            build_merkle_root([])

        assert exc_info.value.code == ErrorCodes.EMPTY_INPUT

    def test_empty_is_value_error(self):
        """EmptyInputException can be caught as ValueError."""
        with pytest.raises(ValueError):
            BatchMerkleTree().root([])


class TestSingleLeaf:
    """Tests for single leaf tree behavior."""

    def test_single_leaf_root_equals_leaf(self):
        leaf = sha256(b"single leaf")

        assert build_merkle_root([leaf]) == leaf

    def test_single_leaf_any_hasher(self, hasher):
        leaf = hasher.hash_leaf(b"only one")

        assert BatchMerkleTree(hasher).root([leaf]) == leaf


class TestRootDeterminism:
    """Tests for deterministic root computation."""

    def test_same_leaves_same_root(self):
        leaves = [sha256(b"a"), sha256(b"b"), sha256(b"c")]

        roots = [build_merkle_root(leaves) for _ in range(10)]

        assert all(r == roots[0] for r in roots)

    def test_root_deterministic_different_runs(self):
        assert build_merkle_root(make_leaves(5)) == build_merkle_root(make_leaves(5))

    def test_different_leaves_different_roots(self):
        leaves1 = [sha256(b"a"), sha256(b"b")]
        leaves2 = [sha256(b"x"), sha256(b"y")]

        assert build_merkle_root(leaves1) != build_merkle_root(leaves2)

    def test_leaf_order_matters(self):
        leaves1 = [sha256(b"a"), sha256(b"b"), sha256(b"c")]
        leaves2 = [sha256(b"c"), sha256(b"b"), sha256(b"a")]

        assert build_merkle_root(leaves1) != build_merkle_root(leaves2)

    def test_input_not_mutated(self):
        leaves = make_leaves(5)
        original = list(leaves)

        build_merkle_root(leaves)

        assert leaves == original


class TestCarryThrough:
    """Tests for odd-number carry behavior."""

    def test_two_leaves(self):
        a, b = make_leaves(2)

        assert build_merkle_root([a, b]) == merkle_parent(a, b)

    def test_three_leaves_carries_tail(self):
        """
        Level 0: [a, b, c]
        Level 1: [ab, c]      (c carried, not duplicated)
        Level 2: [H(ab, c)]
        """
        a, b, c = make_leaves(3)

        expected = merkle_parent(merkle_parent(a, b), c)

        assert build_merkle_root([a, b, c]) == expected

    def test_three_leaves_not_duplicated(self):
        a, b, c = make_leaves(3)
        duplicated = merkle_parent(merkle_parent(a, b), merkle_parent(c, c))

        assert build_merkle_root([a, b, c]) != duplicated

    def test_five_leaves(self):
        """
        Level 0: [a, b, c, d, e]
        Level 1: [ab, cd, e]
        Level 2: [abcd, e]
        Level 3: [H(abcd, e)]
        """
        a, b, c, d, e = make_leaves(5)
        abcd = merkle_parent(merkle_parent(a, b), merkle_parent(c, d))

        assert build_merkle_root([a, b, c, d, e]) == merkle_parent(abcd, e)

    def test_seven_leaves(self):
        """
        Level 0: [a, b, c, d, e, f, g]
        Level 1: [ab, cd, ef, g]
        Level 2: [abcd, efg]
        Level 3: [H(abcd, efg)]
        """
        a, b, c, d, e, f, g = make_leaves(7)
        abcd = merkle_parent(merkle_parent(a, b), merkle_parent(c, d))
        efg = merkle_parent(merkle_parent(e, f), g)

        assert build_merkle_root([a, b, c, d, e, f, g]) == merkle_parent(abcd, efg)

    def test_four_leaves_balanced(self):
        a, b, c, d = make_leaves(4)
        expected = merkle_parent(merkle_parent(a, b), merkle_parent(c, d))

        assert build_merkle_root([a, b, c, d]) == expected

    def test_uses_supplied_hasher(self):
        h = HashFunction("sha3_256", "hex")
        a, b, c = make_leaves(3, hasher=h)

        expected = h.hash_node(h.hash_node(a, b), c)

        assert build_merkle_root([a, b, c], h) == expected
        assert build_merkle_root([a, b, c], h) != build_merkle_root([a, b, c], SHA256)


class TestBatchMerkleTree:
    """Tests for the class form."""

    def test_root_matches_function(self):
        leaves = make_leaves(6)

        assert BatchMerkleTree().root(leaves) == build_merkle_root(leaves)

    def test_root_of_data_hashes_leaves(self):
        items = [b"x", b"y", b"z"]
        tree = BatchMerkleTree(SHA3_256)

        expected = build_merkle_root([SHA3_256.hash_leaf(i) for i in items], SHA3_256)

        assert tree.root_of_data(items) == expected

    def test_accepts_tuple(self):
        leaves = tuple(make_leaves(3))

        assert BatchMerkleTree().root(leaves) == build_merkle_root(list(leaves))


class TestLeafWidth:
    """Tests for leaf digest width checks."""

    def test_short_leaf_rejected(self):
        leaves = make_leaves(4)
        leaves[2] = leaves[2][:20]

        with pytest.raises(DigestSizeException) as exc_info:
            build_merkle_root(leaves)

        assert exc_info.value.code == ErrorCodes.DIGEST_SIZE_MISMATCH
        assert exc_info.value.details == {"index": 2, "expected": 32, "actual": 20}

    def test_single_raw_value_rejected(self):
        """A lone non-digest is not returned as the root."""
        with pytest.raises(DigestSizeException):
            BatchMerkleTree().root([b"not a digest"])

    def test_rejection_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="incmerkle.merkle.merkle_tree"):
            with pytest.raises(DigestSizeException):
                build_merkle_root([b"\x00" * 31])

        assert "31-byte leaf at index 0" in caplog.text

    def test_agrees_with_incremental(self, hasher):
        """Both modes refuse the same wrong-width leaf."""
        bad = hasher.hash_leaf(b"a") + b"\x00"

        with pytest.raises(DigestSizeException):
            BatchMerkleTree(hasher).root([bad])
        with pytest.raises(DigestSizeException):
            IncrementalMerkleTree(hasher).insert(bad)

class TestComputeTreeDepth:
    """Tests for compute_tree_depth() function."""

    def test_depth_empty(self):
        assert compute_tree_depth(0) == 0

    def test_depth_single_leaf(self):
        assert compute_tree_depth(1) == 1

    def test_depth_power_of_two(self):
        assert compute_tree_depth(2) == 2
        assert compute_tree_depth(4) == 3
        assert compute_tree_depth(8) == 4
        assert compute_tree_depth(16) == 5

    def test_depth_non_power_of_two(self):
        assert compute_tree_depth(3) == 3
        assert compute_tree_depth(5) == 4
        assert compute_tree_depth(7) == 4
        assert compute_tree_depth(9) == 5

    def test_depth_negative_rejected(self):
        with pytest.raises(ValueError):
            compute_tree_depth(-1)
