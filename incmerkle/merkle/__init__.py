"""
Merkle Tree Roots
Batch and incremental Merkle root computation.

This module provides:
- BatchMerkleTree / build_merkle_root: root from a complete leaf list
- IncrementalMerkleTree: streaming root with O(log n) state
- merkle_parent, compute_tree_depth: helpers

Both modes agree: feeding leaves one at a time into IncrementalMerkleTree
yields, after every insert, the batch root over the leaves seen so far.

Usage:
    from incmerkle.merkle import BatchMerkleTree, IncrementalMerkleTree
    from incmerkle.crypto import SHA256

    leaves = [SHA256.hash_leaf(item) for item in items]

    tree = IncrementalMerkleTree()
    for i, leaf in enumerate(leaves):
        assert tree.insert(leaf) == BatchMerkleTree().root(leaves[: i + 1])
"""
from .merkle_tree import (
    BatchMerkleTree,
    merkle_parent,
    build_merkle_root,
    compute_tree_depth,
)

from .incremental import IncrementalMerkleTree


__all__ = [
    # Core types
    "BatchMerkleTree",
    "IncrementalMerkleTree",
    # Core functions
    "merkle_parent",
    "build_merkle_root",
    "compute_tree_depth",
]
