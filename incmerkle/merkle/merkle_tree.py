"""
Batch Merkle Tree
Deterministic Merkle root construction over a complete list of leaves.

This module provides:
- Deterministic Merkle root computation by pairwise folding
- Carry-through rule for an odd number of nodes at any level
- BatchMerkleTree: reference construction that defines the correct
  root for N leaves

Canonical Commitment Rules (Hard Contracts):
1. Parent hashing: parent = hash_node(left, right), left always the
   lower-index node
2. Carry rule: an unpaired last node moves to the next level unchanged
   (never duplicated, never hashed with itself)
3. Empty leaves: build_merkle_root([]) raises EmptyInputException
4. Leaf width: every leaf must be hasher.digest_size bytes
5. Single leaf: root = leaf (the leaf hash itself)

Determinism Notes:
- No randomness or non-deterministic ordering
- This module never sorts leaves - it trusts input order
"""
from __future__ import annotations

import logging
from typing import Sequence

from incmerkle.crypto.hashing import SHA256, Digest, HashFunction
from incmerkle.schemas.errors import DigestSizeException, EmptyInputException


logger = logging.getLogger(__name__)


def merkle_parent(left: Digest, right: Digest, hasher: HashFunction = SHA256) -> Digest:
    """
    Compute the parent hash of two child nodes.

    Args:
        left: Left child hash
        right: Right child hash
        hasher: Hash function pair to combine with

    Returns:
        Parent hash
    """
    return hasher.hash_node(left, right)


def build_merkle_root(leaves: Sequence[Digest], hasher: HashFunction = SHA256) -> Digest:
    """
    Build a Merkle root from a sequence of leaf hashes.

    Algorithm:
    1. If empty: raise EmptyInputException
       If any leaf is not hasher.digest_size bytes: raise DigestSizeException
    2. If single leaf: return the leaf itself
    3. Otherwise, iteratively build levels:
       - Pair adjacent nodes left to right and compute parent hashes
       - If odd number of nodes, carry the last node up unchanged
       - Repeat until single root remains

    Carry Rule: an unpaired node is promoted, not duplicated.
    Example: [a, b, c] -> [parent(a,b), c] -> [parent(parent(a,b), c)]

    Args:
        leaves: Sequence of leaf hashes. Order matters and is preserved.
        hasher: Hash function pair used for parent nodes

    Returns:
        Merkle root

    Raises:
        EmptyInputException: If leaves is empty
        DigestSizeException: If a leaf has the wrong width

    Example:
        >>> leaves = [SHA256.hash_leaf(c.encode()) for c in "abc"]
        >>> root = build_merkle_root(leaves)
        >>> len(root)
        32
    """
    if len(leaves) == 0:
        logger.warning("Batch Merkle root requested over zero leaves")
        raise EmptyInputException()

    for i, leaf in enumerate(leaves):
        if len(leaf) != hasher.digest_size:
            logger.warning(
                f"Rejected {len(leaf)}-byte leaf at index {i}, expected {hasher.digest_size}"
            )
            raise DigestSizeException(
                f"Leaf {i} must be {hasher.digest_size} bytes, got {len(leaf)}",
                expected=hasher.digest_size,
                actual=len(leaf),
                details={"index": i},
            )

    current_level: list[Digest] = list(leaves)

    while len(current_level) > 1:
        next_level: list[Digest] = []
        for i in range(0, len(current_level) - 1, 2):
            next_level.append(hasher.hash_node(current_level[i], current_level[i + 1]))

        # Carry the unpaired tail up as-is
        if len(current_level) % 2 == 1:
            next_level.append(current_level[-1])

        current_level = next_level

    return current_level[0]


def compute_tree_depth(num_leaves: int) -> int:
    """
    Compute the depth of a Merkle tree with given number of leaves.

    Depth is the number of levels from leaves to root (inclusive).
    A single leaf has depth 1, two leaves have depth 2, etc.

    Args:
        num_leaves: Number of leaves in the tree

    Returns:
        Tree depth (0 for empty tree)
    """
    if num_leaves < 0:
        raise ValueError(f"Leaf count must be non-negative, got {num_leaves}")
    if num_leaves == 0:
        return 0

    depth = 1
    n = num_leaves
    while n > 1:
        # Carried tail counts as one node on the next level
        n = (n + 1) // 2
        depth += 1

    return depth


class BatchMerkleTree:
    """
    Stateless reference construction of a Merkle root.

    Example:
        >>> tree = BatchMerkleTree()
        >>> tree.root([SHA256.hash_leaf(b"a")]) == SHA256.hash_leaf(b"a")
        True
    """

    def __init__(self, hasher: HashFunction = SHA256) -> None:
        self.hasher = hasher

    def root(self, leaves: Sequence[Digest]) -> Digest:
        """
        Compute the root over a complete ordered list of leaf digests.

        Raises:
            EmptyInputException: If leaves is empty
            DigestSizeException: If a leaf has the wrong width
        """
        return build_merkle_root(leaves, self.hasher)

    def root_of_data(self, items: Sequence[bytes]) -> Digest:
        """Hash each raw item as a leaf, then compute the root."""
        return build_merkle_root([self.hasher.hash_leaf(item) for item in items], self.hasher)

    def __repr__(self) -> str:
        return f"BatchMerkleTree(hasher={self.hasher!r})"


__all__ = [
    "BatchMerkleTree",
    "merkle_parent",
    "build_merkle_root",
    "compute_tree_depth",
]
