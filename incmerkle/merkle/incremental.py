"""
Incremental Merkle Tree
Streaming Merkle root computation with O(log n) state.

Leaves are consumed one at a time. The tree keeps one pending subtree
digest per level, and the occupied levels always match the set bits of the
leaf count, exactly like a binary counter:

    leaf_count = 6 (0b110)  ->  slots {1: H(e,f), 2: H(H(a,b),H(c,d))}

Inserting a leaf carries upward through occupied levels (older occupant on
the left), then lands in the first free level. The root is the right-nested
fold of the occupied slots from the lowest level up, which is the same value
the batch construction in merkle_tree.py produces when it carries odd tails:

    root(6) = H(slot[2], slot[1])
    root(7) = H(slot[2], H(slot[1], slot[0]))

Thread safety: instances are NOT thread-safe. Callers sharing one tree
across threads must serialize insert() externally.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from incmerkle.crypto.hashing import SHA256, Digest, HashFunction, get_hash_function
from incmerkle.schemas.errors import (
    DigestSizeException,
    EmptyInputException,
    EmptyTreeException,
    InvalidStateException,
    UnsupportedHashException,
)
from incmerkle.schemas.state import TreeState


logger = logging.getLogger(__name__)


class IncrementalMerkleTree:
    """
    Bounded-memory Merkle tree that reports the latest root after each insert.

    Example:
        >>> from incmerkle.merkle.merkle_tree import BatchMerkleTree
        >>> tree = IncrementalMerkleTree()
        >>> leaves = [SHA256.hash_leaf(c.encode()) for c in "abc"]
        >>> for leaf in leaves:
        ...     root = tree.insert(leaf)
        >>> root == BatchMerkleTree().root(leaves)
        True
    """

    def __init__(self, hasher: HashFunction = SHA256) -> None:
        self.hasher = hasher
        self._slots: dict[int, Digest] = {}
        self._leaf_count = 0
        self._root: Optional[Digest] = None

    @property
    def leaf_count(self) -> int:
        """Number of leaves consumed so far."""
        return self._leaf_count

    @property
    def slots(self) -> dict[int, Digest]:
        """Copy of the occupied level slots, keyed by level."""
        return dict(self._slots)

    @property
    def last_root(self) -> Optional[Digest]:
        """Root after the most recent insert, or None if nothing was inserted."""
        if self._leaf_count == 0:
            return None
        return self.root()

    def insert(self, leaf: Digest) -> Digest:
        """
        Consume one leaf digest and return the root over all leaves so far.

        Args:
            leaf: Leaf digest, exactly hasher.digest_size bytes

        Returns:
            Up-to-date Merkle root

        Raises:
            DigestSizeException: If the leaf has the wrong width
        """
        leaf = self._check_digest(leaf)

        level = 0
        carry = leaf
        while level in self._slots:
            # Existing occupant covers earlier leaves, so it is the left child
            carry = self.hasher.hash_node(self._slots.pop(level), carry)
            level += 1
        self._slots[level] = carry

        self._leaf_count += 1
        self._root = None
        logger.debug(
            f"Inserted leaf #{self._leaf_count}: carried {level} level(s), "
            f"{len(self._slots)} slot(s) occupied"
        )
        return self.root()

    def extend(self, leaves: Iterable[Digest]) -> Digest:
        """
        Insert leaves in order and return the final root.

        Raises:
            EmptyInputException: If leaves yields nothing
        """
        inserted = 0
        for leaf in leaves:
            self.insert(leaf)
            inserted += 1
        if inserted == 0:
            raise EmptyInputException("extend() called with no leaves")
        return self.root()

    def root(self) -> Digest:
        """
        Compute the root over every leaf consumed so far.

        When the leaf count is a power of two a single slot is occupied
        and it is returned without hashing.

        Raises:
            EmptyTreeException: If no leaf has been inserted
        """
        if self._leaf_count == 0:
            logger.warning("Root requested from an empty incremental tree")
            raise EmptyTreeException()

        if self._root is None:
            self._root = self._fold_slots()
        return self._root

    def snapshot(self) -> TreeState:
        """Export the current state as an immutable TreeState."""
        return TreeState(
            algorithm=self.hasher.algorithm,
            node_encoding=self.hasher.node_encoding,
            leaf_count=self._leaf_count,
            slots=dict(self._slots),
            root=self.last_root,
        )

    @classmethod
    def from_state(
        cls,
        state: TreeState,
        hasher: Optional[HashFunction] = None,
    ) -> "IncrementalMerkleTree":
        """
        Restore a tree from a snapshot.

        Args:
            state: Snapshot produced by snapshot()
            hasher: Hash function to continue with; defaults to the one
                    named in the snapshot

        Raises:
            InvalidStateException: If the snapshot names an unsupported hash
                function, the hasher does not match the snapshot,
                the slot widths do not match the digest size, or the recorded
                root does not match the slots
        """
        if hasher is None:
            try:
                hasher = get_hash_function(state.algorithm, state.node_encoding)
            except UnsupportedHashException as e:
                raise InvalidStateException(
                    f"Snapshot names an unsupported hash function: {e.message}",
                    details={"state": f"{state.algorithm}/{state.node_encoding}"},
                ) from e
        elif (hasher.algorithm, hasher.node_encoding) != (state.algorithm, state.node_encoding):
            raise InvalidStateException(
                "Snapshot was built with a different hash function",
                details={
                    "state": f"{state.algorithm}/{state.node_encoding}",
                    "hasher": f"{hasher.algorithm}/{hasher.node_encoding}",
                },
            )

        for level, digest in state.slots.items():
            if len(digest) != hasher.digest_size:
                raise InvalidStateException(
                    f"Slot {level} holds a {len(digest)}-byte digest, "
                    f"expected {hasher.digest_size}",
                    details={"level": level},
                )

        tree = cls(hasher)
        tree._slots = dict(state.slots)
        tree._leaf_count = state.leaf_count

        if state.leaf_count and tree.root() != state.root:
            raise InvalidStateException(
                "Snapshot root does not match its slots",
                details={"leaf_count": state.leaf_count},
            )

        logger.info(f"Restored incremental tree at leaf_count={state.leaf_count}")
        return tree

    def _fold_slots(self) -> Digest:
        levels = sorted(self._slots)
        acc = self._slots[levels[0]]
        for level in levels[1:]:
            acc = self.hasher.hash_node(self._slots[level], acc)
        return acc

    def _check_digest(self, leaf: Digest) -> Digest:
        if len(leaf) != self.hasher.digest_size:
            logger.warning(
                f"Rejected {len(leaf)}-byte leaf, expected {self.hasher.digest_size}"
            )
            raise DigestSizeException(
                f"Leaf digest must be {self.hasher.digest_size} bytes, got {len(leaf)}",
                expected=self.hasher.digest_size,
                actual=len(leaf),
            )
        return bytes(leaf)

    def __len__(self) -> int:
        return self._leaf_count

    def __repr__(self) -> str:
        return (
            f"IncrementalMerkleTree(leaf_count={self._leaf_count}, "
            f"levels={sorted(self._slots)}, hasher={self.hasher!r})"
        )


__all__ = ["IncrementalMerkleTree"]
