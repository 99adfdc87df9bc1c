"""
Common test fixtures shared by all modules.

Provides factory functions for leaf digests used across the batch and
incremental tree tests.
"""

from incmerkle.crypto.hashing import SHA256, HashFunction


LETTERS = [
    "a", "b", "c", "d", "e", "f", "g", "h", "i", "j", "k", "l", "m", "n",
]


def make_leaves(count: int, hasher: HashFunction = SHA256, prefix: str = "leaf") -> list[bytes]:
    """Create `count` distinct leaf digests."""
    return [hasher.hash_leaf(f"{prefix}{i}".encode()) for i in range(count)]


def make_letter_leaves(hasher: HashFunction = SHA256) -> list[bytes]:
    """Leaf digests of "a".."n" (14 leaves)."""
    return [hasher.hash_leaf(letter.encode()) for letter in LETTERS]


def popcount(n: int) -> int:
    return bin(n).count("1")
