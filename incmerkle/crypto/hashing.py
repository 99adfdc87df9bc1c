"""
Hashing Primitives
Leaf and node hashing over a pluggable hashlib algorithm.

This module provides:
- Digest: fixed-width bytes produced by a hash function
- HashFunction: hash_leaf / hash_node pair sharing one primitive
- SHA256 / SHA3_256 ready-made instances
- Hex encoding/decoding with 0x prefix

Node Hashing Rules (Hard Contracts):
1. Leaf hashing: leaf = H(data)
2. Node hashing ("raw"): parent = H(left + right)
3. Node hashing ("hex"): parent = H("0x<left hex>" + "0x<right hex>")
4. Operands are never sorted - hash_node(a, b) != hash_node(b, a)

Security/Determinism Notes:
- Always hash raw bytes exactly as given
- All operations are deterministic and side-effect free
"""
from __future__ import annotations

import hashlib
import logging
from typing import Any, Callable

from incmerkle.schemas.errors import UnsupportedHashException


logger = logging.getLogger(__name__)


Digest = bytes

# Supported primitives, keyed by the name used in configuration
HASH_ALGORITHMS: dict[str, Callable[..., Any]] = {
    "sha256": hashlib.sha256,
    "sha3_256": hashlib.sha3_256,
}

NODE_ENCODINGS = ("raw", "hex")


def sha256(data: bytes) -> Digest:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def hash_bytes(data: bytes) -> Digest:
    """Alias for sha256()."""
    return sha256(data)


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert hexadecimal string (with 0x prefix) to bytes.

    Raises:
        ValueError: If string doesn't start with 0x, has odd length,
                   or contains invalid hex characters
    """
    if not hex_string.startswith("0x"):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    hex_content = hex_string[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


class HashFunction:
    """
    A leaf/node hash pair over a single hashlib primitive.

    Instances are immutable and safe to share between trees and threads.

    Example:
        >>> h = HashFunction("sha256")
        >>> leaf = h.hash_leaf(b"a")
        >>> len(h.hash_node(leaf, leaf))
        32
    """

    __slots__ = ("_algorithm", "_node_encoding", "_factory", "_digest_size")

    def __init__(self, algorithm: str = "sha256", node_encoding: str = "raw") -> None:
        factory = HASH_ALGORITHMS.get(algorithm)
        if factory is None:
            raise UnsupportedHashException(
                f"Unsupported hash algorithm: {algorithm!r}",
                details={"algorithm": algorithm, "supported": sorted(HASH_ALGORITHMS)},
            )
        if node_encoding not in NODE_ENCODINGS:
            raise UnsupportedHashException(
                f"Unsupported node encoding: {node_encoding!r}",
                details={"node_encoding": node_encoding, "supported": list(NODE_ENCODINGS)},
            )
        self._algorithm = algorithm
        self._node_encoding = node_encoding
        self._factory = factory
        self._digest_size = factory().digest_size

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def node_encoding(self) -> str:
        return self._node_encoding

    @property
    def digest_size(self) -> int:
        """Width in bytes of every Digest this function produces."""
        return self._digest_size

    def hash_leaf(self, data: bytes) -> Digest:
        """Map arbitrary input bytes to a Digest."""
        return self._factory(data).digest()

    def hash_node(self, left: Digest, right: Digest) -> Digest:
        """
        Combine an ordered pair of child digests into a parent digest.

        Args:
            left: Digest of the earlier (lower-index) subtree
            right: Digest of the later subtree

        Returns:
            Parent digest
        """
        if self._node_encoding == "hex":
            payload = (to_hex(left) + to_hex(right)).encode("ascii")
        else:
            payload = left + right
        return self._factory(payload).digest()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashFunction):
            return NotImplemented
        return (
            self._algorithm == other._algorithm
            and self._node_encoding == other._node_encoding
        )

    def __hash__(self) -> int:
        return hash((self._algorithm, self._node_encoding))

    def __repr__(self) -> str:
        return (
            f"HashFunction(algorithm={self._algorithm!r}, "
            f"node_encoding={self._node_encoding!r})"
        )


SHA256 = HashFunction("sha256")
SHA3_256 = HashFunction("sha3_256")


def get_hash_function(algorithm: str = "sha256", node_encoding: str = "raw") -> HashFunction:
    """Return a HashFunction for the given configuration names."""
    if node_encoding == "raw":
        if algorithm == "sha256":
            return SHA256
        if algorithm == "sha3_256":
            return SHA3_256
    logger.debug(f"Building hash function: algorithm={algorithm} encoding={node_encoding}")
    return HashFunction(algorithm, node_encoding)


__all__ = [
    "Digest",
    "HASH_ALGORITHMS",
    "NODE_ENCODINGS",
    "HashFunction",
    "SHA256",
    "SHA3_256",
    "get_hash_function",
    "sha256",
    "hash_bytes",
    "to_hex",
    "from_hex",
]
