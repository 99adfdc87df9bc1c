"""
Core cryptographic utilities.

Provides the leaf/node hash functions used by both Merkle tree modes.
"""
from .hashing import (
    Digest,
    HASH_ALGORITHMS,
    NODE_ENCODINGS,
    HashFunction,
    SHA256,
    SHA3_256,
    get_hash_function,
    sha256,
    hash_bytes,
    to_hex,
    from_hex,
)

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
