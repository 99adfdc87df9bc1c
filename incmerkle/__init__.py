"""
incmerkle - Merkle roots in batch and incremental mode.

Usage:
    from incmerkle import IncrementalMerkleTree, BatchMerkleTree, SHA256

    leaves = [SHA256.hash_leaf(c.encode()) for c in "abcdefghijklmn"]
    tree = IncrementalMerkleTree()
    for i, leaf in enumerate(leaves):
        assert tree.insert(leaf) == BatchMerkleTree().root(leaves[: i + 1])
"""

__version__ = "0.1.0"

from incmerkle.crypto import (
    Digest,
    HashFunction,
    SHA256,
    SHA3_256,
    get_hash_function,
    sha256,
    hash_bytes,
    to_hex,
    from_hex,
)
from incmerkle.merkle import (
    BatchMerkleTree,
    IncrementalMerkleTree,
    merkle_parent,
    build_merkle_root,
    compute_tree_depth,
)
from incmerkle.schemas import (
    ErrorCodes,
    MerkleError,
    MerkleException,
    EmptyInputException,
    EmptyTreeException,
    DigestSizeException,
    InvalidStateException,
    UnsupportedHashException,
    TreeState,
)
from incmerkle.config import (
    RuntimeConfig,
    get_default_config,
    set_default_config,
    setup_logging,
)

__all__ = [
    "__version__",
    # Hashing
    "Digest",
    "HashFunction",
    "SHA256",
    "SHA3_256",
    "get_hash_function",
    "sha256",
    "hash_bytes",
    "to_hex",
    "from_hex",
    # Trees
    "BatchMerkleTree",
    "IncrementalMerkleTree",
    "merkle_parent",
    "build_merkle_root",
    "compute_tree_depth",
    # Errors and state
    "ErrorCodes",
    "MerkleError",
    "MerkleException",
    "EmptyInputException",
    "EmptyTreeException",
    "DigestSizeException",
    "InvalidStateException",
    "UnsupportedHashException",
    "TreeState",
    # Config
    "RuntimeConfig",
    "get_default_config",
    "set_default_config",
    "setup_logging",
]
