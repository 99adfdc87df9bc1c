"""
Schemas
File: __init__.py

Purpose: Export the public API for the schemas module.
"""

# Error models and exceptions
from .errors import (
    DigestSizeError,
    DigestSizeException,
    EmptyInputException,
    EmptyTreeException,
    ErrorCodes,
    InvalidStateException,
    MerkleError,
    MerkleException,
    UnsupportedHashException,
)

# Incremental tree snapshot
from .state import TreeState, occupied_levels

__all__ = [
    # Errors
    "ErrorCodes",
    "MerkleError",
    "DigestSizeError",
    "MerkleException",
    "EmptyInputException",
    "EmptyTreeException",
    "DigestSizeException",
    "InvalidStateException",
    "UnsupportedHashException",
    # State
    "TreeState",
    "occupied_levels",
]
