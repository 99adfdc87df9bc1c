"""
Test fixtures package for incmerkle tests.

Provides factory functions for leaf digests.

Usage:
    from fixtures import make_leaves, make_letter_leaves

    def test_something():
        leaves = make_leaves(7)
"""

from .common import (
    LETTERS,
    make_leaves,
    make_letter_leaves,
    popcount,
)

__all__ = [
    "LETTERS",
    "make_leaves",
    "make_letter_leaves",
    "popcount",
]
