"""
Schemas - Incremental Tree State
File: state.py

Purpose: Immutable snapshot of an IncrementalMerkleTree's level slots,
used to export a running tree and restore it later.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


def occupied_levels(leaf_count: int) -> list[int]:
    """Levels that hold a pending subtree for the given leaf count (set bits)."""
    return [level for level in range(leaf_count.bit_length()) if (leaf_count >> level) & 1]


class TreeState(BaseModel):
    """
    Snapshot of an incremental Merkle tree.

    Invariants enforced on construction:
    - slot levels are exactly the set bits of leaf_count
    - every slot digest has the same width
    - root is present iff leaf_count > 0
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        ser_json_bytes="hex",
        val_json_bytes="hex",
    )

    algorithm: str = Field(default="sha256", min_length=1)
    node_encoding: str = Field(default="raw", min_length=1)
    leaf_count: int = Field(default=0, ge=0, description="Number of leaves consumed")
    slots: dict[int, bytes] = Field(
        default_factory=dict,
        description="Pending subtree digest per occupied level",
    )
    root: bytes | None = Field(default=None, description="Root over all leaves consumed")

    @model_validator(mode="after")
    def validate_slot_levels(self) -> "TreeState":
        """Validate that slot occupancy mirrors the binary form of leaf_count."""
        expected = occupied_levels(self.leaf_count)
        if sorted(self.slots) != expected:
            raise ValueError(
                f"Slot levels {sorted(self.slots)} do not match set bits "
                f"{expected} of leaf_count={self.leaf_count}"
            )
        widths = {len(digest) for digest in self.slots.values()}
        if len(widths) > 1:
            raise ValueError(f"Slot digests have mixed widths: {sorted(widths)}")
        if (self.root is None) != (self.leaf_count == 0):
            raise ValueError("root must be set iff leaf_count > 0")
        return self

    @property
    def slot_count(self) -> int:
        return len(self.slots)
