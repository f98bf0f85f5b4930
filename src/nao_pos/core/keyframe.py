"""Keyframe PyTree data structures produced by the pos file parser.

This module defines immutable, JAX-compatible containers for sparse
per-joint values and the timestamped keyframes built from them.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import jax.numpy as jnp
from jax import Array
from flax import struct

from nao_pos.errors import PosParseError


@struct.dataclass
class SparseJointVector:
    """Values for an explicit subset of joints.

    Only joints that were mentioned on a line are present. Joint indexes are
    kept as static metadata so the vector can pass through ``jax.jit``.

    Attributes:
        indexes: Strictly increasing joint indexes. Marked as a static field.
        values: Array of shape (len(indexes),) with one value per index.
    """
    indexes: Tuple[int, ...] = struct.field(pytree_node=False)
    values: Array

    def __post_init__(self):
        for previous, current in zip(self.indexes, self.indexes[1:]):
            if current <= previous:
                raise ValueError(
                    f"Joint indexes must be strictly increasing, got {self.indexes}"
                )

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[int, float]]) -> "SparseJointVector":
        pairs = list(pairs)
        indexes = tuple(index for index, _ in pairs)
        values = jnp.asarray([value for _, value in pairs], dtype=jnp.float64)
        return cls(indexes=indexes, values=values)

    @classmethod
    def empty(cls) -> "SparseJointVector":
        return cls.from_pairs([])

    def pairs(self) -> List[Tuple[int, float]]:
        """Return the vector as a list of ``(joint_index, value)`` pairs."""
        return [(index, float(value)) for index, value in zip(self.indexes, self.values)]

    def to_dense(self, num_joints: int, fill: float = 0.0) -> Array:
        """Scatter the sparse values into a dense array of length ``num_joints``.

        Args:
            num_joints: Length of the dense output.
            fill: Value for joints without an explicit entry.

        Returns:
            Array of shape (num_joints,).

        Raises:
            ValueError: If an index falls outside [0, num_joints).
        """
        if self.indexes and (self.indexes[0] < 0 or self.indexes[-1] >= num_joints):
            raise ValueError(
                f"Joint indexes {self.indexes} out of range for {num_joints} joints"
            )
        dense = jnp.full((num_joints,), fill, dtype=jnp.float64)
        if not self.indexes:
            return dense
        return dense.at[jnp.asarray(self.indexes)].set(self.values)

    def __len__(self) -> int:
        return len(self.indexes)


@struct.dataclass
class KeyFrame:
    """One timestamped pose with its stiffness settings.

    Attributes:
        time: Cumulative time at the end of this frame (sum of all durations
              up to and including this frame).
        positions: Joint targets in radians.
        stiffnesses: Joint stiffnesses, nominally in [0, 1].
    """
    time: int = struct.field(pytree_node=False)
    positions: SparseJointVector
    stiffnesses: SparseJointVector


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a pos file.

    ``keyframes`` is only meaningful when ``successful`` is True; on failure
    it holds whatever was parsed before the first error, and ``error`` holds
    that error.
    """
    successful: bool
    keyframes: Tuple[KeyFrame, ...] = ()
    error: Optional[PosParseError] = None
