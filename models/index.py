from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Index:
    """Position in the displayed list: one-based for users, zero-based internally."""

    zero_based: int

    def __post_init__(self) -> None:
        if self.zero_based < 0:
            raise ValueError("Index must be a positive integer")

    @classmethod
    def from_one_based(cls, one_based: int) -> "Index":
        return cls(one_based - 1)

    @classmethod
    def from_zero_based(cls, zero_based: int) -> "Index":
        return cls(zero_based)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1

    def __str__(self) -> str:
        return str(self.one_based)
