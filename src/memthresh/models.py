"""Data models for memthresh."""

from dataclasses import dataclass
from enum import Enum

from memthresh.errors import InvalidModeError


class ComparisonMode(Enum):
    """Which usage ratio is checked against the threshold."""

    RAM = "RAM"
    SWAP = "SWAP"
    COMB = "COMB"

    @classmethod
    def parse(cls, value: str) -> "ComparisonMode":
        """
        Map a command-line string onto a mode.

        The match is case-sensitive: "ram" is rejected.

        Raises:
            InvalidModeError: If the string names no mode.
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidModeError(value) from None


@dataclass(slots=True, frozen=True)
class MemoryStats:
    """Immutable snapshot of the four meminfo fields, in kibibytes."""

    mem_total: int = 0
    mem_available: int = 0
    swap_total: int = 0
    swap_free: int = 0


@dataclass(slots=True, frozen=True)
class UsageRatios:
    """Usage fractions derived from a MemoryStats snapshot."""

    ram_ratio: float
    swap_ratio: float
    comb_ratio: float

    def select(self, mode: ComparisonMode) -> float:
        """Return the ratio the given mode compares against."""
        if mode is ComparisonMode.RAM:
            return self.ram_ratio
        if mode is ComparisonMode.SWAP:
            return self.swap_ratio
        return self.comb_ratio


@dataclass(slots=True, frozen=True)
class Invocation:
    """A validated request: compare `mode` against `threshold`, then run `command`."""

    mode: ComparisonMode
    threshold: float  # 0.0 - 1.0, already divided by 100
    command: str
