"""Memory statistics reader and ratio calculator for memthresh."""

import logging
from pathlib import Path

from memthresh.config import DEFAULT_MEMINFO_PATH
from memthresh.errors import StatisticsUnavailableError
from memthresh.models import MemoryStats, UsageRatios

logger = logging.getLogger(__name__)

_DIGITS = "0123456789"
_FIELD_MAX = 2**63 - 1  # larger digit runs count as unparsable


def read_meminfo(path: str = DEFAULT_MEMINFO_PATH) -> str:
    """
    Read the whole statistics file.

    Args:
        path: Location of the meminfo-formatted text. Default /proc/meminfo.

    Raises:
        StatisticsUnavailableError: If the file is missing or unreadable.
    """
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise StatisticsUnavailableError(path, exc) from exc


def find_field(text: str, label: str) -> int:
    """
    Return the first integer on the first line starting with `label`.

    Characters after the label are skipped up to the first ASCII digit, then
    the longest run of digits is taken. A missing label or a line without
    digits yields 0, as does a digit run too large for a signed 64-bit value.
    Lines are split on newlines only, with a trailing carriage return dropped.
    """
    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        if not line.startswith(label):
            continue

        rest = line[len(label):]
        start = 0
        while start < len(rest) and rest[start] not in _DIGITS:
            start += 1
        end = start
        while end < len(rest) and rest[end] in _DIGITS:
            end += 1

        digits = rest[start:end]
        if not digits:
            return 0
        # more than 19 significant digits cannot fit in 64 bits
        if len(digits.lstrip("0")) > len(str(_FIELD_MAX)):
            return 0
        value = int(digits)
        return value if value <= _FIELD_MAX else 0
    return 0


def parse_meminfo(text: str) -> MemoryStats:
    """Extract the four fields memthresh needs from meminfo text."""
    return MemoryStats(
        mem_total=find_field(text, "MemTotal:"),
        mem_available=find_field(text, "MemAvailable:"),
        swap_total=find_field(text, "SwapTotal:"),
        swap_free=find_field(text, "SwapFree:"),
    )


def _ratio(total: int, free: int) -> float:
    if total == 0:
        return 0.0
    return (total - free) / total


def compute_ratios(stats: MemoryStats) -> UsageRatios:
    """Derive RAM, swap and combined usage fractions. Zero totals give 0.0."""
    return UsageRatios(
        ram_ratio=_ratio(stats.mem_total, stats.mem_available),
        swap_ratio=_ratio(stats.swap_total, stats.swap_free),
        comb_ratio=_ratio(
            stats.mem_total + stats.swap_total,
            stats.mem_available + stats.swap_free,
        ),
    )


def collect_stats(path: str = DEFAULT_MEMINFO_PATH) -> MemoryStats:
    """Read and parse the statistics file in one step."""
    stats = parse_meminfo(read_meminfo(path))
    logger.debug("Parsed %s: %s", path, stats)
    return stats


def collect_ratios(path: str = DEFAULT_MEMINFO_PATH) -> UsageRatios:
    """Read the statistics file and compute the current usage ratios."""
    ratios = compute_ratios(collect_stats(path))
    logger.debug("Usage ratios: %s", ratios)
    return ratios
