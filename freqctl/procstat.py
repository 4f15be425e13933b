"""CPU time counters from /proc/stat and the utilization calculation.

Each ``cpu``/``cpuN`` line of /proc/stat holds cumulative jiffies spent in
each state since boot:

    cpu  user nice system idle iowait irq softirq steal guest guest_nice

Utilization is derived from the delta between two snapshots of the same line.
guest and guest_nice are already included in user and nice, so they are not
part of a snapshot.
"""

from __future__ import annotations

import re
import time
from dataclasses import astuple, dataclass
from pathlib import Path

from freqctl.config import DEFAULT_PROC_STAT, DEFAULT_SAMPLE_INTERVAL
from freqctl.errors import ProcStatError, SysfsIOError
from freqctl.utils.logger import Logger

CATEGORIES = (
    "user",
    "nice",
    "system",
    "idle",
    "iowait",
    "irq",
    "softirq",
    "steal",
)

# Kernels before 2.5.41 only report the first four columns
_MIN_COLUMNS = 4

_COUNTER_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class ProcStat:
    """One snapshot of cumulative time-in-state counters, in jiffies."""

    user: int
    nice: int
    system: int
    idle: int
    iowait: int = 0
    irq: int = 0
    softirq: int = 0
    steal: int = 0

    def __post_init__(self) -> None:
        """Reject negative counters."""
        for category, value in zip(CATEGORIES, astuple(self)):
            if value < 0:
                raise ValueError(f"{category} counter must not be negative: {value}")

    @property
    def total(self) -> int:
        """Sum of all categories."""
        return sum(astuple(self))

    @classmethod
    def from_line(cls, line: str) -> ProcStat:
        """Parse a ``cpu``/``cpuN`` line of /proc/stat.

        Raises:
            ProcStatError: If the line has too few or non-numeric columns.
        """
        parts = line.split()
        counters = parts[1 : len(CATEGORIES) + 1]
        if len(counters) < _MIN_COLUMNS:
            raise ProcStatError(f"Too few columns in /proc/stat line: {line!r}")
        if not all(_COUNTER_PATTERN.fullmatch(value) for value in counters):
            raise ProcStatError(f"Malformed /proc/stat line: {line!r}")
        return cls(*(int(value) for value in counters))


def parse_proc_stat(text: str) -> dict[str, ProcStat]:
    """Parse every cpu line of /proc/stat contents.

    Returns:
        Mapping of line label ("cpu" for the aggregate, "cpu0", ...) to snapshot
    """
    stats: dict[str, ProcStat] = {}
    for line in text.splitlines():
        if line.startswith("cpu"):
            label = line.split(maxsplit=1)[0]
            stats[label] = ProcStat.from_line(line)
    return stats


def read_all_proc_stat(path: str | Path = DEFAULT_PROC_STAT) -> dict[str, ProcStat]:
    """Read and parse every cpu line of /proc/stat.

    Raises:
        SysfsIOError: If the file cannot be read.
        ProcStatError: If a cpu line is malformed.
    """
    try:
        text = Path(path).read_text()
    except OSError as e:
        raise SysfsIOError(str(path), "read", e) from e
    return parse_proc_stat(text)


def read_proc_stat(
    cpu: str | None = None, path: str | Path = DEFAULT_PROC_STAT
) -> ProcStat:
    """Take one snapshot of the aggregate line or of a single core.

    Args:
        cpu: Core name such as "cpu3", or None for the aggregate "cpu" line.
        path: Location of /proc/stat.

    Raises:
        SysfsIOError: If the file cannot be read.
        ProcStatError: If the requested line is missing or malformed.
    """
    label = cpu or "cpu"
    stats = read_all_proc_stat(path)
    if label not in stats:
        raise ProcStatError(f"No '{label}' line in {path}")
    return stats[label]


def calculate_cpu_percent(previous: ProcStat, current: ProcStat) -> float:
    """Compute utilization between two snapshots of the same source.

    A non-positive total delta (zero-length interval or counter reset) is a
    degenerate sample and yields 0.0. The result is clamped to [0, 100].

    Args:
        previous: Earlier snapshot.
        current: Later snapshot.

    Returns:
        Utilization percentage.
    """
    total_delta = current.total - previous.total
    if total_delta <= 0:
        Logger.debug_if_configured(
            "procstat", f"Degenerate sample (total delta {total_delta}), reporting 0.0"
        )
        return 0.0

    idle_delta = current.idle - previous.idle
    percent = 100.0 * (1.0 - idle_delta / total_delta)
    return max(0.0, min(100.0, percent))


def sample_cpu_percent(
    cpu: str | None = None,
    interval: float = DEFAULT_SAMPLE_INTERVAL,
    path: str | Path = DEFAULT_PROC_STAT,
) -> float:
    """Measure utilization by taking two snapshots ``interval`` seconds apart.

    Blocks the calling thread for the interval.
    """
    previous = read_proc_stat(cpu, path)
    time.sleep(interval)
    current = read_proc_stat(cpu, path)
    return calculate_cpu_percent(previous, current)
