"""Runtime settings loaded from FREQCTL_* environment variables."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from freqctl.utils.env import get_env

DEFAULT_CPU_ROOT = "/sys/devices/system/cpu"
DEFAULT_THERMAL_ROOT = "/sys/class/thermal"
DEFAULT_PROC_STAT = "/proc/stat"
DEFAULT_CPUINFO = "/proc/cpuinfo"
DEFAULT_SAMPLE_INTERVAL = 0.2
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Filesystem roots and sampling defaults.

    Attributes:
        cpu_root: Directory holding cpuN subdirectories.
        thermal_root: Directory holding thermal_zoneN subdirectories.
        proc_stat: Path to the kernel statistics file.
        cpuinfo: Path to the cpuinfo file.
        sample_interval: Seconds between the two utilization snapshots.
        log_level: Log level name used by the CLI.
    """

    cpu_root: Path = Path(DEFAULT_CPU_ROOT)
    thermal_root: Path = Path(DEFAULT_THERMAL_ROOT)
    proc_stat: Path = Path(DEFAULT_PROC_STAT)
    cpuinfo: Path = Path(DEFAULT_CPUINFO)
    sample_interval: float = DEFAULT_SAMPLE_INTERVAL
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings() -> Settings:
    """Build Settings from the environment.

    Raises:
        EnvVarTypeError: If FREQCTL_SAMPLE_INTERVAL is not a number.
    """
    interval = get_env(
        "FREQCTL_SAMPLE_INTERVAL", default=DEFAULT_SAMPLE_INTERVAL, as_type=float
    )
    if interval < 0:
        raise ValueError("FREQCTL_SAMPLE_INTERVAL must not be negative")

    return Settings(
        cpu_root=Path(get_env("FREQCTL_CPU_ROOT", default=DEFAULT_CPU_ROOT, log=True)),
        thermal_root=Path(
            get_env("FREQCTL_THERMAL_ROOT", default=DEFAULT_THERMAL_ROOT, log=True)
        ),
        proc_stat=Path(get_env("FREQCTL_PROC_STAT", default=DEFAULT_PROC_STAT)),
        cpuinfo=Path(get_env("FREQCTL_CPUINFO", default=DEFAULT_CPUINFO)),
        sample_interval=interval,
        log_level=get_env("FREQCTL_LOG_LEVEL", default=DEFAULT_LOG_LEVEL),
    )
