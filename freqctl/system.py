"""Host-level discovery: cores, governors, turbo state and CPU model.

Uses:
- /sys/devices/system/cpu/cpuN: one directory per logical core
- cpufreq/scaling_available_governors: governors the driver accepts
- intel_pstate/no_turbo or cpufreq/boost: turbo state
- /proc/cpuinfo: CPU model name
- psutil: physical and logical core counts
"""

from __future__ import annotations

import re
import time
from pathlib import Path

import psutil

from freqctl.backends.base import CPUAccessor
from freqctl.backends.sysfs import SysfsAccessor
from freqctl.config import DEFAULT_CPUINFO, DEFAULT_PROC_STAT, DEFAULT_SAMPLE_INTERVAL
from freqctl.cpu import CPU
from freqctl.errors import ProcStatError, SysfsIOError
from freqctl.procstat import read_all_proc_stat
from freqctl.utils.logger import Logger

_CPU_DIR_PATTERN = re.compile(r"cpu(\d+)")


def list_cpus(accessor: SysfsAccessor | None = None) -> list[CPU]:
    """List the cores that expose a cpufreq directory, ordered by index.

    Cores without cpufreq (offline, or no scaling driver) are skipped. The
    returned entities have not been updated yet.

    Raises:
        SysfsIOError: If the cpu root cannot be listed.
    """
    accessor = accessor if accessor is not None else SysfsAccessor()
    try:
        entries = list(accessor.cpu_root.iterdir())
    except OSError as e:
        raise SysfsIOError(str(accessor.cpu_root), "read", e) from e

    cpus: list[CPU] = []
    for entry in entries:
        match = _CPU_DIR_PATTERN.fullmatch(entry.name)
        if not match:
            continue
        if not (entry / "cpufreq").is_dir():
            Logger.debug_if_configured("system", f"Skipping {entry.name}: no cpufreq")
            continue
        cpus.append(CPU(entry.name, int(match.group(1)), accessor))

    return sorted(cpus, key=lambda cpu: cpu.index)


def get_available_governors(
    accessor: CPUAccessor | None = None, cpu_name: str = "cpu0"
) -> list[str]:
    """Return the governors advertised by the scaling driver."""
    accessor = accessor if accessor is not None else SysfsAccessor()
    return accessor.read_str(cpu_name, "cpufreq/scaling_available_governors").split()


def _read_optional_int(accessor: CPUAccessor, directory: str, name: str) -> int | None:
    try:
        return accessor.read_int(directory, name)
    except SysfsIOError as e:
        if isinstance(e.os_error, FileNotFoundError):
            return None
        raise


def get_turbo(accessor: CPUAccessor | None = None) -> bool | None:
    """Return whether turbo/boost is enabled, or None if the host doesn't say.

    intel_pstate exposes the inverse (no_turbo); acpi-cpufreq and amd-pstate
    expose cpufreq/boost.
    """
    accessor = accessor if accessor is not None else SysfsAccessor()

    no_turbo = _read_optional_int(accessor, "intel_pstate", "no_turbo")
    if no_turbo is not None:
        return no_turbo == 0

    boost = _read_optional_int(accessor, "cpufreq", "boost")
    if boost is not None:
        return boost == 1

    return None


def get_cpu_model(path: str | Path = DEFAULT_CPUINFO) -> str:
    """Return the "model name" from /proc/cpuinfo, or "Unknown"."""
    try:
        cpuinfo = Path(path).read_text()
    except OSError:
        return "Unknown"
    match = re.search(r"^model name\s*:\s*(.+)$", cpuinfo, re.MULTILINE)
    return match.group(1).strip() if match else "Unknown"


def get_core_counts() -> dict[str, int | None]:
    """Return physical and logical core counts."""
    return {
        "physical_cores": psutil.cpu_count(logical=False),
        "logical_cores": psutil.cpu_count(logical=True),
    }


def sample_usage(
    cpus: list[CPU],
    interval: float = DEFAULT_SAMPLE_INTERVAL,
    path: str | Path = DEFAULT_PROC_STAT,
) -> None:
    """Set cur_usage on every core from two snapshots ``interval`` seconds apart.

    Raises:
        SysfsIOError: If /proc/stat cannot be read.
        ProcStatError: If a core has no line in /proc/stat.
    """
    previous = read_all_proc_stat(path)
    time.sleep(interval)
    current = read_all_proc_stat(path)

    for cpu in cpus:
        if cpu.name not in previous or cpu.name not in current:
            raise ProcStatError(f"No '{cpu.name}' line in {path}")
        cpu.update_usage(previous[cpu.name], current[cpu.name])
