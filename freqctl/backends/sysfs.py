"""Linux sysfs accessor for cpufreq and thermal-zone pseudo-files.

Reads and writes:
- /sys/devices/system/cpu/cpuN/cpufreq/*: frequency bounds and governor
- /sys/class/thermal/thermal_zoneN/temp: temperature in millidegrees Celsius

Writing requires root or write permission on the cpufreq files.
"""

from __future__ import annotations

import re
from pathlib import Path

from freqctl.backends.base import NO_TEMPERATURE, CPUAccessor
from freqctl.errors import SysfsIOError, SysfsParseError
from freqctl.utils.logger import Logger

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def _strip_newline(text: str) -> str:
    """Remove exactly one trailing newline, if present."""
    if text.endswith("\n"):
        return text[:-1]
    return text


def parse_int(path: str | Path, text: str) -> int:
    """Parse pseudo-file contents as a signed base-10 integer.

    Args:
        path: Source path, used in the error message.
        text: Contents with the trailing newline already removed.

    Raises:
        SysfsParseError: If text is not an integer.
    """
    if not _INT_PATTERN.fullmatch(text):
        raise SysfsParseError(str(path), text)
    return int(text)


class SysfsAccessor(CPUAccessor):
    """Accessor backed by the real sysfs tree.

    The roots are configurable so a fake directory tree can stand in for
    /sys in tests.
    """

    CPU_ROOT = Path("/sys/devices/system/cpu")
    THERMAL_ROOT = Path("/sys/class/thermal")

    def __init__(
        self,
        cpu_root: str | Path | None = None,
        thermal_root: str | Path | None = None,
    ) -> None:
        self.cpu_root = Path(cpu_root) if cpu_root else self.CPU_ROOT
        self.thermal_root = Path(thermal_root) if thermal_root else self.THERMAL_ROOT

    def cpu_path(self, cpu_name: str, sub_path: str) -> Path:
        """Return the path of a file under a core's directory."""
        return self.cpu_root / cpu_name / sub_path

    def thermal_path(self, cpu_name: str, sub_path: str = "temp") -> Path:
        """Return the thermal-zone path matching a core (cpu3 -> thermal_zone3)."""
        return self.thermal_root / cpu_name.replace("cpu", "thermal_zone") / sub_path

    def read_str(self, cpu_name: str, sub_path: str) -> str:
        """Read a core pseudo-file as text."""
        return self._read(self.cpu_path(cpu_name, sub_path))

    def read_int(self, cpu_name: str, sub_path: str) -> int:
        """Read a core pseudo-file as an integer."""
        path = self.cpu_path(cpu_name, sub_path)
        return parse_int(path, self._read(path))

    def read_temp(self, cpu_name: str, sub_path: str = "temp") -> int:
        """Read the core's thermal zone, or NO_TEMPERATURE if there is none."""
        path = self.thermal_path(cpu_name, sub_path)
        if not path.exists():
            Logger.debug_if_configured(
                "sysfs", f"No thermal zone for {cpu_name} at {path}"
            )
            return NO_TEMPERATURE
        return parse_int(path, self._read(path))

    def write(self, cpu_name: str, sub_path: str, value: int | str) -> None:
        """Write str(value) to a core pseudo-file."""
        path = self.cpu_path(cpu_name, sub_path)
        data = str(value)
        try:
            # Kernel rejections (e.g. unknown governor) surface on write/close
            with open(path, "w") as f:
                f.write(data)
        except OSError as e:
            raise SysfsIOError(str(path), "write", e) from e
        Logger.debug_if_configured("sysfs", f"Wrote {data!r} to {path}")

    @staticmethod
    def _read(path: Path) -> str:
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise SysfsIOError(str(path), "read", e) from e
        try:
            text = data.decode()
        except UnicodeDecodeError as e:
            raise SysfsParseError(
                str(path), data.decode(errors="backslashreplace")
            ) from e
        return _strip_newline(text)
