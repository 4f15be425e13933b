"""The CPU state entity: one logical core and its cpufreq/thermal attributes."""

from __future__ import annotations

from freqctl.backends.base import NO_TEMPERATURE, CPUAccessor
from freqctl.backends.sysfs import SysfsAccessor
from freqctl.models.cpu_models import CPUInfo, WritableValue
from freqctl.procstat import ProcStat, calculate_cpu_percent
from freqctl.utils.logger import Logger


class CPU:
    """A single logical core.

    Only ``name`` and ``index`` are known at construction. The other
    attributes are filled by ``update()`` (or ``init_cpu()``), which reads
    through the accessor. ``set_max``, ``set_min`` and ``set_gov`` write to
    the kernel first and only change the in-memory value if the write
    succeeded.

    Attributes:
        index: Core ordinal.
        max_freq: Scaling maximum frequency in kHz.
        min_freq: Scaling minimum frequency in kHz.
        cur_freq: Current frequency in kHz.
        cur_temp: Temperature in millidegrees Celsius, NO_TEMPERATURE if the
            core has no thermal zone.
        cur_usage: Utilization percentage from the last update_usage().
        governor: Scaling governor.
    """

    def __init__(
        self, name: str, index: int, accessor: CPUAccessor | None = None
    ) -> None:
        self._name = name
        self.index = index
        self.accessor = accessor if accessor is not None else SysfsAccessor()
        self.max_freq = 0
        self.min_freq = 0
        self.cur_freq = 0
        self.cur_temp = NO_TEMPERATURE
        self.cur_usage = 0.0
        self.governor = ""

    @property
    def name(self) -> str:
        """Core name, e.g. "cpu0"."""
        return self._name

    @property
    def has_temperature(self) -> bool:
        """Whether the last temperature read found a thermal zone."""
        return self.cur_temp != NO_TEMPERATURE

    def __repr__(self) -> str:
        """Return a string representation of the core."""
        return (
            f"CPU(name='{self.name}', max={self.max_freq}, min={self.min_freq}, "
            f"cur={self.cur_freq}, temp={self.cur_temp}, gov='{self.governor}')"
        )

    def init_cpu(self) -> None:
        """Take the first readings of a freshly constructed core."""
        self.update()

    def update(self) -> None:
        """Refresh every attribute from the kernel.

        Errors propagate as they occur. Attributes refreshed before the
        failure keep their new values.
        """
        self.get_max()
        self.get_min()
        self.get_cur()
        self.get_temp()
        self.get_gov()

    def update_usage(self, previous: ProcStat, current: ProcStat) -> None:
        """Set cur_usage from two /proc/stat snapshots of this core."""
        self.cur_usage = calculate_cpu_percent(previous, current)

    def get_max(self) -> int:
        self.max_freq = self.accessor.read_int(self.name, WritableValue.MAX.sub_path)
        return self.max_freq

    def get_min(self) -> int:
        self.min_freq = self.accessor.read_int(self.name, WritableValue.MIN.sub_path)
        return self.min_freq

    def get_cur(self) -> int:
        self.cur_freq = self.accessor.read_int(self.name, "cpufreq/scaling_cur_freq")
        return self.cur_freq

    def get_temp(self) -> int:
        self.cur_temp = self.accessor.read_temp(self.name, "temp")
        return self.cur_temp

    def get_gov(self) -> str:
        self.governor = self.accessor.read_str(
            self.name, WritableValue.GOVERNOR.sub_path
        )
        return self.governor

    def set_max(self, max_freq: int) -> None:
        """Write the scaling maximum frequency (kHz)."""
        self.write_value(WritableValue.MAX, max_freq)

    def set_min(self, min_freq: int) -> None:
        """Write the scaling minimum frequency (kHz)."""
        self.write_value(WritableValue.MIN, min_freq)

    def set_gov(self, governor: str) -> None:
        """Write the scaling governor."""
        self.write_value(WritableValue.GOVERNOR, governor)

    def write_value(self, kind: WritableValue, value: int | str) -> None:
        """Write a value to the kernel, then store it on the matching attribute.

        The kernel may clamp frequencies silently; call get_max()/get_min() to
        see what was actually applied.

        Raises:
            SysfsIOError: If the write fails. The attribute is left unchanged.
        """
        self.accessor.write(self.name, kind.sub_path, value)
        setattr(self, kind.attribute, value)
        Logger.debug_if_configured("cpu", f"{self.name} {kind.attribute} -> {value}")

    def to_model(self) -> CPUInfo:
        """Return the current state as a CPUInfo model."""
        return CPUInfo(
            name=self.name,
            index=self.index,
            max_freq_khz=self.max_freq,
            min_freq_khz=self.min_freq,
            cur_freq_khz=self.cur_freq,
            temperature_c=self.cur_temp / 1000.0 if self.has_temperature else None,
            usage_percent=self.cur_usage,
            governor=self.governor,
        )
