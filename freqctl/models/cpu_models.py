"""CPU attribute dispatch and Pydantic models for JSON output."""

from enum import Enum

from pydantic import BaseModel, Field


class WritableValue(str, Enum):
    """The per-core attributes that can be written back to the kernel.

    Each member maps to one cpufreq pseudo-file and one CPU attribute.
    """

    MAX = "max"
    MIN = "min"
    GOVERNOR = "gov"

    @property
    def sub_path(self) -> str:
        """Path of the pseudo-file relative to the core directory."""
        return _SUB_PATHS[self]

    @property
    def attribute(self) -> str:
        """Name of the CPU attribute holding the value."""
        return _ATTRIBUTES[self]


_SUB_PATHS = {
    WritableValue.MAX: "cpufreq/scaling_max_freq",
    WritableValue.MIN: "cpufreq/scaling_min_freq",
    WritableValue.GOVERNOR: "cpufreq/scaling_governor",
}

_ATTRIBUTES = {
    WritableValue.MAX: "max_freq",
    WritableValue.MIN: "min_freq",
    WritableValue.GOVERNOR: "governor",
}


class CPUInfo(BaseModel):
    """State of a single logical core."""

    name: str = Field(..., description="Core name (e.g., 'cpu0')")
    index: int = Field(..., description="Core index", ge=0)
    max_freq_khz: int = Field(..., description="Scaling maximum frequency in kHz", ge=0)
    min_freq_khz: int = Field(..., description="Scaling minimum frequency in kHz", ge=0)
    cur_freq_khz: int = Field(..., description="Current frequency in kHz", ge=0)
    temperature_c: float | None = Field(
        None, description="Thermal zone temperature in Celsius, None if no sensor"
    )
    usage_percent: float = Field(
        0.0, description="Utilization over the last sample", ge=0.0, le=100.0
    )
    governor: str = Field(..., description="Scaling governor (e.g., 'powersave')")


class CPUListOutput(BaseModel):
    """Output of the view command."""

    model: str = Field(..., description="CPU model name")
    physical_cores: int | None = Field(None, description="Number of physical cores")
    logical_cores: int | None = Field(None, description="Number of logical cores")
    turbo: bool | None = Field(None, description="Turbo/boost enabled, None if unknown")
    available_governors: list[str] = Field(default_factory=list)
    cpus: list[CPUInfo] = Field(default_factory=list)
