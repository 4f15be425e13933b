"""Kernel-interface accessors for per-core CPU pseudo-files."""

from freqctl.backends.base import NO_TEMPERATURE, CPUAccessor
from freqctl.backends.sysfs import SysfsAccessor

__all__ = ["NO_TEMPERATURE", "CPUAccessor", "SysfsAccessor"]
