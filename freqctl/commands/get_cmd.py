"""Get command - read a single attribute across cores."""

from __future__ import annotations

from freqctl.backends.sysfs import SysfsAccessor
from freqctl.config import Settings
from freqctl.display import print_freqs, print_turbo, print_values
from freqctl.system import get_available_governors, get_cpu_model, get_turbo, list_cpus

ATTRIBUTES = ("freq", "max", "min", "temp", "gov", "governors", "turbo")


def run_get(settings: Settings, attribute: str, raw: bool = False) -> None:
    """Print one attribute for every core.

    Args:
        settings: Filesystem roots.
        attribute: One of ATTRIBUTES.
        raw: Machine-readable output.
    """
    if attribute not in ATTRIBUTES:
        raise ValueError(f"Unknown attribute: {attribute}")

    accessor = SysfsAccessor(settings.cpu_root, settings.thermal_root)

    if attribute == "turbo":
        print_turbo(get_turbo(accessor), raw)
        return
    if attribute == "governors":
        print_values(get_available_governors(accessor), raw)
        return

    cpus = list_cpus(accessor)
    if attribute == "freq":
        for cpu in cpus:
            cpu.get_cur()
        print_freqs(cpus, get_cpu_model(settings.cpuinfo), raw)
    elif attribute == "max":
        print_values([cpu.get_max() for cpu in cpus], raw)
    elif attribute == "min":
        print_values([cpu.get_min() for cpu in cpus], raw)
    elif attribute == "temp":
        print_values([cpu.get_temp() for cpu in cpus], raw)
    elif attribute == "gov":
        print_values([cpu.get_gov() for cpu in cpus], raw)
