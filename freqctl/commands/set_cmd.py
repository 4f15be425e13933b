"""Set command - write max/min frequency or governor."""

from __future__ import annotations

import click

from freqctl.backends.sysfs import SysfsAccessor
from freqctl.config import Settings
from freqctl.cpu import CPU
from freqctl.errors import FreqctlError
from freqctl.models.cpu_models import WritableValue
from freqctl.system import list_cpus
from freqctl.utils.logger import Logger


def _select(cpus: list[CPU], indices: tuple[int, ...]) -> list[CPU]:
    if not indices:
        return cpus
    by_index = {cpu.index: cpu for cpu in cpus}
    missing = sorted(set(indices) - by_index.keys())
    if missing:
        raise click.BadParameter(f"No such core(s): {missing}", param_hint="--cpu")
    return [by_index[i] for i in sorted(set(indices))]


def run_set(
    settings: Settings,
    kind: WritableValue,
    value: int | str,
    indices: tuple[int, ...] = (),
) -> list[CPU]:
    """Write a value to the selected cores (all cores by default).

    Stops at the first failing core. Cores written before it keep the new
    value.

    Args:
        settings: Filesystem roots.
        kind: Attribute to write.
        value: Frequency in kHz, or governor name.
        indices: Core indices to write; empty means every core.

    Returns:
        The cores that were written.

    Raises:
        SysfsIOError: If a write is rejected.
    """
    log = Logger.get("set")
    accessor = SysfsAccessor(settings.cpu_root, settings.thermal_root)
    cpus = _select(list_cpus(accessor), indices)

    for cpu in cpus:
        try:
            cpu.write_value(kind, value)
        except FreqctlError:
            log.error(f"Writing {kind.value}={value} to {cpu.name} failed")
            raise
        log.info(f"{cpu.name}: {kind.attribute} = {value}")

    click.echo(f"Set {kind.value} to {value} on {len(cpus)} core(s)")
    return cpus
