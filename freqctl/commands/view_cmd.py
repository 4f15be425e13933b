"""View command - full state of every core."""

from __future__ import annotations

import click

from freqctl.backends.sysfs import SysfsAccessor
from freqctl.config import Settings
from freqctl.display import render_cpus
from freqctl.errors import SysfsIOError
from freqctl.models.cpu_models import CPUListOutput
from freqctl.system import (
    get_available_governors,
    get_core_counts,
    get_cpu_model,
    get_turbo,
    list_cpus,
    sample_usage,
)


def run_view(settings: Settings, as_json: bool = False, color: bool = True) -> None:
    """Refresh every core, sample utilization and print the result.

    Args:
        settings: Filesystem roots and sample interval.
        as_json: Print a CPUListOutput JSON document instead of a table.
        color: Colorize the table.
    """
    accessor = SysfsAccessor(settings.cpu_root, settings.thermal_root)
    cpus = list_cpus(accessor)
    for cpu in cpus:
        cpu.init_cpu()
    sample_usage(cpus, settings.sample_interval, settings.proc_stat)

    if not as_json:
        click.echo(render_cpus(cpus, color=color))
        return

    try:
        governors = get_available_governors(accessor, cpus[0].name) if cpus else []
    except SysfsIOError:
        # Some drivers (e.g. intel_pstate in passive mode) omit the list
        governors = []

    counts = get_core_counts()
    output = CPUListOutput(
        model=get_cpu_model(settings.cpuinfo),
        physical_cores=counts["physical_cores"],
        logical_cores=counts["logical_cores"],
        turbo=get_turbo(accessor),
        available_governors=governors,
        cpus=[cpu.to_model() for cpu in cpus],
    )
    click.echo(output.model_dump_json(indent=2))
