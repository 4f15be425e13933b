"""Usage command - sample CPU utilization."""

from __future__ import annotations

import click

from freqctl.config import Settings
from freqctl.procstat import sample_cpu_percent


def run_usage(
    settings: Settings, cpu_index: int | None = None, raw: bool = False
) -> float:
    """Sample utilization of one core, or of all cores when cpu_index is None.

    Blocks for settings.sample_interval seconds.
    """
    cpu = None if cpu_index is None else f"cpu{cpu_index}"
    percent = sample_cpu_percent(cpu, settings.sample_interval, settings.proc_stat)

    if raw:
        click.echo(f"{percent:.1f}")
    else:
        click.echo(f"{cpu or 'All cores'} usage: {percent:.1f}%")
    return percent
