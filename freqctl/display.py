"""Plain-text rendering of CPU state."""

from __future__ import annotations

from collections.abc import Iterable

import click

from freqctl.cpu import CPU

HEADER = "Name\tMax\tMin\tFreq\tTemp\tGovernor\tUsage"


def _mhz(khz: int) -> int:
    return khz // 1000


def _temp_color(celsius: int) -> str:
    if celsius > 60:
        return "red"
    if celsius > 40:
        return "yellow"
    return "green"


def render_cpu(cpu: CPU, color: bool = True) -> str:
    """Render one core as a tab-separated line (frequencies in MHz)."""
    if cpu.has_temperature:
        celsius = int(cpu.cur_temp / 1000)
        temp = f"{celsius}C"
        if color:
            temp = click.style(temp, fg=_temp_color(celsius))
    else:
        temp = "N/A"

    name = click.style(f"{cpu.name}:", bold=True) if color else f"{cpu.name}:"
    cur = f"{_mhz(cpu.cur_freq)}MHz"
    if color:
        cur = click.style(cur, fg="green")

    return (
        f"{name}\t{_mhz(cpu.max_freq)}MHz\t{_mhz(cpu.min_freq)}MHz\t"
        f"{cur}\t{temp}\t{cpu.governor}\t{cpu.cur_usage:.1f}%"
    )


def render_cpus(cpus: Iterable[CPU], color: bool = True) -> str:
    """Render a header plus one line per core."""
    lines = [HEADER]
    lines.extend(render_cpu(cpu, color) for cpu in cpus)
    return "\n".join(lines)


def print_values(values: Iterable[object], raw: bool = False) -> None:
    """Print values one per line when raw, else space separated on one line."""
    if raw:
        for value in values:
            click.echo(value)
    else:
        click.echo(" ".join(str(value) for value in values))


def print_freqs(cpus: Iterable[CPU], model: str, raw: bool = False) -> None:
    """Print each core's current frequency."""
    if raw:
        for cpu in cpus:
            click.echo(f"{cpu.name} {cpu.cur_freq}")
        return

    click.echo(f"Name: {model}")
    for cpu in cpus:
        click.echo(f"{cpu.name} is currently @ {_mhz(cpu.cur_freq)} MHz")


def print_turbo(turbo: bool | None, raw: bool = False) -> None:
    """Print turbo state."""
    if raw:
        click.echo("unknown" if turbo is None else str(turbo).lower())
    elif turbo is None:
        click.echo("Turbo state is not exposed on this system")
    else:
        click.echo("Turbo is enabled" if turbo else "Turbo is not enabled")
