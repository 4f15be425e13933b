#!/usr/bin/env python3
"""freqctl CLI - Command-line interface for freqctl."""

from dataclasses import replace

import click

from freqctl.commands.get_cmd import ATTRIBUTES, run_get
from freqctl.config import Settings, load_settings
from freqctl.errors import FreqctlError
from freqctl.models.cpu_models import WritableValue
from freqctl.utils.env import EnvVarTypeError, env_is_set
from freqctl.utils.logger import Logger
from freqctl.utils.units import parse_frequency


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def freqctl(ctx, debug):
    """Inspect and control per-core CPU frequency scaling."""
    try:
        settings = load_settings()
    except (EnvVarTypeError, ValueError) as e:
        raise click.UsageError(str(e)) from e

    if not Logger.is_configured():
        try:
            Logger.configure(level=settings.log_level, output="stderr")
        except ValueError as e:
            raise click.UsageError(
                f"Invalid FREQCTL_LOG_LEVEL: {settings.log_level}"
            ) from e
    if debug:
        Logger.set_level("DEBUG")

    ctx.obj = settings


@freqctl.command()
@click.option("--json", "as_json", is_flag=True, help="Output JSON")
@click.option(
    "--interval",
    "-i",
    type=float,
    default=None,
    help="Seconds between utilization samples (default: FREQCTL_SAMPLE_INTERVAL)",
)
@click.pass_obj
def view(settings: Settings, as_json, interval):
    """Show frequency, temperature, governor and usage of every core."""
    from freqctl.commands.view_cmd import run_view

    if interval is not None:
        settings = _with_interval(settings, interval)

    try:
        run_view(settings, as_json=as_json, color=not env_is_set("NO_COLOR"))
    except FreqctlError as e:
        raise click.ClickException(str(e)) from e


@freqctl.command()
@click.argument("attribute", type=click.Choice(ATTRIBUTES))
@click.option("--raw", "-r", is_flag=True, help="Machine-readable output")
@click.pass_obj
def get(settings: Settings, attribute, raw):
    r"""Read one attribute of every core.

    \b
    Examples:
      freqctl get freq          # Current frequency of each core
      freqctl get gov --raw     # Governor of each core, one per line
      freqctl get governors     # Governors the driver accepts
      freqctl get turbo         # Turbo/boost state
    """
    try:
        run_get(settings, attribute, raw=raw)
    except FreqctlError as e:
        raise click.ClickException(str(e)) from e


@freqctl.command(name="set")
@click.argument("kind", type=click.Choice([k.value for k in WritableValue]))
@click.argument("value")
@click.option(
    "--cpu",
    "-c",
    "cpus",
    type=int,
    multiple=True,
    help="Core index to write (repeatable, default: all cores)",
)
@click.pass_obj
def set_value(settings: Settings, kind, value, cpus):
    r"""Write max/min frequency or governor (requires root).

    \b
    Examples:
      freqctl set max 3.2GHz            # Cap every core at 3.2 GHz
      freqctl set min 800000            # Frequencies without a unit are kHz
      freqctl set gov powersave -c 0    # Governor of cpu0 only
    """
    from freqctl.commands.set_cmd import run_set

    writable = WritableValue(kind)
    to_write: int | str = value
    if writable is not WritableValue.GOVERNOR:
        try:
            to_write = parse_frequency(value)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="VALUE") from e

    try:
        run_set(settings, writable, to_write, cpus)
    except FreqctlError as e:
        raise click.ClickException(str(e)) from e


@freqctl.command()
@click.option("--cpu", "-c", "cpu_index", type=int, default=None, help="Core index")
@click.option("--interval", "-i", type=float, default=None, help="Sample interval")
@click.option("--raw", "-r", is_flag=True, help="Print the bare percentage")
@click.pass_obj
def usage(settings: Settings, cpu_index, interval, raw):
    """Sample CPU utilization from /proc/stat."""
    from freqctl.commands.usage_cmd import run_usage

    if interval is not None:
        settings = _with_interval(settings, interval)

    try:
        run_usage(settings, cpu_index, raw=raw)
    except FreqctlError as e:
        raise click.ClickException(str(e)) from e


@freqctl.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display freqctl version information."""
    from freqctl.commands.version_cmd import run_version

    run_version(verbose=verbose)


def _with_interval(settings: Settings, interval: float) -> Settings:
    if interval < 0:
        raise click.BadParameter("must not be negative", param_hint="--interval")
    return replace(settings, sample_interval=interval)


if __name__ == "__main__":
    freqctl()
