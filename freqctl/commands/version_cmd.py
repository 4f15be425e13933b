"""
Version command - displays freqctl version information
"""

import click

from freqctl.version import FREQCTL_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display freqctl version information.

    Args:
        verbose: If True, include the release date
    """
    if verbose:
        click.echo(f"freqctl version {FREQCTL_VERSION.full_version()}")
    else:
        click.echo(f"freqctl {FREQCTL_VERSION}")
