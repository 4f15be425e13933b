"""Version information for freqctl."""

from freqctl.version.freqctl_version import FREQCTL_VERSION, Version

__all__ = ["FREQCTL_VERSION", "Version"]
