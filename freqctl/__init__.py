"""freqctl - per-core CPU frequency, governor and utilization control."""

from freqctl.version.freqctl_version import FREQCTL_VERSION, Version

__version__ = str(FREQCTL_VERSION)
__version_info__ = FREQCTL_VERSION

__all__ = [
    "FREQCTL_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
