from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Version:
    """
    Semantic version information for freqctl.

    Major, minor and patch numbers following semver, plus a release date.
    """

    major: int
    minor: int
    patch: int
    date: datetime

    def __str__(self) -> str:
        """Return the semantic version string (e.g., '0.1.0')."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def full_version(self) -> str:
        """Return version and release date."""
        return f"{self} ({self.date_string()})"

    def date_string(self) -> str:
        """Return the release date as YYYY-MM-DD."""
        return self.date.strftime("%Y-%m-%d")


# Current version instance
FREQCTL_VERSION = Version(
    major=0,
    minor=1,
    patch=0,
    date=datetime(2026, 10, 18),
)
