"""Frequency parsing for command-line values."""

import re

_FREQ_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*([kmg]?hz)?", re.IGNORECASE)

# Multipliers to kHz, the unit cpufreq uses
_UNIT_TO_KHZ = {
    "khz": 1,
    "mhz": 1_000,
    "ghz": 1_000_000,
}


def parse_frequency(text: str) -> int:
    """Parse a frequency into kHz.

    A bare number is taken as kHz. "MHz"/"GHz"/"kHz" suffixes are accepted in
    any case, e.g. "2400MHz" or "3.4 GHz".

    Raises:
        ValueError: If the text is not a frequency or the unit is plain "Hz".
    """
    match = _FREQ_PATTERN.fullmatch(text.strip())
    if not match:
        raise ValueError(f"Invalid frequency: {text!r}")

    number, unit = match.groups()
    unit = (unit or "khz").lower()
    if unit not in _UNIT_TO_KHZ:
        raise ValueError(f"Frequency must be given in kHz, MHz or GHz: {text!r}")

    return round(float(number) * _UNIT_TO_KHZ[unit])
