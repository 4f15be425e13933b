"""Shared fixtures: an in-memory accessor and a fake sysfs tree."""

from io import StringIO

import pytest

from fakes import PROC_STAT, FakeAccessor, make_core_files, write_core
from freqctl.utils.logger import Logger


@pytest.fixture
def fake_accessor():
    """FakeAccessor holding one core, cpu0, with a 42.5C thermal zone."""
    return FakeAccessor(files=make_core_files("cpu0"), temps={"cpu0": 42500})


@pytest.fixture
def sysfs_root(tmp_path):
    """Fake /sys tree: cpu0-cpu2 with cpufreq, cpu3 offline, one thermal zone.

    Returns:
        (cpu_root, thermal_root)
    """
    cpu_root = tmp_path / "cpu"
    thermal_root = tmp_path / "thermal"

    for index, freq in enumerate([1200000, 2400000, 3100000]):
        write_core(cpu_root, f"cpu{index}", cur_freq=freq)
    (cpu_root / "cpu3").mkdir()
    (cpu_root / "cpuidle").mkdir()
    (cpu_root / "online").write_text("0-2\n")

    zone = thermal_root / "thermal_zone0"
    zone.mkdir(parents=True)
    (zone / "temp").write_text("65000\n")

    return cpu_root, thermal_root


@pytest.fixture
def proc_stat_file(tmp_path):
    """Fake /proc/stat with an aggregate line and three cores."""
    path = tmp_path / "stat"
    path.write_text(PROC_STAT)
    return path


@pytest.fixture
def log_output():
    """Configure the logger at DEBUG into a buffer."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output)
    return output
