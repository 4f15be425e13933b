"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from freqctl.config import Settings, load_settings
from freqctl.utils.env import EnvVarTypeError

ENV_VARS = [
    "FREQCTL_CPU_ROOT",
    "FREQCTL_THERMAL_ROOT",
    "FREQCTL_PROC_STAT",
    "FREQCTL_CPUINFO",
    "FREQCTL_SAMPLE_INTERVAL",
    "FREQCTL_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without FREQCTL_* variables."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    """Without variables the real kernel paths are used."""
    settings = load_settings()
    assert settings == Settings()
    assert settings.cpu_root == Path("/sys/devices/system/cpu")
    assert settings.proc_stat == Path("/proc/stat")
    assert settings.sample_interval == 0.2
    assert settings.log_level == "WARNING"


def test_overrides(monkeypatch, tmp_path):
    """Each variable overrides its setting."""
    monkeypatch.setenv("FREQCTL_CPU_ROOT", str(tmp_path / "cpu"))
    monkeypatch.setenv("FREQCTL_THERMAL_ROOT", str(tmp_path / "thermal"))
    monkeypatch.setenv("FREQCTL_PROC_STAT", str(tmp_path / "stat"))
    monkeypatch.setenv("FREQCTL_CPUINFO", str(tmp_path / "cpuinfo"))
    monkeypatch.setenv("FREQCTL_SAMPLE_INTERVAL", "1.5")
    monkeypatch.setenv("FREQCTL_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.cpu_root == tmp_path / "cpu"
    assert settings.thermal_root == tmp_path / "thermal"
    assert settings.proc_stat == tmp_path / "stat"
    assert settings.cpuinfo == tmp_path / "cpuinfo"
    assert settings.sample_interval == 1.5
    assert settings.log_level == "debug"


def test_invalid_interval(monkeypatch):
    """Non-numeric and negative intervals are rejected."""
    monkeypatch.setenv("FREQCTL_SAMPLE_INTERVAL", "soon")
    with pytest.raises(EnvVarTypeError):
        load_settings()

    monkeypatch.setenv("FREQCTL_SAMPLE_INTERVAL", "-1")
    with pytest.raises(ValueError):
        load_settings()


def test_settings_are_frozen():
    """Settings cannot be mutated."""
    with pytest.raises(AttributeError):
        Settings().sample_interval = 3.0
