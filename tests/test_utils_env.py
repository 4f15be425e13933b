"""Tests for the environment variable utility."""

import pytest

from freqctl.utils.env import EnvVarTypeError, env_is_set, get_env


def test_get_env_basic(monkeypatch):
    """Set variables are returned, missing ones fall back to the default."""
    monkeypatch.setenv("FREQCTL_TEST_VAR", "test_value")
    monkeypatch.delenv("FREQCTL_MISSING_VAR", raising=False)

    assert get_env("FREQCTL_TEST_VAR") == "test_value"
    assert get_env("FREQCTL_MISSING_VAR", default="default") == "default"
    assert get_env("FREQCTL_MISSING_VAR") is None


def test_get_env_float(monkeypatch):
    """Numeric values are coerced to float."""
    monkeypatch.setenv("FREQCTL_SAMPLE_INTERVAL", "0.25")

    assert get_env("FREQCTL_SAMPLE_INTERVAL", as_type=float) == 0.25


def test_get_env_coercion_failure(monkeypatch):
    """Failed coercion raises EnvVarTypeError with the details."""
    monkeypatch.setenv("FREQCTL_INVALID_FLOAT", "fast")

    with pytest.raises(EnvVarTypeError) as excinfo:
        get_env("FREQCTL_INVALID_FLOAT", as_type=float)

    assert excinfo.value.name == "FREQCTL_INVALID_FLOAT"
    assert excinfo.value.value == "fast"


def test_get_env_logs_access(monkeypatch, log_output):
    """log=True records the access at debug level."""
    monkeypatch.setenv("FREQCTL_CPU_ROOT", "/tmp/cpu")

    get_env("FREQCTL_CPU_ROOT", log=True)

    assert "ENV GET FREQCTL_CPU_ROOT=/tmp/cpu" in log_output.getvalue()


def test_env_is_set(monkeypatch):
    """Empty counts as unset."""
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("FREQCTL_EMPTY", "")
    monkeypatch.delenv("FREQCTL_ABSENT", raising=False)

    assert env_is_set("NO_COLOR")
    assert not env_is_set("FREQCTL_EMPTY")
    assert not env_is_set("FREQCTL_ABSENT")
