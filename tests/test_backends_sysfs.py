"""Tests for the sysfs kernel-interface accessor."""

import errno
import os

import pytest

from freqctl.backends.base import NO_TEMPERATURE
from freqctl.backends.sysfs import SysfsAccessor, parse_int
from freqctl.errors import SysfsIOError, SysfsParseError


def test_read_str_strips_one_newline(tmp_path):
    """Only a single trailing newline is removed."""
    (tmp_path / "cpu0" / "cpufreq").mkdir(parents=True)
    (tmp_path / "cpu0" / "cpufreq" / "scaling_governor").write_text("powersave\n")
    (tmp_path / "cpu0" / "cpufreq" / "energy_performance_preference").write_text(
        "balance_power\n\n"
    )
    accessor = SysfsAccessor(cpu_root=tmp_path)

    assert accessor.read_str("cpu0", "cpufreq/scaling_governor") == "powersave"
    assert (
        accessor.read_str("cpu0", "cpufreq/energy_performance_preference")
        == "balance_power\n"
    )


def test_read_int(sysfs_root):
    """Integer pseudo-files are parsed after trimming the newline."""
    cpu_root, thermal_root = sysfs_root
    accessor = SysfsAccessor(cpu_root, thermal_root)

    assert accessor.read_int("cpu0", "cpufreq/scaling_max_freq") == 3400000
    assert accessor.read_int("cpu1", "cpufreq/scaling_cur_freq") == 2400000


def test_read_int_non_numeric_raises_parse_error(sysfs_root):
    """A non-numeric payload raises SysfsParseError naming the path."""
    cpu_root, thermal_root = sysfs_root
    accessor = SysfsAccessor(cpu_root, thermal_root)

    with pytest.raises(SysfsParseError) as excinfo:
        accessor.read_int("cpu0", "cpufreq/scaling_governor")

    assert excinfo.value.content == "powersave"
    assert "scaling_governor" in str(excinfo.value)


def test_read_undecodable_bytes_raises_parse_error(sysfs_root):
    """Bytes that are not UTF-8 raise SysfsParseError, for cores and zones."""
    cpu_root, thermal_root = sysfs_root
    accessor = SysfsAccessor(cpu_root, thermal_root)
    (cpu_root / "cpu0" / "cpufreq" / "scaling_max_freq").write_bytes(b"\xff\xfe12\n")
    (thermal_root / "thermal_zone0" / "temp").write_bytes(b"\x80\n")

    with pytest.raises(SysfsParseError) as excinfo:
        accessor.read_int("cpu0", "cpufreq/scaling_max_freq")
    assert "scaling_max_freq" in excinfo.value.path

    with pytest.raises(SysfsParseError) as excinfo:
        accessor.read_temp("cpu0")
    assert excinfo.value.path.endswith("thermal_zone0/temp")


@pytest.mark.parametrize("text", ["", "12.5", "1 2", "0x10", " 42", "1_000"])
def test_parse_int_rejects_non_decimal(text):
    """Only plain signed base-10 integers are accepted."""
    with pytest.raises(SysfsParseError):
        parse_int("/sys/x", text)


def test_parse_int_accepts_sign():
    """Leading signs are allowed (thermal zones can report below zero)."""
    assert parse_int("/sys/x", "-5000") == -5000
    assert parse_int("/sys/x", "+42") == 42


def test_read_missing_file_raises_io_error(sysfs_root):
    """Missing files raise SysfsIOError carrying the OS error."""
    cpu_root, thermal_root = sysfs_root
    accessor = SysfsAccessor(cpu_root, thermal_root)

    with pytest.raises(SysfsIOError) as excinfo:
        accessor.read_int("cpu0", "cpufreq/base_frequency")

    err = excinfo.value
    assert err.operation == "read"
    assert err.path.endswith("cpu0/cpufreq/base_frequency")
    assert isinstance(err.os_error, FileNotFoundError)
    assert err.__cause__ is err.os_error


def test_read_temp(sysfs_root):
    """cpu0 maps to thermal_zone0."""
    cpu_root, thermal_root = sysfs_root
    accessor = SysfsAccessor(cpu_root, thermal_root)

    assert accessor.thermal_path("cpu0").name == "temp"
    assert accessor.thermal_path("cpu0").parent.name == "thermal_zone0"
    assert accessor.read_temp("cpu0") == 65000


def test_read_temp_missing_zone_returns_sentinel(sysfs_root):
    """No thermal zone for a core is not an error."""
    cpu_root, thermal_root = sysfs_root
    accessor = SysfsAccessor(cpu_root, thermal_root)

    assert accessor.read_temp("cpu1") == NO_TEMPERATURE


def test_write_then_read_round_trip(sysfs_root):
    """A written value reads back unchanged, with no newline added."""
    cpu_root, thermal_root = sysfs_root
    accessor = SysfsAccessor(cpu_root, thermal_root)

    accessor.write("cpu0", "cpufreq/scaling_max_freq", 2000000)

    raw = (cpu_root / "cpu0" / "cpufreq" / "scaling_max_freq").read_text()
    assert raw == "2000000"
    assert accessor.read_int("cpu0", "cpufreq/scaling_max_freq") == 2000000


def test_write_creates_missing_file(tmp_path):
    """Writing opens-or-creates the target."""
    (tmp_path / "cpu0" / "cpufreq").mkdir(parents=True)
    accessor = SysfsAccessor(cpu_root=tmp_path)

    accessor.write("cpu0", "cpufreq/scaling_governor", "performance")

    assert (tmp_path / "cpu0" / "cpufreq" / "scaling_governor").read_text() == (
        "performance"
    )


def test_write_into_missing_directory_raises_io_error(tmp_path):
    """A core without cpufreq cannot be written."""
    accessor = SysfsAccessor(cpu_root=tmp_path)

    with pytest.raises(SysfsIOError) as excinfo:
        accessor.write("cpu9", "cpufreq/scaling_max_freq", 1)

    assert excinfo.value.operation == "write"
    assert excinfo.value.os_error.errno == errno.ENOENT


def test_write_rejected_by_kernel(monkeypatch, tmp_path):
    """An OSError from the write itself is wrapped too."""
    (tmp_path / "cpu0" / "cpufreq").mkdir(parents=True)
    accessor = SysfsAccessor(cpu_root=tmp_path)

    def reject(*_args, **_kwargs):
        raise OSError(errno.EINVAL, "Invalid argument")

    monkeypatch.setattr("freqctl.backends.sysfs.open", reject, raising=False)

    with pytest.raises(SysfsIOError) as excinfo:
        accessor.write("cpu0", "cpufreq/scaling_governor", "turbo")

    assert "Invalid argument" in str(excinfo.value)


def test_read_permission_denied(tmp_path):
    """Unreadable files raise SysfsIOError."""
    if os.geteuid() == 0:
        pytest.skip("root bypasses file permissions")

    path = tmp_path / "cpu0" / "cpufreq" / "scaling_cur_freq"
    path.parent.mkdir(parents=True)
    path.write_text("1000\n")
    path.chmod(0)
    accessor = SysfsAccessor(cpu_root=tmp_path)

    try:
        with pytest.raises(SysfsIOError) as excinfo:
            accessor.read_int("cpu0", "cpufreq/scaling_cur_freq")
        assert isinstance(excinfo.value.os_error, PermissionError)
    finally:
        path.chmod(0o644)


def test_default_roots():
    """Without arguments the real sysfs roots are used."""
    accessor = SysfsAccessor()
    assert str(accessor.cpu_root) == "/sys/devices/system/cpu"
    assert str(accessor.thermal_root) == "/sys/class/thermal"
    assert str(accessor.cpu_path("cpu2", "cpufreq/scaling_governor")) == (
        "/sys/devices/system/cpu/cpu2/cpufreq/scaling_governor"
    )
