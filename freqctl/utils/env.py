"""Environment variable helpers with type coercion and logging.

Usage:
    from freqctl.utils.env import get_env

    interval = get_env("FREQCTL_SAMPLE_INTERVAL", default=0.2, as_type=float)
    cpu_root = get_env("FREQCTL_CPU_ROOT", default="/sys/devices/system/cpu")
"""

from __future__ import annotations

import os
from typing import Any, TypeVar, cast, overload

from freqctl.utils.logger import Logger

T = TypeVar("T")


class EnvVarError(Exception):
    """Base exception for environment variable errors."""

    pass


class EnvVarTypeError(EnvVarError):
    """Raised when an environment variable cannot be converted to the expected type."""

    def __init__(self, name: str, value: str, expected_type: type) -> None:
        self.name = name
        self.value = value
        self.expected_type = expected_type
        super().__init__(f"Cannot convert {name}='{value}' to {expected_type.__name__}")


def _coerce_type(name: str, value: str, as_type: type) -> Any:
    """Convert a string value with the type's constructor (e.g. float).

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    try:
        return as_type(value)
    except ValueError as e:
        raise EnvVarTypeError(name, value, as_type) from e


@overload
def get_env(name: str, *, default: T, as_type: type[T], log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, default: T, log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, as_type: type[T], log: bool = ...) -> T | None:
    ...


@overload
def get_env(name: str, *, log: bool = ...) -> str | None:
    ...


def get_env(
    name: str,
    *,
    default: T | None = None,
    as_type: type[T] | None = None,
    log: bool = False,
) -> T | str | None:
    """Get an environment variable with optional type coercion.

    Args:
        name: Environment variable name.
        default: Returned when the variable is not set.
        as_type: Type to convert the value to (e.g. float).
        log: If True, log the access at debug level (when logging is configured).

    Returns:
        The value converted to as_type if specified, or default if not set.

    Raises:
        EnvVarTypeError: If as_type is specified and conversion fails.

    Examples:
        >>> get_env("FREQCTL_SAMPLE_INTERVAL", default=0.2, as_type=float)
        0.2
    """
    value = os.environ.get(name)

    if log:
        Logger.debug_if_configured("env", f"ENV GET {name}={value}")

    if value is None:
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value


def env_is_set(name: str) -> bool:
    """Check if an environment variable is set (not empty)."""
    value = os.environ.get(name)
    return value is not None and value != ""
