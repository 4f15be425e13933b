"""Base class for kernel-interface accessors."""

from abc import ABC, abstractmethod

# Returned by read_temp() when the kernel exposes no thermal zone for a core
NO_TEMPERATURE = -1


class CPUAccessor(ABC):
    """Abstract base class for reading and writing per-core pseudo-files.

    The CPU entity only talks to the kernel through this interface, so tests
    can substitute an in-memory implementation.
    """

    @abstractmethod
    def read_str(self, cpu_name: str, sub_path: str) -> str:
        """
        Read a pseudo-file as text.

        Args:
            cpu_name: Core name, e.g. "cpu0"
            sub_path: Path relative to the core directory

        Returns:
            File contents with one trailing newline removed

        Raises:
            SysfsIOError: If the file cannot be opened or read
            SysfsParseError: If the contents are not valid UTF-8
        """
        pass

    @abstractmethod
    def read_int(self, cpu_name: str, sub_path: str) -> int:
        """
        Read a pseudo-file as a signed base-10 integer.

        Raises:
            SysfsIOError: If the file cannot be opened or read
            SysfsParseError: If the contents are not an integer
        """
        pass

    @abstractmethod
    def read_temp(self, cpu_name: str, sub_path: str = "temp") -> int:
        """
        Read the thermal zone matching a core.

        Returns:
            Temperature in millidegrees Celsius, or NO_TEMPERATURE if the
            core has no thermal zone
        """
        pass

    @abstractmethod
    def write(self, cpu_name: str, sub_path: str, value: int | str) -> None:
        """
        Write a value to a pseudo-file, without a trailing newline.

        Raises:
            SysfsIOError: If the file cannot be opened or the kernel rejects
                the write
        """
        pass
