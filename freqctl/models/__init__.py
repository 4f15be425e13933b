"""Models for CPU state and structured output."""

from freqctl.models.cpu_models import CPUInfo, CPUListOutput, WritableValue

__all__ = ["CPUInfo", "CPUListOutput", "WritableValue"]
