"""Qt integration for uidcputime."""

from .signals import UidCpuTimeSignals

__all__ = [
    "UidCpuTimeSignals",
]
