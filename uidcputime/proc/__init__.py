"""Kernel uid_cputime interface for uidcputime."""

from .config import ProcConfig
from .parser import UidCpuTimeParser
from .reader import KernelUidCpuTimeReader, UidCpuTimeCallback

__all__ = [
    "ProcConfig",
    "UidCpuTimeParser",
    "KernelUidCpuTimeReader",
    "UidCpuTimeCallback",
]
