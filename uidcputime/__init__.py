"""uidcputime package."""

from .version import __version__, __version_info__, APP_NAME
from .core import (
    UidCpuTime,
    UidCpuTimeDelta,
    ReadResult,
    ReadStatus,
    UidCpuTimeError,
    SourceUnavailableError,
    MalformedRecordError,
    ControlSinkError,
)
from .proc import KernelUidCpuTimeReader, UidCpuTimeParser, ProcConfig

__all__ = [
    "__version__",
    "__version_info__",
    "APP_NAME",
    "UidCpuTime",
    "UidCpuTimeDelta",
    "ReadResult",
    "ReadStatus",
    "UidCpuTimeError",
    "SourceUnavailableError",
    "MalformedRecordError",
    "ControlSinkError",
    "KernelUidCpuTimeReader",
    "UidCpuTimeParser",
    "ProcConfig",
]
