"""Core data structures and models for uidcputime."""

from .cpu_time import UidCpuTime, UidCpuTimeDelta
from .result import ReadResult, ReadStatus
from .errors import (
    UidCpuTimeError,
    SourceUnavailableError,
    MalformedRecordError,
    ControlSinkError,
)

__all__ = [
    'UidCpuTime',
    'UidCpuTimeDelta',
    'ReadResult',
    'ReadStatus',
    'UidCpuTimeError',
    'SourceUnavailableError',
    'MalformedRecordError',
    'ControlSinkError',
]
