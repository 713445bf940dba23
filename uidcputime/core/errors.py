"""Errors raised while talking to the uid_cputime kernel interface.

The reader catches all of these itself; they surface to callers only through
the log and through :class:`~uidcputime.core.result.ReadResult`.
"""

from __future__ import annotations

from typing import Optional


class UidCpuTimeError(Exception):
    """Base class for uid_cputime failures."""


class SourceUnavailableError(UidCpuTimeError, OSError):
    """The counter file could not be opened or read."""


class MalformedRecordError(UidCpuTimeError, ValueError):
    """A counter line did not parse into a UID and two times."""

    def __init__(self, line: str, line_number: Optional[int] = None, reason: str = ""):
        self.line = line
        self.line_number = line_number
        self.reason = reason
        where = f" at line {line_number}" if line_number is not None else ""
        detail = f": {reason}" if reason else ""
        super().__init__(f"Malformed uid_cputime record{where} {line!r}{detail}")


class ControlSinkError(UidCpuTimeError, OSError):
    """The UID range removal request could not be written."""
