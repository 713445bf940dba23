"""Line parser for /proc/uid_cputime/show_uid_stat."""

from __future__ import annotations
import re
from typing import Optional

from ..core import UidCpuTime, MalformedRecordError
from .config import ProcConfig


class UidCpuTimeParser:
    """Parser for uid_cputime counter lines."""

    # Base 10, ASCII digits only: no sign, no underscores, no padding
    _DECIMAL = re.compile(r"[0-9]+")

    @staticmethod
    def parse_int(token: str, line: str, line_number: Optional[int], field: str) -> int:
        """Parse one unsigned base-10 field.

        Stricter than ``int()``: a leading ``+`` or ``-`` is rejected even though
        uids are signed 32-bit values, since the kernel never writes a sign.

        Raises:
            MalformedRecordError: If ``token`` is not ASCII digits only.
        """
        if not UidCpuTimeParser._DECIMAL.fullmatch(token):
            raise MalformedRecordError(line, line_number, f"{field} is not a decimal integer: {token!r}")
        return int(token, 10)

    @staticmethod
    def parse_line(line: str, line_number: Optional[int] = None) -> UidCpuTime:
        """Parse a counter line.

        Format: '<uid>: <user_time_us> <system_time_us>', e.g. '1000: 500 200'.
        Tokens beyond the third are ignored.

        Raises:
            MalformedRecordError: If the line does not carry three integers.
        """
        text = line.rstrip("\r\n")
        parts = text.split(ProcConfig.FIELD_SEPARATOR)

        if len(parts) < 3:
            raise MalformedRecordError(line, line_number, "expected 3 fields")

        uid_token = parts[0]
        if not uid_token.endswith(ProcConfig.UID_TERMINATOR):
            raise MalformedRecordError(
                line, line_number, f"uid is not terminated by {ProcConfig.UID_TERMINATOR!r}"
            )

        uid = UidCpuTimeParser.parse_int(uid_token[:-1], line, line_number, "uid")
        user_time_us = UidCpuTimeParser.parse_int(parts[1], line, line_number, "user time")
        system_time_us = UidCpuTimeParser.parse_int(parts[2], line, line_number, "system time")
        return UidCpuTime(uid, user_time_us, system_time_us)

    @staticmethod
    def format_remove_range(first_uid: int, last_uid: int) -> str:
        """Build the remove_uid_range payload, e.g. '1000-1000'."""
        return f"{int(first_uid)}{ProcConfig.RANGE_SEPARATOR}{int(last_uid)}"
