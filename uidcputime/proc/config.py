"""Kernel interface configuration for uidcputime."""

from __future__ import annotations


class ProcConfig:
    """Paths and format of the uid_cputime kernel module files."""
    UID_STAT_PATH = "/proc/uid_cputime/show_uid_stat"
    REMOVE_UID_RANGE_PATH = "/proc/uid_cputime/remove_uid_range"

    ENCODING = "ascii"

    # "<uid>: <user_us> <system_us>"
    FIELD_SEPARATOR = " "
    UID_TERMINATOR = ":"
    RANGE_SEPARATOR = "-"
