"""Outcome of a single read pass."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ReadStatus(Enum):
    OK = "ok"
    SOURCE_UNAVAILABLE = "source_unavailable"
    MALFORMED_RECORD = "malformed_record"


@dataclass
class ReadResult:
    """Summary of one ``read_delta`` call.

    ``lines_read`` counts the lines whose values were committed to the
    reader's baselines, including those committed before a failure.
    """
    status: ReadStatus = ReadStatus.OK
    lines_read: int = 0
    deltas_reported: int = 0
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.status is ReadStatus.OK
