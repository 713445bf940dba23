"""Delta reader for the kernel's per-UID CPU time counters.

/proc/uid_cputime/show_uid_stat has one line per UID:

    uid: user_time_micro_seconds system_time_micro_seconds

The counts are cumulative since boot. KernelUidCpuTimeReader keeps the values
seen on the previous pass so that each call to ``read_delta`` reports only the
time spent since then.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from ..core import (
    ControlSinkError,
    MalformedRecordError,
    ReadResult,
    ReadStatus,
    SourceUnavailableError,
    UidCpuTime,
)
from .config import ProcConfig
from .parser import UidCpuTimeParser

logger = logging.getLogger(__name__)

# (uid, user_time_delta_us, system_time_delta_us)
UidCpuTimeCallback = Callable[[int, int, int], None]


class KernelUidCpuTimeReader:
    """Turns cumulative per-UID CPU times into deltas between calls.

    Not thread-safe: ``read_delta`` and ``remove_uid`` share state without
    locking, so calls on one instance must come from a single thread or be
    serialized by the caller.
    """

    def __init__(
        self,
        source_path: str = ProcConfig.UID_STAT_PATH,
        remove_path: str = ProcConfig.REMOVE_UID_RANGE_PATH,
    ):
        self.source_path = source_path
        self.remove_path = remove_path
        self._parser = UidCpuTimeParser()
        self._last_user_time_us: Dict[int, int] = {}
        self._last_system_time_us: Dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._last_user_time_us)

    def __contains__(self, uid: object) -> bool:
        return uid in self._last_user_time_us

    @property
    def tracked_uids(self) -> List[int]:
        """UIDs with a stored baseline, in ascending order."""
        return sorted(self._last_user_time_us)

    def last_times(self, uid: int) -> Optional[UidCpuTime]:
        """Return the stored baseline for a UID, or None if untracked."""
        if uid not in self._last_user_time_us:
            return None
        return UidCpuTime(uid, self._last_user_time_us[uid], self._last_system_time_us[uid])

    def read_delta(self, callback: Optional[UidCpuTimeCallback] = None) -> ReadResult:
        """Read the counter file and report each UID's time since the last call.

        Args:
            callback: Called as ``callback(uid, user_time_us, system_time_us)``
                for every UID whose delta is non-zero. If None, the current
                values are consumed as the new baseline and nothing is reported.

        Returns:
            ReadResult describing the pass. Failures are logged, never raised;
            lines applied before a failure stay applied.
        """
        result = ReadResult()

        try:
            # Undecodable bytes survive as surrogates and fail parsing on their own line
            f = open(self.source_path, "r", encoding=ProcConfig.ENCODING, errors="surrogateescape")
        except OSError as e:
            result.status = ReadStatus.SOURCE_UNAVAILABLE
            result.error = SourceUnavailableError(e.errno, f"Cannot open {self.source_path}: {e.strerror}")
            logger.error(f"Failed to read uid_cputime: {result.error}", exc_info=True)
            return result

        with f:
            try:
                blank_line = None
                for line_number, line in enumerate(f, start=1):
                    if blank_line is not None:
                        raise MalformedRecordError(blank_line[1], blank_line[0], "empty line")
                    if not line.rstrip("\r\n"):
                        # Only a final empty line is tolerated
                        blank_line = (line_number, line)
                        continue
                    record = self._parser.parse_line(line, line_number)
                    if self._apply(record, callback):
                        result.deltas_reported += 1
                    result.lines_read += 1
            except MalformedRecordError as e:
                result.status = ReadStatus.MALFORMED_RECORD
                result.error = e
                logger.error(f"Failed to read uid_cputime: {e}")
            except OSError as e:
                result.status = ReadStatus.SOURCE_UNAVAILABLE
                result.error = SourceUnavailableError(e.errno, f"Error reading {self.source_path}: {e.strerror}")
                logger.error(f"Failed to read uid_cputime: {result.error}", exc_info=True)

        return result

    def _apply(self, record: UidCpuTime, callback: Optional[UidCpuTimeCallback]) -> bool:
        """Report the delta for one record and store it as the new baseline.

        Returns True if the callback was invoked.
        """
        uid = record.uid
        reported = False

        if callback is not None:
            user_delta_us = record.user_time_us
            system_delta_us = record.system_time_us

            if uid in self._last_user_time_us:
                user_delta_us -= self._last_user_time_us[uid]
                system_delta_us -= self._last_system_time_us[uid]

                if user_delta_us < 0 or system_delta_us < 0:
                    # UID was removed from kernel accounting, then added back
                    logger.debug(f"uid {uid} accounting reset, reporting full cumulative time")
                    user_delta_us = record.user_time_us
                    system_delta_us = record.system_time_us

            if user_delta_us != 0 or system_delta_us != 0:
                callback(uid, user_delta_us, system_delta_us)
                reported = True

        self._last_user_time_us[uid] = record.user_time_us
        self._last_system_time_us[uid] = record.system_time_us
        return reported

    def remove_uid(self, uid: int) -> bool:
        """Remove a UID from the kernel module and from internal accounting.

        Returns:
            True if the kernel removal request was written.
        """
        return self.remove_uid_range(uid, uid)

    def remove_uid_range(self, first_uid: int, last_uid: int) -> bool:
        """Remove UIDs ``first_uid`` through ``last_uid`` inclusive.

        Internal state is dropped first and stays dropped even if the kernel
        write fails.

        Raises:
            ValueError: If ``first_uid`` is greater than ``last_uid``.
        """
        if first_uid > last_uid:
            raise ValueError(f"Invalid uid range {first_uid}-{last_uid}")

        if first_uid == last_uid:
            stale = [first_uid] if first_uid in self._last_user_time_us else []
        else:
            stale = [uid for uid in self._last_user_time_us if first_uid <= uid <= last_uid]
        for uid in stale:
            del self._last_user_time_us[uid]
            del self._last_system_time_us[uid]
        logger.debug(f"Dropped {len(stale)} tracked uid(s) in range {first_uid}-{last_uid}")

        payload = self._parser.format_remove_range(first_uid, last_uid)
        try:
            with open(self.remove_path, "w", encoding=ProcConfig.ENCODING) as writer:
                writer.write(payload)
                writer.flush()
        except OSError as e:
            error = ControlSinkError(e.errno, f"Cannot write {payload!r} to {self.remove_path}: {e.strerror}")
            logger.error(f"Failed to remove uid from uid_cputime module: {error}", exc_info=True)
            return False
        return True
