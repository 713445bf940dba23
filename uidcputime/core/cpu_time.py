"""Per-UID CPU time data structures."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class UidCpuTime:
    """Cumulative CPU time for one UID, as read from the kernel."""
    uid: int
    user_time_us: int
    system_time_us: int


@dataclass(frozen=True)
class UidCpuTimeDelta:
    """CPU time spent by one UID since the previous read."""
    uid: int
    user_time_us: int
    system_time_us: int

    @property
    def total_time_us(self) -> int:
        return self.user_time_us + self.system_time_us

    def to_dict(self) -> dict:
        """Convert delta to dictionary format."""
        return {
            'uid': self.uid,
            'user_time_us': self.user_time_us,
            'system_time_us': self.system_time_us,
        }

    def __str__(self) -> str:
        return (
            f"UidCpuTimeDelta("
            f"uid={self.uid}, "
            f"user={self.user_time_us}us, "
            f"system={self.system_time_us}us)"
        )
