"""Qt signal bridge for per-UID CPU time deltas.

Pass ``UidCpuTimeSignals.on_uid_cpu_time`` as the ``read_delta`` callback and
connect to its signals to receive deltas like any other Qt data stream.
"""

from __future__ import annotations

from PySide6 import QtCore

from ..core import UidCpuTimeDelta


class UidCpuTimeSignals(QtCore.QObject):
    """Re-emits ``read_delta`` callbacks as Qt signals.

    Signals:
        delta: (uid, user_time_us, system_time_us) for each reported UID.
        delta_received: The same delta as a dictionary.

    Microsecond counts are carried as ``object``; Qt's ``int`` is 32-bit.
    """

    delta = QtCore.Signal(int, object, object)
    delta_received = QtCore.Signal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._count = 0

    @property
    def count(self) -> int:
        """Number of deltas emitted so far."""
        return self._count

    @QtCore.Slot(int, object, object)
    def on_uid_cpu_time(self, uid: int, user_time_us: int, system_time_us: int) -> None:
        self._count += 1
        self.delta.emit(uid, user_time_us, system_time_us)
        self.delta_received.emit(UidCpuTimeDelta(uid, user_time_us, system_time_us).to_dict())
