import pytest

from uidcputime.proc import KernelUidCpuTimeReader


class FakeUidCpuTime:
    """Stands in for the uid_cputime proc files under a temp directory."""

    def __init__(self, root):
        self.stat_path = root / "show_uid_stat"
        self.remove_path = root / "remove_uid_range"

    def write(self, *lines: str, trailing_newline: bool = True) -> None:
        text = "\n".join(lines)
        if lines and trailing_newline:
            text += "\n"
        self.stat_path.write_text(text, encoding="ascii")

    @property
    def removal_request(self) -> str:
        return self.remove_path.read_text(encoding="ascii")


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, uid, user_time_us, system_time_us):
        self.calls.append((uid, user_time_us, system_time_us))


@pytest.fixture
def proc(tmp_path):
    return FakeUidCpuTime(tmp_path)


@pytest.fixture
def reader(proc):
    return KernelUidCpuTimeReader(str(proc.stat_path), str(proc.remove_path))


@pytest.fixture
def recorder():
    return Recorder()
