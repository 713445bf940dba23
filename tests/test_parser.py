"""Tests for uid_cputime line parsing."""
import pytest

from uidcputime.core import UidCpuTime, MalformedRecordError
from uidcputime.proc import UidCpuTimeParser


class TestParseLine:
    def test_basic_line(self):
        assert UidCpuTimeParser.parse_line("1000: 500 200") == UidCpuTime(1000, 500, 200)

    def test_trailing_newline(self):
        assert UidCpuTimeParser.parse_line("10005: 12 0\n") == UidCpuTime(10005, 12, 0)

    def test_crlf(self):
        assert UidCpuTimeParser.parse_line("0: 1 2\r\n") == UidCpuTime(0, 1, 2)

    def test_large_values(self):
        record = UidCpuTimeParser.parse_line("1000: 9223372036854775807 4294967296")
        assert record.user_time_us == 9223372036854775807
        assert record.system_time_us == 4294967296

    def test_extra_fields_ignored(self):
        assert UidCpuTimeParser.parse_line("1000: 5 6 7") == UidCpuTime(1000, 5, 6)

    @pytest.mark.parametrize("line", [
        "",
        "\n",
        "1000: 500",
        "1000: abc 200",
        "1000: 500 2x0",
        "abc: 500 200",
        "1000 500 200",
        "1000; 500 200",
        "1000:  500 200",
        "1000: -5 200",
        "1000: 5_00 200",
        "1000: +5 200",
        "-1: 5 200",
        ": 500 200",
    ])
    def test_malformed(self, line):
        with pytest.raises(MalformedRecordError):
            UidCpuTimeParser.parse_line(line)

    def test_error_carries_line(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            UidCpuTimeParser.parse_line("1000: x 1", line_number=3)
        assert exc_info.value.line == "1000: x 1"
        assert exc_info.value.line_number == 3
        assert "line 3" in str(exc_info.value)

    def test_malformed_is_value_error(self):
        with pytest.raises(ValueError):
            UidCpuTimeParser.parse_line("garbage")


class TestFormatRemoveRange:
    def test_single_uid(self):
        assert UidCpuTimeParser.format_remove_range(1000, 1000) == "1000-1000"

    def test_range(self):
        assert UidCpuTimeParser.format_remove_range(10000, 19999) == "10000-19999"

    def test_zero(self):
        assert UidCpuTimeParser.format_remove_range(0, 0) == "0-0"
