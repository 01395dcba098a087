"""Tests for holiday CSV parsing."""

import pytest

from shukujitsu.parser import is_holiday_row, parse, parse_rows

HEADER = "国民の祝日・休日月日,国民の祝日・休日名称\n"


def test_parse_basic():
    """Test a header plus one row parses to a single entry."""
    assert dict(parse("header\n2024-01-01,元日\n".encode())) == {"2024-01-01": "元日"}


def test_parse_cabinet_office_format():
    """Test the upstream slash dates and CRLF line endings."""
    payload = (HEADER + "2024/1/1,元日\r\n2024/1/8,成人の日\r\n").encode()
    assert dict(parse(payload)) == {"2024-01-01": "元日", "2024-01-08": "成人の日"}


def test_parse_shift_jis():
    """Test the legacy encoding can be selected."""
    payload = (HEADER + "2024/2/23,天皇誕生日\r\n").encode("cp932")
    assert dict(parse(payload, encoding="cp932")) == {"2024-02-23": "天皇誕生日"}


def test_parse_undecodable_bytes_do_not_fail():
    """Test bytes invalid for the encoding are replaced rather than raising."""
    payload = (HEADER + "2024/2/23,天皇誕生日\r\n").encode("cp932")
    table = parse(payload, encoding="utf-8")
    assert list(table) == ["2024-02-23"]


def test_parse_malformed_lines():
    """Test lines without a comma or with an empty field are skipped."""
    payload = (HEADER + "invalid-date\n2024-01-01\n,元日\n2024-01-02,\n2024-01-03,  \n").encode()
    assert dict(parse(payload)) == {}


def test_parse_header_only():
    """Test a header-only file gives an empty table."""
    assert dict(parse(HEADER.encode())) == {}
    assert dict(parse(b"")) == {}


def test_parse_header_is_always_dropped():
    """Test the first line is dropped even when it looks like data."""
    assert dict(parse("2024-01-01,元日\n2024-01-08,成人の日\n".encode())) == {
        "2024-01-08": "成人の日"
    }


def test_parse_duplicate_dates_last_wins():
    """Test later rows overwrite earlier rows for the same date."""
    assert dict(parse(b"header\n2024-01-01,A\n2024-01-01,B\n")) == {"2024-01-01": "B"}
    assert dict(parse(b"header\n2024/1/1,A\n2024-01-01,B\n")) == {"2024-01-01": "B"}


def test_parse_blank_lines_and_whitespace():
    """Test blank lines are skipped and fields are trimmed."""
    payload = (HEADER + "\n   \n 2024-01-01 , 元日 \n\n").encode()
    assert dict(parse(payload)) == {"2024-01-01": "元日"}


def test_parse_keeps_garbage_dates():
    """Test unparseable date fields are stored verbatim."""
    assert dict(parse(b"header\nsomeday,Holiday\n")) == {"someday": "Holiday"}


def test_parse_splits_on_first_comma():
    """Test only the first comma separates the fields."""
    assert dict(parse(b"header\n2024-01-01,New Year, observed\n")) == {
        "2024-01-01": "New Year, observed"
    }


def test_parse_returns_read_only_table():
    """Test the parsed table cannot be modified."""
    table = parse(b"header\n2024-01-01,A\n")
    with pytest.raises(TypeError):
        table["2024-01-02"] = "B"  # type: ignore[index]


def test_parse_rows():
    """Test the row iterator yields trimmed pairs in file order."""
    rows = list(parse_rows("header\n2024/1/1,元日\nbad\n2024/1/8,成人の日"))
    assert rows == [("2024/1/1", "元日"), ("2024/1/8", "成人の日")]


def test_is_holiday_row():
    """Test the row acceptance predicate."""
    assert is_holiday_row("2024-01-01", "元日")
    assert not is_holiday_row("", "元日")
    assert not is_holiday_row("2024-01-01", " ")


def test_parse_only_splits_on_line_feeds():
    """Test other Unicode line breaks stay inside the holiday name."""
    payload = "header\r\n2024-01-01,元日\x1c補足\r\n2024-01-08,成人\u2028の日\n".encode()
    assert dict(parse(payload)) == {
        "2024-01-01": "元日\x1c補足",
        "2024-01-08": "成人\u2028の日",
    }
