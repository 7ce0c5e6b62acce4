from datetime import datetime, timedelta

import pytest

from tmpo.timeinput import (
    InputError,
    normalize_ampm,
    parse_datetime,
    validate_date,
    validate_end_datetime,
    validate_time,
)


@pytest.mark.parametrize(
    "text",
    [
        "12-25-2024",
        "01-01-2020",
        datetime.now().strftime("%m-%d-%Y"),
    ],
)
def test_validate_date_accepts(text):
    assert validate_date(text) is None


@pytest.mark.parametrize(
    "text",
    [
        "",
        "2024-12-25",
        "13-32-2024",
        (datetime.now() + timedelta(hours=72)).strftime("%m-%d-%Y"),
    ],
)
def test_validate_date_rejects(text):
    with pytest.raises(InputError):
        validate_date(text)


def test_validate_date_messages():
    with pytest.raises(InputError, match="date cannot be empty"):
        validate_date("")
    with pytest.raises(InputError, match="MM-DD-YYYY"):
        validate_date("2024-12-25")
    future = (datetime.now() + timedelta(days=10)).strftime("%m-%d-%Y")
    with pytest.raises(InputError, match="future"):
        validate_date(future)


@pytest.mark.parametrize(
    "text",
    ["9:30 AM", "5:45 PM", "9:30 am", "09:30 AM", "14:30", "00:00", "23:59"],
)
def test_validate_time_accepts(text):
    assert validate_time(text) is None


@pytest.mark.parametrize("text", ["", "9.30 AM", "25:00", "9:60 AM"])
def test_validate_time_rejects(text):
    with pytest.raises(InputError):
        validate_time(text)


def test_validate_time_empty_message():
    with pytest.raises(InputError, match="time cannot be empty"):
        validate_time("")


@pytest.mark.parametrize(
    "start_date,start_time,end_date,end_time",
    [
        ("12-25-2024", "9:00 AM", "12-25-2024", "5:00 PM"),
        ("12-25-2024", "11:00 PM", "12-26-2024", "1:00 AM"),
        ("12-25-2024", "09:00", "12-25-2024", "17:00"),
    ],
)
def test_validate_end_datetime_accepts(start_date, start_time, end_date, end_time):
    assert validate_end_datetime(start_date, start_time, end_date, end_time) is None


@pytest.mark.parametrize(
    "start_date,start_time,end_date,end_time",
    [
        ("12-25-2024", "5:00 PM", "12-25-2024", "9:00 AM"),
        ("12-25-2024", "9:00 AM", "12-25-2024", "9:00 AM"),
    ],
)
def test_validate_end_datetime_rejects(start_date, start_time, end_date, end_time):
    with pytest.raises(InputError, match="end time must be after start time"):
        validate_end_datetime(start_date, start_time, end_date, end_time)


def test_validate_end_datetime_reports_bad_start():
    with pytest.raises(InputError, match="^invalid start datetime"):
        validate_end_datetime("bad", "9:00 AM", "12-25-2024", "5:00 PM")


def test_validate_end_datetime_reports_bad_end():
    with pytest.raises(InputError, match="^invalid end datetime"):
        validate_end_datetime("12-25-2024", "9:00 AM", "12-25-2024", "noon")


@pytest.mark.parametrize(
    "time_str,hour,minute",
    [
        ("9:30 AM", 9, 30),
        ("5:45 PM", 17, 45),
        ("14:30", 14, 30),
        ("12:00 AM", 0, 0),
        ("12:00 PM", 12, 0),
        ("9:30 am", 9, 30),
    ],
)
def test_parse_datetime_clock(time_str, hour, minute):
    result = parse_datetime("12-25-2024", time_str)
    assert (result.hour, result.minute) == (hour, minute)
    assert (result.year, result.month, result.day) == (2024, 12, 25)


def test_parse_datetime_is_in_local_time():
    result = parse_datetime("12-25-2024", "14:30")
    expected = datetime(2024, 12, 25, 14, 30).astimezone()
    assert result.utcoffset() == expected.utcoffset()
    assert result == expected


@pytest.mark.parametrize(
    "date,time_str",
    [("12/25/2024", "9:30 AM"), ("02-30-2024", "9:30"), ("12-25-2024", "13:00 PM")],
)
def test_parse_datetime_rejects(date, time_str):
    with pytest.raises(InputError):
        parse_datetime(date, time_str)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("9:30 am", "9:30 AM"),
        ("9:30 AM", "9:30 AM"),
        ("9:30 pm", "9:30 PM"),
        ("9:30 PM", "9:30 PM"),
        ("14:30", "14:30"),
        ("MIXED case Am", "MIXED CASE AM"),
    ],
)
def test_normalize_ampm(text, expected):
    assert normalize_ampm(text) == expected