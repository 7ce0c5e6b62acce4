"""Parsing and validation of dates and clock times typed by the user."""

import re
from datetime import date, datetime, timedelta, timezone

_DATE_RE = re.compile(r"(\d{2})-(\d{2})-(\d{4})", re.ASCII)
_CLOCK_12_RE = re.compile(r"(\d{1,2}):(\d{2}) (AM|PM)", re.ASCII)
_CLOCK_24_RE = re.compile(r"(\d{1,2}):(\d{2})", re.ASCII)

_DATE_FORMAT_MESSAGE = "invalid date format, use MM-DD-YYYY"
_TIME_FORMAT_MESSAGE = (
    "invalid time format, use 12-hour (e.g., 9:30 AM) or 24-hour (e.g., 14:30)"
)


class InputError(ValueError):
    """Raised when a typed date or time is not acceptable."""


def _parse_date(text: str) -> date:
    match = _DATE_RE.fullmatch(text)
    if match is None:
        raise InputError(_DATE_FORMAT_MESSAGE)
    month, day, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        raise InputError(_DATE_FORMAT_MESSAGE) from None


def _parse_clock(text: str) -> tuple[int, int]:
    """Return (hour, minute) for a 12-hour 'H:MM AM' or 24-hour 'H:MM' time."""
    match = _CLOCK_12_RE.fullmatch(text)
    if match is not None:
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour <= 12 and minute < 60:
            if match.group(3) == "PM" and hour < 12:
                hour += 12
            elif match.group(3) == "AM" and hour == 12:
                hour = 0
            return hour, minute

    match = _CLOCK_24_RE.fullmatch(text)
    if match is not None:
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour < 24 and minute < 60:
            return hour, minute

    raise InputError(_TIME_FORMAT_MESSAGE)


def normalize_ampm(text: str) -> str:
    """Upper-case the input so that am/pm markers become AM/PM."""
    return text.upper()


def validate_date(text: str) -> None:
    """Accept a MM-DD-YYYY date that is not more than a day in the future."""
    if not text:
        raise InputError("date cannot be empty")
    day = _parse_date(text)
    midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    if midnight > datetime.now(timezone.utc) + timedelta(hours=24):
        raise InputError("date cannot be in the future")


def validate_time(text: str) -> None:
    """Accept a 12-hour time with AM/PM or a 24-hour time."""
    if not text:
        raise InputError("time cannot be empty")
    _parse_clock(normalize_ampm(text))


def parse_datetime(date: str, time_str: str) -> datetime:
    """Combine a MM-DD-YYYY date and a clock time into a local, aware datetime."""
    day = _parse_date(date)
    hour, minute = _parse_clock(normalize_ampm(time_str))
    return datetime(day.year, day.month, day.day, hour, minute).astimezone()


def validate_end_datetime(
    start_date: str, start_time: str, end_date: str, end_time: str
) -> None:
    """Require both moments to parse and the end to fall strictly after the start."""
    try:
        start = parse_datetime(start_date, start_time)
    except InputError as err:
        raise InputError(f"invalid start datetime: {err}") from err
    try:
        end = parse_datetime(end_date, end_time)
    except InputError as err:
        raise InputError(f"invalid end datetime: {err}") from err
    if end <= start:
        raise InputError("end time must be after start time")