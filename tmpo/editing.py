"""Helpers for editing a completed time entry."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from tmpo.timeinput import validate_date, validate_time


@dataclass(frozen=True)
class EntryChange:
    """One field of an entry whose value differs after editing."""

    field: str
    old: Any
    new: Any


def validate_date_optional(text: str) -> None:
    """Accept an empty value (keep current) or a valid MM-DD-YYYY date."""
    if text:
        validate_date(text)


def validate_time_optional(text: str) -> None:
    """Accept an empty value (keep current) or a valid 12- or 24-hour time."""
    if text:
        validate_time(text)


def resolve_input(text: str, current: str) -> str:
    """Return the trimmed input, or the current value when nothing was typed."""
    text = text.strip()
    return text if text else current


def _to_minute(moment: datetime) -> datetime:
    return moment.replace(second=0, microsecond=0)


def diff_entry(
    old_start: datetime,
    old_end: datetime,
    old_description: str,
    new_start: datetime,
    new_end: datetime,
    new_description: str,
) -> list[EntryChange]:
    """List the changed fields; times are compared to the minute."""
    changes: list[EntryChange] = []
    if _to_minute(old_start) != _to_minute(new_start):
        changes.append(EntryChange("Start time", old_start, new_start))
    if _to_minute(old_end) != _to_minute(new_end):
        changes.append(EntryChange("End time", old_end, new_end))
    if old_description != new_description:
        changes.append(EntryChange("Description", old_description, new_description))
    return changes