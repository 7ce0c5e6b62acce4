"""Export time entries to CSV and JSON files."""

import csv
import json
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Optional, Protocol

_CSV_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
_CSV_HEADER = ["Project", "Start Time", "End Time", "Duration (hours)", "Description"]


class TimeEntryLike(Protocol):
    project_name: str
    start_time: datetime
    end_time: Optional[datetime]
    description: str


class ExportError(OSError):
    """Raised when an export file cannot be written."""


def _duration(entry: TimeEntryLike) -> timedelta:
    end = entry.end_time
    if end is None:
        end = datetime.now(entry.start_time.tzinfo)
    return end - entry.start_time


def _hours(entry: TimeEntryLike) -> float:
    return _duration(entry).total_seconds() / 3600


def _rfc3339(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.astimezone()
    offset = moment.utcoffset() or timedelta(0)
    base = moment.strftime("%Y-%m-%dT%H:%M:%S")
    if offset == timedelta(0):
        return base + "Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = int(abs(offset).total_seconds()) // 60
    return f"{base}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass
class ExportEntry:
    """A time entry shaped for JSON export."""

    project: str
    start_time: str
    duration: float
    end_time: str = ""
    description: str = ""

    @classmethod
    def from_entry(cls, entry: TimeEntryLike) -> "ExportEntry":
        return cls(
            project=entry.project_name,
            start_time=_rfc3339(entry.start_time),
            duration=_hours(entry),
            end_time=_rfc3339(entry.end_time) if entry.end_time is not None else "",
            description=entry.description,
        )

    def to_dict(self) -> dict:
        """Return the JSON object, leaving out an empty end time and description."""
        data: dict = {"project": self.project, "start_time": self.start_time}
        if self.end_time:
            data["end_time"] = self.end_time
        data["duration_hours"] = self.duration
        if self.description:
            data["description"] = self.description
        return data


def to_csv(entries: Iterable[TimeEntryLike], filename: str) -> None:
    """Write a header row and one row per entry to a CSV file."""
    try:
        handle = open(filename, "w", newline="", encoding="utf-8")
    except OSError as err:
        raise ExportError(f"failed to create CSV file: {err}") from err
    with handle:
        writer = csv.writer(handle, lineterminator="\n")
        try:
            writer.writerow(_CSV_HEADER)
        except OSError as err:
            raise ExportError(f"failed to write header: {err}") from err
        for entry in entries:
            end = entry.end_time.strftime(_CSV_TIME_FORMAT) if entry.end_time else ""
            row = [
                entry.project_name,
                entry.start_time.strftime(_CSV_TIME_FORMAT),
                end,
                f"{_hours(entry):.2f}",
                entry.description,
            ]
            try:
                writer.writerow(row)
            except OSError as err:
                raise ExportError(f"failed to write record: {err}") from err


def to_json(entries: Iterable[TimeEntryLike], filename: str) -> None:
    """Write the entries as an indented JSON array (null when there are none)."""
    records = [ExportEntry.from_entry(entry).to_dict() for entry in entries]
    try:
        handle = open(filename, "w", encoding="utf-8")
    except OSError as err:
        raise ExportError(f"failed to create JSON file: {err}") from err
    with handle:
        try:
            json.dump(records or None, handle, indent=2, ensure_ascii=False)
            handle.write("\n")
        except (OSError, TypeError, ValueError) as err:
            raise ExportError(f"failed to encode JSON: {err}") from err