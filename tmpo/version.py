"""Version banner and release-notes link."""

import re
from datetime import datetime, timedelta, timezone

REPOSITORY_URL = "https://example.com/tmpo"

_RFC3339_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:[.,]\d+)?"
    r"(Z|[+-]\d{2}:\d{2})",
    re.ASCII,
)
_RELEASE_RE = re.compile(r"v?\d+\.\d+\.\d+(-[\w.]+)?", re.ASCII)


def _parse_rfc3339(text: str) -> datetime:
    match = _RFC3339_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"not an RFC 3339 timestamp: {text!r}")
    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    zone = match.group(7)
    if zone == "Z":
        tz = timezone.utc
    else:
        offset_hours, offset_minutes = int(zone[1:3]), int(zone[4:6])
        if offset_hours >= 24 or offset_minutes >= 60:
            raise ValueError(f"bad time zone offset: {zone}")
        delta = timedelta(hours=offset_hours, minutes=offset_minutes)
        tz = timezone(-delta if zone[0] == "-" else delta)
    return datetime(year, month, day, hour, minute, second, tzinfo=tz)


def get_formatted_date(input_date: str) -> str:
    """Return '(MM-DD-YYYY)' for an RFC 3339 timestamp, or '' if it does not parse."""
    try:
        moment = _parse_rfc3339(input_date)
    except ValueError:
        return ""
    return f"({moment:%m-%d-%Y})"


def get_changelog_url(version: str) -> str:
    """Return the release page for a semantic version, else the latest release page."""
    if _RELEASE_RE.fullmatch(version) is None:
        return f"{REPOSITORY_URL}/releases/latest"
    return f"{REPOSITORY_URL}/releases/tag/v{version.removeprefix('v')}"


def get_version_output(version: str, date: str) -> str:
    """Return the version banner shown by the version command and flags."""
    version_line = f"tmpo version {version} {get_formatted_date(date)}"
    return f"\n{version_line}\n{get_changelog_url(version)}\n\n"