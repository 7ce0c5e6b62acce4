"""Validators for configuration prompts and project name detection."""

import os
from pathlib import Path

_COMMON_TIMEZONES = {"UTC", "GMT", "EST", "PST", "MST", "CST"}
_FALLBACK_PROJECT_NAME = "my-project"


class ValidationError(ValueError):
    """Raised when user input fails validation."""


def validate_currency(text: str) -> None:
    """Accept an empty value or a three-letter currency code."""
    text = text.strip()
    if not text:
        return
    if len(text.encode("utf-8")) != 3:
        raise ValidationError("currency code must be 3 letters (e.g., USD, EUR, GBP)")
    if not all(("a" <= ch <= "z") or ("A" <= ch <= "Z") for ch in text):
        raise ValidationError("currency code must contain only letters")


def validate_timezone(text: str) -> None:
    """Accept an empty value, a common abbreviation, or a Region/City name."""
    text = text.strip()
    if not text:
        return
    if text.upper() in _COMMON_TIMEZONES:
        return
    if "/" not in text:
        raise ValidationError(
            "timezone should be in format Region/City (e.g., America/New_York) or UTC"
        )
    if " " in text:
        raise ValidationError("timezone should not contain spaces (use underscores instead)")


def validate_hourly_rate(text: str) -> None:
    """Accept an empty value or a non-negative number."""
    text = text.strip()
    if not text:
        return
    if "_" in text:
        raise ValidationError("must be a valid number")
    try:
        rate = float(text)
    except ValueError:
        raise ValidationError("must be a valid number") from None
    if rate < 0:
        raise ValidationError("hourly rate cannot be negative")


def _find_git_root(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        if (directory / ".git").exists():
            return directory
    return None


def detect_default_project_name() -> str:
    """Return the git repository's name, else the current directory's name."""
    try:
        cwd = Path(os.getcwd())
    except OSError:
        return _FALLBACK_PROJECT_NAME

    root = _find_git_root(cwd)
    if root is not None and root.name:
        return root.name
    return cwd.name