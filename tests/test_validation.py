import os

import pytest

from tmpo.validation import (
    ValidationError,
    detect_default_project_name,
    validate_currency,
    validate_hourly_rate,
    validate_timezone,
)


def test_detect_default_project_name_in_git_repo(tmp_path, monkeypatch):
    repo = tmp_path / "my-repo"
    (repo / ".git").mkdir(parents=True)
    sub = repo / "src" / "pkg"
    sub.mkdir(parents=True)
    monkeypatch.chdir(sub)
    assert detect_default_project_name() == "my-repo"


def test_detect_default_project_name_git_root_is_cwd(tmp_path, monkeypatch):
    (tmp_path / ".git").mkdir()
    monkeypatch.chdir(tmp_path)
    name = detect_default_project_name()
    assert name
    assert name == tmp_path.name


def test_detect_default_project_name_without_git(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert detect_default_project_name() == tmp_path.name


def test_detect_default_project_name_when_cwd_unavailable(monkeypatch):
    def broken():
        raise OSError("gone")

    monkeypatch.setattr(os, "getcwd", broken)
    assert detect_default_project_name() == "my-project"


@pytest.mark.parametrize("text", ["", "   ", "75.50", "100", "0"])
def test_validate_hourly_rate_accepts(text):
    assert validate_hourly_rate(text) is None


@pytest.mark.parametrize(
    "text, message",
    [
        ("-50", "hourly rate cannot be negative"),
        ("not-a-number", "must be a valid number"),
        ("50abc", "must be a valid number"),
        ("$100", "must be a valid number"),
    ],
)
def test_validate_hourly_rate_rejects(text, message):
    with pytest.raises(ValidationError, match=message):
        validate_hourly_rate(text)


@pytest.mark.parametrize("text", ["", "  ", "USD", "eur", " GbP "])
def test_validate_currency_accepts(text):
    assert validate_currency(text) is None


@pytest.mark.parametrize(
    "text, message",
    [
        ("US", "must be 3 letters"),
        ("USDX", "must be 3 letters"),
        ("U1D", "only letters"),
        ("U-D", "only letters"),
    ],
)
def test_validate_currency_rejects(text, message):
    with pytest.raises(ValidationError, match=message):
        validate_currency(text)


@pytest.mark.parametrize(
    "text", ["", "UTC", "gmt", "PST", "America/New_York", "Europe/London", " Asia/Tokyo "]
)
def test_validate_timezone_accepts(text):
    assert validate_timezone(text) is None


@pytest.mark.parametrize(
    "text, message",
    [
        ("Tokyo", "Region/City"),
        ("CET", "Region/City"),
        ("America/New York", "should not contain spaces"),
    ],
)
def test_validate_timezone_rejects(text, message):
    with pytest.raises(ValidationError, match=message):
        validate_timezone(text)


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        validate_hourly_rate("abc")