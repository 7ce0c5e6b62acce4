# tmpo

The core of a small time tracker for developers. It formats amounts of
money, checks what a user types into prompts, works out what changed when
an entry is edited, and exports time entries to CSV or JSON.

It needs no third-party libraries and works on Python 3.10 or later.

## Modules

| Module            | Purpose                                                        |
|-------------------|----------------------------------------------------------------|
| `tmpo.currency`   | Currency symbols and formatting of amounts                     |
| `tmpo.validation` | Checks for currency codes, timezones, hourly rates; project name |
| `tmpo.timeinput`  | Reading dates (`MM-DD-YYYY`) and times (12- or 24-hour)        |
| `tmpo.version`    | Version banner and release-notes link                          |
| `tmpo.editing`    | Optional prompt inputs and the changes made to an entry        |
| `tmpo.export`     | Writing entries to CSV and JSON files                          |

## Currency

```python
from tmpo.currency import format_currency, get_symbol, get_supported_currencies, is_supported

format_currency(150, "USD")      # "$150.00"
format_currency(50.5, "eur")     # "€50.50"
format_currency(100, "XYZ")      # "$100.00" (empty or unknown codes fall back to USD)
get_symbol("GBP")                # "£"
get_symbol("XYZ")                # "XYZ" (unknown codes come back as typed, upper-cased)
is_supported(" jpy ")            # True
get_supported_currencies()       # sorted list of codes, e.g. ["AED", "ARS", "AUD", ...]
```

`DEFAULT_CURRENCY` is `"USD"`.

## Checking input

Each validator returns nothing when the input is acceptable and raises an
exception with a readable message when it is not. Empty (or blank) input
is accepted by all three, meaning "keep the default".

```python
from tmpo.validation import (
    ValidationError,
    validate_currency,
    validate_hourly_rate,
    validate_timezone,
)

validate_hourly_rate("75.50")    # fine
try:
    validate_hourly_rate("-50")
except ValidationError as exc:
    print(exc)                   # hourly rate cannot be negative

validate_currency("eur")         # three ASCII letters
validate_timezone("UTC")         # UTC, GMT, EST, PST, MST or CST
validate_timezone("Europe/London")  # Region/City, no spaces
```

`detect_default_project_name()` returns the name of the nearest directory
at or above the current one that contains a `.git` entry, or else the name
of the current directory (`"my-project"` if the current directory cannot
be read).

### Dates and times typed by hand

```python
from tmpo.timeinput import (
    InputError,
    normalize_ampm,
    parse_datetime,
    validate_date,
    validate_end_datetime,
    validate_time,
)

validate_date("12-25-2024")      # MM-DD-YYYY
validate_time("9:30 am")         # 12-hour, any case
validate_time("14:30")           # 24-hour
normalize_ampm("9:30 pm")        # "9:30 PM"

start = parse_datetime("12-25-2024", "5:45 PM")
start.hour, start.minute         # (17, 45)

try:
    validate_end_datetime("12-25-2024", "5:00 PM", "12-25-2024", "9:00 AM")
except InputError as exc:
    print(exc)                   # end time must be after start time
```

`parse_datetime` returns a timezone-aware datetime in the local zone. A
date may be up to one day ahead of now; anything later is rejected by
`validate_date`.

## Version banner

```python
from tmpo.version import get_changelog_url, get_formatted_date, get_version_output

get_formatted_date("2024-01-15T10:30:00Z")   # "(01-15-2024)"
get_formatted_date("2024-01-15")             # "" (not an RFC 3339 timestamp)
get_changelog_url("1.0.0")                   # ".../releases/tag/v1.0.0"
get_changelog_url("dev")                     # ".../releases/latest"
print(get_version_output("1.0.0", "2024-01-15T10:30:00Z"))
```

The links are built from `tmpo.version.REPOSITORY_URL`.

## Editing entries

```python
from tmpo.editing import diff_entry, resolve_input, validate_date_optional, validate_time_optional

resolve_input("   ", "Fixed bug")   # "Fixed bug" (empty answer keeps the current value)
validate_date_optional("")          # empty is fine; otherwise as validate_date
validate_time_optional("")          # empty is fine; otherwise as validate_time
```

`diff_entry(old_start, old_end, old_description, new_start, new_end,
new_description)` returns a list of `EntryChange(field, old, new)` items
for the fields that differ, with `field` one of `"Start time"`,
`"End time"` and `"Description"`. Times are compared to the minute, so a
change of seconds alone does not count.

## Export

`to_csv` and `to_json` take any objects with the attributes
`project_name`, `start_time`, `end_time` (a datetime, or `None` for a
running entry) and `description`.

```python
from tmpo.export import to_csv, to_json

to_csv(entries, "timesheet.csv")
to_json(entries, "timesheet.json")
```

The CSV file has the columns `Project`, `Start Time`, `End Time`,
`Duration (hours)` and `Description`; times are written as
`YYYY-MM-DD HH:MM:SS` and the duration in hours with two decimals. A
running entry has an empty end time and its duration is measured up to
now.

The JSON file is an indented array of objects with `project`,
`start_time`, `end_time`, `duration_hours` and `description`. Times use
RFC 3339 (naive datetimes are taken as local time); `end_time` and
`description` are left out when empty. With no entries the file holds
`null`. `ExportEntry.from_entry(entry)` and `ExportEntry.to_dict()` give
the same objects in memory. Failures to write either file raise
`ExportError`.

## What this package does not do

It is a library of building blocks only. It has no command-line program,
no interactive prompts, no storage of time entries (no database, no
starting, stopping, pausing or resuming of sessions), no reading or
writing of configuration files, and no check for newer releases. Callers
supply the entries and handle user interaction themselves.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.