"""Building blocks of a time tracker: currency, input checks, version banner, editing and export."""

__version__ = "0.1.0"