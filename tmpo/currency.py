"""Currency symbols and amount formatting."""

DEFAULT_CURRENCY = "USD"

_CURRENCY_SYMBOLS: dict[str, str] = {
    # Americas
    "USD": "$",
    "CAD": "CA$",
    "BRL": "R$",
    "MXN": "MX$",
    "ARS": "AR$",
    # Europe
    "EUR": "€",
    "GBP": "£",
    "CHF": "Fr",
    "SEK": "kr",
    "NOK": "kr",
    "DKK": "kr",
    "PLN": "zł",
    "CZK": "Kč",
    # Asia
    "JPY": "¥",
    "CNY": "¥",
    "INR": "₹",
    "KRW": "₩",
    "SGD": "S$",
    "HKD": "HK$",
    "THB": "฿",
    "IDR": "Rp",
    "MYR": "RM",
    "PHP": "₱",
    "VND": "₫",
    # Oceania
    "AUD": "A$",
    "NZD": "NZ$",
    # Middle East & Africa
    "AED": "د.إ",
    "SAR": "﷼",
    "ILS": "₪",
    "ZAR": "R",
    "EGP": "E£",
    "TRY": "₺",
}


def _normalize(currency_code: str) -> str:
    return currency_code.strip().upper()


def format_currency(amount: float, currency_code: str) -> str:
    """Format an amount with two decimals behind its currency symbol.

    Empty or unknown codes fall back to the default currency.
    """
    code = _normalize(currency_code)
    if not code or not is_supported(code):
        code = DEFAULT_CURRENCY
    return f"{get_symbol(code)}{amount:.2f}"


def get_symbol(currency_code: str) -> str:
    """Return the display symbol for a code, or the normalized code itself if unknown."""
    code = _normalize(currency_code)
    return _CURRENCY_SYMBOLS.get(code, code)


def is_supported(currency_code: str) -> bool:
    """Return True if the code (case and surrounding space ignored) has a known symbol."""
    return _normalize(currency_code) in _CURRENCY_SYMBOLS


def get_supported_currencies() -> list[str]:
    """Return the sorted list of supported currency codes."""
    return sorted(_CURRENCY_SYMBOLS)