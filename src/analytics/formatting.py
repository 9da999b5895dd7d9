"""Display formatting for cost figures and date ranges."""

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
}


def format_currency(amount: float, currency: str = "USD", places: int = 2) -> str:
    """Format an amount with its currency symbol and thousands separators.

    Unknown currency codes are used as a prefix ("CAD 12.50").

    Examples:
        >>> format_currency(1234.5)
        '$1,234.50'
        >>> format_currency(-5, "EUR", places=0)
        '-€5'
    """
    code = (currency or "USD").upper()
    symbol = CURRENCY_SYMBOLS.get(code, f"{code} ")
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.{places}f}"


def format_date_range(date_range: str) -> str:
    """Human wording for a range key ("last-month" -> "last month")."""
    return date_range.replace("-", " ", 1)
