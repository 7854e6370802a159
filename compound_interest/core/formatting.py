"""Display helpers for chart axes and result cards."""


def _plain_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_axis_tick(value: float) -> str:
    """Abbreviate large balances for the value axis ($1.2B, $3.4M, $12K)."""
    if value >= 1e9:
        return f"${value / 1e9:.1f}B"
    elif value >= 1e6:
        return f"${value / 1e6:.1f}M"
    elif value >= 1e3:
        return f"${value / 1e3:.0f}K"
    else:
        return f"${_plain_number(value)}"


def format_currency(value: float) -> str:
    """Thousands separators, at most two decimals, trailing zeros dropped."""
    text = f"{value:,.2f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"${text}"
