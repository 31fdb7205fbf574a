"""
Shared formatting helpers for title stat lines.
"""


def format_whole(value: float) -> str:
    """Return a rounded number with thousands separators (e.g., '42,100')."""
    return f"{value:,.0f}"


def format_decimal(value: float, places: int = 1) -> str:
    """Return a number with a fixed count of decimals (e.g., '4.2')."""
    return f"{value:.{places}f}"


def format_percent(rate: float) -> str:
    """Return a 0-1 rate as a whole percentage (e.g., 0.5 -> '50%')."""
    return f"{rate:.0%}"


def format_kda(kills: float, deaths: float, assists: float) -> str:
    """Return a K / D / A line with one decimal each."""
    return " / ".join(format_decimal(v) for v in (kills, deaths, assists))
