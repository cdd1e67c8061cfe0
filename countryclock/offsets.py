"""UTC offset formatting."""

from __future__ import annotations


def format_offset(minutes: int) -> str:
    """Format an offset in minutes as ``+HH:MM`` / ``-HH:MM``.

    >>> format_offset(-330)
    '-05:30'
    >>> format_offset(0)
    '+00:00'
    """
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{mins:02d}"
