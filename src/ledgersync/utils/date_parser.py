"""Date parsing utilities.

The ledger stores purchase dates in the Chinese long form produced for
``zh-CN`` (``2024年3月5日``, no zero padding). Export files carry ISO-like
timestamps (``2024-03-05 12:30:00``).
"""

from datetime import date, datetime
import re

from dateutil import parser as date_parser

_LONG_FORM = re.compile(r"^\s*(\d{1,4})\s*年\s*(\d{1,2})\s*月\s*(\d{1,2})\s*日?\s*$")


def format_ledger_date(value: date) -> str:
    """Render a date in the ledger's long form, e.g. ``2024年3月5日``."""
    return f"{value.year}年{value.month}月{value.day}日"


def parse_ledger_date(date_str: str) -> date:
    """Parse a ledger purchase date back into a calendar date.

    Accepts the long form (``2024年3月5日``) and, for older ledgers, anything
    dateutil understands (``2024-03-05``, ``2024/3/5``).

    Raises:
        ValueError: If the date cannot be parsed
    """
    if date_str is None or not str(date_str).strip():
        raise ValueError("Empty date string")

    match = _LONG_FORM.match(date_str)
    if match:
        year, month, day = (int(part) for part in match.groups())
        try:
            return date(year, month, day)
        except ValueError as e:
            raise ValueError(f"Could not parse date '{date_str}': {e}")

    try:
        return date_parser.parse(date_str.strip()).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_export_timestamp(timestamp_str: str) -> datetime:
    """Parse an export transaction time such as ``2024-03-05 12:30:00``.

    Raises:
        ValueError: If the timestamp cannot be parsed
    """
    if timestamp_str is None or not timestamp_str.strip():
        raise ValueError("Empty transaction time")
    try:
        return date_parser.parse(timestamp_str.strip())
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse transaction time '{timestamp_str}': {e}")
