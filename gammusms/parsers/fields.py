"""
Field normalization helpers.

Shared cleanup for ``key : value`` lines of Gammu output.
"""

import logging

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
EPOCH = "1970-01-01 00:00:00"


def normalize_key(raw: str) -> str:
    """Trim, replace spaces with underscores and lower-case a field name."""
    return raw.strip().replace(" ", "_").lower()


def normalize_value(raw: str) -> str:
    """Trim a value and strip one pair of surrounding double quotes."""
    value = raw.strip()
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        value = value[1:-1]
    return value


def is_storable(key: str, value: str) -> bool:
    """Fields with an empty key or value are not kept."""
    return bool(key.strip()) and bool(value.strip())


def reformat_sent_date(raw: str) -> tuple[str, bool]:
    """
    Reformat a ``Sent`` value to ``YYYY-MM-DD HH:MM:SS``.

    Gammu appends the timezone in parentheses, e.g.
    ``01/02/2023 10:00:00 (+0100)``; everything from the first ``(`` is
    dropped before parsing.

    Args:
        raw: Value as printed by Gammu

    Returns:
        Tuple of (formatted date, parsed). Unparseable input yields the
        epoch and ``False``.
    """
    date = raw.split("(", 1)[0].strip().replace("/", "-")

    try:
        parsed = date_parser.parse(date)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Unparseable sent date {raw!r}: {e}")
        return EPOCH, False

    return parsed.strftime(DATETIME_FORMAT), True
