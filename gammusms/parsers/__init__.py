"""
Response parsers for Gammu output.

Provides total (never raising) parsing of Gammu text dumps into structured data.
"""

from .base import ResponseParser
from .lines import LineClassifier, LineKind, ClassifiedLine, MESSAGE_HEADER, CONTACT_HEADER
from .fields import normalize_key, normalize_value, reformat_sent_date, is_storable
from .messages import MessageParser, fingerprint
from .contacts import ContactParser
from .identify import IdentifyParser

__all__ = [
    "ResponseParser",
    "LineClassifier",
    "LineKind",
    "ClassifiedLine",
    "MESSAGE_HEADER",
    "CONTACT_HEADER",
    "normalize_key",
    "normalize_value",
    "reformat_sent_date",
    "is_storable",
    "MessageParser",
    "fingerprint",
    "ContactParser",
    "IdentifyParser",
]
