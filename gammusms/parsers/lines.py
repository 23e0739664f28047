"""
Line classification for Gammu text dumps.

Every line of ``--geteachsms`` or ``--getallmemory`` output is one of:

- a record header (``Location 1, folder "Inbox"`` / ``Memory SM, Location 1``)
- a multi-part link marker (``UDH Header : Concatenated (linked) message, ...``)
- a ``key : value`` field
- unstructured body text
- noise (blank lines, the ``SMS message`` banner)
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

MESSAGE_HEADER = re.compile(r'^Location (.+), folder "(.+)"')
CONTACT_HEADER = re.compile(r'^Memory (.*), Location (.+)')

LINK_MARKER = re.compile(
    r'(.*)Concatenated \(linked\) message, ID \((.+)\) (.+), part (.+) of (.+)'
)
FIELD = re.compile(r'(.+): (.+)', re.DOTALL)
BANNER = re.compile(r'^SMS message')


class LineKind(Enum):
    """Role of a single output line."""
    HEADER = "header"
    LINK_MARKER = "link"
    FIELD = "field"
    UNSTRUCTURED = "unstructured"
    SKIP = "skip"


@dataclass
class ClassifiedLine:
    """Result of classifying one line."""
    kind: LineKind
    groups: tuple[str, ...] = ()
    key: Optional[str] = None    # Raw key, trimmed (FIELD only)
    value: Optional[str] = None  # Raw value, untouched (FIELD only)


class LineClassifier:
    """
    Classifies lines of a Gammu dump.

    Checks run in a fixed order: noise, header, link marker, field and
    finally the unstructured fallback, so a header always beats a field.

    Args:
        header: Compiled header pattern of the pipeline
            (``MESSAGE_HEADER`` or ``CONTACT_HEADER``)
    """

    def __init__(self, header: re.Pattern = MESSAGE_HEADER) -> None:
        self.header = header

    def classify(self, line: str) -> ClassifiedLine:
        if not line.strip() or BANNER.match(line):
            return ClassifiedLine(LineKind.SKIP)

        match = self.header.match(line)
        if match:
            return ClassifiedLine(
                LineKind.HEADER,
                groups=tuple(g.strip() for g in match.groups())
            )

        match = LINK_MARKER.search(line)
        if match:
            return ClassifiedLine(
                LineKind.LINK_MARKER,
                groups=tuple(g.strip() for g in match.groups())
            )

        match = FIELD.search(line)
        if match:
            return ClassifiedLine(
                LineKind.FIELD,
                groups=match.groups(),
                key=match.group(1).strip(),
                value=match.group(2)
            )

        return ClassifiedLine(LineKind.UNSTRUCTURED, groups=(line.strip(),))
