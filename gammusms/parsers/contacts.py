"""
Phonebook dump parser.

Parses the output of ``gammu --getallmemory SM``:

    Memory SM, Location 1
    General number       : "+1234567890"
    Name                 : "Alice"
    Email                : "alice@example.com"
    Email 2              : "alice@work.example.com"
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from .base import ResponseParser
from .fields import normalize_key, normalize_value, is_storable
from .lines import LineClassifier, LineKind, CONTACT_HEADER
from ..types import ContactRecord, ParseOutcome

logger = logging.getLogger(__name__)

# Matched against the untrimmed key: "Email", "Email 2", ... are space padded
EMAIL_KEY = re.compile(r'^Email.+', re.DOTALL)


@dataclass
class _ContactState:
    """Mutable state of one parse call."""
    current_index: Optional[int] = None
    next_index: int = 0
    contacts: list[ContactRecord] = field(default_factory=list)


class ContactParser(ResponseParser[list[ContactRecord]]):
    """
    Parser for ``gammu --getallmemory`` output.

    A header with an empty memory bank is skipped and leaves the current
    index alone, so the fields following it still update the previous
    contact. Every ``Email...`` field is collected into ``emails``.
    """

    def __init__(self) -> None:
        super().__init__()
        self._classifier = LineClassifier(CONTACT_HEADER)

    def parse(self, response: list[str]) -> list[ContactRecord]:
        self.outcomes = []
        state = _ContactState()

        for line in response:
            classified = self._classifier.classify(line)

            if classified.kind == LineKind.HEADER:
                bank, location = classified.groups
                if not bank:
                    self._record(ParseOutcome.HEADER_SKIPPED, line)
                    continue

                state.current_index = state.next_index
                state.contacts.append(ContactRecord(location=location, memory_bank=bank))
                state.next_index += 1

            elif classified.kind == LineKind.FIELD:
                if state.current_index is None:
                    self._record(ParseOutcome.RECORD_DROPPED, line)
                    continue
                self._store_field(
                    state.contacts[state.current_index],
                    classified.groups[0],
                    classified.value,
                    line
                )

        logger.debug(f"Parsed {len(state.contacts)} contacts")
        return state.contacts

    def _store_field(self, contact: ContactRecord, raw_key: str, raw_value: str, line: str) -> None:
        key = normalize_key(raw_key)
        value = normalize_value(raw_value)

        if not is_storable(key, value):
            self._record(ParseOutcome.FIELD_DROPPED, line)
            return

        if EMAIL_KEY.match(raw_key):
            contact.emails.append(value)
        else:
            contact.fields[key] = value
