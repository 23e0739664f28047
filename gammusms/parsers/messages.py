"""
SMS message dump parser.

Parses the output of ``gammu --geteachsms``:

    Location 1, folder "Inbox", SIM memory, Inbox folder
    SMS message
    SMSC number          : "+12063130004"
    Sent                 : Mon 02 Jan 2023 10:00:00  +0100
    Coding               : Default GSM alphabet (no compression)
    Remote number        : "+1234567890"
    Status               : UnRead

    Hello World
"""

import hashlib
import json
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Optional, Union

from .base import ResponseParser
from .fields import normalize_key, normalize_value, reformat_sent_date, is_storable
from .lines import LineClassifier, LineKind, MESSAGE_HEADER
from ..types import MessageRecord, MessageLink, ParseOutcome, EMPTY_INBOX

logger = logging.getLogger(__name__)

MessageFolders = dict[str, dict[int, MessageRecord]]
MessageListing = Union[MessageFolders, dict[str, str]]


def fingerprint(record: MessageRecord) -> str:
    """MD5 over the current contents of a record."""
    payload = json.dumps(record.snapshot(), sort_keys=True, ensure_ascii=False)
    return hashlib.md5(payload.encode("utf-8")).hexdigest()


@dataclass
class _MessageState:
    """Mutable state of one parse call."""
    current: Optional[MessageRecord] = None
    next_index: defaultdict = field(default_factory=lambda: defaultdict(int))
    result: MessageFolders = field(default_factory=dict)


class MessageParser(ResponseParser[MessageListing]):
    """
    Parser for ``gammu --geteachsms`` output.

    Builds ``folder -> sequence index -> MessageRecord``. Sequence indexes
    count headers per folder starting at 0. When no inbox message is found
    the whole result is ``{"inbox": "empty"}``.
    """

    def __init__(self) -> None:
        super().__init__()
        self._classifier = LineClassifier(MESSAGE_HEADER)

    def parse(self, response: list[str]) -> MessageListing:
        self.outcomes = []
        state = _MessageState()

        for line in response:
            classified = self._classifier.classify(line)

            if classified.kind == LineKind.SKIP:
                continue

            if classified.kind == LineKind.HEADER:
                self._start_record(state, *classified.groups)
            elif state.current is None:
                self._record(ParseOutcome.RECORD_DROPPED, line)
                continue
            elif classified.kind == LineKind.LINK_MARKER:
                _, coding, link_id, part, _ = classified.groups
                state.current.link = MessageLink(coding=coding, id=link_id, part=part)
            elif classified.kind == LineKind.FIELD:
                self._store_field(state.current, classified.key, classified.value, line)
            else:
                state.current.body += classified.groups[0]

            state.current.id = fingerprint(state.current)

        inbox = state.result.get("inbox")
        if not inbox:
            logger.debug("No inbox messages found")
            return dict(EMPTY_INBOX)

        counts = {folder: len(records) for folder, records in state.result.items()}
        logger.debug(f"Parsed messages per folder: {counts}")
        return state.result

    def _start_record(self, state: _MessageState, location: str, folder: str) -> None:
        folder = folder.lower()
        index = state.next_index[folder]
        state.next_index[folder] += 1

        state.current = MessageRecord(
            location=location,
            folder=folder,
            sequence_index=index
        )
        state.result.setdefault(folder, {})[index] = state.current

    def _store_field(self, record: MessageRecord, raw_key: str, raw_value: str, line: str) -> None:
        key = normalize_key(raw_key)
        value = normalize_value(raw_value)

        if key == "sent":
            value, parsed = reformat_sent_date(raw_value)
            if not parsed:
                self._record(ParseOutcome.DATE_UNPARSEABLE, line)

        if not is_storable(key, value):
            self._record(ParseOutcome.FIELD_DROPPED, line)
            return

        record.fields[key] = value
