"""
Data types and structures for gammusms.

Provides typed representations of the records parsed from Gammu output.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


# Keys commonly emitted by ``gammu --geteachsms`` / ``--getallmemory``.
# Records accept any other key as well.
WELL_KNOWN_FIELDS = (
    "location",
    "sender",
    "remote_number",
    "sent",
    "state",
    "name",
    "number",
    "coding",
    "smsc_number",
)

EMPTY_INBOX = {"inbox": "empty"}


class ParseOutcome(Enum):
    """Recoverable events recorded while parsing."""
    RECORD_DROPPED = "record-dropped"      # Line outside any record
    FIELD_DROPPED = "field-dropped"        # Empty key or value
    DATE_UNPARSEABLE = "date-unparseable"  # Sent date fell back to epoch
    HEADER_SKIPPED = "header-skipped"      # Contact header with empty bank


@dataclass
class MessageLink:
    """Concatenated (multi-part) message linkage."""
    coding: str  # e.g. "8 bit"
    id: str      # Reference shared by all parts
    part: str    # Part number of this record


@dataclass
class MessageRecord:
    """
    One SMS message (or one part of a concatenated message).

    Identified by ``(folder, sequence_index)``. ``fields`` holds the
    normalized key/value pairs in the order they were seen.
    """
    location: str
    folder: str
    sequence_index: int
    fields: dict[str, str] = field(default_factory=dict)
    link: Optional[MessageLink] = None
    body: str = ""
    id: str = ""

    def snapshot(self) -> dict[str, Any]:
        """Record contents without the fingerprint."""
        data: dict[str, Any] = {"location": self.location}
        data.update(self.fields)
        if self.link is not None:
            data["link"] = {
                "coding": self.link.coding,
                "id": self.link.id,
                "part": self.link.part,
            }
        if self.body:
            data["body"] = self.body
        return data

    def to_dict(self) -> dict[str, Any]:
        """Flat mapping of the record including its fingerprint."""
        data = self.snapshot()
        data["id"] = self.id
        return data


@dataclass
class ContactRecord:
    """One phonebook entry."""
    location: str
    memory_bank: str
    fields: dict[str, str] = field(default_factory=dict)
    emails: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "location": self.location,
            "memory_bank": self.memory_bank,
        }
        data.update(self.fields)
        if self.emails:
            data["emails"] = list(self.emails)
        return data


@dataclass
class SerialPortInfo:
    """Serial device that may host a phone or modem."""
    device: str       # e.g. "/dev/ttyUSB0", "COM3"
    description: str  # Human readable description
    hwid: str         # Hardware ID (USB VID:PID etc.)
