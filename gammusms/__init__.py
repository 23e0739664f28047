"""
gammusms - Python library for reading SMS and phonebooks through Gammu.
"""

from .version import __version__
from .phone import GammuPhone
from .core import GammuConfig, GammuRunner, MockRunner

from .types import (
    MessageRecord,
    MessageLink,
    ContactRecord,
    SerialPortInfo,
    ParseOutcome,
    EMPTY_INBOX,
)

from .parsers import (
    MessageParser,
    ContactParser,
    IdentifyParser,
)

from .exceptions import (
    GammuError,
    GammuNotFoundError,
    CommandTimeoutError,
    DeviceError,
    SMSError,
)

__all__ = [
    "__version__",
    "GammuPhone",
    "GammuConfig",
    "GammuRunner",
    "MockRunner",
    "MessageRecord",
    "MessageLink",
    "ContactRecord",
    "SerialPortInfo",
    "ParseOutcome",
    "EMPTY_INBOX",
    "MessageParser",
    "ContactParser",
    "IdentifyParser",
    "GammuError",
    "GammuNotFoundError",
    "CommandTimeoutError",
    "DeviceError",
    "SMSError",
]
