"""
Base parser classes and utilities.

Provides reusable parsing functionality for Gammu text dumps.
"""

import logging
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

from ..types import ParseOutcome

logger = logging.getLogger(__name__)

T = TypeVar('T')


class ResponseParser(ABC, Generic[T]):
    """
    Abstract base class for response parsers.

    Parsers convert the captured output of a Gammu command into typed data
    structures. They never raise on malformed input; recoverable events of
    the last call are kept in ``outcomes``.
    """

    def __init__(self) -> None:
        self.outcomes: list[ParseOutcome] = []

    @abstractmethod
    def parse(self, response: list[str]) -> T:
        """
        Parse Gammu output.

        Args:
            response: List of output lines from Gammu

        Returns:
            Parsed data structure
        """
        pass

    def _record(self, outcome: ParseOutcome, line: str) -> None:
        """Remember a recoverable parse event."""
        logger.debug(f"{type(self).__name__}: {outcome.value}: {line!r}")
        self.outcomes.append(outcome)
