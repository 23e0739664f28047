"""
Phonebook manager.

Handles reading contacts from a phone memory bank.
"""

import logging
from typing import TYPE_CHECKING

from ..core.runner import raise_for_device_error
from ..parsers.contacts import ContactParser
from ..types import ContactRecord

if TYPE_CHECKING:
    from ..core import CommandRunner

logger = logging.getLogger(__name__)


class PhonebookManager:
    """Manages phonebook (memory bank) access."""

    def __init__(self, runner: "CommandRunner") -> None:
        """
        Initialize phonebook manager.

        Args:
            runner: CommandRunner instance for Gammu execution
        """
        self.runner = runner
        self._contact_parser = ContactParser()

        logger.debug("Initialized PhonebookManager")

    def get_phonebook(self, memory: str = "SM") -> list[ContactRecord]:
        """
        Read all contacts of a memory bank.

        Args:
            memory: Gammu memory type (default: "SM", the SIM card)

        Returns:
            Contacts in the order Gammu printed them

        Raises:
            DeviceError: If Gammu cannot open the phone

        Example:

        .. code-block:: python

            for contact in phone.phonebook.get_phonebook("ME"):
                print(contact.fields.get("name"), contact.emails)
        """
        logger.info(f"Reading phonebook from memory {memory}")
        options = ["--getallmemory", memory]
        response = self.runner.run(options)
        raise_for_device_error(response, options)

        contacts = self._contact_parser.parse(response)
        logger.debug(f"Read {len(contacts)} contacts from {memory}")
        return contacts
