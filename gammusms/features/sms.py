"""
SMS manager.

Handles SMS messaging operations (list, send, delete) through Gammu.
"""

import logging
import re
from typing import TYPE_CHECKING

from ..core.runner import raise_for_device_error
from ..parsers.messages import MessageParser, MessageListing
from ..exceptions import SMSError

if TYPE_CHECKING:
    from ..core import CommandRunner

logger = logging.getLogger(__name__)

SEND_OK = re.compile(r"OK", re.IGNORECASE)
DELETE_INVALID = re.compile(r"Invalid", re.IGNORECASE)


class SMSManager:
    """
    Manages SMS messaging operations.

    Features:
    - List all messages grouped by folder
    - Send text messages
    - Delete a range of messages or a whole folder
    """

    def __init__(self, runner: "CommandRunner") -> None:
        """
        Initialize SMS manager.

        Args:
            runner: CommandRunner instance for Gammu execution
        """
        self.runner = runner
        self._message_parser = MessageParser()

        logger.debug("Initialized SMSManager")

    @property
    def last_outcomes(self):
        """Recoverable parse events of the last ``get_messages`` call."""
        return list(self._message_parser.outcomes)

    def get_messages(self) -> MessageListing:
        """
        Read every stored message.

        Returns:
            ``{folder: {sequence_index: MessageRecord}}``, or
            ``{"inbox": "empty"}`` when the inbox holds no messages

        Raises:
            DeviceError: If Gammu cannot open the phone

        Example:

        .. code-block:: python

            messages = phone.sms.get_messages()
            if messages != {"inbox": "empty"}:
                for index, message in messages["inbox"].items():
                    print(index, message.fields.get("remote_number"), message.body)
        """
        logger.info("Reading all messages")
        options = ["--geteachsms", "1"]
        response = self.runner.run(options)
        raise_for_device_error(response, options)

        return self._message_parser.parse(response)

    def send_sms(self, number: str, text: str) -> str:
        """
        Send a text message.

        Args:
            number: Destination phone number (passed through unchanged)
            text: Message content

        Returns:
            Gammu output

        Raises:
            SMSError: If Gammu does not confirm the send

        Example:

        .. code-block:: python

            phone.sms.send_sms("+1234567890", "Hello, World!")
        """
        logger.info(f"Sending SMS to {number} ({len(text)} chars)")
        options = ["--sendsms", "TEXT", number, "-len", str(len(text)), "-text", text]
        response = self.runner.run(options)
        output = "\r\n".join(response)

        if not SEND_OK.search(output):
            raise SMSError(
                f"Failed to send SMS to {number}",
                command=" ".join(options[:3]),
                response=response
            )

        logger.info(f"SMS sent to {number}")
        return output

    def delete_sms(self, folder: int | str, start: int, stop: int | None = None) -> str:
        """
        Delete messages ``start`` to ``stop`` in a folder.

        Args:
            folder: Gammu folder number (e.g., 1 for the inbox)
            start: First location to delete
            stop: Last location to delete (defaults to ``start``)

        Returns:
            Gammu output

        Raises:
            SMSError: If Gammu reports an invalid folder or location
        """
        if stop is None:
            stop = start

        logger.info(f"Deleting SMS {start}-{stop} from folder {folder}")
        options = ["--deletesms", str(folder), str(start), str(stop)]
        return self._run_delete(options)

    def delete_all_sms(self, folder: int | str) -> str:
        """
        Delete every message in a folder.

        Args:
            folder: Gammu folder number

        Returns:
            Gammu output

        Raises:
            SMSError: If Gammu reports an invalid folder
        """
        logger.info(f"Deleting all SMS from folder {folder}")
        options = ["--deleteallsms", str(folder)]
        return self._run_delete(options)

    def _run_delete(self, options: list[str]) -> str:
        response = self.runner.run(options)
        output = "\r\n".join(response)

        if DELETE_INVALID.search(output):
            raise SMSError(
                "Delete rejected by Gammu",
                command=" ".join(options),
                response=response
            )

        return output
