"""
Main GammuPhone class.

User-facing API that coordinates all feature managers.
"""

import logging
from typing import Optional

from .core import CommandRunner, GammuRunner, GammuConfig
from .features import DeviceManager, SMSManager, PhonebookManager

logger = logging.getLogger(__name__)


class GammuPhone:
    """
    Main interface for phone control through Gammu.

    Provides a high-level API through feature managers:

    - device: Identity and monitor values
    - sms: Listing, sending and deleting messages
    - phonebook: Reading contacts

    Example usage:

    .. code-block:: python

        phone = GammuPhone(GammuConfig(config_file="/etc/gammurc", section="1"))

        messages = phone.sms.get_messages()
        contacts = phone.phonebook.get_phonebook("SM")
        phone.sms.send_sms("+1234567890", "Hello, World!")
    """

    def __init__(
        self,
        config: Optional[GammuConfig] = None,
        runner: Optional[CommandRunner] = None
    ) -> None:
        """
        Initialize GammuPhone.

        Args:
            config: Gammu location and configuration. Ignored if runner is given.
            runner: Custom runner instance (for testing). Overrides config if provided.

        Raises:
            GammuNotFoundError: If the Gammu executable cannot be found

        Example:

        .. code-block:: python

            # Using the gammu found on PATH and ~/.gammurc
            phone = GammuPhone()

            # Using environment variables (GAMMU_BIN, GAMMU_CONFIG, ...)
            phone = GammuPhone(GammuConfig.from_env())

            # Using custom runner (for testing)
            from gammusms.core import MockRunner
            phone = GammuPhone(runner=MockRunner())
        """
        if runner is None:
            runner = GammuRunner(config)
            logger.info(f"Created Gammu runner for {runner.binary}")

        self._runner = runner

        self.device = DeviceManager(self._runner)
        self.sms = SMSManager(self._runner)
        self.phonebook = PhonebookManager(self._runner)

        logger.info("Initialized GammuPhone")

    def run_raw(self, options: list[str]) -> list[str]:
        """
        Run Gammu with arbitrary options.

        For advanced users who need commands not covered by feature managers.

        Args:
            options: Gammu arguments (e.g., ["--getsmsfolders"])

        Returns:
            Output lines

        Example:

        .. code-block:: python

            for line in phone.run_raw(["--getsmsfolders"]):
                print(line)
        """
        return self._runner.run(options)

    def __repr__(self) -> str:
        """String representation of phone."""
        return f"<GammuPhone runner={type(self._runner).__name__}>"
