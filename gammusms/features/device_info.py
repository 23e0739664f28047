"""
Device information manager.

Handles device-related operations: identity and network monitor values.
"""

import logging
from typing import TYPE_CHECKING

from ..core.runner import raise_for_device_error
from ..parsers.identify import IdentifyParser

if TYPE_CHECKING:
    from ..core import CommandRunner

logger = logging.getLogger(__name__)


class DeviceManager:
    """
    Manages device information.

    Provides methods for querying phone identity and monitor values.
    """

    def __init__(self, runner: "CommandRunner") -> None:
        """
        Initialize device manager.

        Args:
            runner: CommandRunner instance for Gammu execution
        """
        self.runner = runner
        self._identify_parser = IdentifyParser()

        logger.debug("Initialized DeviceManager")

    def identify(self) -> dict[str, str]:
        """
        Identify the phone and read its monitor values.

        Runs ``--identify`` followed by ``--monitor 1``; keys from the monitor
        output are merged into (and override) the identify keys.

        Returns:
            Mapping such as ``{"Manufacturer": "Huawei", "IMEI": "...", "Network_level": "61 percent"}``

        Raises:
            DeviceError: If Gammu cannot open the phone

        Example:

        .. code-block:: python

            info = phone.device.identify()
            print(f"{info['Manufacturer']} {info['Model']}")
        """
        logger.info("Identifying device")
        options = ["--identify"]
        response = self.runner.run(options)
        raise_for_device_error(response, options)

        info = self._identify_parser.parse(response)
        info.update(self.monitor())

        logger.debug(f"Device info: {info}")
        return info

    def monitor(self) -> dict[str, str]:
        """
        Read one round of network monitor values (``--monitor 1``).

        Returns:
            Mapping of monitor keys to values
        """
        logger.info("Reading monitor values")
        response = self.runner.run(["--monitor", "1"])
        return self._identify_parser.parse(response)
