"""
Device information parser.

Parses ``gammu --identify`` and ``gammu --monitor 1`` output:

    Device               : /dev/ttyUSB0
    Manufacturer         : Huawei
    Model                : E1750 (E1750)
    IMEI                 : 351234567890123
"""

import re

from .base import ResponseParser

KEY_VALUE = re.compile(r'^(.+):(.+)')


class IdentifyParser(ResponseParser[dict[str, str]]):
    """Parser for identify/monitor key:value listings."""

    def parse(self, response: list[str]) -> dict[str, str]:
        """
        Parse device information.

        Keys keep their case; inner spaces become underscores
        (``Network level`` -> ``Network_level``). Later keys win.
        """
        self.outcomes = []
        info: dict[str, str] = {}

        for line in response:
            match = KEY_VALUE.match(line)
            if match:
                key = match.group(1).strip().replace(" ", "_")
                info[key] = match.group(2).strip()

        return info
