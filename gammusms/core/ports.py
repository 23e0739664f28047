"""
Serial device discovery.

Helps locating the device Gammu should talk to and writing the matching
gammurc section.
"""

import logging
from typing import Optional

from serial.tools import list_ports

from ..types import SerialPortInfo

logger = logging.getLogger(__name__)


def list_serial_ports() -> list[SerialPortInfo]:
    """
    List serial devices present on this machine.

    Returns:
        SerialPortInfo per device, sorted by device path

    Example:

    .. code-block:: python

        for port in list_serial_ports():
            print(f"{port.device}: {port.description}")
    """
    ports = [
        SerialPortInfo(
            device=port.device,
            description=port.description or "",
            hwid=port.hwid or ""
        )
        for port in list_ports.comports()
    ]
    ports.sort(key=lambda p: p.device)
    logger.debug(f"Found {len(ports)} serial ports")
    return ports


def render_gammurc(device: str, connection: str = "at", section: Optional[int] = None) -> str:
    """
    Render a gammurc section for a device.

    Args:
        device: Serial device path (e.g., /dev/ttyUSB0)
        connection: Gammu connection type (default: "at")
        section: Section number; None renders the default ``[gammu]`` section

    Returns:
        Config text suitable for ``gammu -c <file> -s <section>``
    """
    name = "gammu" if section is None else f"gammu{section}"
    return (
        f"[{name}]\n"
        f"device = {device}\n"
        f"connection = {connection}\n"
    )
