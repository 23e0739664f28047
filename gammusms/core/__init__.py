"""
Core Gammu infrastructure.

Provides low-level building blocks for talking to Gammu:
- Runner: Gammu executable invocation abstraction
- Ports: Serial device discovery and gammurc rendering
"""

from .runner import CommandRunner, GammuRunner, MockRunner, GammuConfig, raise_for_device_error
from .ports import list_serial_ports, render_gammurc

__all__ = [
    "CommandRunner",
    "GammuRunner",
    "MockRunner",
    "GammuConfig",
    "raise_for_device_error",
    "list_serial_ports",
    "render_gammurc",
]
