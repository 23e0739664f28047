"""
Command runner abstraction for Gammu invocations.

Provides abstractions for executing the Gammu binary with dependency injection support.
"""

import logging
import os
import re
import shlex
import shutil
import subprocess
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..exceptions import GammuError, GammuNotFoundError, CommandTimeoutError, DeviceError

logger = logging.getLogger(__name__)

DEVICE_ERROR = re.compile(
    r"Error opening device|No configuration file found|Gammu is not installed",
    re.IGNORECASE
)


def raise_for_device_error(lines: list[str], options: list[str]) -> None:
    """
    Raise if Gammu output reports that the phone could not be used.

    Args:
        lines: Captured Gammu output
        options: Gammu arguments that produced it

    Raises:
        DeviceError: If the output matches a known device failure
    """
    output = "\r\n".join(lines)
    match = DEVICE_ERROR.search(output)
    if match:
        logger.error(f"Gammu device error: {match.group(0)}")
        raise DeviceError(
            f"Gammu device error: {match.group(0)}",
            command=shlex.join(options),
            response=lines
        )


@dataclass
class GammuConfig:
    """
    Location and configuration of the Gammu executable.

    Attributes:
        binary: Gammu executable name or path
        config_file: Path passed as ``-c`` (gammurc), if any
        section: Config section passed as ``-s``, if any
        timeout: Seconds to wait for a single invocation
    """
    binary: str = "gammu"
    config_file: Optional[str] = None
    section: Optional[str] = None
    timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "GammuConfig":
        """
        Build configuration from environment variables.

        Reads ``GAMMU_BIN``, ``GAMMU_CONFIG``, ``GAMMU_SECTION`` and
        ``GAMMU_TIMEOUT``; unset variables keep their defaults.
        """
        return cls(
            binary=os.environ.get("GAMMU_BIN", "gammu"),
            config_file=os.environ.get("GAMMU_CONFIG") or None,
            section=os.environ.get("GAMMU_SECTION") or None,
            timeout=float(os.environ.get("GAMMU_TIMEOUT", "30")),
        )

    def command(self, options: list[str]) -> list[str]:
        """Build the full argument vector for ``options``."""
        argv = [self.binary]
        if self.config_file:
            argv += ["-c", self.config_file]
        if self.section:
            argv += ["-s", self.section]
        return argv + list(options)


class CommandRunner(ABC):
    """Abstract base class for executing Gammu commands."""

    @abstractmethod
    def run(self, options: list[str]) -> list[str]:
        """
        Execute Gammu with the given options.

        Args:
            options: Gammu arguments (e.g., ["--geteachsms", "1"])

        Returns:
            Captured output lines (stdout and stderr merged)

        Raises:
            GammuError: If the command cannot be executed
        """
        pass


class GammuRunner(CommandRunner):
    """Runs the real Gammu executable as a subprocess."""

    def __init__(self, config: Optional[GammuConfig] = None) -> None:
        """
        Initialize Gammu runner.

        Args:
            config: Gammu location and configuration (defaults to ``GammuConfig()``)

        Raises:
            GammuNotFoundError: If the Gammu executable cannot be found
        """
        self.config = config or GammuConfig()

        resolved = shutil.which(self.config.binary)
        if resolved is None:
            logger.error(f"Cannot find {self.config.binary} or Gammu is not installed")
            raise GammuNotFoundError(
                f"Cannot find {self.config.binary} or Gammu is not installed"
            )

        self.binary = resolved
        logger.info(f"Using Gammu executable {self.binary}")

    def run(self, options: list[str]) -> list[str]:
        """Run Gammu and capture its output."""
        argv = self.config.command(options)
        argv[0] = self.binary
        command = shlex.join(argv)

        logger.debug(f"Running: {command}")

        try:
            completed = subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
                timeout=self.config.timeout,
                check=False
            )
        except subprocess.TimeoutExpired as e:
            logger.error(f"Gammu timed out after {self.config.timeout}s: {command}")
            raise CommandTimeoutError(
                f"Gammu timed out after {self.config.timeout}s",
                command=command
            ) from e
        except FileNotFoundError as e:
            logger.error(f"Gammu executable disappeared: {e}")
            raise GammuNotFoundError(f"Gammu executable not found: {e}", command=command) from e
        except OSError as e:
            logger.error(f"Failed to execute Gammu: {e}")
            raise GammuError(f"Failed to execute Gammu: {e}", command=command) from e

        lines = completed.stdout.splitlines()

        if completed.returncode != 0:
            logger.warning(f"Gammu exited with status {completed.returncode}: {command}")

        logger.debug(f"Gammu returned {len(lines)} lines")
        return lines


class MockRunner(CommandRunner):
    """
    Mock runner for testing.

    Returns queued outputs instead of executing Gammu.
    """

    def __init__(self) -> None:
        """Initialize mock runner."""
        self._response_queue: list[list[str]] = []
        self.commands: list[list[str]] = []
        self._lock = threading.Lock()
        logger.info("Initialized MockRunner")

    def add_response(self, lines: list[str]) -> None:
        """
        Queue the output of the next command.

        Args:
            lines: Output lines (e.g., ["Location 1, folder \"Inbox\"", ...])
        """
        with self._lock:
            self._response_queue.append(list(lines))
            logger.debug(f"Added mock response: {lines}")

    def run(self, options: list[str]) -> list[str]:
        """Record the command and return the next queued output."""
        with self._lock:
            self.commands.append(list(options))
            logger.debug(f"Mock run: {options}")

            if self._response_queue:
                return self._response_queue.pop(0)

        # No output queued
        return []

    def clear_responses(self) -> None:
        """Clear all queued responses (useful for testing)."""
        with self._lock:
            self._response_queue.clear()
            logger.debug("Cleared mock response queue")
