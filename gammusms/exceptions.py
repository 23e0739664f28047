"""
Exceptions for gammusms library.

Provides detailed error information for debugging Gammu invocations.
"""

from typing import Optional


class GammuError(Exception):
    """
    Base exception for gammusms errors.

    All gammusms exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        response: Optional[list[str]] = None
    ) -> None:
        """
        Initialize exception with context.

        Args:
            message: Error description
            command: Gammu command line that caused the error (if applicable)
            response: Captured Gammu output (if applicable)
        """
        self.command = command
        self.response = response
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message with context."""
        parts = [super().__str__()]

        if self.command:
            parts.append(f"Command: {self.command}")

        if self.response:
            parts.append(f"Response: {self.response}")

        return " | ".join(parts)


class GammuNotFoundError(GammuError):
    """
    Raised when the Gammu executable cannot be located.

    This indicates:
    - Gammu is not installed
    - Wrong binary path configured
    """
    pass


class CommandTimeoutError(GammuError):
    """
    Raised when a Gammu invocation does not finish in time.

    This typically indicates:
    - Phone is not responding
    - Connection to the device hangs
    """
    pass


class DeviceError(GammuError):
    """
    Raised when Gammu reports that the phone cannot be used.

    This indicates:
    - Device could not be opened
    - No configuration file found
    """
    pass


class SMSError(GammuError):
    """
    Raised when SMS operations fail.

    This indicates:
    - SMS send failure
    - Invalid folder or location on delete
    """
    pass
