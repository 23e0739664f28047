"""
Feature managers for phone functionality.

Provides high-level managers for different Gammu capabilities:
- DeviceManager: Identity and monitor values
- SMSManager: Listing, sending and deleting messages
- PhonebookManager: Reading contacts
"""

from .device_info import DeviceManager
from .sms import SMSManager
from .phonebook import PhonebookManager

__all__ = [
    "DeviceManager",
    "SMSManager",
    "PhonebookManager",
]
