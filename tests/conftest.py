"""
Pytest configuration and fixtures.

Provides shared test fixtures for gammusms tests.
"""

import pytest
import logging

from gammusms.core import MockRunner
from gammusms import GammuPhone


# Enable logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@pytest.fixture
def mock_runner():
    """
    Create a MockRunner instance for testing.

    Example:
        def test_something(mock_runner):
            mock_runner.add_response(["OK"])
            # ... test code ...
    """
    runner = MockRunner()
    yield runner
    runner.clear_responses()


@pytest.fixture
def phone(mock_runner):
    """
    Create a GammuPhone instance with MockRunner.

    Example:
        def test_messages(phone, mock_runner):
            mock_runner.add_response(['Location 1, folder "Inbox"', "Hello"])
            messages = phone.sms.get_messages()
            assert messages["inbox"][0].body == "Hello"
    """
    return GammuPhone(runner=mock_runner)


@pytest.fixture
def geteachsms_output():
    """Output of gammu --geteachsms with inbox, outbox and a two-part message."""
    return [
        'Location 1, folder "Inbox", SIM memory, Inbox folder',
        "SMS message",
        'SMSC number          : "+12063130004"',
        "Sent                 : 01/02/2023 10:00:00 (+0100)",
        "Coding               : Default GSM alphabet (no compression)",
        'Remote number        : "+1234567890"',
        "Status               : UnRead",
        "",
        "Hello World",
        "",
        'Location 2, folder "Inbox", SIM memory, Inbox folder',
        "SMS message",
        "UDH Header           : Concatenated (linked) message, ID (8 bit) 214, part 1 of 2",
        'Remote number        : "+1987654321"',
        "Sent                 : 2023/03/04 08:15:30",
        "",
        "This is the first",
        " part of a long one",
        "",
        'Location 3, folder "Inbox", SIM memory, Inbox folder',
        "SMS message",
        "UDH Header           : Concatenated (linked) message, ID (8 bit) 214, part 2 of 2",
        'Remote number        : "+1987654321"',
        "",
        "and the second part",
        "",
        'Location 4, folder "Outbox", SIM memory, Outbox folder',
        "SMS message",
        'Remote number        : "+1555000111"',
        "Status               : Sent",
        "",
        "On my way",
        "",
        "3 SMS parts in 3 SMS sequences",
    ]


@pytest.fixture
def getallmemory_output():
    """Output of gammu --getallmemory SM."""
    return [
        "Memory SM, Location 1",
        'General number       : "+1234567890"',
        'Name                 : "Alice"',
        'Email                : "alice@example.com"',
        'Email 2              : "alice@work.example.com"',
        "",
        "Memory SM, Location 2",
        'Mobile number        : "+1987654321"',
        'Name                 : "Bob"',
        "",
    ]


@pytest.fixture
def identify_output():
    """Output of gammu --identify."""
    return [
        "Device               : /dev/ttyUSB0",
        "Manufacturer         : Huawei",
        "Model                : E1750 (E1750)",
        "Firmware             : 11.126.16.04.00",
        "IMEI                 : 351234567890123",
        "SIM IMSI             : 310410123456789",
    ]
