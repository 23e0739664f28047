"""
Tests for DeviceManager and the identify parser.
"""

import pytest
from gammusms.parsers.identify import IdentifyParser
from gammusms.exceptions import DeviceError


def test_identify_parser(identify_output):
    """Test keys keep case and spaces become underscores."""
    info = IdentifyParser().parse(identify_output)

    assert info["Manufacturer"] == "Huawei"
    assert info["Model"] == "E1750 (E1750)"
    assert info["IMEI"] == "351234567890123"
    assert info["SIM_IMSI"] == "310410123456789"
    assert info["Device"] == "/dev/ttyUSB0"


def test_identify_parser_ignores_plain_lines():
    """Test lines without a colon are skipped."""
    assert IdentifyParser().parse(["Press Ctrl+C to break...", ""]) == {}


def test_identify(phone, mock_runner, identify_output):
    """Test identify merges monitor values."""
    mock_runner.add_response(identify_output)
    mock_runner.add_response([
        "Press Ctrl+C to break...",
        "Entering monitor mode...",
        "Network level        : 61 percent",
        "Network state        : home network",
    ])

    info = phone.device.identify()

    assert mock_runner.commands == [["--identify"], ["--monitor", "1"]]
    assert info["Manufacturer"] == "Huawei"
    assert info["Network_level"] == "61 percent"
    assert info["Network_state"] == "home network"


def test_identify_device_error(phone, mock_runner):
    """Test error output raises DeviceError before monitor runs."""
    mock_runner.add_response(["Error opening device, it doesn't exist."])

    with pytest.raises(DeviceError) as exc_info:
        phone.device.identify()

    assert "Error opening device" in str(exc_info.value)
    assert mock_runner.commands == [["--identify"]]


def test_identify_missing_config(phone, mock_runner):
    """Test missing configuration is reported case-insensitively."""
    mock_runner.add_response(["Warning: no configuration file found!"])

    with pytest.raises(DeviceError):
        phone.device.identify()
