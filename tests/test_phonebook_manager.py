"""
Tests for PhonebookManager.
"""

import pytest
from gammusms.exceptions import DeviceError


def test_get_phonebook(phone, mock_runner, getallmemory_output):
    """Test default SIM memory is read and parsed."""
    mock_runner.add_response(getallmemory_output)

    contacts = phone.phonebook.get_phonebook()

    assert mock_runner.commands == [["--getallmemory", "SM"]]
    assert [c.fields["name"] for c in contacts] == ["Alice", "Bob"]
    assert contacts[0].emails == ["alice@example.com", "alice@work.example.com"]


def test_get_phonebook_other_memory(phone, mock_runner):
    """Test memory bank is passed through."""
    mock_runner.add_response(["Memory ME, Location 3", 'Name : "Carol"'])

    contacts = phone.phonebook.get_phonebook("ME")

    assert mock_runner.commands == [["--getallmemory", "ME"]]
    assert contacts[0].memory_bank == "ME"
    assert contacts[0].location == "3"


def test_get_phonebook_device_error(phone, mock_runner):
    """Test device failure is raised."""
    mock_runner.add_response(["No configuration file found!"])

    with pytest.raises(DeviceError):
        phone.phonebook.get_phonebook()
