"""
Tests for line classification.
"""

import pytest
from gammusms.parsers.lines import (
    LineClassifier,
    LineKind,
    MESSAGE_HEADER,
    CONTACT_HEADER,
)


@pytest.fixture
def classifier():
    return LineClassifier(MESSAGE_HEADER)


class TestMessageLines:
    """Classification of --geteachsms lines."""

    def test_header(self, classifier):
        """Test header captures location and folder."""
        result = classifier.classify('Location 7, folder "Inbox", SIM memory, Inbox folder')
        assert result.kind == LineKind.HEADER
        assert result.groups == ("7", "Inbox")

    def test_header_beats_field(self, classifier):
        """Test a header that also looks like key: value is a header."""
        result = classifier.classify('Location 3, folder "Outbox": extra')
        assert result.kind == LineKind.HEADER
        assert result.groups[0] == "3"

    def test_link_marker(self, classifier):
        """Test link marker groups map to coding/id/part positions."""
        result = classifier.classify(
            "UDH Header           : Concatenated (linked) message, ID (16 bit) 4242, part 2 of 3"
        )
        assert result.kind == LineKind.LINK_MARKER
        _, coding, link_id, part, total = result.groups
        assert coding == "16 bit"
        assert link_id == "4242"
        assert part == "2"
        assert total == "3"

    def test_field(self, classifier):
        """Test key is trimmed and raw value kept."""
        result = classifier.classify('Remote number        : "+1234567890"')
        assert result.kind == LineKind.FIELD
        assert result.key == "Remote number"
        assert result.value == '"+1234567890"'

    def test_field_key_runs_to_last_separator(self, classifier):
        """Test greedy key capture."""
        result = classifier.classify("Note: time: 10:00")
        assert result.kind == LineKind.FIELD
        assert result.key == "Note: time"
        assert result.value == "10:00"

    def test_field_value_spans_embedded_newline(self, classifier):
        """Test dot matches embedded line breaks in a value."""
        result = classifier.classify("Text: first\r\nsecond")
        assert result.kind == LineKind.FIELD
        assert result.value == "first\r\nsecond"

    def test_unstructured(self, classifier):
        """Test plain text is trimmed body text."""
        result = classifier.classify("   Hello World  ")
        assert result.kind == LineKind.UNSTRUCTURED
        assert result.groups == ("Hello World",)

    def test_colon_without_space_is_unstructured(self, classifier):
        """Test key:value requires ': '."""
        result = classifier.classify("See you at 10:30")
        assert result.kind == LineKind.UNSTRUCTURED

    @pytest.mark.parametrize("line", ["", "   ", "\t", "SMS message", "SMS message 1"])
    def test_skipped(self, classifier, line):
        """Test blank lines and banner are skipped."""
        assert classifier.classify(line).kind == LineKind.SKIP


class TestContactLines:
    """Classification of --getallmemory lines."""

    def test_header(self):
        """Test contact header captures bank and location."""
        result = LineClassifier(CONTACT_HEADER).classify("Memory SM, Location 12")
        assert result.kind == LineKind.HEADER
        assert result.groups == ("SM", "12")

    def test_header_with_empty_bank(self):
        """Test empty bank is still a header."""
        result = LineClassifier(CONTACT_HEADER).classify("Memory , Location 5")
        assert result.kind == LineKind.HEADER
        assert result.groups == ("", "5")

    def test_message_header_not_matched(self):
        """Test contact classifier treats message headers as text."""
        result = LineClassifier(CONTACT_HEADER).classify('Location 1, folder "Inbox"')
        assert result.kind == LineKind.UNSTRUCTURED
