"""
Tests for the label display capability.
"""

import io

import pytest

from labeltree import PrettyPrint, PrettyPrintMixin, label_ascii, label_debug


class Celsius(PrettyPrintMixin):
    def __init__(self, degrees):
        self.degrees = degrees

    def ascii(self):
        return f"{self.degrees}°C"


class TestLabelText:
    """Display and debug text for labels."""

    def test_plain_labels_use_str(self):
        """Test that labels without ascii() render with str()."""
        assert label_ascii(42) == "42"
        assert label_ascii("name") == "name"

    def test_pretty_print_labels_use_ascii(self):
        """Test that PrettyPrint labels render with ascii()."""
        assert isinstance(Celsius(20), PrettyPrint)
        assert label_ascii(Celsius(20)) == "20°C"

    def test_debug_text_is_repr(self):
        """Test that debug text is the repr."""
        assert label_debug("name") == "'name'"
        assert label_debug(42) == "42"

    def test_pretty_print_writes_line(self, capsys):
        """Test that pretty_print writes to stdout by default."""
        Celsius(-4).pretty_print()
        assert capsys.readouterr().out == "-4°C\n"

    def test_pretty_print_to_stream(self):
        """Test that pretty_print honours an explicit stream."""
        stream = io.StringIO()
        Celsius(7).pretty_print(file=stream)
        assert stream.getvalue() == "7°C\n"

    def test_mixin_requires_ascii(self):
        """Test that a subclass without ascii() cannot be instantiated."""
        class Unrendered(PrettyPrintMixin):
            pass

        with pytest.raises(TypeError):
            Unrendered()
