# tests/unit/ui/help/test_help_table.py
# Unit tests for description resolution, longest-name scan & table printing

from unittest.mock import MagicMock

import pytest

from helpkit.core.types import NameDescription
from helpkit.ui.help.help_table import (
    get_description_string,
    get_longest_name,
    print_command_table,
)


class TestGetLongestName:

    # * Empty & absent tables have length 0
    def test_empty_and_none(self):
        assert get_longest_name([]) == 0
        assert get_longest_name(None) == 0
        assert get_longest_name(()) == 0

    def test_longest(self):
        pairs = [NameDescription("a", ""), NameDescription("abcd", ""), NameDescription("ab", "")]
        assert get_longest_name(pairs) == 4


class TestGetDescriptionString:

    def test_placeholder(self, fake_resolve):
        assert get_description_string("[VerboseDesc]", fake_resolve) == "Print more output"

    def test_plain(self, fake_resolve):
        assert get_description_string("Plain text", fake_resolve) == "Plain text"

    def test_embedded(self, fake_resolve):
        assert (
            get_description_string("Prefix [VerboseDesc] suffix", fake_resolve)
            == "Prefix Print more output suffix"
        )

    def test_none(self, fake_resolve):
        assert get_description_string(None, fake_resolve) == ""


class TestPrintCommandTable:

    # * Descriptions resolved before the logger sees them; indents passed through
    def test_resolves_and_delegates(self, fake_resolve):
        logger = MagicMock()
        pairs = (
            NameDescription("src", "Source"),
            NameDescription("verbose", "[VerboseDesc]"),
        )

        print_command_table(pairs, fake_resolve, logger, 3, 25)

        logger.log_name_value_table.assert_called_once_with(
            [
                NameDescription("src", "Source"),
                NameDescription("verbose", "Print more output"),
            ],
            3,
            25,
        )

    # * Omitted indents are left to the logger defaults
    def test_default_indents(self, fake_resolve):
        logger = MagicMock()
        print_command_table([NameDescription("a", "b")], fake_resolve, logger)
        logger.log_name_value_table.assert_called_once_with(
            [NameDescription("a", "b")], None, None
        )

    # * Input pairs are not mutated
    def test_inputs_untouched(self, fake_resolve):
        pairs = [NameDescription("verbose", "[VerboseDesc]")]
        print_command_table(pairs, fake_resolve, MagicMock())
        assert pairs == [NameDescription("verbose", "[VerboseDesc]")]

    # * Resource failures surface unchanged
    def test_resolve_errors_propagate(self):
        def resolve(key):
            raise KeyError(key)

        with pytest.raises(KeyError):
            print_command_table([NameDescription("a", "[Missing]")], resolve, MagicMock())
