# tests/unit/core/test_types.py
# Unit tests for manifest metadata & invocation dataclasses

import dataclasses

import pytest

from helpkit.core.exceptions import ManifestError
from helpkit.core.types import (
    CommandMetadata,
    Invocation,
    NameDescription,
    name_descriptions_from_list,
)


class TestNameDescription:

    def test_from_dict(self):
        pair = NameDescription.from_dict({"name": "src", "description": "Source"})
        assert pair == NameDescription("src", "Source")

    # * Missing description becomes empty string
    def test_from_dict_missing_description(self):
        assert NameDescription.from_dict({"name": "src"}) == NameDescription("src", "")

    # * Entries w/o a usable name are rejected
    @pytest.mark.parametrize("data", [{}, {"name": ""}, {"name": 3}])
    def test_from_dict_without_name(self, data):
        assert NameDescription.from_dict(data) is None

    def test_frozen(self):
        pair = NameDescription("a", "b")
        with pytest.raises(dataclasses.FrozenInstanceError):
            pair.name = "c"


class TestCommandMetadata:

    def test_defaults_are_empty(self):
        meta = CommandMetadata(name="run")
        assert meta.arguments == ()
        assert meta.options == ()
        assert meta.has_arguments is False
        assert meta.has_options is False

    def test_has_sections(self):
        meta = CommandMetadata(
            name="run",
            arguments=(NameDescription("a", "b"),),
            options=(NameDescription("--x", "y"),),
        )
        assert meta.has_arguments is True
        assert meta.has_options is True


class TestInvocation:

    def test_requested_command_is_first_token(self):
        inv = Invocation.from_args(["build", "ios"])
        assert inv.requested_command == "build"
        assert inv.original == ("build", "ios")

    # * Absent & empty args both mean no command requested
    @pytest.mark.parametrize("args", [None, [], ()])
    def test_empty(self, args):
        inv = Invocation.from_args(args)
        assert inv.is_empty is True
        assert inv.requested_command is None

    def test_none_original_normalised(self):
        assert Invocation(original=None).original == ()

    def test_list_original_normalised(self):
        assert Invocation(original=["a"]).original == ("a",)


class TestNameDescriptionsFromList:

    def test_converts_entries_in_order(self):
        pairs = name_descriptions_from_list(
            [{"name": "b", "description": "2"}, {"name": "a", "description": "1"}],
            "cmd",
            "args",
        )
        assert [p.name for p in pairs] == ["b", "a"]

    # * Missing or non-list values count as no entries
    @pytest.mark.parametrize("raw", [None, {}, "text", 5])
    def test_non_list_is_empty(self, raw):
        assert name_descriptions_from_list(raw, "cmd", "args") == ()

    def test_non_object_entry_raises(self):
        with pytest.raises(ManifestError) as exc:
            name_descriptions_from_list(["oops"], "cmd", "options")
        assert exc.value.command == "cmd"
        assert "options[0]" in str(exc.value)

    def test_nameless_entry_raises(self):
        with pytest.raises(ManifestError):
            name_descriptions_from_list([{"description": "x"}], "cmd", "args")
