import logging
import os
from pathlib import Path

import pytest

from platform_identity.exceptions import InvalidInputError, UnsupportedOperationError
from platform_identity.properties import PathListProperty, StringListProperty


class TestStringListProperty:

    @pytest.mark.parametrize("separator", ["", None])
    def test_separator_must_be_non_empty(self, separator, store):
        with pytest.raises(InvalidInputError):
            StringListProperty("hosts", separator, store=store)

    @pytest.mark.parametrize("separator, elements", [
        ("|", ["localhost", "*.example.com", "10.0.0.1"]),
        (" ", ["amd64", "i386"]),
        ("::", ["a", "", "b", ""]),
        (",", ["single"]),
        (",", []),
    ])
    def test_force_set_array_round_trips(self, separator, elements, store):
        prop = StringListProperty("hosts", separator, store=store)
        prop.force_set_array(elements)
        assert prop.get_raw_list() == elements
        assert prop.get() == elements

    def test_raw_value_is_joined_with_separator(self, store):
        prop = StringListProperty("hosts", "|", store=store)
        prop.force_set_array(["a", "b"])
        assert store.get_raw("hosts") == "a|b"

    def test_force_set_array_returns_previous_list(self, store):
        prop = StringListProperty("hosts", "|", store=store)
        assert prop.force_set_array(["a"]) is None
        assert prop.force_set_array(["b", "c"]) == ["a"]
        assert prop.force_set_array(None) == ["b", "c"]
        assert prop.get_raw_list() is None

    def test_multi_character_separator_is_literal(self, store):
        store.set_raw("hosts", "a.*b.*c")
        assert StringListProperty("hosts", ".*", store=store).get() == ["a", "b", "c"]

    def test_set_requires_editable(self, store):
        with pytest.raises(UnsupportedOperationError):
            StringListProperty("hosts", "|", store=store).set(["a"])

    def test_set_joins_elements(self, store):
        prop = StringListProperty("hosts", "|", editable=True, store=store)
        prop.set(["a", "b"])
        assert store.get_raw("hosts") == "a|b"
        assert prop.string_equals("a|b")

    def test_empty_raw_value_is_empty_list(self, store):
        prop = StringListProperty("hosts", "|", store=store)
        prop.force_set_array([])
        assert store.get_raw("hosts") == ""
        assert prop.get_raw_list() == []
        assert prop.get() == []

    def test_single_empty_element_reads_back_as_empty_list(self, store):
        prop = StringListProperty("hosts", "|", store=store)
        prop.force_set_array([""])
        assert prop.get_raw_list() == []

    def test_separator_is_exposed(self, store):
        assert StringListProperty("hosts", "|", store=store).separator == "|"


class TestPathListProperty:

    def test_default_separator_is_os_pathsep(self, store):
        assert PathListProperty("python.path", store=store).separator == os.pathsep

    def test_elements_become_absolute_normalized_paths(self, tmp_path, store):
        raw = os.pathsep.join([str(tmp_path / "a" / ".." / "b"), "relative"])
        store.set_raw("python.path", raw)
        paths = PathListProperty("python.path", store=store).get()
        assert paths == [tmp_path / "b", Path(os.path.abspath("relative"))]
        assert all(p.is_absolute() for p in paths)

    def test_invalid_elements_are_skipped(self, tmp_path, store, caplog):
        store.set_raw("python.path", "|".join([str(tmp_path), "bad\x00path", str(tmp_path / "c")]))
        prop = PathListProperty("python.path", "|", store=store)
        with caplog.at_level(logging.WARNING):
            assert prop.get() == [tmp_path, tmp_path / "c"]
        assert "skipping element" in caplog.text

    def test_set_empty_list_reads_back_empty(self, store):
        prop = PathListProperty("python.path", editable=True, store=store)
        prop.set([])
        assert store.get_raw("python.path") == ""
        assert prop.get() == []
