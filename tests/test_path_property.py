import logging
import os
from pathlib import Path

import pytest

from platform_identity.exceptions import InvalidInputError
from platform_identity.properties import PathBehavior, PathProperty


def test_value_is_absolute_and_normalized(tmp_path, store):
    store.set_raw("user.dir", str(tmp_path / "x" / ".." / "y"))
    assert PathProperty("user.dir", store=store).get() == tmp_path / "y"


def test_relative_path_is_made_absolute(store):
    store.set_raw("user.dir", "some/dir")
    assert PathProperty("user.dir", store=store).get() == Path(os.path.abspath("some/dir"))


def test_do_nothing_does_not_create(tmp_path, store):
    target = tmp_path / "missing"
    store.set_raw("user.dir", str(target))
    assert PathProperty("user.dir", store=store).get() == target
    assert not target.exists()


def test_ensure_directory_exists_is_idempotent(tmp_path, store):
    target = tmp_path / "a" / "b" / "c"
    store.set_raw("tmp.dir", str(target))
    prop = PathProperty("tmp.dir", PathBehavior.ENSURE_DIRECTORY_EXISTS, store=store)

    first = prop.get()
    second = prop.get()

    assert first == second == target
    assert target.is_dir()


def test_ensure_file_exists_creates_parents_and_empty_file(tmp_path, store):
    target = tmp_path / "nested" / "dir" / "settings.conf"
    store.set_raw("config.file", str(target))
    prop = PathProperty("config.file", PathBehavior.ENSURE_FILE_EXISTS, store=store)

    assert prop.get() == target
    assert target.is_file()
    assert target.read_bytes() == b""


def test_ensure_file_exists_keeps_existing_content(tmp_path, store):
    target = tmp_path / "settings.conf"
    target.write_text("keep me")
    store.set_raw("config.file", str(target))

    PathProperty("config.file", PathBehavior.ENSURE_FILE_EXISTS, store=store).get()

    assert target.read_text() == "keep me"


def test_invalid_path_is_absent_with_warning(store, caplog):
    store.set_raw("user.dir", "bad\x00path")
    prop = PathProperty("user.dir", store=store)
    with caplog.at_level(logging.WARNING):
        assert prop.get() is None
    assert "Invalid path" in caplog.text
    assert not prop.has_valid_value()


def test_creation_failure_is_absent_with_warning(tmp_path, store, caplog):
    blocker = tmp_path / "file"
    blocker.write_text("")
    store.set_raw("tmp.dir", str(blocker / "sub"))
    prop = PathProperty("tmp.dir", PathBehavior.ENSURE_DIRECTORY_EXISTS, store=store)
    with caplog.at_level(logging.WARNING):
        assert prop.get() is None
    assert "Failed to create" in caplog.text


def test_set_writes_path_string(tmp_path, store):
    prop = PathProperty("tmp.dir", editable=True, store=store)
    prop.set(tmp_path)
    assert store.get_raw("tmp.dir") == str(tmp_path)


def test_behavior_must_be_path_behavior(store):
    with pytest.raises(InvalidInputError):
        PathProperty("tmp.dir", "ensure_directory_exists", store=store)
