import dataclasses
from pathlib import Path

import pytest

from coursehub.config import FILE_NAMES, DataFiles


def test_named_paths_live_in_directory(tmp_path):
    files = DataFiles(tmp_path)
    assert files.users == tmp_path / "users.dat"
    assert files.ids == tmp_path / "ids.dat"
    assert files.homeworks == tmp_path / "homeworks.dat"
    assert files.courses == tmp_path / "courses.dat"
    assert files.assignments == tmp_path / "assignments.dat"
    assert files.messages == tmp_path / "messages.dat"
    assert files.temp == tmp_path / "temp.dat"


def test_all_follows_file_names_order(tmp_path):
    paths = DataFiles(tmp_path).all()
    assert tuple(p.name for p in paths) == FILE_NAMES
    assert all(p.parent == tmp_path for p in paths)
    assert len(set(paths)) == len(paths)


def test_all_matches_properties(tmp_path):
    files = DataFiles(tmp_path)
    assert files.all() == (
        files.users,
        files.ids,
        files.homeworks,
        files.courses,
        files.assignments,
        files.messages,
        files.temp,
    )


def test_default_directory_and_string_directory(tmp_path):
    assert DataFiles().users == Path(".") / "users.dat"
    assert DataFiles(str(tmp_path)).courses == tmp_path / "courses.dat"


def test_frozen(tmp_path):
    files = DataFiles(tmp_path)
    with pytest.raises(dataclasses.FrozenInstanceError):
        files.directory = Path("elsewhere")