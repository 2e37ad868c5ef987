# tests/test_fs.py

from pathlib import Path

import pytest

from dirstamp.fs.create import Create
from dirstamp.fs.dirs import Dirs

NAME = "20220616T143000--my-cool-idea__3d-models_wip"


def test_create_directory_returns_absolute_path(tmp_path):
	created = Create.at(tmp_path).create_directory(NAME)
	assert created == (tmp_path / NAME).resolve()
	assert created.is_absolute()
	assert created.is_dir()


def test_create_directory_twice_fails(tmp_path):
	creator = Create.at(tmp_path)
	creator.create_directory(NAME)
	with pytest.raises(FileExistsError):
		creator.create_directory(NAME)


def test_existing_file_blocks_creation(tmp_path):
	(tmp_path / NAME).write_text("x", encoding="utf-8")
	with pytest.raises(FileExistsError):
		Create.at(tmp_path).create_directory(NAME)
	assert (tmp_path / NAME).is_file()


def test_missing_parent_is_not_created(tmp_path):
	parent = tmp_path / "missing"
	with pytest.raises(FileNotFoundError):
		Create.at(tmp_path).create_directory(NAME, parent=parent)
	assert not parent.exists()


def test_relative_parent_resolves_against_base_dir(tmp_path):
	(tmp_path / "notes").mkdir()
	created = Create.at(tmp_path).create_directory(NAME, parent="notes")
	assert created == (tmp_path / "notes" / NAME).resolve()


@pytest.mark.parametrize("name", ["", ".", "..", "a/b", "a\\b"])
def test_invalid_names_rejected(tmp_path, name):
	with pytest.raises(ValueError):
		Create.at(tmp_path).create_directory(name)


def test_dry_run_touches_nothing(tmp_path):
	created = Create.at(tmp_path, dry_run=True).create_directory(NAME)
	assert created == (tmp_path / NAME).resolve()
	assert not created.exists()


def test_dry_run_still_reports_existing_target(tmp_path):
	(tmp_path / NAME).mkdir()
	with pytest.raises(FileExistsError):
		Create.at(tmp_path, dry_run=True).create_directory(NAME)


def test_permission_error_propagates(tmp_path, monkeypatch):
	def deny(self, *args, **kwargs):
		raise PermissionError(13, "Permission denied", str(self))

	monkeypatch.setattr(Path, "mkdir", deny)
	with pytest.raises(PermissionError):
		Create.at(tmp_path).create_directory(NAME)


def test_other_os_errors_propagate(tmp_path, monkeypatch):
	def fail(self, *args, **kwargs):
		raise OSError(28, "No space left on device", str(self))

	monkeypatch.setattr(Path, "mkdir", fail)
	with pytest.raises(OSError) as info:
		Create.at(tmp_path).create_directory(NAME)
	assert info.value.errno == 28


def test_require_dir_creates_parents(tmp_path):
	target = tmp_path / "a" / "b" / "c"
	resolved = Dirs.at(tmp_path).require_dir(target, create=True)
	assert resolved == target.resolve()
	assert target.is_dir()


def test_require_dir_existing_is_kept(tmp_path):
	assert Dirs.at(tmp_path).require_dir() == tmp_path.resolve()


def test_require_dir_missing_without_create(tmp_path):
	with pytest.raises(FileNotFoundError):
		Dirs.at(tmp_path).require_dir("nope")


def test_require_dir_rejects_file(tmp_path):
	(tmp_path / "file.txt").write_text("x", encoding="utf-8")
	with pytest.raises(NotADirectoryError):
		Dirs.at(tmp_path).require_dir("file.txt", create=True)


def test_require_dir_dry_run(tmp_path):
	target = tmp_path / "later"
	assert Dirs.at(tmp_path, dry_run=True).require_dir(target, create=True) == target.resolve()
	assert not target.exists()
