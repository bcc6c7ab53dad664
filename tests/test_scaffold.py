import pytest

from ccargo.config import load_manifest, resolve_config
from ccargo.exceptions import DirCreationError
from ccargo.scaffold import MAIN_TEMPLATE, new_project, toml_string


class TestNewProject:
	def test_layout(self, tmp_path):
		project = new_project("hello", str(tmp_path))
		root = tmp_path / "hello"
		assert project == str(root)
		assert (root / "src").is_dir()
		assert (root / "target").is_dir()
		assert (root / "src" / "main.cpp").read_text() == MAIN_TEMPLATE
		assert (root / "Make.toml").read_text() == 'name = "hello"\n'

	def test_manifest_resolves(self, tmp_path):
		new_project("hello", str(tmp_path))
		config = resolve_config(load_manifest(str(tmp_path / "hello" / "Make.toml")))
		assert config.output_name == "hello"
		assert config.compiler == "clang++"

	def test_existing_directory(self, tmp_path):
		(tmp_path / "hello").mkdir()
		with pytest.raises(DirCreationError):
			new_project("hello", str(tmp_path))

	def test_empty_name(self, tmp_path):
		with pytest.raises(DirCreationError):
			new_project("", str(tmp_path))

	@pytest.mark.parametrize("name", ["bad\nname", "tab\there", "bell\x07", "del\x7f"])
	def test_control_characters_rejected(self, tmp_path, name):
		with pytest.raises(DirCreationError):
			new_project(name, str(tmp_path))
		assert list(tmp_path.iterdir()) == []

	def test_quoted_name_round_trips(self, tmp_path):
		name = 'we"ird\\name'
		new_project(name, str(tmp_path))
		assert load_manifest(str(tmp_path / name / "Make.toml"))["name"] == name


def test_toml_string():
	assert toml_string('a"b\\c') == '"a\\"b\\\\c"'
