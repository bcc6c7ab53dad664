import pytest

from ccargo.config import BuildConfig, load_manifest, resolve_config
from ccargo.exceptions import ManifestParseError, ManifestReadError, MissingName, ProjectNotInitialized


class TestResolveConfig:
	def test_defaults_with_only_name(self):
		config = resolve_config({"name": "app"})
		assert config == BuildConfig(
			compiler="clang++",
			linker="clang++",
			compile_flags="",
			link_flags="",
			run_args="",
			source_ext=".cpp",
			output_name="app",
		)

	def test_all_fields(self):
		config = resolve_config({
			"name": "app",
			"compiler": "gcc",
			"linker": "ld.lld",
			"c_flags": "-Wall -O2",
			"l_flags": "-lm",
			"run_args": "--fast",
			"file_ext": ".c",
		})
		assert config.compiler == "gcc"
		assert config.linker == "ld.lld"
		assert config.compile_flags == "-Wall -O2"
		assert config.link_flags == "-lm"
		assert config.run_args == "--fast"
		assert config.source_ext == ".c"

	def test_linker_follows_compiler(self):
		assert resolve_config({"name": "app", "compiler": "g++"}).linker == "g++"

	def test_non_string_optional_fields_fall_back(self):
		config = resolve_config({
			"name": "app",
			"compiler": 3,
			"c_flags": ["-Wall"],
			"l_flags": True,
			"run_args": {"a": "b"},
			"file_ext": 1.5,
		})
		assert config == resolve_config({"name": "app"})

	@pytest.mark.parametrize("manifest", [{}, {"name": 5}, {"name": ["app"]}, {"compiler": "gcc"}])
	def test_missing_name(self, manifest):
		with pytest.raises(MissingName):
			resolve_config(manifest)

	def test_output_path(self):
		assert resolve_config({"name": "app"}).output_path == "target/app.out"

	def test_immutable(self):
		config = resolve_config({"name": "app"})
		with pytest.raises(AttributeError):
			config.compiler = "gcc"


class TestLoadManifest:
	def test_missing_manifest(self, tmp_path):
		with pytest.raises(ProjectNotInitialized):
			load_manifest(tmp_path / "Make.toml")

	def test_parses_toml(self, tmp_path):
		path = tmp_path / "Make.toml"
		path.write_text('name = "app"\nc_flags = "-g"\n')
		assert load_manifest(path) == {"name": "app", "c_flags": "-g"}

	def test_bad_toml(self, tmp_path):
		path = tmp_path / "Make.toml"
		path.write_text('name = "app\n')
		with pytest.raises(ManifestParseError):
			load_manifest(path)

	def test_unreadable(self, tmp_path):
		path = tmp_path / "Make.toml"
		path.write_bytes(b'name = "\xff\xfe"\n')
		with pytest.raises(ManifestReadError):
			load_manifest(path)

	def test_directory_instead_of_file(self, tmp_path):
		path = tmp_path / "Make.toml"
		path.mkdir()
		with pytest.raises(ManifestReadError):
			load_manifest(path)
