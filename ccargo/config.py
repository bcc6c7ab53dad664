import os
import sys
from collections import namedtuple

if sys.version_info >= (3, 11):
	import tomllib
else:
	import tomli as tomllib

from .exceptions import ManifestParseError, ManifestReadError, MissingName, ProjectNotInitialized


"""Loading the project manifest (Make.toml) and resolving it into a BuildConfig.

Resolution is deliberately two-tier:
	name: mandatory. Absent or not a string is a MissingName error.
	everything else: optional. Absent or not a string falls back to the default.
"""

MANIFEST = "Make.toml"
SOURCE_ROOT = "src"
OBJECT_ROOT = "target"

DEFAULT_COMPILER = "clang++"
DEFAULT_SOURCE_EXT = ".cpp"


class BuildConfig(namedtuple("BuildConfig", [
	"compiler",
	"linker",
	"compile_flags",
	"link_flags",
	"run_args",
	"source_ext",
	"output_name",
])):
	__slots__ = ()

	@property
	def output_path(self):
		"""Path of the linked executable, relative to the project root"""
		return f"{OBJECT_ROOT}/{self.output_name}.out"


def load_manifest(path=MANIFEST):
	"""Read and parse the manifest at path, returning the raw table as a dict."""
	if not os.path.exists(path):
		raise ProjectNotInitialized()
	try:
		with open(path, "rb") as f:
			content = f.read()
		text = content.decode("utf-8")
	except (OSError, UnicodeDecodeError) as e:
		raise ManifestReadError(f"Error reading {path}\n\t\t{e}") from e
	try:
		return tomllib.loads(text)
	except tomllib.TOMLDecodeError as e:
		raise ManifestParseError(f"Error parsing {path}\n\t\t{e}") from e


def _optional(manifest, key, default):
	value = manifest.get(key)
	return value if isinstance(value, str) else default


def resolve_config(manifest):
	"""Turn manifest data into a BuildConfig, applying defaults to optional fields."""
	name = manifest.get("name")
	if not isinstance(name, str):
		raise MissingName()

	compiler = _optional(manifest, "compiler", DEFAULT_COMPILER)
	return BuildConfig(
		compiler = compiler,
		linker = _optional(manifest, "linker", compiler),
		compile_flags = _optional(manifest, "c_flags", ""),
		link_flags = _optional(manifest, "l_flags", ""),
		run_args = _optional(manifest, "run_args", ""),
		source_ext = _optional(manifest, "file_ext", DEFAULT_SOURCE_EXT),
		output_name = name,
	)
