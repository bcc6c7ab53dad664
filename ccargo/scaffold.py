import os

from .config import MANIFEST, OBJECT_ROOT, SOURCE_ROOT
from .exceptions import DirCreationError, FileWriteError
from .verbose_print import verbose_print


MAIN_TEMPLATE = """\
#include <iostream>

int main() {
    std::cout << "Hello, world!" << std::endl;
    return 0;
}
"""


def toml_string(value):
	"""Quote value as a TOML basic string"""
	escaped = value.replace("\\", "\\\\").replace('"', '\\"')
	return f'"{escaped}"'


def make_dir(path):
	try:
		os.mkdir(path)
	except OSError as e:
		raise DirCreationError(path, e) from e
	verbose_print(1, f"Created {path}/")


def write_file(path, contents):
	try:
		with open(path, "w") as f:
			f.write(contents)
	except OSError as e:
		raise FileWriteError(path, e) from e
	verbose_print(1, f"Wrote {path}")


def new_project(name, parent="."):
	"""Create the skeleton for project name under parent:
		NAME/Make.toml
		NAME/src/main.cpp
		NAME/target/
	Fails if NAME already exists. Returns the project directory."""
	if not name:
		raise DirCreationError(name, "project name cannot be empty")
	# Make.toml could not hold these in a basic string
	if any(ord(char) < 0x20 or ord(char) == 0x7f for char in name):
		raise DirCreationError(name, "project name cannot contain control characters")
	project = os.path.join(parent, name)
	make_dir(project)
	make_dir(os.path.join(project, SOURCE_ROOT))
	make_dir(os.path.join(project, OBJECT_ROOT))
	write_file(os.path.join(project, SOURCE_ROOT, "main.cpp"), MAIN_TEMPLATE)
	write_file(os.path.join(project, MANIFEST), f"name = {toml_string(name)}\n")
	return project
