import sys
import traceback

import argh

from . import verbose_print as output
from .config import OBJECT_ROOT, SOURCE_ROOT, load_manifest, resolve_config
from .exceptions import CargoError
from .graph import generate
from .makefile import MAKEFILE, assemble, find_libs, write_makefile
from .scaffold import new_project
from .verbose_print import color, verbose_print


QUIET_HELP = "Specify once to restrict output to errors only. Specify twice to never output anything."
VERBOSE_HELP = " ".join([
	"Specify multiple times to print additional information:",
	"(Once) Print the resolved configuration and a summary of what was generated.",
	"(Twice) Print every source file found and every file created.",
])


def setup_output(verbose, quiet):
	output.set(verbose - quiet, sys.stdout.isatty())


def report(action, fn, *args, **kwargs):
	"""Run fn, turning any CargoError into a message and a non-zero exit"""
	try:
		return fn(*args, **kwargs)
	except CargoError as e:
		verbose_print(-1, f"{color.red(f'Error {action}')}\n\t{e}", file=sys.stderr)
		if e.__cause__ is not None and output.verbosity >= 1:
			traceback.print_exception(e.__cause__)
		sys.exit(1)


@argh.arg("name", help="Name of the project, and of the directory to create for it")
@argh.arg("-q", "--quiet", action="count", default=0, help=QUIET_HELP)
@argh.arg("-v", "--verbose", action="count", default=0, help=VERBOSE_HELP)
def new(name, quiet=0, verbose=0):
	"""Create a new project skeleton in directory NAME"""
	setup_output(verbose, quiet)
	report("making new project", new_project, name)
	verbose_print(0, f'Done just run\n\t"cd {name}"\n\t"c-cargo update"')


@argh.arg("--sort", help="List each source directory in name order, for output that doesn't depend on the filesystem")
@argh.arg("-q", "--quiet", action="count", default=0, help=QUIET_HELP)
@argh.arg("-v", "--verbose", action="count", default=0, help=VERBOSE_HELP)
def update(sort=False, quiet=0, verbose=0):
	"""Regenerate the Makefile from Make.toml and the contents of src/"""
	setup_output(verbose, quiet)
	report("updating project", update_makefile, sort=sort)


def update_makefile(sort=False):
	"""Build the Makefile text in full, then write it. Any failure leaves the old Makefile untouched."""
	config = resolve_config(load_manifest())
	verbose_print(1, f"Configuration: {config}")

	result = generate(config.compiler, SOURCE_ROOT, config.compile_flags, config.source_ext,
		object_root=OBJECT_ROOT, sort=sort)
	libs = find_libs()
	verbose_print(1, f"Found {len(result.rules)} source file(s) and {len(libs)} librar{'y' if len(libs) == 1 else 'ies'}")

	write_makefile(assemble(config, result, libs))
	verbose_print(0, f"Wrote {color.cyan(MAKEFILE)} for {config.output_path}")
