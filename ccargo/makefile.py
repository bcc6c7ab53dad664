import logging
import os
from uuid import uuid4

from .exceptions import FileWriteError, ScanFailed
from .graph import join_words
from .verbose_print import verbose_print


"""Assembles the final Makefile text from a BuildConfig and a BuildGraphResult.

Layout:
	.PHONY line
	clean: removes every object file and the executable
	one compile rule per source file, verbatim from the graph
	all: links every object file and library into the executable
	run: runs the executable with the configured arguments
"""

MAKEFILE = "Makefile"
LIBS_DIR = "libs"


def find_libs(libs_dir=LIBS_DIR):
	"""Returns libs_dir/NAME for each direct entry of libs_dir, sorted by name.
	A missing libs_dir is the same as an empty one. Unlike the source scan, names
	that aren't valid UTF-8 are skipped rather than failing the whole build."""
	if not os.path.exists(libs_dir):
		return []
	if not os.path.isdir(libs_dir):
		logging.warning(f"{libs_dir!r} is not a directory, not linking any libraries")
		return []
	try:
		names = sorted(os.listdir(libs_dir))
	except OSError as e:
		raise ScanFailed(libs_dir, e) from e
	libs = []
	for name in names:
		try:
			name.encode("utf-8")
		except UnicodeEncodeError:
			verbose_print(2, f"Skipping library {os.fsencode(name)!r}: not valid UTF-8")
			continue
		libs.append(f"{libs_dir}/{name}")
	return libs


def rule(target, prereqs, *recipe):
	"""Format a single Makefile rule with tab-indented recipe lines"""
	header = f"{target} : {' '.join(prereqs)}".rstrip()
	return header + "\n" + "".join(f"\t{line}\n" for line in recipe) + "\n"


def assemble(config, result, libs=()):
	objects = list(result.object_paths)
	libs = list(libs)
	output = config.output_path

	return "".join([
		".PHONY : clean all run\n\n",
		rule("clean", [], join_words("rm -f", *objects, output)),
		result.rule_block,
		rule("all", objects + libs,
			join_words(config.linker, "-o", output, config.link_flags, *objects, *libs),
		),
		rule("run", ["all"], join_words(f"./{output}", config.run_args)),
	])


def write_makefile(text, path=MAKEFILE):
	"""Replace the file at path with text. To prevent partial writes, the text
	is written to a tempfile which is then renamed over path."""
	temp_path = f"{path}.{uuid4()}.tmp"
	try:
		with open(temp_path, "w") as f:
			f.write(text)
		os.replace(temp_path, path)
	except OSError as e:
		if os.path.exists(temp_path):
			os.remove(temp_path)
		raise FileWriteError(path, e) from e
