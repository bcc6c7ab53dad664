import os
from collections import namedtuple

from .exceptions import PathEncodingFailed, ScanFailed
from .verbose_print import verbose_print


"""Translation of a source tree into Makefile compile rules.

The tree is walked depth-first, pre-order. Each directory produces an immutable
BuildGraphResult, and a parent splices each child's result in at the position
the child was visited, so the output order is exactly the traversal order.

Traversal order is whatever the directory listing yields unless sort=True is given.
Listing order is stable across runs on an unchanged tree on the same filesystem,
but is not portable between filesystems.
"""

OBJECT_EXT = ".o"


CompileRule = namedtuple("CompileRule", ["object_path", "source_path", "rule_text"])


class BuildGraphResult(namedtuple("BuildGraphResult", ["rules"])):
	__slots__ = ()

	@property
	def rule_block(self):
		return "".join(rule.rule_text for rule in self.rules)

	@property
	def object_paths(self):
		return tuple(rule.object_path for rule in self.rules)

	def __add__(self, other):
		return BuildGraphResult(self.rules + other.rules)


EMPTY_RESULT = BuildGraphResult(())


def join_words(*words):
	"""Space-join the non-empty words, so that empty flags don't leave double spaces"""
	return " ".join(word for word in words if word)


def compile_rule(compiler, compile_flags, source_path, object_path):
	object_dir = os.path.dirname(object_path)
	recipe = [
		f"@mkdir -p {object_dir}",
		join_words(compiler, compile_flags, "-c", source_path, "-o", object_path),
	]
	text = f"{object_path} : {source_path}\n" + "".join(f"\t{line}\n" for line in recipe) + "\n"
	return CompileRule(object_path, source_path, text)


def check_encoding(path):
	"""Names that aren't valid UTF-8 come back from the OS with surrogate escapes,
	which can't be written into the Makefile."""
	try:
		path.encode("utf-8")
	except UnicodeEncodeError as e:
		raise PathEncodingFailed(os.fsencode(path), f"not valid UTF-8 ({e.reason})") from None


def object_path_for(source_path, root, source_ext, object_root):
	"""Rebase source_path from root to object_root, swapping source_ext for the object extension.
	eg. src/util/helpers.cpp -> target/util/helpers.o
	"""
	relpath = os.path.relpath(source_path, root)
	stem = relpath[:len(relpath) - len(source_ext)]
	if os.path.basename(stem) == "":
		raise PathEncodingFailed(source_path, f"file name has nothing before the {source_ext!r} extension")
	return os.path.join(object_root, stem + OBJECT_EXT)


def generate(compiler, root, compile_flags, source_ext, object_root="target", sort=False):
	"""Scan root recursively and return a BuildGraphResult with one CompileRule
	per file ending in source_ext.
	Raises ScanFailed if a directory can't be listed or an entry can't be stat'ed,
	and PathEncodingFailed for paths that can't be represented in the Makefile.
	"""
	def scan(directory):
		try:
			with os.scandir(directory) as it:
				entries = list(it)
		except OSError as e:
			raise ScanFailed(directory, e) from e
		if sort:
			entries.sort(key=lambda entry: entry.name)

		result = EMPTY_RESULT
		for entry in entries:
			check_encoding(entry.path)
			try:
				# Both follow symlinks, matching a plain stat()
				is_dir = entry.is_dir()
				is_file = not is_dir and entry.is_file()
			except OSError as e:
				raise ScanFailed(entry.path, e) from e

			if is_dir:
				result += scan(entry.path)
			elif is_file and entry.name.endswith(source_ext):
				object_path = object_path_for(entry.path, root, source_ext, object_root)
				rule = compile_rule(compiler, compile_flags, entry.path, object_path)
				verbose_print(2, f"Found {rule.source_path} -> {rule.object_path}")
				result += BuildGraphResult((rule,))
		return result

	return scan(root)
