class CargoError(Exception):
	"""General exception that should be reported to the user"""


class DirCreationError(CargoError):
	def __init__(self, path, reason):
		self.path = path
		self.reason = reason

	def __str__(self):
		return f"Error creating directory {self.path!r}\n\t\t{self.reason}"


class FileWriteError(CargoError):
	def __init__(self, path, reason):
		self.path = path
		self.reason = reason

	def __str__(self):
		return f"Error writing to {self.path!r}\n\t\t{self.reason}"


class ProjectNotInitialized(CargoError):
	def __str__(self):
		return 'Project is not initialized\n\t\trun "c-cargo new {proj_name}"'


class ManifestReadError(CargoError):
	"""The manifest exists but could not be read"""


class ManifestParseError(CargoError):
	"""The manifest was read but is not valid TOML"""


class MissingName(CargoError):
	def __str__(self):
		return "Add a name to your Make.toml"


class PathEncodingFailed(CargoError):
	"""A path found while scanning cannot be turned into a usable Makefile path,
	either because it is not valid UTF-8 or because it has no name left once the
	source extension is removed."""
	def __init__(self, path, reason):
		self.path = path
		self.reason = reason

	def __str__(self):
		return f"Bad source path {self.path!r}: {self.reason}"


class ScanFailed(CargoError):
	"""Wraps a filesystem error hit while scanning the source tree"""
	def __init__(self, path, reason):
		self.path = path
		self.reason = reason

	def __str__(self):
		return f"Failed to scan {self.path!r}\n\t\t{self.reason}"
