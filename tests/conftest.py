import pytest

from ccargo import verbose_print


@pytest.fixture(autouse=True)
def reset_output():
	"""Commands set global verbosity from their flags, don't let it leak between tests"""
	verbose_print.set(0, False)
	yield
	verbose_print.set(0, False)


@pytest.fixture
def make_tree(tmp_path):
	"""Create files under tmp_path from a list of relative paths.
	Paths ending in "/" are created as empty directories."""
	def make_tree(*paths):
		for path in paths:
			full = tmp_path / path
			if path.endswith("/"):
				full.mkdir(parents=True, exist_ok=True)
			else:
				full.parent.mkdir(parents=True, exist_ok=True)
				full.write_text("// source\n")
		return tmp_path
	return make_tree
