"""Mechanism for printing at various verbosity levels.
Use set() to set the global verbosity level.
verbose_print(v, text) wraps print(text) but only runs
if v <= the global verbosity level.

Levels in use:
	-1: errors, hidden only by -qq
	0: normal output
	1: summary of what was resolved and generated
	2: per-file details

Also exposes color formatting, which can optionally be disabled.
"""

import re
import sys

verbosity = 0

class Colors:
	enabled = False

	def set(self, enabled):
		self.enabled = enabled

	def make_method(format_code):
		def color_method(self, text):
			return f"\x1b[{format_code}m{text}\x1b[m" if self.enabled else text
		return color_method

	red = make_method("31")
	cyan = make_method("36")

color = Colors()

def set(new_verbosity, color_enabled):
	global verbosity
	verbosity = new_verbosity
	color.set(color_enabled)

def verbose_print(v, text, file=None):
	if v <= verbosity:
		text = str(text)
		if color.enabled:
			text = stack_colors(text)
		# Resolved at call time so that redirected streams (eg. under test capture) are honoured
		print(text, file=sys.stdout if file is None else file)

def stack_colors(input):
	"""Takes some text containing SGI escapes and restructures them so that each reset
	escape restores the previous context instead of resetting completely.
	So eg. "{red} foo {cyan} bar {reset} baz" would show foo in red, bar in cyan,
	then baz in red instead of default."""
	output = ""
	stack = []
	while True:
		escape = re.search("\x1b\\[([0-9;]*)m", input)
		if escape is None:
			output += input
			break
		output += input[:escape.start()]
		input = input[escape.end():]
		code = escape.group(1)
		if code == "":
			# Restore previous context if any (otherwise just preserve the reset)
			if stack:
				stack.pop()
			code = stack[-1] if stack else ""
		else:
			stack.append(code)
		output += f"\x1b[{code}m"
	return output
