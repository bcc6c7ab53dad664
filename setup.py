from setuptools import setup, find_packages

setup(
	name='c-cargo',
	version='0.0.1',
	description='A cargo-like project scaffolder and Makefile generator for C and C++',
	packages=find_packages(exclude=['tests']),
	python_requires='>=3.10',
	install_requires=[
		'argh',
		'tomli; python_version < "3.11"',
	],
	extras_require={
		'test': ['pytest'],
	},
	entry_points = {
		'console_scripts': ['c-cargo=ccargo.__main__:entrypoint'],
	},
)
