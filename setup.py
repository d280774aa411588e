#! /usr/bin/env python

from setuptools import setup, find_packages


# Trove classifiers for PyPI
classifiers = {"classifiers": [
	"Development Status :: 4 - Beta",
	"Environment :: Console",
	"Environment :: Other Environment",
	"Intended Audience :: Developers",
	"Intended Audience :: End Users/Desktop",
	"License :: OSI Approved :: BSD License",
	"Natural Language :: English",
	"Operating System :: OS Independent",
	"Programming Language :: Python",
	"Programming Language :: Python :: 3",
	"Topic :: Multimedia :: Graphics",
	"Topic :: Multimedia :: Graphics :: Graphics Conversion",
	"Topic :: Text Processing :: Fonts",
]}

long_description = """\
woff2otf converts WOFF 1.0 web fonts back to the TrueType/OpenType
(sfnt) fonts they wrap. Table data is streamed through a fixed-size
buffer, the output is written strictly sequentially, and the table
order and checksums of the WOFF font are preserved. The package also
contains a command line tool, "woff2otf".
"""


def guess_next_dev_version(version):
	""" If the distance from the last version tag is N != 0, increase the
	last number by one, and append '.devN' suffix. Else return the version tag
	as is.

	Note: The version tag must be two to three non-negative integer values,
	separated by dots: MAJOR.MINOR[.MICRO].
	When 'MICRO' is omitted, it's assumed to be 0.
	"""
	if version.exact:
		return version.format_with("{tag}")
	else:
		import re

		tag = str(version.tag)
		version_tag_re = re.compile(r"^([0-9]+.[0-9]+)(?:.([0-9]+))?$")
		try:
			major_minor, micro = version_tag_re.match(tag).groups()
		except AttributeError:
			raise ValueError(
				'Invalid version tag: %r. It must match MAJOR.MINOR[.MICRO]' % tag)
		return '%s.%d.dev%s' % (
			major_minor, int(micro or '0') + 1, version.distance)


def my_scm_version():
	return {
		"write_to": "Lib/woff2otf/version.py",
		"version_scheme": guess_next_dev_version,
		"fallback_version": "0.1.0",
	}


setup(
	name="woff2otf",
	use_scm_version=my_scm_version,
	description="Convert WOFF web fonts to TrueType/OpenType fonts",
	license="OpenSource, BSD-style",
	platforms=["Any"],
	long_description=long_description,
	package_dir={'': 'Lib'},
	packages=find_packages("Lib"),
	python_requires=">=3.7",
	install_requires=[
		"fonttools>=4.0",
	],
	extras_require={
		"test": [
			"pytest>=3.0",
		],
	},
	setup_requires=[
		"setuptools_scm>=1.11.1",
	],
	entry_points={
		'console_scripts': [
			"woff2otf = woff2otf.cli:main",
		]
	},
	**classifiers
)
