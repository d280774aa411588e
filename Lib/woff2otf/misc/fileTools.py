"""woff2otf.misc.fileTools.py -- tools for working with font files or folders.
"""
from fontTools.misc.textTools import Tag
import os
import re


numberAddedRE = re.compile(r"#\d+$")


def makeOutputFileName(input, outputDir, extension, overWrite=False):
	"""Return the path of 'input' with its extension replaced by
	'extension', placed in 'outputDir' if given. Unless 'overWrite' is
	true, a '#1', '#2'... suffix is added until the path doesn't exist.

		>>> makeOutputFileName("Test.woff", None, ".otf", overWrite=True)
		'Test.otf'
	"""
	dirName, fileName = os.path.split(input)
	fileName, ext = os.path.splitext(fileName)
	if outputDir:
		dirName = outputDir
	fileName = numberAddedRE.split(fileName)[0]
	output = os.path.join(dirName, fileName + extension)
	n = 1
	if not overWrite:
		while os.path.exists(output):
			output = os.path.join(dirName, fileName + "#" + repr(n) + extension)
			n = n + 1
	return output


def guessFileType(fileOrPath):
	""" Take a path or file object, and return its file type.
	Return None if the file type can't be found.
	Supported file types: TTF, OTF, TTC, WOFF, WOFF2
	"""
	if not hasattr(fileOrPath, "read"):
		# assume fileOrPath is a file name
		try:
			with open(fileOrPath, "rb") as f:
				header = f.read(4)
		except IOError:
			return None
	else:
		# seek to start, but remember the current position
		f = fileOrPath
		pos = f.tell()
		f.seek(0)
		header = f.read(4)
		f.seek(pos)
	head = Tag(header)
	if head == "OTTO":
		return "OTF"
	elif head == "ttcf":
		return "TTC"
	elif head in ("\0\1\0\0", "true"):
		return "TTF"
	elif head == "wOFF":
		return "WOFF"
	elif head == "wOF2":
		return "WOFF2"
	return None
