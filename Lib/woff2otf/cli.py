"""\
usage: woff2otf [options] inputfile1 [... inputfileN]

    Convert WOFF 1.0 web fonts to TrueType/OpenType (sfnt) fonts.

    The output file name is the input file name with its extension
    replaced by .otf (CFF flavoured fonts) or .ttf (TrueType flavoured
    fonts). An existing file is not overwritten, but a '#1', '#2'...
    suffix is added to the new file's name, unless -y is given.

    General options:
    -h Help: print this message.
    --version: show version and exit.
    -d <outputfolder> Specify a directory where the output files are
       to be created.
    -o <outputfile> Specify a file to write the output to. Only
       allowed with a single input file.
    -y Overwrite existing output files.
    -v Verbose: more messages will be written to stdout about what
       is being done.
    -q Quiet: No messages will be written to stdout about what
       is being done.
    --recalc-checksums Compute the table checksums of the output font
       instead of copying them from the WOFF table directory.
"""

from woff2otf.errors import WOFFLibError
from woff2otf.transcoder import convertFile, sfntExtension
from woff2otf.misc.fileTools import makeOutputFileName, guessFileType
from fontTools.misc.loggingTools import Timer
import os
import sys
import getopt
import logging


log = logging.getLogger("woff2otf")

timer = Timer(logging.getLogger("woff2otf.timer"))


class Options(object):

	outputDir = None
	outputFile = None
	overWrite = False
	verbose = False
	quiet = False
	recalcChecksums = False

	def __init__(self, rawOptions, numFiles):
		for option, value in rawOptions:
			# general options
			if option == "-h":
				print(__doc__)
				sys.exit(0)
			elif option == "--version":
				from woff2otf import version
				print(version)
				sys.exit(0)
			elif option == "-d":
				if not os.path.isdir(value):
					raise getopt.GetoptError("The -d option value must be an existing directory")
				self.outputDir = value
			elif option == "-o":
				self.outputFile = value
			elif option == "-y":
				self.overWrite = True
			elif option == "-v":
				self.verbose = True
			elif option == "-q":
				self.quiet = True
			elif option == "--recalc-checksums":
				self.recalcChecksums = True
		if self.verbose and self.quiet:
			raise getopt.GetoptError("-q and -v options are mutually exclusive")
		if self.verbose:
			self.logLevel = logging.DEBUG
		elif self.quiet:
			self.logLevel = logging.WARNING
		else:
			self.logLevel = logging.INFO
		if self.outputFile and self.outputDir:
			raise getopt.GetoptError("-o and -d options are mutually exclusive")
		if self.outputFile and numFiles > 1:
			raise getopt.GetoptError("-o may only be used with a single input file")


def parseOptions(args):
	rawOptions, files = getopt.getopt(args, "hd:o:yvq", ["version", "recalc-checksums"])
	options = Options(rawOptions, len(files))
	if not files:
		raise getopt.GetoptError("Must specify at least one input file")
	return files, options


def outputFileName(input, options):
	if options.outputFile:
		return options.outputFile
	with open(input, "rb") as f:
		f.seek(4)
		sfntVersion = f.read(4)
	return makeOutputFileName(input, options.outputDir, sfntExtension(sfntVersion),
		options.overWrite)


def process(files, options):
	"""Convert each of 'files', and return the number of failures."""
	failures = 0
	for input in files:
		fileType = guessFileType(input)
		if fileType != "WOFF":
			log.error("'%s' is not a WOFF font (file type: %s)", input, fileType)
			failures += 1
			continue
		try:
			output = outputFileName(input, options)
			log.info('Converting "%s" to "%s"...', input, output)
			with timer("convert '%s'" % input.replace("%", "%%")):
				convertFile(input, output, recalcChecksums=options.recalcChecksums)
		except (WOFFLibError, OSError) as e:
			log.error("%s: %s", input, e)
			failures += 1
	return failures


def main(args=None):
	"""Convert WOFF fonts to TrueType/OpenType"""
	from woff2otf import configLogger

	if args is None:
		args = sys.argv[1:]
	try:
		files, options = parseOptions(args)
	except getopt.GetoptError as e:
		print("%s\nERROR: %s" % (__doc__, e), file=sys.stderr)
		return 2

	configLogger(logger=log, level=options.logLevel)
	try:
		failures = process(files, options)
	except KeyboardInterrupt:
		log.error("(Cancelled.)")
		return 1
	return 1 if failures else 0


if __name__ == "__main__":
	sys.exit(main())
