"""woff2otf/transcoder.py -- convert WOFF 1.0 fonts to sfnt (TrueType/OpenType).

The conversion works on streams: the woff input must be seekable, the sfnt
output is written strictly sequentially, and table data passes through a
fixed-size buffer, so memory use doesn't grow with the size of the font.

	>>> from woff2otf.transcoder import convert
	>>> with open("font.woff", "rb") as infile, open("font.otf", "wb") as outfile:
	...     convert(infile, outfile)  # doctest: +SKIP

Table checksums are copied from the woff directory as they are, unless
'recalcChecksums' is true.
"""

from fontTools.misc.textTools import Tag
from woff2otf.errors import WOFFLibError
from woff2otf.woff import WOFFReader
from woff2otf.sfnt import SFNTStreamWriter, ChecksumCalculator
from woff2otf.misc.streamTools import DEFAULT_BUFFER_SIZE, copyStream
import os
import logging


log = logging.getLogger(__name__)

__all__ = ["convert", "convertFile", "sfntExtension"]


def convert(infile, outfile, recalcChecksums=False, bufferSize=DEFAULT_BUFFER_SIZE):
	"""Read a WOFF font from the seekable binary stream 'infile', and write
	the equivalent sfnt font to 'outfile' starting at its current position.

	The sfnt tables keep the order of the woff table directory. Raises a
	WOFFLibError subclass if the input is not a WOFF font, is truncated or
	holds malformed compressed data, or if writing fails.
	"""
	reader = WOFFReader(infile)
	log.debug("table directory: %s", " ".join(reader.keys()))
	writer = SFNTStreamWriter(outfile, reader.numTables, reader.sfntVersion, bufferSize)

	for entry in reader.tables:
		if recalcChecksums:
			checkSum = _calcTableChecksum(reader, entry, bufferSize)
			if checkSum != entry.origChecksum:
				log.debug("'%s' checksum recalculated: 0x%08X -> 0x%08X",
					Tag(entry.tag), entry.origChecksum, checkSum)
		else:
			checkSum = entry.origChecksum
		sfntEntry = writer.addTable(entry.tag, entry.origLength, checkSum)
		entry.otfOffset = sfntEntry.offset
		log.debug("'%s' table: woff offset %d, length %d (%d stored) -> sfnt offset %d",
			Tag(entry.tag), entry.offset, entry.origLength, entry.compLength, entry.otfOffset)

	if writer.nextTableOffset != reader.totalSfntSize:
		log.warning("reported 'totalSfntSize' (%d) doesn't match the sfnt size (%d)",
			reader.totalSfntSize, writer.nextTableOffset)
	reader.checkLength()

	writer.writeDirectory()
	for entry, sfntEntry in zip(reader.tables, writer.tables):
		log.debug("%s '%s' table", "inflating" if entry.compressed else "copying", Tag(entry.tag))
		writer.writeTable(sfntEntry, reader.openTable(entry, bufferSize))


def _calcTableChecksum(reader, entry, bufferSize):
	calculator = ChecksumCalculator(Tag(entry.tag))
	copyStream(reader.openTable(entry, bufferSize), None, entry.origLength,
		bufferSize, callback=calculator.update)
	return calculator.checksum()


def convertFile(inputPath, outputPath, **kwargs):
	"""Convert the WOFF font file at 'inputPath' to the sfnt font file
	'outputPath'. Keyword arguments are passed on to convert(). If the
	conversion fails, the incomplete output file is removed.
	"""
	with open(inputPath, "rb") as infile:
		try:
			with open(outputPath, "wb") as outfile:
				convert(infile, outfile, **kwargs)
		except WOFFLibError:
			log.debug("removing incomplete output file '%s'", outputPath)
			os.remove(outputPath)
			raise


def sfntExtension(sfntVersion):
	"""Return the customary file extension for a font of 'sfntVersion'.

		>>> sfntExtension("OTTO")
		'.otf'
		>>> sfntExtension(b"\\0\\1\\0\\0")
		'.ttf'
	"""
	if Tag(sfntVersion) == "OTTO":
		return ".otf"
	return ".ttf"
