"""woff2otf/sfnt.py -- low-level module to write the sfnt file format.

Defines one public class:
	SFNTStreamWriter

Unlike a general purpose sfnt writer, SFNTStreamWriter never seeks: the
table directory is laid out first, written in one go, and then the table
data follows in directory order, each table padded to a 4-byte boundary.
"""

from fontTools.misc import sstruct
from woff2otf.errors import WOFFLibError
from woff2otf.misc.streamTools import DEFAULT_BUFFER_SIZE, copyStream, writeAll, writePadding
import struct
import logging


log = logging.getLogger(__name__)


# -- sfnt directory helpers and cruft

sfntDirectoryFormat = """
		> # big endian
		sfntVersion:    4s
		numTables:      H    # number of tables
		searchRange:    H    # (max2 <= numTables)*16
		entrySelector:  H    # log2(max2 <= numTables)
		rangeShift:     H    # numTables*16-searchRange
"""

sfntDirectorySize = sstruct.calcsize(sfntDirectoryFormat)

sfntDirectoryEntryFormat = """
		> # big endian
		tag:            4s
		checkSum:       L
		offset:         L
		length:         L
"""

sfntDirectoryEntrySize = sstruct.calcsize(sfntDirectoryEntryFormat)


class SFNTDirectoryEntry(object):

	format = sfntDirectoryEntryFormat
	formatSize = sfntDirectoryEntrySize

	def toString(self):
		return sstruct.pack(self.format, self)

	def __repr__(self):
		if hasattr(self, "tag"):
			return "<%s '%s' at %x>" % (self.__class__.__name__, self.tag, id(self))
		else:
			return "<%s at %x>" % (self.__class__.__name__, id(self))


class SFNTStreamWriter(object):

	directoryFormat = sfntDirectoryFormat
	directorySize = sfntDirectorySize
	DirectoryEntry = SFNTDirectoryEntry

	def __init__(self, file, numTables, sfntVersion="\000\001\000\000",
			bufferSize=DEFAULT_BUFFER_SIZE):
		self.file = file
		self.numTables = numTables
		self.sfntVersion = sfntVersion
		self.bufferSize = bufferSize
		self.searchRange, self.entrySelector, self.rangeShift = getSearchRange(numTables, 16)
		if self.searchRange > 0xFFFF or self.rangeShift > 0xFFFF:
			log.warning(
				"searchRange (%d) and rangeShift (%d) for %d tables don't fit in "
				"16 bits; storing them truncated",
				self.searchRange, self.rangeShift, numTables)
			self.searchRange &= 0xFFFF
			self.rangeShift &= 0xFFFF
		self.tables = []
		self.nextTableOffset = self.directorySize + numTables * self.DirectoryEntry.formatSize
		self.position = None

	def addTable(self, tag, length, checkSum):
		"""Reserve room for a table of 'length' bytes after the tables
		added so far, and return its directory entry.
		"""
		if len(self.tables) >= self.numTables:
			raise WOFFLibError("too many tables; expected %d" % self.numTables)
		if self.nextTableOffset + length > 0xFFFFFFFF:
			raise WOFFLibError(
				"sfnt too large: '%s' table of %d bytes at offset %d exceeds 32 bits" % (
				tag, length, self.nextTableOffset))
		entry = self.DirectoryEntry()
		entry.tag = tag
		entry.checkSum = checkSum
		entry.offset = self.nextTableOffset
		entry.length = length
		self.nextTableOffset = self.nextTableOffset + ((length + 3) & ~3)
		self.tables.append(entry)
		return entry

	def _assertNumTables(self):
		if len(self.tables) != self.numTables:
			raise WOFFLibError("wrong number of tables; expected %d, found %d" % (
				self.numTables, len(self.tables)))

	def writeDirectory(self):
		"""Write the sfnt header and the table directory. Must be called
		once, after all tables were added and before any table data.
		"""
		self._assertNumTables()
		if self.position is not None:
			raise WOFFLibError("table directory was already written")
		directory = sstruct.pack(self.directoryFormat, self)
		for entry in self.tables:
			directory = directory + entry.toString()
		writeAll(self.file, directory)
		self.position = len(directory)

	def writeTable(self, entry, reader):
		"""Copy the data of 'entry' from the file-like 'reader', followed by
		the NUL bytes padding it to a 4-byte boundary.
		"""
		if self.position is None:
			raise WOFFLibError("table directory must be written first")
		if self.position != entry.offset:
			raise WOFFLibError("'%s' table must be written at offset %d, not %d" % (
				entry.tag, entry.offset, self.position))
		copyStream(reader, self.file, entry.length, self.bufferSize)
		padding = writePadding(self.file, entry.offset + entry.length)
		self.position = entry.offset + entry.length + padding


def maxPowerOfTwo(x):
	"""Return the highest exponent of two, so that
	(2 ** exponent) <= x.  Return 0 if x is 0.

		>>> maxPowerOfTwo(11)
		3
		>>> maxPowerOfTwo(16)
		4
	"""
	exponent = 0
	while x:
		x = x >> 1
		exponent = exponent + 1
	return max(exponent - 1, 0)


def getSearchRange(n, itemSize=16):
	"""Calculate searchRange, entrySelector, rangeShift for a directory
	of 'n' items of 'itemSize' bytes. An empty directory gets all zeros.

		>>> getSearchRange(11)
		(128, 3, 48)
		>>> getSearchRange(0)
		(0, 0, 0)
	"""
	if not n:
		return 0, 0, 0
	exponent = maxPowerOfTwo(n)
	searchRange = (2 ** exponent) * itemSize
	entrySelector = exponent
	rangeShift = n * itemSize - searchRange
	return searchRange, entrySelector, rangeShift


def calcChecksum(data, start=0):
	"""Calculate the checksum for an arbitrary block of data.
	Optionally takes a 'start' argument, which allows you to
	calculate a checksum in chunks by feeding it a previous
	result.

	If the data length is not a multiple of four, it assumes
	it is to be padded with null byte.

		>>> print(calcChecksum(b"abcd"))
		1633837924
		>>> print(calcChecksum(b"abcdxyz"))
		3655064932
	"""
	remainder = len(data) % 4
	if remainder:
		data += b"\0" * (4 - remainder)
	value = start
	blockSize = 4096
	assert blockSize % 4 == 0
	for i in range(0, len(data), blockSize):
		block = data[i:i+blockSize]
		longs = struct.unpack(">%dL" % (len(block) // 4), block)
		value = (value + sum(longs)) & 0xffffffff
	return value


class ChecksumCalculator(object):
	"""Compute a table checksum from data fed in arbitrarily sized chunks.

	For the 'head' table the checkSumAdjustment field (bytes 8 to 12) is
	counted as zero.

		>>> calc = ChecksumCalculator()
		>>> calc.update(b"abc")
		>>> calc.update(b"dxyz")
		>>> print(calc.checksum())
		3655064932
	"""

	def __init__(self, tag=None):
		self.tag = tag
		self.value = 0
		self.position = 0
		self._pending = b""

	def update(self, data):
		start = self.position
		end = start + len(data)
		if self.tag == "head" and start < 12 and end > 8:
			data = bytearray(data)
			for i in range(max(8, start), min(12, end)):
				data[i - start] = 0
			data = bytes(data)
		self.position = end
		data = self._pending + data
		usable = len(data) & ~3
		self.value = calcChecksum(data[:usable], self.value)
		self._pending = data[usable:]

	def checksum(self):
		return calcChecksum(self._pending, self.value)


if __name__ == "__main__":
	import sys
	import doctest
	sys.exit(doctest.testmod().failed)
