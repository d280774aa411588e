"""woff2otf/woff.py -- low-level module to read the woff file format.

Defines one public class:
	WOFFReader

WOFFReader only parses the header and the table directory; the table data
is handed out as file-like objects by openTable(), so that it can be
streamed instead of being loaded in memory.
"""

from fontTools.misc import sstruct
from fontTools.misc.textTools import Tag
from woff2otf.errors import BadSignatureError
from woff2otf.misc.streamTools import DEFAULT_BUFFER_SIZE, ZlibReader, readExact
import logging


log = logging.getLogger(__name__)


woffSignature = "wOFF"
woff2Signature = "wOF2"

# flavours a woff file is expected to wrap
sfntVersions = ("\x00\x01\x00\x00", "OTTO", "true")


# -- woff directory helpers and cruft

woffDirectoryFormat = """
		> # big endian
		signature:      4s   # "wOFF"
		sfntVersion:    4s
		length:         L    # total woff file size
		numTables:      H    # number of tables
		reserved:       H    # set to 0
		totalSfntSize:  L    # uncompressed size
		majorVersion:   H    # major version of WOFF file
		minorVersion:   H    # minor version of WOFF file
		metaOffset:     L    # offset to metadata block
		metaLength:     L    # length of compressed metadata
		metaOrigLength: L    # length of uncompressed metadata
		privOffset:     L    # offset to private data block
		privLength:     L    # length of private data block
"""

woffDirectorySize = sstruct.calcsize(woffDirectoryFormat)

woffDirectoryEntryFormat = """
		> # big endian
		tag:            4s
		offset:         L
		compLength:     L    # compressed length
		origLength:     L    # original length
		origChecksum:   L    # original checksum
"""

woffDirectoryEntrySize = sstruct.calcsize(woffDirectoryEntryFormat)


class WOFFDirectoryEntry(object):

	format = woffDirectoryEntryFormat
	formatSize = woffDirectoryEntrySize

	def __init__(self):
		self.otfOffset = None  # set once the sfnt layout is known

	def fromFile(self, file):
		self.fromString(readExact(file, self.formatSize, "WOFF table directory entry"))

	def fromString(self, str):
		sstruct.unpack(self.format, str, self)

	@property
	def compressed(self):
		return self.compLength != self.origLength

	def __repr__(self):
		if hasattr(self, "tag"):
			return "<%s '%s' at %x>" % (self.__class__.__name__, Tag(self.tag), id(self))
		else:
			return "<%s at %x>" % (self.__class__.__name__, id(self))


class WOFFReader(object):

	flavor = "woff"
	directoryFormat = woffDirectoryFormat
	directorySize = woffDirectorySize
	DirectoryEntry = WOFFDirectoryEntry

	def __init__(self, file):
		self.file = file
		self._readDirectory()

	def _readDirectory(self):
		data = readExact(self.file, self.directorySize, "WOFF header")
		sstruct.unpack(self.directoryFormat, data, self)
		signature = Tag(self.signature)
		if signature != woffSignature:
			if signature == woff2Signature:
				raise BadSignatureError("WOFF2 fonts are not supported")
			raise BadSignatureError("Not a WOFF font (bad signature %r)" % signature)
		if Tag(self.sfntVersion) not in sfntVersions:
			log.warning("unknown sfntVersion %r; copying it unchanged", Tag(self.sfntVersion))
		if self.reserved:
			log.warning("reserved field is %d instead of 0", self.reserved)
		log.debug(
			"WOFF %d.%d header: flavour %r, %d tables, length %d, totalSfntSize %d",
			self.majorVersion, self.minorVersion, Tag(self.sfntVersion),
			self.numTables, self.length, self.totalSfntSize)
		if self.metaLength:
			log.info("dropping %d bytes of metadata", self.metaOrigLength)
		if self.privLength:
			log.info("dropping %d bytes of private data", self.privLength)
		self._readDirectoryEntries()

	def _readDirectoryEntries(self):
		# keep the directory order, and any duplicate tags, as found
		self.tables = []
		for i in range(self.numTables):
			entry = self.DirectoryEntry()
			entry.fromFile(self.file)
			self.tables.append(entry)

	def keys(self):
		return [Tag(entry.tag) for entry in self.tables]

	def openTable(self, entry, bufferSize=DEFAULT_BUFFER_SIZE):
		"""Return a file-like object yielding the uncompressed data of
		'entry'. Only the first 'entry.origLength' bytes are meaningful.
		"""
		self.file.seek(entry.offset)
		if entry.compressed:
			return ZlibReader(self.file, bufferSize)
		return self.file

	def checkLength(self):
		"""Log a warning if the reported 'length' doesn't match the actual
		size of the file. The current file position is not preserved.
		"""
		self.file.seek(0, 2)
		actual = self.file.tell()
		if self.length != actual:
			log.warning("reported 'length' (%d) doesn't match the actual file size (%d)",
				self.length, actual)
			return False
		return True
