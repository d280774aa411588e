import struct
import zlib
import pytest


def padded(data):
	return data + b"\0" * (-len(data) % 4)


def sfntChecksum(tag, data):
	if tag == b"head":
		data = data[:8] + b"\0\0\0\0" + data[12:]
	data = padded(data)
	return sum(struct.unpack(">%dL" % (len(data) // 4), data)) & 0xffffffff


def buildWOFF(tables, flavour=b"\0\1\0\0", signature=b"wOFF", compress=(),
		origLengths=None, metaData=b"", privData=b""):
	"""Pack a WOFF font from a list of (tag, data, checkSum) tuples.

	Tables whose tag is in 'compress' are stored zlib-compressed.
	'origLengths' can override the origLength written for a tag.
	"""
	origLengths = origLengths or {}
	numTables = len(tables)
	offset = 44 + 20 * numTables
	directory = b""
	body = b""
	for tag, data, checkSum in tables:
		stored = zlib.compress(data) if tag in compress else data
		origLength = origLengths.get(tag, len(data))
		directory += struct.pack(">4sLLLL", tag, offset, len(stored), origLength, checkSum)
		body += padded(stored)
		offset += len(padded(stored))
	metaOffset = metaLength = metaOrigLength = privOffset = privLength = 0
	if metaData:
		compressedMeta = zlib.compress(metaData)
		metaOffset, metaLength, metaOrigLength = offset, len(compressedMeta), len(metaData)
		body += padded(compressedMeta)
		offset += len(padded(compressedMeta))
	if privData:
		privOffset, privLength = offset, len(privData)
		body += privData
		offset += len(privData)
	totalSfntSize = 12 + 16 * numTables + sum(len(padded(t[1])) for t in tables)
	header = struct.pack(">4s4sLHHLHHLLLLL", signature, flavour, offset, numTables, 0,
		totalSfntSize, 1, 0, metaOffset, metaLength, metaOrigLength, privOffset, privLength)
	return header + directory + body


def buildSFNT(tables, flavour=b"\0\1\0\0"):
	"""Pack the sfnt font expected from converting buildWOFF(tables)."""
	numTables = len(tables)
	if numTables:
		entrySelector = numTables.bit_length() - 1
		searchRange = 16 << entrySelector
		rangeShift = numTables * 16 - searchRange
	else:
		entrySelector = searchRange = rangeShift = 0
	header = struct.pack(">4sHHHH", flavour, numTables, searchRange, entrySelector, rangeShift)
	offset = 12 + 16 * numTables
	directory = b""
	body = b""
	for tag, data, checkSum in tables:
		directory += struct.pack(">4sLLL", tag, checkSum, offset, len(data))
		body += padded(data)
		offset += len(padded(data))
	return header + directory + body


def readSFNTDirectory(data):
	"""Return the sfnt header fields and a list of (tag, checkSum, offset,
	length) directory entries."""
	header = struct.unpack(">4sHHHH", data[:12])
	entries = [struct.unpack(">4sLLL", data[12 + 16 * i:28 + 16 * i]) for i in range(header[1])]
	return header, entries


HEAD = bytes(range(54))
CMAP = b"\x00\x00\x00\x01abc"
OS2 = bytes(range(100, 196))
GLYF = bytes(range(256)) * 4
LOCA = b"\x00\x01\x02\x03\x04\x05\x06\x07\x08\x09\x0a\x0b\x0c"


@pytest.fixture
def tables():
	# deliberately not sorted by tag
	return [
		(b"head", HEAD, sfntChecksum(b"head", HEAD)),
		(b"cmap", CMAP, sfntChecksum(b"cmap", CMAP)),
		(b"OS/2", OS2, sfntChecksum(b"OS/2", OS2)),
		(b"glyf", GLYF, sfntChecksum(b"glyf", GLYF)),
		(b"loca", LOCA, sfntChecksum(b"loca", LOCA)),
	]


@pytest.fixture
def woffData(tables):
	return buildWOFF(tables, compress=(b"glyf", b"OS/2"))
