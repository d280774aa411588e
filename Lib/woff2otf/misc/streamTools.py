"""woff2otf.misc.streamTools.py -- helpers for reading, writing and copying
binary streams in bounded chunks.
"""
import zlib
from woff2otf.errors import TruncatedInputError, WriteFailureError, DecompressionError


DEFAULT_BUFFER_SIZE = 64 * 1024


def readExact(file, size, what="data"):
	"""Read exactly 'size' bytes from 'file', or raise TruncatedInputError.

		>>> from io import BytesIO
		>>> readExact(BytesIO(b"abcdef"), 4)
		b'abcd'
	"""
	data = file.read(size)
	if len(data) != size:
		raise TruncatedInputError(
			"not enough data for %s: expected %d bytes, found %d" % (what, size, len(data)))
	return data


def writeAll(file, data):
	"""Write 'data' to 'file', turning any failure into WriteFailureError."""
	try:
		written = file.write(data)
	except OSError as e:
		raise WriteFailureError("failed writing %d bytes: %s" % (len(data), e)) from e
	# raw (unbuffered) streams may accept fewer bytes than given
	if written is not None and written != len(data):
		raise WriteFailureError(
			"short write: %d of %d bytes accepted" % (written, len(data)))


def writePadding(file, length, alignment=4):
	"""Write the NUL bytes needed to bring 'length' to a multiple of
	'alignment'. Return the number of bytes written.
	"""
	padding = (alignment - length % alignment) % alignment
	if padding:
		writeAll(file, b"\0" * padding)
	return padding


class ZlibReader(object):
	"""Read-only file-like object yielding the inflated contents of the
	zlib stream that starts at the current position of 'file'.

	The compressed input is pulled in 'bufferSize' chunks, and at most
	'size' bytes are inflated per read() call.
	"""

	def __init__(self, file, bufferSize=DEFAULT_BUFFER_SIZE):
		self.file = file
		self.bufferSize = bufferSize
		self._decompressor = zlib.decompressobj()
		self._pending = b""

	@property
	def eof(self):
		return self._decompressor.eof and not self._pending

	def read(self, size):
		d = self._decompressor
		while not d.eof:
			try:
				data = d.decompress(self._pending, size)
			except zlib.error as e:
				raise DecompressionError("failed to inflate table data: %s" % e) from e
			self._pending = d.unconsumed_tail
			if data:
				return data
			if not self._pending and not d.eof:
				self._pending = self.file.read(self.bufferSize)
				if not self._pending:
					raise TruncatedInputError("compressed table data ends prematurely")
		return b""


def copyStream(source, dest, length, bufferSize=DEFAULT_BUFFER_SIZE, callback=None):
	"""Copy exactly 'length' bytes from 'source' to 'dest' through a buffer
	of at most 'bufferSize' bytes. If given, 'callback' is called with
	every chunk before it is written.

	Raise TruncatedInputError if 'source' runs dry first; a source that
	reports its own 'eof' (ZlibReader) raises DecompressionError instead.
	"""
	remaining = length
	while remaining:
		chunk = source.read(min(bufferSize, remaining))
		if not chunk:
			if getattr(source, "eof", False):
				raise DecompressionError(
					"decompressed data is %d bytes shorter than expected %d" % (remaining, length))
			raise TruncatedInputError(
				"not enough data: expected %d bytes, found %d" % (length, length - remaining))
		if callback is not None:
			callback(chunk)
		if dest is not None:
			writeAll(dest, chunk)
		remaining -= len(chunk)
	return length


if __name__ == "__main__":
	import sys
	import doctest
	sys.exit(doctest.testmod().failed)
