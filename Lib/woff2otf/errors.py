"""woff2otf/errors.py -- exceptions raised while converting WOFF to SFNT."""


class WOFFLibError(Exception):
	"""Base class for all errors raised by woff2otf."""


class BadSignatureError(WOFFLibError):
	pass


class TruncatedInputError(WOFFLibError):
	"""The input ended before a header field, a directory entry or a
	table's declared length could be read."""


class WriteFailureError(WOFFLibError):
	pass


class DecompressionError(WOFFLibError):
	"""The zlib stream of a table is malformed or shorter than the
	table's original length."""
