import logging
from fontTools.misc.loggingTools import configLogger
from woff2otf.errors import (WOFFLibError, BadSignatureError, TruncatedInputError,
	WriteFailureError, DecompressionError)
from woff2otf.transcoder import convert, convertFile

try:
	from woff2otf.version import version
except ImportError:
	# 'version.py' is missing; woff2otf was not correctly installed
	version = None

log = logging.getLogger(__name__)

__all__ = ["version", "log", "configLogger", "convert", "convertFile",
	"WOFFLibError", "BadSignatureError", "TruncatedInputError",
	"WriteFailureError", "DecompressionError"]
