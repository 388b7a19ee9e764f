"""Extract OTP accounts from Google Authenticator migration exports.

    decodeUri('otpauth-migration://offline?data=...') -> [OtpRecord, ...]
    fromImage('export.png') -> [OtpRecord, ...]
"""
from .codec import decode, decodeBatch
from .errors import (
    AmbiguousImage, BackupError, BadEncoding, CorruptQr, DecodeError, DetectorUnavailable, EmptyPayload, ExportError,
    ExtractError, ImageError, MalformedPayload, MigrationError, MissingPayload, PayloadError,
    QrNotFound, UnparseableUri, UnreadableImage, WrongHost, WrongScheme,
)
from .extractor import decodeUri, decodeUriFile, extract
from .image import fromImage
from .records import Algorithm, DigitCount, MigrationBatch, OtpRecord, OtpType

__version__ = '0.1.0'
