"""Exceptions raised while turning a migration export into OTP records.

Every failure names the stage it came from (URI, payload, image) and the
condition that failed, through its class and its `kind` string.
"""


class MigrationError(Exception):
    """Base for every otpmigrate failure"""
    kind = 'error'


# --- URI stage ---

class ExtractError(MigrationError):
    kind = 'extract'


class UnparseableUri(ExtractError):
    kind = 'unparseable'


class WrongScheme(ExtractError):
    kind = 'wrong_scheme'


class WrongHost(ExtractError):
    kind = 'wrong_host'


class MissingPayload(ExtractError):
    kind = 'missing_payload'


class BadEncoding(ExtractError):
    kind = 'bad_encoding'


class PayloadError(ExtractError):
    """The URI was fine but its payload could not be decoded."""
    kind = 'codec'

    def __init__(self, error):
        super().__init__(str(error))
        self.error = error


# --- Payload stage ---

class DecodeError(MigrationError):
    kind = 'decode'


class MalformedPayload(DecodeError):
    kind = 'malformed'


class EmptyPayload(DecodeError):
    kind = 'empty'


# --- Image stage ---

class ImageError(MigrationError):
    kind = 'image'


class UnreadableImage(ImageError):
    kind = 'unreadable'


class QrNotFound(ImageError):
    kind = 'not_found'


class AmbiguousImage(ImageError):
    kind = 'ambiguous'

    def __init__(self, count):
        super().__init__(f'{count} QR codes found, expected exactly one')
        self.count = count


class CorruptQr(ImageError):
    kind = 'corrupt'


class DetectorUnavailable(ImageError):
    """The QR backend's native library could not be loaded."""
    kind = 'detector_unavailable'


# --- Output ---

class ExportError(MigrationError):
    kind = 'export'


class BackupError(MigrationError):
    kind = 'backup'
