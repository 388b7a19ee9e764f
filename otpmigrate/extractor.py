"""Pull the payload out of an `otpauth-migration://offline?data=...` URI."""
import base64
import binascii
import logging
from urllib.parse import parse_qsl, urlsplit

from . import codec
from .config import MIGRATION_HOST, MIGRATION_QUERY_KEY, MIGRATION_SCHEME
from .errors import (
    BadEncoding, DecodeError, MissingPayload, PayloadError, UnparseableUri, WrongHost, WrongScheme
)

logger = logging.getLogger(__name__)


def _split(uri):
    if not isinstance(uri, str):
        raise UnparseableUri(f'expected a URI string, got {type(uri).__name__}')
    try:
        parts = urlsplit(uri)
        parts.port  # raises on a non-numeric port
    except ValueError as e:
        raise UnparseableUri(f'not a valid URI: {e}') from e
    if not parts.scheme:
        raise UnparseableUri('not a valid URI: no scheme')
    return parts


def _firstValue(query, key):
    # Duplicated keys: the first occurrence wins, later ones are ignored.
    for k, v in parse_qsl(query, keep_blank_values=True):
        if k == key:
            return v
    return None


def extract(uri):
    """Return the raw payload bytes carried by a migration URI."""
    parts = _split(uri)
    if parts.scheme.lower() != MIGRATION_SCHEME:
        raise WrongScheme(f'scheme is {parts.scheme!r}, expected {MIGRATION_SCHEME!r}')
    if (parts.hostname or '') != MIGRATION_HOST:
        raise WrongHost(f'host is {parts.hostname!r}, expected {MIGRATION_HOST!r}')

    value = _firstValue(parts.query, MIGRATION_QUERY_KEY)
    if value is None:
        raise MissingPayload(f'no {MIGRATION_QUERY_KEY!r} query parameter')

    # Some exporters put the base64 text into the query unescaped, so its '+'
    # arrives here as ' ' after form decoding.
    text = value.replace(' ', '+')
    try:
        raw = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise BadEncoding(f'payload is not valid base64: {e}') from e
    logger.debug('extracted %d payload byte(s)', len(raw))
    return raw


def decodeUri(uri):
    """Decode a migration URI into its list of `OtpRecord`."""
    raw = extract(uri)
    try:
        return codec.decode(raw)
    except DecodeError as e:
        raise PayloadError(e) from e


def decodeUriFile(path):
    """Decode every URI in a text file, one per line, records in file order."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            lines = f.readlines()
    except UnicodeDecodeError as e:
        raise UnparseableUri(f'{path} is not a UTF-8 text file: {e}') from e

    records = []
    for line in lines:
        uri = line.strip()
        if not uri:
            continue
        records.extend(decodeUri(uri))
    return records
