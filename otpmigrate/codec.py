"""Decode a raw migration payload into OTP records.

The payload is a serialized `MigrationPayload` (see `otpmigrate.schema`).
Unknown fields are skipped by the protobuf runtime according to their
wire-type, so newer exports with extra fields still decode.
"""
import base64
import logging

from google.protobuf.message import DecodeError as ProtobufDecodeError

from .errors import EmptyPayload, MalformedPayload
from .records import Algorithm, DigitCount, MigrationBatch, OtpRecord, OtpType
from .schema import MigrationPayload

logger = logging.getLogger(__name__)


def encodeSecret(raw):
    """Base32 text for a raw secret, padding removed."""
    return base64.b32encode(raw).decode('ascii').rstrip('=')


def _enumValue(enumType, value, field, index):
    try:
        return enumType(value)
    except ValueError:
        # no default substitution: a value outside the schema fails the batch
        raise MalformedPayload(f'otp_parameters[{index}]: unknown {field} value {value}') from None


def _toRecord(params, index):
    if not params.secret:
        raise MalformedPayload(f'otp_parameters[{index}]: empty secret')
    otpType = _enumValue(OtpType, params.type, 'type', index)
    return OtpRecord(
        name=params.name,
        issuer=params.issuer,
        secret=encodeSecret(params.secret),
        algorithm=_enumValue(Algorithm, params.algorithm, 'algorithm', index),
        digits=_enumValue(DigitCount, params.digits, 'digits', index),
        otpType=otpType,
        counter=params.counter if otpType == OtpType.HOTP else None,
    )


def parsePayload(data):
    """Parse bytes into a `MigrationPayload` message, raising `MalformedPayload`."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise MalformedPayload(f'expected bytes, got {type(data).__name__}')
    try:
        return MigrationPayload.FromString(bytes(data))
    except (ProtobufDecodeError, UnicodeDecodeError) as e:
        # the pure-python runtime reports bad UTF-8 as UnicodeDecodeError
        raise MalformedPayload(f'invalid migration payload: {e}') from e


def decodeBatch(data):
    payload = parsePayload(data)
    if not payload.otp_parameters:
        raise EmptyPayload('migration payload holds no accounts')
    records = tuple(_toRecord(p, i) for i, p in enumerate(payload.otp_parameters))
    logger.debug('decoded %d record(s), batch %d/%d (id %d)',
                 len(records), payload.batch_index + 1, payload.batch_size, payload.batch_id)
    return MigrationBatch(
        records=records,
        version=payload.version,
        batchSize=payload.batch_size,
        batchIndex=payload.batch_index,
        batchId=payload.batch_id,
    )


def decode(data):
    """Decode a migration payload into a list of `OtpRecord`, in payload order.

    Raises `MalformedPayload` for truncated or garbled input, bad UTF-8, an
    empty secret or an enum value outside the known set, and `EmptyPayload`
    when the payload carries no accounts.
    """
    return list(decodeBatch(data).records)
