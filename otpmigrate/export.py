"""Turn decoded records into forms other authenticators can import."""
import hashlib
import json

import pyotp

from .errors import ExportError
from .records import Algorithm, DigitCount, OtpRecord, OtpType

# Unspecified values follow what authenticator apps assume.
DIGESTS = {
    Algorithm.UNSPECIFIED: hashlib.sha1,
    Algorithm.SHA1: hashlib.sha1,
    Algorithm.SHA256: hashlib.sha256,
    Algorithm.SHA512: hashlib.sha512,
}

DIGITS = {
    DigitCount.UNSPECIFIED: 6,
    DigitCount.SIX: 6,
    DigitCount.SEVEN: 7,
    DigitCount.EIGHT: 8,
}


def accountName(record):
    """Name without a leading 'issuer:' that matches the record's issuer."""
    prefix = record.issuer + ':'
    if record.issuer and record.name.startswith(prefix):
        return record.name[len(prefix):]
    return record.name


def toOtpauthUri(record):
    """Standard otpauth:// key URI for a record."""
    digest = DIGESTS.get(record.algorithm)
    if digest is None:
        raise ExportError(f'{record.name}: {record.algorithm.name} is not supported by otpauth URIs')
    digits = DIGITS[record.digits]
    issuer = record.issuer or None

    if record.otpType == OtpType.HOTP:
        otp = pyotp.HOTP(record.secret, digits=digits, digest=digest,
                         name=accountName(record), issuer=issuer, initial_count=record.counter or 0)
    else:
        otp = pyotp.TOTP(record.secret, digits=digits, digest=digest,
                         name=accountName(record), issuer=issuer)
    return otp.provisioning_uri()


def toDict(record):
    return {
        'name': record.name,
        'issuer': record.issuer,
        'secret': record.secret,
        'algorithm': record.algorithm.name,
        'digits': record.digits.name,
        'type': record.otpType.name,
        'counter': record.counter,
    }


def fromDict(data):
    try:
        return OtpRecord(
            name=data['name'],
            issuer=data['issuer'],
            secret=data['secret'],
            algorithm=Algorithm[data['algorithm']],
            digits=DigitCount[data['digits']],
            otpType=OtpType[data['type']],
            counter=data.get('counter'),
        )
    except (KeyError, TypeError) as e:
        raise ExportError(f'not an OTP record: {e}') from e


def toJson(records):
    return json.dumps([toDict(r) for r in records], indent=2)
