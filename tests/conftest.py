import base64
from types import SimpleNamespace

import pytest

from otpmigrate.schema import MigrationPayload, OtpParameters

# Known export of a single TOTP account, secret b'Hello!\xde\xad\xbe\xef'.
FIXTURE_URI = 'otpauth-migration://offline?data=CjEKCkhlbGxvId6tvu8SGEV4YW1wbGU6YWxpY2VAZ29vZ2xlLmNvbRoHRXhhbXBsZTAC'


def varint(value):
    out = bytearray()
    while True:
        b = value & 0x7F
        value >>= 7
        if value:
            out.append(b | 0x80)
        else:
            out.append(b)
            return bytes(out)


def encodeParameters(secret=b'Hello!\xde\xad\xbe\xef', name='', issuer='', algorithm=0, digits=0, type=0, counter=0):
    return OtpParameters(
        secret=secret, name=name, issuer=issuer, algorithm=algorithm,
        digits=digits, type=type, counter=counter,
    ).SerializeToString()


def wrapParameters(*encoded):
    """Concatenate serialized OtpParameters into a MigrationPayload body."""
    return b''.join(b'\x0a' + varint(len(e)) + e for e in encoded)


def encodePayload(accounts, **batch):
    payload = MigrationPayload(**batch)
    for acc in accounts:
        payload.otp_parameters.add(**acc)
    return payload.SerializeToString()


def migrationUri(data):
    return 'otpauth-migration://offline?data=' + base64.b64encode(data).decode()


@pytest.fixture
def fixtureUri():
    return FIXTURE_URI


@pytest.fixture
def pb():
    """Builders for hand-made migration payloads."""
    return SimpleNamespace(
        varint=varint,
        parameters=encodeParameters,
        wrap=wrapParameters,
        payload=encodePayload,
        uri=migrationUri,
    )
