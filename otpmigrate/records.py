from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple


class Algorithm(IntEnum):
    UNSPECIFIED = 0
    SHA1 = 1
    SHA256 = 2
    SHA512 = 3
    MD5 = 4


class DigitCount(IntEnum):
    UNSPECIFIED = 0
    SIX = 1
    EIGHT = 2
    SEVEN = 3


class OtpType(IntEnum):
    UNSPECIFIED = 0
    HOTP = 1
    TOTP = 2


@dataclass(frozen=True)
class OtpRecord:
    """One account carried by a migration export.

    `secret` is base32 without padding. `counter` is only set for HOTP.
    """
    name: str
    issuer: str
    secret: str
    algorithm: Algorithm = Algorithm.UNSPECIFIED
    digits: DigitCount = DigitCount.UNSPECIFIED
    otpType: OtpType = OtpType.UNSPECIFIED
    counter: Optional[int] = None


@dataclass(frozen=True)
class MigrationBatch:
    records: Tuple[OtpRecord, ...]
    version: int = 0
    batchSize: int = 0
    batchIndex: int = 0
    batchId: int = 0
