"""QR code detectors.

A detector takes a luminance raster (2-D uint8 numpy array) and returns one
`Candidate` per QR grid it located. `Candidate.payload` holds the decoded
bytes, or None when a grid was found but could not be decoded.
"""
from collections import namedtuple
from typing import List, Protocol

import cv2
import numpy as np

from .config import qrBackend
from .errors import DetectorUnavailable

Candidate = namedtuple('Candidate', ['payload'])


class QrDetector(Protocol):
    name: str

    def detect(self, raster: np.ndarray) -> List[Candidate]:
        ...


class ZbarDetector:
    name = 'zbar'

    def detect(self, raster):
        # pyzbar loads libzbar lazily, on import or on the first decode
        try:
            from pyzbar.pyzbar import ZBarSymbol, decode
            found = decode(raster, symbols=[ZBarSymbol.QRCODE])
        except ImportError as e:
            raise DetectorUnavailable(f'zbar is not available ({e}), try --detector opencv') from e
        return [Candidate(qr.data or None) for qr in found]


class OpenCvDetector:
    name = 'opencv'

    def detect(self, raster):
        detector = cv2.QRCodeDetector()
        ok, texts, points, _ = detector.detectAndDecodeMulti(raster)
        if ok and points is not None:
            return [Candidate(t.encode('utf-8') if t else None) for t in texts]

        # Single fallback
        text, points, _ = detector.detectAndDecode(raster)
        if points is None:
            return []
        return [Candidate(text.encode('utf-8') if text else None)]


DETECTORS = {
    ZbarDetector.name: ZbarDetector,
    OpenCvDetector.name: OpenCvDetector,
}


def getDetector(name=None):
    """Detector by name, or the one configured by OTPMIGRATE_QR_BACKEND."""
    if name is None:
        name = qrBackend()
    try:
        return DETECTORS[name]()
    except KeyError:
        raise ValueError(f'unknown QR detector {name!r}, expected one of {sorted(DETECTORS)}') from None
