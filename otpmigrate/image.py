"""Read a migration export from a photographed or screenshotted QR code."""
import logging

import numpy as np
from PIL import Image

from .detectors import getDetector
from .errors import AmbiguousImage, CorruptQr, QrNotFound, UnreadableImage
from .extractor import decodeUri

logger = logging.getLogger(__name__)


def loadRaster(source):
    """Open an image path or binary file object as a luminance numpy array."""
    try:
        with Image.open(source) as img:
            return np.array(img.convert('L'))
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise UnreadableImage(f'cannot read image: {e}') from e


def readQrText(raster, detector=None):
    """Text of the single QR code in `raster`.

    More than one code is refused rather than guessing which was meant.
    """
    if detector is None:
        detector = getDetector()
    candidates = detector.detect(raster)
    logger.debug('%s detector found %d QR code(s)', getattr(detector, 'name', detector), len(candidates))
    if not candidates:
        raise QrNotFound('no QR code found in image')
    if len(candidates) > 1:
        raise AmbiguousImage(len(candidates))

    payload = candidates[0].payload
    if payload is None:
        raise CorruptQr('QR code found but could not be decoded')
    try:
        return payload.decode('utf-8')
    except UnicodeDecodeError as e:
        raise CorruptQr(f'QR code content is not text: {e}') from e


def fromImage(source, detector=None):
    """Decode the migration QR code in an image into a list of `OtpRecord`."""
    return decodeUri(readQrText(loadRaster(source), detector))
