"""Decoding of captured images into numpy arrays.

Camera captures arrive as ``data:image/...;base64,`` URIs. Raw bytes, bare
base64 strings, file paths and already decoded arrays are accepted too.
"""

import base64
import binascii
import io
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from visitor_ocr.utils.logger import get_logger

logger = get_logger(__name__)

EncodedImage = str | bytes | Path | np.ndarray

_DATA_URI_PREFIX = "data:"
_IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".bmp", ".tif", ".tiff", ".webp"}


class ImageDecodeError(ValueError):
    """Raised when an encoded image cannot be turned into pixels."""


def decode_data_uri(data: str) -> bytes:
    """Decode a base64 data URI, or a bare base64 string, into bytes.

    Args:
        data: ``data:image/png;base64,...`` or plain base64 text.

    Returns:
        The decoded binary payload.

    Raises:
        ImageDecodeError: If the payload is not valid base64.
    """
    payload = data.strip()
    if payload.startswith(_DATA_URI_PREFIX):
        header, _, payload = payload.partition(",")
        if ";base64" not in header:
            raise ImageDecodeError("Only base64 data URIs are supported")
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ImageDecodeError(f"Invalid base64 image payload: {exc}") from exc


def _looks_like_path(source: str) -> bool:
    if source.startswith(_DATA_URI_PREFIX) or len(source) > 1024:
        return False
    return Path(source).suffix.lower() in _IMAGE_SUFFIXES


def load_image(source: EncodedImage) -> np.ndarray:
    """Load an image as an RGB or grayscale numpy array.

    Args:
        source: Data URI, base64 string, raw bytes, file path or array.

    Returns:
        Image pixels as a ``uint8`` array.

    Raises:
        ImageDecodeError: If the source is empty or not a readable image.
    """
    if isinstance(source, np.ndarray):
        if source.size == 0:
            raise ImageDecodeError("Empty image array")
        return source

    if isinstance(source, str) and _looks_like_path(source):
        source = Path(source)

    if isinstance(source, Path):
        if not source.exists():
            raise ImageDecodeError(f"Image file not found: {source}")
        raw = source.read_bytes()
    elif isinstance(source, str):
        raw = decode_data_uri(source)
    else:
        raw = source

    if not raw:
        raise ImageDecodeError("Empty image payload")

    try:
        img = Image.open(io.BytesIO(raw))
        img.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageDecodeError(f"Unreadable image: {exc}") from exc

    if img.mode not in ("L", "RGB"):
        img = img.convert("RGB")
    logger.debug("Decoded image %dx%d mode=%s", img.width, img.height, img.mode)
    return np.array(img)
