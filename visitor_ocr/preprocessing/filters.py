"""OpenCV filters that make camera captures easier for Tesseract to read.

ID cards and plates are photographed by a webcam, so the images are small,
unevenly lit and noisy compared with scanned documents.
"""

import cv2
import numpy as np

from visitor_ocr.utils.logger import get_logger

logger = get_logger(__name__)


def to_gray(image: np.ndarray) -> np.ndarray:
    """Convert an RGB or RGBA capture to grayscale; grayscale passes through."""
    if image.ndim == 2:
        return image
    if image.shape[2] == 4:
        return cv2.cvtColor(image, cv2.COLOR_RGBA2GRAY)
    return cv2.cvtColor(image, cv2.COLOR_RGB2GRAY)


def upscale(image: np.ndarray, min_height: int) -> np.ndarray:
    """Enlarge small captures so glyphs are tall enough for Tesseract.

    Args:
        image: Input image.
        min_height: Target minimum height in pixels; ``0`` disables scaling.

    Returns:
        The image, resized with cubic interpolation if it was too small.
    """
    height = image.shape[0]
    if min_height <= 0 or height >= min_height:
        return image
    factor = min_height / height
    logger.debug("Upscaling capture by %.2f", factor)
    return cv2.resize(image, None, fx=factor, fy=factor, interpolation=cv2.INTER_CUBIC)


def denoise(image: np.ndarray, method: str = "bilateral") -> np.ndarray:
    """Reduce sensor noise while keeping character edges.

    Raises:
        ValueError: If an unsupported method is specified.
    """
    if method == "gaussian":
        return cv2.GaussianBlur(image, (5, 5), 0)
    if method == "bilateral":
        return cv2.bilateralFilter(image, 9, 75, 75)
    raise ValueError(f"Unsupported denoise method: {method}")


def apply_clahe(
    image: np.ndarray, clip_limit: float = 2.0, tile_size: int = 8
) -> np.ndarray:
    """Even out lighting with CLAHE on a grayscale image."""
    clahe = cv2.createCLAHE(clipLimit=clip_limit, tileGridSize=(tile_size, tile_size))
    return clahe.apply(to_gray(image))


def binarize(image: np.ndarray, method: str = "otsu") -> np.ndarray:
    """Threshold a grayscale image to black text on white.

    Raises:
        ValueError: If an unsupported method is specified.
    """
    gray = to_gray(image)
    if method == "otsu":
        _, binary = cv2.threshold(gray, 0, 255, cv2.THRESH_BINARY + cv2.THRESH_OTSU)
        return binary
    if method == "adaptive":
        return cv2.adaptiveThreshold(
            gray, 255, cv2.ADAPTIVE_THRESH_GAUSSIAN_C, cv2.THRESH_BINARY, 11, 2
        )
    raise ValueError(f"Unsupported binarize method: {method}")
