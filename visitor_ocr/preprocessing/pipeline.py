"""Configurable preprocessing applied to a capture before OCR."""

import numpy as np

from visitor_ocr.utils.config import PreprocessingConfig
from visitor_ocr.utils.logger import get_logger

from .filters import apply_clahe, binarize, denoise, to_gray, upscale

logger = get_logger(__name__)


class PreprocessingPipeline:
    """Grayscale, upscale, denoise, contrast and binarize steps in that order.

    Args:
        config: Preprocessing configuration controlling which steps to apply.
    """

    def __init__(self, config: PreprocessingConfig) -> None:
        self.config = config

    def process(self, image: np.ndarray) -> np.ndarray:
        """Run the enabled steps on a capture.

        Args:
            image: Decoded capture (RGB, RGBA or grayscale).

        Returns:
            Processed grayscale image, or the input unchanged when disabled.
        """
        if not self.config.enabled:
            return image

        result = to_gray(image)
        result = upscale(result, self.config.upscale_min_height)

        if self.config.denoise_enabled:
            result = denoise(result, method=self.config.denoise_method)

        if self.config.contrast_enabled:
            result = apply_clahe(
                result,
                clip_limit=self.config.clahe_clip_limit,
                tile_size=self.config.clahe_tile_size,
            )

        if self.config.binarize_enabled:
            result = binarize(result, method=self.config.binarize_method)

        logger.debug("Preprocessed capture to shape %s", result.shape)
        return result
