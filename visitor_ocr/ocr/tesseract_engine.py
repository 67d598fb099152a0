"""Tesseract OCR engine wrapper.

The extraction pipeline only needs the recognized text of an image, so the
engine exposes a single ``recognize`` call. Any object with the same method
can stand in for it (see :class:`OCREngine`).
"""

from typing import Protocol

import numpy as np
import pytesseract
from PIL import Image

from visitor_ocr.utils.logger import get_logger

logger = get_logger(__name__)


class OCREngine(Protocol):
    """Anything that turns image pixels into text."""

    def recognize(self, image: np.ndarray, lang: str | None = None) -> str:
        ...


class TesseractEngine:
    """Wrapper around Tesseract for ID-card and plate text recognition.

    Args:
        tesseract_cmd: Path to the Tesseract executable.
            If ``None``, uses the system default.
        default_lang: Default OCR language code.
        psm: Tesseract page segmentation mode.
    """

    def __init__(
        self,
        tesseract_cmd: str | None = None,
        default_lang: str = "eng",
        psm: int = 3,
    ) -> None:
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        self.default_lang = default_lang
        self.psm = psm

    def recognize(self, image: np.ndarray, lang: str | None = None) -> str:
        """Recognize the text of an image.

        Args:
            image: Input image as a numpy array.
            lang: OCR language code. Defaults to the engine default.

        Returns:
            Raw recognized text; empty when nothing was recognized.
        """
        lang = lang or self.default_lang
        pil_image = Image.fromarray(image)
        text = pytesseract.image_to_string(
            pil_image, lang=lang, config=f"--psm {self.psm}"
        )
        logger.info(
            "OCR recognized %d characters (lang=%s, psm=%d)",
            len(text),
            lang,
            self.psm,
        )
        return text or ""
