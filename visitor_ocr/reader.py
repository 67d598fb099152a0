"""Public entry points: from a captured image to pre-filled form fields.

Each call decodes the image, runs OCR and hands the recognized text to the
matching extractor. Nothing here raises to the caller: any failure is
logged and turned into an empty result, leaving the form blank for manual
entry.
"""

import logging

from visitor_ocr.extraction.id_card import ExtractedIDData, IDCardExtractor
from visitor_ocr.extraction.plate import ExtractedPlateData, PlateExtractor
from visitor_ocr.ocr.image_loader import EncodedImage, load_image
from visitor_ocr.ocr.tesseract_engine import OCREngine, TesseractEngine
from visitor_ocr.preprocessing.pipeline import PreprocessingPipeline
from visitor_ocr.utils.config import AppConfig
from visitor_ocr.utils.logger import get_logger, resolve_logger

logger = get_logger(__name__)


class CaptureReader:
    """Runs OCR on captures and extracts ID-card or plate fields.

    Holds only immutable configuration and the engine, so one instance can
    serve concurrent requests.

    Args:
        config: Application configuration. Defaults to :class:`AppConfig`.
        engine: OCR engine. Defaults to a :class:`TesseractEngine` built
            from ``config.ocr``.
        log: Logger for diagnostics. Defaults to the module logger.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        engine: OCREngine | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self.engine = engine or TesseractEngine(
            tesseract_cmd=self.config.ocr.tesseract_cmd,
            default_lang=self.config.ocr.default_lang,
            psm=self.config.ocr.psm,
        )
        self.log = resolve_logger(log, logger)
        self.preprocessing = PreprocessingPipeline(self.config.preprocessing)
        self.id_extractor = IDCardExtractor(self.config.extraction, self.log)
        self.plate_extractor = PlateExtractor(self.config.extraction.plate, self.log)

    def recognize(self, image: EncodedImage) -> str:
        """Decode, preprocess and OCR one capture.

        Raises:
            ImageDecodeError: If the capture cannot be decoded.
        """
        pixels = self.preprocessing.process(load_image(image))
        text = self.engine.recognize(pixels, self.config.ocr.default_lang)
        self.log.debug("OCR text: %r", text)
        return text or ""

    def read_id_card(self, image: EncodedImage) -> ExtractedIDData:
        """Extract name and ID number from an ID-card capture."""
        try:
            return self.id_extractor.extract(self.recognize(image))
        except Exception as exc:
            self.log.error("ID card OCR failed: %s", exc, exc_info=True)
            return ExtractedIDData()

    def read_plate(self, image: EncodedImage) -> ExtractedPlateData:
        """Extract the plate number from a license-plate capture."""
        try:
            return self.plate_extractor.extract(self.recognize(image))
        except Exception as exc:
            self.log.error("License plate OCR failed: %s", exc, exc_info=True)
            return ExtractedPlateData()

    def read_id_card_text(self, text: str) -> ExtractedIDData:
        """Extract ID-card fields from text that was already recognized."""
        try:
            return self.id_extractor.extract(text)
        except Exception as exc:
            self.log.error("ID card extraction failed: %s", exc, exc_info=True)
            return ExtractedIDData()

    def read_plate_text(self, text: str) -> ExtractedPlateData:
        """Extract the plate number from text that was already recognized."""
        try:
            return self.plate_extractor.extract(text)
        except Exception as exc:
            self.log.error("License plate extraction failed: %s", exc, exc_info=True)
            return ExtractedPlateData()


def extract_id_card_text(
    image: EncodedImage,
    engine: OCREngine | None = None,
    config: AppConfig | None = None,
    log: logging.Logger | None = None,
) -> ExtractedIDData:
    """Extract a person's name and ID number from an ID-card image.

    Args:
        image: Data URI, base64 string, bytes, path or array of the capture.
        engine: OCR engine to use instead of Tesseract.
        config: Application configuration.
        log: Logger for diagnostics.

    Returns:
        Best-effort fields; empty on any failure.
    """
    return CaptureReader(config, engine, log).read_id_card(image)


def extract_license_plate(
    image: EncodedImage,
    engine: OCREngine | None = None,
    config: AppConfig | None = None,
    log: logging.Logger | None = None,
) -> ExtractedPlateData:
    """Extract the plate number from a license-plate image.

    Args:
        image: Data URI, base64 string, bytes, path or array of the capture.
        engine: OCR engine to use instead of Tesseract.
        config: Application configuration.
        log: Logger for diagnostics.

    Returns:
        Best-effort plate; empty on any failure.
    """
    return CaptureReader(config, engine, log).read_plate(image)
