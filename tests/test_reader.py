"""Tests for the public image-to-fields entry points."""

import logging

import numpy as np
import pytest

from visitor_ocr.reader import (
    CaptureReader,
    extract_id_card_text,
    extract_license_plate,
)
from visitor_ocr.utils.config import AppConfig, PreprocessingConfig


class TestExtractIDCardText:
    """Tests for extract_id_card_text."""

    def test_extracts_fields(
        self, fake_engine: type, sample_data_uri: str, id_card_text: str
    ) -> None:
        engine = fake_engine(id_card_text)
        result = extract_id_card_text(sample_data_uri, engine=engine)
        assert result.as_dict() == {
            "name": "John Michael Smith",
            "idNumber": "A1B2C3D4E5",
        }

    def test_passes_language_hint(
        self, fake_engine: type, sample_data_uri: str
    ) -> None:
        engine = fake_engine("")
        extract_id_card_text(sample_data_uri, engine=engine)
        assert engine.calls[0][1] == "eng"

    def test_empty_ocr_text(self, fake_engine: type, sample_data_uri: str) -> None:
        result = extract_id_card_text(sample_data_uri, engine=fake_engine(""))
        assert result.as_dict() == {}

    def test_engine_failure_returns_empty(
        self,
        fake_engine: type,
        sample_data_uri: str,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        engine = fake_engine(error=RuntimeError("tesseract crashed"))
        with caplog.at_level(logging.ERROR):
            result = extract_id_card_text(sample_data_uri, engine=engine)
        assert result.as_dict() == {}
        assert "tesseract crashed" in caplog.text

    def test_undecodable_image_returns_empty(self, fake_engine: type) -> None:
        engine = fake_engine("John Michael Smith")
        result = extract_id_card_text("not-an-image", engine=engine)
        assert result.as_dict() == {}
        assert engine.calls == []

    def test_garbage_bytes_return_empty(self, fake_engine: type) -> None:
        result = extract_id_card_text(b"garbage", engine=fake_engine("x"))
        assert result.as_dict() == {}

    def test_injected_logger_receives_errors(
        self, fake_engine: type, caplog: pytest.LogCaptureFixture
    ) -> None:
        log = logging.getLogger("test.reader")
        with caplog.at_level(logging.ERROR, logger="test.reader"):
            extract_id_card_text(b"", engine=fake_engine(), log=log)
        assert any(r.name == "test.reader" for r in caplog.records)


class TestExtractLicensePlate:
    """Tests for extract_license_plate."""

    def test_extracts_plate(self, fake_engine: type, sample_data_uri: str) -> None:
        result = extract_license_plate(sample_data_uri, engine=fake_engine("ABC 1234"))
        assert result.as_dict() == {"plateNumber": "ABC1234"}

    def test_accepts_file_path(self, fake_engine: type, sample_png_file) -> None:
        result = extract_license_plate(sample_png_file, engine=fake_engine("XY-99"))
        assert result.plate_number == "XY-99"

    def test_engine_failure_returns_empty(
        self, fake_engine: type, sample_data_uri: str
    ) -> None:
        engine = fake_engine(error=OSError("engine missing"))
        assert extract_license_plate(sample_data_uri, engine=engine).as_dict() == {}

    def test_empty_payload_returns_empty(self, fake_engine: type) -> None:
        assert extract_license_plate("", engine=fake_engine("ABC 1234")).as_dict() == {}


class TestCaptureReader:
    """Tests for CaptureReader configuration handling."""

    def test_preprocessing_applied_by_default(
        self, fake_engine: type, sample_color_image: np.ndarray
    ) -> None:
        engine = fake_engine("")
        CaptureReader(engine=engine).read_plate(sample_color_image)
        shape = engine.calls[0][0]
        assert len(shape) == 2
        assert shape[0] >= 400

    def test_preprocessing_disabled(
        self, fake_engine: type, sample_color_image: np.ndarray
    ) -> None:
        config = AppConfig(preprocessing=PreprocessingConfig(enabled=False))
        engine = fake_engine("")
        CaptureReader(config, engine).read_id_card(sample_color_image)
        assert engine.calls[0][0] == sample_color_image.shape

    def test_read_text_entry_points(self, fake_engine: type, id_card_text: str) -> None:
        reader = CaptureReader(engine=fake_engine())
        assert reader.read_id_card_text(id_card_text).name == "John Michael Smith"
        assert reader.read_plate_text("ABC 1234").plate_number == "ABC1234"
        assert reader.read_plate_text("").as_dict() == {}

    def test_repeated_calls_identical(
        self, fake_engine: type, sample_data_uri: str, id_card_text: str
    ) -> None:
        reader = CaptureReader(engine=fake_engine(id_card_text))
        assert reader.read_id_card(sample_data_uri) == reader.read_id_card(
            sample_data_uri
        )
