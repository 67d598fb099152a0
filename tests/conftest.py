"""Shared test fixtures for the visitor OCR test suite."""

import base64
import io
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

ID_CARD_TEXT = """REPUBLIC OF EXAMPLAND
IDENTITY CARD
John Michael Smith
A1B2C3D4E5
DOB: 12/05/1990
12/05/1990
SEX: M
Signature
"""


class FakeOCREngine:
    """OCR engine stand-in that returns canned text or raises."""

    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[tuple[tuple[int, ...], str | None]] = []

    def recognize(self, image: np.ndarray, lang: str | None = None) -> str:
        self.calls.append((image.shape, lang))
        if self.error is not None:
            raise self.error
        return self.text


def encode_png(image: np.ndarray) -> bytes:
    """Encode a numpy image as PNG bytes."""
    buf = io.BytesIO()
    Image.fromarray(image).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def fake_engine() -> type[FakeOCREngine]:
    """Return the fake engine class so tests can pick the canned text."""
    return FakeOCREngine


@pytest.fixture
def id_card_text() -> str:
    """OCR text of an ID card with the usual boilerplate around the data."""
    return ID_CARD_TEXT


@pytest.fixture
def sample_color_image() -> np.ndarray:
    """Create a small synthetic RGB capture."""
    image = np.zeros((100, 200, 3), dtype=np.uint8)
    image[30:70, 40:160] = (255, 255, 255)
    return image


@pytest.fixture
def sample_gray_image() -> np.ndarray:
    """Create a small synthetic grayscale capture."""
    image = np.full((100, 200), 40, dtype=np.uint8)
    image[30:70, 40:160] = 220
    return image


@pytest.fixture
def sample_png_bytes(sample_color_image: np.ndarray) -> bytes:
    """PNG encoding of the sample capture."""
    return encode_png(sample_color_image)


@pytest.fixture
def sample_data_uri(sample_png_bytes: bytes) -> str:
    """The sample capture as a browser-style base64 data URI."""
    encoded = base64.b64encode(sample_png_bytes).decode("ascii")
    return f"data:image/png;base64,{encoded}"


@pytest.fixture
def sample_png_file(tmp_path: Path, sample_png_bytes: bytes) -> Path:
    """The sample capture written to a PNG file."""
    path = tmp_path / "capture.png"
    path.write_bytes(sample_png_bytes)
    return path
