"""FastAPI application exposing ID-card and license-plate extraction.

The registration forms post a captured image and pre-fill whatever comes
back. Extraction failures are not HTTP errors: they produce an empty
object so the operator simply types the fields in.
"""

import shutil
from functools import lru_cache

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from visitor_ocr import __version__
from visitor_ocr.reader import CaptureReader
from visitor_ocr.utils.config import load_config
from visitor_ocr.utils.logger import get_logger

from .schemas import (
    HealthResponse,
    IDCardResponse,
    ImageRequest,
    PlateResponse,
    TextRequest,
)

logger = get_logger(__name__)

app = FastAPI(
    title="Visitor OCR API",
    description="Extract names, ID numbers and plate numbers from captures",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_reader() -> CaptureReader:
    """Build the shared reader from configs/config.yaml on first use."""
    return CaptureReader(load_config())


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Return service health status."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        tesseract_available=shutil.which("tesseract") is not None,
    )


@app.post(
    "/extract/id-card",
    response_model=IDCardResponse,
    response_model_exclude_none=True,
)
def extract_id_card(request: ImageRequest) -> IDCardResponse:
    """Extract name and ID number from an ID-card capture."""
    result = get_reader().read_id_card(request.image)
    logger.info("ID card extraction returned fields %s", sorted(result.as_dict()))
    return IDCardResponse(**result.as_dict())


@app.post(
    "/extract/plate",
    response_model=PlateResponse,
    response_model_exclude_none=True,
)
def extract_plate(request: ImageRequest) -> PlateResponse:
    """Extract the plate number from a license-plate capture."""
    result = get_reader().read_plate(request.image)
    logger.info("Plate extraction returned %s", result.plate_number)
    return PlateResponse(**result.as_dict())


@app.post(
    "/extract/text/id-card",
    response_model=IDCardResponse,
    response_model_exclude_none=True,
)
def extract_id_card_from_text(request: TextRequest) -> IDCardResponse:
    """Run the ID-card heuristics over already recognized text."""
    return IDCardResponse(**get_reader().read_id_card_text(request.text).as_dict())


@app.post(
    "/extract/text/plate",
    response_model=PlateResponse,
    response_model_exclude_none=True,
)
def extract_plate_from_text(request: TextRequest) -> PlateResponse:
    """Run the plate heuristics over already recognized text."""
    return PlateResponse(**get_reader().read_plate_text(request.text).as_dict())
