"""Pydantic request/response schemas for the FastAPI endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class ImageRequest(BaseModel):
    """A captured image as a base64 data URI or bare base64 string."""

    image: str = Field(..., min_length=1)


class TextRequest(BaseModel):
    """Text already recognized by an OCR engine."""

    text: str


class IDCardResponse(BaseModel):
    """Fields recognized on an ID card; unset fields are omitted."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    id_number: str | None = Field(default=None, alias="idNumber")
    address: str | None = None
    city: str | None = None


class PlateResponse(BaseModel):
    """Plate recognized on a vehicle image; omitted when not found."""

    model_config = ConfigDict(populate_by_name=True)

    plate_number: str | None = Field(default=None, alias="plateNumber")


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    tesseract_available: bool
