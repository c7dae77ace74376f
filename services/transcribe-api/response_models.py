"""Request and response models for the transcribe API."""

from pydantic import BaseModel, ConfigDict, Field


class TranscribeResponse(BaseModel):
    """Transcript and summary returned for an uploaded recording."""

    model_config = ConfigDict(populate_by_name=True)

    transcription: str
    summary: str
    key_points: list[str] = Field(alias="keyPoints")


class ErrorResponse(BaseModel):
    """Body of every failed request."""

    error: str


class LimitsResponse(BaseModel):
    """Upload and segmentation limits the client should respect."""

    model_config = ConfigDict(populate_by_name=True)

    size_ceiling_bytes: int = Field(alias="sizeCeilingBytes")
    max_minutes_per_part: int = Field(alias="maxMinutesPerPart")
    min_parts: int = Field(alias="minParts")
    bitrate: str


class EstimateRequest(BaseModel):
    """File metadata known to the client before upload."""

    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(alias="fileName", min_length=1)
    file_size: int = Field(alias="fileSize", ge=0)


class EstimateResponse(BaseModel):
    """Size-based estimate for a file about to be uploaded."""

    model_config = ConfigDict(populate_by_name=True)

    estimated_minutes: int = Field(alias="estimatedMinutes")
    formatted_size: str = Field(alias="formattedSize")
    over_limit: bool = Field(alias="overLimit")
