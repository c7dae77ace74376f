"""Transcription endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from speech_recap_common.logging import setup_logging

from config import AppConfig
from dependencies import get_config, get_handler, get_size_guard
from domain import (
    AudioAsset,
    RecapRequest,
    SizeGuard,
    SummaryConfig,
    resolve_processing_mode,
)
from domain.models import SummaryLength, base_file_name
from domain.upload_estimator import (
    estimate_duration_minutes,
    format_file_size,
    is_over_limit,
)
from exceptions import (
    EncodeFailedError,
    MissingInputError,
    ProbeFailedError,
    ProbeUnavailableError,
    ProcessingModeRequiredError,
    ProviderCallFailedError,
    SegmentTooLargeError,
)
from handlers import RecapHandler
from response_models import (
    ErrorResponse,
    EstimateRequest,
    EstimateResponse,
    LimitsResponse,
    TranscribeResponse,
)

logger = setup_logging()

router = APIRouter(prefix="/api/transcribe", tags=["transcribe"])

HandlerDep = Annotated[RecapHandler, Depends(get_handler)]
SizeGuardDep = Annotated[SizeGuard, Depends(get_size_guard)]
ConfigDep = Annotated[AppConfig, Depends(get_config)]

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post("", response_model=TranscribeResponse, responses=ERROR_RESPONSES)
def transcribe(
    handler: HandlerDep,
    size_guard: SizeGuardDep,
    file: UploadFile | None = File(None),
    language: str | None = Form(None),
    context: str | None = Form(None),
    summary_length: SummaryLength = Form("moderate", alias="summaryLength"),
    output_language: str = Form("same", alias="outputLanguage"),
    trim_duration: int | None = Form(None, alias="trimDuration"),
    split_audio: bool = Form(False, alias="splitAudio"),
) -> TranscribeResponse:
    """
    Transcribes an uploaded recording and summarizes it.

    Recordings above the provider limit need either ``splitAudio`` for a
    complete transcript or ``trimDuration`` for the first N minutes.
    """
    try:
        if file is None:
            raise MissingInputError("file")
        if not language or not language.strip():
            raise MissingInputError("language")

        asset = AudioAsset(
            data=file.file.read(),
            name=base_file_name(file.filename or ""),
            media_type=file.content_type or "application/octet-stream",
        )
        mode = resolve_processing_mode(
            split_audio, trim_duration, asset.size, size_guard.limit
        )
    except (MissingInputError, ProcessingModeRequiredError) as e:
        logger.warning("Rejected transcription request", extra={"reason": str(e)})
        raise HTTPException(status_code=400, detail=str(e))

    request = RecapRequest(
        asset=asset,
        language=language,
        summary_config=SummaryConfig(
            context=context.strip() if context and context.strip() else None,
            summary_length=summary_length,
            output_language=output_language or "same",
        ),
        mode=mode,
    )

    try:
        result = handler.process(request)
    except SegmentTooLargeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (
        ProbeUnavailableError,
        ProbeFailedError,
        EncodeFailedError,
        ProviderCallFailedError,
    ) as e:
        raise HTTPException(status_code=500, detail=str(e))
    except Exception:
        logger.exception("Transcription request failed", extra={"file_name": asset.name})
        raise HTTPException(status_code=500, detail="Failed to transcribe audio")

    return TranscribeResponse(
        transcription=result.transcription,
        summary=result.summary,
        key_points=result.key_points,
    )


@router.get("/limits", response_model=LimitsResponse)
def get_limits(config: ConfigDep) -> LimitsResponse:
    """Returns the upload ceiling and segmentation constants."""
    return LimitsResponse(
        size_ceiling_bytes=config.pipeline.size_ceiling_bytes,
        max_minutes_per_part=config.pipeline.max_minutes_per_part,
        min_parts=config.pipeline.min_parts,
        bitrate=config.ffmpeg.audio_bitrate,
    )


@router.post(
    "/estimate",
    response_model=EstimateResponse,
    responses={400: {"model": ErrorResponse}},
)
def estimate(body: EstimateRequest, size_guard: SizeGuardDep) -> EstimateResponse:
    """Estimates duration and limit status from a file's name and size."""
    return EstimateResponse(
        estimated_minutes=estimate_duration_minutes(body.file_size, body.file_name),
        formatted_size=format_file_size(body.file_size),
        over_limit=is_over_limit(body.file_size, size_guard.limit),
    )
