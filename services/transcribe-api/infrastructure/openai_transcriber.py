"""OpenAI implementation of the TranscriptionService interface."""

from openai import OpenAI
from speech_recap_common.logging import setup_logging

from domain.models import AudioAsset
from exceptions import TranscriptionError

from .interfaces import TranscriptionService

logger = setup_logging()


class OpenAITranscriber(TranscriptionService):
    """Handles audio transcription using the OpenAI audio API."""

    def __init__(self, client: OpenAI, model: str = "whisper-1"):
        self._client = client
        self._model = model

    def transcribe(self, asset: AudioAsset, language_code: str) -> str:
        """
        Transcribes one payload with OpenAI.

        The upload is sent from memory; the file name matters because the
        API infers the container format from its extension.
        """
        try:
            transcription = self._client.audio.transcriptions.create(
                file=(asset.name, asset.data, asset.media_type),
                model=self._model,
                language=language_code,
            )
        except Exception as e:
            logger.exception(
                "OpenAI transcription failed",
                extra={"file_name": asset.name, "size": asset.size},
            )
            raise TranscriptionError(asset.name, e) from e

        text = getattr(transcription, "text", None)
        if text is None:
            raise TranscriptionError(
                asset.name, Exception("Transcription returned no text")
            )

        logger.info(
            "Audio transcription successful",
            extra={"file_name": asset.name, "text_length": len(text)},
        )
        return text
