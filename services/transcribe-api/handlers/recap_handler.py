"""Handler for turning an uploaded recording into a transcript and summary."""

from speech_recap_common.logging import setup_logging

from domain import (
    AudioAsset,
    PartPlanner,
    RecapRequest,
    RecapResult,
    SizeGuard,
    SplitMode,
    SummaryConfig,
    TrimMode,
    build_summary_prompt,
)
from domain.audio_workspace import AudioWorkspace
from domain.prefix_trimmer import PrefixTrimmer
from domain.segment_cutter import SegmentCutter
from domain.transcript_aggregator import TranscriptAggregator
from infrastructure.interfaces import DurationProber, LLMService

logger = setup_logging()

NO_SUMMARY = "No summary available"


class RecapHandler:
    """Orchestrates the direct, trim and split transcription paths."""

    def __init__(
        self,
        prober: DurationProber,
        planner: PartPlanner,
        cutter: SegmentCutter,
        size_guard: SizeGuard,
        aggregator: TranscriptAggregator,
        trimmer: PrefixTrimmer,
        llm: LLMService,
    ):
        self._prober = prober
        self._planner = planner
        self._cutter = cutter
        self._size_guard = size_guard
        self._aggregator = aggregator
        self._trimmer = trimmer
        self._llm = llm

    def process(self, request: RecapRequest) -> RecapResult:
        """
        Transcribes the request's audio along its resolved path and summarizes it.

        Args:
            request: Validated request with its processing mode.

        Returns:
            RecapResult with transcript, summary and key points.

        Raises:
            ProbeUnavailableError: If the duration cannot be inspected.
            ProbeFailedError: If the audio cannot be inspected.
            EncodeFailedError: If any re-encoding fails.
            SegmentTooLargeError: If an encoded part is above the ceiling.
            TranscriptionError: If any transcription call fails.
            SummarizationError: If the summary call fails.
        """
        mode = request.mode
        logger.info(
            "Processing recording",
            extra={
                "file_name": request.asset.name,
                "size": request.asset.size,
                "mode": mode.kind,
            },
        )

        if isinstance(mode, SplitMode):
            transcript = self._transcribe_split(request.asset, request.language)
        elif isinstance(mode, TrimMode):
            transcript = self._transcribe_trimmed(
                request.asset, request.language, mode.minutes
            )
        else:
            transcript = self._aggregator.transcribe_one(request.asset, request.language)

        summary = self._summarize(transcript, request.summary_config)

        logger.info(
            "Recording processed",
            extra={
                "file_name": request.asset.name,
                "mode": mode.kind,
                "transcript_length": len(transcript),
            },
        )
        return RecapResult(
            transcription=transcript,
            summary=summary.summary or NO_SUMMARY,
            key_points=list(summary.key_points),
        )

    def _transcribe_split(self, asset: AudioAsset, language: str) -> str:
        with AudioWorkspace(asset) as workspace:
            duration = self._prober.probe(workspace.source_path)
            part_count = self._planner.plan_parts(duration)
            segments = self._cutter.cut(workspace, duration, part_count)

        self._size_guard.verify(segments, part_count)
        return self._aggregator.transcribe_all(segments, language)

    def _transcribe_trimmed(self, asset: AudioAsset, language: str, minutes: int) -> str:
        with AudioWorkspace(asset) as workspace:
            trimmed = self._trimmer.trim(workspace, minutes)

        self._size_guard.verify([trimmed], 1)
        return self._aggregator.transcribe_one(trimmed, language)

    def _summarize(self, transcript: str, config: SummaryConfig):
        system_prompt = build_summary_prompt(config)
        return self._llm.summarize(transcript, system_prompt)
