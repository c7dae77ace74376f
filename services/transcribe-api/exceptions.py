"""Custom exceptions for the transcribe-api service."""

BYTES_PER_MB = 1024 * 1024


class MissingInputError(Exception):
    """Raised when a required request field is absent."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"No {field_name} provided")


class ProcessingModeRequiredError(Exception):
    """Raised when an oversized upload arrives without split or trim selected."""

    def __init__(self, actual_size: int, limit: int):
        self.actual_size = actual_size
        self.limit = limit
        super().__init__(
            f"File is {actual_size / BYTES_PER_MB:.2f}MB, above the "
            f"{limit / BYTES_PER_MB:.0f}MB limit. Enable splitAudio or set "
            "trimDuration to process it."
        )


class ProbeUnavailableError(Exception):
    """Raised when the media inspection backend cannot be run."""

    def __init__(self, binary_path: str, cause: Exception | None = None):
        self.binary_path = binary_path
        self.cause = cause
        super().__init__(
            f"Could not determine audio duration: ffprobe is not available "
            f"at '{binary_path}'. Try the trim option instead."
        )


class ProbeFailedError(Exception):
    """Raised when the media inspection backend rejects the audio file."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        super().__init__(
            f"Could not determine duration of '{file_name}'. The file may be "
            "corrupt or in an unsupported format. Try the trim option instead."
        )


class EncodeFailedError(Exception):
    """Raised when transcoding an audio window fails."""

    def __init__(self, index: int, cause: Exception | None = None):
        self.index = index
        self.cause = cause
        super().__init__(f"Failed to encode audio part {index + 1}")


class SegmentTooLargeError(Exception):
    """Raised when an encoded segment is still above the upload ceiling."""

    def __init__(self, index: int, actual_size: int, limit: int, part_count: int):
        self.index = index
        self.actual_size = actual_size
        self.limit = limit
        self.part_count = part_count
        super().__init__(
            f"Split failed: Part {index + 1}: "
            f"{actual_size / BYTES_PER_MB:.2f}MB exceeds "
            f"{limit / BYTES_PER_MB:.0f}MB limit. "
            f"File may require more than {part_count} parts."
        )


class ProviderCallFailedError(Exception):
    """Base class for failures of the transcription or summarization provider."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class TranscriptionError(ProviderCallFailedError):
    """Raised when audio transcription fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        super().__init__(f"Failed to transcribe audio file '{file_name}'", cause)


class SummarizationError(ProviderCallFailedError):
    """Raised when the summarization call fails."""


class TranscoderError(Exception):
    """Raised when the transcoder process fails to produce an output file."""

    def __init__(self, output_name: str, cause: Exception | None = None):
        self.output_name = output_name
        self.cause = cause
        super().__init__(f"Transcoder failed to produce '{output_name}'")
