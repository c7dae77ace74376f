"""Selection of the processing path for an upload."""

from domain.models import DirectMode, ProcessingMode, SplitMode, TrimMode
from exceptions import ProcessingModeRequiredError


def resolve_processing_mode(
    split_audio: bool,
    trim_duration: int | None,
    asset_size: int,
    limit_bytes: int,
) -> ProcessingMode:
    """
    Resolves the request flags into exactly one processing mode.

    Split wins over trim when both are set. Without either flag the upload
    goes straight to the provider, which is only allowed when it already
    fits under the ceiling.

    Raises:
        ProcessingModeRequiredError: If an oversized upload selects neither
            split nor trim.
    """
    if split_audio:
        return SplitMode()
    if trim_duration is not None:
        return TrimMode(minutes=trim_duration)
    if asset_size > limit_bytes:
        raise ProcessingModeRequiredError(asset_size, limit_bytes)
    return DirectMode()
