"""Tests for domain.processing_mode."""

import pytest

from domain import DirectMode, SplitMode, TrimMode, resolve_processing_mode
from exceptions import ProcessingModeRequiredError
from fakes import MIB

LIMIT = 25 * MIB


class TestResolveProcessingMode:
    def test_split_takes_precedence_over_trim(self):
        assert resolve_processing_mode(True, 15, 40 * MIB, LIMIT) == SplitMode()

    def test_trim_selected(self):
        assert resolve_processing_mode(False, 15, 28 * MIB, LIMIT) == TrimMode(minutes=15)

    def test_zero_trim_still_selects_trim_mode(self):
        assert resolve_processing_mode(False, 0, MIB, LIMIT) == TrimMode(minutes=0)

    def test_small_file_goes_direct(self):
        assert resolve_processing_mode(False, None, 10 * MIB, LIMIT) == DirectMode()

    def test_file_at_limit_goes_direct(self):
        assert resolve_processing_mode(False, None, LIMIT, LIMIT) == DirectMode()

    def test_oversized_file_without_flags_rejected(self):
        with pytest.raises(ProcessingModeRequiredError) as exc_info:
            resolve_processing_mode(False, None, LIMIT + 1, LIMIT)
        assert "splitAudio" in str(exc_info.value)
