"""Tests for domain.prompt_builder."""

import pytest

from domain import SummaryConfig, build_summary_prompt
from domain.prompt_builder import SUMMARY_LENGTH_INSTRUCTIONS


class TestBuildSummaryPrompt:
    @pytest.mark.parametrize("length", list(SUMMARY_LENGTH_INSTRUCTIONS))
    def test_each_length_uses_its_table_entry(self, length):
        prompt = build_summary_prompt(SummaryConfig(summary_length=length))
        assert SUMMARY_LENGTH_INSTRUCTIONS[length] in prompt

    def test_brief_asks_for_three_points(self):
        prompt = build_summary_prompt(SummaryConfig(summary_length="brief"))
        assert "2-3 sentences" in prompt
        assert "3 most important key points" in prompt

    def test_same_language_mirrors_transcript(self):
        prompt = build_summary_prompt(SummaryConfig())
        assert "same language as the transcription" in prompt
        assert "IMPORTANT" not in prompt

    def test_explicit_language_is_pinned(self):
        prompt = build_summary_prompt(SummaryConfig(output_language="Spanish"))
        assert "in Spanish." in prompt
        assert "same language as the transcription" not in prompt

    def test_context_appended_verbatim(self):
        context = "Weekly sync of the data team.\nAttendees: Ana, Bo."
        prompt = build_summary_prompt(SummaryConfig(context=context))
        assert f"Additional Context:\n{context}" in prompt

    def test_no_context_section_without_context(self):
        assert "Additional Context" not in build_summary_prompt(SummaryConfig())

    def test_describes_json_fields(self):
        prompt = build_summary_prompt(SummaryConfig())
        assert '"summary"' in prompt
        assert '"key_points"' in prompt
