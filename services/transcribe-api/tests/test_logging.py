"""Tests for speech_recap_common.logging."""

import json
import logging

from speech_recap_common.logging import build_formatter


def _record(message="Part created", **extra):
    record = logging.LogRecord(
        name="domain.segment_cutter",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestBuildFormatter:
    def test_record_rendered_as_json_with_service(self):
        line = build_formatter("transcribe-api").format(_record(part=2, size_mb=7.5))
        payload = json.loads(line)

        assert payload["service"] == "transcribe-api"
        assert payload["level"] == "INFO"
        assert payload["name"] == "domain.segment_cutter"
        assert payload["message"] == "Part created"
        assert payload["part"] == 2
        assert payload["size_mb"] == 7.5
        assert "timestamp" in payload
        assert "levelname" not in payload

    def test_default_service_name(self):
        payload = json.loads(build_formatter().format(_record()))
        assert payload["service"] == "speech-recap"
