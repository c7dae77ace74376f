"""Tests for routes.transcribe via FastAPI's TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from dependencies import get_handler, get_size_guard
from domain import SizeGuard
from error_handlers import register_error_handlers
from exceptions import (
    EncodeFailedError,
    ProbeFailedError,
    SegmentTooLargeError,
    TranscriptionError,
)
from fakes import FakeProber
from routes import transcribe_router

LIMIT = 1000


@pytest.fixture
def app(handler):
    app = FastAPI()
    register_error_handlers(app)
    app.include_router(transcribe_router)
    app.dependency_overrides[get_handler] = lambda: handler
    app.dependency_overrides[get_size_guard] = lambda: SizeGuard(limit_bytes=LIMIT)
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


def _upload(size=100, name="talk.mp3"):
    return {"file": (name, b"\x02" * size, "audio/mpeg")}


class TestTranscribeEndpoint:
    def test_direct_success(self, client, transcriber):
        transcriber.responses = {"talk.mp3": "hello world"}

        response = client.post(
            "/api/transcribe", files=_upload(), data={"language": "english"}
        )

        assert response.status_code == 200
        assert response.json() == {
            "transcription": "hello world",
            "summary": "A summary",
            "keyPoints": ["one", "two"],
        }

    def test_split_mode(self, client, transcriber):
        response = client.post(
            "/api/transcribe",
            files=_upload(size=5000),
            data={"language": "french", "splitAudio": "true", "trimDuration": "10"},
        )

        assert response.status_code == 200
        assert [name for name, _ in transcriber.calls] == [
            "part1.mp3",
            "part2.mp3",
            "part3.mp3",
        ]
        assert all(code == "fr" for _, code in transcriber.calls)
        assert response.json()["transcription"] == (
            "fragment-part1.mp3 fragment-part2.mp3 fragment-part3.mp3"
        )

    def test_trim_mode(self, client, transcoder, transcriber):
        response = client.post(
            "/api/transcribe",
            files=_upload(size=5000),
            data={"language": "english", "trimDuration": "15"},
        )

        assert response.status_code == 200
        assert transcoder.calls[0]["duration"] == 900
        assert transcriber.calls == [("trimmed-talk.mp3", "en")]

    def test_trim_mode_with_folder_upload_name(self, client, transcoder, transcriber):
        response = client.post(
            "/api/transcribe",
            files=_upload(size=5000, name="recordings/talk.m4a"),
            data={"language": "english", "trimDuration": "15"},
        )

        assert response.status_code == 200
        assert transcoder.calls[0]["output"].name == "trimmed-talk.mp3"
        assert transcriber.calls == [("trimmed-talk.mp3", "en")]

    def test_direct_upload_name_drops_folder(self, client, transcriber):
        response = client.post(
            "/api/transcribe",
            files=_upload(name="recordings/talk.mp3"),
            data={"language": "english"},
        )

        assert response.status_code == 200
        assert transcriber.calls == [("talk.mp3", "en")]

    def test_summary_options_forwarded(self, client, llm):
        client.post(
            "/api/transcribe",
            files=_upload(),
            data={
                "language": "english",
                "summaryLength": "extensive",
                "outputLanguage": "Italian",
                "context": "Board meeting",
            },
        )

        prompt = llm.calls[0][1]
        assert "15+ sentences" in prompt
        assert "in Italian." in prompt
        assert "Board meeting" in prompt

    def test_missing_file(self, client):
        response = client.post("/api/transcribe", data={"language": "english"})
        assert response.status_code == 400
        assert response.json() == {"error": "No file provided"}

    def test_missing_language(self, client, transcriber):
        response = client.post("/api/transcribe", files=_upload())
        assert response.status_code == 400
        assert response.json() == {"error": "No language provided"}
        assert transcriber.calls == []

    def test_invalid_summary_length(self, client):
        response = client.post(
            "/api/transcribe",
            files=_upload(),
            data={"language": "english", "summaryLength": "novel"},
        )
        assert response.status_code == 400
        assert "summaryLength" in response.json()["error"]

    def test_oversized_without_flags_rejected(self, client, transcriber):
        response = client.post(
            "/api/transcribe", files=_upload(size=LIMIT + 1), data={"language": "english"}
        )
        assert response.status_code == 400
        assert "splitAudio" in response.json()["error"]
        assert transcriber.calls == []


class TestTranscribeErrors:
    @pytest.fixture
    def failing_client(self, app):
        def _make(error):
            class _FailingHandler:
                def process(self, request):
                    raise error

            app.dependency_overrides[get_handler] = lambda: _FailingHandler()
            return TestClient(app)

        return _make

    @pytest.mark.parametrize(
        "error,status",
        [
            (SegmentTooLargeError(1, 2000, LIMIT, 3), 400),
            (ProbeFailedError("source.m4a"), 500),
            (EncodeFailedError(0), 500),
            (TranscriptionError("part1.mp3"), 500),
            (RuntimeError("unexpected"), 500),
        ],
    )
    def test_status_mapping(self, failing_client, error, status):
        response = failing_client(error).post(
            "/api/transcribe", files=_upload(), data={"language": "english"}
        )
        assert response.status_code == status
        assert "error" in response.json()

    def test_segment_too_large_message(self, failing_client):
        response = failing_client(SegmentTooLargeError(1, 2000, LIMIT, 3)).post(
            "/api/transcribe",
            files=_upload(),
            data={"language": "english", "splitAudio": "true"},
        )
        assert "Part 2" in response.json()["error"]
        assert "more than 3 parts" in response.json()["error"]


class TestProbeFailure:
    @pytest.fixture
    def prober(self):
        return FakeProber(error=ProbeFailedError("source.mp3"))

    def test_returns_500_without_transcription_calls(self, client, transcriber):
        response = client.post(
            "/api/transcribe",
            files=_upload(size=5000),
            data={"language": "english", "splitAudio": "true"},
        )

        assert response.status_code == 500
        assert "trim" in response.json()["error"]
        assert transcriber.calls == []


class TestAuxiliaryEndpoints:
    def test_limits(self, client):
        response = client.get("/api/transcribe/limits")
        assert response.status_code == 200
        body = response.json()
        assert body["sizeCeilingBytes"] == 25 * 1024 * 1024
        assert body["maxMinutesPerPart"] == 24
        assert body["minParts"] == 2
        assert body["bitrate"] == "128k"

    def test_estimate(self, client):
        response = client.post(
            "/api/transcribe/estimate",
            json={"fileName": "talk.mp3", "fileSize": 960_000 * 40},
        )
        assert response.status_code == 200
        assert response.json() == {
            "estimatedMinutes": 40,
            "formattedSize": "36.6 MB",
            "overLimit": True,
        }

    def test_estimate_rejects_negative_size(self, client):
        response = client.post(
            "/api/transcribe/estimate", json={"fileName": "talk.mp3", "fileSize": -1}
        )
        assert response.status_code == 400

    def test_error_body_documented(self, app):
        schema = TestClient(app).get("/openapi.json").json()
        responses = schema["paths"]["/api/transcribe"]["post"]["responses"]

        for status in ("400", "500"):
            ref = responses[status]["content"]["application/json"]["schema"]["$ref"]
            assert ref.endswith("/ErrorResponse")
        assert schema["components"]["schemas"]["ErrorResponse"]["required"] == ["error"]
