import json
from unittest.mock import patch

import requests

from app.services.translation_service import MAX_TRANSCRIPT_CHARS, translate_transcript
from app.services.youtube_service import get_video_transcript


class TestTranscriptFetcher:

    def test_serializes_response_context(self, settings, make_response):
        context = {"visitorData": "xyz", "serviceTrackingParams": []}
        with patch("app.services.youtube_service.requests.get",
                   return_value=make_response(json_data={"responseContext": context})) as mock_get:
            transcript = get_video_transcript("abc123", settings)

        assert json.loads(transcript) == context
        assert mock_get.call_args.kwargs["params"] == {"videoId": "abc123"}
        assert mock_get.call_args.args[0].endswith("/get_transcript")

    def test_missing_field_returns_empty(self, settings, make_response):
        with patch("app.services.youtube_service.requests.get",
                   return_value=make_response(json_data={"other": 1})):
            assert get_video_transcript("abc123", settings) == ""

    def test_empty_response_context_is_kept(self, settings, make_response):
        with patch("app.services.youtube_service.requests.get",
                   return_value=make_response(json_data={"responseContext": {}})):
            assert get_video_transcript("abc123", settings) == "{}"

    def test_http_error_returns_empty(self, settings, make_response):
        with patch("app.services.youtube_service.requests.get",
                   return_value=make_response(status_code=404, json_data={})):
            assert get_video_transcript("abc123", settings) == ""

    def test_network_error_returns_empty(self, settings):
        with patch("app.services.youtube_service.requests.get",
                   side_effect=requests.ConnectionError("down")):
            assert get_video_transcript("abc123", settings) == ""


class TestTranslator:

    def test_empty_transcript_makes_no_call(self, settings):
        with patch("app.services.translation_service.requests.post") as mock_post:
            assert translate_transcript("", settings) == ""
        mock_post.assert_not_called()

    def test_request_shape_and_truncation(self, settings, make_response):
        completion = {"choices": [{"message": {"content": "Salut lume"}}]}
        transcript = "x" * (MAX_TRANSCRIPT_CHARS + 500)
        with patch("app.services.translation_service.requests.post",
                   return_value=make_response(json_data=completion)) as mock_post:
            assert translate_transcript(transcript, settings) == "Salut lume"

        kwargs = mock_post.call_args.kwargs
        payload = kwargs["json"]
        assert kwargs["headers"]["Authorization"] == "Bearer sk-test"
        assert payload["model"] == "gpt-3.5-turbo"
        assert payload["temperature"] == 0.7
        assert payload["max_tokens"] == 2000
        assert [m["role"] for m in payload["messages"]] == ["system", "user"]
        assert "Romanian" in payload["messages"][0]["content"]
        assert len(payload["messages"][1]["content"]) == MAX_TRANSCRIPT_CHARS

    def test_failure_returns_empty(self, settings):
        with patch("app.services.translation_service.requests.post",
                   side_effect=requests.ConnectionError("down")):
            assert translate_transcript("hello", settings) == ""

    def test_malformed_completion_returns_empty(self, settings, make_response):
        with patch("app.services.translation_service.requests.post",
                   return_value=make_response(json_data={"choices": []})):
            assert translate_transcript("hello", settings) == ""

    def test_missing_key_skips_call(self, settings):
        settings.translation_api_key = ""
        with patch("app.services.translation_service.requests.post") as mock_post:
            assert translate_transcript("hello", settings) == ""
        mock_post.assert_not_called()
