"""
Tests for the Gemini text client.
"""

import pytest
from unittest.mock import patch

from catalyst.brief2concept.text_client import GeminiTextClient
from catalyst.core.constants import INVALID_TEXT_RESPONSE_MESSAGE
from catalyst.core.error_handler import APIError, ConfigurationError, ResponseFormatError, ValidationError


def text_response(text):
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


class TestGeminiTextClient:
    """
    Tests for the GeminiTextClient class.
    """

    @pytest.fixture
    def client(self):
        return GeminiTextClient(
            api_key="test-key",
            model="gemini-test",
            api_base="https://generativelanguage.example.com/v1beta/",
            max_retries=3,
            initial_delay=0.5,
            timeout=10
        )

    def test_endpoint(self, client):
        assert client.endpoint == (
            "https://generativelanguage.example.com/v1beta/models/gemini-test:generateContent?key=test-key"
        )

    @patch("catalyst.brief2concept.text_client.fetch_with_backoff")
    def test_generate_text(self, mock_fetch, client):
        mock_fetch.return_value = text_response("hello")

        assert client.generate_text("prompt") == "hello"

        args, kwargs = mock_fetch.call_args
        assert args[0] == client.endpoint
        assert args[1]["method"] == "POST"
        assert args[1]["json"] == {"contents": [{"role": "user", "parts": [{"text": "prompt"}]}]}
        assert kwargs == {"max_retries": 3, "initial_delay": 0.5, "timeout": 10}

    @patch("catalyst.brief2concept.text_client.fetch_with_backoff")
    def test_generate_concepts(self, mock_fetch, client):
        mock_fetch.return_value = text_response("1. Alpha\n2. Beta\n3. ")

        concepts = client.generate_concepts("Launch a water brand.", 0.7, num_concepts=3)

        assert [c.text for c in concepts] == ["Alpha", "Beta"]
        prompt = mock_fetch.call_args[0][1]["json"]["contents"][0]["parts"][0]["text"]
        assert "Launch a water brand." in prompt
        assert "generate 3 distinct campaign concepts" in prompt

    @pytest.mark.parametrize("response", [
        {},
        {"candidates": []},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"finishReason": "SAFETY"}]},
        {"candidates": [{"content": {"parts": [{"text": ""}]}}]}
    ])
    @patch("catalyst.brief2concept.text_client.fetch_with_backoff")
    def test_invalid_response_structure(self, mock_fetch, response, client):
        mock_fetch.return_value = response

        with pytest.raises(ResponseFormatError) as exc_info:
            client.generate_text("prompt")

        assert exc_info.value.message == INVALID_TEXT_RESPONSE_MESSAGE

    @patch("catalyst.brief2concept.text_client.fetch_with_backoff")
    def test_api_error_propagates(self, mock_fetch, client):
        mock_fetch.side_effect = APIError("API key not valid.", status_code=400)

        with pytest.raises(APIError) as exc_info:
            client.generate_concepts("Brief", 0.5)

        assert exc_info.value.message == "API key not valid."

    def test_missing_api_key(self, monkeypatch):
        for var in ["GEMINI_API_KEY", "GOOGLE_API_KEY"]:
            monkeypatch.delenv(var, raising=False)

        with pytest.raises(ConfigurationError) as exc_info:
            GeminiTextClient()

        assert "API key is required" in str(exc_info.value)

    @patch("catalyst.brief2concept.text_client.fetch_with_backoff")
    def test_explicit_zero_delay_is_kept(self, mock_fetch):
        mock_fetch.return_value = text_response("1. Alpha")
        client = GeminiTextClient(api_key="test-key", initial_delay=0, timeout=0)

        client.generate_text("prompt")

        assert client.initial_delay == 0
        assert mock_fetch.call_args[1]["initial_delay"] == 0
        assert mock_fetch.call_args[1]["timeout"] == 0

    @patch("catalyst.brief2concept.text_client.fetch_with_backoff")
    def test_zero_concepts_is_rejected_not_replaced(self, mock_fetch, client):
        with pytest.raises(ValidationError):
            client.generate_concepts("Brief", 0.5, num_concepts=0)

        mock_fetch.assert_not_called()
