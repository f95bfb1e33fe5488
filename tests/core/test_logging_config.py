"""
Tests for logging helpers.
"""

import logging

from catalyst.core.logging_config import (
    configure_logging,
    redact_sensitive_data,
    redact_url,
    truncate_for_logging
)


def test_redact_url_masks_key_parameter():
    url = "https://example.com/models/m:generateContent?key=abc123&alt=json"

    assert redact_url(url) == "https://example.com/models/m:generateContent?key=********&alt=json"
    assert redact_url("https://example.com/predict") == "https://example.com/predict"


def test_redact_sensitive_data_is_recursive():
    data = {"api_key": "secret", "headers": {"Authorization": "Bearer tok"}, "model": "m"}

    redacted = redact_sensitive_data(data)

    assert redacted["api_key"] == "********"
    assert redacted["headers"]["Authorization"] == "********"
    assert redacted["model"] == "m"
    assert data["api_key"] == "secret"


def test_truncate_for_logging_hides_image_payloads():
    data = {"predictions": [{"bytesBase64Encoded": "A" * 5000}], "uri": "data:image/png;base64," + "B" * 500}

    truncated = truncate_for_logging(data)

    assert len(truncated["predictions"][0]["bytesBase64Encoded"]) < 300
    assert truncated["uri"] == "data:image/png;base64,<base64_data_truncated>"


def test_configure_logging_sets_level_and_file(tmp_path):
    log_file = tmp_path / "logs" / "catalyst.log"

    configure_logging(level="WARNING", log_file=str(log_file), log_to_file=True)
    logging.getLogger("catalyst.test").warning("written")

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert log_file.exists()

    configure_logging(level="INFO", log_to_file=False)
