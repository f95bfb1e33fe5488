"""
Core utilities and configuration for the Catalyst package.
"""

from catalyst.core.config import get_config, get_config_value
from catalyst.core.credentials import get_api_key, get_access_token
from catalyst.core.logging_config import get_logger, configure_logging
from catalyst.core.error_handler import (
    APIError,
    RateLimitError,
    ResponseFormatError,
    ValidationError,
    RequestInFlightError,
    ConfigurationError,
    CredentialError,
    fetch_with_backoff,
    request_json
)
