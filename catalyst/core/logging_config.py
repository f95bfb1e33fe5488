"""
Logging configuration for the Catalyst package.

This module provides logging configuration for the Catalyst package:
- Configurable log levels
- File and console logging
- Log rotation
- Redaction of credentials and image payloads before they reach a log
"""

import os
import re
import sys
import logging
import logging.handlers
from typing import Dict, Any, Optional

SENSITIVE_KEYS = [
    "api_key", "key", "secret", "password", "token", "auth", "credential",
    "client_id", "client_secret", "access_token", "refresh_token"
]

_KEY_PARAM_PATTERN = re.compile(r"([?&]key=)[^&]+")

def configure_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    log_format: Optional[str] = None,
    log_to_console: bool = True,
    log_to_file: Optional[bool] = None,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5
) -> None:
    """
    Configure global logging settings.

    Args:
        level (str, optional): Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file (str, optional): Path to log file
        log_format (str, optional): Log message format
        log_to_console (bool): Whether to log to console
        log_to_file (bool, optional): Whether to log to file
        max_bytes (int): Maximum log file size before rotation
        backup_count (int): Number of backup log files to keep
    """
    from catalyst.core.config import get_config_value

    if level is None:
        level = get_config_value("logging.level", "INFO")

    if log_file is None:
        log_file = get_config_value("logging.file", "catalyst.log")

    if log_to_file is None:
        log_to_file = get_config_value("logging.to_file", False)

    if log_format is None:
        log_format = get_config_value(
            "logging.format",
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    root_logger = logging.getLogger()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL
    }
    root_logger.setLevel(level_map.get(level.upper(), logging.INFO))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(log_format)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_to_file and log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name (str): Logger name

    Returns:
        logging.Logger: Logger instance
    """
    return logging.getLogger(name)

def log_api_request(logger: logging.Logger, api_name: str, endpoint: str, params: Dict[str, Any]) -> None:
    """
    Log API request information.

    Args:
        logger (logging.Logger): Logger instance
        api_name (str): API name
        endpoint (str): API endpoint
        params (Dict[str, Any]): Request parameters; sensitive values are redacted
    """
    redacted_params = truncate_for_logging(redact_sensitive_data(params))

    logger.info(f"API Request to {api_name} - {redact_url(endpoint)}")
    for key, value in redacted_params.items():
        logger.debug(f"  {key}: {value}")

def log_api_response(logger: logging.Logger, api_name: str, status_code: int, response_data: Any) -> None:
    """
    Log API response information.

    Args:
        logger (logging.Logger): Logger instance
        api_name (str): API name
        status_code (int): Response status code
        response_data (Any): Response data
    """
    logger.info(f"API Response from {api_name} - Status: {status_code}")

    if isinstance(response_data, dict):
        for key, value in truncate_for_logging(response_data).items():
            logger.debug(f"  {key}: {value}")

def redact_sensitive_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Redact sensitive information from data.

    Args:
        data (Dict[str, Any]): Data to redact

    Returns:
        Dict[str, Any]: Redacted copy of the data
    """
    redacted = data.copy()

    for key, value in redacted.items():
        if any(sensitive_key in key.lower() for sensitive_key in SENSITIVE_KEYS):
            redacted[key] = "********"
        elif isinstance(value, dict):
            redacted[key] = redact_sensitive_data(value)

    return redacted

def redact_url(url: str) -> str:
    """
    Mask the value of a ``key`` query parameter in a URL.

    Args:
        url (str): URL that may carry an API key

    Returns:
        str: The URL with the key replaced by asterisks
    """
    return _KEY_PARAM_PATTERN.sub(r"\1********", url)

def truncate_for_logging(data: Any, max_str_length: int = 200) -> Any:
    """
    Recursively shorten long strings (base64 image payloads in particular).

    Args:
        data (Any): Data structure to truncate
        max_str_length (int): Longest string kept as-is

    Returns:
        Any: A truncated copy of the data
    """
    if isinstance(data, dict):
        return {key: truncate_for_logging(value, max_str_length) for key, value in data.items()}
    if isinstance(data, list):
        return [truncate_for_logging(item, max_str_length) for item in data]
    if isinstance(data, str) and len(data) > max_str_length:
        if data.startswith("data:image"):
            return data.split(",", 1)[0] + ",<base64_data_truncated>"
        return f"{data[:max_str_length]}...<{len(data) - max_str_length} more chars>"
    return data
