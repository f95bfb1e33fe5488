"""
Credential management for API keys and bearer tokens.

This module provides functions for obtaining credentials at runtime:
- Loading API keys from environment variables (or a .env file)
- Prompting for a key when running interactively
- Obtaining short-lived Google Cloud bearer tokens for the image proxy

Credentials are only ever held by the running process. Nothing here writes
them to disk.
"""

import os
import getpass
from typing import List, Optional

import google.auth
import google.auth.exceptions
import google.auth.transport.requests
from dotenv import load_dotenv

from catalyst.core.constants import CLOUD_PLATFORM_SCOPE
from catalyst.core.error_handler import ConfigurationError, CredentialError
from catalyst.core.logging_config import get_logger

# Initialize logger
logger = get_logger(__name__)

# Load environment variables from .env file if it exists
load_dotenv()

# API name -> environment variables checked in order
API_KEY_ENV_VARS = {
    "gemini": ["GEMINI_API_KEY", "GOOGLE_API_KEY"],
    "imagen": ["IMAGEN_API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY"],
}

def get_credential(key: str, prompt: Optional[str] = None, required: bool = True) -> Optional[str]:
    """
    Get a credential from environment variables, prompting the user if not found.

    Args:
        key (str): Environment variable name
        prompt (str, optional): Prompt message for user input
        required (bool): Whether the credential is required

    Returns:
        Optional[str]: The credential value or None if not required and not found

    Raises:
        ConfigurationError: If credential is required but not found and not provided by user
    """
    value = os.environ.get(key)

    if not value and required:
        value = getpass.getpass(prompt or f"Please enter your {key}: ")

        if not value:
            raise ConfigurationError(f"Required credential {key} not provided", component="credentials")

        # Keep it for the rest of this process only
        os.environ[key] = value

    return value or None

def get_api_key(api_name: str, required: bool = True, interactive: bool = False) -> Optional[str]:
    """
    Get API key for a specific API.

    Args:
        api_name (str): API name ('gemini' or 'imagen')
        required (bool): Raise if no key can be found
        interactive (bool): Prompt on the terminal when the environment has no key

    Returns:
        Optional[str]: API key, or None when not required and not set

    Raises:
        ConfigurationError: If the API is unknown or a required key is missing
    """
    env_vars = API_KEY_ENV_VARS.get(api_name.lower())
    if not env_vars:
        raise ConfigurationError(f"Unknown API: {api_name}", component="credentials")

    for env_var in env_vars:
        value = os.environ.get(env_var)
        if value:
            logger.debug(f"Using {api_name} API key from {env_var}")
            return value

    if interactive:
        return get_credential(env_vars[0], prompt=f"Please enter your {api_name} API key: ", required=required)

    if required:
        raise ConfigurationError(
            f"{api_name} API key is required. Set the {env_vars[0]} environment variable.",
            component="credentials",
            missing_keys=env_vars
        )

    return None

def get_access_token(scopes: Optional[List[str]] = None) -> str:
    """
    Obtain a fresh OAuth2 bearer token from Application Default Credentials.

    Service-account files pointed to by GOOGLE_APPLICATION_CREDENTIALS,
    gcloud user credentials and metadata-server credentials are all handled
    by google-auth.

    Args:
        scopes (List[str], optional): OAuth scopes; defaults to cloud-platform

    Returns:
        str: Access token

    Raises:
        CredentialError: If no credentials are available or refreshing them fails
    """
    scopes = scopes or [CLOUD_PLATFORM_SCOPE]

    try:
        credentials, project_id = google.auth.default(scopes=scopes)
        credentials.refresh(google.auth.transport.requests.Request())
    except google.auth.exceptions.GoogleAuthError as e:
        logger.error(f"Failed to obtain Google Cloud access token: {str(e)}")
        raise CredentialError(str(e))

    if not credentials.token:
        raise CredentialError("Google Cloud credentials returned an empty access token")

    logger.debug(f"Obtained access token for project {project_id}")
    return credentials.token
