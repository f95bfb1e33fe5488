"""
Image proxy.

A small FastAPI application that accepts ``POST /generate-image`` with a
prompt, obtains a fresh bearer token from the server's Google Cloud
credentials, forwards the prompt to the Imagen ``:predict`` endpoint and
relays the prediction JSON. Clients never see a credential.
"""

import os
from typing import Callable, List, Optional

import requests
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from catalyst import __version__
from catalyst.concept2visual.adapters import build_predict_payload, build_predict_url
from catalyst.core.config import get_config_value
from catalyst.core.constants import (
    CLOUD_PLATFORM_SCOPE,
    DEFAULT_PROXY_HOST,
    DEFAULT_PROXY_PORT,
    GENERATE_IMAGE_ROUTE,
    MISSING_PROMPT_MESSAGE
)
from catalyst.core.credentials import get_access_token
from catalyst.core.error_handler import APIError, CredentialError, error_message, request_json
from catalyst.core.logging_config import get_logger, redact_url

logger = get_logger(__name__)

TokenProvider = Callable[[List[str]], str]


class GenerateImageRequest(BaseModel):
    prompt: Optional[str] = None


class ProxySettings(BaseModel):
    """Where the proxy sends prompts and how it authenticates."""

    predict_url: str
    scopes: List[str] = [CLOUD_PLATFORM_SCOPE]
    cors_origins: List[str] = ["*"]
    timeout: Optional[float] = None

    @classmethod
    def from_config(cls) -> "ProxySettings":
        return cls(
            predict_url=build_predict_url(),
            scopes=get_config_value("proxy.scopes", [CLOUD_PLATFORM_SCOPE]),
            cors_origins=get_config_value("proxy.cors_origins", ["*"]),
            timeout=get_config_value("retry.timeout"),
        )


def create_app(
    token_provider: TokenProvider = get_access_token,
    settings: Optional[ProxySettings] = None
) -> FastAPI:
    """
    Build the proxy application.

    Args:
        token_provider: Returns a bearer token for the given scopes. Called
            once per request, so no token is shared between requests.
        settings: Upstream endpoint and CORS settings; read from config when omitted.

    Returns:
        FastAPI: The application
    """
    settings = settings or ProxySettings.from_config()

    app = FastAPI(title="Catalyst image proxy", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        logger.warning(f"Rejected malformed body on {request.url.path}: {exc.errors()}")
        return JSONResponse({"error": MISSING_PROMPT_MESSAGE}, status_code=400)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.post(GENERATE_IMAGE_ROUTE)
    def generate_image(body: Optional[GenerateImageRequest] = None):
        """
        Forward a prompt to the image model and relay its prediction JSON.

        Returns 400 for a missing prompt (before any authentication) and 500
        with the upstream or credential message for every other failure.
        """
        if body is None or not body.prompt:
            return JSONResponse({"error": MISSING_PROMPT_MESSAGE}, status_code=400)

        try:
            access_token = token_provider(settings.scopes)
            return request_json(
                settings.predict_url,
                {
                    "method": "POST",
                    "headers": {
                        "Authorization": f"Bearer {access_token}",
                        "Content-Type": "application/json",
                    },
                    "json": build_predict_payload(body.prompt),
                },
                timeout=settings.timeout
            )
        except (APIError, CredentialError, requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"Error in {GENERATE_IMAGE_ROUTE}: {error_message(e)}")
            return JSONResponse({"error": error_message(e)}, status_code=500)

    logger.info(f"Image proxy forwarding to {redact_url(settings.predict_url)}")
    return app


def run_proxy(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """
    Serve the proxy with uvicorn.

    Args:
        host (str, optional): Interface to bind; defaults to config
        port (int, optional): Port to bind; defaults to config (3001)
    """
    host = host or get_config_value("proxy.host", DEFAULT_PROXY_HOST)
    port = port or get_config_value("proxy.port", DEFAULT_PROXY_PORT)

    logger.info(f"GOOGLE_APPLICATION_CREDENTIALS: {os.environ.get('GOOGLE_APPLICATION_CREDENTIALS')}")
    app = create_app()

    logger.info(f"Image proxy listening at http://{host}:{port}")
    uvicorn.run(app, host=host, port=port)
