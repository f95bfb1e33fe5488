"""
Text-generation client for the Gemini generateContent API.

This module provides a client that sends the concept prompt to a generative-text
endpoint and turns the reply into Concept entries.
"""

from typing import Any, Dict, List, Optional

import jsonschema

from catalyst.brief2concept.models import Concept
from catalyst.brief2concept.parser import parse_concepts
from catalyst.brief2concept.prompts import build_concept_prompt
from catalyst.core.config import get_config_value
from catalyst.core.constants import (
    DEFAULT_TEXT_MODEL,
    TEXT_API_BASE,
    DEFAULT_NUM_CONCEPTS,
    DEFAULT_MAX_RETRIES,
    DEFAULT_INITIAL_DELAY,
    INVALID_TEXT_RESPONSE_MESSAGE
)
from catalyst.core.credentials import get_api_key
from catalyst.core.error_handler import ResponseFormatError, fetch_with_backoff
from catalyst.core.logging_config import get_logger, log_api_request, log_api_response
from catalyst.schemas import load_schema

# Initialize logger
logger = get_logger(__name__)

class GeminiTextClient:
    """
    Client for the Gemini generateContent endpoint.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        api_base: Optional[str] = None,
        max_retries: Optional[int] = None,
        initial_delay: Optional[float] = None,
        timeout: Optional[float] = None
    ):
        """
        Initialize the text client.

        Args:
            api_key (str, optional): Google AI API key. If not provided, will attempt to get from environment.
            model (str, optional): Model to use. If not provided, will use the default from config.
            api_base (str, optional): API base URL. If not provided, will use the default from config.
            max_retries (int, optional): Attempts per request before giving up.
            initial_delay (float, optional): First backoff delay in seconds.
            timeout (float, optional): Socket timeout in seconds.
        """
        self.api_key = api_key or get_api_key("gemini")
        self.model = model or get_config_value("text_generation.model", DEFAULT_TEXT_MODEL)
        self.api_base = (api_base or get_config_value("text_generation.api_base", TEXT_API_BASE)).rstrip("/")
        self.max_retries = (
            max_retries if max_retries is not None
            else get_config_value("retry.max_retries", DEFAULT_MAX_RETRIES)
        )
        self.initial_delay = (
            initial_delay if initial_delay is not None
            else get_config_value("retry.initial_delay", DEFAULT_INITIAL_DELAY)
        )
        self.timeout = timeout if timeout is not None else get_config_value("retry.timeout")
        self.response_schema = load_schema("text_generation_response")

        logger.info(f"Initialized {self.__class__.__name__} with model {self.model}")

    @property
    def endpoint(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent?key={self.api_key}"

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        return {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

    def generate_text(self, prompt: str) -> str:
        """
        Send a prompt and return the first candidate's text.

        Args:
            prompt (str): Prompt text

        Returns:
            str: Generated text

        Raises:
            ResponseFormatError: If the response has no candidate text
            APIError: If the request fails after all retries
        """
        payload = self.build_payload(prompt)
        log_api_request(logger, "gemini", self.endpoint, {"model": self.model, "payload": payload})

        result = fetch_with_backoff(
            self.endpoint,
            {
                "method": "POST",
                "headers": {"Content-Type": "application/json"},
                "json": payload
            },
            max_retries=self.max_retries,
            initial_delay=self.initial_delay,
            timeout=self.timeout
        )
        log_api_response(logger, "gemini", 200, result)

        return self.extract_text(result)

    def extract_text(self, result: Any) -> str:
        """
        Pull ``candidates[0].content.parts[0].text`` out of a response.

        Raises:
            ResponseFormatError: If the response does not have that shape
        """
        try:
            jsonschema.validate(instance=result, schema=self.response_schema)
        except jsonschema.exceptions.ValidationError as e:
            logger.error(f"Unexpected text generation response: {e.message}")
            raise ResponseFormatError(INVALID_TEXT_RESPONSE_MESSAGE, response=result)

        return result["candidates"][0]["content"]["parts"][0]["text"]

    def generate_concepts(
        self,
        brief: str,
        creativity: float,
        num_concepts: Optional[int] = None
    ) -> List[Concept]:
        """
        Generate campaign concepts for a creative brief.

        Args:
            brief (str): Creative brief text
            creativity (float): Creativity in [0, 1]
            num_concepts (int, optional): Number of concepts to ask for

        Returns:
            List[Concept]: Parsed concepts, in the order the model listed them
        """
        num_concepts = (
            num_concepts if num_concepts is not None
            else get_config_value("text_generation.num_concepts", DEFAULT_NUM_CONCEPTS)
        )
        logger.info(f"Generating {num_concepts} concepts at creativity {creativity}")

        prompt = build_concept_prompt(brief, creativity, num_concepts)
        return parse_concepts(self.generate_text(prompt))
