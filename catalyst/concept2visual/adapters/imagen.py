"""
Imagen adapters.

Two ways to reach the Imagen ``:predict`` endpoint:

- ImagenDirectAdapter calls Vertex AI with an API key held by the client.
- ImagenProxyAdapter calls the Catalyst image proxy, which holds the
  server-side credentials and relays the prediction payload unchanged.

Both return the raw prediction payload; extract_image_data_uri turns it into
a ``data:image/png;base64,...`` URI.
"""

from typing import Any, Dict, Optional

import jsonschema

from catalyst.brief2concept.prompts import build_image_prompt
from catalyst.concept2visual.adapters.base import ImageGenerationAdapter
from catalyst.core.config import get_config_value
from catalyst.core.constants import (
    DEFAULT_IMAGE_MODEL,
    DEFAULT_PROJECT_ID,
    DEFAULT_LOCATION,
    DEFAULT_PUBLISHER,
    DEFAULT_SAMPLE_COUNT,
    DEFAULT_MAX_RETRIES,
    DEFAULT_INITIAL_DELAY,
    GENERATE_IMAGE_ROUTE,
    IMAGE_DATA_URI_PREFIX,
    NO_IMAGE_DATA_MESSAGE
)
from catalyst.core.credentials import get_api_key
from catalyst.core.error_handler import ResponseFormatError, fetch_with_backoff
from catalyst.core.logging_config import get_logger, log_api_request, log_api_response
from catalyst.schemas import load_schema

# Initialize logger
logger = get_logger(__name__)

def build_predict_url(
    project_id: Optional[str] = None,
    location: Optional[str] = None,
    publisher: Optional[str] = None,
    model: Optional[str] = None
) -> str:
    """
    Build the Vertex AI ``:predict`` URL for an image model.

    Missing parts come from the ``image_generation`` config section.
    """
    project_id = project_id or get_config_value("image_generation.project_id", DEFAULT_PROJECT_ID)
    location = location or get_config_value("image_generation.location", DEFAULT_LOCATION)
    publisher = publisher or get_config_value("image_generation.publisher", DEFAULT_PUBLISHER)
    model = model or get_config_value("image_generation.model", DEFAULT_IMAGE_MODEL)

    return (
        f"https://{location}-aiplatform.googleapis.com/v1/projects/{project_id}"
        f"/locations/{location}/publishers/{publisher}/models/{model}:predict"
    )

def build_predict_payload(prompt: str, sample_count: Optional[int] = None) -> Dict[str, Any]:
    sample_count = (
        sample_count if sample_count is not None
        else get_config_value("image_generation.sample_count", DEFAULT_SAMPLE_COUNT)
    )
    return {"instances": [{"prompt": prompt}], "parameters": {"sampleCount": sample_count}}

def extract_image_data_uri(result: Any, schema: Optional[Dict[str, Any]] = None) -> str:
    """
    Turn a prediction payload into a PNG data URI.

    Args:
        result (Any): ``{"predictions": [{"bytesBase64Encoded": ...}]}``
        schema (Dict[str, Any], optional): Prediction schema; loaded from
            ``image_prediction_response`` when omitted

    Returns:
        str: ``data:image/png;base64,<payload>``

    Raises:
        ResponseFormatError: If the payload carries no image data
    """
    schema = schema or load_schema("image_prediction_response")

    try:
        jsonschema.validate(instance=result, schema=schema)
    except jsonschema.exceptions.ValidationError as e:
        logger.error(f"Unexpected image prediction response: {e.message}")
        raise ResponseFormatError(NO_IMAGE_DATA_MESSAGE)

    return f"{IMAGE_DATA_URI_PREFIX}{result['predictions'][0]['bytesBase64Encoded']}"


class _BackoffAdapter(ImageGenerationAdapter):
    """Shared retry settings for adapters that go through fetch_with_backoff."""

    def __init__(
        self,
        max_retries: Optional[int] = None,
        initial_delay: Optional[float] = None,
        timeout: Optional[float] = None
    ):
        self.max_retries = (
            max_retries if max_retries is not None
            else get_config_value("retry.max_retries", DEFAULT_MAX_RETRIES)
        )
        self.initial_delay = (
            initial_delay if initial_delay is not None
            else get_config_value("retry.initial_delay", DEFAULT_INITIAL_DELAY)
        )
        self.timeout = timeout if timeout is not None else get_config_value("retry.timeout")

    def _post(self, url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return fetch_with_backoff(
            url,
            {
                "method": "POST",
                "headers": {"Content-Type": "application/json"},
                "json": payload
            },
            max_retries=self.max_retries,
            initial_delay=self.initial_delay,
            timeout=self.timeout
        )


class ImagenDirectAdapter(_BackoffAdapter):
    """
    Calls the Imagen predict endpoint directly with a client-held API key.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        project_id: Optional[str] = None,
        location: Optional[str] = None,
        publisher: Optional[str] = None,
        model: Optional[str] = None,
        **retry_options
    ):
        """
        Initialize the adapter.

        Args:
            api_key (str, optional): Google AI API key. If not provided, will attempt to get from environment.
            project_id (str, optional): Google Cloud project hosting the model.
            location (str, optional): Vertex AI region.
            publisher (str, optional): Model publisher.
            model (str, optional): Imagen model name.
            **retry_options: max_retries, initial_delay and timeout.
        """
        super().__init__(**retry_options)
        self.api_key = api_key or get_api_key("imagen")
        self.model = model or get_config_value("image_generation.model", DEFAULT_IMAGE_MODEL)
        self.predict_url = build_predict_url(project_id, location, publisher, self.model)
        logger.info(f"Initialized {self.__class__.__name__} with model {self.model}")

    @property
    def endpoint(self) -> str:
        return f"{self.predict_url}?key={self.api_key}"

    def generate_image(self, prompt: str) -> Dict[str, Any]:
        payload = build_predict_payload(prompt)
        log_api_request(logger, "imagen", self.endpoint, {"model": self.model, "payload": payload})

        result = self._post(self.endpoint, payload)
        log_api_response(logger, "imagen", 200, result)
        return result

    def get_service_info(self) -> Dict[str, Any]:
        return {
            "name": "Imagen (direct)",
            "model": self.model,
            "endpoint": self.predict_url,
        }


class ImagenProxyAdapter(_BackoffAdapter):
    """
    Calls the Catalyst image proxy, which authenticates on our behalf.
    """

    def __init__(self, proxy_url: Optional[str] = None, **retry_options):
        """
        Initialize the adapter.

        Args:
            proxy_url (str, optional): Base URL of the proxy, e.g. http://localhost:3001
            **retry_options: max_retries, initial_delay and timeout.
        """
        super().__init__(**retry_options)
        proxy_url = proxy_url or get_config_value("image_generation.proxy_url")
        if not proxy_url:
            raise ValueError("A proxy URL is required for ImagenProxyAdapter")
        self.proxy_url = proxy_url.rstrip("/")
        logger.info(f"Initialized {self.__class__.__name__} with proxy {self.proxy_url}")

    @property
    def endpoint(self) -> str:
        return f"{self.proxy_url}{GENERATE_IMAGE_ROUTE}"

    def generate_image(self, prompt: str) -> Dict[str, Any]:
        log_api_request(logger, "image-proxy", self.endpoint, {"prompt": prompt})

        result = self._post(self.endpoint, {"prompt": prompt})
        log_api_response(logger, "image-proxy", 200, result)
        return result

    def get_service_info(self) -> Dict[str, Any]:
        return {
            "name": "Imagen (proxy)",
            "endpoint": self.endpoint,
        }


def create_image_adapter(api_key: Optional[str] = None, proxy_url: Optional[str] = None) -> ImageGenerationAdapter:
    """
    Pick the proxy adapter when a proxy URL is known, the direct one otherwise.

    Args:
        api_key (str, optional): Key for direct calls
        proxy_url (str, optional): Proxy base URL; falls back to config

    Returns:
        ImageGenerationAdapter: Adapter ready to use
    """
    proxy_url = proxy_url or get_config_value("image_generation.proxy_url")
    if proxy_url:
        return ImagenProxyAdapter(proxy_url=proxy_url)
    return ImagenDirectAdapter(api_key=api_key)

def visualize_concept_text(adapter: ImageGenerationAdapter, concept_text: str) -> str:
    """
    Generate a visual for one concept.

    Args:
        adapter (ImageGenerationAdapter): Image service to use
        concept_text (str): Concept headline and explanation

    Returns:
        str: PNG data URI
    """
    logger.info(f"Visualizing concept: {concept_text[:60]}")
    result = adapter.generate_image(build_image_prompt(concept_text))
    return extract_image_data_uri(result)
