"""
Session controller.

The controller owns the current SessionState and runs the two user actions,
"generate ideas" and "visualize", against the text client and the image
adapter. Each action takes its request slot for the whole round trip, so at
most one request of each kind is ever in flight, whatever the UI does with
its buttons.
"""

import threading
from contextlib import contextmanager
from typing import Iterator, Optional

import requests

from catalyst.brief2concept.text_client import GeminiTextClient
from catalyst.concept2visual.adapters import ImageGenerationAdapter, visualize_concept_text
from catalyst.core.constants import MISSING_API_KEY_MESSAGE, MISSING_BRIEF_MESSAGE
from catalyst.core.error_handler import (
    APIError,
    CredentialError,
    RequestInFlightError,
    ValidationError,
    error_message
)
from catalyst.core.logging_config import get_logger
from catalyst.session import state as transitions
from catalyst.session.state import SessionState

logger = get_logger(__name__)

# Failures of a generation round trip that end up in SessionState.error
ACTION_ERRORS = (
    APIError,
    ValidationError,
    CredentialError,
    requests.exceptions.RequestException,
    ValueError,
)

MISSING_IMAGE_SERVICE_MESSAGE = "An API key or image proxy is required to generate images."


class RequestSlot:
    """
    A single slot for one outstanding request.

    Taking a busy slot fails immediately instead of queueing.
    """

    def __init__(self, name: str):
        self.name = name
        self._lock = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    @contextmanager
    def hold(self) -> Iterator[None]:
        if not self._lock.acquire(blocking=False):
            raise RequestInFlightError(f"A {self.name} request is already in progress.", field=self.name)
        try:
            yield
        finally:
            self._lock.release()


class SessionController:
    """
    Runs user actions and keeps the resulting session state.
    """

    def __init__(
        self,
        text_client: Optional[GeminiTextClient] = None,
        image_adapter: Optional[ImageGenerationAdapter] = None,
        state: Optional[SessionState] = None
    ):
        """
        Initialize the controller.

        Args:
            text_client: Client used to generate concepts. Without one,
                generating ideas reports a missing API key.
            image_adapter: Image service used to visualize concepts.
            state: Initial state; defaults to a fresh session.
        """
        self.text_client = text_client
        self.image_adapter = image_adapter
        self.state = state or SessionState()
        self.ideas_slot = RequestSlot("ideas")
        self.image_slot = RequestSlot("image")

    def update_brief(self, brief: str) -> SessionState:
        self.state = transitions.set_brief(self.state, brief)
        return self.state

    def update_creativity(self, creativity: float) -> SessionState:
        self.state = transitions.set_creativity(self.state, creativity)
        return self.state

    def dismiss_error(self) -> SessionState:
        self.state = transitions.dismiss_error(self.state)
        return self.state

    def _reject(self, message: str) -> SessionState:
        logger.warning(message)
        self.state = transitions.validation_failed(self.state, message)
        return self.state

    def generate_ideas(self) -> SessionState:
        """
        Generate concepts for the current brief.

        An empty brief or a missing text client is reported without any
        network call. Otherwise previous concepts are cleared, the text
        endpoint is called, and the result (or the failure) is stored.

        Returns:
            SessionState: The state after the action

        Raises:
            RequestInFlightError: If another idea generation is still running
        """
        if not self.state.brief or not self.state.brief.strip():
            return self._reject(MISSING_BRIEF_MESSAGE)

        if self.text_client is None:
            return self._reject(MISSING_API_KEY_MESSAGE)

        with self.ideas_slot.hold():
            self.state = transitions.begin_idea_generation(self.state)
            try:
                concepts = self.text_client.generate_concepts(self.state.brief, self.state.creativity)
            except ACTION_ERRORS as e:
                logger.error(f"Error generating ideas: {error_message(e)}")
                self.state = transitions.idea_generation_failed(self.state, error_message(e))
            else:
                self.state = transitions.ideas_generated(self.state, concepts)

        return self.state

    def visualize(self, concept_id: str) -> SessionState:
        """
        Generate a visual for one concept.

        Args:
            concept_id (str): Id of a concept in the current state

        Returns:
            SessionState: The state after the action

        Raises:
            RequestInFlightError: If another visual is still being generated
        """
        concept = self.state.find_concept(concept_id)
        if concept is None:
            return self._reject(f"Unknown concept: {concept_id}")

        if self.image_adapter is None:
            return self._reject(MISSING_IMAGE_SERVICE_MESSAGE)

        with self.image_slot.hold():
            self.state = transitions.begin_visualization(self.state, concept_id)
            try:
                image_url = visualize_concept_text(self.image_adapter, concept.text)
            except ACTION_ERRORS as e:
                logger.error(f"Error visualizing concept {concept_id}: {error_message(e)}")
                self.state = transitions.visualization_failed(self.state, error_message(e))
            else:
                self.state = transitions.visual_generated(self.state, concept_id, image_url)

        return self.state
