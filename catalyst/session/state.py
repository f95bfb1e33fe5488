"""
Session state and its transitions.

A SessionState is never mutated. Every user action or network outcome maps to
one transition function that takes the current state and returns the next.
"""

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Tuple

from catalyst.brief2concept.models import Concept
from catalyst.brief2concept.prompts import validate_creativity
from catalyst.core.constants import DEFAULT_BRIEF, DEFAULT_CREATIVITY

@dataclass(frozen=True)
class SessionState:
    """
    Ephemeral state of one UI session.

    Attributes:
        brief: Creative brief text.
        creativity: Creativity dial value in [0, 1].
        concepts: Generated concepts, in order.
        loading_ideas: A text-generation request is outstanding.
        loading_image_id: Concept whose visual is being generated, if any.
        error: Last error message shown to the user.
    """

    brief: str = DEFAULT_BRIEF
    creativity: float = DEFAULT_CREATIVITY
    concepts: Tuple[Concept, ...] = ()
    loading_ideas: bool = False
    loading_image_id: Optional[str] = None
    error: Optional[str] = None

    @property
    def visualized_concepts(self) -> Tuple[Concept, ...]:
        return tuple(concept for concept in self.concepts if concept.has_image)

    @property
    def can_generate_ideas(self) -> bool:
        return not self.loading_ideas

    @property
    def can_visualize(self) -> bool:
        return self.loading_image_id is None

    def find_concept(self, concept_id: str) -> Optional[Concept]:
        for concept in self.concepts:
            if concept.id == concept_id:
                return concept
        return None


def set_brief(state: SessionState, brief: str) -> SessionState:
    return replace(state, brief=brief)

def set_creativity(state: SessionState, creativity: float) -> SessionState:
    return replace(state, creativity=validate_creativity(creativity))

def begin_idea_generation(state: SessionState) -> SessionState:
    """Previous concepts are discarded as soon as a new generation starts."""
    return replace(state, loading_ideas=True, error=None, concepts=())

def ideas_generated(state: SessionState, concepts: Iterable[Concept]) -> SessionState:
    return replace(state, loading_ideas=False, concepts=tuple(concepts))

def idea_generation_failed(state: SessionState, message: str) -> SessionState:
    return replace(state, loading_ideas=False, error=f"Failed to generate ideas. {message}")

def begin_visualization(state: SessionState, concept_id: str) -> SessionState:
    return replace(state, loading_image_id=concept_id, error=None)

def visual_generated(state: SessionState, concept_id: str, image_url: str) -> SessionState:
    """Attach the image to the target concept only; every other concept is kept as is."""
    concepts = tuple(
        concept.with_image(image_url) if concept.id == concept_id else concept
        for concept in state.concepts
    )
    return replace(state, loading_image_id=None, concepts=concepts)

def visualization_failed(state: SessionState, message: str) -> SessionState:
    return replace(state, loading_image_id=None, error=f"Failed to generate image. {message}")

def validation_failed(state: SessionState, message: str) -> SessionState:
    return replace(state, error=message)

def dismiss_error(state: SessionState) -> SessionState:
    return replace(state, error=None)
