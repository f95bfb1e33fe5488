"""
Tests for session state transitions.
"""

import pytest

from catalyst.brief2concept.models import Concept
from catalyst.core.constants import DEFAULT_BRIEF, DEFAULT_CREATIVITY
from catalyst.core.error_handler import ValidationError
from catalyst.session import state as transitions
from catalyst.session.state import SessionState


@pytest.fixture
def populated():
    return SessionState(concepts=(Concept(text="Alpha", id="a"), Concept(text="Beta", id="b")))


class TestSessionState:
    """
    Tests for the SessionState value and its transitions.
    """

    def test_initial_state(self):
        state = SessionState()

        assert state.brief == DEFAULT_BRIEF
        assert state.creativity == DEFAULT_CREATIVITY
        assert state.concepts == ()
        assert state.loading_ideas is False
        assert state.loading_image_id is None
        assert state.error is None
        assert state.can_generate_ideas
        assert state.can_visualize

    def test_state_is_immutable(self):
        state = SessionState()

        with pytest.raises(AttributeError):
            state.brief = "changed"

    def test_set_brief_and_creativity(self):
        state = transitions.set_creativity(transitions.set_brief(SessionState(), "New brief"), 0.25)

        assert state.brief == "New brief"
        assert state.creativity == 0.25

    def test_set_creativity_out_of_range(self):
        with pytest.raises(ValidationError):
            transitions.set_creativity(SessionState(), 2)

    def test_begin_idea_generation_clears_concepts_and_error(self, populated):
        state = transitions.begin_idea_generation(transitions.validation_failed(populated, "oops"))

        assert state.loading_ideas
        assert not state.can_generate_ideas
        assert state.concepts == ()
        assert state.error is None

    def test_ideas_generated(self):
        loading = transitions.begin_idea_generation(SessionState())
        state = transitions.ideas_generated(loading, [Concept(text="Alpha")])

        assert not state.loading_ideas
        assert [c.text for c in state.concepts] == ["Alpha"]
        assert isinstance(state.concepts, tuple)

    def test_idea_generation_failed(self):
        state = transitions.idea_generation_failed(transitions.begin_idea_generation(SessionState()), "Quota exceeded")

        assert not state.loading_ideas
        assert state.error == "Failed to generate ideas. Quota exceeded"
        assert state.concepts == ()

    def test_visual_generated_touches_only_target(self, populated):
        loading = transitions.begin_visualization(populated, "b")
        assert loading.loading_image_id == "b"
        assert not loading.can_visualize

        state = transitions.visual_generated(loading, "b", "data:image/png;base64,QUJD")

        assert state.loading_image_id is None
        assert state.concepts[0] is populated.concepts[0]
        assert state.concepts[1].image_url == "data:image/png;base64,QUJD"
        assert state.concepts[1].id == "b"
        assert state.visualized_concepts == (state.concepts[1],)

    def test_visualization_failed_keeps_concepts(self, populated):
        state = transitions.visualization_failed(transitions.begin_visualization(populated, "a"), "No image data received from API.")

        assert state.loading_image_id is None
        assert state.concepts == populated.concepts
        assert state.error == "Failed to generate image. No image data received from API."

    def test_dismiss_error(self):
        state = transitions.dismiss_error(transitions.validation_failed(SessionState(), "Please enter a creative brief."))

        assert state.error is None

    def test_find_concept(self, populated):
        assert populated.find_concept("b").text == "Beta"
        assert populated.find_concept("missing") is None
