"""
Tests for the concept list parser and the Concept model.
"""

from catalyst.brief2concept.models import Concept
from catalyst.brief2concept.parser import parse_concepts


class TestParseConcepts:
    """
    Tests for parse_concepts.
    """

    def test_numbered_list(self):
        text = (
            "1. **Pure Origins**\nEvery drop starts at the source.\n"
            "2. **Refill the Planet**\nA bottle that comes back.\n"
            "3. **Clear Choice**\nTaste nothing but water."
        )

        concepts = parse_concepts(text)

        assert [c.text for c in concepts] == [
            "**Pure Origins**\nEvery drop starts at the source.",
            "**Refill the Planet**\nA bottle that comes back.",
            "**Clear Choice**\nTaste nothing but water."
        ]
        assert all(c.image_url is None for c in concepts)

    def test_dangling_marker_is_dropped(self):
        concepts = parse_concepts("1. Alpha\n2. Beta\n3. ")

        assert [c.text for c in concepts] == ["Alpha", "Beta"]

    def test_leading_text_survives_when_not_blank(self):
        concepts = parse_concepts("Here are your ideas:\n1. Alpha\n2. Beta")

        assert [c.text for c in concepts] == ["Here are your ideas:", "Alpha", "Beta"]

    def test_text_without_list_is_one_concept(self):
        concepts = parse_concepts("Just one idea with no numbering")

        assert len(concepts) == 1
        assert concepts[0].text == "Just one idea with no numbering"

    def test_decimal_numbers_are_not_markers(self):
        concepts = parse_concepts("1. Version 2.0 of hydration")

        assert [c.text for c in concepts] == ["Version 2.0 of hydration"]

    def test_empty_input(self):
        assert parse_concepts("") == []
        assert parse_concepts("   \n ") == []
        assert parse_concepts(None) == []

    def test_ids_are_unique(self):
        concepts = parse_concepts("1. A\n2. A\n3. A")

        assert len({c.id for c in concepts}) == 3
        assert all(c.id for c in concepts)


class TestConcept:
    """
    Tests for the Concept model.
    """

    def test_headline(self):
        concept = Concept(text="**Pure Origins**\nEvery drop starts at the source.")

        assert concept.headline == "**Pure Origins**"

    def test_with_image_keeps_identity(self):
        concept = Concept(text="Alpha")
        visualized = concept.with_image("data:image/png;base64,QUJD")

        assert visualized.id == concept.id
        assert visualized.text == "Alpha"
        assert visualized.has_image
        assert not concept.has_image

    def test_to_dict(self):
        concept = Concept(text="Alpha", id="abc")

        assert concept.to_dict() == {"id": "abc", "text": "Alpha", "imageUrl": None}
