"""
Tests for the output manager.
"""

import io
import os
import json
import base64
import pytest
from PIL import Image

from catalyst.brief2concept.models import Concept
from catalyst.concept2visual.output_manager import OutputManager
from catalyst.core.error_handler import ValidationError


@pytest.fixture
def png_data_uri():
    """
    A real 4x4 PNG as a data URI.
    """
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color=(0, 128, 255)).save(buffer, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")


@pytest.fixture
def manager(tmp_path):
    return OutputManager(base_output_dir=str(tmp_path / "output"))


class TestOutputManager:
    """
    Tests for the OutputManager class.
    """

    def test_decode_image(self, manager, png_data_uri):
        image_bytes = manager.decode_image(png_data_uri)

        assert image_bytes.startswith(b"\x89PNG")

    @pytest.mark.parametrize("data_uri", [
        "",
        "http://example.com/image.png",
        "data:image/png;base64,not base64!",
        "data:image/png;base64,QUJD"
    ])
    def test_decode_image_rejects_bad_data(self, manager, data_uri):
        with pytest.raises(ValidationError):
            manager.decode_image(data_uri)

    def test_save_image(self, manager, png_data_uri, tmp_path):
        path = manager.save_image(png_data_uri, str(tmp_path / "nested" / "visual.png"))

        assert os.path.exists(path)
        with Image.open(path) as image:
            assert image.size == (4, 4)

    def test_save_concept_visuals_skips_concepts_without_images(self, manager, png_data_uri):
        concepts = [
            Concept(text="**Pure Origins**\nSource.", image_url=png_data_uri),
            Concept(text="No image yet"),
            Concept(text="Refill/The Planet?", image_url=png_data_uri)
        ]

        paths = manager.save_concept_visuals(concepts)

        assert [os.path.basename(p) for p in paths] == ["01_Pure_Origins.png", "03_Refill_The_Planet.png"]
        assert all(os.path.dirname(p) == manager.base_output_dir for p in paths)

    def test_save_concepts(self, manager, tmp_path):
        concepts = [Concept(text="Alpha", id="a"), Concept(text="Beta", id="b", image_url="data:image/png;base64,QUJD")]
        output_path = str(tmp_path / "concepts.json")

        manager.save_concepts(concepts, output_path, brief="Launch a water brand.", creativity=0.7)

        with open(output_path) as f:
            data = json.load(f)
        assert data["brief"] == "Launch a water brand."
        assert data["creativity"] == 0.7
        assert data["concepts"] == [
            {"id": "a", "text": "Alpha", "imageUrl": None},
            {"id": "b", "text": "Beta", "imageUrl": "data:image/png;base64,QUJD"}
        ]
        assert data["generated_at"]

    def test_save_concepts_rejects_invalid_set(self, manager, tmp_path):
        output_path = str(tmp_path / "concepts.json")

        with pytest.raises(ValidationError):
            manager.save_concepts([Concept(text="Alpha")], output_path, brief="", creativity=0.7)

        assert not os.path.exists(output_path)
