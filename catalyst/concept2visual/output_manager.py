"""
Output manager module.

This module provides functionality for writing generated concepts and visuals
to disk: concept sets as JSON, visuals as PNG files decoded from their data URIs.
"""

import io
import os
import base64
import binascii
import logging
from typing import List, Optional, Sequence

import jsonschema
from PIL import Image, UnidentifiedImageError

from catalyst.brief2concept.models import Concept
from catalyst.core.constants import IMAGE_DATA_URI_PREFIX
from catalyst.core.error_handler import ValidationError
from catalyst.core.utils import ensure_dir, sanitize_filename, save_json_file, timestamp
from catalyst.schemas import load_schema

logger = logging.getLogger(__name__)

class OutputManager:
    """
    Class for writing concept sets and visuals.
    """

    def __init__(self, base_output_dir: Optional[str] = None):
        """
        Initialize the OutputManager.

        Args:
            base_output_dir: Base directory for outputs. If not provided,
                            ./output under the current working directory is used.
        """
        self.base_output_dir = base_output_dir or os.path.join(os.getcwd(), "output")
        self.concept_set_schema = load_schema("concept_set")

    def decode_image(self, data_uri: str) -> bytes:
        """
        Decode and verify a PNG data URI.

        Args:
            data_uri: ``data:image/png;base64,...`` string.

        Returns:
            The raw image bytes.

        Raises:
            ValidationError: If the URI is malformed or the bytes are not an image.
        """
        if not data_uri or not data_uri.startswith(IMAGE_DATA_URI_PREFIX):
            raise ValidationError("Image must be a PNG data URI.", field="image_url")

        try:
            image_bytes = base64.b64decode(data_uri[len(IMAGE_DATA_URI_PREFIX):], validate=True)
        except binascii.Error as e:
            raise ValidationError(f"Image data is not valid base64: {e}", field="image_url")

        try:
            with Image.open(io.BytesIO(image_bytes)) as image:
                image.verify()
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            raise ValidationError(f"Image data could not be read: {e}", field="image_url")

        return image_bytes

    def save_image(self, data_uri: str, output_path: str) -> str:
        """
        Save a visual to disk.

        Args:
            data_uri: PNG data URI.
            output_path: Destination file path.

        Returns:
            Path to the written file.
        """
        image_bytes = self.decode_image(data_uri)

        directory = os.path.dirname(output_path)
        if directory:
            ensure_dir(directory)

        with open(output_path, "wb") as f:
            f.write(image_bytes)

        logger.info(f"Saved visual to {output_path}")
        return output_path

    def save_concept_visuals(self, concepts: Sequence[Concept], output_dir: Optional[str] = None) -> List[str]:
        """
        Save every visualized concept as ``NN_<headline>.png``.

        Args:
            concepts: Concepts; those without an image are skipped.
            output_dir: Directory to write to; defaults to the base output dir.

        Returns:
            Paths of the written files.
        """
        output_dir = ensure_dir(output_dir or self.base_output_dir)
        paths = []

        for index, concept in enumerate(concepts, start=1):
            if not concept.has_image:
                continue
            filename = f"{index:02d}_{sanitize_filename(concept.headline)}.png"
            paths.append(self.save_image(concept.image_url, os.path.join(output_dir, filename)))

        return paths

    def save_concepts(
        self,
        concepts: Sequence[Concept],
        output_path: str,
        brief: str,
        creativity: float
    ) -> str:
        """
        Export a concept set as JSON.

        Args:
            concepts: Concepts to export.
            output_path: Destination file path.
            brief: The brief the concepts were generated from.
            creativity: Creativity used for generation.

        Returns:
            Path to the written file.

        Raises:
            ValidationError: If the export does not match the concept_set schema.
        """
        data = {
            "generated_at": timestamp(),
            "brief": brief,
            "creativity": creativity,
            "concepts": [concept.to_dict() for concept in concepts],
        }

        try:
            jsonschema.validate(instance=data, schema=self.concept_set_schema)
        except jsonschema.exceptions.ValidationError as e:
            raise ValidationError(f"Concept set is invalid: {e.message}")

        save_json_file(data, output_path)
        logger.info(f"Saved {len(concepts)} concepts to {output_path}")
        return output_path
