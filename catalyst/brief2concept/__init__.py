"""
Brief to concept pipeline components.

This module provides functionality for turning a creative brief into campaign concepts.
"""

from catalyst.brief2concept.models import Concept
from catalyst.brief2concept.parser import parse_concepts
from catalyst.brief2concept.prompts import (
    build_concept_prompt,
    build_image_prompt,
    describe_creativity
)
from catalyst.brief2concept.text_client import GeminiTextClient
