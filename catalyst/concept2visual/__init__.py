"""
Concept to visual pipeline components.

This module provides functionality for generating and saving visuals for concepts.
"""

from catalyst.concept2visual.adapters import (
    ImageGenerationAdapter,
    ImagenDirectAdapter,
    ImagenProxyAdapter,
    create_image_adapter,
    extract_image_data_uri,
    visualize_concept_text
)
from catalyst.concept2visual.output_manager import OutputManager
