"""
Adapters for image generation services.

This module provides adapter implementations for reaching the image-generation endpoint.
"""

from catalyst.concept2visual.adapters.base import ImageGenerationAdapter
from catalyst.concept2visual.adapters.imagen import (
    ImagenDirectAdapter,
    ImagenProxyAdapter,
    build_predict_payload,
    build_predict_url,
    create_image_adapter,
    extract_image_data_uri,
    visualize_concept_text
)
