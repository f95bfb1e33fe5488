"""
Base adapter interface for image generation services.

This module defines the common API that the direct and proxied image
generation implementations share.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any

class ImageGenerationAdapter(ABC):
    """
    Base adapter interface for image generation services.
    """

    @abstractmethod
    def generate_image(self, prompt: str) -> Dict[str, Any]:
        """
        Generate an image based on a text prompt.

        Args:
            prompt (str): Text prompt describing the image to generate

        Returns:
            Dict[str, Any]: The raw prediction payload,
                ``{"predictions": [{"bytesBase64Encoded": ...}]}``

        Raises:
            APIError: If image generation fails
        """
        pass

    @abstractmethod
    def get_service_info(self) -> Dict[str, Any]:
        """
        Get information about the image generation service.

        Returns:
            Dict[str, Any]: Service information such as name, model and endpoint
        """
        pass
