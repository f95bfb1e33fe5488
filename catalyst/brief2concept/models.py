"""
Data model for generated campaign concepts.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from catalyst.core.utils import generate_unique_id

@dataclass(frozen=True)
class Concept:
    """
    One generated campaign idea, optionally paired with a generated image.

    Attributes:
        text: Headline and short explanation as returned by the model.
        id: Opaque unique identifier.
        image_url: ``data:image/png;base64,...`` URI once visualized.
    """

    text: str
    id: str = field(default_factory=generate_unique_id)
    image_url: Optional[str] = None

    @property
    def headline(self) -> str:
        """First line of the concept text."""
        return self.text.split("\n", 1)[0].strip()

    @property
    def has_image(self) -> bool:
        return self.image_url is not None

    def with_image(self, image_url: str) -> "Concept":
        return replace(self, image_url=image_url)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "text": self.text, "imageUrl": self.image_url}
