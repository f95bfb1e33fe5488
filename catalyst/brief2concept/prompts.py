"""
Prompt templates for concept and visual generation.

This module holds the Creative Director prompt used to turn a brief into a
numbered list of campaign concepts, and the image prompt used to visualize a
single concept.
"""

from typing import Dict

from catalyst.core.constants import DEFAULT_NUM_CONCEPTS, MIN_CREATIVITY, MAX_CREATIVITY
from catalyst.core.error_handler import ValidationError

# Creativity dial stops and the tone they ask for
CREATIVITY_LEVELS: Dict[float, str] = {
    0.0: "strictly conventional and brand-safe",
    0.25: "conventional with a slight creative touch",
    0.5: "a balance of creative and conventional",
    0.75: "highly creative and artistic",
    1.0: "wildly unorthodox and experimental, pushing all boundaries",
}

CONCEPT_PROMPT_TEMPLATE = """You are an expert Creative Director at a top-tier advertising agency.
Based on the following creative brief, generate {num_concepts} distinct campaign concepts.
Each concept must have a catchy headline and a short, compelling paragraph (2-3 sentences) explaining the core idea.
The tone of the concepts should be {tone}.

Creative Brief:
---
{brief}
---

Format your response as a numbered list (1., 2., 3., etc.). Do not include any other text before or after the list.
"""

IMAGE_PROMPT_TEMPLATE = """Create a stunning, photorealistic, cinematic advertisement image for the following campaign concept.
The image should be high-resolution, emotionally resonant, and visually striking, suitable for a major brand campaign.
Focus on the visual essence of the idea.

Concept:
---
{concept_text}
---
"""

def validate_creativity(creativity: float) -> float:
    """
    Check that a creativity value lies on the dial.

    Args:
        creativity (float): Requested creativity

    Returns:
        float: The value as a float

    Raises:
        ValidationError: If the value is not a number in [0, 1]
    """
    try:
        value = float(creativity)
    except (TypeError, ValueError):
        raise ValidationError("Creativity must be a number between 0 and 1.", field="creativity", value=creativity)

    if not MIN_CREATIVITY <= value <= MAX_CREATIVITY:
        raise ValidationError("Creativity must be between 0 and 1.", field="creativity", value=creativity)

    return value

def describe_creativity(creativity: float) -> str:
    """
    Map a creativity value to the tone of the nearest dial stop.

    Ties go to the lower stop.

    Args:
        creativity (float): Creativity in [0, 1]

    Returns:
        str: Tone description for the prompt
    """
    value = validate_creativity(creativity)
    nearest = min(CREATIVITY_LEVELS, key=lambda level: (abs(level - value), level))
    return CREATIVITY_LEVELS[nearest]

def build_concept_prompt(brief: str, creativity: float, num_concepts: int = DEFAULT_NUM_CONCEPTS) -> str:
    """
    Generate the concept-list prompt for a creative brief.

    Args:
        brief (str): Creative brief text
        creativity (float): Creativity in [0, 1]
        num_concepts (int): Number of concepts to ask for

    Returns:
        str: Prompt for the text-generation model
    """
    if num_concepts < 1:
        raise ValidationError("Number of concepts must be at least 1.", field="num_concepts", value=num_concepts)

    return CONCEPT_PROMPT_TEMPLATE.format(
        num_concepts=num_concepts,
        tone=describe_creativity(creativity),
        brief=brief.strip()
    )

def build_image_prompt(concept_text: str) -> str:
    """
    Generate the text-to-image prompt for one concept.

    Args:
        concept_text (str): Concept headline and explanation

    Returns:
        str: Prompt for the image-generation model
    """
    return IMAGE_PROMPT_TEMPLATE.format(concept_text=concept_text.strip())
