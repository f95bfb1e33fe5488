"""
Parsing of generated concept lists.

The text model is asked for a numbered list ("1. ...", "2. ...") and nothing
else. This module splits that blob into Concept entries.
"""

import re
from typing import List

from catalyst.brief2concept.models import Concept
from catalyst.core.logging_config import get_logger

logger = get_logger(__name__)

LIST_MARKER_PATTERN = re.compile(r"\d+\.\s+")

def parse_concepts(text: str) -> List[Concept]:
    """
    Split a numbered-list blob into concepts.

    Fragments that are empty after trimming are dropped, so leading text
    before "1." only survives if it is non-blank, and a dangling "3. " at
    the end disappears. The item count is whatever the model returned.

    Args:
        text (str): Generated text containing a numbered list

    Returns:
        List[Concept]: Concepts in their original order, each with a fresh id
            and no image
    """
    fragments = [fragment.strip() for fragment in LIST_MARKER_PATTERN.split(text or "")]
    concepts = [Concept(text=fragment) for fragment in fragments if fragment]

    logger.info(f"Parsed {len(concepts)} concepts from generated text")
    return concepts
