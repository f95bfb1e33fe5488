"""
Catalyst - The Agency Creative Accelerator

Turns a creative brief into campaign concepts with a generative-text model,
then visualizes each concept with an image-generation model, either directly
or through a credential-holding proxy.
"""

__version__ = "0.1.0"

# Import main components for easier access
from catalyst.brief2concept.models import Concept
from catalyst.brief2concept.parser import parse_concepts
from catalyst.brief2concept.text_client import GeminiTextClient
from catalyst.concept2visual.adapters import ImagenDirectAdapter, ImagenProxyAdapter
from catalyst.concept2visual.output_manager import OutputManager
from catalyst.session.controller import SessionController
from catalyst.session.state import SessionState
