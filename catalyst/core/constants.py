"""
Constants for the Catalyst package.

This module provides constants used throughout the Catalyst package.
These constants can be easily changed in one place.
"""

# Text Generation
DEFAULT_TEXT_MODEL = "gemini-1.5-flash"
TEXT_API_BASE = "https://generativelanguage.googleapis.com/v1"
DEFAULT_NUM_CONCEPTS = 5

# Image Generation
DEFAULT_IMAGE_MODEL = "imagen-3.0-generate-002"
DEFAULT_PROJECT_ID = "gemini-429018"
DEFAULT_LOCATION = "us-central1"
DEFAULT_PUBLISHER = "google"
DEFAULT_SAMPLE_COUNT = 1
IMAGE_DATA_URI_PREFIX = "data:image/png;base64,"

# Creativity Dial
DEFAULT_CREATIVITY = 0.7
MIN_CREATIVITY = 0.0
MAX_CREATIVITY = 1.0

# Retry / Backoff
DEFAULT_MAX_RETRIES = 5
DEFAULT_INITIAL_DELAY = 1.0  # seconds, doubled after every retry
RATE_LIMIT_STATUS = 429

# Image Proxy
DEFAULT_PROXY_HOST = "127.0.0.1"
DEFAULT_PROXY_PORT = 3001
GENERATE_IMAGE_ROUTE = "/generate-image"
CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"

# User-facing messages
MISSING_BRIEF_MESSAGE = "Please enter a creative brief."
MISSING_API_KEY_MESSAGE = "API Key is required to generate ideas."
MISSING_PROMPT_MESSAGE = "Prompt is required."
INVALID_TEXT_RESPONSE_MESSAGE = "Invalid response structure from API."
NO_IMAGE_DATA_MESSAGE = "No image data received from API."
RETRIES_EXHAUSTED_MESSAGE = "Request failed after multiple retries."

DEFAULT_BRIEF = (
    'Client: "Aqua Pura" - a new premium bottled water brand. '
    'Target Audience: Health-conscious millennials (25-40). '
    'Core Challenge: Differentiate in a saturated market. '
    'Key Message: "Experience purity in every drop." '
    'Mandatories: Must feature natural elements, convey a sense of calm and refreshment. '
    'Budget: High-end campaign.'
)
