"""
Test script to verify that imports from the package work correctly.
"""

def test_imports():
    """Test that all package imports work correctly."""
    from catalyst import (
        Concept,
        parse_concepts,
        GeminiTextClient,
        ImagenDirectAdapter,
        ImagenProxyAdapter,
        OutputManager,
        SessionController,
        SessionState
    )

    from catalyst.core import (
        get_config,
        get_config_value,
        get_api_key,
        get_access_token,
        get_logger,
        configure_logging,
        fetch_with_backoff,
        APIError,
        RateLimitError,
        ValidationError,
        ConfigurationError,
        CredentialError
    )

    from catalyst.brief2concept import build_concept_prompt, build_image_prompt, describe_creativity

    from catalyst.concept2visual.adapters import ImageGenerationAdapter, create_image_adapter

    from catalyst.proxy import create_app, run_proxy

    from catalyst.ui import STREAMLIT_APP_PATH

    assert STREAMLIT_APP_PATH.endswith("streamlit_app.py")
