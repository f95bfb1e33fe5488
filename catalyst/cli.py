"""
Command-line interface for the Catalyst package.

This module provides the CLI commands for the Catalyst package:
- ideas: Generate campaign concepts from a creative brief
- visualize: Generate a visual for a single concept
- proxy: Run the credential-holding image proxy
- ui: Launch the browser UI
"""

import os
import sys
import subprocess
from typing import Optional

import click
import requests

from catalyst import __version__
from catalyst.core.config import get_config_value
from catalyst.core.credentials import get_api_key
from catalyst.core.constants import DEFAULT_CREATIVITY, DEFAULT_NUM_CONCEPTS, MISSING_BRIEF_MESSAGE
from catalyst.core.error_handler import (
    APIError,
    ConfigurationError,
    CredentialError,
    ValidationError,
    error_message
)
from catalyst.core.logging_config import get_logger, configure_logging

# Initialize logging
configure_logging()
logger = get_logger(__name__)

# Failures reported as "Error: ..." with exit code 1
CLI_ERRORS = (
    APIError,
    ConfigurationError,
    CredentialError,
    ValidationError,
    requests.exceptions.RequestException,
    OSError,
)

def fail(message: str) -> None:
    logger.error(message)
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)

def build_image_adapter(proxy_url: Optional[str] = None, api_key: Optional[str] = None):
    """
    Pick the image service for a command.

    Without a proxy the direct adapter needs a key, which is asked for on the
    terminal when the environment has none.
    """
    from catalyst.concept2visual.adapters import create_image_adapter

    proxy_url = proxy_url or get_config_value("image_generation.proxy_url")
    if not proxy_url and not api_key:
        api_key = get_api_key("imagen", interactive=True)
    return create_image_adapter(api_key=api_key, proxy_url=proxy_url)

@click.group()
@click.version_option(version=__version__)
def main():
    """
    Catalyst - The Agency Creative Accelerator.

    Generate campaign concepts from a creative brief and visualize them.
    """
    pass

@main.command()
@click.argument('brief', type=str, required=False)
@click.option('--brief-file', '-f', type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
              help='Read the creative brief from a text file instead of the argument')
@click.option('--creativity', '-c', type=click.FloatRange(0.0, 1.0), default=DEFAULT_CREATIVITY, show_default=True,
              help='Creativity dial: 0 is conventional, 1 is unorthodox')
@click.option('--num-concepts', '-n', type=click.IntRange(min=1),
              help=f'Number of concepts to ask for (default: {DEFAULT_NUM_CONCEPTS})')
@click.option('--output', '-o', type=click.Path(file_okay=True, dir_okay=False),
              help='Save the concepts as JSON to this path')
@click.option('--images-dir', type=click.Path(file_okay=False, dir_okay=True),
              help='Also visualize every concept and save the PNGs in this directory')
@click.option('--proxy-url', type=str, help='Image proxy URL (default: image_generation.proxy_url from config)')
def ideas(brief: Optional[str], brief_file: Optional[str] = None, creativity: float = DEFAULT_CREATIVITY,
          num_concepts: Optional[int] = None, output: Optional[str] = None,
          images_dir: Optional[str] = None, proxy_url: Optional[str] = None):
    """
    Generate campaign concepts from a creative brief.

    BRIEF: The creative brief text (or use --brief-file)

    Examples:
      catalyst ideas "Client: Aqua Pura, premium bottled water..."
      catalyst ideas -f brief.txt -c 0.9 -o concepts.json
      catalyst ideas -f brief.txt --images-dir visuals/
    """
    from catalyst.brief2concept.text_client import GeminiTextClient
    from catalyst.concept2visual.adapters import visualize_concept_text
    from catalyst.concept2visual.output_manager import OutputManager

    if brief_file:
        with open(brief_file, 'r') as f:
            brief = f.read()

    if not brief or not brief.strip():
        fail(MISSING_BRIEF_MESSAGE)

    try:
        api_key = get_api_key("gemini", interactive=True)
        client = GeminiTextClient(api_key=api_key)
        click.echo(f"Using text model: {client.model}")

        concepts = client.generate_concepts(brief, creativity, num_concepts)
        if not concepts:
            fail("The model returned no concepts.")

        for index, concept in enumerate(concepts, start=1):
            click.echo(f"\n{index}. {concept.text}")

        if images_dir:
            adapter = build_image_adapter(proxy_url=proxy_url, api_key=api_key)
            click.echo(f"\nVisualizing {len(concepts)} concepts with {adapter.get_service_info()['name']}")
            for index, concept in enumerate(concepts):
                concepts[index] = concept.with_image(visualize_concept_text(adapter, concept.text))
                click.echo(f"  Visualized concept {index + 1}/{len(concepts)}")

            paths = OutputManager(images_dir).save_concept_visuals(concepts)
            click.echo(f"Saved {len(paths)} visuals to {images_dir}")

        if output:
            OutputManager().save_concepts(concepts, output, brief=brief.strip(), creativity=creativity)
            click.echo(f"\nConcepts saved to {output}")
    except CLI_ERRORS as e:
        fail(f"Failed to generate ideas. {error_message(e)}")

@main.command()
@click.argument('concept_text', type=str)
@click.argument('output_path', type=click.Path(file_okay=True, dir_okay=False))
@click.option('--proxy-url', type=str, help='Image proxy URL (default: image_generation.proxy_url from config)')
def visualize(concept_text: str, output_path: str, proxy_url: Optional[str] = None):
    """
    Generate a visual for a single concept and save it as PNG.

    CONCEPT_TEXT: Concept headline and explanation

    OUTPUT_PATH: Where to write the PNG file

    Examples:
      catalyst visualize "Drops of Calm: a mountain spring at dawn" calm.png
      catalyst visualize "Drops of Calm" calm.png --proxy-url http://localhost:3001
    """
    from catalyst.concept2visual.adapters import visualize_concept_text
    from catalyst.concept2visual.output_manager import OutputManager

    if not concept_text.strip():
        fail("Concept text is required.")

    try:
        adapter = build_image_adapter(proxy_url=proxy_url)
        click.echo(f"Using {adapter.get_service_info()['name']}")

        data_uri = visualize_concept_text(adapter, concept_text)
        OutputManager().save_image(data_uri, output_path)
        click.echo(f"Visual saved to {output_path}")
    except CLI_ERRORS as e:
        fail(f"Failed to generate image. {error_message(e)}")

@main.command()
@click.option('--host', type=str, help='Interface to bind (default: proxy.host from config)')
@click.option('--port', type=int, help='Port to bind (default: proxy.port from config)')
def proxy(host: Optional[str] = None, port: Optional[int] = None):
    """
    Run the image proxy.

    The proxy authenticates with Application Default Credentials
    (GOOGLE_APPLICATION_CREDENTIALS) so clients never need a key.
    """
    from catalyst.proxy.app import run_proxy

    run_proxy(host=host, port=port)

@main.command()
@click.option('--port', type=int, help='Port for the Streamlit server')
def ui(port: Optional[int] = None):
    """
    Launch the browser UI.
    """
    from catalyst.ui import STREAMLIT_APP_PATH

    command = [sys.executable, "-m", "streamlit", "run", STREAMLIT_APP_PATH]
    if port:
        command.extend(["--server.port", str(port)])

    logger.info(f"Launching UI: {' '.join(command)}")
    proxy_url = get_config_value("image_generation.proxy_url")
    if proxy_url:
        click.echo(f"Visuals will be generated through the proxy at {proxy_url}")

    sys.exit(subprocess.call(command, env=os.environ.copy()))

if __name__ == '__main__':
    main()
