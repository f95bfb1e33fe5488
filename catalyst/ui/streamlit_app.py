"""
Streamlit front end for Catalyst.

Run with ``catalyst ui`` or ``streamlit run catalyst/ui/streamlit_app.py``.
The page only renders SessionController state and forwards button clicks to
it; the API key stays in this browser session and is never written anywhere.
"""

import streamlit as st

from catalyst.brief2concept.models import Concept
from catalyst.brief2concept.text_client import GeminiTextClient
from catalyst.concept2visual.adapters import create_image_adapter
from catalyst.concept2visual.output_manager import OutputManager
from catalyst.core.config import get_config_value
from catalyst.core.error_handler import RequestInFlightError, ValidationError
from catalyst.core.logging_config import get_logger
from catalyst.session.controller import SessionController

logger = get_logger(__name__)

st.set_page_config(
    page_title="Catalyst AI",
    page_icon="✨",
    layout="wide"
)


class CatalystApp:
    """Main class for the Catalyst Streamlit page"""

    def __init__(self):
        self.initialize_session_state()
        self.output_manager = OutputManager()

    def initialize_session_state(self):
        """Initialize all session state variables"""
        defaults = {
            "api_key": "",
            "client_key": None,
            "controller": SessionController(),
        }

        for key, default_value in defaults.items():
            if key not in st.session_state:
                st.session_state[key] = default_value

    @property
    def controller(self) -> SessionController:
        return st.session_state.controller

    def sync_clients(self):
        """(Re)build the clients whenever the entered key changes."""
        api_key = st.session_state.api_key
        if api_key == st.session_state.client_key:
            return

        proxy_url = get_config_value("image_generation.proxy_url")
        if api_key:
            self.controller.text_client = GeminiTextClient(api_key=api_key)
            self.controller.image_adapter = create_image_adapter(api_key=api_key, proxy_url=proxy_url)
        else:
            self.controller.text_client = None
            self.controller.image_adapter = create_image_adapter(proxy_url=proxy_url) if proxy_url else None
        st.session_state.client_key = api_key

    def run_action(self, action, *args):
        try:
            action(*args)
        except RequestInFlightError as e:
            st.toast(e.message)

    def render_header(self):
        st.title("Catalyst AI")
        st.caption("The Agency Creative Accelerator MVP")

        st.text_input(
            "Enter Your Google AI API Key",
            type="password",
            key="api_key",
            placeholder="Paste your API key here",
            help="Your key is used only for this session and not stored."
        )

    def render_brief(self):
        state = self.controller.state
        st.subheader("1. Creative Brief")

        brief = st.text_area(
            "Creative brief",
            value=state.brief,
            height=260,
            placeholder="Paste your client's creative brief here...",
            label_visibility="collapsed"
        )
        if brief != state.brief:
            self.controller.update_brief(brief)

        creativity = st.slider(
            "Creativity Dial",
            min_value=0.0,
            max_value=1.0,
            step=0.01,
            value=float(state.creativity),
            help="Conventional · Balanced · Unorthodox"
        )
        if creativity != state.creativity:
            try:
                self.controller.update_creativity(creativity)
            except ValidationError as e:
                st.warning(e.message)

        has_key = bool(st.session_state.api_key)
        if st.button(
            "✨ Generate Ideas",
            type="primary",
            use_container_width=True,
            disabled=not state.can_generate_ideas or not has_key
        ):
            with st.spinner("Generating brilliant ideas..."):
                self.run_action(self.controller.generate_ideas)
            st.rerun()

        if not has_key:
            st.caption(":orange[API Key is required to generate ideas.]")

    def render_concept_card(self, concept: Concept):
        state = self.controller.state
        with st.container(border=True):
            st.markdown(concept.text)
            if st.button(
                "🖼️ Visualize",
                key=f"visualize_{concept.id}",
                use_container_width=True,
                disabled=not state.can_visualize
            ):
                with st.spinner("Generating visual..."):
                    self.run_action(self.controller.visualize, concept.id)
                st.rerun()

    def render_concepts(self):
        state = self.controller.state
        st.subheader("2. Campaign Concepts")

        if not state.concepts:
            st.info("Your generated campaign concepts will appear here.")
            return

        columns = st.columns(2)
        for index, concept in enumerate(state.concepts):
            with columns[index % 2]:
                self.render_concept_card(concept)

    def render_visuals(self):
        visualized = self.controller.state.visualized_concepts
        st.subheader("3. Visual Prototypes")

        if not visualized:
            st.info('Click "Visualize" on a concept to generate an image.')
            return

        columns = st.columns(3)
        for index, concept in enumerate(visualized):
            with columns[index % 3]:
                with st.container(border=True):
                    st.markdown(f"**{concept.headline}**")
                    try:
                        st.image(self.output_manager.decode_image(concept.image_url), use_container_width=True)
                    except ValidationError as e:
                        logger.error(f"Cannot display visual for {concept.id}: {e.message}")
                        st.warning(e.message)

    def render_error(self):
        error = self.controller.state.error
        if not error:
            return

        with st.container(border=True):
            st.error(f"**An Error Occurred**\n\n{error}", icon="⚠️")
            if st.button("Dismiss", key="dismiss_error"):
                self.controller.dismiss_error()
                st.rerun()

    def run(self):
        self.render_header()
        self.sync_clients()

        brief_column, output_column = st.columns([1, 2], gap="large")
        with brief_column:
            self.render_brief()
        with output_column:
            self.render_concepts()
            self.render_visuals()

        self.render_error()


def main():
    CatalystApp().run()


if __name__ == "__main__":
    main()
