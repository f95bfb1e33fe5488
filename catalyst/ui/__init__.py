"""
Browser UI for Catalyst.

The Streamlit page lives in streamlit_app.py and is launched as a script,
so nothing is imported here.
"""

import os

STREAMLIT_APP_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "streamlit_app.py")
