"""
Session state and the controller that drives it.
"""

from catalyst.session.state import SessionState
from catalyst.session.controller import RequestSlot, SessionController
