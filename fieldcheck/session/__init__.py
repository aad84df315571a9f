"""
Session system

State machine that sequences login, location acquisition and
check-in submission for the presentation layer.
"""

from fieldcheck.session.state import SessionPhase, SessionState
from fieldcheck.session.view_model import SessionViewModel, project
from fieldcheck.session.controller import SessionController

__all__ = [
    "SessionPhase",
    "SessionState",
    "SessionViewModel",
    "project",
    "SessionController",
]
