"""
Session context layer.
"""
from .session_state import SessionState

__all__ = ["SessionState"]
