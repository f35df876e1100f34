"""
Data models for the get-tui application.
"""
from .session import InputMode, PanelId, PANELS, Session

__all__ = ["InputMode", "PanelId", "PANELS", "Session"]
