"""
Screens for the get-tui application.
"""
from .request_screen import RequestScreen

__all__ = ["RequestScreen"]
