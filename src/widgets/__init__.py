"""
Bordered panels making up the request screen.
"""
from .panels import LogsPanel, ResponsePanel, TextPanel
from .url_panel import UrlPanel

__all__ = ["LogsPanel", "ResponsePanel", "TextPanel", "UrlPanel"]
