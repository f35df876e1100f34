"""
Session state shared by the key handler and the renderer.
"""
from dataclasses import dataclass, field
from enum import Enum


class InputMode(Enum):
    NORMAL = "normal"
    EDITING = "editing"


class PanelId(str, Enum):
    """Panels in display order. The value doubles as the widget id."""
    METHOD = "method"
    URL = "url"
    PLACEHOLDER = "placeholder"
    RESPONSE = "response"
    LOGS = "logs"


PANELS: tuple[PanelId, ...] = tuple(PanelId)


@dataclass
class Session:
    """
    Everything the UI shows. Created once at startup and mutated in place.
    """
    url: str = ""
    response: str = ""
    status: str = ""
    logs: list[str] = field(default_factory=list)
    mode: InputMode = InputMode.NORMAL
    active_panel: int = PANELS.index(PanelId.URL)

    @property
    def active(self) -> PanelId:
        return PANELS[self.active_panel]

    def next_panel(self) -> None:
        self.active_panel = (self.active_panel + 1) % len(PANELS)

    def log(self, message: str) -> None:
        self.logs.append(message)
