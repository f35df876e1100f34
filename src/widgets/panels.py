"""
Panel widgets. Each one is a bordered box whose content is pushed in by the
screen's renderer; none of them keep state of their own.
"""
from typing import Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static

from models import InputMode


class PanelMixin:
    """Active-panel highlighting, one class per input mode."""

    def highlight(self, mode: Optional[InputMode]) -> None:
        self.set_class(mode is InputMode.NORMAL, "-active-normal")
        self.set_class(mode is InputMode.EDITING, "-active-editing")


class TextPanel(PanelMixin, Static):
    def __init__(self, title: str, content: str = "", *, id: str) -> None:
        super().__init__(Text(content), id=id, classes="panel")
        self.border_title = title


class ScrollPanel(PanelMixin, VerticalScroll):
    can_focus = False

    def __init__(self, title: str, *, id: str) -> None:
        super().__init__(id=id, classes="panel")
        self.border_title = title
        self._body = Static(classes="panel-body")
        self._shown: Optional[str] = None

    def compose(self) -> ComposeResult:
        yield self._body

    @property
    def shown_text(self) -> str:
        return self._shown or ""

    def show_text(self, text: str) -> bool:
        """Replace the body. Returns False when nothing changed."""
        if text == self._shown:
            return False
        self._shown = text
        self._body.update(Text(text))
        return True


class ResponsePanel(ScrollPanel):
    LABEL = "Response"

    def __init__(self, *, id: str) -> None:
        super().__init__(self.LABEL, id=id)

    def show(self, text: str, status: str = "") -> None:
        self.border_title = f"{self.LABEL} {status}" if status else self.LABEL
        if self.show_text(text):
            self.scroll_home(animate=False)


class LogsPanel(ScrollPanel):
    def __init__(self, *, id: str) -> None:
        super().__init__("Logs", id=id)

    def show(self, logs: list[str]) -> None:
        lines = "\n".join(f"{i}: {message}" for i, message in enumerate(logs))
        if self.show_text(lines):
            self.scroll_end(animate=False)
