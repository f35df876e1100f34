from rich.text import Text

from .panels import TextPanel


class UrlPanel(TextPanel):
    """The URL being edited. A reverse-video cell marks the cursor."""

    def __init__(self, *, id: str) -> None:
        super().__init__("URL", id=id)

    def show(self, url: str, editing: bool) -> None:
        text = Text(url)
        if editing:
            text.append(" ", style="reverse")
        self.update(text)
