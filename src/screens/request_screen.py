"""
The main (and only) screen: method and URL on top, placeholder, response and
logs below.
"""

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.screen import Screen

from core.keymap import Action, handle_key
from models import InputMode, PANELS, PanelId, Session
from widgets import LogsPanel, ResponsePanel, TextPanel, UrlPanel


class RequestScreen(Screen):
    CSS = """
RequestScreen {
    padding: 1;
}
#top {
    height: 3;
}
#method {
    width: 1fr;
}
#url {
    width: 9fr;
}
#placeholder {
    width: 1fr;
    height: 1fr;
}
#right {
    width: 4fr;
}
#response {
    height: 9fr;
}
#logs {
    height: 1fr;
    min-height: 4;
}
.panel {
    border: round $foreground 40%;
    border-title-align: left;
}
.panel.-active-normal {
    border: round cyan;
    border-title-color: cyan;
    color: cyan;
}
.panel.-active-editing {
    border: round yellow;
    border-title-color: yellow;
    color: yellow;
}
    """

    class Submit(Message, bubble=True):
        def __init__(self, url: str) -> None:
            super().__init__()
            self.url = url

    def __init__(self, session: Session) -> None:
        """
        Args:
            session: state rendered by this screen; shared with the app
        """
        super().__init__()
        self.session = session

    def compose(self) -> ComposeResult:
        yield Horizontal(
            TextPanel("Method", "GET", id=PanelId.METHOD.value),
            UrlPanel(id=PanelId.URL.value),
            id="top",
        )
        yield Horizontal(
            TextPanel("Place Holder", id=PanelId.PLACEHOLDER.value),
            Vertical(
                ResponsePanel(id=PanelId.RESPONSE.value),
                LogsPanel(id=PanelId.LOGS.value),
                id="right",
            ),
            id="bottom",
        )

    def on_mount(self) -> None:
        self.refresh_view()

    def on_key(self, event: events.Key) -> None:
        """
        Every key goes through the mode state machine; nothing is left for
        the default bindings (Tab would otherwise move focus).
        """
        event.stop()
        event.prevent_default()

        action = handle_key(self.session, event.key, event.character)
        if action is Action.QUIT:
            self.app.exit()
            return
        if action is Action.SUBMIT:
            self.post_message(self.Submit(self.session.url))
        self.refresh_view()

    def refresh_view(self) -> None:
        """Redraw every panel from the session."""
        session = self.session
        editing = session.mode is InputMode.EDITING

        for panel_id in PANELS:
            panel = self.query_one(f"#{panel_id.value}")
            panel.highlight(session.mode if panel_id is session.active else None)

        self.query_one(UrlPanel).show(session.url, editing)
        self.query_one(ResponsePanel).show(session.response, session.status)
        self.query_one(LogsPanel).show(session.logs)
