"""
get-tui: a terminal GET client
"""

import asyncio
import logging
from typing import Optional

import httpx
from textual import work
from textual.app import App
from textual.screen import Screen

from core.config import Settings, configure_logging
from core.domain import RequestEvent
from core.orchestrator import Orchestrator
from models import Session
from screens import RequestScreen

logger = logging.getLogger(__name__)

FETCHING_MESSAGE = "Fetching results..."
DONE_MESSAGE = "Done"


class HttpTuiApp(App, inherit_bindings=False):
    TITLE = "get-tui"
    # Keys are handled by RequestScreen only; q is the sole way out.
    BINDINGS = []
    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the application with an empty session.

        Args:
            settings: request and logging settings, defaults used when None
            transport: optional httpx transport handed to every request
        """
        super().__init__()
        self.settings = settings or Settings()
        self.session = Session()
        self.event_q: asyncio.Queue = asyncio.Queue()
        self.orchestrator = Orchestrator(
            self.event_q,
            timeout=self.settings.timeout,
            indent=self.settings.indent,
            transport=transport,
        )

    def get_default_screen(self) -> Screen:
        return RequestScreen(self.session)

    def on_mount(self) -> None:
        self._pump()

    def on_request_screen_submit(self, message: RequestScreen.Submit) -> None:
        """Start a request for the URL currently typed in."""
        self.run_fetch(message.url)

    @work(exclusive=True, group='fetch')
    async def run_fetch(self, url: str):
        """
        Run one request. A new submit cancels the one in flight.
        """
        await self.orchestrator.run(url)

    @work(exclusive=True, group='pump')
    async def _pump(self):
        """
        Event processing loop.

        Event types handled:
        - 'start': request issued
        - 'error': transport or formatting failure
        - 'done': response received
        """
        while True:
            ev = await self.event_q.get()
            self.apply_event(ev)

    def apply_event(self, ev: RequestEvent) -> None:
        session = self.session
        type = ev.get('type', '')

        if type == 'start':
            session.log(FETCHING_MESSAGE)
        elif type == 'error':
            message = ev.get('message', '')
            session.log(f"Error: {message}")
            if ev.get('kind') == 'transport':
                session.response = f"Request failed: {message}"
                session.status = ""
        elif type == 'done':
            session.response = ev.get('text', '')
            session.status = ev.get('status', '')
            session.log(DONE_MESSAGE)
        else:
            logger.debug("ignoring unknown event %r", ev)
            return

        screen = self.screen
        if isinstance(screen, RequestScreen):
            screen.refresh_view()


def main():
    settings = Settings.from_env()
    configure_logging(settings)
    app = HttpTuiApp(settings)
    app.run()


if __name__ == "__main__":
    main()
