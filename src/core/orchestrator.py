import asyncio
import logging
from typing import Optional

import httpx

from core.domain import DoneEvent, ErrorEvent, RequestEvent, StartEvent
from core.http_client import FormatError, TransportError, fetch, format_body, normalize_url, status_line

logger = logging.getLogger(__name__)


class Orchestrator:
    def __init__(
        self,
        events_q: asyncio.Queue,
        timeout: Optional[float] = 30.0,
        indent: int = 2,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.events_q = events_q
        self.timeout = timeout
        self.indent = indent
        self.transport = transport

    async def _emit(self, ev: RequestEvent):
        await self.events_q.put(ev)

    async def run(self, url: str):
        target = normalize_url(url)
        await self._emit(StartEvent(type='start', url=target))
        logger.info("GET %s", target)

        try:
            response = await fetch(target, timeout=self.timeout, transport=self.transport)
        except TransportError as exc:
            logger.warning("request to %s failed: %s", target, exc)
            await self._emit(ErrorEvent(type='error', kind=exc.kind, message=str(exc)))
            return

        status = status_line(response)
        logger.info("%s <- %s", status, target)
        try:
            text = format_body(response.text, self.indent)
        except FormatError as exc:
            logger.warning("could not format body from %s: %s", target, exc)
            await self._emit(ErrorEvent(type='error', kind=exc.kind, message=str(exc)))
            text = response.text

        await self._emit(DoneEvent(type='done', text=text, status=status))
