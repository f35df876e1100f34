"""End-to-end tests driving the app through the Textual pilot."""

from models import InputMode, PANELS, PanelId
from screens import RequestScreen
from tests.harness.app_runner import run_app, type_text, wait_until
from tests.harness.transports import json_transport
from widgets import LogsPanel, ResponsePanel, UrlPanel


def highlighted(app):
    """Map of panel id -> highlight class currently applied."""
    result = {}
    for panel_id in PANELS:
        panel = app.screen.query_one(f"#{panel_id.value}")
        for cls in ("-active-normal", "-active-editing"):
            if panel.has_class(cls):
                result[panel_id] = cls
    return result


class TestEditing:
    async def test_typing_fills_url(self):
        async with run_app() as (pilot, app):
            await pilot.press("i")
            await type_text(pilot, "example.com")
            await pilot.press("backspace", "backspace", "backspace", "o", "r", "g")
            assert app.session.url == "example.org"
            assert app.session.mode is InputMode.EDITING

    async def test_q_while_editing_is_typed(self):
        async with run_app() as (pilot, app):
            await pilot.press("i", "q", "escape")
            assert app.session.url == "q"
            assert app.session.mode is InputMode.NORMAL
            assert app.return_code is None


class TestPanels:
    async def test_url_panel_is_active_at_start(self):
        async with run_app() as (pilot, app):
            assert highlighted(app) == {PanelId.URL: "-active-normal"}

    async def test_highlight_follows_mode(self):
        async with run_app() as (pilot, app):
            await pilot.press("i")
            assert highlighted(app) == {PanelId.URL: "-active-editing"}
            await pilot.press("escape")
            assert highlighted(app) == {PanelId.URL: "-active-normal"}

    async def test_tab_cycles_through_every_panel(self):
        async with run_app() as (pilot, app):
            start = app.session.active_panel
            for step in range(1, len(PANELS) + 1):
                await pilot.press("tab")
                expected = PANELS[(start + step) % len(PANELS)]
                assert highlighted(app) == {expected: "-active-normal"}
            assert app.session.active_panel == start
            assert app.focused is None


class TestRequests:
    async def test_enter_fetches_and_formats(self, ok_transport, seen_urls):
        async with run_app(transport=ok_transport) as (pilot, app):
            await pilot.press("i")
            await type_text(pilot, "example.com")
            await pilot.press("escape", "enter")

            assert await wait_until(pilot, lambda: app.session.logs[-1:] == ["Done"])
            assert seen_urls == ["https://example.com"]
            assert app.session.response == '{\n  "a": 1\n}'
            assert app.session.status == "200 OK"
            assert app.session.logs == ["Fetching results...", "Done"]

            screen = app.screen
            assert screen.query_one(ResponsePanel).shown_text == '{\n  "a": 1\n}'
            assert screen.query_one(ResponsePanel).border_title == "Response 200 OK"
            assert screen.query_one(LogsPanel).shown_text == "0: Fetching results...\n1: Done"

    async def test_enter_while_editing_does_not_fetch(self, ok_transport, seen_urls):
        async with run_app(transport=ok_transport) as (pilot, app):
            await pilot.press("i")
            await type_text(pilot, "example.com")
            await pilot.press("enter")
            await pilot.pause()
            assert seen_urls == []
            assert app.session.logs == []

    async def test_transport_error_keeps_app_running(self, broken_transport):
        async with run_app(transport=broken_transport) as (pilot, app):
            await pilot.press("i")
            await type_text(pilot, "nowhere.invalid")
            await pilot.press("escape", "enter")

            assert await wait_until(pilot, lambda: len(app.session.logs) == 2)
            assert app.session.logs[0] == "Fetching results..."
            assert app.session.logs[1].startswith("Error: ConnectError")
            assert app.session.response.startswith("Request failed: ")
            assert app.session.status == ""
            assert app.return_code is None

            await pilot.press("i", "x")
            assert app.session.url == "nowhere.invalidx"

    async def test_non_json_body_is_shown_raw(self):
        transport = json_transport(b"plain text")
        async with run_app(transport=transport) as (pilot, app):
            await pilot.press("i", "a", "escape", "enter")

            assert await wait_until(pilot, lambda: app.session.logs[-1:] == ["Done"])
            assert app.session.response == "plain text"
            assert len(app.session.logs) == 3
            assert app.session.logs[1].startswith("Error: response is not JSON")

    async def test_empty_url_reports_error(self, ok_transport, seen_urls):
        async with run_app(transport=ok_transport) as (pilot, app):
            await pilot.press("enter")

            assert await wait_until(pilot, lambda: len(app.session.logs) == 2)
            assert app.session.response == "Request failed: URL is empty"
            assert seen_urls == []


class TestQuit:
    async def test_q_exits_once(self):
        async with run_app() as (pilot, app):
            calls = []
            original_exit = app.exit

            def counting_exit(*args, **kwargs):
                calls.append(args)
                return original_exit(*args, **kwargs)

            app.exit = counting_exit
            await pilot.press("i", "a", "escape", "tab", "tab", "i", "escape")
            assert app.return_code is None
            await pilot.press("q")
            assert calls == [()]
            assert app.return_code == 0


class TestLibraryKeys:
    async def test_ctrl_p_does_not_open_command_palette(self):
        async with run_app() as (pilot, app):
            await pilot.press("ctrl+p")
            assert isinstance(app.screen, RequestScreen)

    async def test_ctrl_q_does_not_quit(self):
        async with run_app() as (pilot, app):
            await pilot.press("ctrl+q")
            assert app.return_code is None
            await pilot.press("i", "a")
            assert app.session.url == "a"


def url_spans(panel):
    text = panel.content
    return text.plain, [(span.start, span.end, str(span.style)) for span in text.spans]


class TestRendering:
    async def test_cursor_shown_only_while_editing(self):
        async with run_app() as (pilot, app):
            panel = app.screen.query_one(UrlPanel)
            await pilot.press("i")
            await type_text(pilot, "abc")
            assert url_spans(panel) == ("abc ", [(3, 4, "reverse")])

            await pilot.press("escape")
            assert url_spans(panel) == ("abc", [])

    async def test_refresh_view_is_idempotent(self, ok_transport):
        async with run_app(transport=ok_transport) as (pilot, app):
            await pilot.press("i")
            await type_text(pilot, "example.com")
            await pilot.press("escape", "tab", "enter")
            assert await wait_until(pilot, lambda: app.session.logs[-1:] == ["Done"])

            screen = app.screen

            def snapshot():
                return (
                    url_spans(screen.query_one(UrlPanel)),
                    screen.query_one(ResponsePanel).shown_text,
                    screen.query_one(ResponsePanel).border_title,
                    screen.query_one(LogsPanel).shown_text,
                    highlighted(app),
                )

            before = snapshot()
            screen.refresh_view()
            screen.refresh_view()
            assert snapshot() == before
            assert before[0] == ("example.com", [])
            assert before[4] == {PanelId.PLACEHOLDER: "-active-normal"}
