"""Rich console handler for HTTP pipeline events."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text


class HttpEventRichHandler(RichHandler):
    """Rich handler that prefixes HTTP events with a marker and status badge.

    Records logged with ``extra={"http_event": ...}`` get a coloured marker;
    when ``http_status`` is present it is rendered in a colour matching its
    class (2xx green, 4xx yellow, 5xx red). Other records render as usual.
    """

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "http.request": ("→", "cyan"),
        "http.response.success": ("✓", "green"),
        "http.response.error": ("✗", "red"),
        "http.transport.error": ("⚠", "red"),
        "http.decode.error": ("⚠", "yellow"),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _status_style(status: int) -> str:
        if 200 <= status <= 299:
            return "bold green"
        if 300 <= status <= 399:
            return "bold cyan"
        if 400 <= status <= 499:
            return "bold yellow"
        return "bold red"

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event = getattr(record, "http_event", None)
        if not isinstance(event, str) or event not in self._EVENT_STYLES:
            return super().render_message(record, message)

        marker, style = self._EVENT_STYLES[event]
        text = Text()
        _ = text.append(f"{marker} ", style=style)

        status = getattr(record, "http_status", None)
        if isinstance(status, int) and not isinstance(status, bool):
            _ = text.append(f"[{status}] ", style=self._status_style(status))

        _ = text.append(message)
        return text


__all__ = ["HttpEventRichHandler"]
