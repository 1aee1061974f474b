# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 iso_currency Rui Pinheiro

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, override

from rich.console import Console, ConsoleRenderable, RenderableType
from rich.containers import Renderables
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text


if TYPE_CHECKING:
    import logging

    from rich.traceback import Traceback


class CustomRichHandler(RichHandler):
    """Compact TTY handler: ``[L:logger.name] message`` with the source location right-aligned."""

    def __init__(
        self,
        *args,
        rich_tracebacks: bool = True,
        show_path: bool = True,
        level_color_everything: bool = True,
        enable_link_path: bool = False,
        **kwargs,
    ) -> None:
        super().__init__(*args, console=Console(stderr=True), rich_tracebacks=rich_tracebacks, enable_link_path=enable_link_path, **kwargs)

        self.show_path = show_path
        self.level_color_everything = level_color_everything

    def should_format(self, record: logging.LogRecord) -> bool:
        return not getattr(record, "simple", False)

    def get_level_style(self, record: logging.LogRecord) -> str:
        return f"logging.level.{record.levelname.lower()}"

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        text = Text()

        if self.should_format(record):
            text.append("[", style="dim")
            text.append(record.levelname[0], style=self.get_level_style(record))
            text.append(f":{record.name}", style="dim")
            text.append("] ", style="dim")

        text.append(message)
        return text

    @override
    def render(self, *, record: logging.LogRecord, traceback: Traceback | None, message_renderable: ConsoleRenderable, **kwargs: Any) -> ConsoleRenderable:
        if not self.should_format(record):
            return message_renderable

        renderables: list[ConsoleRenderable] = [message_renderable]
        if traceback:
            renderables.append(traceback)

        output = Table.grid(padding=(0, 1))
        output.expand = True
        output.add_column(ratio=1, style=self.get_level_style(record) if self.level_color_everything else "log.message", overflow="fold")

        row: list[RenderableType] = [Renderables(renderables)]

        path = Path(record.pathname).name
        if self.show_path and path:
            output.add_column(style="log.path")
            link = f"link file://{record.pathname}" if self.enable_link_path else ""
            path_text = Text(path, style=link)
            if record.lineno:
                path_text.append(f":{record.lineno}", style=f"{link}#{record.lineno}" if link else "")
            row.append(path_text)

        output.add_row(*row)
        return output
