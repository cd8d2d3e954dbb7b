# tui.py

from __future__ import annotations

import logging
from logging import Handler, LogRecord

from rich.markup import escape
from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Container
from textual.widgets import Footer, Header, Input, RichLog, Static

from .commands import CommandDispatcher, Reply
from .logging_utils import get_logger


class TuiLogHandler(Handler):
    """A logging handler that sends records to a Textual RichLog widget.

    Bypasses the standard Formatter so Rich markup in messages survives,
    prefixing only a level marker (itself markup).
    """

    def __init__(self, log_widget: RichLog):
        super().__init__()
        self._log_widget = log_widget

    def emit(self, record: LogRecord):
        try:
            raw = escape(record.getMessage())
            if record.levelno >= logging.ERROR:
                prefix = "[bold red]ERROR[/bold red] "
            elif record.levelno >= logging.WARNING:
                prefix = "[yellow]WARN[/yellow] "
            elif record.levelno >= logging.INFO:
                prefix = "[dim]INFO[/dim] "
            else:
                prefix = "[dim]"
                raw = raw + "[/dim]"
            self._log_widget.write(f"{prefix}{raw}")
        except Exception:
            self.handleError(record)


class PlayerApp(App):
    """A Textual UI for the video player: output pane plus command line."""

    TITLE = "Video Player"
    CSS = """
    #output_section {
        height: 1fr;
    }
    #status_line {
        height: 1;
        padding: 0 1;
    }
    #command {
        dock: bottom;
    }
    """
    BINDINGS = [
        ("ctrl+l", "clear_output", "Clear output"),
    ]

    def __init__(self, dispatcher: CommandDispatcher):
        super().__init__()
        self._dispatcher = dispatcher
        self._log_handler: TuiLogHandler | None = None
        self._parked_handlers: list[Handler] = []
        # Plain-text copy of everything written to the output pane
        self.transcript: list[str] = []

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="output_section"):
            yield RichLog(id="output", wrap=True, markup=True)
        yield Static("", id="status_line")
        yield Input(placeholder="Type a command, e.g. PLAY amazing_cats_video_id", id="command")
        yield Footer()

    def on_mount(self) -> None:
        """Route package logging into the output pane and focus the command line."""
        logger = get_logger()
        # Stream handlers would write under the Textual screen; park them until unmount
        self._parked_handlers = logger.handlers[:]
        for handler in self._parked_handlers:
            logger.removeHandler(handler)
        self._log_handler = TuiLogHandler(self.query_one("#output", RichLog))
        logger.addHandler(self._log_handler)
        self.write_lines(["Type HELP for a list of available commands."])
        self.refresh_status()
        self.query_one("#command", Input).focus()

    def on_unmount(self) -> None:
        logger = get_logger()
        if self._log_handler is not None:
            logger.removeHandler(self._log_handler)
            self._log_handler = None
        for handler in self._parked_handlers:
            logger.addHandler(handler)
        self._parked_handlers = []

    def write_lines(self, lines: list[str], ok: bool = True) -> None:
        output = self.query_one("#output", RichLog)
        for line in lines:
            self.transcript.append(line)
            output.write(Text(line, style="" if ok else "yellow"))

    def refresh_status(self) -> None:
        status = self._dispatcher.player.status()
        if status.is_stopped:
            text = "Stopped"
        else:
            text = f"{status.state.value.capitalize()}: {status.video.title}"
        self.query_one("#status_line", Static).update(Text(text))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        line = event.value
        event.input.value = ""
        if not self._dispatcher.awaiting_selection:
            self.write_lines([f"> {line}"])
        reply: Reply = self._dispatcher.handle(line)
        self.write_lines(reply.lines, reply.ok)
        self.refresh_status()
        if self._dispatcher.finished:
            self.exit()

    def action_clear_output(self) -> None:
        self.query_one("#output", RichLog).clear()
        self.transcript.clear()
