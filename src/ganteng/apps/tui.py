"""Textual TUI: type slang, press Ctrl+G, copy the ganteng result.

The dictionary loads asynchronously after mount. Until it succeeds the
generate action is disabled; a failed load leaves a persistent message in
the status bar. Editing the input resets the output panel.
"""

from collections.abc import Mapping
from typing import Any

from rich.text import Text
from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static, TextArea

from ganteng.api import TypingGanteng
from ganteng.core.constants import (
    EMPTY_RESULT_MESSAGE,
    LOAD_ERROR_MESSAGE,
    NOT_READY_MESSAGE,
    OUTPUT_PLACEHOLDER,
)
from ganteng.core.types import LoadState


class GantengApp(App):
    """Input box, generate action gated on dictionary load, output, copy."""

    TITLE = "Typing Ganteng"

    CSS = """
    #body {
        height: 1fr;
    }
    #input-editor {
        height: 1fr;
        border: solid $primary;
    }
    #output {
        height: 1fr;
        border: solid $primary;
        padding: 0 1;
        color: $text-muted;
    }
    #output.-visible {
        border: solid $success;
        color: $text;
    }
    #status-bar {
        height: 1;
        dock: bottom;
        background: $surface;
        color: $text-muted;
        padding: 0 2;
    }
    #status-bar.-error {
        color: $error;
    }
    """

    BINDINGS = [
        Binding("ctrl+g", "generate", "Ubah", priority=True),
        Binding("ctrl+y", "copy_result", "Salin", priority=True),
        Binding("ctrl+q", "quit", "Keluar", priority=True),
    ]

    def __init__(
        self,
        engine: TypingGanteng,
        source: str | None = None,
        extra: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__()
        self._engine = engine
        self._source = source
        self._extra = extra
        self._result = ""
        self._status = ""

    @property
    def result_text(self) -> str:
        """The last generated text; empty until generate runs."""
        return self._result

    @property
    def status_text(self) -> str:
        return self._status

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="body"):
            yield TextArea("", id="input-editor")
            yield Static(OUTPUT_PLACEHOLDER, id="output")
        yield Static("", id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#input-editor", TextArea).focus()
        self._update_status_bar()
        self._load_dictionary()

    # ── Dictionary loading ───────────────────────────────────────────

    @work(exclusive=True)
    async def _load_dictionary(self) -> None:
        state = await self._engine.load_async(self._source, self._extra)
        if state is LoadState.ERROR:
            self.notify(LOAD_ERROR_MESSAGE, severity="error", timeout=5)
        self._update_status_bar()
        self.refresh_bindings()

    def _update_status_bar(self) -> None:
        bar = self.query_one("#status-bar", Static)
        state = self._engine.state
        if state is LoadState.LOADED:
            message = f"Kamus siap ({len(self._engine.dictionary)} entri)"
        elif state is LoadState.ERROR:
            message = f"{LOAD_ERROR_MESSAGE} ({self._engine.error})"
        else:
            message = "Memuat kamus..."
        self._status = message
        bar.set_class(state is LoadState.ERROR, "-error")
        bar.update(Text(message))

    # ── Action gating ────────────────────────────────────────────────

    def check_action(self, action: str, parameters: tuple[Any, ...]) -> bool | None:
        """Show generate/copy as disabled until they can do something."""
        if action == "generate":
            return True if self._engine.is_ready and self._input_text().strip() else None
        if action == "copy_result":
            return True if self._result else None
        return True

    def _input_text(self) -> str:
        return self.query_one("#input-editor", TextArea).text

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        output = self.query_one("#output", Static)
        if output.has_class("-visible"):
            output.remove_class("-visible")
            output.update(OUTPUT_PLACEHOLDER)
        self._result = ""
        self.refresh_bindings()

    # ── Actions ──────────────────────────────────────────────────────

    def action_generate(self) -> None:
        if not self._engine.is_ready:
            self.notify(NOT_READY_MESSAGE, severity="warning", timeout=2)
            return
        self._result = self._engine.transform(self._input_text())
        output = self.query_one("#output", Static)
        output.update(Text(self._result or EMPTY_RESULT_MESSAGE))
        output.add_class("-visible")
        self.refresh_bindings()

    def action_copy_result(self) -> None:
        if not self._result:
            return
        self.copy_to_clipboard(self._result)
        self.notify("Berhasil disalin! ✅", severity="information", timeout=2)
