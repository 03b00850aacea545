# nvis/gui.py

from __future__ import annotations

import logging
import tkinter as tk
import tkinter.messagebox as mbox
from tkinter import ttk

from .__about__ import APP_TITLE
from .gui_menu import build_menubar, show_about_dialog, show_shortcuts_dialog
from .log import configure_root
from .logic import InputMode
from .session import (
    ClipboardError,
    Context,
    export_focused,
    focus_next,
    focus_previous,
    focused_label,
    panel_title,
    status_line,
    toggle_mode,
    update_input,
)
from .transformers import NONE_PLACEHOLDER, TRANSFORMERS

logger = logging.getLogger(__name__)


class PanelView(ttk.LabelFrame):
    """One transformer's output: a titled frame around a read-only line of text."""
    def __init__(self, parent, label: str):
        super().__init__(parent, text=label, padding=(6, 2))
        self.label = label
        self._var = tk.StringVar(value=NONE_PLACEHOLDER)
        ttk.Label(self, textvariable=self._var, font=("TkFixedFont", 11), anchor="w")\
            .grid(row=0, column=0, sticky="ew")
        self.columnconfigure(0, weight=1)

    def set_text(self, text: str) -> None:
        self._var.set(text)

    def get_text(self) -> str:
        return self._var.get()

    def set_focused(self, focused: bool) -> None:
        self.configure(text=panel_title(self.label, focused))


class NvisApp:
    """Tkinter shell around the session handlers: it only shows and forwards."""

    def __init__(self, root: tk.Tk, mode: InputMode = InputMode.RAW) -> None:
        self.root = root
        self.ctx = Context(input_mode=mode)
        root.title(APP_TITLE)
        root.minsize(820, 520)

        self.main = ttk.Frame(root, padding=12)
        self.main.grid(row=0, column=0, sticky="nsew")
        root.columnconfigure(0, weight=1)
        root.rowconfigure(0, weight=1)
        self.main.columnconfigure(0, weight=1)
        self.main.rowconfigure(1, weight=1)

        build_menubar(self.root, self)

        # Input
        self.input_var = tk.StringVar()
        self.entry = ttk.Entry(self.main, textvariable=self.input_var)
        self.entry.grid(row=0, column=0, sticky="ew", pady=(0, 8))
        # Entry's class binding for Control-t transposes characters; stop it here.
        for seq in ("<Control-t>", "<Control-T>"):
            self.entry.bind(seq, lambda e: (self._toggle_mode(), "break")[1])

        # Panels: first half on the left, second half on the right
        self.panels: dict[str, PanelView] = {}
        grid = ttk.Frame(self.main)
        grid.grid(row=1, column=0, sticky="nsew")
        grid.columnconfigure(0, weight=1, uniform="col")
        grid.columnconfigure(1, weight=1, uniform="col")
        half = len(TRANSFORMERS) // 2
        for idx, transformer in enumerate(TRANSFORMERS):
            col, row = (0, idx) if idx < half else (1, idx - half)
            view = PanelView(grid, transformer.label)
            view.grid(row=row, column=col, sticky="ew", padx=4, pady=2)
            self.panels[transformer.label] = view

        # Status bar
        self.status_var = tk.StringVar()
        self.message_var = tk.StringVar()
        bar = ttk.Frame(self.main)
        bar.grid(row=2, column=0, sticky="ew", pady=(8, 0))
        bar.columnconfigure(1, weight=1)
        ttk.Label(bar, textvariable=self.status_var).grid(row=0, column=0, sticky="w")
        self._message_label = ttk.Label(bar, textvariable=self.message_var)
        self._message_label.grid(row=0, column=1, sticky="e")

        self.input_var.trace_add("write", lambda *_: self._on_edit())
        self.entry.focus()
        self._tick()


    # ----------------- Display surface -----------------
    def _push_panels(self, panels: dict[str, str]) -> None:
        for label, text in panels.items():
            self.panels[label].set_text(text)

    def _read_panel(self, label: str) -> str:
        return self.panels[label].get_text()

    def _tick(self) -> None:
        """Refresh the status bar and the focus marker."""
        self.status_var.set(status_line(self.ctx))
        current = focused_label(self.ctx)
        for label, view in self.panels.items():
            view.set_focused(label == current)

    def _set_message(self, msg: str, error: bool = False) -> None:
        self._message_label.configure(foreground="#8B0000" if error else "")
        self.message_var.set(msg)


    # ----------------- Handlers -----------------
    def _on_edit(self) -> None:
        self._push_panels(update_input(self.ctx, self.input_var.get()))

    def _focus_next(self) -> None:
        focus_next(self.ctx)
        logger.debug("Focus on %s", focused_label(self.ctx))
        self._tick()

    def _focus_previous(self) -> None:
        focus_previous(self.ctx)
        logger.debug("Focus on %s", focused_label(self.ctx))
        self._tick()

    def _toggle_mode(self) -> None:
        self._push_panels(toggle_mode(self.ctx))
        self._tick()

    def _clipboard_sink(self, text: str) -> None:
        try:
            self.root.clipboard_clear()
            self.root.clipboard_append(text)
            self.root.update()
        except tk.TclError as exc:
            raise ClipboardError(f"Clipboard unavailable: {exc}") from exc

    def _copy_focused(self) -> None:
        label = focused_label(self.ctx)
        try:
            export_focused(self.ctx, self._read_panel, self._clipboard_sink)
        except ClipboardError as exc:
            logger.warning("Copy of %s failed: %s", label, exc)
            self._set_message(str(exc), error=True)
            mbox.showerror("Copy failed", str(exc), parent=self.root)
            return
        self._set_message(f"Copied {label}")

    def _show_about(self) -> None:
        show_about_dialog(self, self.root)

    def _show_shortcuts(self) -> None:
        show_shortcuts_dialog(self, self.root)

    def _quit(self) -> None:
        self.root.destroy()


def run(mode: InputMode = InputMode.RAW) -> None:
    root = tk.Tk()
    NvisApp(root, mode=mode)
    root.mainloop()


def main() -> None:
    configure_root()
    run()
