# nvis/session.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from .logic import InputMode, resolve
from .transformers import NONE_PLACEHOLDER, TRANSFORMERS, Registry

logger = logging.getLogger(__name__)


class ClipboardError(RuntimeError):
    """The clipboard could not be written."""


def _placeholder_panels(registry: Registry = TRANSFORMERS) -> dict[str, str]:
    return {label: NONE_PLACEHOLDER for label in registry.labels()}


@dataclass
class Context:
    """Per-process session state, threaded explicitly through every handler."""
    input_mode: InputMode = InputMode.RAW
    focus_idx: int = 0
    raw_text: str = ""
    panels: dict[str, str] = field(default_factory=_placeholder_panels)


# ---------------- Recompute ----------------
def update_input(ctx: Context, text: str, registry: Registry = TRANSFORMERS) -> dict[str, str]:
    """Store the new input line and re-render every panel from scratch."""
    ctx.raw_text = text
    return refresh(ctx, registry)

def refresh(ctx: Context, registry: Registry = TRANSFORMERS) -> dict[str, str]:
    data = resolve(ctx.raw_text, ctx.input_mode)
    ctx.panels = registry.render(data)
    return ctx.panels

def toggle_mode(ctx: Context, registry: Registry = TRANSFORMERS) -> dict[str, str]:
    """Flip Raw/Smart and re-resolve the text already entered."""
    ctx.input_mode = ctx.input_mode.toggled()
    logger.debug("Input mode is now %s", ctx.input_mode)
    return refresh(ctx, registry)


# ---------------- Focus ----------------
def focus_next(ctx: Context, registry: Registry = TRANSFORMERS) -> int:
    ctx.focus_idx = (ctx.focus_idx + 1) % len(registry)
    return ctx.focus_idx

def focus_previous(ctx: Context, registry: Registry = TRANSFORMERS) -> int:
    ctx.focus_idx = (ctx.focus_idx - 1) % len(registry)
    return ctx.focus_idx

def focused_label(ctx: Context, registry: Registry = TRANSFORMERS) -> str:
    return registry[ctx.focus_idx].label


# ---------------- Export ----------------
def export_focused(
    ctx: Context,
    read_panel: Callable[[str], str],
    sink: Callable[[str], None],
    registry: Registry = TRANSFORMERS,
) -> str:
    """Hand the focused panel's displayed text to ``sink`` and return it.

    ``sink`` raises ClipboardError when the clipboard is unavailable; the
    error propagates to the caller and the context is left untouched.
    """
    text = read_panel(focused_label(ctx, registry))
    sink(text)
    return text


# ---------------- Display helpers ----------------
def status_line(ctx: Context) -> str:
    return f"M: {ctx.input_mode}, I: {ctx.focus_idx}"

def panel_title(label: str, focused: bool) -> str:
    return f"{label} (F)" if focused else label
