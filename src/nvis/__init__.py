# nvis/__init__.py

"""nvis package.

Re-exports the core logic for convenient imports in tests or other code.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
    HOMEPAGE,
)

from .logic import (
    NATIVE_BYTEORDER,
    NATIVE_WORD_BYTES,
    InputMode,
    decode_hex_strict,
    drop_leading_zeros,
    int_range_for,
    encode_text,
    int_to_native_bytes,
    parse_native_int,
    resolve,
)
from .transformers import (
    NONE_PLACEHOLDER,
    TRANSFORMERS,
    DuplicateLabelError,
    Registry,
    TransformKind,
    Transformer,
    render,
)
from .session import (
    ClipboardError,
    Context,
    export_focused,
    focus_next,
    focus_previous,
    focused_label,
    refresh,
    toggle_mode,
    update_input,
)

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR", "HOMEPAGE",
    # Input resolution
    "NATIVE_BYTEORDER", "NATIVE_WORD_BYTES", "InputMode",
    "decode_hex_strict", "drop_leading_zeros", "int_range_for",
    "encode_text", "int_to_native_bytes", "parse_native_int", "resolve",
    # Transformers
    "NONE_PLACEHOLDER", "TRANSFORMERS", "DuplicateLabelError",
    "Registry", "TransformKind", "Transformer", "render",
    # Session
    "ClipboardError", "Context", "export_focused", "focus_next",
    "focus_previous", "focused_label", "refresh", "toggle_mode", "update_input",
]
