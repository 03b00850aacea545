# nvis/logic.py

from __future__ import annotations

import logging
import re
import struct
import sys
from enum import Enum
from typing import Tuple

logger = logging.getLogger(__name__)

MAX_BYTES = 8
NATIVE_WORD_BYTES = struct.calcsize("n")
NATIVE_BYTEORDER = sys.byteorder
SMART_PREFIXES = ("0x", "0o", "0b")

_HEX_RE = re.compile(r"(?:[0-9A-Fa-f]{2})*")
_DIGITS_RE = {
    2: re.compile(r"[+-]?[01]+"),
    8: re.compile(r"[+-]?[0-7]+"),
}


class InputMode(Enum):
    """How the raw input line is turned into bytes."""
    RAW = "Raw"
    SMART = "Smart"

    def __str__(self) -> str:
        return self.value

    def toggled(self) -> InputMode:
        return InputMode.SMART if self is InputMode.RAW else InputMode.RAW


# ---------------- Parsing helpers ----------------
def decode_hex_strict(text: str) -> bytes:
    """Decode contiguous hex digit pairs into bytes, first pair first.

    Unlike a forgiving parser this accepts no separators, no whitespace and
    no ``0x`` prefixes: "48656c6c6f" -> b"Hello".
    """
    if len(text) % 2 != 0:
        raise ValueError("Hex string must have an even number of characters.")
    if not _HEX_RE.fullmatch(text):
        raise ValueError(f"Invalid hex string: {text!r}")
    return bytes.fromhex(text)

def int_range_for(width: int, signed: bool) -> Tuple[int, int]:
    """
    Return inclusive (lo, hi) range for a given byte width and signedness.

    Unsigned:        [0, 2^n - 1]
    2's complement:  [-(2^(n-1)), 2^(n-1) - 1]
    """
    if width < 1 or width > MAX_BYTES:
        raise ValueError(f"width must be 1..{MAX_BYTES}")
    if signed:
        lo = -(1 << (8 * width - 1))
        hi = (1 << (8 * width - 1)) - 1
    else:
        lo = 0
        hi = (1 << (8 * width)) - 1
    return lo, hi

def parse_native_int(text: str, base: int) -> int:
    """Parse a base-2 or base-8 literal into the native signed word range.

    Only an optional sign followed by digits is accepted: no radix prefix,
    no underscores, no surrounding whitespace.
    """
    pattern = _DIGITS_RE.get(base)
    if pattern is None:
        raise ValueError(f"Unsupported base: {base}")
    if not pattern.fullmatch(text):
        raise ValueError(f"Invalid base-{base} literal: {text!r}")

    val = int(text, base)
    lo, hi = int_range_for(NATIVE_WORD_BYTES, signed=True)
    if not (lo <= val <= hi):
        raise ValueError(f"Value out of range for {NATIVE_WORD_BYTES}-byte signed word")
    return val

def int_to_native_bytes(val: int) -> bytes:
    """Serialize a native signed word in host byte order (two's complement)."""
    return val.to_bytes(NATIVE_WORD_BYTES, byteorder=NATIVE_BYTEORDER, signed=True)

def drop_leading_zeros(data: bytes, byteorder: str = NATIVE_BYTEORDER) -> bytes:
    """Strip zero bytes from the most-significant end for ``byteorder``."""
    if byteorder == "little":
        return data.rstrip(b"\x00")
    if byteorder == "big":
        return data.lstrip(b"\x00")
    raise ValueError("byteorder must be 'little' or 'big'")


# ---------------- Input resolution ----------------
def encode_text(text: str) -> bytes:
    """UTF-8 bytes of ``text``, never raising on lone surrogates.

    Surrogate escapes (undecodable bytes from argv or stdin) become the
    original bytes again; any other lone surrogate is encoded as-is.
    """
    try:
        return text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", "surrogatepass")

def _resolve_smart(raw: str) -> bytes:
    prefix, body = raw[:2], raw[2:]
    if prefix not in SMART_PREFIXES:
        return encode_text(raw)
    if prefix == "0x":
        return decode_hex_strict(body)
    if prefix == "0o":
        return drop_leading_zeros(int_to_native_bytes(parse_native_int(body, 8)))
    if prefix == "0b":
        return drop_leading_zeros(int_to_native_bytes(parse_native_int(body, 2)))
    raise AssertionError(f"Unhandled smart prefix: {prefix}")

def resolve(raw: str, mode: InputMode) -> bytes:
    """Turn the current input line into the byte buffer every panel renders.

    Raw mode is a UTF-8 pass-through. Smart mode decodes ``0x`` hex byte
    strings and converts ``0o``/``0b`` integers to their shortest native
    byte form; any other text falls back to UTF-8. Malformed smart literals
    yield ``b""`` instead of raising.
    """
    if not raw:
        return b""

    if mode is InputMode.RAW:
        return encode_text(raw)

    try:
        return _resolve_smart(raw)
    except ValueError as exc:
        logger.debug("Rejected smart literal %r: %s", raw, exc)
        return b""
