# nvis/transformers.py

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)

NONE_PLACEHOLDER = "<none>"


class DuplicateLabelError(ValueError):
    """Raised when a registry is built with a label that is already taken."""


class TransformKind(Enum):
    BASE64 = "base64"
    BASE32 = "base32"
    HEX = "hex"
    CHEX = "chex"
    INTEGER = "integer"


# ---------------- Encoders ----------------
def encode_base64(data: bytes) -> str:
    """Standard alphabet, padding stripped."""
    if not data:
        return NONE_PLACEHOLDER
    return base64.b64encode(data).decode("ascii").rstrip("=")

def encode_base32(data: bytes) -> str:
    """RFC 4648 alphabet, padding stripped."""
    if not data:
        return NONE_PLACEHOLDER
    return base64.b32encode(data).decode("ascii").rstrip("=")

def encode_hex(data: bytes) -> str:
    if not data:
        return NONE_PLACEHOLDER
    return data.hex()

def encode_chex(data: bytes) -> str:
    r"""C-style escapes: b"\x01\xab" -> "\x01\xAB"."""
    if not data:
        return NONE_PLACEHOLDER
    return "".join(f"\\x{b:02X}" for b in data)

def decode_integer(data: bytes, width: int, byteorder: str, signed: bool) -> str:
    """Decimal text of a fixed-width integer, or the placeholder on a width mismatch."""
    if len(data) != width:
        return NONE_PLACEHOLDER
    return str(int.from_bytes(data, byteorder=byteorder, signed=signed))


# ---------------- Transformers ----------------
@dataclass(frozen=True)
class Transformer:
    """A labelled byte -> text view.

    ``width``/``byteorder``/``signed`` only matter for ``TransformKind.INTEGER``.
    """
    label: str
    kind: TransformKind
    width: int | None = None
    byteorder: str = "big"
    signed: bool = False

    def transform(self, data: bytes) -> str:
        kind = self.kind
        if kind is TransformKind.BASE64:
            return encode_base64(data)
        elif kind is TransformKind.BASE32:
            return encode_base32(data)
        elif kind is TransformKind.HEX:
            return encode_hex(data)
        elif kind is TransformKind.CHEX:
            return encode_chex(data)
        elif kind is TransformKind.INTEGER:
            return decode_integer(data, self.width or 0, self.byteorder, self.signed)
        raise AssertionError(f"Unhandled transform kind: {kind}")


def integer(width: int, byteorder: str, signed: bool) -> Transformer:
    """Build an integer transformer labelled like ``leu16`` or ``bei64``."""
    if byteorder not in ("little", "big"):
        raise ValueError("byteorder must be 'little' or 'big'")
    if width not in (2, 4, 8):
        raise ValueError("width must be one of {2, 4, 8}")
    label = f"{byteorder[0]}e{'i' if signed else 'u'}{width * 8}"
    return Transformer(label, TransformKind.INTEGER, width, byteorder, signed)


class Registry:
    """Fixed, ordered collection of transformers keyed by unique label."""

    def __init__(self, transformers: Iterable[Transformer]) -> None:
        items = tuple(transformers)
        seen: dict[str, int] = {}
        for idx, t in enumerate(items):
            if not t.label:
                raise ValueError(f"Transformer at position {idx} has an empty label")
            if t.label in seen:
                raise DuplicateLabelError(
                    f"Duplicate transformer label {t.label!r} at positions {seen[t.label]} and {idx}"
                )
            seen[t.label] = idx
        self._items = items
        self._index = seen
        logger.debug("Built registry with %d transformers", len(items))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Transformer]:
        return iter(self._items)

    def __getitem__(self, idx: int) -> Transformer:
        return self._items[idx]

    def labels(self) -> list[str]:
        return [t.label for t in self._items]

    def get(self, label: str) -> Transformer:
        return self._items[self._index[label]]

    def index_of(self, label: str) -> int:
        return self._index[label]

    def render(self, data: bytes) -> dict[str, str]:
        """Run every transformer once, in order, against the same buffer."""
        return {t.label: t.transform(data) for t in self._items}


TRANSFORMERS = Registry([
    Transformer("base64", TransformKind.BASE64),
    Transformer("base32", TransformKind.BASE32),
    Transformer("hex", TransformKind.HEX),
    Transformer("chex", TransformKind.CHEX),
    integer(2, "little", signed=False),
    integer(2, "big", signed=False),
    integer(4, "little", signed=False),
    integer(4, "big", signed=False),
    integer(8, "little", signed=False),
    integer(8, "big", signed=False),
    integer(2, "little", signed=True),
    integer(2, "big", signed=True),
    integer(4, "little", signed=True),
    integer(4, "big", signed=True),
    integer(8, "little", signed=True),
    integer(8, "big", signed=True),
])

def render(data: bytes) -> dict[str, str]:
    return TRANSFORMERS.render(data)
