# nvis/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Sequence

from . import __version__
from .log import configure_root
from .logic import InputMode, resolve
from .transformers import TRANSFORMERS

logger = logging.getLogger(__name__)

COMMANDS = ("render", "labels", "gui")
MODES = {"raw": InputMode.RAW, "smart": InputMode.SMART}


# ---------- helpers ----------
def _print_kv(key: str, value: str | Iterable[str]) -> None:
    if isinstance(value, (list, tuple)):
        print(f"{key}: {' '.join(str(v) for v in value)}")
    else:
        print(f"{key}: {value}")

def _read_text(arg: str | None) -> str:
    if arg is not None:
        return arg
    # Undecodable bytes survive as surrogate escapes and map back in resolve().
    raw = sys.stdin.buffer.read().decode("utf-8", "surrogateescape")
    return raw.rstrip("\r\n")


# ---------- subcommands ----------
def cmd_render(args: argparse.Namespace) -> int:
    data = resolve(_read_text(args.text), MODES[args.mode])
    logger.debug("Resolved %d byte(s) in %s mode", len(data), args.mode)

    wanted = set(args.label or TRANSFORMERS.labels())
    for label, text in TRANSFORMERS.render(data).items():
        if label in wanted:
            _print_kv(label, text)
    return 0


def cmd_labels(args: argparse.Namespace) -> int:
    for t in TRANSFORMERS:
        print(f"{t.label}\t{t.width if t.width else 'any'}")
    return 0


def cmd_gui(args: argparse.Namespace) -> int:
    # Imported lazily so headless use never needs a display or Tk.
    from .gui import run

    run(mode=MODES[args.mode])
    return 0


# ---------- parser ----------
def _add_mode_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--mode", choices=tuple(MODES), default="raw",
        help="input mode: raw UTF-8 bytes or smart 0x/0o/0b literals (default: raw)"
    )

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="nvis",
        description="Render one line of input through every byte view",
        epilog="Input that matches a command name needs an explicit separator: nvis render -- TEXT",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "--log-level", default="WARNING",
        help="logging level (default: WARNING; NVIS_LOG_LEVEL overrides)"
    )

    sp = p.add_subparsers(dest="cmd")

    # render
    pr = sp.add_parser("render", help="print every view of a line of input")
    pr.add_argument(
        "text", nargs="?",
        help="input text (read from stdin when omitted; put -- before text that looks like an option)"
    )
    _add_mode_arg(pr)
    pr.add_argument(
        "--label", action="append", choices=TRANSFORMERS.labels(),
        help="only print this view (repeatable)"
    )
    pr.set_defaults(func=cmd_render)

    # labels
    pl = sp.add_parser("labels", help="list the available views and their byte widths")
    pl.set_defaults(func=cmd_labels)

    # gui
    pg = sp.add_parser("gui", help="open the interactive viewer")
    _add_mode_arg(pg)
    pg.set_defaults(func=cmd_gui)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Convenience: `nvis "hello"` is `nvis render "hello"`.
    if argv and not argv[0].startswith("-") and argv[0] not in COMMANDS:
        argv = ["render"] + argv

    parser = build_parser()
    args = parser.parse_args(argv)
    configure_root(args.log_level)

    if not getattr(args, "cmd", None):
        args = parser.parse_args(argv + ["gui"])

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
