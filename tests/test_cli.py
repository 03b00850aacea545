import io

import pytest

from nvis import cli
from nvis.transformers import NONE_PLACEHOLDER, TRANSFORMERS


def test_render_prints_every_view_in_order(capsys):
    assert cli.main(["render", "AB"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [ln.split(": ", 1)[0] for ln in lines] == TRANSFORMERS.labels()
    assert "hex: 4142" in lines
    assert f"leu32: {NONE_PLACEHOLDER}" in lines


def test_render_selected_labels(capsys):
    cli.main(["render", "Hello", "--label", "base64", "--label", "hex"])
    assert capsys.readouterr().out == "base64: SGVsbG8\nhex: 48656c6c6f\n"


def test_render_smart_mode(capsys):
    cli.main(["render", "0x0100", "--mode", "smart", "--label", "leu16", "--label", "beu16"])
    assert capsys.readouterr().out == "leu16: 1\nbeu16: 256\n"


def test_bare_text_is_render(capsys):
    cli.main(["Hi", "--label", "hex"])
    assert capsys.readouterr().out == "hex: 4869\n"


def test_render_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"Hi\n")))
    cli.main(["render", "--label", "chex"])
    assert capsys.readouterr().out == "chex: \\x48\\x69\n"


def test_unknown_label_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        cli.main(["render", "x", "--label", "rot13"])
    assert exc.value.code == 2


def test_labels_lists_widths(capsys):
    cli.main(["labels"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(TRANSFORMERS)
    assert lines[0] == "base64\tany"
    assert "bei64\t8" in lines


def test_gui_command_runs_viewer(monkeypatch):
    pytest.importorskip("tkinter")
    seen = []
    monkeypatch.setattr("nvis.gui.run", lambda mode: seen.append(mode))
    assert cli.main(["gui", "--mode", "smart"]) == 0
    assert [str(m) for m in seen] == ["Smart"]


def test_render_undecodable_argv_bytes(capsys):
    # An argv byte that is not UTF-8 reaches Python as a surrogate escape.
    cli.main(["render", "a\udcff", "--label", "hex"])
    assert capsys.readouterr().out == "hex: 61ff\n"


def test_render_reads_undecodable_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"\xff\xfe\n")))
    cli.main(["render", "--label", "hex", "--label", "leu16"])
    assert capsys.readouterr().out == "hex: fffe\nleu16: 65279\n"


def test_command_name_as_text_after_separator(capsys):
    cli.main(["render", "--label", "hex", "--", "gui"])
    assert capsys.readouterr().out == "hex: 677569\n"


def test_help_mentions_separator():
    assert "nvis render -- TEXT" in cli.build_parser().format_help()
