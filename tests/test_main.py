import pytest

from main import parse_args


def test_defaults():
    args = parse_args([])
    assert args.log_level == "WARNING"
    assert args.player1 == "" and args.player2 == ""


def test_name_prefill_and_level():
    args = parse_args(["--log-level", "DEBUG", "--player1", "Ann", "--player2", "Ben"])
    assert (args.log_level, args.player1, args.player2) == ("DEBUG", "Ann", "Ben")


def test_unknown_level_rejected():
    with pytest.raises(SystemExit):
        parse_args(["--log-level", "LOUD"])


def test_dark_palette_applies(qapp):
    from PySide6.QtGui import QPalette
    from main import apply_dark_palette, WINDOW_COLOR, HIGHLIGHT_COLOR

    apply_dark_palette(qapp)
    palette = qapp.palette()
    assert palette.color(QPalette.Window) == WINDOW_COLOR
    assert palette.color(QPalette.Highlight) == HIGHLIGHT_COLOR
