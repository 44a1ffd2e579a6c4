import io
import sys

from wonderzork.cli import main


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_welcome_and_lowercase_command(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "look\nquit game\n")
    assert code == 0
    assert out.startswith("Welcome to Wonderzork")
    assert "Enter QUIT GAME at any time.\n==========\n" in out
    assert "Alice is at the Rabbit Hole" in out


def test_blank_lines_and_leading_space_skipped(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "\n\n   look\n")
    assert out.count("-----\n") == 1
    assert "I cannot do that command." not in out


def test_quit_stops_reading(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "QUIT GAME\nLOOK\n")
    assert "-----" not in out


def test_win_stops_session(monkeypatch, capsys):
    steps = [
        "go east", "get potion", "go south", "get gears", "go west", "get cake",
        "drink potion", "go north", "go west", "eat cake", "eat cake",
        "put gears in clock", "look",
    ]
    _, out = _run(monkeypatch, capsys, "\n".join(steps) + "\n")
    assert "Alice wakes up and escapes Wonderland!" in out
    assert out.count("-----\n") == len(steps) - 1
    assert out.endswith("==========\n")


def test_end_of_input_ends_session(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "dance")
    assert code == 0
    assert out.endswith("I cannot do that command.\n==========\n")