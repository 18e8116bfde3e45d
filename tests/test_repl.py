import builtins
from collections.abc import Iterator

import pytest

from ringo.ringo_repl import eval_line, print_traceback, start_repl


def feed(monkeypatch: pytest.MonkeyPatch, *lines: str) -> None:
    calls: Iterator[str] = iter(lines)
    monkeypatch.setattr(builtins, "input", lambda _: next(calls))


def test_repl_quit(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, "quit")
    start_repl()
    assert "Exiting Ringo REPL" in capsys.readouterr().out


def test_repl_exit(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, "exit")
    start_repl()
    assert "Exiting Ringo REPL" in capsys.readouterr().out


def test_repl_prints_tree(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, "let x = 1 - 2 - 3", "quit")
    start_repl()
    out = capsys.readouterr().out
    assert (
        "Let(x, Binary(Binary(Number(1.0), -, Number(2.0)), -, Number(3.0)))" in out
    )


def test_repl_continues_after_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, "let x 5", "let y = 2", "quit")
    start_repl()
    out = capsys.readouterr().out
    assert "[error] >>> [1:7] unexpected token" in out
    assert "Let(y, Number(2.0))" in out


def test_repl_reports_invalid_character(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, "let x = 1 % 2", "quit")
    start_repl()
    assert "[error] >>> [1:11] lexical: invalid character '%'" in capsys.readouterr().out


def test_repl_skips_blank_and_comment_lines(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, "   ", "# let x = 1", "quit")
    start_repl()
    out = capsys.readouterr().out
    assert "Let(" not in out
    assert "[error]" not in out


def test_repl_verbose_mode_toggle(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, "verbose-mode", "let x = 1", "verbose-mode", "quit")
    start_repl()
    out = capsys.readouterr().out
    assert "[mode] >>> Verbose mode ON" in out
    assert "[tokens] >>> [Token(LET, let), Token(IDENT, x)" in out
    assert "[mode] >>> Verbose mode OFF" in out


def test_repl_tokens_command(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, ":tokens 1_000 + x", "quit")
    start_repl()
    out = capsys.readouterr().out
    assert "NUMBER: '1000' @0" in out
    assert "PLUS: '+' @6" in out
    assert "IDENT: 'x' @8" in out


def test_repl_keyboard_interrupt(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(
        builtins, "input", lambda _: (_ for _ in ()).throw(KeyboardInterrupt())
    )
    start_repl()
    assert "Exiting Ringo REPL" in capsys.readouterr().out


def test_repl_eof(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(builtins, "input", lambda _: (_ for _ in ()).throw(EOFError()))
    start_repl()
    assert "Exiting Ringo REPL" in capsys.readouterr().out


def test_eval_line_empty_program_prints_nothing(
    capsys: pytest.CaptureFixture[str],
) -> None:
    eval_line("   ")
    assert capsys.readouterr().out == ""


def test_print_traceback(capsys: pytest.CaptureFixture[str]) -> None:
    try:
        raise ValueError("boom")
    except ValueError:
        print_traceback()
    out = capsys.readouterr().out
    assert "[error] >>>" in out
    assert "ValueError: boom" in out
