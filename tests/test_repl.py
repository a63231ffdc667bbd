import builtins
import json
from collections.abc import Callable
from typing import Any

import pytest

import bolang.bolang_repl
from bolang.bolang_constants import TokenType
from bolang.bolang_lexer import Token
from bolang.bolang_repl import format_tokens, print_traceback, start_repl


def feed(monkeypatch: pytest.MonkeyPatch, *lines: str) -> list[str]:
    """Patch input() to return `lines` in order; returns the prompts seen."""
    prompts: list[str] = []
    calls = iter(lines)

    def fake_input(prompt: str) -> str:
        prompts.append(prompt)
        return next(calls)

    monkeypatch.setattr(builtins, "input", fake_input)
    return prompts


def raiser(exc: BaseException) -> Callable[[str], str]:
    def fake_input(_: str) -> str:
        raise exc

    return fake_input


@pytest.mark.parametrize("command", ["quit", "exit", "  exit  "])
def test_repl_exit_commands(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], command: str
) -> None:
    feed(monkeypatch, command)
    start_repl()
    out = capsys.readouterr().out
    assert "BoLang REPL" in out
    assert "Exiting BoLang REPL" in out


def test_repl_empty_input_skipped(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, "   ", "", "quit")
    start_repl()
    out = capsys.readouterr().out
    assert "Program" not in out
    assert "Exiting BoLang REPL" in out


def test_repl_prints_ast(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, "a + b * c", "quit")
    start_repl()
    out = capsys.readouterr().out
    assert "BinaryExpr (op: +)" in out
    assert "BinaryExpr (op: *)" in out
    assert "Identifier: c" in out


def test_repl_reports_errors_and_continues(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, "1 +", "const x;", "let x = #;", "let y = 2;", "quit")
    start_repl()
    out = capsys.readouterr().out
    assert "[error] >>> ParseError: Unexpected token" in out
    assert "[error] >>> ParseError: Must assign value to constant" in out
    assert "[error] >>> LexicalError: Unrecognized character" in out
    assert "<repl>:1:9" in out
    assert "VarDeclaration (let): y" in out
    assert "Exiting BoLang REPL" in out


def test_repl_survives_deep_nesting(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, "(" * 500 + "1" + ")" * 500, "x", "quit")
    start_repl()
    out = capsys.readouterr().out
    assert "[error] >>> ParseError: Expression nested too deeply" in out
    assert "Identifier: x" in out


def test_repl_multiline_until_braces_balance(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    prompts = feed(monkeypatch, "fn f(a) {", "  let o = { a };", "}", "quit")
    start_repl()
    out = capsys.readouterr().out
    assert prompts == [">>> ", "... ", "... ", ">>> "]
    assert "FunctionDeclaration: f(a)" in out
    assert "Property: a (shorthand)" in out


def test_repl_tokens_mode(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, "tokens-mode", "let x = 5;", "tokens-mode", "quit")
    start_repl()
    out = capsys.readouterr().out
    assert "[mode] >>> Token echo ON" in out
    assert (
        "[tokens] >>> Let(let) Identifier(x) Equals(=) Number(5) "
        "Semicolon(;) EndOfInput(EOF)" in out
    )
    assert "[mode] >>> Token echo OFF" in out


def test_repl_json_mode(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, "x", "quit")
    start_repl(as_json=True)
    out = capsys.readouterr().out
    payload = out[out.index("{") : out.rindex("}") + 1]
    assert json.loads(payload) == {
        "kind": "Program",
        "body": [{"kind": "Identifier", "symbol": "x"}],
    }


def test_repl_json_mode_toggle(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    feed(monkeypatch, "json-mode", "json-mode", "quit")
    start_repl()
    out = capsys.readouterr().out
    assert "[mode] >>> JSON output ON" in out
    assert "[mode] >>> JSON output OFF" in out


@pytest.mark.parametrize("exc", [KeyboardInterrupt(), EOFError()])
def test_repl_interrupt_exits(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    exc: BaseException,
) -> None:
    monkeypatch.setattr(builtins, "input", raiser(exc))
    start_repl()
    out = capsys.readouterr().out
    assert "Exiting BoLang REPL" in out


def test_repl_unexpected_failure_prints_traceback(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    class BrokenPrinter:
        def render(self, _: Any) -> str:
            raise RuntimeError("printer exploded")

    monkeypatch.setattr(bolang.bolang_repl, "AstPrinter", BrokenPrinter)
    feed(monkeypatch, "x", "quit")
    start_repl()
    out = capsys.readouterr().out
    assert "[error] >>>" in out
    assert "printer exploded" in out
    assert "Exiting BoLang REPL" in out


def test_print_traceback_outputs_error(capsys: pytest.CaptureFixture[str]) -> None:
    try:
        raise ValueError("boom")
    except ValueError:
        print_traceback()
    out = capsys.readouterr().out
    assert "[error] >>>" in out
    assert "ValueError: boom" in out


def test_format_tokens() -> None:
    tokens = [
        Token(TokenType.IDENTIFIER, "a"),
        Token(TokenType.BINARY_OPERATOR, "+"),
        Token(TokenType.EOF, "EOF"),
    ]
    assert format_tokens(tokens) == "Identifier(a) BinaryOperator(+) EndOfInput(EOF)"


def test_main_starts_repl(monkeypatch: pytest.MonkeyPatch) -> None:
    called: list[bool] = []
    monkeypatch.setattr(bolang.bolang_repl, "start_repl", lambda: called.append(True))
    bolang.bolang_repl.main()
    assert called == [True]
