"""
Interactive read-parse-print loop for BoLang.

Each entry is tokenized and parsed independently; the resulting AST is printed
as an outline (or JSON in json-mode). A bad entry reports its error and the loop
keeps going.

Commands:
    exit / quit     leave the REPL
    tokens-mode     toggle echoing the token stream before the AST
    json-mode       toggle printing the AST as JSON
"""

import io
import json
import logging
import traceback

from bolang.bolang_ast import Program
from bolang.bolang_constants import __version__
from bolang.bolang_errors import BoLangError
from bolang.bolang_lexer import Token, tokenize
from bolang.bolang_parser import try_parse
from bolang.bolang_printer import AstPrinter

logger = logging.getLogger(__name__)

REPL_SOURCE_NAME = "<repl>"


def print_traceback() -> None:
    buf = io.StringIO()
    traceback.print_exc(file=buf)
    print("[error] >>>")
    print(buf.getvalue())


def format_tokens(tokens: list[Token]) -> str:
    return " ".join(f"{tok.type}({tok.value})" for tok in tokens)


def read_entry() -> str | None:
    """Read one entry, continuing with `... ` while braces are unbalanced.

    Returns None when the user asks to leave.
    """
    src_lines: list[str] = []
    brace_count = 0
    while True:
        prompt = ">>> " if not src_lines else "... "
        line = input(prompt)
        if line.strip() in ("exit", "quit") and not src_lines:
            return None
        src_lines.append(line)
        brace_count += line.count("{") - line.count("}")
        if brace_count <= 0:
            break
    return "\n".join(src_lines).strip()


def show_program(program: Program, as_json: bool) -> None:
    if as_json:
        print(json.dumps(program.to_dict(), indent=2))
    else:
        print(AstPrinter().render(program))


def start_repl(show_tokens: bool = False, as_json: bool = False) -> None:
    print(f"BoLang REPL v{__version__}. Type 'exit' or 'quit' to leave.")

    while True:
        try:
            src = read_entry()
            if src is None:
                print("Exiting BoLang REPL.")
                return
            if not src:
                continue
            if src.lower() == "tokens-mode":
                show_tokens = not show_tokens
                print(f"[mode] >>> Token echo {'ON' if show_tokens else 'OFF'}")
                continue
            if src.lower() == "json-mode":
                as_json = not as_json
                print(f"[mode] >>> JSON output {'ON' if as_json else 'OFF'}")
                continue

            if show_tokens:
                try:
                    print(f"[tokens] >>> {format_tokens(tokenize(src, REPL_SOURCE_NAME))}")
                except BoLangError as e:
                    print(f"[error] >>> {e.format()}")
                    continue

            result = try_parse(src, source_name=REPL_SOURCE_NAME)
            if result.error is not None:
                print(f"[error] >>> {result.error.format()}")
                continue

            show_program(result.unwrap(), as_json)

        except (KeyboardInterrupt, EOFError):
            print("\nExiting BoLang REPL.")
            break
        except Exception:
            logger.debug("unexpected REPL failure", exc_info=True)
            print_traceback()


def main() -> None:
    start_repl()


if __name__ == "__main__":
    main()
