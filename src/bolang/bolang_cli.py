"""
BoLang CLI Entrypoint.

This module provides the command-line interface for the BoLang front end.
It parses source files or inline strings and prints the resulting AST, or
starts the interactive REPL.

Features:
    - Read source from one or more `.bo` files, or an inline string.
    - Print the AST as an indented outline (default) or as JSON.
    - Print the token stream instead of the AST.
    - Launch an interactive REPL.

A file that fails to lex or parse is reported on stderr and the remaining
files are still processed; the exit status is 1 if any input failed.

Example usage:
    bolang hello.bo
    bolang -s "let x = 5;" --json
    bolang a.bo b.bo --tokens
    bolang --repl
"""

import argparse
import json
import logging
import sys

from bolang.bolang_errors import BoLangError
from bolang.bolang_lexer import tokenize
from bolang.bolang_parser import parse_source
from bolang.bolang_printer import AstPrinter
from bolang.bolang_repl import format_tokens
from bolang.bolang_source import SOURCE_SUFFIX, FileSource, SourceProvider, StringSource

logger = logging.getLogger(__name__)


def run_bolang(
    provider: SourceProvider,
    tokens_only: bool = False,
    as_json: bool = False,
) -> bool:
    """
    Run the front end on one source: read, tokenize, parse, and print.

    Args:
        provider (SourceProvider): Where to read the source text from.
        tokens_only (bool): Print the token stream instead of the AST.
        as_json (bool): Print the AST as JSON instead of an outline.

    Returns:
        bool: True on success, False if the source could not be read, decoded,
              or parsed.
              Errors are printed to stderr.
    """
    try:
        if tokens_only:
            print(format_tokens(tokenize(provider.read(), provider.name)))
            return True
        result = parse_source(provider)
    except (OSError, UnicodeDecodeError) as e:
        print(f"[error] >>> {provider.name}: {e}", file=sys.stderr)
        return False
    except BoLangError as e:
        print(f"[error] >>> {e.format()}", file=sys.stderr)
        return False

    if result.error is not None:
        print(f"[error] >>> {result.error.format()}", file=sys.stderr)
        return False

    program = result.unwrap()
    if as_json:
        print(json.dumps(program.to_dict(), indent=2))
    else:
        print(AstPrinter().render(program))
    return True


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bolang", description="Tokenize and parse BoLang source."
    )
    parser.add_argument("sources", nargs="*", help=f"Source files ({SOURCE_SUFFIX})")
    parser.add_argument(
        "-s", "--string", metavar="SOURCE", help="Parse SOURCE as a literal string"
    )
    parser.add_argument(
        "--tokens", action="store_true", help="Print tokens instead of the AST"
    )
    parser.add_argument("--json", action="store_true", help="Print the AST as JSON")
    parser.add_argument(
        "--repl", action="store_true", help="Launch the interactive REPL"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the BoLang CLI.

    Launches the REPL when no inputs are given or `--repl` is specified;
    otherwise runs every inline string and file through `run_bolang`.

    Returns:
        int: Process exit status.
    """
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.repl or (not args.sources and args.string is None):
        from bolang.bolang_repl import start_repl

        start_repl(show_tokens=args.tokens, as_json=args.json)
        return 0

    providers: list[SourceProvider] = []
    if args.string is not None:
        providers.append(StringSource(args.string))
    providers.extend(FileSource(path) for path in args.sources)

    failed = 0
    for provider in providers:
        if isinstance(provider, FileSource) and not provider.name.endswith(
            SOURCE_SUFFIX
        ):
            print(
                f"[error] >>> {provider.name}: only {SOURCE_SUFFIX} files are supported",
                file=sys.stderr,
            )
            failed += 1
            continue
        logger.debug("processing %s", provider.name)
        if not run_bolang(provider, tokens_only=args.tokens, as_json=args.json):
            failed += 1

    logger.debug("%d of %d inputs failed", failed, len(providers))
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
