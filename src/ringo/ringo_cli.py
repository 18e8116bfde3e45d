"""
Ringo CLI Entrypoint.

Command-line interface for the Ringo front end. It reads source from a
`.ringo` file or an inline string, runs the lexer and parser, and prints the
token stream or the resulting syntax tree.

Example usage:
    ringo hello.ringo
    ringo -s "let x = 1 + 2 * 3"
    ringo -s "let x = 1_000.5" --tokens
    ringo hello.ringo --json -o hello.json
    ringo --repl --verbose

Functions:
    run_ringo(source: str, is_string: bool = False, tokens: bool = False,
              as_json: bool = False, out: str | None = None) -> None:
        Lexes and parses the source, then prints or writes the rendering.

    main(argv: list[str] | None = None) -> int:
        Parses CLI arguments and dispatches to the REPL or `run_ringo`.

Environment:
    RINGO_LOG_LEVEL: Default logging level when `--log-level` is not given.
"""

import argparse
import json
import logging
import os
import sys

from ringo.ringo_ast import Program, program_to_dicts
from ringo.ringo_errors import ParseError
from ringo.ringo_lexer import CharacterStream, Lexer, Token
from ringo.ringo_parser import Parser

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".ringo"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(level: str | None = None, verbose: bool = False) -> None:
    if verbose:
        level = "DEBUG"
    level = (level or os.getenv("RINGO_LOG_LEVEL") or "WARNING").upper()
    logging.basicConfig(
        level=LOG_LEVELS.get(level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def render_tokens(tokens: list[Token]) -> str:
    return "\n".join(f"{tok.kind}: '{tok.literal}' @{tok.position}" for tok in tokens)


def render_program(program: Program, as_json: bool = False) -> str:
    if as_json:
        return json.dumps(program_to_dicts(program), indent=2)
    return "\n".join(repr(stmt) for stmt in program)


def run_ringo(
    source: str,
    is_string: bool = False,
    tokens: bool = False,
    as_json: bool = False,
    out: str | None = None,
) -> None:
    """
    Run the Ringo front end over a file or string and print or write the result.

    Args:
        source (str): Ringo source code, or the path to a `.ringo` file.
        is_string (bool): If True, treat `source` as raw code instead of a path.
        tokens (bool): If True, render the token stream instead of the tree.
        as_json (bool): If True, render the tree as JSON.
        out (str | None): Optional path to write the rendering to instead of stdout.

    Raises:
        ValueError: If `is_string` is False and the path does not end with `.ringo`.
        ParseError: If the source is malformed.
    """
    if not is_string and not source.endswith(SOURCE_SUFFIX):
        raise ValueError(f"Only {SOURCE_SUFFIX} files are supported.")
    if not is_string:
        logger.info("reading %s", source)
        with open(source, encoding="utf-8") as f:
            source = f.read()

    lexer = Lexer(CharacterStream(source, 0, 1, 1))
    if tokens:
        text = render_tokens(lexer.tokenize())
    else:
        text = render_program(Parser(lexer).parse(), as_json=as_json)

    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        logger.info("wrote %s", out)
    else:
        print(text)


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the Ringo CLI.

    Launches the REPL when no arguments are given or `--repl` is passed;
    otherwise runs `run_ringo`. Returns the process exit status: 0 on success,
    1 on a parse error, 2 on an unusable input path.
    """
    args_list = sys.argv[1:] if argv is None else argv
    if not args_list:
        from ringo.ringo_repl import start_repl

        configure_logging()
        start_repl()
        return 0

    parser = argparse.ArgumentParser(prog="ringo")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "--tokens", action="store_true", help="Print the token stream instead of the tree"
    )
    parser.add_argument(
        "--json", dest="as_json", action="store_true", help="Print the tree as JSON"
    )
    parser.add_argument("-o", "--out", metavar="OUTFILE", help="Output to file")
    parser.add_argument(
        "--repl", action="store_true", help="Launch the interactive REPL"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Debug logging; token echo in the REPL"
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        type=str.upper,
        help="Logging level (default: $RINGO_LOG_LEVEL or WARNING)",
    )

    args = parser.parse_args(args_list)
    configure_logging(args.log_level, args.verbose)

    if args.source is None and (args.tokens or args.as_json or args.out):
        parser.error("source is required with --tokens, --json or --out")

    if args.repl or args.source is None:
        from ringo.ringo_repl import start_repl

        start_repl(verbose=args.verbose)
        return 0

    try:
        run_ringo(
            source=args.source,
            is_string=args.string,
            tokens=args.tokens,
            as_json=args.as_json,
            out=args.out,
        )
    except ParseError as e:
        print(f"[error] >>> {e}", file=sys.stderr)
        return 1
    except (ValueError, OSError) as e:
        print(f"[error] >>> {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
