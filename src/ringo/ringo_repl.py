import io
import traceback

from ringo.ringo_cli import render_program, render_tokens
from ringo.ringo_errors import ParseError
from ringo.ringo_lexer import CharacterStream, Lexer
from ringo.ringo_parser import Parser


def print_traceback() -> None:
    buf = io.StringIO()
    traceback.print_exc(file=buf)
    print("[error] >>>")
    print(buf.getvalue())


def eval_line(src: str, verbose: bool = False) -> None:
    """Parse one line of input and print its tree, or the parse error."""
    if verbose:
        tokens = Lexer(CharacterStream(src)).tokenize()
        print(f"[tokens] >>> {tokens}")
    try:
        program = Parser(Lexer(CharacterStream(src))).parse()
    except ParseError as e:
        print(f"[error] >>> {e}")
        return
    if program:
        print(render_program(program))


def start_repl(verbose: bool = False) -> None:
    print("Welcome to the Ringo REPL. Type 'exit' or 'quit' to leave.")

    while True:
        try:
            src = input(">>> ").strip()
            if src in ("exit", "quit"):
                print("Exiting Ringo REPL.")
                return
            if not src or src.startswith("#"):
                continue
            if src.lower() == "verbose-mode":
                verbose = not verbose
                print(f"[mode] >>> Verbose mode {'ON' if verbose else 'OFF'}")
                continue
            if src.startswith(":tokens "):
                print(render_tokens(Lexer(src[len(":tokens "):]).tokenize()))
                continue
            eval_line(src, verbose)
        except (KeyboardInterrupt, EOFError):
            print("\nExiting Ringo REPL.")
            break
        except Exception:  # pragma: no cover
            print_traceback()


def main() -> None:
    start_repl()


if __name__ == "__main__":
    main()
