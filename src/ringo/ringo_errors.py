"""
Error types raised by the Ringo parser.

`ParseError` subclasses `SyntaxError`, so callers that only care about
"the source was malformed" can keep catching `SyntaxError`, while callers
that want detail can read `kind`, `token`, and `position`.
"""

from enum import Enum

from ringo.ringo_lexer import Token


class ErrorKind(str, Enum):
    LEXICAL = "lexical"
    UNEXPECTED_TOKEN = "unexpected token"
    UNEXPECTED_EOF = "unexpected end of input"
    UNSUPPORTED_STATEMENT = "unsupported statement"

    def __str__(self) -> str:
        return self.value


class ParseError(SyntaxError):
    """Raised when the token stream does not match the grammar.

    Attributes:
        kind (ErrorKind): Which class of failure occurred.
        token (Token | None): The offending token, when there is one.
        expected (str | None): Description of what the parser wanted instead.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        token: Token | None = None,
        expected: str | None = None,
    ) -> None:
        self.kind = kind
        self.token = token
        self.expected = expected
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = []
        if self.token is not None:
            parts.append(f"[{self.token.line}:{self.token.col}]")
        parts.append(f"{self.kind}: {self.message}")
        if self.expected:
            parts.append(f"(expected {self.expected})")
        return " ".join(parts)

    @property
    def position(self) -> int | None:
        return self.token.position if self.token is not None else None


__all__ = ["ErrorKind", "ParseError"]
