"""
Lexical analyzer for the Ringo language.

Converts raw source text into a lazy stream of tokens.

CharacterStream tracks line and column and supports save/restore marks. Lexer
scans one Token per call with single-token lookahead. Unknown characters come
back as INVALID tokens and are recorded in `Lexer.diagnostics`; the parser
decides how to fail on them.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from ringo.ringo_constants import (
    DECIMAL_POINT,
    DIGIT_SEPARATOR,
    TokenKind,
    keywords,
    single_char_tokens,
)

logger = logging.getLogger(__name__)

# (position, line, column)
StreamMark = tuple[int, int, int]


class CharacterStream:
    """
    A utility for reading characters from a string source with line and column tracking.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1, column: int = 1):
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Raises:
            Exception: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise Exception(
                f"CharacterStreamError: Attempted to read past end of source at position=<{self.position}>, line=<{self.line}>"
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """Returns the character at `offset` from the cursor, or "" if out of bounds."""
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def current(self) -> str | None:
        return self.source[self.position] if self.position < len(self.source) else None

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)

    def mark(self) -> StreamMark:
        """Snapshot the cursor so a lookahead scan can be undone with `reset`."""
        return (self.position, self.line, self.column)

    def reset(self, mark: StreamMark) -> None:
        self.position, self.line, self.column = mark


@dataclass(frozen=True)
class Token:
    """A single lexical token.

    Attributes:
        kind (TokenKind): The canonical token kind.
        literal (str): The matched text (digit separators removed for numbers).
        position (int): 0-based offset of the first character of the match.
        line (int): 1-based line of the first character.
        col (int): 1-based column of the first character.
    """

    kind: TokenKind
    literal: str
    position: int = 0
    line: int = 0
    col: int = 0

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.literal})"


class Lexer:
    """Lexical analyzer for Ringo.

    Produces tokens on demand from a CharacterStream. The sequence is
    forward-only: once EOF is returned every later call returns EOF again,
    and a new Lexer is needed to scan the text a second time.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
        diagnostics (list[str]): Messages for invalid characters consumed so far.
    """

    def __init__(self, source: str | CharacterStream) -> None:
        if isinstance(source, str):
            source = CharacterStream(source)
        self.stream = source
        self.diagnostics: list[str] = []

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        tok = self.next_token()
        if tok.kind == TokenKind.EOF:
            raise StopIteration
        return tok

    def peek(self) -> str:
        return self.stream.peek()

    def advance(self) -> str:
        return self.stream.next()

    def skip_whitespace(self) -> None:
        while not self.stream.end_of_file() and self.peek().isspace():
            self.advance()

    def next_token(self) -> Token:
        """Consumes and returns the next Token; EOF once the input is exhausted."""
        tok = self.scan()
        if tok.kind == TokenKind.INVALID:
            message = (
                f"bad character input {tok.literal!r} at line {tok.line}, col {tok.col}"
            )
            self.diagnostics.append(message)
            logger.debug(message)
        return tok

    def peek_token(self) -> Token:
        """Returns the token `next_token` would return, without consuming it.

        The cursor is saved before scanning and restored afterwards, so peek
        and next always agree. No diagnostics are recorded.
        """
        mark = self.stream.mark()
        try:
            return self.scan()
        finally:
            self.stream.reset(mark)

    def tokenize(self) -> list[Token]:
        """Drains the lexer, returning every remaining token except EOF."""
        return list(self)

    def scan(self) -> Token:
        self.skip_whitespace()

        start = self.stream.position
        line, col = self.stream.line, self.stream.column

        if self.stream.end_of_file():
            return Token(TokenKind.EOF, "", start, line, col)

        ch = self.peek()

        # 1. Single-character operator
        if ch in single_char_tokens:
            self.advance()
            return Token(single_char_tokens[ch], ch, start, line, col)

        # 2. Identifier or keyword
        if ch.isalpha():
            ident = ""
            while self.peek().isalpha():
                ident += self.advance()
            return Token(keywords.get(ident, TokenKind.IDENT), ident, start, line, col)

        # 3. Number
        if ch.isdecimal():
            return Token(TokenKind.NUMBER, self.read_number(), start, line, col)

        # 4. Unknown character
        return Token(TokenKind.INVALID, self.advance(), start, line, col)

    def read_number(self) -> str:
        num = ""
        has_point = False
        while True:
            ch = self.peek()
            if ch.isdecimal():
                num += self.advance()
            elif (
                ch == DIGIT_SEPARATOR
                and num[-1:].isdecimal()
                and self.stream.peek(1).isdecimal()
            ):
                self.advance()  # dropped
            elif ch == DECIMAL_POINT and not has_point:
                has_point = True
                num += self.advance()
            else:
                return num


Tokenizer = Lexer


__all__ = ["CharacterStream", "Lexer", "Token", "TokenKind", "Tokenizer"]
