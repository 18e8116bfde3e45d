"""
Ringo Language Parser

Builds a Program (an ordered list of statements) from the token stream produced
by `ringo.ringo_lexer.Lexer`. Tokens are pulled from the lexer on demand; the
parser only ever looks one token ahead.

The only statement is `let x = <expression>`; expressions are number literals
joined by left-associative `+ - * /`.

Expression parsing uses binding powers (Pratt parsing): each infix operator
has a (left, right) pair in `infix_binding_power`. An operator is folded into
the current expression only while its left binding power reaches the caller's
threshold; its right operand is parsed with the right binding power as the new
threshold.

Parsing stops at the first ParseError.
"""

from __future__ import annotations

import logging

from ringo.ringo_ast import Binary, Expression, Let, Number, Program, Statement
from ringo.ringo_constants import TokenKind, binary_operators, infix_binding_power
from ringo.ringo_errors import ErrorKind, ParseError
from ringo.ringo_lexer import Lexer, Token

logger = logging.getLogger(__name__)


def describe(tok: Token) -> str:
    if tok.kind == TokenKind.EOF:
        return "end of input"
    return f"{tok.kind} {tok.literal!r}"


class Parser:
    """
    Ringo Parser Class

    Attributes
    ----------
    lexer : Lexer
        The token source. The parser consumes it; it cannot be reused afterwards.
    """

    def __init__(self, lexer: Lexer | str) -> None:
        if isinstance(lexer, str):
            lexer = Lexer(lexer)
        self.lexer: Lexer = lexer

    def current(self) -> Token:
        return self.lexer.peek_token()

    def advance(self) -> Token:
        return self.lexer.next_token()

    def unexpected(self, tok: Token, expected: str | None = None) -> ParseError:
        if tok.kind == TokenKind.INVALID:
            return ParseError(
                ErrorKind.LEXICAL, f"invalid character {tok.literal!r}", tok, expected
            )
        if tok.kind == TokenKind.EOF:
            return ParseError(
                ErrorKind.UNEXPECTED_EOF, "input ended early", tok, expected
            )
        return ParseError(
            ErrorKind.UNEXPECTED_TOKEN, f"unexpected {describe(tok)}", tok, expected
        )

    def match(self, kind: TokenKind, expected: str) -> Token:
        """Consume the next token, which must be of `kind`."""
        tok = self.advance()
        if tok.kind != kind:
            raise self.unexpected(tok, expected)
        return tok

    def expect_peek(self, kind: TokenKind, expected: str) -> None:
        """Check the upcoming token without consuming it."""
        tok = self.current()
        if tok.kind != kind:
            raise self.unexpected(tok, expected)

    def parse(self) -> Program:
        """Parse a full Ringo program and return its statements in source order."""
        program: Program = []
        while self.current().kind != TokenKind.EOF:
            program.append(self.parse_statement())
        logger.debug("parsed %d statement(s)", len(program))
        return program

    def parse_statement(self) -> Statement:
        tok = self.advance()
        if tok.kind == TokenKind.LET:
            return self.parse_let(tok)
        if tok.kind in (TokenKind.INVALID, TokenKind.EOF):
            raise self.unexpected(tok, "a statement")
        raise ParseError(
            ErrorKind.UNSUPPORTED_STATEMENT,
            f"statements cannot start with {describe(tok)}",
            tok,
            "'let'",
        )

    def parse_let(self, let_tok: Token) -> Let:
        """Parse the rest of `let <name> = <expression>` after the keyword."""
        name = self.match(TokenKind.IDENT, "an identifier after 'let'")
        self.expect_peek(TokenKind.ASSIGN, "'=' after the bound name")
        self.advance()
        initial = self.parse_expression(0)
        logger.debug("let %s = %r", name.literal, initial)
        return Let(name.literal, initial, line=let_tok.line, col=let_tok.col)

    def parse_expression(self, min_bp: int = 0) -> Expression:
        lhs = self.parse_primary()

        while True:
            op_tok = self.current()
            bp = infix_binding_power.get(op_tok.kind)
            if bp is None:
                break
            left_bp, right_bp = bp
            if left_bp < min_bp:
                break

            self.advance()
            rhs = self.parse_expression(right_bp)
            lhs = Binary(
                lhs, binary_operators[op_tok.kind], rhs, line=lhs.line, col=lhs.col
            )

        return lhs

    def parse_primary(self) -> Expression:
        # Parenthesized and unary forms would branch here.
        tok = self.advance()
        if tok.kind == TokenKind.NUMBER:
            return Number(float(tok.literal), line=tok.line, col=tok.col)
        raise self.unexpected(tok, "a number")


def parse(source: str) -> Program:
    """Lex and parse `source`, returning the program."""
    return Parser(Lexer(source)).parse()


__all__ = ["Parser", "parse"]
