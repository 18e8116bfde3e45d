"""
Shared token tables for the Ringo front end.

Defines the closed set of token kinds exchanged between the lexer and the
parser, the operator and keyword lookups used while scanning, and the infix
binding-power table that drives expression parsing.

Exports:
    - TokenKind
    - BinaryOp
    - single_char_tokens
    - keywords
    - infix_binding_power
    - binary_operators
"""

from enum import Enum

DIGIT_SEPARATOR = "_"
DECIMAL_POINT = "."


class TokenKind(str, Enum):
    """Canonical token kinds.

    Members compare equal to their canonical names, so ``tok.kind == "EOF"``
    works as well as ``tok.kind is TokenKind.EOF``.
    """

    IDENT = "IDENT"
    ASSIGN = "ASSIGN"
    LET = "LET"
    NUMBER = "NUMBER"
    PLUS = "PLUS"
    SUB = "SUB"
    MULT = "MULT"
    DIV = "DIV"

    # Reserved for the typed grammar; never produced by the scanner.
    STRING = "STRING"
    INT_TYPE = "INT_TYPE"
    STRING_TYPE = "STRING_TYPE"
    FLOAT_TYPE = "FLOAT_TYPE"
    BOOL_TYPE = "BOOL_TYPE"

    INVALID = "INVALID"
    EOF = "EOF"

    def __str__(self) -> str:
        return self.value


class BinaryOp(str, Enum):
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    def __str__(self) -> str:
        return self.value


keywords: dict[str, TokenKind] = {
    "let": TokenKind.LET,
}

single_char_tokens: dict[str, TokenKind] = {
    "=": TokenKind.ASSIGN,
    "+": TokenKind.PLUS,
    "-": TokenKind.SUB,
    "*": TokenKind.MULT,
    "/": TokenKind.DIV,
}

reserved_kinds: frozenset[TokenKind] = frozenset(
    {
        TokenKind.STRING,
        TokenKind.INT_TYPE,
        TokenKind.STRING_TYPE,
        TokenKind.FLOAT_TYPE,
        TokenKind.BOOL_TYPE,
    }
)

# (left, right); lower binds looser, right > left keeps operators left-associative
infix_binding_power: dict[TokenKind, tuple[int, int]] = {
    TokenKind.PLUS: (6, 7),
    TokenKind.SUB: (6, 7),
    TokenKind.MULT: (8, 9),
    TokenKind.DIV: (8, 9),
}

binary_operators: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.PLUS,
    TokenKind.SUB: BinaryOp.MINUS,
    TokenKind.MULT: BinaryOp.MULTIPLY,
    TokenKind.DIV: BinaryOp.DIVIDE,
}


__all__ = [
    "DECIMAL_POINT",
    "DIGIT_SEPARATOR",
    "BinaryOp",
    "TokenKind",
    "binary_operators",
    "infix_binding_power",
    "keywords",
    "reserved_kinds",
    "single_char_tokens",
]
