"""
Defines the abstract syntax tree (AST) for the Ringo language.

The tree is a closed set of immutable node types:

Expressions:
    Number: A numeric literal, stored as a float.
    Binary: An infix operation owning its left and right operands.

Statements:
    Let: Binds a name to an initializing expression.

A Program is the ordered list of statements in declaration order.

Each node records the line and column of its first token for error reporting.
Those fields are ignored by equality, so a hand-built tree compares equal to a
parsed one. `to_dict()` converts a node (and its descendants) into plain
dictionaries suitable for JSON output.
"""

from dataclasses import dataclass, field
from typing import TypedDict, Union

from ringo.ringo_constants import BinaryOp


class ASTDict(TypedDict, total=False):
    """
    Serialized form of a node.

    Fields:
        kind (str): "number", "binary" or "let".
        value (float): Literal value of a number.
        operator (str): Operator symbol of a binary expression.
        left (ASTDict): Left operand of a binary expression.
        right (ASTDict): Right operand of a binary expression.
        name (str): Bound name of a let statement.
        initial (ASTDict): Initializer of a let statement.
        line (int): Source line of the node's first token.
        col (int): Source column of the node's first token.
    """

    kind: str
    value: float
    operator: str
    left: "ASTDict"
    right: "ASTDict"
    name: str
    initial: "ASTDict"
    line: int
    col: int


@dataclass(frozen=True)
class Number:
    value: float
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Number({self.value!r})"

    def to_dict(self) -> ASTDict:
        return {"kind": "number", "value": self.value, "line": self.line, "col": self.col}


@dataclass(frozen=True)
class Binary:
    left: "Expression"
    operator: BinaryOp
    right: "Expression"
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Binary({self.left!r}, {self.operator}, {self.right!r})"

    def to_dict(self) -> ASTDict:
        return {
            "kind": "binary",
            "operator": self.operator.value,
            "left": self.left.to_dict(),
            "right": self.right.to_dict(),
            "line": self.line,
            "col": self.col,
        }


Expression = Union[Number, Binary]


@dataclass(frozen=True)
class Let:
    name: str
    initial: Expression
    line: int = field(default=0, compare=False)
    col: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Let({self.name}, {self.initial!r})"

    def to_dict(self) -> ASTDict:
        return {
            "kind": "let",
            "name": self.name,
            "initial": self.initial.to_dict(),
            "line": self.line,
            "col": self.col,
        }


Statement = Union[Let]
Program = list[Statement]


def program_to_dicts(program: Program) -> list[ASTDict]:
    return [stmt.to_dict() for stmt in program]


__all__ = [
    "ASTDict",
    "Binary",
    "Expression",
    "Let",
    "Number",
    "Program",
    "Statement",
    "program_to_dicts",
]
