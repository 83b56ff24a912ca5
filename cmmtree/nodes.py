"""Abstract syntax tree nodes for the C-- language."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Optional


class AstKind(enum.Enum):
    """The kind of an AST node; the order matches the tree's numbering."""

    AST_INT = 0
    AST_BOOL = 1
    AST_BINOP = 2
    AST_UNOP = 3
    AST_ES = 4
    AST_IF = 5
    AST_WHILE = 6
    AST_RETURN = 7
    AST_FUNCALL = 8
    AST_FUNDEF = 9
    AST_VAR_DECL = 10
    AST_VD_ITEM = 11
    AST_PARAM = 12
    AST_SCALAR = 13
    AST_AE = 14
    AST_AL = 15
    ALIST_STMTS = 16
    ALIST_PARAMS = 17
    ALIST_ARGS = 18
    ALIST_TOP_DECL = 19
    ALIST_VAR_DECL = 20


_LIST_KINDS = frozenset(
    {
        AstKind.ALIST_STMTS,
        AstKind.ALIST_PARAMS,
        AstKind.ALIST_ARGS,
        AstKind.ALIST_TOP_DECL,
        AstKind.ALIST_VAR_DECL,
    }
)


class BinaryOp(enum.Enum):
    """Binary operators, each carrying its source-level symbol."""

    def __new__(cls, value: int, symbol: str) -> "BinaryOp":
        member = object.__new__(cls)
        member._value_ = value
        member.symbol = symbol
        return member

    EXP = (0, "**")
    PLUS = (1, "+")
    MINUS = (2, "-")
    MUL = (3, "*")
    DIV = (4, "/")
    # The printed form of the modulo operator is kept as the tree printer emits it.
    MOD = (5, "%%")
    LT = (6, "<")
    LE = (7, "<=")
    GT = (8, ">")
    GE = (9, ">=")
    EQ = (10, "==")
    NE = (11, "!=")
    AND = (12, "&&")
    OR = (13, "||")
    ASSIGN = (14, "=")


class UnaryOp(enum.Enum):
    """Unary operators, each carrying its source-level symbol."""

    def __new__(cls, value: int, symbol: str) -> "UnaryOp":
        member = object.__new__(cls)
        member._value_ = value
        member.symbol = symbol
        return member

    UMINUS = (0, "-")
    NOT = (1, "!")
    PREPP = (2, "++")
    PREMM = (3, "--")
    POSTPP = (4, "++")
    POSTMM = (5, "--")


@dataclass
class Node:
    """Base class of every tree node."""

    kind: ClassVar[AstKind]


@dataclass
class IntLit(Node):
    """Integer literal."""

    kind: ClassVar[AstKind] = AstKind.AST_INT
    value: int


@dataclass
class BoolLit(Node):
    """Boolean literal."""

    kind: ClassVar[AstKind] = AstKind.AST_BOOL
    value: bool

    def __post_init__(self) -> None:
        self.value = bool(self.value)


@dataclass
class BinOp(Node):
    """Binary operator applied to two operands."""

    kind: ClassVar[AstKind] = AstKind.AST_BINOP
    op: BinaryOp
    left: Node
    right: Node


@dataclass
class UnOp(Node):
    """Unary operator applied to one operand."""

    kind: ClassVar[AstKind] = AstKind.AST_UNOP
    op: UnaryOp
    operand: Node


@dataclass
class ExprStmt(Node):
    """Expression used as a statement."""

    kind: ClassVar[AstKind] = AstKind.AST_ES
    expr: Node


@dataclass
class If(Node):
    """If statement with an optional else branch."""

    kind: ClassVar[AstKind] = AstKind.AST_IF
    cond: Node
    then_branch: Node
    else_branch: Optional[Node] = None


@dataclass
class While(Node):
    """While loop."""

    kind: ClassVar[AstKind] = AstKind.AST_WHILE
    cond: Node
    body: Node


@dataclass
class Return(Node):
    """Return statement with an optional value."""

    kind: ClassVar[AstKind] = AstKind.AST_RETURN
    expr: Optional[Node] = None


@dataclass
class FunCall(Node):
    """Call of a named function."""

    kind: ClassVar[AstKind] = AstKind.AST_FUNCALL
    name: str
    args: Optional["NodeList"] = None


@dataclass
class FunDef(Node):
    """Function definition; a missing return type means void."""

    kind: ClassVar[AstKind] = AstKind.AST_FUNDEF
    type_name: Optional[str]
    name: str
    params: Optional["NodeList"]
    body: Node


@dataclass
class VarDecl(Node):
    """Variable declaration statement holding one or more items."""

    kind: ClassVar[AstKind] = AstKind.AST_VAR_DECL
    type_name: str
    vars: "NodeList"


@dataclass
class VarDeclItem(Node):
    """One declared name, with an optional array size and initialiser."""

    kind: ClassVar[AstKind] = AstKind.AST_VD_ITEM
    name: str
    size: Optional[Node] = None
    init: Optional[Node] = None


@dataclass
class Param(Node):
    """A single function parameter."""

    kind: ClassVar[AstKind] = AstKind.AST_PARAM
    type_name: str
    name: str
    is_array: bool = False

    def __post_init__(self) -> None:
        self.is_array = bool(self.is_array)


@dataclass
class Scalar(Node):
    """Reference to a scalar variable."""

    kind: ClassVar[AstKind] = AstKind.AST_SCALAR
    name: str


@dataclass
class ArrayElement(Node):
    """Indexed array element: arr[index]."""

    kind: ClassVar[AstKind] = AstKind.AST_AE
    array: str
    index: Node


@dataclass
class ArrayLength(Node):
    """Array length expression: #arr."""

    kind: ClassVar[AstKind] = AstKind.AST_AL
    name: str


@dataclass
class NodeList(Node):
    """An ordered list of nodes of one of the list kinds."""

    kind: AstKind
    items: list = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.kind not in _LIST_KINDS:
            raise ValueError(f"{self.kind.name} is not a list kind")
        self.items = list(self.items)

    def append(self, item: Node) -> "NodeList":
        """Add an item at the end and return the list itself."""
        self.items.append(item)
        return self

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Node:
        return self.items[index]