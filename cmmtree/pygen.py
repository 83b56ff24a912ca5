"""Generate Python source code from a C-- syntax tree."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from cmmtree.nodes import (
    ArrayElement,
    ArrayLength,
    AstKind,
    BinaryOp,
    BinOp,
    BoolLit,
    ExprStmt,
    FunCall,
    FunDef,
    If,
    IntLit,
    Node,
    NodeList,
    Param,
    Return,
    Scalar,
    UnaryOp,
    UnOp,
    VarDecl,
    VarDeclItem,
    While,
)

INDENT = "    "

_PY_BINARY = {
    BinaryOp.EXP: "**",
    BinaryOp.PLUS: "+",
    BinaryOp.MINUS: "-",
    BinaryOp.MUL: "*",
    BinaryOp.DIV: "/",
    BinaryOp.MOD: "%",
    BinaryOp.LT: "<",
    BinaryOp.LE: "<=",
    BinaryOp.GT: ">",
    BinaryOp.GE: ">=",
    BinaryOp.EQ: "==",
    BinaryOp.NE: "!=",
    BinaryOp.AND: "and",
    BinaryOp.OR: "or",
    BinaryOp.ASSIGN: "=",
}

_PY_PREFIX = {UnaryOp.UMINUS: "-", UnaryOp.NOT: "not "}
_PY_STEP = {
    UnaryOp.PREPP: " += 1",
    UnaryOp.POSTPP: " += 1",
    UnaryOp.PREMM: " -= 1",
    UnaryOp.POSTMM: " -= 1",
}


class PythonGenerator:
    """Turns tree nodes into indented Python source text.

    Nodes it cannot translate produce nothing in the output and a
    message on the error stream (standard error unless one is given).
    """

    def __init__(self, errors: Optional[TextIO] = None) -> None:
        self.errors = errors

    def generate(self, node: Optional[Node]) -> str:
        """Return the Python text for a node; a missing node gives nothing."""
        parts: list[str] = []
        self._emit(node, 0, parts)
        return "".join(parts)

    def _warn(self, kind: AstKind) -> None:
        stream = sys.stderr if self.errors is None else self.errors
        stream.write(f"Don't know how to process {kind.value}\n")

    def _emit(self, node: Optional[Node], depth: int, out: list[str]) -> None:
        if node is None:
            return
        if not isinstance(node, Node):
            raise TypeError(f"cannot generate code for {type(node).__name__}")
        pad = INDENT * depth

        match node:
            case IntLit():
                out.append(str(int(node.value)))
            case BinOp():
                self._emit(node.left, depth, out)
                out.append(f" {_PY_BINARY[node.op]} ")
                self._emit(node.right, depth, out)
            case UnOp():
                if node.op in _PY_PREFIX:
                    out.append(_PY_PREFIX[node.op])
                    self._emit(node.operand, depth, out)
                else:
                    self._emit(node.operand, depth, out)
                    out.append(_PY_STEP[node.op])
            case If():
                out.append(pad + "if ")
                self._emit(node.cond, depth, out)
                out.append(":\n")
                self._emit(node.then_branch, depth + 1, out)
                if node.else_branch is not None:
                    out.append(pad + "else:\n")
                    self._emit(node.else_branch, depth + 1, out)
            case While():
                out.append(pad + "while ")
                self._emit(node.cond, depth, out)
                out.append(":\n")
                self._emit(node.body, depth + 1, out)
            case Return():
                out.append(pad + "return ")
                self._emit(node.expr, depth, out)
                out.append("\n")
            case VarDecl():
                for item in node.vars:
                    out.append(pad)
                    self._emit(item, depth, out)
                    out.append("\n")
            case VarDeclItem():
                out.append(node.name)
                if node.init is not None:
                    out.append(" = ")
                    self._emit(node.init, depth, out)
            case FunDef():
                out.append(f"{pad}def {node.name if node.name else 'func'}(")
                self._emit(node.params, depth, out)
                out.append("):\n")
                self._emit(node.body, depth + 1, out)
            case Scalar():
                out.append(node.name)
            case BoolLit():
                out.append("True" if node.value else "False")
            case ArrayLength():
                out.append(f"len({node.name})")
            case ArrayElement():
                out.append(node.array + "[")
                self._emit(node.index, depth, out)
                out.append("]")
            case ExprStmt():
                out.append(pad)
                self._emit(node.expr, depth, out)
                out.append("\n")
            case Param():
                out.append(node.name if node.name else " ")
            case FunCall():
                out.append(node.name + "(")
                self._emit(node.args, depth, out)
                out.append(")")
            case NodeList():
                self._emit_list(node, depth, out)
            case _:
                self._warn(node.kind)

    def _emit_list(self, node: NodeList, depth: int, out: list[str]) -> None:
        if node.kind in (AstKind.ALIST_STMTS, AstKind.ALIST_TOP_DECL):
            for item in node:
                self._emit(item, depth, out)
        elif node.kind in (AstKind.ALIST_ARGS, AstKind.ALIST_PARAMS):
            for position, item in enumerate(node):
                if position:
                    out.append(", ")
                if item is None:
                    out.append(" ")
                else:
                    self._emit(item, depth, out)
        else:
            self._warn(node.kind)


def pygen(root: Optional[Node], out: Optional[TextIO] = None) -> str:
    """Write the Python text for a tree to out (standard output by default) and return it."""
    stream = sys.stdout if out is None else out
    text = PythonGenerator().generate(root)
    stream.write(text)
    return text