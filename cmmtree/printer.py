"""Render a C-- syntax tree back as compact C-- source text."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from cmmtree.nodes import (
    ArrayElement,
    ArrayLength,
    AstKind,
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

_PREFIX_OPS = frozenset({UnaryOp.UMINUS, UnaryOp.NOT, UnaryOp.PREPP, UnaryOp.PREMM})
_POSTFIX_OPS = frozenset({UnaryOp.POSTPP, UnaryOp.POSTMM})


class SourcePrinter:
    """Prints trees as source text, counting every node it visits."""

    def __init__(self) -> None:
        self.node_count = 0

    def render(self, node: Optional[Node]) -> str:
        """Return the source text of a node; a missing node renders as nothing."""
        parts: list[str] = []
        self._emit(node, parts)
        return "".join(parts)

    def _emit(self, node: Optional[Node], out: list[str]) -> None:
        if node is None:
            return
        if not isinstance(node, Node):
            raise TypeError(f"cannot render {type(node).__name__}")
        self.node_count += 1

        match node:
            case IntLit():
                out.append(str(int(node.value)))
            case BoolLit():
                out.append("true" if node.value else "false")
            case Scalar():
                out.append(node.name)
            case ArrayLength():
                out.append("#" + node.name)
            case ArrayElement():
                out.append(node.array + "[")
                self._emit(node.index, out)
                out.append("]")
            case BinOp():
                out.append(f"({node.op.symbol} ")
                self._emit(node.left, out)
                out.append(" ")
                self._emit(node.right, out)
                out.append(")")
            case UnOp():
                out.append("(")
                if node.op in _PREFIX_OPS:
                    out.append(node.op.symbol)
                self._emit(node.operand, out)
                if node.op in _POSTFIX_OPS:
                    out.append(node.op.symbol)
                out.append(")")
            case ExprStmt():
                self._emit(node.expr, out)
                out.append(";")
            case If():
                out.append("if ")
                self._emit(node.cond, out)
                self._emit(node.then_branch, out)
                if node.else_branch is not None:
                    out.append(" else ")
                    self._emit(node.else_branch, out)
            case While():
                out.append("while ")
                self._emit(node.cond, out)
                out.append(" ")
                self._emit(node.body, out)
            case Return():
                out.append("return ")
                self._emit(node.expr, out)
                out.append(";")
            case VarDecl():
                if len(node.vars) == 0:
                    raise ValueError("a variable declaration needs at least one item")
                out.append(node.type_name + " ")
                for position, item in enumerate(node.vars):
                    if position:
                        out.append(", ")
                    self._emit(item, out)
                out.append(";")
            case VarDeclItem():
                out.append(node.name)
                if node.size is not None:
                    out.append("[")
                    self._emit(node.size, out)
                    out.append("]")
                if node.init is not None:
                    out.append("=")
                    self._emit(node.init, out)
            case FunDef():
                out.append("\n")
                out.append(node.type_name if node.type_name else "void")
                out.append(f" {node.name}(")
                self._emit(node.params, out)
                out.append(") ")
                self._emit(node.body, out)
            case FunCall():
                out.append(node.name + "(")
                self._emit(node.args, out)
                out.append(")")
            case Param():
                out.append(f"{node.type_name} {node.name}")
                if node.is_array:
                    out.append("[]")
            case NodeList():
                self._emit_list(node, out)
            case _:
                out.append(f"don't know how to process {node.kind.name}\n")

    def _emit_list(self, node: NodeList, out: list[str]) -> None:
        if node.kind is AstKind.ALIST_TOP_DECL:
            for item in node:
                self._emit(item, out)
        elif node.kind in (AstKind.ALIST_PARAMS, AstKind.ALIST_ARGS):
            for position, item in enumerate(node):
                if position:
                    out.append(",")
                self._emit(item, out)
        elif node.kind is AstKind.ALIST_STMTS:
            out.append("{")
            for item in node:
                self._emit(item, out)
            out.append("}")
        else:
            out.append(f"don't know how to process {node.kind.name}\n")


def process(program: Optional[Node], out: Optional[TextIO] = None) -> int:
    """Write a program's source text and node total to out; return the total."""
    stream = sys.stdout if out is None else out
    printer = SourcePrinter()
    stream.write(printer.render(program))
    stream.write(f"\nTotal AST nodes: {printer.node_count}\n")
    return printer.node_count