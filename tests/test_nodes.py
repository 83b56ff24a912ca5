import pytest

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


def test_kind_names_follow_source_order():
    names = [k.name for k in sorted(AstKind, key=lambda k: k.value)]
    assert IntLit(1).kind.name == names[0] == "AST_INT"
    assert NodeList(AstKind.ALIST_VAR_DECL).kind.name == names[-1] == "ALIST_VAR_DECL"
    assert len(names) == 21


def test_binary_symbols():
    def op_of(op):
        return BinOp(op, IntLit(1), IntLit(2)).op

    assert op_of(BinaryOp.EXP).symbol == "**"
    assert op_of(BinaryOp.MOD).symbol == "%%"
    assert op_of(BinaryOp.AND).symbol == "&&"
    assert op_of(BinaryOp.ASSIGN).symbol == "="
    assert [op.value for op in BinaryOp] == list(range(15))


def test_unary_symbols_and_distinct_members():
    def op_of(op):
        return UnOp(op, Scalar("x")).op

    assert op_of(UnaryOp.PREPP).symbol == op_of(UnaryOp.POSTPP).symbol == "++"
    assert op_of(UnaryOp.PREMM).symbol == op_of(UnaryOp.POSTMM).symbol == "--"
    assert op_of(UnaryOp.PREPP) is not op_of(UnaryOp.POSTPP)
    assert len(list(UnaryOp)) == 6
    assert op_of(UnaryOp.NOT).symbol == "!"


@pytest.mark.parametrize(
    "node, kind",
    [
        (IntLit(3), AstKind.AST_INT),
        (BoolLit(1), AstKind.AST_BOOL),
        (BinOp(BinaryOp.PLUS, IntLit(1), IntLit(2)), AstKind.AST_BINOP),
        (UnOp(UnaryOp.NOT, BoolLit(0)), AstKind.AST_UNOP),
        (ExprStmt(Scalar("x")), AstKind.AST_ES),
        (If(BoolLit(1), ExprStmt(Scalar("x"))), AstKind.AST_IF),
        (While(BoolLit(1), ExprStmt(Scalar("x"))), AstKind.AST_WHILE),
        (Return(IntLit(0)), AstKind.AST_RETURN),
        (FunCall("f"), AstKind.AST_FUNCALL),
        (FunDef("int", "main", None, NodeList(AstKind.ALIST_STMTS)), AstKind.AST_FUNDEF),
        (
            VarDecl("int", NodeList(AstKind.ALIST_VAR_DECL, [VarDeclItem("x")])),
            AstKind.AST_VAR_DECL,
        ),
        (VarDeclItem("x"), AstKind.AST_VD_ITEM),
        (Param("int", "a"), AstKind.AST_PARAM),
        (Scalar("x"), AstKind.AST_SCALAR),
        (ArrayElement("arr", IntLit(0)), AstKind.AST_AE),
        (ArrayLength("arr"), AstKind.AST_AL),
    ],
)
def test_node_kinds(node, kind):
    assert node.kind is kind


def test_bool_literal_normalised():
    assert BoolLit(1).value is True
    assert BoolLit(0).value is False


def test_param_is_array_normalised():
    assert Param("int", "a", 1).is_array is True
    assert Param("int", "a").is_array is False


def test_optional_fields_default_to_none():
    item = VarDeclItem("x")
    assert item.size is None and item.init is None
    assert If(BoolLit(1), Scalar("x")).else_branch is None
    assert Return().expr is None
    assert FunCall("f").args is None


def test_node_list_append_returns_self_and_keeps_order():
    first, second, third = IntLit(1), IntLit(2), IntLit(3)
    args = NodeList(AstKind.ALIST_ARGS, [first])
    result = args.append(second).append(third)
    assert result is args
    assert list(args) == [first, second, third]
    assert len(args) == 3
    assert args[1] is second


def test_node_list_copies_initial_items():
    initial = [IntLit(1)]
    stmts = NodeList(AstKind.ALIST_STMTS, initial)
    stmts.append(IntLit(2))
    assert len(initial) == 1
    assert len(stmts) == 2


def test_node_list_kind_stored():
    params = NodeList(AstKind.ALIST_PARAMS)
    assert params.kind is AstKind.ALIST_PARAMS
    assert len(params) == 0


def test_node_list_rejects_non_list_kind():
    with pytest.raises(ValueError):
        NodeList(AstKind.AST_INT)


def test_structural_equality():
    assert BinOp(BinaryOp.MUL, Scalar("a"), IntLit(2)) == BinOp(
        BinaryOp.MUL, Scalar("a"), IntLit(2)
    )
    assert IntLit(1) != BoolLit(1)