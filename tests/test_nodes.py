from proplogic.nodes import And, Iff, Literal, Not, Or, Variable, variables, walk
from proplogic.parser import parse


def test_walk_is_pre_order():
    ast = parse("~a ^ (b v 1)")

    assert [n.label for n in walk(ast)] == ["^", "~", "a", "v", "b", "1"]


def test_variables_in_first_appearance_order():
    assert variables(parse("q v p ^ (q <=> r)")) == ["q", "p", "r"]
    assert variables(parse("1 v 0")) == []


def test_structural_equality():
    assert And(Variable("p"), Literal(True)) == And(Variable("p"), Literal(True))
    assert And(Variable("p"), Literal(True)) != Or(Variable("p"), Literal(True))
    assert Iff(Literal(False), Literal(False)) != Iff(Literal(False), Literal(True))


def test_str():
    assert str(Not(Variable("p"))) == "~(\n  p\n)"
    assert str(Literal(False)) == "0"
