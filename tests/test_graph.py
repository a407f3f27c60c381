import pytest

from proplogic.graph import to_dot, write_dot
from proplogic.nodes import walk
from proplogic.parser import parse


def test_dot_output():
    assert to_dot(parse("1 ^ ~p")) == (
        "digraph G {\n"
        '    0 [label="^" shape="box"]\n'
        '    1 [label="1"]\n'
        '    2 [label="~" shape="box"]\n'
        '    3 [label="p"]\n'
        "    0 -> 1\n"
        "    0 -> 2\n"
        "    2 -> 3\n"
        "}\n"
    )


def test_graph_name():
    assert to_dot(parse("0"), name="Expression").startswith("digraph Expression {")


@pytest.mark.parametrize(
    "string",
    [
        "1",
        "~p",
        "a <=> b",
        "p := 1\n(p v q) => ~(r ^ 0) <=> s",
        "~~~(a ^ b ^ c ^ d)",
    ],
)
def test_one_declaration_per_node_and_one_edge_per_child(string):
    ast = parse(string)
    lines = to_dot(ast).splitlines()

    count = len(list(walk(ast)))

    assert len([line for line in lines if "[label=" in line]) == count
    assert len([line for line in lines if "->" in line]) == count - 1


def test_write_dot(tmp_path):
    ast = parse("a v 0")

    path = write_dot(ast, tmp_path / "expression.dot")

    assert path.read_text() == to_dot(ast)
