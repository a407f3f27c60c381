"""
Graphviz export of parsed expressions.

The output is DOT text, see https://graphviz.org/doc/info/lang.html. Render
it with `dot -Tpng expression.dot -o expression.png`.
"""

from collections import deque
import logging
from pathlib import Path

from .nodes import Literal, Node, Variable

logger = logging.getLogger(__name__)


def node_definition(number: int, node: Node) -> str:
    match node:
        case Literal() | Variable():
            return f'    {number} [label="{node.label}"]'
        case _:
            return f'    {number} [label="{node.label}" shape="box"]'


def to_dot(node: Node, name: str = "G") -> str:
    """
    One declaration per node and one edge per parent/child pair, nodes are
    numbered breadth first starting with the root at 0
    """
    definitions = []
    relations = []

    counter = 0
    queue = deque([(counter, node)])

    while queue:
        number, current = queue.popleft()
        definitions.append(node_definition(number, current))
        for child in current.children:
            counter += 1
            relations.append(f"    {number} -> {counter}")
            queue.append((counter, child))

    return "\n".join([f"digraph {name} {{", *definitions, *relations, "}"]) + "\n"


def write_dot(node: Node, path, name: str = "G") -> Path:
    path = Path(path)
    path.write_text(to_dot(node, name))
    logger.info("wrote expression graph to %s", path)
    return path
