from dataclasses import dataclass
from typing import ClassVar, Iterator


def pad_newlines_or_blank(string: str, padwith: str = "  "):
    if string:
        return "\n" + "\n".join([padwith + v for v in string.split("\n")]) + "\n"
    return ""


@dataclass(frozen=True)
class Node:
    symbol: ClassVar[str] = ""

    @property
    def children(self) -> tuple:
        return ()

    @property
    def label(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Literal(Node):
    value: bool

    @property
    def label(self):
        return "1" if self.value else "0"

    def __str__(self):
        return self.label


@dataclass(frozen=True)
class Variable(Node):
    name: str

    @property
    def label(self):
        return self.name

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Not(Node):
    symbol: ClassVar[str] = "~"

    child: Node

    @property
    def children(self):
        return (self.child,)

    def __str__(self):
        return f"{self.symbol}({pad_newlines_or_blank(str(self.child))})"


@dataclass(frozen=True)
class Binary(Node):
    left: Node
    right: Node

    @property
    def children(self):
        return (self.left, self.right)

    def __str__(self):
        return f"{self.symbol}({pad_newlines_or_blank(', '.join(map(str, self.children)))})"


@dataclass(frozen=True)
class And(Binary):
    symbol: ClassVar[str] = "^"


@dataclass(frozen=True)
class Or(Binary):
    symbol: ClassVar[str] = "v"


@dataclass(frozen=True)
class Implies(Binary):
    symbol: ClassVar[str] = "=>"


@dataclass(frozen=True)
class Iff(Binary):
    symbol: ClassVar[str] = "<=>"


def walk(node: Node) -> Iterator[Node]:
    """Pre-order traversal, left child before right"""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def variables(node: Node) -> list:
    """
    Names of the variables referenced by `node`, in order of first appearance
    """
    return list(dict.fromkeys(n.name for n in walk(node) if isinstance(n, Variable)))
