from .environment import NullEnvironment
from .errors import UnboundVariable
from .nodes import And, Iff, Implies, Literal, Node, Not, Or, Variable


def evaluate(node: Node, env=None) -> bool:
    """
    Reduces `node` to a boolean, looking variables up in `env`.

    Both operands of a binary operator are always evaluated, left first, so an
    unbound variable is reported even where the result would not depend on it.
    The walk keeps its own stack, nesting depth is not bounded by recursion.
    """
    env = NullEnvironment() if env is None else env

    values = []
    # (node, children already evaluated)
    stack = [(node, False)]

    while stack:
        current, expanded = stack.pop()

        if not expanded and current.children:
            stack.append((current, True))
            # Reversed so the left child is popped first
            stack.extend((child, False) for child in reversed(current.children))
            continue

        match current:
            case Literal(value):
                values.append(value)
            case Variable(name):
                value = env.lookup(name)
                if value is None:
                    raise UnboundVariable(name)
                values.append(value)
            case Not():
                values.append(not values.pop())
            case And() | Or() | Implies() | Iff():
                r = values.pop()
                l = values.pop()
                values.append(apply_binary(current, l, r))
            case _:
                raise TypeError(f"cannot evaluate {current!r}")

    return values.pop()


def apply_binary(node, l, r):
    match node:
        case And():
            return l and r
        case Or():
            return l or r
        case Implies():
            return not l or r
        case Iff():
            return l == r
