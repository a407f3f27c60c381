"""
Evaluator for a small propositional logic language.

    >>> from proplogic import solve
    >>> solve("p := 1\\nq := 0\\n~p v ~q")
    True

Operators from loosest to tightest: `<=>`, `=>`, `v`, `^`, `~`.
"""

from .environment import Environment, NullEnvironment
from .errors import (
    DuplicateAssignment,
    EmptyProgram,
    EvalError,
    LexError,
    LogicError,
    ParseError,
    UnboundVariable,
)
from .evaluator import evaluate
from .graph import to_dot, write_dot
from .lexer import Lexer, TokenKind, Tokenlib, tokenize
from .nodes import And, Iff, Implies, Literal, Node, Not, Or, Variable, walk, variables
from .parser import Parser, parse
from .truth_table import format_truth_table, generate_truth_table


def solve(string):
    env = Environment()
    return evaluate(parse(string, env), env)


__all__ = [
    "And",
    "DuplicateAssignment",
    "EmptyProgram",
    "Environment",
    "EvalError",
    "Iff",
    "Implies",
    "LexError",
    "Lexer",
    "Literal",
    "LogicError",
    "Node",
    "Not",
    "NullEnvironment",
    "Or",
    "ParseError",
    "Parser",
    "TokenKind",
    "Tokenlib",
    "UnboundVariable",
    "Variable",
    "evaluate",
    "format_truth_table",
    "generate_truth_table",
    "parse",
    "solve",
    "to_dot",
    "tokenize",
    "variables",
    "walk",
    "write_dot",
]
