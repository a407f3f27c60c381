import itertools

import pandas as pd

from .environment import Environment
from .evaluator import evaluate
from .nodes import variables
from .parser import Parser


def boolean_permutation(length):
    return itertools.product([True, False], repeat=length)


def generate_truth_table(inp, parser=None):
    """
    Returns pandas dataframe

    Variables assigned in `inp` keep their value, every other variable of the
    final expression gets a column and is enumerated over True and False. The
    last column holds the value of the expression and is named after the
    expression line.
    """
    parser = parser or Parser()
    bound = Environment()
    p = parser.parse(inp, bound)

    free = [var for var in variables(p) if var not in bound]

    result = inp.strip().splitlines()[-1].strip()
    # A lone variable would share its column name with the result
    if result in free:
        result = f"({result})"

    headers = [*free, result]
    rows = []

    for perm in boolean_permutation(len(free)):
        env = Environment({name: bound.lookup(name) for name in bound})
        for var, val in zip(free, perm):
            env.bind(var, val)
        rows.append([*perm, evaluate(p, env)])

    return pd.DataFrame(rows, columns=headers)


def format_truth_table(inp, parser=None):
    return generate_truth_table(inp, parser).to_string(index=False)
