import os

from miischeme.environment import Environment
from miischeme.parser import parse_many
from miischeme.tokenizer import Tokenizer

PRELUDE_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'prelude.mii')


def parse_expr(program):
    tokens = Tokenizer().tokenize(program)
    return parse_many(tokens)


def eval_expr(program, inpr, env):
    """ Evaluates every expression of the program in order, returns the last value """
    result = None
    for expression in parse_expr(program):
        result = inpr.evaluate(expression, env)
    return result


def run_line(text, inpr, env):
    """ One iteration of the REPL: blank lines evaluate to nothing """
    if not text.strip():
        return None
    return eval_expr(text, inpr, env)


def load_prelude(inpr, env=None):
    env = env if env is not None else Environment.new()
    with open(PRELUDE_PATH, encoding='utf-8') as f:
        eval_expr(f.read(), inpr, env)
    return env
