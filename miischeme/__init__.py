from miischeme.environment import Environment
from miischeme.evaluator import Evaluator, evaluate
from miischeme.parser import parse, parse_many
from miischeme.tokenizer import tokenize

__version__ = '0.1.0'
