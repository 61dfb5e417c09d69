import sys

from calculator.pipeline import calculate, format_answer
from calculator.parser.parser import Parser
from calculator.scanner.scanner import Scanner
from calculator.token import Token
from calculator.tree.evaluator import Evaluator
from calculator.type import Type

# Default is 1000, deeply nested brackets need more
sys.setrecursionlimit(5000)
