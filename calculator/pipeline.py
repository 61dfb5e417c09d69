import math

from calculator.parser.parser import Parser
from calculator.scanner.scanner import Scanner
from calculator.util import ANSWER_FORMAT, tracer


def calculate(equation: str, trace: bool = False) -> float:
    """Scan, parse and evaluate an equation.

    Args:
        equation (str): The equation, e.g. "2 + 3 * 4".
        trace (bool): Print the tokens, tree and answer to stderr. Defaults to False.

    Raises:
        ScannerException: If the equation contains illegal characters or functions.
        ParserException: If the tokens do not form a single expression.

    Returns:
        float: The answer, which may be `nan` or infinite.
    """
    # Perform scanning on the input equation
    scanner = Scanner(equation, trace=trace)
    tokens = scanner.scan()

    # Perform parsing on the scanned tokens
    parser = Parser(equation, trace=trace)
    tree = parser.parse(tokens)

    answer = tree.evaluate()
    tracer(trace)(answer)
    return answer


def format_answer(answer: float) -> str:
    # Two decimals, with nan written as NaN
    if math.isnan(answer):
        value = "NaN"
    else:
        value = f"{answer:.2f}"
    return ANSWER_FORMAT.format(answer=value)
