import sys
from typing import List, Optional

from calculator.pipeline import calculate, format_answer
from calculator.error.error import CalculatorException


def main(argv: Optional[List[str]] = None) -> int:
    """Evaluate the equation given as the first argument and print the answer.

    Every outcome exits with status 0, errors are only reported on stderr.
    """
    args = sys.argv[1:] if argv is None else argv
    if not args or not args[0]:
        print("Expected argument equation, found no arguments", file=sys.stderr)
        return 0

    try:
        answer = calculate(args[0])
    except CalculatorException as e:
        print(e, file=sys.stderr)
        return 0
    except Exception as e:
        # Every outcome is reported, never as a traceback
        print(f"{e.__class__.__name__}: {e}", file=sys.stderr)
        return 0

    print(format_answer(answer))
    return 0


if __name__ == "__main__":
    sys.exit(main())
