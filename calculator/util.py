from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Tuple

from icecream import IceCreamDebugger


@dataclass
class Span:
    ln: Tuple[int, int]
    col: Tuple[int, int]

    @property
    def start_ln(self) -> int:
        return self.ln[0]

    @property
    def end_ln(self) -> int:
        return self.ln[1]

    @property
    def start_col(self) -> int:
        return self.col[0]

    @property
    def end_col(self) -> int:
        return self.col[1]

    @property
    def multiline(self) -> bool:
        return self.start_ln != self.end_ln

    @property
    def lines_str(self) -> str:
        if self.multiline:
            return f"lines [{self.start_ln}-{self.end_ln}]"
        return f"line [{self.start_ln}]"

    @classmethod
    def default(cls):
        return cls(1, (0, 0))

    def __init__(self, line_no: int | Tuple[int, int], span: Tuple[int, int]) -> None:
        if isinstance(line_no, int):
            self.ln = (line_no, line_no)
        else:
            self.ln = line_no
        self.col = span

    def __and__(self, other: Span) -> Span:
        # Determine the correct columns based on the starting line
        if self.start_ln < other.start_ln:
            col = (self.start_col, other.end_col)
        elif self.start_ln > other.start_ln:
            col = (other.start_col, self.end_col)
        else:
            col = (
                min(self.start_col, other.start_col),
                max(self.end_col, other.end_col),
            )

        return Span(
            line_no=(
                min(self.start_ln, other.start_ln),
                max(self.end_ln, other.end_ln),
            ),
            span=col,
        )


# Largest n for which n! still fits in a 64-bit float
MAX_FACTORIAL = 170

# Deepest bracket nesting the recursive descent parser accepts, each level
# takes eight frames of the recursion limit set in calculator/__init__.py
MAX_DEPTH = 400

ANSWER_FORMAT = "The answer is: {answer}"


def tracer(enabled: bool) -> IceCreamDebugger:
    """Create an icecream debugger for tracing the pipeline stages on stderr.

    Args:
        enabled (bool): Whether calls to the debugger produce output.

    Returns:
        IceCreamDebugger: A debugger, called like `ic(...)`.
    """
    debugger = IceCreamDebugger(
        prefix="calculator | ",
        outputFunction=lambda text: print(text, file=sys.stderr),
    )
    debugger.enabled = enabled
    return debugger


class Colors:
    RED = "\033[31m"
    ENDC = "\033[m"
