from dataclasses import dataclass, field
from typing import List, Optional

from calculator.error.communicator import Communicator
from calculator.util import Span


# Python exceptions to differentiate the stage in which errors are thrown
class CalculatorException(Exception):
    def __init__(self, message: str, errors: Optional[List] = None) -> None:
        super().__init__(message)
        # The CalculatorError instances that caused this exception
        self.errors = errors or []


@dataclass
class CalculatorError:
    program: str
    span: Span
    n_before: int = field(init=False, default=1)
    n_after: int = field(init=False, default=1)

    # The exception raised when an error of this class occurs
    stage = CalculatorException

    # Errors are unrecoverable: raise immediately when one is created
    def __post_init__(self) -> None:
        Communicator.communicate(self.stage, [self])

    def create_error(
        self, before: str = "", after: str = "", class_name="CalculatorError"
    ):
        return Communicator.create_message(
            self.program,
            self.span,
            class_name,
            before,
            after,
            self.n_before,
            self.n_after,
        )

    # Give the characters that caused the error to be thrown
    @property
    def error_chars(self) -> str:
        lines = self.program.splitlines()
        if not 0 < self.span.start_ln <= len(lines):
            return ""
        error_line = lines[self.span.start_ln - 1]
        return error_line[self.span.start_col : self.span.end_col]
