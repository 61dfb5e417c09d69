from dataclasses import dataclass
from typing import Optional

from calculator.error.error import CalculatorError, CalculatorException
from calculator.token import Token
from calculator.type import Type


class ParserException(CalculatorException):
    pass


class ParserError(CalculatorError):
    stage = ParserException

    def create_error(self, before: str, after="", class_name="SyntaxError"):
        return super().create_error(before, class_name=class_name, after=after)


@dataclass
class UnclosedBracketError(ParserError):
    bracket: Type
    got: Optional[Token]

    def __str__(self) -> str:
        after = "Expected a ')'"
        if self.got:
            after += f", but got {self.got.text!r} instead on {self.got.span.lines_str} column {self.got.span.start_col}"
        return self.create_error(
            f"The {self.bracket} bracket on {self.span.lines_str} was never closed.",
            after + ".",
            class_name="BracketError",
        )


@dataclass
class UnexpectedTokenError(ParserError):
    got: Token
    expected: str

    def __str__(self) -> str:
        return self.create_error(
            f"Unexpected {self.got.text!r} on {self.span.lines_str} column {self.span.start_col}.",
            f"Expected {self.expected}.",
        )


@dataclass
class UnexpectedEndError(ParserError):
    expected: str

    def __str__(self) -> str:
        return self.create_error(
            "Unexpected end of the equation.",
            f"Expected {self.expected}.",
        )


@dataclass
class TrailingTokenError(ParserError):
    got: Token

    def __str__(self) -> str:
        return self.create_error(
            f"Unexpected {self.got.text!r} after the end of the expression on {self.span.lines_str}.",
            "Expected an operator or the end of the equation.",
        )


@dataclass
class NestingTooDeepError(ParserError):
    max_depth: int

    def __str__(self) -> str:
        return self.create_error(
            f"Brackets on {self.span.lines_str} are nested too deeply.",
            f"At most {self.max_depth} nested brackets are supported.",
        )
