import re
from typing import List

from calculator.token import Token
from calculator.type import Type
from calculator.util import Span, tracer

from calculator.error.scanner_error import (  # isort:skip
    MalformedNumberError,
    UnexpectedCharacterError,
    UnrecognizedFunctionError,
)


class Scanner:
    def __init__(self, program: str, trace: bool = False) -> None:
        self.og_program = program
        self.ic = tracer(trace)

        self.pattern = re.compile(
            r"""
                (?P<LRB>\()| # Left Round Bracket
                (?P<RRB>\))| # Right Round Bracket
                (?P<PLUS>\+)|
                (?P<MINUS>\-)|
                (?P<STAR>\*)|
                (?P<SLASH>\/)|
                (?P<POWER>\^)|
                (?P<FACTORIAL>\!)|
                # Numbers start with a digit, and may then contain any digits or dots
                (?P<NUMBER>[0-9][0-9.]*)|
                # Function names start with a letter
                (?P<FUNCTION>[a-zA-Z][a-zA-Z0-9]*)|
                (?P<SPACE>\s)|
                (?P<ERROR>.)
            """,
            flags=re.X,
        )

    def scan(self) -> List[Token]:
        """Extract the list of tokens from the equation passed to `Scanner(program)`.

        Scanner errors are raised on the first illegal token, e.g. an unknown function
        name or a character that is not part of the equation syntax.

        Returns:
            List[Token]: A list of Token instances
        """
        lines = self.og_program.splitlines()

        # Extract the tokens from the lines line by line
        tokens = [
            token
            for line_no, line in enumerate(lines, start=1)
            for token in self.scan_line(line, line_no)
        ]
        self.ic(tokens)
        return tokens

    def scan_line(self, line: str, line_no: int) -> List[Token]:
        tokens = []
        for match in self.pattern.finditer(line):
            span = Span(line_no, match.span())
            match match.lastgroup:
                case "SPACE":
                    continue
                case "ERROR":
                    UnexpectedCharacterError(self.og_program, span)
                case "NUMBER":
                    try:
                        value = float(match[0])
                    except ValueError:
                        MalformedNumberError(self.og_program, span)
                    tokens.append(Token(match[0], Type.NUMBER, span, value))
                case "FUNCTION":
                    function = Type.function(match[0])
                    if function is None:
                        UnrecognizedFunctionError(self.og_program, span)
                    tokens.append(Token(match[0], function, span))
                case _:
                    tokens.append(Token(match[0], match.lastgroup, span))
        return tokens
