from calculator.error.error import CalculatorError, CalculatorException


class ScannerException(CalculatorException):
    pass


class ScannerError(CalculatorError):
    stage = ScannerException

    def create_error(self, before: str, after=""):
        return super().create_error(before, class_name="ScannerError", after=after)


class UnexpectedCharacterError(ScannerError):
    def __str__(self) -> str:
        return self.create_error(
            f"Unexpected character {self.error_chars!r} on {self.span.lines_str}."
        )


class UnrecognizedFunctionError(ScannerError):
    def __str__(self) -> str:
        return self.create_error(
            f"Function {self.error_chars!r} on {self.span.lines_str} is not implemented.",
            "Supported functions are 'sqrt', 'ln', 'sin', 'cos' and 'tan'.",
        )


class MalformedNumberError(ScannerError):
    def __str__(self) -> str:
        return self.create_error(
            f"Malformed number {self.error_chars!r} on {self.span.lines_str}.",
            "A number may contain at most one decimal point.",
        )
