from typing import List

from calculator.util import Colors, Span


# Class used to create messages, which can be communicated to the user
class Communicator:

    # Creates an appropriate message string from the given arguments
    @staticmethod
    def create_message(
        program: str,
        span: Span,
        class_name="CalculatorError",
        before: str = "",
        after: str = "",
        n_before: int = 1,
        n_after: int = 1,
        color=Colors.RED,
    ) -> str:
        lines = program.splitlines()
        error_lines = lines[
            max(0, span.start_ln - n_before - 1) : span.end_ln + n_after
        ]
        start_line_no = max(1, span.start_ln - n_before)
        end_line_no = start_line_no + len(error_lines) - 1
        final_error_lines = []
        for i, line in enumerate(error_lines, start=start_line_no):
            # Align the line numbers, e.g. ' 9.' above '10.'
            padding = " " * (len(str(end_line_no)) - len(str(i)))
            if not span.start_ln <= i <= span.end_ln:
                final_error_lines.append(f"   {padding}{i}. {line}")
                continue

            # Only color from the start column on the first line,
            # and up until the end column on the last line
            start = span.start_col if i == span.start_ln else 0
            end = span.end_col if i == span.end_ln else len(line)
            final_error_lines.append(
                f"-> {padding}{i}. {line[:start]}{color}{line[start:end]}{Colors.ENDC}{line[end:]}"
            )

        message = class_name + ": " + before
        if final_error_lines:
            message += "\n" + "\n".join(final_error_lines)
        if after:
            message += "\n" + after
        return message

    # Communicates the errors to the user by raising them as the exception
    # belonging to the stage in which they occurred
    @staticmethod
    def communicate(stage_of_exception, errors: List) -> None:
        if errors:
            message = "\n\n".join(str(error) for error in errors)
            raise stage_of_exception(message, errors)
