from __future__ import annotations

from enum import Enum


class Type(Enum):
    LRB = "("
    RRB = ")"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    POWER = "^"
    FACTORIAL = "!"
    SQRT = "sqrt"
    LN = "ln"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    NUMBER = "number"

    def to_type(type_str: str):
        return Type[type_str]

    @staticmethod
    def function(name: str) -> Type | None:
        # Keywords are case-sensitive: "Sin" is not a function
        match name:
            case "sqrt" | "ln" | "sin" | "cos" | "tan":
                return Type(name)
        return None

    def __str__(self) -> str:
        match self:
            case Type.NUMBER:
                return "number"
            case Type.SQRT | Type.LN | Type.SIN | Type.COS | Type.TAN:
                return f"function {self.value!r}"
        return repr(self.value)
