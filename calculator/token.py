from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from calculator.type import Type
from calculator.util import Span


@dataclass
class Token:
    text: str
    type: Type = field(repr=False)
    span: Span = field(repr=False, default_factory=Span.default)
    value: Optional[float] = field(repr=False, default=None)

    def __post_init__(self) -> None:
        if not isinstance(self.type, Type):
            self.type = Type.to_type(self.type)
        if self.type == Type.NUMBER and self.value is None:
            self.value = float(self.text)

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, Token):
            return False
        if self.type == Type.NUMBER:
            return __o.type == Type.NUMBER and self.value == __o.value
        return self.text == __o.text and self.type == __o.type

    def __hash__(self) -> int:
        if self.type == Type.NUMBER:
            return hash(self.value)
        return hash(self.text)

    def __str__(self) -> str:
        return self.text
