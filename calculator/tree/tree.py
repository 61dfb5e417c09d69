from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Iterator, Tuple

from calculator.type import Type
from calculator.util import Span


@dataclass
class Node:
    span: Span = field(repr=False, kw_only=True, compare=False, default=None)

    def __str__(self) -> str:
        from calculator.tree.printer import Printer

        printer = Printer()
        return printer.print(self)

    def iter_fields(self) -> Iterator[Tuple[str, Node]]:
        # Yield the child nodes, the span is not a child
        for _field in fields(self):
            value = getattr(self, _field.name)
            if isinstance(value, Node):
                yield _field.name, value

    def evaluate(self) -> float:
        from calculator.tree.evaluator import Evaluator

        evaluator = Evaluator()
        return evaluator.evaluate(self)


@dataclass
class NumberNode(Node):
    value: float


@dataclass
class BinaryNode(Node):
    left: Node
    right: Node


@dataclass
class AddNode(BinaryNode):
    pass


@dataclass
class SubtractNode(BinaryNode):
    pass


@dataclass
class MultiplyNode(BinaryNode):
    pass


@dataclass
class DivideNode(BinaryNode):
    pass


@dataclass
class ExponentNode(BinaryNode):
    pass


@dataclass
class FactorialNode(Node):
    expr: Node


@dataclass
class SqrtNode(Node):
    expr: Node


@dataclass
class LnNode(Node):
    expr: Node


@dataclass
class SinNode(Node):
    angle: Node


@dataclass
class CosNode(Node):
    angle: Node


@dataclass
class TanNode(Node):
    angle: Node


BINARY_NODES = {
    Type.PLUS: AddNode,
    Type.MINUS: SubtractNode,
    Type.STAR: MultiplyNode,
    Type.SLASH: DivideNode,
    Type.POWER: ExponentNode,
}

FUNCTION_NODES = {
    Type.SQRT: SqrtNode,
    Type.LN: LnNode,
    Type.SIN: SinNode,
    Type.COS: CosNode,
    Type.TAN: TanNode,
}
