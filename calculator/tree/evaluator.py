import math

import numpy as np

from calculator.tree.visitor import PostOrderVisitor
from calculator.util import MAX_FACTORIAL

from calculator.tree.tree import (  # isort:skip
    AddNode,
    CosNode,
    DivideNode,
    ExponentNode,
    FactorialNode,
    LnNode,
    MultiplyNode,
    Node,
    NumberNode,
    SinNode,
    SqrtNode,
    SubtractNode,
    TanNode,
)


class Evaluator(PostOrderVisitor):
    """
    Reduce an AST to a single float, by evaluating the children of a node before
    applying the operator of the node itself.

    All arithmetic happens on `np.float64` with floating point errors ignored, so
    e.g. division by zero results in `inf` or `nan` rather than an exception.
    """

    def evaluate(self, tree: Node) -> float:
        with np.errstate(all="ignore"):
            return float(self.reduce(tree))

    def visit_NumberNode(self, node: NumberNode) -> np.float64:
        return np.float64(node.value)

    def visit_AddNode(self, node: AddNode, left, right) -> np.float64:
        return left + right

    def visit_SubtractNode(self, node: SubtractNode, left, right) -> np.float64:
        return left - right

    def visit_MultiplyNode(self, node: MultiplyNode, left, right) -> np.float64:
        return left * right

    def visit_DivideNode(self, node: DivideNode, left, right) -> np.float64:
        return left / right

    def visit_ExponentNode(self, node: ExponentNode, left, right) -> np.float64:
        return np.power(left, right)

    # Trigonometric functions take their angle in degrees
    def visit_SinNode(self, node: SinNode, angle) -> np.float64:
        return np.sin(np.radians(angle))

    def visit_CosNode(self, node: CosNode, angle) -> np.float64:
        return np.cos(np.radians(angle))

    def visit_TanNode(self, node: TanNode, angle) -> np.float64:
        return np.tan(np.radians(angle))

    def visit_SqrtNode(self, node: SqrtNode, value) -> np.float64:
        return np.sqrt(value)

    def visit_LnNode(self, node: LnNode, value) -> np.float64:
        return np.log(value)

    def visit_FactorialNode(self, node: FactorialNode, value) -> np.float64:
        """Compute the product of 1 up to and including the operand truncated to an integer.

        Truncation silently drops the fractional part, so `5.9!` equals `5!`. Operands
        that truncate to 0 or less (and `nan`) give the empty product 1, and operands
        whose factorial exceeds the float range give `inf`.
        """
        if np.isnan(value) or value < 1:
            return np.float64(1.0)
        if value >= MAX_FACTORIAL + 1:
            return np.float64(np.inf)
        return np.float64(math.factorial(int(value)))
