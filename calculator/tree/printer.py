import numpy as np

from calculator.tree.visitor import PostOrderVisitor

from calculator.tree.tree import (  # isort:skip
    BINARY_NODES,
    FUNCTION_NODES,
    AddNode,
    BinaryNode,
    DivideNode,
    ExponentNode,
    FactorialNode,
    MultiplyNode,
    Node,
    NumberNode,
    SubtractNode,
)

OPERATORS = {node: token_type for token_type, node in BINARY_NODES.items()}
FUNCTIONS = {node: token_type for token_type, node in FUNCTION_NODES.items()}

# Binding strength of each node as an operand, higher binds tighter.
# Numbers, factorials and function calls are atoms.
PRECEDENCE = {
    AddNode: 1,
    SubtractNode: 1,
    MultiplyNode: 2,
    DivideNode: 2,
    ExponentNode: 3,
}
ATOM = 4


class Printer(PostOrderVisitor):
    """
    Print an AST as an equation that parses back into the same AST, using
    as few parentheses as possible.
    """

    def print(self, tree: Node) -> str:
        return self.reduce(tree)

    def precedence(self, node: Node) -> int:
        return PRECEDENCE.get(node.__class__, ATOM)

    def wrap(self, text: str) -> str:
        return f"({text})"

    def visit_NumberNode(self, node: NumberNode) -> str:
        # Never use scientific notation, the scanner cannot read it
        return np.format_float_positional(node.value, trim="-")

    def visit_binary(self, node: BinaryNode, left: str, right: str) -> str:
        precedence = self.precedence(node)
        # All binary operators are left associative, so only a right operand
        # of the same precedence needs parentheses
        if self.precedence(node.left) < precedence:
            left = self.wrap(left)
        if self.precedence(node.right) <= precedence:
            right = self.wrap(right)
        return f"{left} {OPERATORS[node.__class__].value} {right}"

    visit_AddNode = visit_binary
    visit_SubtractNode = visit_binary
    visit_MultiplyNode = visit_binary
    visit_DivideNode = visit_binary
    visit_ExponentNode = visit_binary

    def visit_function(self, node: Node, argument: str) -> str:
        return FUNCTIONS[node.__class__].value + self.wrap(argument)

    visit_SqrtNode = visit_function
    visit_LnNode = visit_function
    visit_SinNode = visit_function
    visit_CosNode = visit_function
    visit_TanNode = visit_function

    def visit_FactorialNode(self, node: FactorialNode, operand: str) -> str:
        # Only numbers and parenthesized expressions may precede a '!'
        if isinstance(node.expr, NumberNode):
            return operand + "!"
        return self.wrap(operand) + "!"
