from calculator import Parser, Scanner
from calculator.tree.printer import Printer

from calculator.tree.tree import (  # isort:skip
    AddNode,
    ExponentNode,
    FactorialNode,
    MultiplyNode,
    Node,
    NumberNode,
    SqrtNode,
    SubtractNode,
)


def parse(equation: str) -> Node:
    return Parser(equation).parse(Scanner(equation).scan())


def test_print(valid_equation):
    # Ensure that the pretty print results in the same AST as the original equation
    equation, _ = valid_equation
    original_tree = parse(equation)

    equation_pprint = str(original_tree)
    pprint_tree = parse(equation_pprint)

    assert original_tree == pprint_tree
    assert str(original_tree) == str(pprint_tree)


def test_minimal_brackets():
    assert str(parse("((1 + 2)) + 3")) == "1 + 2 + 3"
    assert str(parse("1 + (2 * 3)")) == "1 + 2 * 3"
    assert str(parse("2 ^ 3 ^ 2")) == "2 ^ 3 ^ 2"


def test_required_brackets():
    tree = SubtractNode(NumberNode(1.0), SubtractNode(NumberNode(2.0), NumberNode(3.0)))
    assert Printer().print(tree) == "1 - (2 - 3)"

    tree = ExponentNode(NumberNode(2.0), ExponentNode(NumberNode(3.0), NumberNode(2.0)))
    assert Printer().print(tree) == "2 ^ (3 ^ 2)"

    tree = MultiplyNode(AddNode(NumberNode(1.0), NumberNode(2.0)), NumberNode(3.0))
    assert Printer().print(tree) == "(1 + 2) * 3"


def test_factorial():
    assert str(FactorialNode(NumberNode(5.0))) == "5!"
    assert str(FactorialNode(SqrtNode(NumberNode(16.0)))) == "(sqrt(16))!"
    assert str(SqrtNode(FactorialNode(NumberNode(16.0)))) == "sqrt(16!)"


def test_numbers():
    assert str(NumberNode(0.5)) == "0.5"
    assert str(NumberNode(1e20)) == "100000000000000000000"
    assert str(NumberNode(1e-7)) == "0.0000001"


def test_deep_tree():
    tree = NumberNode(1.0)
    for _ in range(5000):
        tree = AddNode(tree, NumberNode(1.0))
    assert str(tree) == "1" + " + 1" * 5000
