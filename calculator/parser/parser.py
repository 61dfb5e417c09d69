from typing import Callable, List, Optional, Tuple

from calculator.token import Token
from calculator.type import Type
from calculator.util import MAX_DEPTH, Span, tracer

from calculator.tree.tree import (  # isort:skip
    BINARY_NODES,
    FUNCTION_NODES,
    FactorialNode,
    Node,
    NumberNode,
)

from calculator.error.parser_error import (  # isort:skip
    NestingTooDeepError,
    TrailingTokenError,
    UnclosedBracketError,
    UnexpectedEndError,
    UnexpectedTokenError,
)


class Parser:
    """
    Recursive descent parser, with one method per precedence level:

        Add   := Mult (('+' | '-') Mult)*
        Mult  := Expo (('*' | '/') Expo)*
        Expo  := Func ('^' Func)*
        Func  := ('sqrt' | 'ln' | 'sin' | 'cos' | 'tan') Paren | Paren
        Paren := '(' Add ')' ['!'] | Number
        Number:= NUMBER ['!']

    All binary operators are left associative, including '^'.
    """

    def __init__(self, program: str, trace: bool = False) -> None:
        self.og_program = program
        self.ic = tracer(trace)

        self.tokens: List[Token] = []
        self.pos = 0
        self.depth = 0

    def parse(self, tokens: List[Token]) -> Node:
        """Given a list of Tokens from the scanner, produce an Abstract Syntax Tree
        that represents the entire equation.

        Parser errors are raised if the tokens do not form exactly one expression.

        Args:
            tokens (List[Token]): A list of tokens, produced by `Scanner(program).scan()`

        Returns:
            Node: The root of the AST.
        """
        self.tokens = tokens
        self.pos = 0
        self.depth = 0

        tree = self.parse_add()

        # Every token must be part of the tree
        token = self.peek()
        if token is not None:
            TrailingTokenError(self.og_program, token.span, token)

        # The dataclass repr of a deep tree is recursive, the printer is not
        if self.ic.enabled:
            self.ic(str(tree))
        return tree

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def next(self, expected: str = "a token") -> Token:
        token = self.peek()
        if token is None:
            UnexpectedEndError(self.og_program, self.end_span(), expected)
        self.pos += 1
        return token

    def end_span(self) -> Span:
        # Point just past the last token, if there is one
        if not self.tokens:
            return Span.default()
        last = self.tokens[-1].span
        return Span(last.end_ln, (last.end_col, last.end_col + 1))

    def parse_binary(
        self, operators: Tuple[Type, ...], parse_operand: Callable[[], Node]
    ) -> Node:
        # Fold operators of the same precedence into the left operand,
        # which makes them left associative
        node = parse_operand()
        while (token := self.peek()) is not None and token.type in operators:
            self.next()
            right = parse_operand()
            node = BINARY_NODES[token.type](node, right, span=node.span & right.span)
        return node

    def parse_add(self) -> Node:
        return self.parse_binary((Type.PLUS, Type.MINUS), self.parse_mult)

    def parse_mult(self) -> Node:
        return self.parse_binary((Type.STAR, Type.SLASH), self.parse_expo)

    def parse_expo(self) -> Node:
        return self.parse_binary((Type.POWER,), self.parse_func)

    def parse_func(self) -> Node:
        token = self.peek()
        if token is None or token.type not in FUNCTION_NODES:
            return self.parse_paren()

        self.next()
        # The argument of a function must always be parenthesized
        opening = self.peek()
        if opening is None:
            UnexpectedEndError(
                self.og_program, self.end_span(), f"a '(' after {token.type}"
            )
        if opening.type != Type.LRB:
            UnexpectedTokenError(
                self.og_program, opening.span, opening, f"a '(' after {token.type}"
            )
        argument = self.parse_paren()
        return FUNCTION_NODES[token.type](argument, span=token.span & argument.span)

    def parse_paren(self) -> Node:
        expected = "a number, a '(' or a function"
        token = self.peek()
        if token is None:
            UnexpectedEndError(self.og_program, self.end_span(), expected)

        match token.type:
            case Type.LRB:
                self.next()
                self.depth += 1
                if self.depth > MAX_DEPTH:
                    NestingTooDeepError(self.og_program, token.span, MAX_DEPTH)
                expression = self.parse_add()
                self.depth -= 1
                closing = self.peek()
                if closing is None or closing.type != Type.RRB:
                    UnclosedBracketError(self.og_program, token.span, token.type, closing)
                self.next()
                return self.parse_factorial(expression, token.span & closing.span)

            case Type.NUMBER:
                return self.parse_num()

        UnexpectedTokenError(self.og_program, token.span, token, expected)

    def parse_num(self) -> Node:
        token = self.next("a number")
        node = NumberNode(token.value, span=token.span)
        return self.parse_factorial(node, token.span)

    def parse_factorial(self, node: Node, span: Span) -> Node:
        # A '!' may directly follow a number or a closing bracket
        token = self.peek()
        if token is not None and token.type == Type.FACTORIAL:
            self.next()
            return FactorialNode(node, span=span & token.span)
        return node
