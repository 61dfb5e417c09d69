import pytest

from calculator import Scanner, Token, Type
from calculator.util import Span

from calculator.error.scanner_error import (  # isort:skip
    MalformedNumberError,
    ScannerException,
    UnexpectedCharacterError,
    UnrecognizedFunctionError,
)


def test_scan():
    scanner = Scanner("sqrt(16) + 2.5 * 3!")
    tokens = scanner.scan()

    expected = [
        Token("sqrt", Type.SQRT),
        Token("(", Type.LRB),
        Token("16", Type.NUMBER),
        Token(")", Type.RRB),
        Token("+", Type.PLUS),
        Token("2.5", Type.NUMBER),
        Token("*", Type.STAR),
        Token("3", Type.NUMBER),
        Token("!", Type.FACTORIAL),
    ]
    assert tokens == expected


def test_operators():
    tokens = Scanner("+-*/()^!").scan()
    assert [token.type for token in tokens] == [
        Type.PLUS,
        Type.MINUS,
        Type.STAR,
        Type.SLASH,
        Type.LRB,
        Type.RRB,
        Type.POWER,
        Type.FACTORIAL,
    ]


def test_functions():
    tokens = Scanner("sqrt ln sin cos tan").scan()
    assert [token.type for token in tokens] == [
        Type.SQRT,
        Type.LN,
        Type.SIN,
        Type.COS,
        Type.TAN,
    ]


def test_empty():
    assert Scanner("").scan() == []
    assert Scanner(" \t\n ").scan() == []


def test_whitespace():
    assert Scanner("1+2").scan() == Scanner(" 1 +   2 ").scan()
    assert Scanner("1\n+\t2").scan() == Scanner("1+2").scan()


def test_number_value():
    tokens = Scanner("12.50 7 3.").scan()
    assert [token.value for token in tokens] == [12.5, 7.0, 3.0]
    # Numbers are equal by value, not by text
    assert tokens[0] == Token("12.5", Type.NUMBER)


def test_number_then_function():
    # A digit run ends where the letters begin
    tokens = Scanner("2sin(30)").scan()
    assert [token.type for token in tokens][:2] == [Type.NUMBER, Type.SIN]


def test_span():
    tokens = Scanner("1 +\n  23").scan()
    assert tokens[0].span == Span(1, (0, 1))
    assert tokens[1].span == Span(1, (2, 3))
    assert tokens[2].span == Span(2, (2, 4))


def test_UnexpectedCharacterError():
    scanner = Scanner("1 + @")

    with pytest.raises(ScannerException) as excinfo:
        scanner.scan()
    assert isinstance(excinfo.value.errors[0], UnexpectedCharacterError)
    assert (
        "ScannerError" in str(excinfo.value)
        and "'@'" in str(excinfo.value)
        and "-> 1. " in str(excinfo.value)
    )


def test_UnexpectedCharacterError_non_ascii():
    with pytest.raises(ScannerException) as excinfo:
        Scanner("2 × 3").scan()
    assert isinstance(excinfo.value.errors[0], UnexpectedCharacterError)
    assert "'×'" in str(excinfo.value)


def test_UnrecognizedFunctionError():
    scanner = Scanner("foo(1)")

    with pytest.raises(ScannerException) as excinfo:
        scanner.scan()
    assert isinstance(excinfo.value.errors[0], UnrecognizedFunctionError)
    assert "'foo'" in str(excinfo.value) and "not implemented" in str(excinfo.value)


@pytest.mark.parametrize("equation", ["Sin(90)", "sin90", "sqrt2(4)", "x"])
def test_UnrecognizedFunctionError_keywords(equation: str):
    # Keywords are case-sensitive and identifiers are matched greedily
    with pytest.raises(ScannerException) as excinfo:
        Scanner(equation).scan()
    assert isinstance(excinfo.value.errors[0], UnrecognizedFunctionError)


def test_MalformedNumberError():
    with pytest.raises(ScannerException) as excinfo:
        Scanner("1 + 1.2.3").scan()
    assert isinstance(excinfo.value.errors[0], MalformedNumberError)
    assert "'1.2.3'" in str(excinfo.value)


def test_multiline_error():
    with pytest.raises(ScannerException) as excinfo:
        Scanner("1 +\n2 $ 3").scan()
    assert "line [2]" in str(excinfo.value) and "-> 2. " in str(excinfo.value)
