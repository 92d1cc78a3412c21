from pytest import fixture

from evalexpr.calculator import Calculator
from evalexpr.lexer import Lexer
from evalexpr.machine import Machine
from evalexpr.parser import Parser


@fixture
def lexer() -> Lexer:
    return Lexer()


@fixture
def parser() -> Parser:
    return Parser()


@fixture
def machine() -> Machine:
    return Machine()


@fixture
def calculator() -> Calculator:
    '''
    Calculator with builtins and nothing else.
    '''
    return Calculator()
