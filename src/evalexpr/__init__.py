'''
Infix arithmetic expression evaluator.

Supports decimal numbers, + - * / ^ %, parentheses, caller-supplied variables
and functions, and a small library of math builtins. Expressions are rewritten,
lexed, converted to postfix with the Shunting-yard algorithm, and run on a
stack machine.

    >>> from evalexpr import evaluate
    >>> evaluate('2^3^2')
    512.0
    >>> evaluate('hypot(3, 4) * r', {'r': 2})
    10.0

Division by zero follows IEEE-754 rather than raising. Everything else that
can go wrong raises a subclass of EvalError.
'''

import logging

from .calculator import Calculator, evaluate
from .lexer import Lexer, rewrite
from .library import Builtin, Function, merge_builtins
from .machine import Machine
from .parser import Parser
from .tokens import Kind, Token
from .util import (
    EvalError,
    InvalidExpression,
    MismatchedParentheses,
    TooManyValues,
    UndefinedVariable,
    UnknownOperator,
    UnrecognizedToken,
    WrongArgumentType,
    WrongArity,
)


logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = (
    'evaluate', 'Calculator',
    'rewrite', 'Lexer', 'Parser', 'Machine',
    'Token', 'Kind',
    'Function', 'Builtin', 'merge_builtins',
    'EvalError', 'UnrecognizedToken', 'UndefinedVariable',
    'MismatchedParentheses', 'InvalidExpression', 'UnknownOperator',
    'TooManyValues', 'WrongArity', 'WrongArgumentType',
)
