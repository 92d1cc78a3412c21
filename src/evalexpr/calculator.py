from collections import ChainMap
import logging

from .lexer import Lexer, compact, rewrite
from .library import bind, merge_builtins
from .machine import Machine
from .parser import Parser
from .util import EvalError


logger = logging.getLogger(__name__)


class Calculator:
    '''
    Infix calculator: rewrite, lex, parse to postfix, run.

    Holds variable and function tables for repeated evaluation. Tables are
    only read, never written, while evaluating.
    '''

    def __init__(self, variables=None, functions=None, builtins=True):
        '''
        Create calculator.

        :param variables: Name to number mapping, available to every
                          evaluation.
        :param functions: Name to callable mapping. Callables take a list of
                          arguments and return a number.
        :param builtins: Whether pi and the math functions are available.
                         Names given here shadow them.
        '''
        self.variables = {} if variables is None else variables
        self.functions = {} if functions is None else functions
        self.builtins = builtins
        self.lexer = Lexer()
        self.parser = Parser()
        self.machine = Machine()

    def tables(self, variables=None, functions=None):
        '''
        Return (variables, functions) lookup chains: per-call names first,
        then instance names, then builtins.
        '''
        variables = ChainMap(variables or {}, self.variables)
        functions = ChainMap(bind(functions or {}), bind(self.functions))
        if self.builtins:
            return merge_builtins(variables, functions)
        return variables, functions

    def evaluate(self, expression, variables=None, functions=None):
        '''
        Evaluate an infix expression and return a float.

        Empty (or all whitespace) expressions evaluate to 0.

        :raises EvalError: on any malformed expression or bad function call.
        '''
        expression = compact(expression)
        if not expression:
            return 0.0
        expression = rewrite(expression)
        logger.debug('Rewritten to %r', expression)
        variables, functions = self.tables(variables, functions)
        try:
            tokens = self.lexer.tokenize(expression)
            queue = self.parser.parse(tokens, variables, functions)
            return self.machine.run(queue)
        except EvalError as e:
            logger.debug('Failed to evaluate %r: %s', expression, e)
            raise


def evaluate(expression, variables=None, functions=None):
    '''
    Evaluate an infix expression with builtins plus the given tables.

    >>> evaluate('3 + 4*2 + 6')
    17.0
    >>> evaluate('2 * x', {'x': 4})
    8.0
    '''
    return Calculator(variables, functions).evaluate(expression)
