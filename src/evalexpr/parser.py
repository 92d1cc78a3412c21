from collections import deque
import logging

from .tokens import Kind, Token
from .util import MismatchedParentheses, UndefinedVariable, UnrecognizedToken


logger = logging.getLogger(__name__)


class Parser:
    '''
    Infix to postfix converter, following the Shunting-yard algorithm.

    Functions are invoked eagerly while parsing: a call's result lands in the
    output queue as a plain number. Each argument is a single token.

    See https://en.wikipedia.org/wiki/Shunting-yard_algorithm
    '''

    PRECEDENCE = {
        '^': 4,
        '*': 3,
        '/': 3,
        '%': 3,
        '+': 2,
        '-': 2,
    }
    RIGHT_ASSOCIATIVE = frozenset('^')

    def parse(self, tokens, variables=None, functions=None):
        '''
        Convert tokens to an output queue of numbers and operators.

        :param tokens: Tokens from the lexer.
        :param variables: Name to number mapping, read once per identifier.
        :param functions: Name to Function mapping.
        '''
        variables = {} if variables is None else variables
        functions = {} if functions is None else functions
        queue = deque()
        stack = []

        # Function call in progress
        invoking = None
        expecting = False
        args = []

        for token in tokens:
            if expecting and token.kind is not Kind.RPAREN:
                args.append(self._argument(token, variables))
                expecting = False
            elif token.kind is Kind.NUMBER:
                queue.append(token)
            elif token.kind is Kind.IDENTIFIER and token.text in variables:
                queue.append(Token.number(variables[token.text]))
            elif token.kind is Kind.IDENTIFIER and token.text in functions:
                invoking = token.text
            elif token.kind is Kind.COMMA:
                expecting = True
            elif token.kind is Kind.OPERATOR:
                while stack and self._yields(token, stack[-1]):
                    queue.append(stack.pop())
                stack.append(token)
            elif token.kind is Kind.LPAREN:
                if invoking is not None:
                    expecting = True
                else:
                    stack.append(token)
            elif token.kind is Kind.RPAREN:
                if invoking is not None:
                    result = functions[invoking](args)
                    logger.debug('Invoked %s%s = %r', invoking, tuple(args),
                                 result)
                    queue.append(Token.number(result))
                    invoking = None
                    expecting = False
                    args = []
                else:
                    while stack and stack[-1].kind is not Kind.LPAREN:
                        queue.append(stack.pop())
                    if not stack:
                        raise MismatchedParentheses()
                    stack.pop()
            elif token.kind is Kind.IDENTIFIER:
                raise UndefinedVariable(token.text)
            else:
                raise UnrecognizedToken(token.text)

        while stack:
            if stack[-1].kind in {Kind.LPAREN, Kind.RPAREN}:
                raise MismatchedParentheses()
            queue.append(stack.pop())

        logger.debug('Parsed into %s', ' '.join(map(str, queue)))
        return queue

    def _argument(self, token, variables):
        '''
        Resolve a single-token function argument: variable values and
        numbers become numbers, anything else stays literal text.
        '''
        if token.kind is Kind.IDENTIFIER and token.text in variables:
            return float(variables[token.text])
        elif token.kind is Kind.NUMBER:
            return token.value
        return token.text

    def _yields(self, o1, o2):
        '''
        Return True if o2, on top of the stack, must be output before o1 is
        pushed.
        '''
        if o2.kind is not Kind.OPERATOR:
            return False
        p1 = self.PRECEDENCE[o1.text]
        p2 = self.PRECEDENCE[o2.text]
        if o1.text in self.RIGHT_ASSOCIATIVE:
            return p1 < p2
        return p1 <= p2
