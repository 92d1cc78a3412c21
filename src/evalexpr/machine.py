from collections import deque
import logging
import math
import operator

from .tokens import Kind
from .util import InvalidExpression, TooManyValues, UnknownOperator


logger = logging.getLogger(__name__)


def _divide(left, right):
    '''
    IEEE-754 division: x/0 is a signed infinity, 0/0 is NaN.
    '''
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _odd_integer(x):
    return math.isfinite(x) and x == math.trunc(x) and math.trunc(x) % 2 == 1


def _power(base, exponent):
    '''
    C's pow(): overflow is infinite, a pole at zero is infinite, a negative
    base with a fractional exponent is NaN.
    '''
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base != 0:
            return math.nan
        elif _odd_integer(exponent):
            return math.copysign(math.inf, base)
        return math.inf


def _modulo(left, right):
    '''
    Truncate both operands toward zero, then take the remainder with the
    sign of the dividend.
    '''
    if not (math.isfinite(left) and math.isfinite(right)):
        return math.nan
    dividend = math.trunc(left)
    divisor = math.trunc(right)
    if divisor == 0:
        return math.nan
    remainder = abs(dividend) % abs(divisor)
    return float(-remainder if dividend < 0 else remainder)


class Machine:
    '''
    Arithmetic stack machine.

    Folds a postfix queue of number and operator tokens into a single number.
    '''

    # Binary operators on the values of a machine, left operand first.
    OPERATORS = {
        '+': operator.__add__,
        '-': operator.__sub__,
        '*': operator.__mul__,
        '/': _divide,
        '^': _power,
        '%': _modulo,
    }

    def run(self, queue):
        '''
        Evaluate a postfix queue, consuming it, and return the result.

        Each run folds on its own value stack, so one machine may be shared.

        See https://en.wikipedia.org/wiki/Reverse_Polish_notation
        '''
        stack = deque()
        while queue:
            token = queue.popleft()
            if token.kind is Kind.NUMBER:
                self._pshstack(stack, token.value)
            else:
                self._apply(stack, token)
        if not stack:
            raise InvalidExpression()
        if len(stack) > 1:
            raise TooManyValues()
        result = stack.pop()
        logger.debug('Evaluated to %r', result)
        return result

    def _apply(self, stack, token):
        '''
        Pop two operands, apply the operator, push the result.
        '''
        # Popped topmost first. If you don't reverse, you'll do 2**9 when you
        # say 9 2 ^ instead of 9**2.
        right, left = self._popstack(stack, 2)
        f = type(self).OPERATORS.get(token.text)
        if f is None:
            raise UnknownOperator(token.text)
        self._pshstack(stack, f(left, right))

    def _pshstack(self, stack, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        stack.extend(new)

    def _popstack(self, stack, n=1):
        '''
        Pop specified number of values from stack, topmost first.
        '''
        if len(stack) < n:
            raise InvalidExpression()
        return [stack.pop() for _ in range(n)]
