from functools import wraps
import math


class EvalError(Exception):
    pass


class UnrecognizedToken(EvalError):
    def __init__(self, token):
        self.token = token
        super().__init__('Unrecognized token type for symbol: "{}"!'
                         .format(token))


class UndefinedVariable(EvalError):
    def __init__(self, name):
        self.name = name
        super().__init__('Undefined variable: "{}"!'.format(name))


class MismatchedParentheses(EvalError):
    def __init__(self):
        super().__init__('There are mismatched parenthesis!')


class InvalidExpression(EvalError):
    def __init__(self):
        super().__init__('Invalid expression!')


class UnknownOperator(EvalError):
    def __init__(self, operator):
        self.operator = operator
        super().__init__('Unknown operator: "{}"!'.format(operator))


class TooManyValues(EvalError):
    def __init__(self):
        super().__init__('Input has too many values!')


class WrongArity(EvalError):
    def __init__(self, function, expected, received):
        self.function = function
        self.expected = expected
        self.received = received
        super().__init__('Function {} has wrong number of arguments! '
                         'Expected {} but got {}.'
                         .format(function, expected, received))


class WrongArgumentType(EvalError):
    def __init__(self, argument):
        self.argument = argument
        super().__init__('Function arg {} is wrong type!'.format(argument))


def nan_on_domain_error(f):
    '''
    Decorator that turns math domain errors into NaN, like C's libm.
    '''
    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except ValueError:
            return math.nan
    return wrapper
