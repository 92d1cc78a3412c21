'''
Built-in constants and functions, and the callables that wrap them.

The builtin tables are built once, read-only, and layered under the caller's
tables per evaluation. Caller-supplied names shadow builtins.
'''

from collections import ChainMap
from numbers import Real
from types import MappingProxyType
import math

from .util import WrongArity, WrongArgumentType, nan_on_domain_error


class Function:
    '''
    Named callable invoked with the list of arguments collected by the
    parser.

    :param name: Name used in error messages.
    :param f: Callable taking the argument list, returning a number.
    :param arity: Exact number of arguments, or None for any.
    '''

    def __init__(self, name, f, arity=None):
        self.name = name
        self.f = f
        self.arity = arity

    def __call__(self, args):
        args = list(args)
        if self.arity is not None and len(args) != self.arity:
            raise WrongArity(self.name, self.arity, len(args))
        return float(self.invoke(args))

    def invoke(self, args):
        return self.f(args)

    def __repr__(self):
        return '{}({!r}, arity={!r})'.format(type(self).__name__,
                                             self.name,
                                             self.arity)


class Builtin(Function):
    '''
    Function over plain numbers, called with positional arguments.

    Arguments that didn't resolve to numbers (leftover identifiers, stray
    symbols) are rejected before the call.
    '''

    def invoke(self, args):
        for arg in args:
            if isinstance(arg, bool) or not isinstance(arg, Real):
                raise WrongArgumentType(arg)
        return self.f(*args)


def _integral(f):
    '''
    Wrap floor/ceil/trunc-likes so infinities and NaN pass straight through,
    rather than raising on int conversion.
    '''
    def wrapped(x):
        if not math.isfinite(x):
            return x
        return float(f(x))
    wrapped.__doc__ = f.__doc__
    wrapped.__name__ = f.__name__
    return wrapped


def _round(x):
    '''
    Round half away from zero, as C does, not to even as Python does.
    '''
    whole = math.floor(abs(x))
    if abs(x) - whole >= 0.5:
        whole += 1
    return math.copysign(whole, x)


def _unary(name, f):
    return name, Builtin(name, nan_on_domain_error(f), arity=1)


def _binary(name, f):
    return name, Builtin(name, nan_on_domain_error(f), arity=2)


CONSTANTS = MappingProxyType({
    'pi': math.pi,
})

FUNCTIONS = MappingProxyType(dict([
    _unary('abs', math.fabs),
    _unary('sqrt', math.sqrt),
    _unary('cbrt', math.cbrt),
    _unary('sin', math.sin),
    _unary('cos', math.cos),
    _unary('tan', math.tan),
    _unary('asin', math.asin),
    _unary('acos', math.acos),
    _unary('atan', math.atan),
    _unary('floor', _integral(math.floor)),
    _unary('ceil', _integral(math.ceil)),
    _unary('trunc', _integral(math.trunc)),
    _unary('round', _integral(_round)),
    _binary('hypot', math.hypot),
]))


def bind(functions):
    '''
    Wrap plain callables as Functions with no arity rule.
    '''
    return {name: f if isinstance(f, Function) else Function(name, f)
            for name, f in functions.items()}


def merge_builtins(variables=None, functions=None):
    '''
    Layer the builtin tables under the caller's.

    Returns new (variables, functions) mappings; the caller's are neither
    copied nor written to, except that plain function callables get wrapped.
    '''
    if variables is None:
        variables = {}
    return (ChainMap(variables, CONSTANTS),
            ChainMap(bind(functions or {}), FUNCTIONS))
