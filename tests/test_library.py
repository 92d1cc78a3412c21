'''
Builtin registry tests
'''

import math

import regex

from evalexpr.library import (
    CONSTANTS,
    FUNCTIONS,
    Builtin,
    Function,
    bind,
    merge_builtins,
)
from evalexpr.util import WrongArgumentType, WrongArity

from pytest import approx, raises


def test_pi():
    assert CONSTANTS['pi'] == approx(3.14159, abs=1e-5)


def test_registry_is_read_only():
    with raises(TypeError):
        FUNCTIONS['abs'] = None


def test_unary_arity():
    unary = {'abs', 'sqrt', 'cbrt', 'sin', 'cos', 'tan', 'asin', 'acos',
             'atan', 'floor', 'ceil', 'trunc', 'round'}
    assert {name for name, f in FUNCTIONS.items() if f.arity == 1} == unary
    assert FUNCTIONS['hypot'].arity == 2


def test_wrong_arity():
    message = regex.escape('Function hypot has wrong number of arguments! '
                           'Expected 2 but got 1.')
    with raises(WrongArity, match=message) as excinfo:
        FUNCTIONS['hypot']([3.0])
    assert (excinfo.value.function,
            excinfo.value.expected,
            excinfo.value.received) == ('hypot', 2, 1)


def test_wrong_arity_no_arguments():
    with raises(WrongArity):
        FUNCTIONS['sqrt']([])


def test_wrong_argument_type():
    with raises(WrongArgumentType,
                match=regex.escape('Function arg x is wrong type!')) as excinfo:
        FUNCTIONS['sqrt'](['x'])
    assert excinfo.value.argument == 'x'


def test_math():
    assert FUNCTIONS['abs']([-3.0]) == 3
    assert FUNCTIONS['cbrt']([27.0]) == 3
    assert FUNCTIONS['hypot']([3.0, 4.0]) == 5
    assert FUNCTIONS['floor']([1.2]) == 1
    assert FUNCTIONS['ceil']([1.8]) == 2
    assert FUNCTIONS['trunc']([-2.7]) == -2


def test_round_half_away_from_zero():
    assert FUNCTIONS['round']([2.5]) == 3
    assert FUNCTIONS['round']([-2.5]) == -3
    assert FUNCTIONS['round']([2.4]) == 2


def test_integral_keeps_infinity():
    assert FUNCTIONS['floor']([math.inf]) == math.inf
    assert math.isnan(FUNCTIONS['round']([math.nan]))


def test_domain_error_is_nan():
    assert math.isnan(FUNCTIONS['sqrt']([-1.0]))
    assert math.isnan(FUNCTIONS['asin']([2.0]))


def test_results_are_floats():
    assert isinstance(FUNCTIONS['floor']([1.2]), float)


def test_function_arity_checked_before_call():
    calls = []
    f = Function('f', calls.append, arity=1)
    with raises(WrongArity):
        f([1.0, 2.0])
    assert calls == []


def test_function_any_arity():
    f = Function('count', len)
    assert f([]) == 0
    assert f([1.0, 'x', 3.0]) == 3


def test_builtin_positional():
    f = Builtin('sub', lambda a, b: a - b, arity=2)
    assert f([5.0, 3.0]) == 2


def test_bind_wraps_plain_callables():
    existing = Function('g', len)
    bound = bind({'f': len, 'g': existing})
    assert isinstance(bound['f'], Function)
    assert bound['f'].name == 'f'
    assert bound['g'] is existing


def test_merge_caller_wins():
    variables, functions = merge_builtins({'pi': 3.0},
                                          {'abs': lambda args: -1})
    assert variables['pi'] == 3.0
    assert functions['abs']([5.0]) == -1
    assert 'sqrt' in functions


def test_merge_does_not_write_caller_tables():
    variables = {'x': 1.0}
    functions = {}
    merge_builtins(variables, functions)
    assert variables == {'x': 1.0}
    assert functions == {}
