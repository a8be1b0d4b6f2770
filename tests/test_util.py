'''
Formatting and error wrapping tests
'''

import regex

from keycalc.util import (EvalError, ParseError, format_result,
                          wrap_user_errors)

from pytest import raises


def test_whole_numbers():
    assert format_result(56.0) == '56'
    assert format_result(100.0) == '100'
    assert format_result(0.0) == '0'


def test_fractions():
    assert format_result(0.5) == '0.5'
    assert format_result(1 / 3) == '0.333'
    assert format_result(1234.5678) == '1234.568'
    assert format_result(-2.25) == '-2.25'


def test_negative_zero():
    assert format_result(-0.0001) == '0'


def test_error():
    assert format_result(0.0, error=True) == 'Error'


def test_precision():
    assert format_result(2 / 3, precision=1) == '0.7'


def test_wrap_user_errors():
    @wrap_user_errors('Cannot halve {0}')
    def halve(n):
        return n / 0

    with raises(EvalError, match=regex.escape('Cannot halve 3')):
        halve(3)


def test_wrap_user_errors_passes_calc_errors():
    @wrap_user_errors('Cannot halve {0}')
    def halve(n):
        raise ParseError('Bad {0}'.format(n))

    with raises(ParseError, match=regex.escape('Bad 3')):
        halve(3)
