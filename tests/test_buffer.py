'''
Expression buffer tests
'''

from keycalc.util import BufferFull
from keycalc.buffer import ExpressionBuffer

from pytest import raises


def test_append():
    b = ExpressionBuffer()
    for c in '12+3':
        b.add_char(c)
    assert b.text() == '12+3'
    assert len(b) == 4


def test_shorthand_expands():
    b = ExpressionBuffer()
    for c in 's30+c60*t45':
        b.add_char(c)
    assert b.text() == 'sin30+cos60*tan45'


def test_placeholder_ignored():
    b = ExpressionBuffer()
    b.add_char('1')
    b.add_char('?')
    assert b.text() == '1'


def test_fills_to_capacity():
    b = ExpressionBuffer()
    for _ in range(b.capacity):
        b.add_char('1')
    assert len(b) == ExpressionBuffer.MAX_EXPR_LEN - 1
    with raises(BufferFull):
        b.add_char('1')
    assert b.text() == '1' * b.capacity


def test_shorthand_needs_reserve():
    b = ExpressionBuffer(max_len=8)
    for c in '12345':
        b.add_char(c)
    # 3 slots left, terminator included.
    with raises(BufferFull):
        b.add_char('s')
    assert b.text() == '12345'
    b.add_char('6')
    assert b.text() == '123456'


def test_shorthand_fits_with_reserve():
    b = ExpressionBuffer(max_len=8)
    for c in '1234':
        b.add_char(c)
    b.add_char('t')
    assert b.text() == '1234tan'
    assert len(b) == b.capacity


def test_clear_twice():
    b = ExpressionBuffer()
    b.add_char('7')
    b.clear()
    b.clear()
    assert b.text() == ''
    assert len(b) == 0


def test_replace():
    b = ExpressionBuffer(max_len=8)
    b.replace('1.5+2')
    assert b.text() == '1.5+2'
    with raises(BufferFull):
        b.replace('12345678')
    assert b.text() == '1.5+2'


def test_only_single_keys():
    b = ExpressionBuffer(max_len=8)
    for c in '123':
        b.add_char(c)
    with raises(ValueError):
        b.add_char('4567')
    with raises(ValueError):
        b.add_char('')
    assert b.text() == '123'
