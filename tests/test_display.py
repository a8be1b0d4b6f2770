'''
Display tests
'''

from keycalc.display import Display

from pytest import raises


def test_render():
    d = Display()
    assert d.render('11+45', '56') == [
        '11+45           ',
        '              56',
    ]


def test_long_expression_shows_end():
    d = Display(columns=4)
    assert d.render('123456', '') == ['3456', '    ']


def test_long_result_shows_start():
    d = Display(columns=4)
    assert d.render('', '123456') == ['    ', '1234']


def test_more_rows():
    d = Display(columns=2, rows=4)
    assert d.render('1', '1') == ['1 ', '  ', '  ', ' 1']


def test_too_few_rows():
    with raises(ValueError):
        Display(rows=1)
