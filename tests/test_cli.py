'''
Command line tests
'''

from keycalc.cli import CLI


def test_expression(capsys):
    CLI().run(args=['-e', '11+45=', '+1='])
    out = capsys.readouterr().out.splitlines()
    assert out == ['11+45           ',
                   '              56',
                   '56.000000+1     ',
                   '              57']


def test_width(capsys):
    CLI().run(args=['-w', '8', '-e', '2^3*2='])
    out = capsys.readouterr().out.splitlines()
    assert out == ['2^3*2   ', '      16']


def test_ephemeral(capsys):
    CLI().run(args=['--ephemeral', '-e', '5=', '+3='])
    out = capsys.readouterr().out.splitlines()
    assert out[2:] == ['+3              ',
                       '               8']


def test_spaces_skipped(capsys):
    CLI().run(args=['-e', '1 + 2 ='])
    out = capsys.readouterr().out.splitlines()
    assert out[1].strip() == '3'


def test_error(capsys):
    CLI().run(args=['-e', '(1+2)='])
    out = capsys.readouterr().out.splitlines()
    assert out[1].strip() == 'Error'


def test_dump(capsys):
    CLI().run(args=['-D', '-e', 'sin30+2'])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == '[groups]\t<repr(lexeme)>\t<token>'
    assert out[1].endswith("'sin30'\tFunctionCall(name='sin', degrees=30.0)")
    assert out[2] == "operator\t'+'\tOperator(symbol='+')"
    assert out[3] == "number\t'2'\tNumber(value=2.0)"


def test_dump_bad(capsys):
    CLI().run(args=['-D', '-e', '2*x'])
    captured = capsys.readouterr()
    assert "Couldn't lex x" in captured.err


def test_raw_grammar(capsys):
    CLI().run(args=['-G', '-e'])
    assert '(?<operator>' in capsys.readouterr().out
