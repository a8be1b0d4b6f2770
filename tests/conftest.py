from pytest import Item, fixture

from keycalc.calculator import Calculator


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases.

    Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!)
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def calculator():
    return Calculator()


@fixture
def keyed(calculator):
    '''
    Type keys into the calculator, returning it.
    '''
    def type_keys(keys):
        for key in keys:
            calculator.add_char(key)
        return calculator
    return type_keys
