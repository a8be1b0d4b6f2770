'''
Tokens of an expression. Fresh ones are made for every evaluation.
'''

from collections import namedtuple


Number = namedtuple('Number', ['value'])
Operator = namedtuple('Operator', ['symbol'])
# Argument is in degrees.
FunctionCall = namedtuple('FunctionCall', ['name', 'degrees'])


OPERATORS = '+', '-', '*', '/', '^'
FUNCTIONS = 'sin', 'cos', 'tan'
