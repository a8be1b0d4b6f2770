import logging
import operator
import math

from .util import EvalError, wrap_user_errors
from .tokens import Number, Operator, FunctionCall


logger = logging.getLogger(__name__)


def _divide(left, right):
    '''
    True division, refusing an exact zero divisor instead of yielding inf.
    '''
    if right == 0:
        raise EvalError('Division by zero')
    return left / right


class Evaluator:
    '''
    Reduces a token list to a single number, one precedence tier at a time.

    Operands and operators are pulled apart into two lists; operator i sits
    between operands i and i + 1. Every tier is a left to right sweep that
    folds each of its operators into the operand on its left.
    '''

    # Binary operators on operands.
    BUILTINS = {
        '^': math.pow,
        '*': operator.__mul__,
        '/': _divide,
        '+': operator.__add__,
        '-': operator.__sub__,
    }

    # Highest precedence first. Operators of a tier are equal among
    # themselves, leftmost first.
    TIERS = (
        ('^',),
        ('*', '/'),
        ('+', '-'),
    )

    # Angle arguments are in degrees.
    FUNCTIONS = {
        'sin': math.sin,
        'cos': math.cos,
        'tan': math.tan,
    }

    def evaluate(self, tokens):
        '''
        Evaluate tokens, as the lexer produced them, to a float.
        '''
        operands, operators = self._split(self.resolve(tokens))
        for tier in type(self).TIERS:
            self._reduce(operands, operators, tier)
        if len(operands) != 1:
            raise EvalError('{0} operands left over'.format(len(operands)))
        return operands[0]

    def resolve(self, tokens):
        '''
        Replace each function call by the number it evaluates to.
        '''
        return [Number(self.call(token))
                if isinstance(token, FunctionCall)
                else token
                for token
                in tokens]

    @wrap_user_errors('Cannot evaluate {1.name}{1.degrees}')
    def call(self, token):
        '''
        Evaluate function call token. tan 90 is left to the floats.
        '''
        try:
            f = type(self).FUNCTIONS[token.name]
        except KeyError:
            raise EvalError('No such function {0}'.format(token.name))
        return f(math.radians(token.degrees))

    def _split(self, tokens):
        operands = []
        operators = []
        for token in tokens:
            if isinstance(token, Number):
                operands.append(token.value)
            elif isinstance(token, Operator):
                operators.append(token.symbol)
            else:
                raise EvalError('Unexpected token {0!r}'.format(token))
        return operands, operators

    def _reduce(self, operands, operators, tier):
        '''
        Fold every operator of tier, in place, leftmost first.
        '''
        i = 0
        while i < len(operators):
            if operators[i] not in tier:
                i += 1
                continue
            if i >= len(operands) - 1:
                raise EvalError('Operator {0} is missing an operand'
                                .format(operators[i]))
            result = self.apply(operators[i], operands[i], operands[i + 1])
            logger.debug('%r %s %r = %r',
                         operands[i], operators[i], operands[i + 1], result)
            operands[i:i + 2] = [result]
            del operators[i]

    @wrap_user_errors('Cannot evaluate {2} {1} {3}')
    def apply(self, symbol, left, right):
        '''
        Apply binary operator symbol. Results out of float range are errors.
        '''
        result = type(self).BUILTINS[symbol](left, right)
        if not math.isfinite(result):
            raise EvalError('{0} {1} {2} is out of range'
                            .format(left, symbol, right))
        return result
