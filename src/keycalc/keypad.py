'''
Keymap of the 4x4 keypad, with a shift layer.

Turns (row, column) key presses into the characters a Session takes.
Scanning the matrix is the hardware's job, not this module's.
'''

from .buffer import ExpressionBuffer


IGNORE = ExpressionBuffer.IGNORE
SHIFT = 'S'
CLEAR = 'C'
EVALUATE = '='

DIGITS = '0123456789.'
OPERATORS = '+-*/^'
SHORTHAND = ''.join(ExpressionBuffer.SHORTHAND)
# Everything a Session may be fed.
ALPHABET = frozenset(DIGITS + OPERATORS + SHORTHAND + CLEAR + EVALUATE + IGNORE)


class Keypad:
    '''
    Keypad with a one-shot shift key.
    '''

    BASE = (
        ('1', '2', '3', '+'),
        ('4', '5', '6', '-'),
        ('7', '8', '9', '*'),
        (SHIFT, '0', EVALUATE, '/'),
    )
    # Unused shifted slots give IGNORE, which the buffer drops.
    SHIFTED = (
        ('s', 'c', 't', '^'),
        ('.', IGNORE, IGNORE, IGNORE),
        (IGNORE, IGNORE, IGNORE, CLEAR),
        (SHIFT, IGNORE, EVALUATE, IGNORE),
    )

    def __init__(self):
        self.shifted = False

    def press(self, row, col):
        '''
        Return character of key at row, col, on the current layer.

        Pressing shift toggles the layer and gives IGNORE. Any other key
        drops back to the base layer.
        '''
        layer = type(self).SHIFTED if self.shifted else type(self).BASE
        try:
            key = layer[row][col]
        except IndexError:
            raise ValueError('No key at row {0}, column {1}'.format(row, col))
        if key == SHIFT:
            self.shifted = not self.shifted
            return IGNORE
        self.shifted = False
        return key
