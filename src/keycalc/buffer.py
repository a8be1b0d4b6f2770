import logging

from .util import BufferFull


logger = logging.getLogger(__name__)


class ExpressionBuffer:
    '''
    Bounded text of the expression being typed in.

    Capacity counts the terminator of the fixed buffer on the device, so at
    most MAX_EXPR_LEN - 1 characters are ever held.
    '''

    MAX_EXPR_LEN = 64
    # Free room, terminator included, a shorthand key needs to expand.
    EXPANSION_RESERVE = 4
    # Placeholder the keymap produces for shifted slots with no function.
    IGNORE = '?'
    SHORTHAND = {
        's': 'sin',
        'c': 'cos',
        't': 'tan',
    }

    def __init__(self, max_len=None):
        self.max_len = max_len or type(self).MAX_EXPR_LEN
        self.init()

    def init(self):
        '''
        Empty the buffer.
        '''
        self._chars = []

    clear = init

    def __len__(self):
        return len(self._chars)

    def __str__(self):
        return self.text()

    @property
    def capacity(self):
        '''
        Characters the buffer can hold, terminator excluded.
        '''
        return self.max_len - 1

    def add_char(self, c):
        '''
        Append a key, expanding shorthand keys to their function name.

        Raises BufferFull, without writing anything, when the key doesn't fit
        along with the terminator. Shorthand keys need EXPANSION_RESERVE free.
        '''
        if c == type(self).IGNORE:
            return
        if len(c) != 1:
            raise ValueError('Not a single key: {0!r}'.format(c))
        expansion = type(self).SHORTHAND.get(c, c)
        reserve = type(self).EXPANSION_RESERVE if len(expansion) > 1 else 2
        if self.max_len - len(self) < reserve:
            logger.debug('Buffer full at %d characters, rejecting %r',
                         len(self), c)
            raise BufferFull('Expression full, cannot add {0!r}'.format(c))
        self._chars.extend(expansion)

    def replace(self, text):
        '''
        Overwrite the whole contents with text, if it fits.
        '''
        if len(text) > self.capacity:
            raise BufferFull('Expression {0!r} longer than {1} characters'
                             .format(text, self.capacity))
        self._chars = list(text)

    def text(self):
        '''
        Current contents.
        '''
        return ''.join(self._chars)
