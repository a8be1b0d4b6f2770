import logging

from .util import BufferFull
from .calculator import Calculator
from .display import Display
from .keypad import IGNORE, CLEAR, EVALUATE


logger = logging.getLogger(__name__)


EMPTY = 'empty'
ACCUMULATING = 'accumulating'
RESULTED = 'resulted'
ERRORED = 'errored'


class Session:
    '''
    The input loop around a Calculator: one key in, one screen out.

    - C clears, = evaluates.
    - After a result or an error, the next key starts a new expression. An
      operator key continues from the previous result.
    - A key the buffer has no room for is dropped, or clears the
      expression if on_full is 'clear'.
    '''

    ON_FULL = 'drop', 'clear'

    def __init__(self, calculator=None, display=None, on_full='drop'):
        if on_full not in type(self).ON_FULL:
            raise ValueError('on_full must be one of {0}, not {1!r}'
                             .format(type(self).ON_FULL, on_full))
        self.calculator = (calculator
                           if calculator is not None
                           else Calculator())
        self.display = display if display is not None else Display()
        self.on_full = on_full
        self.state = EMPTY
        self.result = ''

    def feed(self, key):
        '''
        Process one key. Return the screen.
        '''
        if key == CLEAR:
            self.clear()
        elif key == EVALUATE:
            self.evaluate()
        elif key != IGNORE:
            self.enter(key)
        return self.screen()

    def feed_all(self, keys):
        '''
        Process keys in order. Yield the screen after every =.
        '''
        for key in keys:
            screen = self.feed(key)
            if key == EVALUATE:
                yield screen

    def clear(self):
        self.calculator.clear_expression()
        self.result = ''
        self.state = EMPTY

    def evaluate(self):
        value = self.calculator.evaluate()
        self.result = self.calculator.result_text(value)
        if self.calculator.had_error():
            self.state = ERRORED
        else:
            logger.info('%s = %s',
                        self.calculator.current_expression() or 'Ans',
                        self.result)
            self.state = RESULTED

    def enter(self, key):
        if self.state in (RESULTED, ERRORED):
            self.clear()
        try:
            self.calculator.add_char(key)
        except BufferFull as e:
            logger.warning('%s, %s', e.args[0],
                           'clearing' if self.on_full == 'clear'
                           else 'dropping key')
            if self.on_full == 'clear':
                self.clear()
                return
        if self.calculator.current_expression():
            self.state = ACCUMULATING

    def screen(self):
        return self.display.render(self.calculator.current_expression(),
                                   self.result)
