import logging

from .util import CalcError, format_result
from .buffer import ExpressionBuffer
from .lexer import Lexer
from .evaluator import Evaluator
from .continuation import ContinuationPolicy


logger = logging.getLogger(__name__)


class Calculator:
    '''
    Keystroke calculator: expression buffer, last result, and error flag.

    Whatever went wrong, callers only get to see had_error() and a 0 result.
    The exception itself is kept in last_error, for diagnostics.
    '''

    def __init__(self, buffer=None, continuation=None):
        '''
        Create calculator with an empty expression and no previous result.
        '''
        self.buffer = buffer if buffer is not None else ExpressionBuffer()
        self.continuation = (continuation
                             if continuation is not None
                             else ContinuationPolicy())
        self.lexer = Lexer()
        self.evaluator = Evaluator()
        self.last_result = 0.0
        self.has_last_result = False
        self.error = False
        self.last_error = None

    def init(self):
        '''
        Empty the expression and forget any error. The previous result is
        kept.
        '''
        self.buffer.init()
        self.error = False
        self.last_error = None

    def add_char(self, c):
        '''
        Add key to the expression.

        Raises BufferFull if it doesn't fit; the expression is left as is.
        '''
        self.buffer.add_char(c)

    def clear_expression(self):
        '''
        Empty the expression and forget any error. The previous result is
        kept.
        '''
        self.buffer.clear()
        self.error = False
        self.last_error = None

    @property
    def previous(self):
        '''
        Previous result, None if there is none.
        '''
        return self.last_result if self.has_last_result else None

    def evaluate(self):
        '''
        Evaluate the expression, continuing from the previous result if it
        starts with an operator.

        Returns the result, or 0.0 with had_error() set.
        '''
        self.error = False
        self.last_error = None
        text = self.buffer.text()
        if not text:
            return self.last_result if self.has_last_result else 0.0
        try:
            adjusted = self.continuation.adjust(text, self.previous)
            if adjusted != text and self.continuation.persist:
                self.buffer.replace(adjusted)
            value = self.evaluator.evaluate(self.lexer.tokenize(adjusted))
        except CalcError as e:
            logger.warning('Cannot evaluate %r: %s', text, e.args[0])
            self.error = True
            self.last_error = e
            return 0.0
        self.last_result = value
        self.has_last_result = True
        return value

    def had_error(self):
        return self.error

    def current_expression(self):
        return self.buffer.text()

    def result_text(self, value):
        '''
        Format value for display, or the error text after a failed evaluate.
        '''
        return format_result(value, error=self.error)
