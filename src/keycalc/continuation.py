import logging

from .tokens import OPERATORS


logger = logging.getLogger(__name__)


class ContinuationPolicy:
    '''
    Lets an expression that starts with an operator continue from the
    previous result: with a previous result of 5, "+3" means "5.000000+3".
    '''

    # Fractional digits the previous result is spliced in with.
    PRECISION = 6

    def __init__(self, persist=True, precision=None):
        '''
        :param persist: Write the continued expression back into the buffer,
                        so it shows. Otherwise it is only evaluated.
        '''
        self.persist = persist
        self.precision = (type(self).PRECISION
                          if precision is None
                          else precision)

    def applies(self, text, last_result):
        '''
        Return True if text continues from last_result.
        '''
        return (last_result is not None and
                bool(text) and
                text[0] in OPERATORS)

    def adjust(self, text, last_result):
        '''
        Return text to evaluate: text itself, or text continued from
        last_result (None if there is none).
        '''
        if not self.applies(text, last_result):
            return text
        continued = '{0:.{1}f}{2}{3}'.format(last_result,
                                              self.precision,
                                              text[0],
                                              text[1:])
        logger.debug('Continuing %r as %r', text, continued)
        return continued
