from functools import reduce
import logging
import operator

import regex

from .util import ParseError
from .tokens import Number, Operator, FunctionCall, OPERATORS, FUNCTIONS


logger = logging.getLogger(__name__)


class Lexer:
    '''
    Lexer for the keyed-in expression grammar.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Number literal, validated once its whole run has been taken.
    LITERAL = r'''
               (?:
                   # 1, 12, 1. (notice trailing dot), 1.5
                   \d+
                   (?:
                       \.
                       \d*
                   )?
               )|(?:
                   # .5
                   \.
                   \d+
               )
               '''

    assert not [operator
                for operator
                in OPERATORS
                if len(operator) != 1]
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, OPERATORS)) + r')'
    # Everything up to the next operator, space, or the end. Whatever is in
    # there belongs to the number or function argument in front of it.
    RUN = r'[^\s' + r''.join(map(regex.escape, OPERATORS)) + r']*'
    FUNCTION = r'(?<name>' + r'|'.join(FUNCTIONS) + r')' \
               r'(?<argument>' + RUN + r')'
    # Starts on a digit or a dot, rest checked against LITERAL.
    NUMBER = r'[\d.]' + RUN
    # Unary minus, only where an operand is expected.
    SIGNED = r'-\d' + RUN
    SPACE = r'\s+'

    # All possible lexemes after an operand.
    LEXEME = r'(?<space>' + SPACE + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<function>' + FUNCTION + r')|' \
             r'(?<number>' + NUMBER + r')'
    # All possible lexemes where an operand is expected. Same group names.
    OPERAND_LEXEME = r'(?<space>' + SPACE + r')|' \
                     r'(?<number>' + SIGNED + r')|' \
                     r'(?<operator>' + OPERATOR + r')|' \
                     r'(?<function>' + FUNCTION + r')|' \
                     r'(?<number>' + NUMBER + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.ASCII,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and return all lexemes.

        Doesn't yield incorrect lexemes, stopping on first bad.
        '''
        expect_operand = True
        while line:
            grammar = (type(self).OPERAND_LEXEME
                       if expect_operand
                       else type(self).LEXEME)
            match = regex.match(grammar, line, flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            groups = self.matchedgroups(match)
            if 'operator' in groups:
                expect_operand = True
            elif 'space' not in groups:
                expect_operand = False
            line = line[len(match.group(0)):]
        if line:
            raise ParseError("Couldn't lex {0}".format(line.strip()))

    def tokenize(self, line):
        '''
        Return the list of tokens for a whole line.

        Nothing is returned unless the whole line lexes and parses.
        '''
        tokens = [self.parse(self.matchedgroups(match))
                  for match
                  in self.lex(line)
                  if self.isfeedable(match)]
        logger.debug('Tokens of %r: %r', line, tokens)
        return tokens

    def parse(self, groups):
        '''
        Parse lexeme groups into a token.
        '''
        if 'function' in groups:
            argument = groups.get('argument', '')
            return FunctionCall(groups['name'], self._literal(argument))
        elif 'number' in groups:
            number = groups['number']
            if number.startswith('-'):
                return Number(-self._literal(number[1:]))
            return Number(self._literal(number))
        elif 'operator' in groups:
            return Operator(groups['operator'])
        raise ParseError("Couldn't parse {0}".format(groups))

    def _literal(self, text):
        '''
        Convert a number literal, rejecting anything float() would be lenient
        about, or that isn't a literal at all.
        '''
        if regex.fullmatch(type(self).LITERAL, text,
                           flags=type(self).FLAGS) is None:
            raise ParseError('Bad number {0!r}'.format(text))
        return float(text)

    def isfeedable(self, match):
        '''
        Return True if lexeme is a token, not space.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Return the groups that took part in the match.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
