from functools import reduce
import operator
import math

import regex

from .util import (UnexpectedToken, ExpectedNumber, MalformedNumber,
                   NumberConversionError, wrap_user_errors)


class Lexer:
    '''
    Lexer for the calculator's *regular* lexical grammar.

    The evaluator never sees a token stream; it scans the source with a
    Cursor, which borrows these patterns. lex() is for diagnostics.
    '''
    # Any run of digits and points; Cursor.number() checks the points.
    NUMBER = r'''
              [0-9.]+
              '''
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, '+-*/^')) + r')'
    PAREN = r'[()]'
    # Space and tab only. Newlines are not whitespace; input is one line.
    SPACE = r'[\x20\t]+'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<paren>' + PAREN + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and yield all lexemes.

        Raises UnexpectedToken on the first character that starts no lexeme.
        '''
        pattern = regex.compile(type(self).LEXEME, flags=type(self).FLAGS)
        position = 0
        while position < len(line):
            match = pattern.match(line, position)
            if match is None:
                raise UnexpectedToken(position, line[position])
            yield match
            position = match.end()

    def isfeedable(self, match):
        '''
        Return True if lexeme means anything to the evaluator.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Return lexeme group names mapped to their matched text.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}


class Cursor:
    '''
    Scan cursor over one expression.

    Owned by a single evaluation and thrown away afterwards. position only
    ever moves forward, and stays within 0..len(source).
    '''

    _number = regex.compile(Lexer.NUMBER, flags=Lexer.FLAGS)
    _space = regex.compile(Lexer.SPACE, flags=Lexer.FLAGS)

    def __init__(self, source):
        self.source = source
        self.position = 0

    def __repr__(self):
        return '{}({!r}, position={})'.format(type(self).__name__,
                                              self.source, self.position)

    def current(self):
        '''
        Return the character under the cursor, or '' at end of input.
        '''
        return self.source[self.position:self.position + 1]

    def at_end(self):
        return self.position >= len(self.source)

    def skip_whitespace(self):
        match = self._space.match(self.source, self.position)
        if match is not None:
            self.position = match.end()

    def match(self, expected):
        '''
        Consume expected character, if it's next after any whitespace.

        Return whether it was consumed. On False, the cursor has only moved
        past whitespace.
        '''
        self.skip_whitespace()
        if self.current() == expected:
            self.position += 1
            return True
        return False

    def number(self):
        '''
        Lex and convert a numeric literal: digits, at most one point.
        '''
        self.skip_whitespace()
        start = self.position
        match = self._number.match(self.source, start)
        if match is None:
            raise ExpectedNumber(start)
        text = match.group(0)
        first = text.find('.')
        if first != -1:
            second = text.find('.', first + 1)
            if second != -1:
                self.position = start + second
                raise MalformedNumber(self.position)
        self.position = match.end()
        return self._convert(text, start)

    @staticmethod
    @wrap_user_errors(NumberConversionError,
                      lambda text, start: start)
    def _convert(text, start):
        '''
        Convert literal text to float. A lone point fails, as does overflow.
        '''
        value = float(text)
        if math.isinf(value):
            raise OverflowError('{} out of range'.format(text))
        return value
