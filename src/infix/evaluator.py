import logging
import math

from .util import (UnexpectedToken, DivisionByZero, UnmatchedParenthesis,
                   TooDeeplyNested)
from .lexer import Cursor


log = logging.getLogger(__name__)


def _odd_integer(n):
    return math.isfinite(n) and n.is_integer() and n % 2 == 1


def power(base, exponent):
    '''
    Raise base to exponent the way C's pow() does.

    math.pow() raises where C returns NaN or an infinity; this doesn't. A
    negative base with a non-integer exponent gives NaN, not an error.
    '''
    try:
        return math.pow(base, exponent)
    except OverflowError:
        pass
    except ValueError:
        if base != 0:
            return math.nan
    # Overflow, or zero to a negative power.
    if _odd_integer(exponent):
        return math.copysign(math.inf, base)
    return math.inf


class Evaluator:
    '''
    Recursive descent parser that evaluates as it goes.

    One method per precedence level; each recognises its own syntax and
    returns a float, so there is no syntax tree. Single use: construct one
    per expression.
    '''

    GRAMMAR = '''\
expression = term , { ( "+" | "-" ) , term } ;
term       = exponent , { ( "*" | "/" ) , exponent } ;
exponent   = primary , [ "^" , exponent ] ;
primary    = ( "+" | "-" ) , primary
           | "(" , expression , ")"
           | number ;
number     = digit , { digit | "." } | "." , { digit } ;  (* one "." at most *)
'''

    def __init__(self, expression):
        self.cursor = Cursor(expression)

    def parse(self):
        '''
        Evaluate the whole input. Anything left over is an error.

        Nesting deeper than the interpreter's recursion limit is an error
        too, reported where the cursor stopped.
        '''
        try:
            value = self.expression()
        except RecursionError as e:
            raise TooDeeplyNested(self.cursor.position) from e
        self.cursor.skip_whitespace()
        if not self.cursor.at_end():
            raise UnexpectedToken(self.cursor.position,
                                  self.cursor.current())
        return value

    def expression(self):
        '''
        Addition and subtraction, left-associative.
        '''
        value = self.term()
        while True:
            if self.cursor.match('+'):
                value += self.term()
            elif self.cursor.match('-'):
                value -= self.term()
            else:
                return value

    def term(self):
        '''
        Multiplication and division, left-associative.
        '''
        value = self.exponent()
        while True:
            if self.cursor.match('*'):
                value *= self.exponent()
            elif self.cursor.match('/'):
                self.cursor.skip_whitespace()
                start = self.cursor.position
                divisor = self.exponent()
                if divisor == 0:
                    raise DivisionByZero(start)
                value /= divisor
            else:
                return value

    def exponent(self):
        '''
        Exponentiation, right-associative.

        Recursing on the exponent, rather than looping, is what makes
        2^3^2 come out as 2^9.
        '''
        base = self.primary()
        if self.cursor.match('^'):
            return power(base, self.exponent())
        return base

    def primary(self):
        '''
        Unary sign, parenthesised subexpression, or number.
        '''
        if self.cursor.match('+'):
            return self.primary()
        elif self.cursor.match('-'):
            return -self.primary()
        elif self.cursor.match('('):
            value = self.expression()
            if not self.cursor.match(')'):
                raise UnmatchedParenthesis(self.cursor.position)
            return value
        return self.number()

    def number(self):
        return self.cursor.number()


def evaluate(expression):
    '''
    Evaluate an arithmetic expression string to a float.

    Raises an EvalError subclass if the expression is bad. Keeps no state
    between calls.
    '''
    log.debug('Evaluating %r', expression)
    value = Evaluator(expression).parse()
    log.debug('%r = %r', expression, value)
    return value
