'''
Infix calculator.

Evaluates arithmetic expressions written the usual way round: + - * /, ^
for (right-associative) exponentiation, unary signs, and parentheses, with
the precedence you learnt at school. Not intended to be a programming
language! No variables, no functions.

The parser is recursive descent, one method per precedence level, and
evaluates as it parses; there's no syntax tree.
'''

from .cli import CLI
from .lexer import Lexer, Cursor
from .evaluator import Evaluator, evaluate
from .util import (EvalError, UnexpectedToken, DivisionByZero,
                   UnmatchedParenthesis, ExpectedNumber, MalformedNumber,
                   NumberConversionError, TooDeeplyNested)


__all__ = ('evaluate', 'Evaluator', 'Lexer', 'Cursor', 'CLI',
           'EvalError', 'UnexpectedToken', 'DivisionByZero',
           'UnmatchedParenthesis', 'ExpectedNumber', 'MalformedNumber',
           'NumberConversionError', 'TooDeeplyNested')
