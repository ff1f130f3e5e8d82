'''
Lexer and scan cursor tests
'''

import regex

from infix.util import (UnexpectedToken, ExpectedNumber, MalformedNumber,
                        NumberConversionError)
from infix.lexer import Lexer, Cursor

from pytest import raises


def test_lex_groups():
    l = Lexer()
    matches = [m for m in l.lex('2 * (3.5-1)') if l.isfeedable(m)]
    assert [list(l.matchedgroups(m).items())[0] for m in matches] == [
        ('number', '2'),
        ('operator', '*'),
        ('paren', '('),
        ('number', '3.5'),
        ('operator', '-'),
        ('number', '1'),
        ('paren', ')'),
    ]
    assert [m.start() for m in matches] == [0, 2, 4, 5, 8, 9, 10]


def test_lex_spaces_unfeedable():
    l = Lexer()
    matches = list(l.lex(' \t1'))
    assert not l.isfeedable(matches[0])
    assert l.isfeedable(matches[1])


def test_lex_unknown_character():
    l = Lexer()
    with raises(UnexpectedToken, match=regex.escape("position 2: 'x'")):
        list(l.lex('1+x'))


def test_lex_newline_is_not_space():
    l = Lexer()
    with raises(UnexpectedToken) as e:
        list(l.lex('1\n+2'))
    assert e.value.position == 1
    assert e.value.character == '\n'


def test_match_consumes():
    c = Cursor('  +1')
    assert c.match('+')
    assert c.position == 3


def test_match_leaves_position():
    c = Cursor('*1')
    assert not c.match('+')
    assert c.position == 0
    assert c.match('*')


def test_match_at_end():
    c = Cursor('  ')
    assert not c.match(')')
    assert c.position == 2
    assert c.at_end()
    assert c.current() == ''


def test_skip_whitespace_stops_at_newline():
    c = Cursor(' \t\n 1')
    c.skip_whitespace()
    assert c.position == 2
    assert c.current() == '\n'


def test_number_integer():
    c = Cursor(' 42+1')
    assert c.number() == 42.0
    assert c.position == 3


def test_number_decimal():
    assert Cursor('3.25').number() == 3.25
    assert Cursor('.5').number() == 0.5
    assert Cursor('5.').number() == 5.0


def test_number_second_point():
    c = Cursor('1.2.3')
    with raises(MalformedNumber) as e:
        c.number()
    assert e.value.position == 3


def test_number_empty():
    with raises(ExpectedNumber) as e:
        Cursor('  )').number()
    assert e.value.position == 2


def test_number_lone_point():
    with raises(NumberConversionError) as e:
        Cursor(' .').number()
    assert e.value.position == 1


def test_number_overflow():
    with raises(NumberConversionError) as e:
        Cursor('1' * 400).number()
    assert e.value.position == 0
    assert isinstance(e.value.__cause__, OverflowError)


def test_number_non_ascii_digits():
    with raises(ExpectedNumber):
        Cursor('\N{ARABIC-INDIC DIGIT THREE}').number()
