'''
Lexical units shared by the lexer, parser and machine.
'''

from collections import namedtuple
from enum import Enum


class Kind(Enum):
    NUMBER = 'number'
    OPERATOR = 'operator'
    IDENTIFIER = 'identifier'
    LPAREN = 'lparen'
    RPAREN = 'rparen'
    COMMA = 'comma'
    # Anything the lexer couldn't classify. Left for the parser to reject.
    UNKNOWN = 'unknown'


class Token(namedtuple('Token', ['kind', 'text', 'value'])):
    '''
    Immutable lexeme, classified once at scan time.

    ``value`` is the float for numbers, ``None`` for everything else.
    '''
    __slots__ = ()

    SINGLE = {
        '(': Kind.LPAREN,
        ')': Kind.RPAREN,
        ',': Kind.COMMA,
    }

    @classmethod
    def number(cls, value, text=None):
        value = float(value)
        return cls(Kind.NUMBER, repr(value) if text is None else text, value)

    @classmethod
    def operator(cls, symbol):
        return cls(Kind.OPERATOR, symbol, None)

    @classmethod
    def identifier(cls, name):
        return cls(Kind.IDENTIFIER, name, None)

    @classmethod
    def single(cls, char):
        return cls(cls.SINGLE[char], char, None)

    @classmethod
    def unknown(cls, text):
        return cls(Kind.UNKNOWN, text, None)

    def __str__(self):
        return self.text

    def __repr__(self):
        return '<{} {!r}>'.format(self.kind.value, self.text)
