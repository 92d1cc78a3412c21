from functools import reduce
import logging
import math
import operator

import regex

from .tokens import Token


logger = logging.getLogger(__name__)


# Adjacent signs, collapsed by sign arithmetic. Order matters: each pass runs
# over the output of the previous one.
ADJACENT_SIGNS = (
    ('+-', '-'),
    ('-+', '-'),
    ('++', '+'),
    ('--', '+'),
)


def rewrite(expression):
    '''
    Collapse adjacent signs so the lexer only ever sees one in a row.

    1--3 becomes 1+3, +-3 becomes -3, and so on.
    '''
    return reduce(lambda rewritten, pair: rewritten.replace(*pair),
                  ADJACENT_SIGNS,
                  expression)


def compact(expression):
    '''
    Strip all whitespace; the lexer doesn't expect any.
    '''
    return Lexer.SPACE.sub('', expression)


class Lexer:
    '''
    Lexer for infix arithmetic expressions.

    For consistency with the parser and machine, needs to be instantiated,
    despite holding no internal state between calls.
    '''
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    DIGIT = regex.compile(r'[0-9]', flags=FLAGS)
    LETTER = regex.compile(r'\p{Alpha}', flags=FLAGS)
    # In-progress numeral: 1, 1., .5, 1.5, or a lone dot still waiting on
    # its digits.
    NUMERAL = regex.compile(r'''
                            [0-9]*
                            (?:
                                \.
                                [0-9]*
                            )?
                            ''', flags=FLAGS)
    IDENTIFIER = regex.compile(r'\p{Alpha}+', flags=FLAGS)
    SPACE = regex.compile(r'\s+', flags=FLAGS)

    OPERATORS = frozenset('+-*/^%')
    # Signs that may be unary when they open a context.
    SIGNS = frozenset('+-')
    SINGLE = frozenset('(),')

    def tokenize(self, expression):
        '''
        Take a compacted, rewritten expression and return its tokens.

        Never fails: characters that can't be classified come out as unknown
        tokens, for the parser to reject.
        '''
        tokens = []
        # Multi-character token being built between iterations.
        wip = ''
        # Only one decimal point per number.
        decimal = False
        # Whether a digit already appeared in the current parenthesis
        # context. A sign before any digit is unary.
        digit = False

        def finish():
            nonlocal wip, decimal
            if wip:
                tokens.append(self._classify(wip))
            wip = ''
            decimal = False

        for char in expression:
            if char in self.OPERATORS or char in self.SINGLE:
                if char == '(':
                    digit = False
                elif char in self.SIGNS and not wip and not digit:
                    # -2 + 3 is really 0 - 2 + 3.
                    tokens.append(Token.number(0, '0'))
                    digit = True
                finish()
                if char in self.OPERATORS:
                    tokens.append(Token.operator(char))
                else:
                    tokens.append(Token.single(char))
            elif self.DIGIT.fullmatch(char):
                if wip and not self.NUMERAL.fullmatch(wip):
                    finish()
                wip += char
                digit = True
            elif char == '.':
                if wip and (decimal or not self.NUMERAL.fullmatch(wip)):
                    finish()
                wip += char
                decimal = True
            elif self.LETTER.fullmatch(char):
                if wip and not self.IDENTIFIER.fullmatch(wip):
                    finish()
                wip += char
            else:
                finish()
                tokens.append(Token.unknown(char))

        finish()
        logger.debug('Tokenized %r into %s', expression, tokens)
        return tokens

    def _classify(self, lexeme):
        '''
        Turn a finished multi-character lexeme into a token.
        '''
        if self.IDENTIFIER.fullmatch(lexeme):
            return Token.identifier(lexeme)
        try:
            value = float(lexeme)
        except ValueError:
            # A lone dot.
            return Token.unknown(lexeme)
        if not math.isfinite(value):
            return Token.unknown(lexeme)
        return Token.number(value, lexeme)
