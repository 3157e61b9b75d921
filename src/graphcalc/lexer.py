from functools import reduce
import operator

import regex

from .util import CalcError
from .vocabulary import VOCABULARY, ALIASES


class Lexer:
    '''
    Lexer for the keypad's *regular* grammar, and for literal text in
    snapshots.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Integral part of a number
    INTEGRAL = r'''
                # DO NOT REPEAT ME! I REPEAT MYSELF INTERNALLY!
                (?:
                    # 1, 12, or the 1 in 1_200.
                    \d{1,3}
                    (?:
                        # The 4, 45, etc. in 1234, 12345, etc.
                        \d
                        |
                        # Support not just digits, but thousands separators
                        (?:
                            _\d{3}
                        )
                    )*
                )
                '''
    # Fractional part of a number
    FRACTIONAL = r'''
                  # DO NOT REPEAT ME! I REPEAT MYSELF INTERNALLY!
                  (?:
                      \d+
                      |
                      (?:
                          \d{3}
                          (?:
                              _\d{3}
                          )*
                          (?:
                              _\d{1,2}
                          )?
                      )*
                  )
                  '''
    # Number, as typed. Unsigned: 4 ± is how you enter -4.
    # String formatting and regex is a tricky business, because of the braces.
    # It works here. Be careful in general!
    NUMBER = r'''
              (?:
                  # 1, 12, 1_200, 1_200. (notice trailing dot), 1.3
                  {INTEGRAL}
                  (?:
                      \.
                      {FRACTIONAL}?
                  )?
              )|(?:
                  # .2, 0.2, 0.200_200 but not 0.2_200
                  {INTEGRAL}?
                  \.
                  {FRACTIONAL}
              )
              '''.format(INTEGRAL=INTEGRAL, FRACTIONAL=FRACTIONAL)
    # Literal as a snapshot stores it: repr() of a float, so signed, with
    # exponent, or one of the non-finite ones.
    LITERAL = r'''
               [+-]?
               (?:
                   (?:
                       {NUMBER}
                   )
                   (?:
                       [eE][+-]?\d+
                   )?
                   |
                   inf
                   |
                   nan
               )
               '''.format(NUMBER=NUMBER)

    # Single character operators, and their aliases. Multi-letter ones (sin)
    # are words.
    SYMBOLS = sorted(symbol
                     for symbol
                     in set(VOCABULARY) | set(ALIASES)
                     if len(symbol) == 1 and not symbol.isalnum())
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, SYMBOLS)) + r')'
    # Variables, constants, commands, and multi-letter operators.
    WORD = r'[^\W\d_]\w*'
    # >x stores into x, > alone into memory.
    STORE = r'>(?<target>' + WORD + r')?'
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<store>' + STORE + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<word>' + WORD + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and return all lexemes.

        Raises CalcError at the first thing that isn't a lexeme, after
        yielding everything before it.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise CalcError("Couldn't lex {0}".format(line.strip()))

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to a calculator.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Return the groups a lexeme matched, and what they matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}

    def literal(self, text):
        '''
        Return the float text spells, or None if it isn't a literal.
        '''
        if regex.fullmatch(type(self).LITERAL, text,
                           flags=type(self).FLAGS) is None:
            return None
        try:
            return float(text.replace('_', ''))
        except ValueError:
            # The grammar lets a lone . through.
            return None
