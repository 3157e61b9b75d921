'''
RPN graphing calculator.

Keeps a postfix program as a flat stack of tokens: numbers, variables,
constants, unary and binary operators. Evaluates it, with errors as plain
results rather than exceptions, and renders it back in infix notation with
only the parentheses it needs. The whole state snapshots to plain data, which
is also how a copy is made to plot the program as a function of one variable.
'''

from .brain import Brain
from .cli import CLI, Calculator
from .lexer import Lexer
from .tokens import (ErrorKind, Value, Error,
                     Literal, Variable, Constant, UnaryOp, BinaryOp)
from .vocabulary import VOCABULARY


__all__ = ('Brain', 'Calculator', 'Lexer', 'CLI', 'VOCABULARY',
           'ErrorKind', 'Value', 'Error',
           'Literal', 'Variable', 'Constant', 'UnaryOp', 'BinaryOp')
