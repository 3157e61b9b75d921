'''
Tokens of a calculator program, and what evaluating one produces.

Every kind of token is its own namedtuple, so a stack is just a sequence of
small immutable values. Operators carry their function with them.
'''

from collections import namedtuple
from enum import Enum


class _Variant:
    '''
    Equal only to the same kind of token or result: Literal(2) isn't Value(2).
    '''
    __slots__ = ()

    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    __hash__ = tuple.__hash__


class ErrorKind(Enum):
    '''
    Why a stack didn't evaluate to a number. Values are display messages.
    '''
    UNDEFINED_VARIABLE = 'Undefined Variable'
    MISSING_OPERAND = 'Operand Missing'
    DIVIDE_BY_ZERO = 'Division by Zero'
    IMAGINARY = 'keep it Real!'


class Value(_Variant, namedtuple('Value', 'value')):
    '''
    Successful result.
    '''
    __slots__ = ()

    error = None

    def __str__(self):
        return '%g' % self.value


class Error(_Variant, namedtuple('Error', 'kind')):
    '''
    Failed result. Has no value.
    '''
    __slots__ = ()

    value = None

    @property
    def error(self):
        return self.kind

    def __str__(self):
        return self.kind.value


class Literal(_Variant, namedtuple('Literal', 'value')):
    __slots__ = ()

    def __str__(self):
        # repr, not %g: this is what snapshots store, and must read back exact
        return repr(float(self.value))


class Variable(_Variant, namedtuple('Variable', 'name')):
    __slots__ = ()

    def __str__(self):
        return self.name


class Constant(_Variant, namedtuple('Constant', 'symbol value')):
    __slots__ = ()

    def __str__(self):
        return self.symbol


class UnaryOp(_Variant, namedtuple('UnaryOp', 'symbol apply')):
    '''
    Prefix operator. apply takes a float and returns a Value or Error.
    '''
    __slots__ = ()

    def __str__(self):
        return self.symbol


class BinaryOp(_Variant, namedtuple('BinaryOp', 'symbol precedence apply')):
    '''
    Infix operator. apply takes (left, right) floats and returns a Value or
    Error. Higher precedence binds tighter.
    '''
    __slots__ = ()

    def __str__(self):
        return self.symbol
