'''
The constants and operators a calculator knows, keyed by symbol.
'''

from types import MappingProxyType
import operator
import math

from .tokens import Constant, UnaryOp, BinaryOp, Value, Error, ErrorKind
from .util import ieee


def _value(f):
    '''
    Lift a float function into one answering a Value.
    '''
    f = ieee(f)

    def wrapped(*args):
        return Value(f(*args))
    wrapped.__doc__ = f.__doc__
    wrapped.__name__ = f.__name__
    return wrapped


@ieee
def _truediv(left, right):
    return left / right


def _divide(left, right):
    if right == 0:
        return Error(ErrorKind.DIVIDE_BY_ZERO)
    return Value(_truediv(left, right))


def _power(base, exponent):
    '''
    pow(), minus the exceptions.
    '''
    try:
        return Value(math.pow(base, exponent))
    except OverflowError:
        if base < 0 and float(exponent).is_integer() and exponent % 2:
            return Value(-math.inf)
        return Value(math.inf)
    except ValueError:
        # 0 to a negative power, or a negative base to a fractional one
        return Value(math.inf if base == 0 else math.nan)


def _sqrt(x):
    if x < 0:
        return Error(ErrorKind.IMAGINARY)
    return Value(math.sqrt(x))


CONSTANTS = (
    Constant('\N{GREEK SMALL LETTER PI}', math.pi),
    Constant('e', math.e),
)

BINARY = (
    BinaryOp('+', 1, _value(operator.__add__)),
    BinaryOp('\N{MINUS SIGN}', 1, _value(operator.__sub__)),
    BinaryOp('\N{MULTIPLICATION SIGN}', 2, _value(operator.__mul__)),
    BinaryOp('/', 2, _divide),
    BinaryOp('^', 4, _power),
)

UNARY = (
    UnaryOp('\N{PLUS-MINUS SIGN}', _value(operator.__neg__)),
    UnaryOp('\N{SQUARE ROOT}', _sqrt),
    UnaryOp('sin', _value(math.sin)),
    UnaryOp('cos', _value(math.cos)),
    UnaryOp('tan', _value(math.tan)),
)

# Symbol to token. Read-only, shared by every Brain.
VOCABULARY = dict()
for namespace in CONSTANTS, BINARY, UNARY:
    VOCABULARY.update((str(token), token) for token in namespace)
assert len(VOCABULARY) == len(CONSTANTS) + len(BINARY) + len(UNARY), \
    'duplicate symbol in vocabulary'
VOCABULARY = MappingProxyType(VOCABULARY)

# Easier to type spellings, for keyboard entry only. Never stored.
ALIASES = MappingProxyType({
    '-': '\N{MINUS SIGN}',
    '*': '\N{MULTIPLICATION SIGN}',
    'pi': '\N{GREEK SMALL LETTER PI}',
    'sqrt': '\N{SQUARE ROOT}',
    'neg': '\N{PLUS-MINUS SIGN}',
})
