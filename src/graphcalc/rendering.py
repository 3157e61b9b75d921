'''
Render a postfix stack in infix notation, parenthesizing only where needed.
'''

from collections import namedtuple
import sys

from .fold import Fold


# Precedence of anything that never needs parentheses around it.
MAX_PRECEDENCE = sys.maxsize


class Description(namedtuple('Description', 'text precedence')):
    __slots__ = ()

    def __str__(self):
        return self.text


def _parenthesize(text):
    return '(' + text + ')'


class Describer(Fold):
    '''
    Fold a stack into a Description.
    '''

    def literal(self, token):
        return Description('%g' % token.value, MAX_PRECEDENCE)

    def variable(self, token):
        return Description(token.name, MAX_PRECEDENCE)

    def constant(self, token):
        return Description(token.symbol, MAX_PRECEDENCE)

    def unary(self, token, operand):
        text = operand.text
        # sin(x), but √x; √(x+1) though.
        if len(token.symbol) > 1 or operand.precedence < MAX_PRECEDENCE:
            text = _parenthesize(text)
        return Description(token.symbol + text, MAX_PRECEDENCE)

    def binary(self, token, left, right):
        left_text, right_text = left.text, right.text
        if left.precedence < token.precedence:
            left_text = _parenthesize(left_text)
        if right.precedence < token.precedence:
            right_text = _parenthesize(right_text)
        return Description(left_text + token.symbol + right_text,
                           token.precedence)

    def missing(self):
        return Description('?', MAX_PRECEDENCE)


def describe(stack, observer=None):
    '''
    Render the topmost expression on stack.

    Return its text, the rest of the stack, and its precedence.
    '''
    (text, precedence), end = Describer(observer=observer)(stack)
    return text, stack[:end], precedence


def description(stack, observer=None):
    '''
    Infix text of the topmost expression only. Empty for an empty stack.
    '''
    if not stack:
        return ''
    return describe(stack, observer=observer)[0]


def full_description(stack, observer=None):
    '''
    Infix text of every expression on stack, comma-separated, topmost first.

    1 2 3 + renders as "2+3, 1".
    '''
    if not stack:
        return ''
    describer = Describer(observer=observer)
    texts = []
    end = len(stack)
    while end > 0:
        (text, _), end = describer(stack, end)
        texts.append(text)
    return ', '.join(texts)
