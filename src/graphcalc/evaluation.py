'''
Evaluate a postfix stack to a Value, or an Error saying why not.
'''

from .fold import Fold
from .tokens import Value, Error, ErrorKind


class Evaluator(Fold):
    '''
    Fold a stack into a Result, looking variables up in a mapping.

    Errors are results like any other: they propagate up through the
    operators that would have used them, never raise.
    '''

    def __init__(self, variables, observer=None):
        super().__init__(observer=observer)
        self.variables = variables

    def literal(self, token):
        return Value(token.value)

    def variable(self, token):
        try:
            return Value(self.variables[token.name])
        except KeyError:
            return Error(ErrorKind.UNDEFINED_VARIABLE)

    def constant(self, token):
        return Value(token.value)

    def unary(self, token, operand):
        if operand.error is not None:
            return operand
        return token.apply(operand.value)

    def binary(self, token, left, right):
        # An error on the right wins, even over one on the left.
        if right.error is not None:
            return right
        if left.error is not None:
            return left
        return token.apply(left.value, right.value)

    def missing(self):
        return Error(ErrorKind.MISSING_OPERAND)


def evaluate(stack, variables, observer=None):
    '''
    Evaluate the topmost expression on stack.

    Return the result and the rest of the stack, left unevaluated.
    '''
    result, end = Evaluator(variables, observer=observer)(stack)
    return result, stack[:end]
