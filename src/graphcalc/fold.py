'''
Right-to-left traversal of a postfix stack.

A stack never holds a tree; the tree is implied by each token's arity. Both
evaluating and rendering walk that implied tree the same way, so they share
this one traversal and only supply what to do at each kind of token.
'''

from .tokens import Literal, Variable, Constant, UnaryOp, BinaryOp


class Fold:
    '''
    Consume one expression from the end of a stack.

    Subclasses implement literal, variable, constant, unary, binary and
    missing. Calling the fold on a stack answers the folded expression and
    the index the unconsumed part of the stack ends at.
    '''

    def __init__(self, observer=None):
        '''
        :param observer: Called with (token, folded) after each step. token
                         is None where an operand was missing.
        '''
        self.observer = observer

    def __call__(self, stack, end=None):
        '''
        Fold the expression ending just before index end (default: all).

        Works with an explicit stack of operators still waiting on operands,
        so however deep the expression, Python's recursion limit isn't hit.
        '''
        if end is None:
            end = len(stack)
        # (operator, operands folded so far), innermost last
        pending = []
        while True:
            if end <= 0:
                token = None
                folded = self.missing()
            else:
                end -= 1
                token = stack[end]
                if isinstance(token, (UnaryOp, BinaryOp)):
                    pending.append((token, []))
                    continue
                elif isinstance(token, Constant):
                    folded = self.constant(token)
                elif isinstance(token, Variable):
                    folded = self.variable(token)
                elif isinstance(token, Literal):
                    folded = self.literal(token)
                else:
                    raise TypeError('Not a token: {!r}'.format(token))
            self._observe(token, folded)
            # Hand the operand to whatever is waiting on it, completing as
            # many operators as that satisfies.
            while pending:
                token, operands = pending[-1]
                operands.append(folded)
                if isinstance(token, UnaryOp):
                    folded = self.unary(token, operands[0])
                elif len(operands) == 2:
                    # Right operand is nearest the top, so came off first.
                    right, left = operands
                    folded = self.binary(token, left, right)
                else:
                    break
                pending.pop()
                self._observe(token, folded)
            else:
                return folded, end

    def _observe(self, token, folded):
        if self.observer is not None:
            self.observer(token, folded)

    def literal(self, token):
        raise NotImplementedError

    def variable(self, token):
        raise NotImplementedError

    def constant(self, token):
        raise NotImplementedError

    def unary(self, token, operand):
        raise NotImplementedError

    def binary(self, token, left, right):
        raise NotImplementedError

    def missing(self):
        raise NotImplementedError
