'''
The calculator's model: a postfix program, and the variables it refers to.
'''

from collections.abc import Mapping

from .evaluation import evaluate
from .lexer import Lexer
from .rendering import description, full_description
from .tokens import Literal, Variable
from .vocabulary import VOCABULARY


class Brain:
    '''
    Postfix stack of tokens, plus variable bindings.

    Every push answers the resulting evaluation, for immediate display.
    Nothing here raises on bad input: failure is an Error result, and pushing
    an unknown operator does nothing.
    '''

    # Variable memory recall uses, and graphs are plotted over.
    MEMORY = '\N{SCRIPT CAPITAL M}'

    def __init__(self, vocabulary=VOCABULARY, observer=None):
        '''
        Create empty calculator.

        :param vocabulary: Symbol to Constant, UnaryOp or BinaryOp.
        :param observer: Called with (token, folded) at every step of every
                         evaluation and rendering.
        '''
        self.vocabulary = vocabulary
        self.observer = observer
        self.stack = []
        self.variables = dict()
        self._lexer = Lexer()

    def push_literal(self, value):
        self.stack.append(Literal(float(value)))
        return self.evaluate_result()

    def push_variable(self, name):
        self.stack.append(Variable(name))
        return self.evaluate_result()

    def push_operator(self, symbol):
        '''
        Push the operator or constant spelled symbol, if there is one.
        '''
        token = self.vocabulary.get(symbol)
        if token is not None:
            self.stack.append(token)
        return self.evaluate_result()

    def undo(self):
        '''
        Take back the last push.
        '''
        if self.stack:
            self.stack.pop()

    def clear_stack(self):
        self.stack.clear()

    def clear_variables(self):
        self.variables.clear()

    def clear(self):
        self.clear_stack()
        self.clear_variables()

    def set_variable(self, name, value):
        self.variables[name] = float(value)

    def get_variable(self, name):
        return self.variables.get(name)

    def evaluate_result(self):
        '''
        Evaluate the topmost expression on the stack. Others are ignored.
        '''
        return evaluate(self.stack, self.variables, observer=self.observer)[0]

    def evaluate(self):
        '''
        Value of the topmost expression, or None if it evaluates to an Error.
        '''
        return self.evaluate_result().value

    @property
    def description(self):
        '''
        Topmost expression in infix notation.
        '''
        return description(self.stack, observer=self.observer)

    @property
    def full_description(self):
        '''
        Every expression on the stack in infix notation, topmost first.
        '''
        return full_description(self.stack, observer=self.observer)

    def __str__(self):
        return self.description

    def snapshot(self):
        '''
        Return stack and variables as plain, serializable data.
        '''
        return {
            'stack': [str(token) for token in self.stack],
            'vars': dict(self.variables),
        }

    def restore(self, snapshot):
        '''
        Replace stack and variables with those of snapshot.

        Stack entries are looked up in the vocabulary, then read as numbers,
        and failing both taken to be variable names.

        Anything but a mapping is no snapshot, and is ignored. Within one, a
        stack that isn't a list, or vars that aren't a mapping, restore as
        empty.
        '''
        if not isinstance(snapshot, Mapping):
            return
        stack = snapshot.get('stack')
        if not isinstance(stack, (list, tuple)):
            stack = ()
        variables = snapshot.get('vars')
        if not isinstance(variables, Mapping):
            variables = {}
        self.stack = [self._resolve(str(text)) for text in stack]
        self.variables = dict()
        for name, value in variables.items():
            try:
                self.variables[str(name)] = float(value)
            except (TypeError, ValueError):
                continue

    program = property(snapshot, restore)

    def _resolve(self, text):
        token = self.vocabulary.get(text)
        if token is not None:
            return token
        value = self._lexer.literal(text)
        if value is not None:
            return Literal(value)
        return Variable(text)

    def clone(self):
        '''
        Independent copy, sharing no mutable state with this one.
        '''
        clone = type(self)(vocabulary=self.vocabulary, observer=self.observer)
        clone.restore(self.snapshot())
        return clone
