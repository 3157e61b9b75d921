from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL

from prompt_toolkit import PromptSession

from .util import CalcError, wrap_user_errors
from .brain import Brain
from .lexer import Lexer
from .vocabulary import ALIASES


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Debatable. Interferes with X11 selection.
                                    mouse_support=True,
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class Calculator:
    '''
    Keypad on top of a Brain: takes lexemes one at a time, and keeps the
    result of the last one for display.
    '''

    def __init__(self, brain=None, memory=Brain.MEMORY):
        '''
        Create calculator with empty display.

        :param memory: Variable > stores into when given no name.
        '''
        self.brain = Brain() if brain is None else brain
        self.memory = memory
        self.result = self.brain.evaluate_result()

    def feed(self, groups):
        '''
        Push or run a lexeme.

        :param groups: Matched groups of the lexeme, as Lexer.matchedgroups.
        '''
        if 'number' in groups:
            self.result = self.brain.push_literal(
                self._iconvert(groups['number']))
        elif 'store' in groups:
            self.store(groups.get('target', self.memory))
        else:
            symbol = groups.get('operator') or groups['word']
            symbol = ALIASES.get(symbol, symbol)
            if symbol in self.brain.vocabulary:
                self.result = self.brain.push_operator(symbol)
            elif symbol in type(self).COMMANDS:
                type(self).COMMANDS[symbol](self)
            else:
                self.result = self.brain.push_variable(symbol)

    def classify(self, groups):
        '''
        Return what feeding a lexeme would do, without doing it.
        '''
        for kind in 'number', 'store':
            if kind in groups:
                return kind
        symbol = groups.get('operator') or groups['word']
        symbol = ALIASES.get(symbol, symbol)
        if symbol in self.brain.vocabulary:
            return type(self.brain.vocabulary[symbol]).__name__
        elif symbol in type(self).COMMANDS:
            return 'command'
        return 'variable'

    @wrap_user_errors('Cannot convert {1}')
    def _iconvert(self, number):
        '''
        Convert typed number to float.
        '''
        return float(number.replace('_', ''))

    def status(self):
        '''
        Return the line to display: all expressions, and what the top one is.
        '''
        description = self.brain.full_description
        if not description:
            return '0'
        return '{} = {}'.format(description, self.result)

    def store(self, name):
        '''
        Store value on display into variable.
        '''
        if self.result.value is None:
            raise CalcError('Nothing to store into {}: {}'.format(
                name, self.result))
        self.brain.set_variable(name, self.result.value)
        self.result = self.brain.evaluate_result()

    def undo(self):
        '''
        Take back last push.
        '''
        self.brain.undo()
        self.result = self.brain.evaluate_result()

    def clear(self):
        '''
        Clear stack and variables.
        '''
        self.brain.clear()
        self.result = self.brain.evaluate_result()

    def clearstack(self):
        '''
        Clear stack, keeping variables.
        '''
        self.brain.clear_stack()
        self.result = self.brain.evaluate_result()

    def clearvars(self):
        '''
        Clear variables, keeping stack.
        '''
        self.brain.clear_variables()
        self.result = self.brain.evaluate_result()

    def printvars(self):
        '''
        Print all variables.
        '''
        for name, value in sorted(self.brain.variables.items()):
            print(name, '%g' % value, sep='\t')

    def printhelp(self):
        '''
        Print all possible operators and commands.
        '''
        print('operators:', *self.brain.vocabulary, file=stderr)
        print('aliases:', *('{}={}'.format(alias, symbol)
                            for alias, symbol
                            in sorted(ALIASES.items())), file=stderr)
        print('commands:', *sorted(type(self).COMMANDS), file=stderr)
        print('store:', '>name, or > for', self.memory, file=stderr)

    COMMANDS = {
        'undo': undo,
        'clear': clear,
        'clearstack': clearstack,
        'clearvars': clearvars,
        'vars': printvars,
        'help': printhelp,
    }


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '

    def dumper(self):
        '''
        Dump all lexemes matched, and what each would be fed as.
        '''
        calculator = Calculator(memory=self.args.memory)
        lexer = Lexer()
        print('[groups]\t<repr(lexeme)>\t<kind>')
        for line in self.args.expressions:
            for match in lexer.lex(line):
                if not lexer.isfeedable(match):
                    continue
                groups = lexer.matchedgroups(match)
                print(*groups.keys(),
                      repr(match.group(0)),
                      calculator.classify(groups),
                      sep='\t')

    def tracer(self, token, folded):
        '''
        Print one step of a fold, for --verbose.
        '''
        print('trace:', '?' if token is None else token, folded, sep='\t',
              file=stderr)

    def executor(self):
        '''
        Run calculator, printing status after each line.
        '''
        brain = Brain(observer=self.tracer if self.args.verbose else None)
        calculator = Calculator(brain, memory=self.args.memory)
        lexer = Lexer()
        for line in self.args.expressions:
            try:
                for match in lexer.lex(line):
                    if lexer.isfeedable(match):
                        calculator.feed(lexer.matchedgroups(match))
            # Abort entire rest of line, makes sense anyway
            except CalcError as e:
                print(e.args[0], file=stderr)
            print(calculator.status())

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='RPN graphing calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='trace every evaluation step')
        self.argument_parser.add_argument('-m', '--memory',
                                          default=Brain.MEMORY,
                                          help='variable > stores into')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
