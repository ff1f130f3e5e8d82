from os import path
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, ArgumentTypeError, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .util import EvalError
from .lexer import Lexer
from .evaluator import Evaluator, evaluate


log = logging.getLogger(__name__)


def _precision(text):
    n = int(text)
    if n < 0:
        raise ArgumentTypeError('precision must not be negative')
    return n


class InteractiveInput:
    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=self.history,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.

    Reads one expression per line and prints its value, until "exit" or
    end of input.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.infix_history'
    EXIT = 'exit'
    BANNER = "Infix calculator (type '{}' to quit)"
    GOODBYE = 'Exiting calculator. Goodbye!'

    def _lines(self):
        '''
        Yield expressions with line endings removed, stopping at EXIT.
        '''
        for line in self.args.expressions:
            line = line.rstrip('\r\n')
            if line == self.EXIT:
                return
            yield line

    def _format(self, value):
        '''
        Format result for output, honouring --precision.
        '''
        if self.args.precision is not None:
            return '{:.{}g}'.format(value, self.args.precision)
        # 14.0 prints as 14, but don't spell out 1e300 digit by digit.
        if value.is_integer() and abs(value) < 1e16:
            return '{:.0f}'.format(value)
        return repr(value)

    def dumper(self):
        '''
        Dump all lexemes of each expression, with their positions.
        '''
        lexer = Lexer()
        print('[group]\t<repr(lexeme)>\t<position>')
        for line in self._lines():
            try:
                for match in lexer.lex(line):
                    if lexer.isfeedable(match):
                        groups = lexer.matchedgroups(match)
                        print(*groups.keys(),
                              repr(match.group(0)),
                              match.start(),
                              sep='\t')
            except EvalError as e:
                print('Error:', e, file=stderr)

    def executor(self):
        '''
        Evaluate each expression and print its value.
        '''
        if self._interactive():
            print(self.BANNER.format(self.EXIT))
        for line in self._lines():
            try:
                value = evaluate(line)
            # Only this expression fails; carry on with the next
            except EvalError as e:
                log.debug('Failed to evaluate %r', line, exc_info=True)
                print('Error:', e, file=stderr)
            else:
                print(self._format(value))
        if self._interactive():
            print(self.GOODBYE)

    def grammar(self):
        '''
        Print the expression grammar, in EBNF.
        '''
        print(Evaluator.GRAMMAR.rstrip())

    def raw_grammar(self):
        '''
        Print current internally defined lexical grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return prompting input if either:

        - prompt explicitly specified.
        - both stdin/out are a tty

        Plain stdin otherwise.
        '''
        if self.args.prompt or stdin.isatty() and stdout.isatty():
            history = FileHistory(path.expanduser(self.HISTORY_FILE))
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=history)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Infix calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='log evaluations and show '
                                               'tracebacks for errors')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=_precision,
                                          help='significant digits to print')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-g', '--grammar',
                                       self.grammar),
                                      ('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(level=logging.DEBUG if self.args.verbose
                            else logging.WARNING)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
