from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession

from .util import CalcError
from .lexer import Lexer
from .calculator import Calculator
from .continuation import ContinuationPolicy
from .display import Display
from .session import Session
from .keypad import EVALUATE


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    # Keys don't make sense across runs.
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the keystroke calculator.

    Each input character is a key press, = shows the screen.
    '''

    DEFAULT_PROMPT = '> '
    LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'

    def dumper(self):
        '''
        Dump all lexemes matches and the tokens they parse to.
        '''
        lexer = Lexer()
        print('[groups]\t<repr(lexeme)>\t<token>')
        for line in self.args.expressions:
            try:
                for match in lexer.lex(line.strip()):
                    groups = lexer.matchedgroups(match)
                    token = (lexer.parse(groups)
                             if lexer.isfeedable(match)
                             else None)
                    print(*groups.keys(),
                          repr(match.group(0)),
                          token,
                          sep='\t')
            except CalcError as e:
                print(e.args[0], file=stderr)

    def executor(self):
        '''
        Feed keys to a calculator session, printing the screen on every =.
        '''
        session = self._session()
        for line in self.args.expressions:
            for key in line:
                if key.isspace():
                    continue
                screen = session.feed(key)
                if key == EVALUATE:
                    print(*screen, sep='\n')

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.OPERAND_LEXEME)

    def _session(self):
        continuation = ContinuationPolicy(persist=not self.args.ephemeral)
        return Session(Calculator(continuation=continuation),
                       Display(columns=self.args.width),
                       on_full=self.args.on_full)

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
            description='Keystroke calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-w', '--width',
                                          type=int,
                                          default=Display.COLUMNS,
                                          help='display columns')
        self.argument_parser.add_argument('--ephemeral',
                                          action='store_true',
                                          help="don't show the previous "
                                               "result in a continued "
                                               "expression")
        self.argument_parser.add_argument('--on-full',
                                          choices=Session.ON_FULL,
                                          default='drop',
                                          help='what a key does when the '
                                               'expression is full')
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
        logging.basicConfig(level=logging.DEBUG
                            if self.args.verbose
                            else logging.WARNING,
                            format=self.LOG_FORMAT)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
