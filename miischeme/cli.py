import sys
import traceback

import click

from prompt_toolkit import prompt
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.validation import ValidationError, Validator

from miischeme.environment import Environment
from miischeme.evaluator import DEFAULT_MAX_DEPTH, Evaluator
from miischeme.excs import LexError, MiischemeException, SyntaxErrorException
from miischeme.globals import format_value
from miischeme.messages import DEFAULT_LANG, available_languages
from miischeme.utils import eval_expr, load_prelude, parse_expr, run_line


class ExpressionValidator(Validator):
    def __init__(self, lang=None):
        self.lang = lang

    def validate(self, document):
        text = document.text
        try:
            _ = parse_expr(text)
        except (LexError, SyntaxErrorException) as exc:
            raise ValidationError(message=exc.render(self.lang))


def prompt_reader(lang=None):
    """ Reads one line at a time from the terminal, raises EOFError at the end of input """
    hist = InMemoryHistory()
    validator = ExpressionValidator(lang)

    def read_line():
        return prompt(u'miischeme> ', history=hist, validator=validator,
                      validate_while_typing=False)
    return read_line


def report_error(exc, inpr, lang, show_traceback):
    if show_traceback:
        inpr.print_stacktrace()
        traceback.print_exc()
    print(exc.render(lang))


def repl(inpr, env, read_line=None, lang=None, show_traceback=False):
    print('MIISCHEME ver. 0.1')
    read_line = read_line or prompt_reader(lang)

    while True:
        try:
            text = read_line()
        except EOFError:
            print('Quit')
            break
        except KeyboardInterrupt:
            print('Interrupted (CTRL+D to exit)')
            continue

        if not text.strip():
            continue

        try:
            result = run_line(text, inpr, env)
        except MiischemeException as exc:
            report_error(exc, inpr, lang, show_traceback)
            continue

        print(format_value(result))


@click.command()
@click.argument('input-file', type=click.File('r'), nargs=-1)
@click.option('-e', '--expression', help='Evaluate this expression and print the result')
@click.option('--without-prelude', '-S', is_flag=True, help='Do not load the prelude at startup.')
@click.option('--do-repl', '-r', is_flag=True, help='Start the REPL after evaluating the file and/or the expression')
@click.option('--lang', '-l', type=click.Choice(available_languages()), default=DEFAULT_LANG,
              envvar='MIISCHEME_LANG', show_default=True, help='Language of the error messages.')
@click.option('--max-depth', type=click.IntRange(min=1), default=DEFAULT_MAX_DEPTH,
              envvar='MIISCHEME_MAX_DEPTH', show_default=True, help='Maximum nesting of evaluated forms.')
@click.option('--traceback', '-t', 'show_traceback', is_flag=True,
              help='Print the call stack when an error happens.')
def main(input_file, expression, without_prelude, do_repl, lang, max_depth, show_traceback):
    '''
    Interpreter for a small Lisp dialect.

    Starts the REPL when invoked without arguments. Otherwise, executes the code in
    the files (if given), then executes the provided expression (if given), then
    enters the REPL (if the flag is specified).
    '''
    inpr = Evaluator(max_depth=max_depth)
    env = Environment.new()
    if not without_prelude:
        load_prelude(inpr, env)

    try:
        for f in input_file:
            eval_expr(f.read(), inpr, env)

        if expression:
            print(format_value(eval_expr(expression, inpr, env)))
    except MiischemeException as exc:
        report_error(exc, inpr, lang, show_traceback)
        sys.exit(1)

    if do_repl or (not expression and not input_file):
        repl(inpr, env, lang=lang, show_traceback=show_traceback)


if __name__ == '__main__':
    main()
