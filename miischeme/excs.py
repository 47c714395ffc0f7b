from miischeme.messages import render as render_message


class MiischemeException(Exception):
    """ Base class of every error raised by the interpreter.

        msg_id selects the message frame in the catalogs, details
        carries the structured payload used to render it
    """
    msg_id = None

    def __init__(self, reason=None, **details):
        self.reason = reason
        self.details = details

    def render(self, lang=None):
        return render_message(self, lang)

    def __str__(self):
        return self.render()

    def __repr__(self):
        return '%s(%r, %r)' % (self.__class__.__name__, self.reason, self.details)


class UndefinedVariable(MiischemeException):
    msg_id = 'undefined_variable'

    def __init__(self, name):
        super(UndefinedVariable, self).__init__(None, name=name)

    @property
    def name(self):
        return self.details['name']


class SyntaxErrorException(MiischemeException):
    msg_id = 'syntax_error'


class LexError(MiischemeException):
    msg_id = 'lex_error'

    def __init__(self, fragment, column, reason='integer_overflow'):
        super(LexError, self).__init__(reason, fragment=fragment, column=column)


class RuntimeErrorException(MiischemeException):
    msg_id = 'runtime_error'
