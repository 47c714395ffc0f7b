import inspect

from miischeme.environment import Environment
from miischeme.excs import RuntimeErrorException, SyntaxErrorException
from miischeme.expression import ExpressionTree, Number, Symbol
from miischeme.globals import Builtin, format_value

DEFAULT_MAX_DEPTH = 200

SPECIAL_FORMS = {}


def special_form(name, syntax=None):
    """ Registers the decorated method as the handler of a special form.

        Handlers receive the environment, the whole expression and the
        unevaluated operands. When the operands do not fit the handler's
        signature the form is malformed, and the expected syntax is shown
        to the user (derived from the signature unless given).
    """
    def wrapper(func):
        assert name not in SPECIAL_FORMS, 'special form redefined'
        func.syntax = syntax or expected_syntax(name, func)
        SPECIAL_FORMS[name] = func
        return func
    return wrapper


def expected_syntax(name, func):
    parts = [name]
    for param in list(inspect.signature(func).parameters.values())[3:]:
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            parts.append('<%s>...' % param.name)
        elif param.default is not inspect.Parameter.empty:
            parts.append('[<%s>]' % param.name)
        else:
            parts.append('<%s>' % param.name)
    return '(%s)' % ' '.join(parts)


def is_true(value):
    return value is not False and value is not None


def ensure_identifier(expr):
    if not isinstance(expr, Symbol):
        raise SyntaxErrorException('not_an_identifier', fragment=str(expr))
    return expr.name


def ensure_parameters(expr):
    if not isinstance(expr, ExpressionTree):
        raise SyntaxErrorException('not_an_identifier', fragment=str(expr))

    names = []
    for param in expr:
        name = ensure_identifier(param)
        if name in names:
            raise SyntaxErrorException('duplicate_parameter', name=name)
        names.append(name)
    return names


class Procedure:
    """ A user defined operator, closing over the environment it was created in """

    def __init__(self, name, parameters, body, env):
        self.name = name
        self.parameters = parameters
        self.body = body
        self.env = env

    def bind_arguments(self, args):
        if len(args) != len(self.parameters):
            raise RuntimeErrorException(
                'arity', operator=self.name, expected=len(self.parameters), got=len(args)
            )

        # every call gets its own scope
        call_env = Environment.child_of(self.env)
        for name, value in zip(self.parameters, args):
            call_env.define(name, value)
        return call_env

    def __str__(self):
        return '<procedure %s>' % self.name

    def __repr__(self):
        return 'Procedure(%s, %s)' % (self.name, ', '.join(self.parameters))


class Evaluator:
    def __init__(self, max_depth=DEFAULT_MAX_DEPTH):
        self.max_depth = max_depth
        self.operation_stack = []

    def print_stacktrace(self):
        print('Call Stack (most recent last):')
        for expr in self.operation_stack[:-1]:
            print(' ', expr.print_short())

        if self.operation_stack:
            print('Exception happened here:', self.operation_stack[-1])

    def evaluate(self, expr, env):
        """
        Entry point for the evaluation of an expression.

        The operation stack is left untouched when evaluation fails, so
        that print_stacktrace can show where it happened.
        """
        self.operation_stack = []
        try:
            return self.eval(expr, env)
        except RecursionError:
            raise RuntimeErrorException('max_depth', depth=self.max_depth) from None

    def eval(self, expr, env):
        if isinstance(expr, Number):
            return expr.value
        elif isinstance(expr, Symbol):
            return env.lookup(expr.name)
        elif not expr.children:
            # the empty form has no effect
            return None

        if len(self.operation_stack) >= self.max_depth:
            raise RuntimeErrorException('max_depth', depth=self.max_depth)

        self.operation_stack.append(expr)
        head, operands = expr.children[0], expr.children[1:]
        if isinstance(head, Symbol) and head.name in SPECIAL_FORMS:
            result = self.call_special_form(SPECIAL_FORMS[head.name], env, expr, operands)
        else:
            result = self.evaluate_function_call(expr, env)
        self.operation_stack.pop()
        return result

    def call_special_form(self, handler, env, expr, operands):
        try:
            inspect.signature(handler).bind(self, env, expr, *operands)
        except TypeError:
            raise SyntaxErrorException('expected_syntax', syntax=handler.syntax) from None
        return handler(self, env, expr, *operands)

    def evaluate_function_call(self, expr, env):
        # the operator is resolved before any operand is evaluated,
        # operands are then evaluated left to right in the same environment
        fun = self.eval(expr.children[0], env)
        if not isinstance(fun, (Builtin, Procedure)):
            raise RuntimeErrorException('not_an_operator', value=format_value(fun))

        args = [self.eval(child, env) for child in expr.children[1:]]
        return self.call_function(fun, args)

    def call_function(self, fun, args):
        if isinstance(fun, Procedure):
            return self.eval_body(fun.body, fun.bind_arguments(args))
        return fun(*args)

    def eval_body(self, body, env):
        result = None
        for expr in body:
            result = self.eval(expr, env)
        return result

    @special_form('define', syntax='(define <name> <value>) | (define (<name> <parameter>...) <body>...)')
    def handle_define(self, env, expr, target, *body):
        if isinstance(target, ExpressionTree):
            if not target.children:
                raise SyntaxErrorException('expected_syntax', syntax=self.handle_define.syntax)
            name = ensure_identifier(target.children[0])
            parameters = ensure_parameters(ExpressionTree(target.children[1:]))
            return env.define(name, Procedure(name, parameters, list(body), env))

        name = ensure_identifier(target)
        if len(body) != 1:
            raise SyntaxErrorException('expected_syntax', syntax=self.handle_define.syntax)
        return env.define(name, self.eval(body[0], env))

    @special_form('lambda')
    def handle_lambda(self, env, expr, parameters, *body):
        return Procedure('lambda', ensure_parameters(parameters), list(body), env)

    @special_form('if')
    def handle_if(self, env, expr, cond, iftrue, iffalse=None):
        if is_true(self.eval(cond, env)):
            return self.eval(iftrue, env)
        elif iffalse is not None:
            return self.eval(iffalse, env)
        return None

    @special_form('let')
    def handle_let(self, env, expr, bindings, *body):
        # (let (name-1 value-1 ... name-n value-n) <body>...)
        #
        # each value is evaluated in the new scope, so it can refer
        # to the names bound before it
        if not isinstance(bindings, ExpressionTree) or len(bindings) % 2:
            raise SyntaxErrorException('expected_syntax', syntax=self.handle_let.syntax)

        new_env = Environment.child_of(env)
        for i in range(0, len(bindings), 2):
            name = ensure_identifier(bindings[i])
            new_env.define(name, self.eval(bindings[i + 1], new_env))
        return self.eval_body(body, new_env)

    @special_form('begin')
    def handle_begin(self, env, expr, *children):
        return self.eval_body(children, env)

    @special_form('and')
    def handle_and(self, env, expr, *children):
        for child in children:
            if not is_true(self.eval(child, env)):
                return False
        return True

    @special_form('or')
    def handle_or(self, env, expr, *children):
        for child in children:
            if is_true(self.eval(child, env)):
                return True
        return False


def evaluate(expr, env):
    return Evaluator().evaluate(expr, env)
