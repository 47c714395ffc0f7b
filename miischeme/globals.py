import inspect

from miischeme.excs import RuntimeErrorException
from miischeme.tokenizer import INT_MAX, INT_MIN

GLOBALS = {}


class Builtin:
    """ An operator implemented in Python """

    def __init__(self, name, func):
        self.name = name
        self.func = func
        self.signature = inspect.signature(func)

    def __call__(self, *args):
        try:
            self.signature.bind(*args)
        except TypeError:
            raise RuntimeErrorException(
                'arity', operator=self.name, expected=self.expected_arity(), got=len(args)
            ) from None
        return self.func(*args)

    def expected_arity(self):
        required = 0
        for param in self.signature.parameters.values():
            if param.kind == inspect.Parameter.VAR_POSITIONAL:
                return '%d+' % required
            required += 1
        return str(required)

    def __str__(self):
        return '<builtin %s>' % self.name

    def __repr__(self):
        return 'Builtin(%s)' % self.name


def glob(name):
    def wrapper(func):
        assert name not in GLOBALS, 'global redefined'
        GLOBALS[name] = Builtin(name, func)
        return func
    return wrapper


GLOBALS['true'] = True
GLOBALS['false'] = False
GLOBALS['nil'] = None


def is_number(value):
    return isinstance(value, int) and not isinstance(value, bool)


def ensure_numbers(operator, args):
    for each in args:
        if not is_number(each):
            raise RuntimeErrorException('not_a_number', operator=operator, value=format_value(each))
    return args


def ensure_range(operator, value):
    if not INT_MIN <= value <= INT_MAX:
        raise RuntimeErrorException('overflow', operator=operator)
    return value


def format_value(value):
    """ Textual representation of a runtime value """
    if value is None:
        return 'nil'
    elif value is True:
        return 'true'
    elif value is False:
        return 'false'
    return str(value)


@glob('+')
def sum_(*args):
    acc = 0
    for each in ensure_numbers('+', args):
        acc = ensure_range('+', acc + each)
    return acc


@glob('-')
def subtr_(first, *rest):
    ensure_numbers('-', (first,) + rest)
    if not rest:
        return ensure_range('-', -first)

    acc = first
    for each in rest:
        acc = ensure_range('-', acc - each)
    return acc


@glob('*')
def mult(*args):
    acc = 1
    for each in ensure_numbers('*', args):
        acc = ensure_range('*', acc * each)
    return acc


@glob('/')
def division(first, *rest):
    # truncates towards zero like 64 bit integer division does
    acc = first
    for each in ensure_numbers('/', (first,) + rest)[1:]:
        if each == 0:
            raise RuntimeErrorException('division_by_zero', operator='/')
        quotient = abs(acc) // abs(each)
        acc = ensure_range('/', quotient if (acc < 0) == (each < 0) else -quotient)
    return acc


@glob('%')
def mod(a, b):
    ensure_numbers('%', (a, b))
    if b == 0:
        raise RuntimeErrorException('division_by_zero', operator='%')
    # remainder takes the sign of the dividend
    remainder = abs(a) % abs(b)
    return remainder if a >= 0 else -remainder


def same_value(a, b):
    if is_number(a) and is_number(b):
        return a == b
    return type(a) is type(b) and (a is b or a == b)


@glob('=')
def equality(first, *rest):
    prev = first
    for each in rest:
        if not same_value(prev, each):
            return False
        prev = each
    return True


@glob('!=')
def not_equality(first, *rest):
    return not equality(first, *rest)


def chained(operator, args, compare):
    ensure_numbers(operator, args)
    return all(compare(x, y) for x, y in zip(args[:-1], args[1:]))


@glob('<')
def lessthan(first, *rest):
    return chained('<', (first,) + rest, lambda x, y: x < y)


@glob('<=')
def lesseqthan(first, *rest):
    return chained('<=', (first,) + rest, lambda x, y: x <= y)


@glob('>')
def greaterthan(first, *rest):
    return chained('>', (first,) + rest, lambda x, y: x > y)


@glob('>=')
def greatereqthan(first, *rest):
    return chained('>=', (first,) + rest, lambda x, y: x >= y)


@glob('not')
def negate(thing):
    return thing is False or thing is None
