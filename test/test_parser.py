import pytest

from miischeme.excs import SyntaxErrorException
from miischeme.expression import ExpressionTree, Number, Symbol
from miischeme.parser import parse, parse_many
from miischeme.tokenizer import Token, tokenize


def test_parse_list():
    assert parse(tokenize('( + 1 2 )')) == ExpressionTree([
        Symbol('+'), Number(1), Number(2)
    ])


def test_parse_atoms():
    assert parse(tokenize('42')) == Number(42)
    assert parse(tokenize('x')) == Symbol('x')
    assert parse(tokenize('()')) == ExpressionTree([])


def test_nesting():
    expr = parse(tokenize('(a (b (c)) d)'))
    assert expr == ExpressionTree([
        Symbol('a'),
        ExpressionTree([Symbol('b'), ExpressionTree([Symbol('c')])]),
        Symbol('d'),
    ])


def test_structure_round_trip():
    for text in ['(define (f x) (+ x (* 2 x)))', '()', '(() (()) ((a) b))',
                 '(a (b (c)) d)', '42', 'x']:
        assert str(parse(tokenize(text))) == text


def test_balanced_parentheses():
    parse(tokenize('(()()((())())())'))

    with pytest.raises(SyntaxErrorException) as exc:
        parse(tokenize('(((())'))
    assert exc.value.reason == 'missing_close'

    with pytest.raises(SyntaxErrorException) as exc:
        parse(tokenize('(())))'))
    assert exc.value.reason == 'trailing_tokens'


def test_trailing_close():
    tokens = [Token('('), Token('define'), Token('x'), Token(10), Token(')')]
    assert parse(tokens) == ExpressionTree([Symbol('define'), Symbol('x'), Number(10)])

    with pytest.raises(SyntaxErrorException) as exc:
        parse(tokens + [Token(')')])
    assert exc.value.reason == 'trailing_tokens'
    assert exc.value.details['fragment'] == ')'


def test_trailing_expression():
    with pytest.raises(SyntaxErrorException) as exc:
        parse(tokenize('(a) b c'))
    assert exc.value.details == {'fragment': 'b c', 'column': 4}


def test_missing_close_reports_open_paren():
    with pytest.raises(SyntaxErrorException) as exc:
        parse(tokenize('(a (b c)'))
    assert exc.value.reason == 'missing_close'
    assert exc.value.details == {'column': 0}


def test_unexpected_close():
    with pytest.raises(SyntaxErrorException) as exc:
        parse(tokenize(')'))
    assert exc.value.reason == 'unexpected_close'


def test_empty_input():
    with pytest.raises(SyntaxErrorException) as exc:
        parse([])
    assert exc.value.reason == 'empty_input'


def test_parse_many():
    assert parse_many(tokenize('(a) (b 1) 3')) == [
        ExpressionTree([Symbol('a')]),
        ExpressionTree([Symbol('b'), Number(1)]),
        Number(3),
    ]
    assert parse_many([]) == []

    with pytest.raises(SyntaxErrorException):
        parse_many(tokenize('(a))'))


def test_deep_nesting():
    with pytest.raises(SyntaxErrorException) as exc:
        parse(tokenize('(' * 5000 + ')' * 5000))
    assert exc.value.reason == 'nesting_too_deep'


def test_print_indent():
    expr = parse(tokenize('(f (g 1) x)'))
    assert expr.print_indent() == '\n'.join([
        '(',
        '  f',
        '  (',
        '    g',
        '    1',
        '  )',
        '  x',
        ')',
    ])
    assert expr.print_short() == '(f (g 1) x)'
    assert parse(tokenize('(f (g (h)))')).print_short() == '(f (g (...)))'


def test_number_token_built_from_text():
    expr = parse([Token('10')])
    assert expr == Number(10)
    assert repr(expr) == 'Number(10)'
