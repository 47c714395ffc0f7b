from miischeme.excs import SyntaxErrorException
from miischeme.expression import ExpressionTree, Number, Symbol
from miischeme.tokenizer import Token


class Parser:
    """ Recursive descent parser with one token of lookahead """

    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.position = 0

    def peek(self):
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def advance(self):
        token = self.tokens[self.position]
        self.position += 1
        return token

    def at_end(self):
        return self.position >= len(self.tokens)

    def parse(self):
        """ Parses exactly one expression which must span the whole token sequence
        """
        if self.at_end():
            raise SyntaxErrorException('empty_input')

        expr = self.parse_checked()
        if not self.at_end():
            remaining = self.tokens[self.position:]
            raise SyntaxErrorException(
                'trailing_tokens', fragment=' '.join(map(str, remaining)),
                column=remaining[0].column
            )
        return expr

    def parse_many(self):
        expressions = []
        while not self.at_end():
            expressions.append(self.parse_checked())
        return expressions

    def parse_checked(self):
        try:
            return self.parse_expression()
        except RecursionError:
            raise SyntaxErrorException('nesting_too_deep') from None

    def parse_expression(self):
        token = self.advance()

        if token.type == Token.TOKEN_NUMBER:
            return Number(token.value)
        elif token.type == Token.TOKEN_SYMBOL:
            return Symbol(token.value)
        elif token.type == Token.TOKEN_EXPR_END:
            raise SyntaxErrorException('unexpected_close', column=token.column)

        children = []
        while True:
            following = self.peek()
            if following is None:
                raise SyntaxErrorException('missing_close', column=token.column)
            elif following.type == Token.TOKEN_EXPR_END:
                self.advance()
                return ExpressionTree(children)
            children.append(self.parse_expression())


def parse(tokens):
    return Parser(tokens).parse()


def parse_many(tokens):
    """ Parses a program made of any number of consecutive expressions """
    return Parser(tokens).parse_many()
