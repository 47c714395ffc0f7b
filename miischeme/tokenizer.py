import re

from miischeme.excs import LexError


INT_MIN = -2 ** 63
INT_MAX = 2 ** 63 - 1


def to_integer(word, column=None):
    # digit count is checked first, int() refuses very long strings
    if len(word.lstrip('0')) > len(str(INT_MAX)):
        raise LexError(word, column)

    value = int(word)
    if value > INT_MAX:
        raise LexError(word, column)
    return value


class Token:
    TOKEN_EXPR_BEGIN = 1
    TOKEN_EXPR_END = 2
    TOKEN_NUMBER = 3
    TOKEN_SYMBOL = 4

    NUMBER_RE = re.compile(r'[0-9]+')

    def __init__(self, value, type_=None, column=None):
        self.type = type_ or Token.guess_token_type(value)
        if self.type == Token.TOKEN_NUMBER and isinstance(value, str):
            value = to_integer(value, column)
        self.value = value
        self.column = column

    @staticmethod
    def guess_token_type(word):
        if isinstance(word, int):
            return Token.TOKEN_NUMBER
        elif word == '(':
            return Token.TOKEN_EXPR_BEGIN
        elif word == ')':
            return Token.TOKEN_EXPR_END
        elif Token.NUMBER_RE.fullmatch(word):
            return Token.TOKEN_NUMBER
        else:
            return Token.TOKEN_SYMBOL

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        names = {
            Token.TOKEN_EXPR_BEGIN: 'OpenParen',
            Token.TOKEN_EXPR_END: 'CloseParen',
            Token.TOKEN_NUMBER: 'Number',
            Token.TOKEN_SYMBOL: 'Symbol',
        }
        if self.type in (Token.TOKEN_NUMBER, Token.TOKEN_SYMBOL):
            return '%s(%r)' % (names[self.type], self.value)
        return names[self.type]

    # column is bookkeeping, two tokens are the same token regardless of it
    def __eq__(self, other):
        return (isinstance(other, Token)
                and other.value == self.value
                and other.type == self.type)

    def __hash__(self):
        return hash((self.type, self.value))


class Tokenizer:
    COMMENT = ';'

    def tokenize(self, string):
        """ Splits the text into a list of tokens.

            Parentheses are always tokens of their own, everything else is
            delimited by whitespace. Words made only of digits become numbers,
            every other word is a symbol.
        """
        return [self.classify(word, column) for word, column in self.split_words(string)]

    def split_words(self, string):
        cur_word = None
        start = None
        in_comment = False

        for column, char in enumerate(string):
            if in_comment:
                in_comment = char != '\n'
                continue

            if char.isspace() or char in '();':
                if cur_word is not None:
                    yield cur_word, start
                    cur_word = None

                if char == self.COMMENT:
                    in_comment = True
                elif char in '()':
                    yield char, column
            elif cur_word is None:
                cur_word, start = char, column
            else:
                cur_word += char

        if cur_word is not None:
            yield cur_word, start

    def classify(self, word, column):
        type_ = Token.guess_token_type(word)
        return Token(word, type_, column)


def tokenize(text):
    return Tokenizer().tokenize(text)
