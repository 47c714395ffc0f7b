class Expression:
    """ Node of the parsed expression tree """

    def print_indent(self, indent=0):
        return '  ' * indent + str(self)


class Number(Expression):
    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        return isinstance(other, Number) and other.value == self.value

    def __hash__(self):
        return hash(('number', self.value))

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return 'Number(%d)' % self.value


class Symbol(Expression):
    def __init__(self, name):
        self.name = name

    def __eq__(self, other):
        return isinstance(other, Symbol) and other.name == self.name

    def __hash__(self):
        return hash(('symbol', self.name))

    def __str__(self):
        return self.name

    def __repr__(self):
        return 'Symbol(%r)' % self.name


class ExpressionTree(Expression):
    """ A parenthesized list of expressions.

        The first child is conventionally the operator, but the tree does
        not enforce any shape: that is up to the evaluator.
    """
    def __init__(self, children=None):
        self.children = list(children or [])

    def __eq__(self, other):
        return isinstance(other, ExpressionTree) and other.children == self.children

    def __hash__(self):
        return hash(tuple(self.children))

    def __len__(self):
        return len(self.children)

    def __iter__(self):
        return iter(self.children)

    def __getitem__(self, item):
        return self.children[item]

    def __repr__(self):
        return 'List(%r)' % self.children

    def print_indent(self, indent=0):
        ind = '  '
        text = ['%s(' % (ind * indent)]
        for child in self.children:
            text.append(child.print_indent(indent + 1))
        text.append(ind * indent + ')')
        return '\n'.join(text)

    def print_short(self):
        return ExpressionTree.print_short_format(self.children)

    def __str__(self):
        return ExpressionTree.to_string(self.children)

    @staticmethod
    def print_short_format(children):
        # nested lists are abbreviated, used in call stacks
        parts = []
        for child in children:
            if isinstance(child, ExpressionTree):
                parts.append('(' + ' '.join(
                    '(...)' if isinstance(c, ExpressionTree) else str(c)
                    for c in child
                ) + ')')
            else:
                parts.append(str(child))
        return '(%s)' % ' '.join(parts)

    @staticmethod
    def to_string(children):
        parts = []
        for child in children:
            if isinstance(child, ExpressionTree):
                parts.append(ExpressionTree.to_string(child.children))
            else:
                parts.append(str(child))
        return '(' + ' '.join(parts) + ')'

