from miischeme.excs import UndefinedVariable
from miischeme.globals import GLOBALS


class Environment(object):
    """ Binding table chained to an optional parent.

        Lookups walk up the parent chain and, once the chain is exhausted,
        fall back to the built-in operators and constants. Definitions and
        removals only ever touch the local table, so a child can shadow a
        binding of its parent without changing it.

        The parent is a plain reference shared by all of its children, it
        lives as long as any of them does.
    """
    def __init__(self, parent=None, **bindings):
        self.parent = parent
        self.bindings = bindings

    @classmethod
    def new(cls):
        return cls()

    @classmethod
    def child_of(cls, parent):
        return cls(parent)

    def define(self, name, value):
        self.bindings[name] = value
        return value

    def lookup(self, name):
        env = self
        while env is not None:
            if name in env.bindings:
                return env.bindings[name]
            env = env.parent

        if name in GLOBALS:
            return GLOBALS[name]
        raise UndefinedVariable(name)

    def remove(self, name):
        # removing a name that is not bound locally is not an error
        self.bindings.pop(name, None)

    def __getitem__(self, item):
        return self.lookup(item)

    def __setitem__(self, key, value):
        self.define(key, value)

    def __delitem__(self, key):
        self.remove(key)

    def __contains__(self, item):
        try:
            _ = self.lookup(item)
        except UndefinedVariable:
            return False
        else:
            return True

    def get(self, key, default=None):
        try:
            return self.lookup(key)
        except UndefinedVariable:
            return default

    def __str__(self):
        return '%s --> %s' % (self.bindings, self.parent)
