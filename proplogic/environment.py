class FrozenDict(dict):
    def _immutable(self, *args, **kws):
        raise TypeError("cannot change object - object is immutable")

    __setitem__ = _immutable
    __delitem__ = _immutable
    pop = _immutable
    popitem = _immutable
    clear = _immutable
    update = _immutable
    setdefault = _immutable


class Environment:
    """
    Variable bindings for a single run, filled by the parser as it reads
    assignment lines and read by the evaluator
    """

    def __init__(self, identifiers=None):
        if identifiers is None:
            identifiers = {}
        elif not isinstance(identifiers, FrozenDict):
            identifiers = {name: bool(value) for name, value in identifiers.items()}
        self._identifiers = identifiers

    def lookup(self, name):
        """
        Returns None for unbound names
        """
        return self._identifiers.get(name)

    def bind(self, name, value):
        self._identifiers[name] = bool(value)

    def names(self):
        return list(self._identifiers)

    def __contains__(self, name):
        return name in self._identifiers

    def __iter__(self):
        return iter(self._identifiers)

    def __len__(self):
        return len(self._identifiers)

    def __repr__(self):
        return f"{self.__class__.__name__}({self._identifiers!r})"


class NullEnvironment(Environment):
    def __init__(self):
        super().__init__(FrozenDict())
