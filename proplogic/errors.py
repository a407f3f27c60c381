class LogicError(Exception):
    """
    Base class of every error raised while lexing, parsing or evaluating
    """

    position = None

    def __str__(self):
        if self.position is None:
            return self.message
        return f"@[{self.position}]: {self.message}"

    @property
    def message(self):
        return super().__str__()


class LexError(LogicError):
    def __init__(self, position, unexpected_char):
        super().__init__(f"unexpected character {unexpected_char!r}")
        self.position = position
        self.unexpected_char = unexpected_char


class ParseError(LogicError):
    def __init__(self, expected, found, position):
        super().__init__(f"expected {expected}, found {found}")
        self.expected = expected
        self.found = found
        self.position = position


class EmptyProgram(ParseError):
    def __init__(self, position):
        super().__init__("expression", "end of input", position)

    @property
    def message(self):
        return "program has no expression to evaluate"


class DuplicateAssignment(ParseError):
    def __init__(self, name, position):
        super().__init__("new variable name", repr(name), position)
        self.name = name

    @property
    def message(self):
        return f"variable {self.name!r} is already assigned"


class EvalError(LogicError):
    pass


class UnboundVariable(EvalError):
    def __init__(self, name):
        super().__init__(f"variable {name!r} is not assigned")
        self.name = name
