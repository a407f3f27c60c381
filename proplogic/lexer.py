from enum import Enum
import re

from .errors import LexError

# The lexer tries every rule against the head of the remaining text and emits
# an instance of the first rule that matches. Rules are plain classes so the
# parser can classify tokens with isinstance, and they carry the precedence
# information for the operators they produce.

# Utils


def str_match(string: str, m: str, l=None):
    l = l or (lambda x: x)
    if len(string) == 0:
        return None
    if string.startswith(m):
        return l(string[: len(m)]), len(m)
    return None


def re_match(string, r, l=None):
    l = l or (lambda x: x.group(0))
    m = re.match(r, string)
    if m:
        return l(m), m.end()
    return None


class TokenKind(Enum):
    LITERAL_0 = "0"
    LITERAL_1 = "1"
    IDENT = "identifier"
    NOT = "~"
    AND = "^"
    OR = "v"
    IMPLIES = "=>"
    IFF = "<=>"
    ASSIGN = ":="
    LPAREN = "("
    RPAREN = ")"
    NEWLINE = "newline"
    EOF = "end of input"

    def __str__(self):
        if self in (TokenKind.IDENT, TokenKind.NEWLINE, TokenKind.EOF):
            return self.value
        return f"'{self.value}'"


class IToken:
    kind = None

    m_re = None
    m_str = None

    re_l = None
    str_l = None

    __slots__ = ("value", "start", "end")

    def __init__(self, value, start, end):
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} tokens are immutable")

    @classmethod
    def match(cls, string):
        """
        A match function returns
        (value, length, ?class)

        The third element is only present when the matched text resolves to a
        different token class than the rule that matched it
        """
        if cls.m_re:
            return re_match(string, cls.m_re, cls.re_l)
        elif cls.m_str:
            return str_match(string, cls.m_str, cls.str_l)
        raise NotImplementedError()

    @classmethod
    def LL(cls, string):
        return cls.match(string)

    def describe(self):
        return f"'{self.value}'"

    def __eq__(self, other):
        return (
            type(self) is type(other)
            and self.value == other.value
            and self.start == other.start
            and self.end == other.end
        )

    def __hash__(self):
        return hash((type(self), self.value, self.start, self.end))

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.value.__repr__()}>"


class WhitespaceToken(IToken):
    pass


class NewlineToken(IToken):
    kind = TokenKind.NEWLINE

    def describe(self):
        return "newline"


class EndToken(IToken):
    kind = TokenKind.EOF

    def describe(self):
        return "end of input"


class ISingleExpression(IToken):
    pass


class ConstantToken(ISingleExpression):
    pass


class IdentifierToken(ISingleExpression):
    kind = TokenKind.IDENT

    def describe(self):
        return f"identifier '{self.value}'"


class OperatorToken(IToken):
    """
    Must provide a precedence value
    Associativity is left by default
    """

    precedence = None


class Associativity(Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"


class UnaryOperatorToken(OperatorToken):
    associativity = Associativity.RIGHT


class BinaryOperatorToken(OperatorToken):
    associativity = Associativity.LEFT


class OpenParenthesisToken(IToken):
    kind = TokenKind.LPAREN


class CloseParenthesisToken(IToken):
    kind = TokenKind.RPAREN


class AssignToken(IToken):
    kind = TokenKind.ASSIGN


# Built in tokens


class Whitespace(WhitespaceToken):
    m_re = r"[ \t\r\f\v]+"


class Newline(NewlineToken):
    # Blank lines collapse into a single separator
    m_re = r"\n(?:[ \t\r\f\v]*\n)*"


class EndOfInput(EndToken):
    pass


class LiteralZero(ConstantToken):
    kind = TokenKind.LITERAL_0
    m_str = "0"


class LiteralOne(ConstantToken):
    kind = TokenKind.LITERAL_1
    m_str = "1"


class Variable(IdentifierToken):
    pass


class Negation(UnaryOperatorToken):
    kind = TokenKind.NOT
    precedence = 4
    m_str = "~"


class And(BinaryOperatorToken):
    kind = TokenKind.AND
    precedence = 3
    m_str = "^"


class Or(BinaryOperatorToken):
    kind = TokenKind.OR
    precedence = 2
    m_str = "v"


class Implies(BinaryOperatorToken):
    kind = TokenKind.IMPLIES
    associativity = Associativity.RIGHT
    precedence = 1
    m_str = "=>"


class Iff(BinaryOperatorToken):
    kind = TokenKind.IFF
    precedence = 0
    m_str = "<=>"


class Identifier(IToken):
    m_re = r"[^\W\d_]+"

    @classmethod
    def LL(cls, string):
        if m := re.match(cls.m_re, string):
            # "v" is only the or operator when it stands alone
            constructor = Or if m.group(0) == Or.m_str else Variable
            return m.group(0), m.end(), constructor


class OpenParenthesis(OpenParenthesisToken):
    m_str = "("


class CloseParenthesis(CloseParenthesisToken):
    m_str = ")"


class Assign(AssignToken):
    m_str = ":="


class ITokenCollection(Enum):
    @classmethod
    def list(cls):
        return list(map(lambda c: c.value, cls))


class BaseTokens(ITokenCollection):
    WHITESPACE = Whitespace
    NEWLINE = Newline


class LogicalTokens(ITokenCollection):
    LITERAL_0 = LiteralZero
    LITERAL_1 = LiteralOne
    IDENTIFIER = Identifier
    NEGATION = Negation
    AND = And
    IMPLIES = Implies
    IFF = Iff
    OPEN_PARENTHESIS = OpenParenthesis
    CLOSE_PARENTHESIS = CloseParenthesis


class AssignmentTokens(ITokenCollection):
    ASSIGN = Assign


class Tokenlib:
    base = BaseTokens
    logical = LogicalTokens
    assignment = AssignmentTokens

    @staticmethod
    def load(*args):
        return list(dict.fromkeys(t for arg in args for t in arg.list()))


DEFAULT_RULES = Tokenlib.load(Tokenlib.base, Tokenlib.logical, Tokenlib.assignment)


class Lexer:
    def __init__(self, rules=None):
        rules = DEFAULT_RULES if rules is None else rules
        for rule in rules:
            if not issubclass(rule, IToken):
                raise TypeError(f"{rule!r} is not a token rule")
        self.rules = list(rules)

    def tokenize(self, string):
        """
        Lazily yields the tokens of `string`, always ending with one EndOfInput
        """
        pointer = 0
        while string:
            for rule in self.rules:
                if m := rule.LL(string):
                    v, l = m[:2]
                    cls = rule
                    if len(m) >= 3:
                        cls = m[2]
                    if not issubclass(cls, WhitespaceToken):
                        yield cls(v, pointer, pointer + l)
                    pointer += l
                    string = string[l:]
                    break
            else:
                raise LexError(pointer, string[0])
        yield EndOfInput("", pointer, pointer)


def tokenize(string, rules=None):
    return Lexer(rules).tokenize(string)
