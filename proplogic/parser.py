import logging

from . import nodes
from .environment import Environment
from .errors import DuplicateAssignment, EmptyProgram, ParseError
from .lexer import (
    AssignToken,
    Associativity,
    BinaryOperatorToken,
    CloseParenthesisToken,
    ConstantToken,
    EndToken,
    IdentifierToken,
    ISingleExpression,
    Lexer,
    LiteralOne,
    NewlineToken,
    OpenParenthesisToken,
    OperatorToken,
    TokenKind,
    UnaryOperatorToken,
)

logger = logging.getLogger(__name__)

# The expression is converted with the shunting yard algorithm. Unlike the
# textbook version it keeps track of whether an operand or an operator is due
# next, which is enough to reject malformed input at the offending token.

NODES = {
    TokenKind.NOT: nodes.Not,
    TokenKind.AND: nodes.And,
    TokenKind.OR: nodes.Or,
    TokenKind.IMPLIES: nodes.Implies,
    TokenKind.IFF: nodes.Iff,
}


class TokenStream:
    """
    Lookahead buffer over the lazily produced tokens
    """

    def __init__(self, tokens):
        self._tokens = iter(tokens)
        self._buffer = []
        self._end = 0

    def peek(self, offset=0):
        while len(self._buffer) <= offset:
            token = next(self._tokens, None)
            if token is None:
                # Past the end the stream keeps answering with EndOfInput
                if self._buffer and isinstance(self._buffer[-1], EndToken):
                    return self._buffer[-1]
                raise ParseError(str(TokenKind.EOF), "end of token list", self._end)
            self._end = token.end
            self._buffer.append(token)
        return self._buffer[offset]

    def advance(self):
        token = self.peek()
        if not isinstance(token, EndToken):
            self._buffer.pop(0)
        return token


class Parser:
    def __init__(self, lexer=None):
        self.lexer = lexer or Lexer()
        for rule in self.lexer.rules:
            if issubclass(rule, OperatorToken) and rule.precedence is None:
                raise TypeError(
                    f"class '{rule.__name__}' has no precedence. OperatorToken must have a precedence"
                )

    @staticmethod
    def should_pop_op(stack, op):
        if not stack:
            return False

        top_op = stack[-1]

        if isinstance(top_op, OpenParenthesisToken):
            return False

        if op.associativity == Associativity.LEFT:
            return top_op.precedence >= op.precedence
        elif op.associativity == Associativity.RIGHT:
            return top_op.precedence > op.precedence
        raise ValueError(
            f"{op.__repr__()} has invalid associativity value {op.associativity.__repr__()}. Should be one of {Associativity.LEFT.__repr__()} or {Associativity.RIGHT.__repr__()}"
        )

    @staticmethod
    def skip_newlines(stream):
        while isinstance(stream.peek(), NewlineToken):
            stream.advance()

    def parse_assignments(self, stream, env):
        """
        Reads the `name := 0|1` lines at the head of the program into `env`.
        Stops, without consuming anything, at the first line that is not an
        assignment.
        """
        while True:
            self.skip_newlines(stream)
            name = stream.peek()
            if not (
                isinstance(name, IdentifierToken)
                and isinstance(stream.peek(1), AssignToken)
            ):
                return

            if name.value in env:
                raise DuplicateAssignment(name.value, name.start)

            stream.advance()
            stream.advance()

            value = stream.advance()
            if not isinstance(value, ConstantToken):
                raise ParseError("'0' or '1'", value.describe(), value.start)

            end = stream.peek()
            if not isinstance(end, (NewlineToken, EndToken)):
                raise ParseError("newline", end.describe(), end.start)

            env.bind(name.value, isinstance(value, LiteralOne))
            logger.debug("assigned %s := %s", name.value, value.value)

    def parse_to_rpn(self, tokens):
        """
        Converts one expression line to reverse polish notation.
        Stops at the newline or end of input that terminates the expression.
        """
        stream = tokens if isinstance(tokens, TokenStream) else TokenStream(tokens)

        output = []
        operator_stack = []

        # Literals, variables, "~" and "(" are only valid where an operand is due
        expect_operand = True

        token = stream.peek()
        if isinstance(token, EndToken):
            raise EmptyProgram(token.start)

        while not isinstance(token := stream.peek(), (NewlineToken, EndToken)):
            stream.advance()

            if expect_operand:
                if isinstance(token, ISingleExpression):
                    output.append(token)
                    expect_operand = False
                elif isinstance(token, (UnaryOperatorToken, OpenParenthesisToken)):
                    operator_stack.append(token)
                else:
                    raise ParseError("expression", token.describe(), token.start)
            elif isinstance(token, BinaryOperatorToken):
                while self.should_pop_op(operator_stack, token):
                    output.append(operator_stack.pop())

                operator_stack.append(token)
                expect_operand = True
            elif isinstance(token, CloseParenthesisToken):
                while operator_stack and not isinstance(
                    operator_stack[-1], OpenParenthesisToken
                ):
                    output.append(operator_stack.pop())

                if not operator_stack:
                    raise ParseError("operator", token.describe(), token.start)

                # Pop the open parenthesis
                operator_stack.pop()
            else:
                raise ParseError("operator", token.describe(), token.start)

        if expect_operand:
            raise ParseError("expression", token.describe(), token.start)

        while operator_stack:
            op = operator_stack.pop()
            if isinstance(op, OpenParenthesisToken):
                raise ParseError(str(TokenKind.RPAREN), token.describe(), token.start)
            output.append(op)

        logger.debug("rpn: %s", " ".join(t.value for t in output))

        return output

    def rpn_to_ast(self, rpn):
        stack = []
        for token in rpn:
            if isinstance(token, ConstantToken):
                stack.append(nodes.Literal(isinstance(token, LiteralOne)))
            elif isinstance(token, IdentifierToken):
                stack.append(nodes.Variable(token.value))
            elif isinstance(token, OperatorToken):
                arity = 1 if isinstance(token, UnaryOperatorToken) else 2
                if len(stack) < arity:
                    raise ValueError(f"Invalid RPN. {token!r} is missing operands")
                args = [stack.pop() for _ in range(arity)][::-1]
                stack.append(NODES[token.kind](*args))
            else:
                raise ValueError(f"Invalid RPN. {token!r} cannot be processed")

        if len(stack) != 1:
            raise ValueError(f"Invalid RPN. Stack: {stack!r}")

        return stack[0]

    def parse(self, string, env=None):
        """
        Parses a whole program and returns the AST of its final expression.
        Assignments are recorded in `env` as a side effect.
        """
        env = Environment() if env is None else env
        stream = TokenStream(self.lexer.tokenize(string))

        self.parse_assignments(stream, env)
        ast = self.rpn_to_ast(self.parse_to_rpn(stream))

        # Only blank lines may follow the expression
        self.skip_newlines(stream)
        end = stream.peek()
        if not isinstance(end, EndToken):
            raise ParseError(str(TokenKind.EOF), end.describe(), end.start)

        return ast


def parse(string, env=None):
    return Parser().parse(string, env)
