"""Recursive-descent parser for ezc documents.

Grammar:

    Document      := RootVariables Category*
    RootVariables := (VariableAssign ';')*          -- until '-' or EOF
    Category      := '-' identifier '-' RootVariables
    VariableAssign:= identifier '=' Value
    Value         := boolean | integer | float | string | Array
    Array         := '[' Value (',' Value)* ']'
"""
import enum

from .document import Config, Category, Variable, Value
from .exceptions import (ConfigurationError, ExpectedStatement, ExpectedAssignOperator, ExpectedValue,
                         ArrayExpectedCommaOrRBracket, SemicolonExpected, CategoryRequiresName,
                         CategoryRequiresMinus, InvalidEscapeCode, InvalidUnicodeEscape, InvalidEncoding,
                         InvalidHexLiteral, InvalidOctalLiteral, UnterminatedString, UnexpectedCharacter)
from .lexer import Lexer, Token, TokenType
from .utils import logger, char_repr


NAMED_ESCAPES = {
    ord('\\'): b'\\',
    ord('t'): b'\t',
    ord('n'): b'\n',
    ord('r'): b'\r',
    ord('"'): b'"',
}

HEX_BYTES = frozenset(b'0123456789abcdefABCDEF')


class _EscapeState(enum.Enum):
    normal = enum.auto()
    after_backslash = enum.auto()
    in_unicode_escape = enum.auto()


class Parser:
    """Builds a ``Config`` from the tokens of a ``Lexer``.

    The parser looks at two tokens at a time, ``cur_token`` and ``peek_token``.
    Both are drawn from the lexer as soon as the parser is created.

    Parameters:
        lexer: the ``Lexer`` to read tokens from. The parser owns it from now on.
    """

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self.options = lexer.options
        self.cur_token = lexer.next_token()
        self.peek_token = lexer.next_token()
        self._done = False

    def _next_token(self):
        self.cur_token, self.peek_token = self.peek_token, self.lexer.next_token()

    def _lex_error(self, token):
        lexeme = token.value
        source_path = self.options.source_path
        encoding = self.options.encoding
        if lexeme.startswith(b'0x') or lexeme.startswith(b'0o'):
            exc_class = InvalidHexLiteral if lexeme.startswith(b'0x') else InvalidOctalLiteral
            kind = 'hex' if exc_class is InvalidHexLiteral else 'octal'
            detail = "expected a %s digit after %r, got '%s'" % (kind, token.text(), char_repr(token.expected or b''))
            return exc_class(token.start, token.end, token, source_path, detail, encoding=encoding)
        elif lexeme.startswith(b'"'):
            return UnterminatedString(token.start, token.end, token, source_path, 'missing closing quote',
                                      encoding=encoding)
        return UnexpectedCharacter(lexeme, token.start, token.end, token, source_path, encoding=encoding)

    def _error(self, exc_class, token=None, detail=None):
        if token is None:
            token = self.cur_token
        # An invalid token can't fit anywhere, so report why the lexer rejected it
        if token.type is TokenType.INVALID:
            return self._lex_error(token)
        return exc_class(token.start, token.end, token, self.options.source_path, detail,
                         encoding=self.options.encoding)

    def parse(self) -> Config:
        """Parses the whole input.

        Raises an ``UnexpectedInput`` subclass on the first error. There is no partial result.
        A parser can only be used once.
        """
        if self._done:
            raise ConfigurationError("This parser was already used. Create a new Lexer and Parser to parse again.")
        self._done = True

        root_variables = self._parse_variables()
        categories = []
        while self.cur_token.type is not TokenType.EOF:
            categories.append(self._parse_category())
        return Config(root_variables, categories)

    def _parse_variables(self):
        variables = []
        while True:
            type_ = self.cur_token.type
            if type_ is TokenType.VARIABLE_NAME:
                variables.append(self._parse_variable_assign())
            elif type_ in (TokenType.MINUS, TokenType.EOF):
                return variables
            else:
                raise self._error(ExpectedStatement)

    def _name(self, token):
        return token.value.decode('ascii')

    def _parse_variable_assign(self):
        name = self._name(self.cur_token)
        if self.peek_token.type is not TokenType.EQUAL:
            raise self._error(ExpectedAssignOperator, self.peek_token)
        self._next_token()
        self._next_token()

        value = self._parse_value()

        if self.cur_token.type is not TokenType.SEMICOLON:
            raise self._error(SemicolonExpected)
        self._next_token()

        if self.options.debug:
            logger.debug("Variable %s = %s", name, value)
        return Variable(name, value)

    def _parse_category(self):
        # currently: -name-
        #            ^
        self._next_token()
        if self.cur_token.type is not TokenType.VARIABLE_NAME:
            raise self._error(CategoryRequiresName)
        name = self._name(self.cur_token)
        self._next_token()
        if self.cur_token.type is not TokenType.MINUS:
            raise self._error(CategoryRequiresMinus)
        self._next_token()

        if self.options.debug:
            logger.debug("Category %s", name)
        return Category(name, self._parse_variables())

    def _parse_value(self):
        token = self.cur_token
        type_ = token.type

        if type_ is TokenType.TRUE:
            value = Value.boolean(True)
        elif type_ is TokenType.FALSE:
            value = Value.boolean(False)
        elif type_ is TokenType.INTEGER:
            value = Value.integer(token.value)
        elif type_ is TokenType.FLOAT:
            value = Value.float(token.value)
        elif type_ is TokenType.STRING:
            value = Value.string(self.decode_string(token))
        elif type_ is TokenType.LBRACKET:
            return self._parse_array()
        else:
            raise self._error(ExpectedValue)

        self._next_token()
        return value

    def _parse_array(self):
        self._next_token()
        values = [self._parse_value()]
        while True:
            type_ = self.cur_token.type
            if type_ is TokenType.COMMA:
                self._next_token()
                values.append(self._parse_value())
            elif type_ is TokenType.RBRACKET:
                self._next_token()
                return Value.array(values)
            else:
                raise self._error(ArrayExpectedCommaOrRBracket)

    def decode_string(self, token: Token) -> str:
        """Interprets the escape sequences in the payload of a STRING token.

        Supports ``\\\\``, ``\\t``, ``\\n``, ``\\r``, ``\\"`` and ``\\uXXXX`` (exactly four hex digits).
        """
        parts = []
        pending = bytearray()
        hex_digits = bytearray()
        state = _EscapeState.normal

        for i, c in enumerate(token.value):
            if state is _EscapeState.normal:
                if c == 0x5c:
                    state = _EscapeState.after_backslash
                else:
                    pending.append(c)

            elif state is _EscapeState.after_backslash:
                if c in NAMED_ESCAPES:
                    pending += NAMED_ESCAPES[c]
                    state = _EscapeState.normal
                elif c == ord('u'):
                    del hex_digits[:]
                    state = _EscapeState.in_unicode_escape
                else:
                    raise self._error(InvalidEscapeCode, token,
                                      "'\\%s' at offset %d of the string" % (char_repr(c), i - 1))

            else:
                if c not in HEX_BYTES:
                    raise self._error(InvalidUnicodeEscape, token,
                                      "'%s' at offset %d of the string" % (char_repr(c), i))
                hex_digits.append(c)
                if len(hex_digits) == 4:
                    code_point = int(hex_digits.decode('ascii'), 16)
                    if 0xD800 <= code_point <= 0xDFFF:
                        raise self._error(InvalidUnicodeEscape, token,
                                          "surrogate code point U+%04X can't be encoded" % code_point)
                    parts.append(self._decode_bytes(pending, token))
                    parts.append(chr(code_point))
                    del pending[:]
                    state = _EscapeState.normal

        if state is _EscapeState.after_backslash:
            raise self._error(InvalidEscapeCode, token, "string ends inside an escape sequence")
        elif state is _EscapeState.in_unicode_escape:
            raise self._error(InvalidUnicodeEscape, token,
                              "expected 4 hex digits, string ends after %d" % len(hex_digits))

        parts.append(self._decode_bytes(pending, token))
        return ''.join(parts)

    def _decode_bytes(self, data, token):
        try:
            return bytes(data).decode(self.options.encoding)
        except UnicodeDecodeError as e:
            raise InvalidEncoding(token.start, token.end, token, self.options.source_path,
                                  "string is not valid %s (%s)" % (self.options.encoding, e.reason),
                                  encoding=self.options.encoding)
