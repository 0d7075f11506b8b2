## Lexer Implementation

import enum
from typing import Iterator, Optional

from .common import EzcOptions, Location
from .exceptions import InvalidNumber, InvalidEncoding
from .utils import logger, to_bytes


@enum.unique
class TokenType(enum.Enum):
    EOF = enum.auto()
    INVALID = enum.auto()

    MINUS = enum.auto()
    SEMICOLON = enum.auto()
    COMMA = enum.auto()
    EQUAL = enum.auto()
    LBRACKET = enum.auto()
    RBRACKET = enum.auto()

    TRUE = enum.auto()
    FALSE = enum.auto()

    INTEGER = enum.auto()
    FLOAT = enum.auto()
    STRING = enum.auto()
    VARIABLE_NAME = enum.auto()


_LABELS = {
    TokenType.EOF: 'EOF',
    TokenType.INVALID: 'Invalid Token',
    TokenType.MINUS: 'Minus',
    TokenType.SEMICOLON: 'Semicolon',
    TokenType.COMMA: 'Comma',
    TokenType.EQUAL: 'Equal',
    TokenType.LBRACKET: 'Left Bracket',
    TokenType.RBRACKET: 'Right Bracket',
    TokenType.TRUE: 'True Keyword',
    TokenType.FALSE: 'False Keyword',
    TokenType.INTEGER: 'Integer',
    TokenType.FLOAT: 'Float',
    TokenType.STRING: 'String',
    TokenType.VARIABLE_NAME: 'Variable Name',
}


class Token:
    """A single lexical unit.

    Parameters:
        type_: a ``TokenType``
        value: the payload. ``int`` for INTEGER, ``float`` for FLOAT, the raw ``bytes`` between
            the quotes for STRING (escape sequences are left as-is), the raw name for VARIABLE_NAME,
            and the rejected lexeme for INVALID. ``None`` for everything else.
        start: ``Location`` of the first byte (inclusive)
        end: ``Location`` after the last byte (exclusive)
        expected: INVALID only. The byte the lexer stopped on when it required a digit,
            or ``None`` when there is no hint.
    """
    __slots__ = ('type', 'value', 'start', 'end', 'expected')

    type: TokenType

    def __init__(self, type_: TokenType, value=None, start: Optional[Location]=None, end: Optional[Location]=None,
                 expected: Optional[str]=None) -> None:
        self.type = type_
        self.value = value
        self.start = start
        self.end = end
        self.expected = expected

    @property
    def line(self):
        return self.start.row if self.start else None

    @property
    def column(self):
        return self.start.column if self.start else None

    @property
    def pos_in_stream(self):
        return self.start.pos if self.start else None

    @property
    def end_pos(self):
        return self.end.pos if self.end else None

    def text(self, encoding='utf-8'):
        "Returns the payload of a STRING, VARIABLE_NAME or INVALID token as text"
        if isinstance(self.value, bytes):
            return self.value.decode(encoding, 'backslashreplace')
        return self.value

    def __repr__(self):
        return 'Token(%s, %r)' % (self.type.name, self.value)

    def __str__(self):
        s = '%s %s:%s' % (_LABELS[self.type], self.start, self.end)
        if self.type is TokenType.INVALID:
            if self.expected is not None:
                s += ' Expected %s' % self.expected
        elif self.type in (TokenType.INTEGER, TokenType.FLOAT):
            s += ' Value: %r' % self.value
        elif self.type in (TokenType.STRING, TokenType.VARIABLE_NAME):
            s += ' Value: %s' % self.text()
        return s

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type is other.type and self.value == other.value

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash((self.type, self.value))


def _charset(chars):
    return frozenset(bytes((c,)) for c in chars)

DIGITS = _charset(b'0123456789')
HEX_DIGITS = _charset(b'0123456789abcdefABCDEF')
OCTAL_DIGITS = _charset(b'01234567')
NAME_START = _charset(b'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_')
NAME_CHARS = NAME_START | DIGITS
WHITESPACE = _charset(b' \t\r\n')

PUNCTUATION = {
    b';': TokenType.SEMICOLON,
    b',': TokenType.COMMA,
    b'=': TokenType.EQUAL,
    b'[': TokenType.LBRACKET,
    b']': TokenType.RBRACKET,
}

KEYWORDS = {
    b'true': TokenType.TRUE,
    b'false': TokenType.FALSE,
}

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class Lexer:
    """Turns a byte buffer into tokens, one token per call to ``next_token()``.

    The lexer only moves forward. It holds the current byte, and can peek at the byte after it.

    Parameters:
        data: ``bytes`` (or ``str``, which is encoded using the ``encoding`` option)
        options: an ``EzcOptions`` instance or a dict of options
    """

    def __init__(self, data, options=None) -> None:
        self.options = EzcOptions.from_any(options)
        try:
            self.string = to_bytes(data, self.options.encoding)
        except UnicodeEncodeError as e:
            prefix = data[:e.start].encode(self.options.encoding)
            loc = Location(prefix.count(b'\n') + 1, len(prefix) - prefix.rfind(b'\n'), len(prefix))
            raise InvalidEncoding(loc, loc, source_path=self.options.source_path, encoding=self.options.encoding,
                                  detail="input can't be encoded as %s (%s)" % (self.options.encoding, e.reason))

        self.row = 1
        self.column = 1
        self.cur_pos = 0
        self.peek_pos = 1
        self.ch = self.string[0:1]
        if self.ch == b'\n':
            self.column = 0
            self.row += 1

    def __repr__(self):
        return 'Lexer(<%d bytes>, pos=%d)' % (len(self.string), self.cur_pos)

    @property
    def location(self) -> Location:
        return Location(self.row, self.column, self.cur_pos)

    def _read_char(self):
        if self.peek_pos >= len(self.string):
            self.ch = b''
        else:
            self.ch = self.string[self.peek_pos:self.peek_pos + 1]
            self.column += 1
            if self.ch == b'\n':
                self.column = 0
                self.row += 1
        self.cur_pos = self.peek_pos
        self.peek_pos += 1

    def _peek_char(self):
        return self.string[self.peek_pos:self.peek_pos + 1]

    def _skip_whitespace(self):
        while self.ch in WHITESPACE:
            self._read_char()

    def _check_int64(self, value, start):
        if not INT64_MIN <= value <= INT64_MAX:
            raise InvalidNumber(start, self.location, source_path=self.options.source_path,
                                encoding=self.options.encoding,
                                detail='%d does not fit in a signed 64-bit integer' % value)
        return value

    def _parse_int(self, text, base, start):
        try:
            value = int(text.decode('ascii'), base)
        except ValueError:
            raise InvalidNumber(start, self.location, source_path=self.options.source_path,
                                encoding=self.options.encoding,
                                detail='cannot parse %r' % text.decode('ascii', 'backslashreplace'))
        return value

    def _read_number(self):
        start = self.location
        negative = self.ch == b'-'
        if negative:
            self._read_char()
        digits_start = self.cur_pos

        # .5 needs a leading zero, 5. needs a trailing one
        leading_dot = self.ch == b'.'
        trailing_dot = False
        while self.ch in DIGITS:
            self._read_char()

        if self.ch == b'.':
            self._read_char()
            if self.ch not in DIGITS:
                trailing_dot = True
            while self.ch in DIGITS:
                self._read_char()

            text = self.string[digits_start:self.cur_pos]
            if trailing_dot:
                text += b'0'
            elif leading_dot:
                text = b'0' + text
            try:
                value = float(text.decode('ascii'))
            except ValueError:
                raise InvalidNumber(start, self.location, source_path=self.options.source_path,
                                    encoding=self.options.encoding,
                                    detail='cannot parse %r' % text.decode('ascii', 'backslashreplace'))
            return Token(TokenType.FLOAT, -value if negative else value, start, self.location)

        value = self._parse_int(self.string[digits_start:self.cur_pos], 10, start)
        value = self._check_int64(-value if negative else value, start)
        return Token(TokenType.INTEGER, value, start, self.location)

    def _read_radix(self, alphabet):
        start = self.location
        start_pos = self.cur_pos
        # currently: 0xFFF
        #            ^
        self._read_char()
        self._read_char()
        # currently: 0xFFF
        #              ^

        if self.ch not in alphabet:
            expected = self.ch.decode('latin-1') if self.ch else None
            return Token(TokenType.INVALID, self.string[start_pos:self.cur_pos], start, self.location, expected)

        while self.ch in alphabet:
            self._read_char()
        value = self._check_int64(self._parse_int(self.string[start_pos:self.cur_pos], 0, start), start)
        return Token(TokenType.INTEGER, value, start, self.location)

    def _read_variable_name(self):
        start = self.location
        start_pos = self.cur_pos

        self._read_char()
        while self.ch in NAME_CHARS:
            self._read_char()

        text = self.string[start_pos:self.cur_pos]
        if text in KEYWORDS:
            return Token(KEYWORDS[text], None, start, self.location)
        return Token(TokenType.VARIABLE_NAME, text, start, self.location)

    def _read_string(self):
        """Reads a string literal, stopping at the first unescaped quote.

        Escape sequences are not interpreted here, a backslash and the byte after it are
        skipped together. That's the parser's job.
        """
        start = self.location
        start_pos = self.cur_pos

        self._read_char()
        while self.ch != b'"':
            if not self.ch:
                return Token(TokenType.INVALID, self.string[start_pos:self.cur_pos], start, self.location)
            if self.ch == b'\\':
                self._read_char()
                if not self.ch:
                    continue
            self._read_char()

        string = self.string[start_pos + 1:self.cur_pos]
        self._read_char()
        return Token(TokenType.STRING, string, start, self.location)

    def _next_token(self):
        self._skip_whitespace()
        ch = self.ch

        if not ch:
            loc = self.location
            return Token(TokenType.EOF, None, loc, loc)
        elif ch == b'-':
            peek = self._peek_char()
            if peek in DIGITS or peek == b'.':
                return self._read_number()
            type_ = TokenType.MINUS
        elif ch in PUNCTUATION:
            type_ = PUNCTUATION[ch]
        elif ch == b'0' and self._peek_char() == b'x':
            return self._read_radix(HEX_DIGITS)
        elif ch == b'0' and self._peek_char() == b'o':
            return self._read_radix(OCTAL_DIGITS)
        elif ch in DIGITS or ch == b'.':
            return self._read_number()
        elif ch in NAME_START:
            return self._read_variable_name()
        elif ch == b'"':
            return self._read_string()
        else:
            start = self.location
            self._read_char()
            return Token(TokenType.INVALID, ch, start, self.location)

        start = self.location
        self._read_char()
        return Token(type_, None, start, self.location)

    def next_token(self) -> Token:
        """Returns the next token. Once the input is exhausted, keeps returning EOF tokens."""
        token = self._next_token()
        if self.options.debug:
            logger.debug("%s", token)
        return token

    def lex(self) -> Iterator[Token]:
        "Iterates over the remaining tokens, up to and including the first EOF"
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                break
