from .utils import char_repr


class EzcError(Exception):
    pass


class ConfigurationError(EzcError, ValueError):
    pass


def assert_config(value, options, msg='Got %r, expected one of %s'):
    if value not in options:
        raise ConfigurationError(msg % (value, options))


class UnexpectedInput(EzcError):
    """UnexpectedInput Error.

    Used as a base class for every error that aborts a parse:

    - ``LexError``: The lexer could not turn the source into a valid token
    - ``ParseError``: The parser received a token that doesn't fit the grammar

    The error keeps the source span it refers to (``start`` inclusive, ``end`` exclusive),
    and the offending token when there is one.

    After catching one of these exceptions, you may call ``get_context()`` to create a nicer error message.
    """
    label = 'Unexpected input'

    def __init__(self, start, end=None, token=None, source_path=None, detail=None, encoding='utf-8'):
        self.start = start
        self.end = end if end is not None else start
        self.token = token
        self.source_path = source_path
        self.detail = detail
        self.encoding = encoding

        self.line = start.row
        self.column = start.column
        self.pos_in_stream = start.pos

        super(UnexpectedInput, self).__init__(str(self))

    def get_context(self, text, span=40):
        """Returns a pretty string pinpointing the error in the text,
        with span amount of context characters around it.

        Note:
            The parser doesn't hold a copy of the text it has to parse,
            so you have to provide it again
        """
        pos = self.pos_in_stream
        start = max(pos - span, 0)
        end = pos + span
        if not isinstance(text, bytes):
            # Positions are byte offsets into the encoded source
            data = text.encode(self.encoding)
            before = data[start:pos].rsplit(b'\n', 1)[-1].decode(self.encoding, 'replace')
            after = data[pos:end].split(b'\n', 1)[0].decode(self.encoding, 'replace')
            return before + after + '\n' + ' ' * len(before.expandtabs()) + '^\n'
        else:
            before = text[start:pos].rsplit(b'\n', 1)[-1]
            after = text[pos:end].split(b'\n', 1)[0]
            return (before + after + b'\n' + b' ' * len(before.expandtabs()) + b'^\n').decode("ascii", "backslashreplace")

    def __str__(self):
        message = "%s at line %d, column %d" % (self.label, self.line, self.column)
        if self.source_path:
            message = "%s: %s" % (self.source_path, message)
        if self.detail:
            message += ": %s" % self.detail
        if self.token is not None:
            message += "\nGot: %s" % (self.token,)
        return message


class LexError(UnexpectedInput):
    label = 'Lexical error'


class ParseError(UnexpectedInput):
    label = 'Syntax error'


class InvalidHexLiteral(LexError):
    label = 'Invalid hexadecimal literal'


class InvalidOctalLiteral(LexError):
    label = 'Invalid octal literal'


class InvalidNumber(LexError):
    label = 'Invalid numeric literal'


class UnterminatedString(LexError):
    label = 'Unterminated string literal'


class InvalidEncoding(LexError):
    label = 'Invalid encoding'


class UnexpectedCharacter(LexError):
    label = 'Unexpected character'

    def __init__(self, char, start, end=None, token=None, source_path=None, encoding='utf-8'):
        self.char = char
        super(UnexpectedCharacter, self).__init__(start, end, token, source_path, detail="'%s'" % char_repr(char),
                                                  encoding=encoding)


class ExpectedStatement(ParseError):
    label = 'Expected a statement'


class ExpectedAssignOperator(ParseError):
    label = "Expected assign operator '='"


class ExpectedValue(ParseError):
    label = 'Expected a value'


class ArrayExpectedCommaOrRBracket(ParseError):
    label = "Array expected ',' or ']'"


class SemicolonExpected(ParseError):
    label = "Semicolon expected after statement"


class CategoryRequiresName(ParseError):
    label = 'Category requires a valid variable name'


class CategoryRequiresMinus(ParseError):
    label = "Category requires '-' after variable name"


class InvalidEscapeCode(ParseError):
    label = 'Invalid escape code'


class InvalidUnicodeEscape(ParseError):
    label = 'Invalid hex digit for unicode escape'
