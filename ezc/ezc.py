import io

from .common import EzcOptions
from .document import Config
from .lexer import Lexer
from .parser import Parser
from .utils import logger


def parse(text, **options) -> Config:
    """Parses ezc source into a ``Config``.

    Parameters:
        text: the source, as ``bytes`` or ``str``
        options: see ``EzcOptions``

    Example:
        >>> parse('answer = 42;').get('answer')
        Value(INTEGER, 42)
    """
    return Parser(Lexer(text, EzcOptions(options))).parse()


def lex(text, **options):
    "Only lex the text, without parsing it. Yields tokens up to and including EOF"
    return Lexer(text, EzcOptions(options)).lex()


def open(filename, **options) -> Config:
    """Reads and parses the file at ``filename``.

    The whole file is read before lexing starts. ``source_path`` defaults to ``filename``,
    so errors report which file they came from.
    """
    options.setdefault('source_path', filename)
    with io.open(filename, 'rb') as f:
        data = f.read()
    logger.debug('Read %d bytes from %s', len(data), filename)
    return parse(data, **options)
