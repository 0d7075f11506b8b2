import functools

from .exceptions import ConfigurationError, assert_config
from .utils import STRING_TYPE


@functools.total_ordering
class Location:
    """A position in the source buffer.

    ``row`` and ``column`` are 1-based, ``pos`` is the 0-based byte offset.
    Locations are immutable and ordered by ``pos``.
    """
    __slots__ = ('row', 'column', 'pos')

    def __init__(self, row: int=1, column: int=1, pos: int=0) -> None:
        object.__setattr__(self, 'row', row)
        object.__setattr__(self, 'column', column)
        object.__setattr__(self, 'pos', pos)

    def __setattr__(self, name, value):
        raise AttributeError("Location is immutable")

    def __repr__(self):
        return 'Location(%r, %r, %r)' % (self.row, self.column, self.pos)

    def __str__(self):
        return '%d:%d(lex: %d)' % (self.row, self.column, self.pos)

    def __eq__(self, other):
        if not isinstance(other, Location):
            return NotImplemented
        return (self.row, self.column, self.pos) == (other.row, other.column, other.pos)

    def __lt__(self, other):
        if not isinstance(other, Location):
            return NotImplemented
        return self.pos < other.pos

    def __hash__(self):
        return hash((self.row, self.column, self.pos))

    def __reduce__(self):
        return (self.__class__, (self.row, self.column, self.pos))


class EzcOptions:
    """Specifies the options for the ezc lexer and parser

    """
    OPTIONS_DOC = """
    debug
            Log every token and every parsed statement to the ``ezc`` logger at DEBUG level (default: False)
    encoding
            Encoding used for ``str`` input, and for decoding variable names and string literals (default: "utf-8")
    source_path
            Name of the source, reported in error messages. Filled in automatically by ``ezc.open``.
    """
    if __doc__:
        __doc__ += OPTIONS_DOC

    _defaults = {
        'debug': False,
        'encoding': 'utf-8',
        'source_path': None,
    }

    def __init__(self, options_dict):
        o = dict(options_dict)

        options = {}
        for name, default in self._defaults.items():
            if name in o:
                value = o.pop(name)
                if isinstance(default, bool):
                    value = bool(value)
            else:
                value = default

            options[name] = value

        self.__dict__['options'] = options

        if not isinstance(self.encoding, STRING_TYPE):
            raise ConfigurationError("Option 'encoding' must be a string, got %r" % (self.encoding,))
        try:
            ''.encode(self.encoding)
        except LookupError:
            raise ConfigurationError("Unknown encoding: %r" % self.encoding)

        if o:
            raise ConfigurationError("Unknown options: %s" % ', '.join(sorted(o)))

    def __getattr__(self, name):
        try:
            return self.options[name]
        except KeyError as e:
            raise AttributeError(e)

    def __setattr__(self, name, value):
        assert_config(name, self.options.keys(), "%r isn't a valid option. Expected one of: %s")
        self.options[name] = value

    def __repr__(self):
        return 'EzcOptions(%r)' % (self.options,)

    @classmethod
    def from_any(cls, options):
        if options is None:
            return cls({})
        if isinstance(options, cls):
            return options
        return cls(options)

