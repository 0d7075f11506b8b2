import logging
logger: logging.Logger = logging.getLogger("ezc")
logger.addHandler(logging.StreamHandler())
# By default, we should not output any log messages
logger.setLevel(logging.CRITICAL)


NO_VALUE = object()

STRING_TYPE = str
BYTES_TYPES = (bytes, bytearray, memoryview)


def char_repr(ch):
    """Printable form of a single source byte, for messages."""
    if not ch:
        return '<EOF>'
    if isinstance(ch, int):
        ch = bytes((ch,))
    if isinstance(ch, bytes):
        ch = ch.decode('ascii', 'backslashreplace')
    return repr(ch)[1:-1]


def to_bytes(text, encoding='utf-8'):
    if isinstance(text, STRING_TYPE):
        return text.encode(encoding)
    if isinstance(text, BYTES_TYPES):
        return bytes(text)
    raise TypeError("Expected str or bytes, got %s" % type(text).__name__)
