from .utils import logger
from .common import Location, EzcOptions
from .exceptions import (EzcError, ConfigurationError, UnexpectedInput, LexError, ParseError,
                         InvalidHexLiteral, InvalidOctalLiteral, InvalidNumber, UnterminatedString,
                         InvalidEncoding, UnexpectedCharacter, ExpectedStatement, ExpectedAssignOperator,
                         ExpectedValue, ArrayExpectedCommaOrRBracket, SemicolonExpected, CategoryRequiresName,
                         CategoryRequiresMinus, InvalidEscapeCode, InvalidUnicodeEscape)
from .lexer import Lexer, Token, TokenType
from .document import Config, Category, Variable, Value, ValueType
from .parser import Parser
from .ezc import parse, lex, open

__version__: str = "0.1.0"
