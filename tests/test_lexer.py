from unittest import TestCase, main

from ezc import Lexer, Location, TokenType, InvalidNumber, InvalidEncoding, lex, parse


def types(text):
    return [t.type for t in lex(text)]


def single(text):
    "Returns the only token in text (besides EOF)"
    tokens = list(lex(text))
    assert len(tokens) == 2, tokens
    assert tokens[-1].type is TokenType.EOF, tokens
    return tokens[0]


class TestLexer(TestCase):

    def test_punctuation(self):
        self.assertEqual(types('; , = [ ] -'), [
            TokenType.SEMICOLON, TokenType.COMMA, TokenType.EQUAL,
            TokenType.LBRACKET, TokenType.RBRACKET, TokenType.MINUS, TokenType.EOF,
        ])

    def test_empty(self):
        lexer = Lexer(b'')
        t = lexer.next_token()
        self.assertEqual(t.type, TokenType.EOF)
        self.assertEqual(t.start, Location(1, 1, 0))
        self.assertEqual(t.end, t.start)

    def test_whitespace_only(self):
        self.assertEqual(types(' \t\r\n  '), [TokenType.EOF])

    def test_eof_repeats(self):
        lexer = Lexer(b'a')
        self.assertEqual(lexer.next_token().type, TokenType.VARIABLE_NAME)
        for _ in range(3):
            self.assertEqual(lexer.next_token().type, TokenType.EOF)

    def test_decimal_integer(self):
        for text in ('0', '7', '42', '1234567890'):
            t = single(text)
            self.assertEqual(t.type, TokenType.INTEGER)
            self.assertEqual(t.value, int(text))

        self.assertEqual(single('007').value, 7)

    def test_hex_and_octal(self):
        t = single('0x1F')
        self.assertEqual((t.type, t.value), (TokenType.INTEGER, 31))
        self.assertEqual(single('0xff').value, 255)
        t = single('0o17')
        self.assertEqual((t.type, t.value), (TokenType.INTEGER, 15))

    def test_hex_without_digits(self):
        t = single('0x')
        self.assertEqual(t.type, TokenType.INVALID)
        self.assertEqual(t.value, b'0x')
        self.assertIsNone(t.expected)

        tokens = list(lex('0xg'))
        self.assertEqual(tokens[0].type, TokenType.INVALID)
        self.assertEqual(tokens[0].expected, 'g')
        # The failing byte is left for the next token
        self.assertEqual(tokens[1].type, TokenType.VARIABLE_NAME)
        self.assertEqual(tokens[1].value, b'g')

    def test_octal_without_digits(self):
        tokens = list(lex('0o8'))
        self.assertEqual(tokens[0].type, TokenType.INVALID)
        self.assertEqual(tokens[0].value, b'0o')
        self.assertEqual(tokens[0].expected, '8')
        self.assertEqual(tokens[1].value, 8)

    def test_floats(self):
        cases = {
            '3.14': 3.14,
            '.5': 0.5,
            '5.': 5.0,
            '0.25': 0.25,
            '.': 0.0,
        }
        for text, value in cases.items():
            t = single(text)
            self.assertEqual(t.type, TokenType.FLOAT, text)
            self.assertEqual(t.value, value, text)

    def test_float_sequence(self):
        tokens = list(lex('1.2.3'))
        self.assertEqual([t.value for t in tokens[:2]], [1.2, 0.3])

    def test_negative_numbers(self):
        t = single('-5')
        self.assertEqual((t.type, t.value), (TokenType.INTEGER, -5))
        t = single('-.5')
        self.assertEqual((t.type, t.value), (TokenType.FLOAT, -0.5))
        t = single('-2.5')
        self.assertEqual((t.type, t.value), (TokenType.FLOAT, -2.5))
        t = single('-5.')
        self.assertEqual((t.type, t.value), (TokenType.FLOAT, -5.0))
        self.assertEqual(t.start, Location(1, 1, 0))

    def test_minus_before_hex_prefix(self):
        # Only decimal literals take a sign
        tokens = list(lex('-0x1'))
        self.assertEqual((tokens[0].type, tokens[0].value), (TokenType.INTEGER, 0))
        self.assertEqual((tokens[1].type, tokens[1].value), (TokenType.VARIABLE_NAME, b'x1'))

    def test_standalone_minus(self):
        self.assertEqual(types('-a-'), [TokenType.MINUS, TokenType.VARIABLE_NAME, TokenType.MINUS, TokenType.EOF])
        self.assertEqual(types('--'), [TokenType.MINUS, TokenType.MINUS, TokenType.EOF])
        self.assertEqual(types('- 5'), [TokenType.MINUS, TokenType.INTEGER, TokenType.EOF])

    def test_int64_bounds(self):
        self.assertEqual(single('9223372036854775807').value, 2**63 - 1)
        self.assertEqual(single('-9223372036854775808').value, -2**63)
        self.assertEqual(single('0x7fffffffffffffff').value, 2**63 - 1)

        for text in ('9223372036854775808', '-9223372036854775809', '0x8000000000000000'):
            lexer = Lexer(text)
            self.assertRaises(InvalidNumber, lexer.next_token)

    def test_overflow_location(self):
        try:
            Lexer(b'  99999999999999999999').next_token()
        except InvalidNumber as e:
            self.assertEqual(e.start, Location(1, 3, 2))
            self.assertEqual(e.end.pos, 22)
        else:
            self.fail("InvalidNumber not raised")

    def test_keywords_and_names(self):
        tokens = list(lex('true false truex _a1 False'))
        self.assertEqual([t.type for t in tokens], [
            TokenType.TRUE, TokenType.FALSE, TokenType.VARIABLE_NAME,
            TokenType.VARIABLE_NAME, TokenType.VARIABLE_NAME, TokenType.EOF,
        ])
        self.assertIsNone(tokens[0].value)
        self.assertEqual(tokens[2].value, b'truex')
        self.assertEqual(tokens[3].value, b'_a1')

    def test_name_followed_by_digits(self):
        t = single('abc123')
        self.assertEqual(t.value, b'abc123')

    def test_string(self):
        t = single('"hello world"')
        self.assertEqual(t.type, TokenType.STRING)
        self.assertEqual(t.value, b'hello world')
        self.assertEqual(t.end.pos, 13)

    def test_string_keeps_escapes(self):
        t = single(r'"a\tb\"c"')
        self.assertEqual(t.value, b'a\\tb\\"c')

    def test_string_escaped_backslash_before_quote(self):
        tokens = list(lex(r'"a\\" b'))
        self.assertEqual(tokens[0].type, TokenType.STRING)
        self.assertEqual(tokens[0].value, b'a\\\\')
        self.assertEqual(tokens[1].value, b'b')

    def test_string_with_newline(self):
        tokens = list(lex('"a\nb" c'))
        self.assertEqual(tokens[0].value, b'a\nb')
        self.assertEqual(tokens[1].start, Location(2, 4, 6))

    def test_unterminated_string(self):
        t = single('"abc')
        self.assertEqual(t.type, TokenType.INVALID)
        self.assertEqual(t.value, b'"abc')
        self.assertIsNone(t.expected)
        self.assertEqual(t.end.pos, 4)

    def test_unterminated_string_after_backslash(self):
        t = single('"abc\\')
        self.assertEqual(t.type, TokenType.INVALID)
        t = single('"abc\\"')
        self.assertEqual(t.type, TokenType.INVALID)

    def test_invalid_character(self):
        tokens = list(lex('a @ b'))
        self.assertEqual([t.type for t in tokens], [
            TokenType.VARIABLE_NAME, TokenType.INVALID, TokenType.VARIABLE_NAME, TokenType.EOF,
        ])
        self.assertEqual(tokens[1].value, b'@')
        self.assertIsNone(tokens[1].expected)
        self.assertEqual(tokens[1].start, Location(1, 3, 2))
        self.assertEqual(tokens[1].end, Location(1, 4, 3))

    def test_locations(self):
        tokens = list(lex(b'ab = 12;\ncd'))
        spans = [(t.type, t.start, t.end) for t in tokens]
        self.assertEqual(spans, [
            (TokenType.VARIABLE_NAME, Location(1, 1, 0), Location(1, 3, 2)),
            (TokenType.EQUAL, Location(1, 4, 3), Location(1, 5, 4)),
            (TokenType.INTEGER, Location(1, 6, 5), Location(1, 8, 7)),
            (TokenType.SEMICOLON, Location(1, 8, 7), Location(2, 0, 8)),
            (TokenType.VARIABLE_NAME, Location(2, 1, 9), Location(2, 2, 11)),
            (TokenType.EOF, Location(2, 2, 11), Location(2, 2, 11)),
        ])

    def test_token_aliases(self):
        t = list(lex('\n  x'))[0]
        self.assertEqual((t.line, t.column, t.pos_in_stream, t.end_pos), (2, 3, 3, 4))

    def test_str_input_is_encoded(self):
        t = single('"café"')
        self.assertEqual(t.value, 'café'.encode('utf-8'))
        t = list(Lexer('"café"', {'encoding': 'latin-1'}).lex())[0]
        self.assertEqual(t.value, b'caf\xe9')

    def test_unencodable_input(self):
        try:
            Lexer('s = "é";', {'encoding': 'ascii'})
        except InvalidEncoding as e:
            self.assertEqual(e.start, Location(1, 6, 5))
            self.assertIn('ascii', str(e))
        else:
            self.fail("InvalidEncoding not raised")

        try:
            parse('a = 1;\nb = "☺";', encoding='latin-1')
        except InvalidEncoding as e:
            self.assertEqual(e.start, Location(2, 6, 12))
        else:
            self.fail("InvalidEncoding not raised")

    def test_location_ordering(self):
        a = Location(1, 1, 0)
        b = Location(2, 3, 7)
        self.assertTrue(a < b)
        self.assertTrue(a <= b)
        self.assertTrue(b > a)
        self.assertTrue(b >= a)
        self.assertTrue(a <= Location(1, 1, 0))
        self.assertFalse(a > b)
        self.assertEqual(sorted([b, a]), [a, b])
        self.assertEqual(max(a, b), b)

    def test_token_equality(self):
        a, b = list(lex('1 1'))[:2]
        self.assertEqual(a, b)
        self.assertNotEqual(a.start, b.start)
        self.assertNotEqual(a, list(lex('1.0'))[0])

    def test_token_format(self):
        t = single('42')
        self.assertEqual(str(t), 'Integer 1:1(lex: 0):1:2(lex: 2) Value: 42')
        self.assertEqual(repr(t), 'Token(INTEGER, 42)')

        t = single('abc')
        self.assertEqual(str(t), 'Variable Name 1:1(lex: 0):1:3(lex: 3) Value: abc')

        t = list(lex('0xz'))[0]
        self.assertEqual(str(t), 'Invalid Token 1:1(lex: 0):1:3(lex: 2) Expected z')


if __name__ == '__main__':
    main()
