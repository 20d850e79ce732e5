import unittest

from envro.errors import ParseError
from envro.parser import parse, parse_line


class ParseTests(unittest.TestCase):
    def test_simple_pairs(self) -> None:
        table = parse("VAR=value\nOTHER=1")
        self.assertEqual(table, {"VAR": "value", "OTHER": "1"})

    def test_later_duplicate_overwrites(self) -> None:
        table = parse("VAR=first\nVAR=second\nOTHER=x")
        self.assertEqual(table, {"VAR": "second", "OTHER": "x"})

    def test_blank_and_comment_lines_are_skipped(self) -> None:
        table = parse("\n   \n# VAR1=asd\n  #indented comment\nVAR=1\n")
        self.assertEqual(table, {"VAR": "1"})

    def test_hash_after_content_is_part_of_value(self) -> None:
        self.assertEqual(parse("VAR=value # not a comment"), {"VAR": "value # not a comment"})

    def test_crlf_line_endings(self) -> None:
        self.assertEqual(parse("A=1\r\nB=2\r\n"), {"A": "1", "B": "2"})

    def test_unquoted_value_with_equals(self) -> None:
        table = parse("DATABASE_URL=postgres://u:p@host/db?sslmode=require")
        self.assertEqual(table["DATABASE_URL"], "postgres://u:p@host/db?sslmode=require")

    def test_quoted_value_with_equals(self) -> None:
        table = parse('VAR="host=localhost;user=admin"')
        self.assertEqual(table["VAR"], "host=localhost;user=admin")

    def test_quoted_values(self) -> None:
        table = parse('\nVAR1="1"\nVAR2="Lorem ipsum "ciao!" "')
        self.assertEqual(table["VAR1"], "1")
        self.assertEqual(table["VAR2"], 'Lorem ipsum "ciao!" ')

    def test_escaped_quote_is_unescaped(self) -> None:
        self.assertEqual(parse('VAR="a\\"b"')["VAR"], 'a"b')

    def test_other_escapes_stay_literal(self) -> None:
        self.assertEqual(parse('VAR="line\\nbreak\\\\"')["VAR"], "line\\nbreak\\\\")

    def test_quoted_empty_value(self) -> None:
        self.assertEqual(parse('VAR=""'), {"VAR": ""})

    def test_empty_content(self) -> None:
        self.assertEqual(parse(""), {})

    def test_unquoted_inner_whitespace_kept(self) -> None:
        self.assertEqual(parse("  VAR=a  b  ")["VAR"], "a  b")


class ParseErrorTests(unittest.TestCase):
    def assertInvalid(self, content: str, line: str) -> None:
        with self.assertRaises(ParseError) as ctx:
            parse(content)
        self.assertEqual(ctx.exception.line, line)

    def test_missing_equals(self) -> None:
        self.assertInvalid("VAR value", "VAR value")

    def test_empty_key(self) -> None:
        self.assertInvalid("=value", "=value")

    def test_empty_value(self) -> None:
        self.assertInvalid("VAR=", "VAR=")

    def test_unterminated_quote(self) -> None:
        self.assertInvalid('VAR="open', 'VAR="open')

    def test_single_quote_character(self) -> None:
        self.assertInvalid('VAR="', 'VAR="')

    def test_error_carries_trimmed_line(self) -> None:
        self.assertInvalid("OK=1\n   broken line   \nLATER=2", "broken line")

    def test_error_message(self) -> None:
        with self.assertRaises(ParseError) as ctx:
            parse("VAR value")
        self.assertEqual(str(ctx.exception), 'PARSE_ERROR line "VAR value" is not valid')


class ParseLineTests(unittest.TestCase):
    def test_comment_returns_none(self) -> None:
        self.assertIsNone(parse_line("# comment"))

    def test_blank_returns_none(self) -> None:
        self.assertIsNone(parse_line("   "))

    def test_splits_on_first_equals(self) -> None:
        self.assertEqual(parse_line("A=b=c"), ("A", "b=c"))


if __name__ == "__main__":
    unittest.main()
