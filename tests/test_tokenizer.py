import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from core import Token, TokenType, UnexpectedCharacterError, tokenize


class TestTokenizer(unittest.TestCase):
    def test_numbers_operators_and_punctuation(self):
        tokens = tokenize("3.5*(2+.25)")
        self.assertEqual(
            [(t.type, t.text) for t in tokens],
            [
                (TokenType.NUMBER, "3.5"),
                (TokenType.OPERATOR, "*"),
                (TokenType.LEFT_PAREN, "("),
                (TokenType.NUMBER, "2"),
                (TokenType.OPERATOR, "+"),
                (TokenType.NUMBER, ".25"),
                (TokenType.RIGHT_PAREN, ")"),
            ],
        )

    def test_identifiers_keep_case(self):
        tokens = tokenize("SIN(Pi)")
        self.assertEqual(tokens[0], Token(TokenType.IDENTIFIER, "SIN"))
        self.assertEqual(tokens[2], Token(TokenType.IDENTIFIER, "Pi"))

    def test_whitespace_is_ignored_and_offsets_recorded(self):
        tokens = tokenize("  12 ,\tx_1 ")
        self.assertEqual([t.text for t in tokens], ["12", ",", "x_1"])
        self.assertEqual([t.offset for t in tokens], [2, 5, 7])
        self.assertEqual(tokens[1].type, TokenType.COMMA)

    def test_sign_is_not_part_of_number(self):
        tokens = tokenize("-5")
        self.assertEqual([t.type for t in tokens], [TokenType.OPERATOR, TokenType.NUMBER])

    def test_all_operator_characters(self):
        tokens = tokenize("+-*/^%")
        self.assertTrue(all(t.type == TokenType.OPERATOR for t in tokens))
        self.assertEqual("".join(t.text for t in tokens), "+-*/^%")

    def test_empty_input_yields_empty_sequence(self):
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize("   "), [])

    def test_unexpected_character_reports_offset(self):
        with self.assertRaises(UnexpectedCharacterError) as ctx:
            tokenize("1 + 2 $ 3")
        self.assertEqual(ctx.exception.offset, 6)
        self.assertEqual(ctx.exception.char, "$")
        self.assertEqual(ctx.exception.kind, "UnexpectedCharacter")

    def test_trailing_dot_is_rejected(self):
        with self.assertRaises(UnexpectedCharacterError):
            tokenize("1.")

    def test_non_ascii_digits_are_rejected(self):
        with self.assertRaises(UnexpectedCharacterError):
            tokenize("٣")

    def test_deterministic(self):
        text = "sin(30)+log(100)*2^-1"
        self.assertEqual(tokenize(text), tokenize(text))

    def test_tokens_are_immutable(self):
        token = tokenize("1")[0]
        with self.assertRaises(AttributeError):
            token.text = "2"


if __name__ == "__main__":
    unittest.main()
