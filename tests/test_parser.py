import math
import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from core import (
    RpnToken, RpnTokenType, UNARY_MINUS, format_rpn, parse, tokenize,
    MismatchedParenthesisError, MisplacedCommaError, UnknownIdentifierError,
    MissingOperandError
)


def rpn(text):
    return parse(tokenize(text))


class TestShuntingYard(unittest.TestCase):
    def test_precedence(self):
        self.assertEqual(format_rpn(rpn("1+2*3")), "1.0 2.0 3.0 * +")
        self.assertEqual(format_rpn(rpn("(1+2)*3")), "1.0 2.0 + 3.0 *")

    def test_left_associative_subtraction(self):
        self.assertEqual(format_rpn(rpn("10-2-3")), "10.0 2.0 - 3.0 -")

    def test_right_associative_power(self):
        self.assertEqual(format_rpn(rpn("2^3^2")), "2.0 3.0 2.0 ^ ^")

    def test_unary_minus_positions(self):
        self.assertEqual(format_rpn(rpn("-3")), f"3.0 {UNARY_MINUS}")
        self.assertEqual(format_rpn(rpn("2*-3")), f"2.0 3.0 {UNARY_MINUS} *")
        self.assertEqual(format_rpn(rpn("(-3)")), f"3.0 {UNARY_MINUS}")
        self.assertEqual(format_rpn(rpn("--3")), f"3.0 {UNARY_MINUS} {UNARY_MINUS}")

    def test_unary_minus_and_power(self):
        # 底数一侧：^ 先结合
        self.assertEqual(format_rpn(rpn("-3^2")), f"3.0 2.0 ^ {UNARY_MINUS}")
        # 指数一侧：负号先结合
        self.assertEqual(format_rpn(rpn("2^-3")), f"2.0 3.0 {UNARY_MINUS} ^")

    def test_unary_minus_binds_tighter_than_multiplication(self):
        self.assertEqual(format_rpn(rpn("-2*3")), f"2.0 {UNARY_MINUS} 3.0 *")

    def test_postfix_percent(self):
        self.assertEqual(format_rpn(rpn("50%")), "50.0 %")
        self.assertEqual(format_rpn(rpn("200*10%")), "200.0 10.0 % *")
        self.assertEqual(format_rpn(rpn("-50%")), f"50.0 % {UNARY_MINUS}")

    def test_minus_after_percent_is_binary(self):
        self.assertEqual(format_rpn(rpn("50%-3")), "50.0 % 3.0 -")

    def test_function_call_follows_arguments(self):
        tokens = rpn("sin(30)+1")
        self.assertEqual(tokens[1], RpnToken.function_call("sin", 1))
        self.assertEqual(format_rpn(tokens), "30.0 sin/1 1.0 +")

    def test_function_names_are_case_insensitive(self):
        self.assertEqual(rpn("SQRT(4)"), rpn("sqrt(4)"))

    def test_multi_argument_function(self):
        self.assertEqual(format_rpn(rpn("pow(2, 1+2)")), "2.0 1.0 2.0 + pow/2")

    def test_argument_count_is_recorded_not_checked(self):
        self.assertEqual(rpn("sin(1,2)")[-1], RpnToken.function_call("sin", 2))
        self.assertEqual(rpn("sin()")[-1], RpnToken.function_call("sin", 0))

    def test_nested_function_calls(self):
        self.assertEqual(format_rpn(rpn("abs(pow(-2,3))")), f"2.0 {UNARY_MINUS} 3.0 pow/2 abs/1")

    def test_constants_are_resolved(self):
        tokens = rpn("PI")
        self.assertEqual(len(tokens), 1)
        self.assertEqual(tokens[0].type, RpnTokenType.LITERAL)
        self.assertEqual(tokens[0].value, math.pi)
        self.assertEqual(rpn("e")[0].value, math.e)

    def test_unknown_identifier(self):
        with self.assertRaises(UnknownIdentifierError) as ctx:
            rpn("2*foo")
        self.assertEqual(ctx.exception.name, "foo")

    def test_mismatched_parentheses(self):
        for text in ("(1+2", "1+2)", "((1)", "sin(1", ")("):
            with self.subTest(text=text):
                with self.assertRaises(MismatchedParenthesisError):
                    rpn(text)

    def test_percent_without_operand(self):
        for text, offset in (("%5", 0), ("2*%3", 2), ("(%50)", 1), ("sin(%1)", 4)):
            with self.subTest(text=text):
                with self.assertRaises(MissingOperandError) as ctx:
                    rpn(text)
                self.assertEqual(ctx.exception.offset, offset)

    def test_function_name_requires_parenthesis(self):
        for text in ("sin 0 + 1", "sin 90^2", "sqrt", "2*abs", "pow 2, 3"):
            with self.subTest(text=text):
                with self.assertRaises(MismatchedParenthesisError):
                    rpn(text)
        with self.assertRaises(MismatchedParenthesisError) as ctx:
            rpn("1 + cos 0")
        self.assertEqual(ctx.exception.offset, 4)

    def test_misplaced_comma(self):
        for text in ("1,2", "(1,2)", "sin(1)+2,3"):
            with self.subTest(text=text):
                with self.assertRaises(MisplacedCommaError):
                    rpn(text)

    def test_output_contains_no_parentheses(self):
        for token in rpn("((1+(2)))*(3)"):
            self.assertIn(token.type, (RpnTokenType.LITERAL, RpnTokenType.OPERATOR))
            self.assertNotIn(token.name, ("(", ")"))


if __name__ == "__main__":
    unittest.main()
