import math
import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from core import (
    AngleUnit, EngineError, LexError, ParseError, EvalError, evaluate_expression,
    EmptyExpressionError, UnexpectedCharacterError, MismatchedParenthesisError,
    MisplacedCommaError, UnknownIdentifierError, DivisionByZeroError, DomainError,
    MalformedExpressionError, NonFiniteResultError, ArityMismatchError, MissingOperandError
)


class TestEvaluateExpression(unittest.TestCase):
    def test_basic_arithmetic(self):
        self.assertEqual(evaluate_expression("1+2*3"), 7.0)
        self.assertEqual(evaluate_expression("(1+2)*3"), 9.0)
        self.assertAlmostEqual(evaluate_expression("2*(3+4)/5"), 2.8)

    def test_associativity(self):
        self.assertEqual(evaluate_expression("2^3^2"), 512.0)
        self.assertEqual(evaluate_expression("10-2-3"), 5.0)
        self.assertEqual(evaluate_expression("64/4/2"), 8.0)

    def test_unary_minus_with_power(self):
        self.assertEqual(evaluate_expression("-3^2"), -9.0)
        self.assertEqual(evaluate_expression("(-3)^2"), 9.0)
        self.assertEqual(evaluate_expression("2^-3"), 0.125)
        self.assertEqual(evaluate_expression("-2*-3"), 6.0)

    def test_percent(self):
        self.assertEqual(evaluate_expression("50%"), 0.5)
        self.assertEqual(evaluate_expression("200*10%"), 20.0)
        self.assertEqual(evaluate_expression("50%-0.25"), 0.25)

    def test_angle_units(self):
        self.assertAlmostEqual(evaluate_expression("sin(30)", AngleUnit.DEGREES), 0.5)
        self.assertAlmostEqual(evaluate_expression("sin(pi/2)", AngleUnit.RADIANS), 1.0)
        self.assertAlmostEqual(evaluate_expression("cos(60)", "degrees"), 0.5)
        self.assertAlmostEqual(evaluate_expression("asin(1)", "degrees"), 90.0)
        self.assertAlmostEqual(evaluate_expression("acos(0)", "radians"), math.pi / 2)

    def test_functions(self):
        self.assertEqual(evaluate_expression("sqrt(16)"), 4.0)
        self.assertAlmostEqual(evaluate_expression("log(1000)"), 3.0)
        self.assertAlmostEqual(evaluate_expression("ln(e)"), 1.0)
        self.assertEqual(evaluate_expression("abs(-7.5)"), 7.5)
        self.assertEqual(evaluate_expression("pow(2,10)"), evaluate_expression("2^10"))
        self.assertAlmostEqual(evaluate_expression("Sin(PI/6)"), 0.5)

    def test_constants(self):
        self.assertAlmostEqual(evaluate_expression("pi"), 3.14159265358979)
        self.assertAlmostEqual(evaluate_expression("e"), 2.71828182845905)

    def test_errors(self):
        cases = [
            ("", EmptyExpressionError),
            ("   ", EmptyExpressionError),
            ("2 # 3", UnexpectedCharacterError),
            ("(1+2", MismatchedParenthesisError),
            ("1,2", MisplacedCommaError),
            ("x+1", UnknownIdentifierError),
            ("1/0", DivisionByZeroError),
            ("1/(2-2)", DivisionByZeroError),
            ("sqrt(-1)", DomainError),
            ("log(0)", DomainError),
            ("ln(-1)", DomainError),
            ("2pi", MalformedExpressionError),
            ("pow(2)", ArityMismatchError),
            ("10^400", NonFiniteResultError),
            ("(-8)^(1/3)", NonFiniteResultError),
            ("asin(2)", NonFiniteResultError),
            ("%5", MissingOperandError),
            ("2*%3", MissingOperandError),
            ("(%50)", MissingOperandError),
            ("sin 0 + 1", MismatchedParenthesisError),
            ("sin 90^2", MismatchedParenthesisError),
        ]
        for text, error in cases:
            with self.subTest(text=text):
                with self.assertRaises(error):
                    evaluate_expression(text)

    def test_error_stages(self):
        self.assertTrue(issubclass(EmptyExpressionError, LexError))
        self.assertTrue(issubclass(MisplacedCommaError, ParseError))
        self.assertTrue(issubclass(NonFiniteResultError, EvalError))
        self.assertTrue(issubclass(EvalError, EngineError))

    def test_engine_usable_after_failure(self):
        with self.assertRaises(DivisionByZeroError):
            evaluate_expression("1/0")
        self.assertEqual(evaluate_expression("1/4"), 0.25)

    def test_deep_nesting_does_not_recurse(self):
        depth = 5000
        text = "(" * depth + "1" + ")" * depth
        self.assertEqual(evaluate_expression(text), 1.0)

    def test_result_is_plain_float(self):
        self.assertIs(type(evaluate_expression("sqrt(2)")), float)


if __name__ == "__main__":
    unittest.main()
