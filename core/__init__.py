"""核心模块 - Token系统、Shunting-yard解析器、RPN评估器和操作符"""
from .token_system import (
    TokenType, Token, Associativity, AngleUnit, OperatorSpec, FunctionSpec,
    RpnTokenType, RpnToken, EvalContext, OPERATORS, FUNCTIONS, CONSTANTS,
    UNARY_MINUS, format_rpn
)
from .errors import (
    EngineError, LexError, ParseError, EvalError,
    UnexpectedCharacterError, EmptyExpressionError, InputTooLongError,
    MismatchedParenthesisError, MisplacedCommaError, UnknownIdentifierError, MissingOperandError,
    StackUnderflowError, ArityMismatchError, UnknownFunctionError,
    UnknownOperatorError, DivisionByZeroError, DomainError,
    MalformedExpressionError, NonFiniteResultError
)
from .tokenizer import tokenize
from .parser import ShuntingYardParser, parse
from .rpn_evaluator import RPNEvaluator
from .operators import Operators
from .engine import compile_expression, evaluate_rpn, evaluate_expression

__all__ = [
    'TokenType', 'Token', 'Associativity', 'AngleUnit', 'OperatorSpec', 'FunctionSpec',
    'RpnTokenType', 'RpnToken', 'EvalContext', 'OPERATORS', 'FUNCTIONS', 'CONSTANTS',
    'UNARY_MINUS', 'format_rpn',
    'EngineError', 'LexError', 'ParseError', 'EvalError',
    'UnexpectedCharacterError', 'EmptyExpressionError', 'InputTooLongError',
    'MismatchedParenthesisError', 'MisplacedCommaError', 'UnknownIdentifierError', 'MissingOperandError',
    'StackUnderflowError', 'ArityMismatchError', 'UnknownFunctionError',
    'UnknownOperatorError', 'DivisionByZeroError', 'DomainError',
    'MalformedExpressionError', 'NonFiniteResultError',
    'tokenize', 'ShuntingYardParser', 'parse', 'RPNEvaluator', 'Operators',
    'compile_expression', 'evaluate_rpn', 'evaluate_expression'
]
