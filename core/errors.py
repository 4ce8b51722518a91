"""表达式引擎的错误分类：词法 / 语法 / 求值"""


class EngineError(Exception):
    """所有引擎错误的基类，kind 为稳定的错误类型名"""
    kind = "EngineError"
    stage = "engine"


# ================== 词法阶段 ==================
class LexError(EngineError):
    stage = "lex"


class UnexpectedCharacterError(LexError):
    kind = "UnexpectedCharacter"

    def __init__(self, offset, char):
        self.offset = offset
        self.char = char
        super().__init__(f"Unexpected character {char!r} at position {offset}")


class EmptyExpressionError(LexError):
    kind = "EmptyExpression"

    def __init__(self):
        super().__init__("Expression is empty")


class InputTooLongError(LexError):
    kind = "InputTooLong"

    def __init__(self, length, limit):
        self.length = length
        self.limit = limit
        super().__init__(f"Expression is too long ({length} characters, limit is {limit})")


# ================== 语法阶段 ==================
class ParseError(EngineError):
    stage = "parse"


class MismatchedParenthesisError(ParseError):
    kind = "MismatchedParenthesis"

    def __init__(self, offset=None):
        self.offset = offset
        where = f" at position {offset}" if offset is not None else ""
        super().__init__(f"Mismatched parenthesis{where}")


class MisplacedCommaError(ParseError):
    kind = "MisplacedComma"

    def __init__(self, offset=None):
        self.offset = offset
        where = f" at position {offset}" if offset is not None else ""
        super().__init__(f"Comma outside a function argument list{where}")


class UnknownIdentifierError(ParseError):
    kind = "UnknownIdentifier"

    def __init__(self, name, offset=None):
        self.name = name
        self.offset = offset
        super().__init__(f"Unknown identifier {name!r}")


class MissingOperandError(ParseError):
    kind = "MissingOperand"

    def __init__(self, symbol, offset=None):
        self.symbol = symbol
        self.offset = offset
        where = f" at position {offset}" if offset is not None else ""
        super().__init__(f"Operator {symbol!r} has no operand before it{where}")


# ================== 求值阶段 ==================
class EvalError(EngineError):
    stage = "eval"


class StackUnderflowError(EvalError):
    kind = "StackUnderflow"

    def __init__(self, symbol, expected, available):
        self.symbol = symbol
        self.expected = expected
        self.available = available
        super().__init__(f"Operator {symbol!r} needs {expected} operand(s), found {available}")


class ArityMismatchError(EvalError):
    kind = "ArityMismatch"

    def __init__(self, name, expected, received):
        self.name = name
        self.expected = expected
        self.received = received
        super().__init__(f"Function {name}() takes {expected} argument(s), got {received}")


class UnknownFunctionError(EvalError):
    kind = "UnknownFunction"

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown function {name!r}")


class UnknownOperatorError(EvalError):
    kind = "UnknownOperator"

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"Unknown operator {symbol!r}")


class DivisionByZeroError(EvalError):
    kind = "DivisionByZero"

    def __init__(self):
        super().__init__("Division by zero")


class DomainError(EvalError):
    kind = "DomainError"

    def __init__(self, name, value):
        self.name = name
        self.value = value
        super().__init__(f"{name}() is undefined for {value!r}")


class MalformedExpressionError(EvalError):
    kind = "MalformedExpression"

    def __init__(self, stack_size):
        self.stack_size = stack_size
        super().__init__(f"Malformed expression: {stack_size} value(s) left after evaluation, expected 1")


class NonFiniteResultError(EvalError):
    kind = "NonFiniteResult"

    def __init__(self, value):
        self.value = value
        super().__init__(f"Result is not a finite number ({value})")
