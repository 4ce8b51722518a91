"""core/token_system.py"""
import math
from enum import Enum
from types import MappingProxyType


class TokenType(Enum):
    NUMBER = "number"            # 数字字面量
    IDENTIFIER = "identifier"    # 函数名或常数名
    OPERATOR = "operator"        # + - * / ^ %
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    COMMA = "comma"


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class AngleUnit(Enum):
    DEGREES = "degrees"
    RADIANS = "radians"

    @classmethod
    def parse(cls, value):
        """接受 AngleUnit 或字符串（不区分大小写，支持 deg/rad 缩写）"""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        if text in ('deg', 'degree', 'degrees'):
            return cls.DEGREES
        if text in ('rad', 'radian', 'radians'):
            return cls.RADIANS
        raise ValueError(f"Unknown angle unit: {value!r}")


class Token:
    """词法单元，生成后不再修改"""
    __slots__ = ('type', 'text', 'offset')

    def __init__(self, token_type, text, offset=0):
        object.__setattr__(self, 'type', token_type)
        object.__setattr__(self, 'text', text)
        object.__setattr__(self, 'offset', offset)

    def __setattr__(self, key, value):
        raise AttributeError("Token is immutable")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.text == other.text

    def __hash__(self):
        return hash((self.type, self.text))

    def __repr__(self):
        return f"Token({self.type.name}, {self.text!r}, offset={self.offset})"


class OperatorSpec:
    def __init__(self, symbol, name, precedence, associativity, arity, prefix=False):
        self.symbol = symbol
        self.name = name              # Operators 上对应的方法名
        self.precedence = precedence
        self.associativity = associativity
        self.arity = arity
        self.prefix = prefix          # 前缀一元（负号）；后缀一元为 %

    def __repr__(self):
        return f"OperatorSpec({self.symbol!r}, prec={self.precedence}, {self.associativity.value}, arity={self.arity})"


class FunctionSpec:
    def __init__(self, name, arity):
        self.name = name
        self.arity = arity

    def __repr__(self):
        return f"FunctionSpec({self.name!r}, arity={self.arity})"


UNARY_MINUS = 'u-'

# 操作符定义 - 优先级从低到高
_OPERATOR_DEFINITIONS = {
    '+': OperatorSpec('+', 'add', 2, Associativity.LEFT, 2),
    '-': OperatorSpec('-', 'sub', 2, Associativity.LEFT, 2),
    '*': OperatorSpec('*', 'mul', 3, Associativity.LEFT, 2),
    '/': OperatorSpec('/', 'div', 3, Associativity.LEFT, 2),
    '^': OperatorSpec('^', 'pow', 4, Associativity.RIGHT, 2),
    UNARY_MINUS: OperatorSpec(UNARY_MINUS, 'neg', 5, Associativity.RIGHT, 1, prefix=True),
    '%': OperatorSpec('%', 'percent', 6, Associativity.LEFT, 1),
}

# 函数定义（名称小写）
_FUNCTION_DEFINITIONS = {
    'sin': FunctionSpec('sin', 1),
    'cos': FunctionSpec('cos', 1),
    'tan': FunctionSpec('tan', 1),
    'asin': FunctionSpec('asin', 1),
    'acos': FunctionSpec('acos', 1),
    'atan': FunctionSpec('atan', 1),
    'sqrt': FunctionSpec('sqrt', 1),
    'log': FunctionSpec('log', 1),    # 以10为底
    'ln': FunctionSpec('ln', 1),      # 自然对数
    'abs': FunctionSpec('abs', 1),
    'pow': FunctionSpec('pow', 2),
}

_CONSTANT_DEFINITIONS = {
    'pi': math.pi,
    'e': math.e,
}

# 只读视图，进程内共享
OPERATORS = MappingProxyType(_OPERATOR_DEFINITIONS)
FUNCTIONS = MappingProxyType(_FUNCTION_DEFINITIONS)
CONSTANTS = MappingProxyType(_CONSTANT_DEFINITIONS)

# 词法层面接受的单字符符号
OPERATOR_CHARS = frozenset('+-*/^%')


def lookup_function(name, functions=FUNCTIONS):
    return functions.get(name.lower())


def lookup_constant(name, constants=CONSTANTS):
    return constants.get(name.lower())


class RpnTokenType(Enum):
    LITERAL = "literal"
    FUNCTION_CALL = "function_call"
    OPERATOR = "operator"


class RpnToken:
    """后缀表达式中的单元，由 Parser 产生、Evaluator 消费"""
    __slots__ = ('type', 'value', 'name', 'argc')

    def __init__(self, token_type, value=None, name=None, argc=None):
        self.type = token_type
        self.value = value    # LITERAL 的数值
        self.name = name      # 函数名或操作符符号
        self.argc = argc      # FUNCTION_CALL 书写时的参数个数

    @classmethod
    def literal(cls, value):
        return cls(RpnTokenType.LITERAL, value=float(value))

    @classmethod
    def function_call(cls, name, argc):
        return cls(RpnTokenType.FUNCTION_CALL, name=name, argc=argc)

    @classmethod
    def operator(cls, symbol):
        return cls(RpnTokenType.OPERATOR, name=symbol)

    def __eq__(self, other):
        if not isinstance(other, RpnToken):
            return NotImplemented
        return (self.type, self.value, self.name, self.argc) == (other.type, other.value, other.name, other.argc)

    def __hash__(self):
        return hash((self.type, self.value, self.name, self.argc))

    def __str__(self):
        if self.type == RpnTokenType.LITERAL:
            return repr(self.value)
        if self.type == RpnTokenType.FUNCTION_CALL:
            return f"{self.name}/{self.argc}"
        return self.name

    def __repr__(self):
        return f"RpnToken({self.type.name}, {self})"


def format_rpn(rpn_sequence):
    """以空格分隔的可读形式，便于日志和 --show_rpn"""
    return ' '.join(str(token) for token in rpn_sequence)


class EvalContext:
    """单次求值的运行时上下文"""
    __slots__ = ('angle_unit',)

    def __init__(self, angle_unit=AngleUnit.RADIANS):
        self.angle_unit = AngleUnit.parse(angle_unit)

    def __repr__(self):
        return f"EvalContext(angle_unit={self.angle_unit.value})"
