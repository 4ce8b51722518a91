"""Shunting-yard 解析器：中缀 Token 序列 -> 后缀(RPN)序列"""
import logging

from core.errors import (
    MismatchedParenthesisError, MisplacedCommaError, UnknownIdentifierError,
    MissingOperandError
)
from core.token_system import (
    TokenType, Associativity, RpnToken, OPERATORS, FUNCTIONS, CONSTANTS,
    UNARY_MINUS, lookup_function, lookup_constant, format_rpn
)

logger = logging.getLogger(__name__)

# 操作符栈中的条目类型
_OP = 'op'
_FUNC = 'func'
_PAREN = 'paren'


class _ParenFrame:
    """记录一对括号的状态：是否为函数调用、已见逗号数"""
    __slots__ = ('is_call', 'commas', 'offset')

    def __init__(self, is_call, offset):
        self.is_call = is_call
        self.commas = 0
        self.offset = offset


class ShuntingYardParser:

    def __init__(self, operators=OPERATORS, functions=FUNCTIONS, constants=CONSTANTS):
        self.operators = operators
        self.functions = functions
        self.constants = constants

    @staticmethod
    def should_pop(top, incoming):
        """栈顶操作符是否应在 incoming 入栈前弹出"""
        # 前缀操作符左侧没有操作数，不会触发弹出
        if incoming.prefix:
            return False
        # 前缀负号让位于右结合二元操作符：-3^2 = -(3^2)
        if top.prefix and incoming.arity == 2 and incoming.associativity == Associativity.RIGHT:
            return False
        if top.precedence > incoming.precedence:
            return True
        return top.precedence == incoming.precedence and incoming.associativity == Associativity.LEFT

    def parse(self, tokens):
        """
        单遍扫描，显式操作符栈
        Args:
            tokens: tokenize() 的输出
        Returns:
            RpnToken 列表
        """
        output = []
        stack = []          # (kind, payload, offset)
        frames = []         # 与栈中的 '(' 一一对应
        expect_operand = True
        prev_type = None
        after_function = False

        for token in tokens:
            is_function = False
            # 函数名之后必须紧跟 '('
            if after_function and token.type != TokenType.LEFT_PAREN:
                raise MismatchedParenthesisError(stack[-1][2])

            if token.type == TokenType.NUMBER:
                output.append(RpnToken.literal(float(token.text)))
                expect_operand = False

            elif token.type == TokenType.IDENTIFIER:
                spec = lookup_function(token.text, self.functions)
                if spec is not None:
                    stack.append((_FUNC, spec.name, token.offset))
                    is_function = True
                    expect_operand = True
                else:
                    value = lookup_constant(token.text, self.constants)
                    if value is None:
                        raise UnknownIdentifierError(token.text, token.offset)
                    output.append(RpnToken.literal(value))
                    expect_operand = False

            elif token.type == TokenType.LEFT_PAREN:
                stack.append((_PAREN, None, token.offset))
                frames.append(_ParenFrame(after_function, token.offset))
                expect_operand = True

            elif token.type == TokenType.RIGHT_PAREN:
                while stack and stack[-1][0] != _PAREN:
                    self._emit(stack.pop(), output)
                if not stack:
                    raise MismatchedParenthesisError(token.offset)
                stack.pop()
                frame = frames.pop()
                if frame.is_call:
                    argc = 0 if prev_type == TokenType.LEFT_PAREN else frame.commas + 1
                    _, name, _ = stack.pop()
                    output.append(RpnToken.function_call(name, argc))
                expect_operand = False

            elif token.type == TokenType.COMMA:
                while stack and stack[-1][0] != _PAREN:
                    self._emit(stack.pop(), output)
                if not stack or not frames[-1].is_call:
                    raise MisplacedCommaError(token.offset)
                frames[-1].commas += 1
                expect_operand = True

            elif token.type == TokenType.OPERATOR:
                symbol = token.text
                if symbol == '-' and expect_operand:
                    symbol = UNARY_MINUS
                incoming = self.operators[symbol]
                # 后缀 % 左侧必须已有一个完整的值
                if incoming.arity == 1 and not incoming.prefix and expect_operand:
                    raise MissingOperandError(symbol, token.offset)

                while stack and stack[-1][0] == _OP and self.should_pop(stack[-1][1], incoming):
                    self._emit(stack.pop(), output)
                stack.append((_OP, incoming, token.offset))
                # 后缀 % 之后仍是一个完整的值
                expect_operand = incoming.arity == 2 or incoming.prefix

            prev_type = token.type
            after_function = is_function

        if after_function:
            raise MismatchedParenthesisError(stack[-1][2])

        while stack:
            kind, _, offset = stack[-1]
            if kind == _PAREN:
                raise MismatchedParenthesisError(offset)
            self._emit(stack.pop(), output)

        logger.debug(f"RPN: {format_rpn(output)}")
        return output

    @staticmethod
    def _emit(entry, output):
        # 函数标记总在其 '(' 之下，只会随 ')' 弹出
        _, spec, _ = entry
        output.append(RpnToken.operator(spec.symbol))


def parse(tokens, operators=OPERATORS, functions=FUNCTIONS):
    """模块级入口：tokens -> RPN"""
    return ShuntingYardParser(operators, functions).parse(tokens)
