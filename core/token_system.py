"""core/token_system.py"""
from enum import Enum


class AngleMode(Enum):
    DEGREES = "deg"
    RADIANS = "rad"

    @classmethod
    def parse(cls, value):
        """接受 AngleMode、'deg'/'degrees'、'rad'/'radians'（大小写不敏感）"""
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        if name in ('deg', 'degree', 'degrees'):
            return cls.DEGREES
        if name in ('rad', 'radian', 'radians'):
            return cls.RADIANS
        raise ValueError(f"Unknown angle mode: {value!r}")


class TokenType(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    IDENTIFIER = "identifier"  # 函数名候选


class InstructionType(Enum):
    PUSH_NUMBER = "push_number"
    APPLY_BINARY_OP = "apply_binary_op"
    APPLY_FUNCTION = "apply_function"


class Token:
    """词法单元，创建后不可修改"""
    __slots__ = ('type', 'text', 'value', 'unary')

    def __init__(self, token_type, text, value=None, unary=False):
        object.__setattr__(self, 'type', token_type)
        object.__setattr__(self, 'text', text)
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'unary', unary)

    def __setattr__(self, key, value):
        raise AttributeError("Token is immutable")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.text, self.value, self.unary) == \
               (other.type, other.text, other.value, other.unary)

    def __hash__(self):
        return hash((self.type, self.text, self.value, self.unary))

    def __repr__(self):
        if self.unary:
            return f"Token({self.type.name}, {self.text!r}, unary)"
        return f"Token({self.type.name}, {self.text!r})"

    @classmethod
    def number(cls, text):
        return cls(TokenType.NUMBER, text, value=parse_number(text))

    @classmethod
    def operator(cls, symbol, unary=False):
        return cls(TokenType.OPERATOR, symbol, unary=unary)

    @classmethod
    def identifier(cls, name):
        return cls(TokenType.IDENTIFIER, name)


LEFT_PAREN = Token(TokenType.LEFT_PAREN, '(')
RIGHT_PAREN = Token(TokenType.RIGHT_PAREN, ')')

# 输入结束时仍未闭合的 '(' 以此标记进入指令序列，求值时报错
UNCLOSED_PAREN = '('


class Instruction:
    """后缀指令：PushNumber / ApplyBinaryOp / ApplyFunction"""
    __slots__ = ('type', 'symbol', 'value')

    def __init__(self, instruction_type, symbol, value=None):
        object.__setattr__(self, 'type', instruction_type)
        object.__setattr__(self, 'symbol', symbol)
        object.__setattr__(self, 'value', value)

    def __setattr__(self, key, value):
        raise AttributeError("Instruction is immutable")

    def __eq__(self, other):
        if not isinstance(other, Instruction):
            return NotImplemented
        return (self.type, self.symbol, self.value) == (other.type, other.symbol, other.value)

    def __hash__(self):
        return hash((self.type, self.symbol, self.value))

    def __repr__(self):
        return f"Instruction({self.type.name}, {self.symbol!r})"

    @property
    def is_malformed(self):
        # 形如 1.2.3 的数字：词法阶段不校验，求值时报错
        return self.type == InstructionType.PUSH_NUMBER and self.value is None

    @property
    def is_unclosed_paren(self):
        return self.type == InstructionType.APPLY_FUNCTION and self.symbol == UNCLOSED_PAREN

    @classmethod
    def push_number(cls, value, text=None):
        return cls(InstructionType.PUSH_NUMBER, text if text is not None else repr(value), value=value)

    @classmethod
    def binary_op(cls, symbol):
        return cls(InstructionType.APPLY_BINARY_OP, symbol)

    @classmethod
    def function(cls, name):
        return cls(InstructionType.APPLY_FUNCTION, name)


def parse_number(text):
    """数字字面量转 float；多于一个小数点返回 None"""
    if text.count('.') > 1 or text == '.':
        return None
    return float(text)


# 操作符定义：优先级、结合性、Operators 中对应的方法名
OPERATOR_DEFINITIONS = {
    '+': {'precedence': 2, 'right_assoc': False, 'method': 'add'},
    '-': {'precedence': 2, 'right_assoc': False, 'method': 'sub'},
    '*': {'precedence': 3, 'right_assoc': False, 'method': 'mul'},
    '/': {'precedence': 3, 'right_assoc': False, 'method': 'div'},
    '^': {'precedence': 4, 'right_assoc': True, 'method': 'pow'},
}

# 一元负号改写出的 '-'：比 '^' 绑定更紧，右结合
UNARY_MINUS_DEFINITION = {'precedence': 5, 'right_assoc': True, 'method': 'sub'}

# 乘除号的显示字形
GLYPH_ALIASES = {
    '×': '*',
    'x': '*',
    '÷': '/',
}

# 函数名 -> Operators 中的方法名
FUNCTION_DEFINITIONS = {
    'sin': 'sin',
    'cos': 'cos',
    'tan': 'tan',
    'log': 'log',
    'ln': 'ln',
    'sqrt': 'sqrt',
    'abs': 'abs',
    'fact': 'fact',
}

TRIG_FUNCTIONS = ('sin', 'cos', 'tan')


def operator_definition(token):
    """返回操作符 Token 的定义（区分一元负号）"""
    if token.unary:
        return UNARY_MINUS_DEFINITION
    return OPERATOR_DEFINITIONS[token.text]
