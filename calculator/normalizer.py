"""输入规范化：去掉不可见字符，把 Unicode 符号映射为引擎接受的 ASCII 记号"""
import re
import unicodedata

# 在 NFKC 之前替换，NFKC 会把部分符号折叠成其他字符
_GLYPHS = {
    'π': 'pi',
    'Π': 'pi',
    '×': '*',
    '·': '*',
    '⋅': '*',    # 点乘
    '∗': '*',    # 星号运算符
    '÷': '/',
    '∕': '/',    # 除号斜线
    '−': '-',    # 数学减号
    '‐': '-',
    '‑': '-',
    '‒': '-',
    '–': '-',
    '—': '-',
    '―': '-',
    '﹣': '-',
    '－': '-',
}

# 上标指数：NFKC 会把 3² 折叠成 32，先整段改写为 ^2
_SUPERSCRIPTS = str.maketrans('⁰¹²³⁴⁵⁶⁷⁸⁹⁻⁺', '0123456789-+')
_SUPERSCRIPT_RE = re.compile('[⁻⁺]?[⁰¹²³⁴⁵⁶⁷⁸⁹]+')

_GLYPH_RE = re.compile('|'.join(re.escape(glyph) for glyph in _GLYPHS))

# √ 后紧跟数字或常量名时补上括号（√4 -> sqrt(4)），后面是函数调用时原样保留
_RADICAL_RE = re.compile(r'√\s*(\d+(?:\.\d+)?|\.\d+|[A-Za-z_]\w*(?!\w)(?!\s*\())')

_POWER_RE = re.compile(r'\*\*')
_LAYOUT_WHITESPACE = {'\t', '\n', '\r'}


def _strip_invisible(text):
    chars = []
    for char in text:
        if char in _LAYOUT_WHITESPACE:
            chars.append(' ')
        elif unicodedata.category(char) in ('Cc', 'Cf'):
            continue
        else:
            chars.append(char)
    return ''.join(chars)


def _expand_superscript(match):
    return '^' + match.group().translate(_SUPERSCRIPTS)


def normalize(raw):
    """
    Args:
        raw: 用户输入的原始字符串（None 视为空）
    Returns:
        只含 ASCII 记号的表达式，首尾空白已去除
    """
    if raw is None:
        return ''
    text = _strip_invisible(str(raw))
    text = _SUPERSCRIPT_RE.sub(_expand_superscript, text)
    text = _GLYPH_RE.sub(lambda m: _GLYPHS[m.group()], text)
    text = unicodedata.normalize('NFKC', text)
    # √ 不受 NFKC 影响；放在其后可以匹配折叠后的全角数字
    text = _RADICAL_RE.sub(r'sqrt(\1)', text)
    text = text.replace('√', 'sqrt')
    text = _POWER_RE.sub('^', text)
    return text.strip()
