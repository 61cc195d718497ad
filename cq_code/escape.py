"""
CQ 码转义工具

提供两个函数:
    escape()   — 将任意文本转义为可安全嵌入 CQ 码的形式
    unescape() — 将 CQ 码中的实体还原为原始字符

转义规则（顺序固定，先处理 &，否则会把后续规则引入的实体再次转义）:
    &  →  &amp;
    [  →  &#91;
    ]  →  &#93;
    ,  →  &#44;   (仅 CQ 码参数值内)
"""

from typing import Any

# 反转义时 &amp; 必须最后处理，避免还原出的 & 与后续字符拼成新的实体
_ESCAPE_RULES = (
    ("&", "&amp;"),
    ("[", "&#91;"),
    ("]", "&#93;"),
)
_COMMA_RULE = (",", "&#44;")
_UNESCAPE_RULES = (
    ("&#44;", ","),
    ("&#91;", "["),
    ("&#93;", "]"),
    ("&amp;", "&"),
)


def ensure_str(value: Any, name: str) -> str:
    """API 边界的类型检查，非字符串参数属于调用方错误"""
    if not isinstance(value, str):
        raise TypeError(f"{name} 应为字符串，实际类型: {type(value).__name__}")
    return value


def escape(text: str, inside_cq: bool = False) -> str:
    """
    转义文本。

    Args:
        text:      欲转义的字符串
        inside_cq: 是否位于 CQ 码参数值内，为 True 时额外转义逗号

    Returns:
        str: 转义后的字符串
    """
    ensure_str(text, "text")
    for old, new in _ESCAPE_RULES:
        text = text.replace(old, new)
    if inside_cq:
        text = text.replace(*_COMMA_RULE)
    return text


def unescape(text: str) -> str:
    """
    反转义文本，是 escape() 的逆操作。

    Args:
        text: 欲反转义的字符串

    Returns:
        str: 反转义后的字符串
    """
    ensure_str(text, "text")
    for old, new in _UNESCAPE_RULES:
        text = text.replace(old, new)
    return text
