"""
CQ 码解析

负责:
    - tokenize():    将消息切分为纯文本片段与 CQ 码片段
    - parse_token(): 将单个片段解析为 CQTag，格式不符时按纯文本处理
    - parse():       完整消息 → CQTag 列表
    - dump():        CQTag 列表 → 完整消息
    - 消息段数组（{"type", "data"} 列表）与 CQTag 列表之间的互转

解析不会自动反转义，文本与参数值保持收到时的原样，需要时请调用 unescape()。
"""

import logging
import re
from typing import Any, Dict, Iterable, List, Mapping

from pydantic import BaseModel, Field

from .escape import ensure_str
from .tag import CQTag, CQText

logger = logging.getLogger("cq-code")

# 在每个 "[CQ:" 之前、每个 "]" 之后切分
SPLIT = re.compile(r"(?=\[CQ:)|(?<=\])")
CQ_TAG_REGEXP = re.compile(r"\[CQ:([a-z]+)(?:,([^\]]+))?\]")


class Segment(BaseModel):
    """消息段结构，用于校验外部传入的 {"type", "data"} 对象"""

    type: str = Field(..., description="CQ 码类型名")
    data: Dict[str, Any] = Field(default_factory=dict, description="CQ 码参数")


def is_tag_token(token: str) -> bool:
    return CQ_TAG_REGEXP.fullmatch(token) is not None


def tokenize(message: str) -> List[str]:
    """
    切分消息。

    相邻的非 CQ 码片段会合并为一个纯文本片段，所有片段按顺序拼接即为原消息。
    切分只确定候选边界，不校验 CQ 码语法。

    Args:
        message: 含 CQ 码的消息文本

    Returns:
        List[str]: 片段列表，空消息返回空列表
    """
    ensure_str(message, "message")
    tokens: List[str] = []
    pending_text = ""
    for piece in SPLIT.split(message):
        if not piece:
            continue
        if is_tag_token(piece):
            if pending_text:
                tokens.append(pending_text)
                pending_text = ""
            tokens.append(piece)
        else:
            pending_text += piece
    if pending_text:
        tokens.append(pending_text)
    return tokens


def _parse_params(raw: str) -> Dict[str, str]:
    # 只按第一个 "=" 切分，参数值中允许出现 "="；没有 "=" 时整段作为空键的值
    params: Dict[str, str] = {}
    for pair in raw.split(","):
        index = pair.find("=")
        if index < 0:
            params[""] = pair
        else:
            params[pair[:index]] = pair[index + 1:]
    return params


def parse_token(token: str) -> CQTag:
    """
    解析单个片段。

    Args:
        token: tokenize() 产生的片段

    Returns:
        CQTag: 符合 [CQ:type,k=v,...] 格式时为对应 CQ 码，否则为纯文本 CQText
    """
    ensure_str(token, "token")
    match = CQ_TAG_REGEXP.fullmatch(token)
    if match is None:
        if token.startswith("[CQ:"):
            logger.debug("无法识别的 CQ 码，按纯文本处理: %r", token)
        return CQText(token)

    tag_name, raw_params = match.group(1), match.group(2)
    if raw_params is None:
        return CQTag(tag_name, {})
    return CQTag(tag_name, _parse_params(raw_params))


def parse(message: str) -> List[CQTag]:
    """
    将携带 CQ 码的消息转换为 CQTag 列表。

    示例:
        >>> parse("hello [CQ:face,id=1] world")
        [CQText('hello '), CQTag('face', {'id': '1'}), CQText(' world')]
    """
    return [parse_token(token) for token in tokenize(message)]


def dump(tags: Iterable[CQTag]) -> str:
    """将 CQTag 列表拼接为消息文本，parse() 的逆操作"""
    return "".join(str(tag) for tag in tags)


# -------- 消息段数组 --------


def to_segments(tags: Iterable[CQTag]) -> List[Dict[str, Any]]:
    """CQTag 列表 → 消息段数组"""
    return [tag.to_segment() for tag in tags]


def from_segment(segment: Mapping[str, Any]) -> CQTag:
    """
    消息段 → CQTag。

    Args:
        segment: {"type": ..., "data": {...}}，格式错误时抛出 pydantic.ValidationError
                 text 消息段的 text 不是字符串时抛出 TypeError

    Returns:
        CQTag: type 为 text 时返回 CQText
    """
    seg = Segment.model_validate(segment)
    if seg.type == "text":
        return CQText(ensure_str(seg.data.get("text", ""), "text"))
    return CQTag(seg.type, seg.data)


def from_segments(segments: Iterable[Mapping[str, Any]]) -> List[CQTag]:
    """消息段数组 → CQTag 列表"""
    return [from_segment(segment) for segment in segments]
