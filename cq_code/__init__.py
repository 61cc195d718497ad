"""
cq-code — CQ 码编解码库

将 [CQ:type,key=value,...] 形式的 CQ 码与结构化的 CQTag 互相转换。

使用:
    from cq_code import CQ, parse, dump

    # 解析收到的消息
    tags = parse("hello [CQ:face,id=1] world")

    # 构建待发送的消息
    msg = dump([CQ.at(10001), CQ.text(" 你好")])
"""

from .escape import escape, unescape
from .tag import UNSET, CQTag, CQText
from .parser import (
    tokenize,
    parse_token,
    parse,
    dump,
    to_segments,
    from_segment,
    from_segments,
)
from .config import CodecConfig, LogConfig, setup_logging
from .builder import CQ, CQBuilder

__all__ = [
    "escape", "unescape",
    "UNSET", "CQTag", "CQText",
    "tokenize", "parse_token", "parse", "dump",
    "to_segments", "from_segment", "from_segments",
    "CodecConfig", "LogConfig", "setup_logging",
    "CQ", "CQBuilder",
]
