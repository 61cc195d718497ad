"""
CQ 码数据模型

一个 CQ 码由三部分组成:
    type     — 类型名，如 at / face / image，允许自定义类型
    data     — 构造时确定的基础参数，之后不再改变
    modifier — 覆盖参数，序列化时覆盖同名基础参数，只能整体替换

两种序列化形式:
    str(tag)         — 文本形式 [CQ:type,k=v,...]，仅过滤 UNSET
    tag.to_segment() — 消息段形式 {"type": ..., "data": {...}}，过滤 UNSET 与 None
"""

import json
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

from .escape import ensure_str


class _Unset:
    """未提供参数的占位值，区别于显式传入的 None"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()

# 参数值的取值范围: 字符串 / 数字 / 布尔 / 嵌套 CQ 码列表 / None / UNSET
AttrValue = Union[str, int, float, bool, List["CQTag"], None, _Unset]


def stringify(value: AttrValue) -> str:
    """
    将参数值转换为 CQ 码文本中的形式。

    嵌套的 CQ 码列表按各自文本形式直接拼接（与 dump() 一致），
    不用逗号分隔，否则会在参数值中引入未转义的逗号。
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return "".join(stringify(v) for v in value)
    return str(value)


def _json_default(obj: Any) -> Any:
    if isinstance(obj, CQTag):
        return obj.to_segment()
    raise TypeError(f"无法序列化为 JSON 的类型: {type(obj).__name__}")


class CQTag:
    """
    单个 CQ 码

    用法:
        tag = CQTag("at", {"qq": 10001})
        str(tag)                        # [CQ:at,qq=10001]
        tag.modify({"qq": "all"})       # 返回同一对象
        tag.to_segment()                # {"type": "at", "data": {"qq": "all"}}
    """

    def __init__(self, type: str, data: Optional[Mapping[str, AttrValue]] = None):
        self._type = ensure_str(type, "type")
        self._data: Mapping[str, AttrValue] = MappingProxyType(dict(data or {}))
        self._modifier: Dict[str, AttrValue] = {}

    # -------- 访问 --------

    @property
    def type(self) -> str:
        """CQ 码类型名"""
        return self._type

    @property
    def data(self) -> Mapping[str, AttrValue]:
        """基础参数（只读）"""
        return self._data

    @property
    def modifier(self) -> Mapping[str, AttrValue]:
        """覆盖参数（只读视图，修改请使用 modify()）"""
        return MappingProxyType(self._modifier)

    def get(self, key: str, default: Any = None) -> Any:
        """读取基础参数，不存在或为 UNSET 时返回 default"""
        value = self._data.get(key, UNSET)
        return default if value is UNSET else value

    def merged(self) -> Dict[str, AttrValue]:
        """基础参数叠加覆盖参数，键顺序为基础参数在前、新增覆盖参数在后"""
        return {**self._data, **self._modifier}

    # -------- 覆盖参数 --------

    def modify(self, modifier: Mapping[str, AttrValue]) -> "CQTag":
        """
        整体替换覆盖参数，不与上一次的覆盖参数合并。

        Args:
            modifier: 新的覆盖参数

        Returns:
            CQTag: 自身，便于链式调用
        """
        self._modifier = dict(modifier)
        return self

    # -------- 序列化 --------

    def __str__(self) -> str:
        parts = [f"[CQ:{self._type}"]
        for key, value in self.merged().items():
            if value is not UNSET:
                parts.append(f",{key}={stringify(value)}")
        parts.append("]")
        return "".join(parts)

    def to_segment(self) -> Dict[str, Any]:
        """转换为消息段 {"type": ..., "data": {...}}，去除 UNSET 与 None 参数"""
        data = {
            key: value
            for key, value in self.merged().items()
            if value is not UNSET and value is not None
        }
        return {"type": self._type, "data": data}

    def to_json(self) -> str:
        """消息段的 JSON 文本，嵌套的 CQ 码同样转为消息段"""
        return json.dumps(self.to_segment(), ensure_ascii=False, default=_json_default)

    def view(self, model=None):
        """
        以类型化模型读取参数。

        Args:
            model: pydantic 模型类，不传时按 type 从已知类型中选择

        Returns:
            对应模型的实例
        """
        from .kinds import model_for

        model = model or model_for(self)
        return model.model_validate(self.to_segment()["data"])

    # -------- 比较 --------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CQTag):
            return NotImplemented
        return (
            self._type == other._type
            and dict(self._data) == dict(other._data)
            and self._modifier == other._modifier
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._modifier:
            return f"{type(self).__name__}({self._type!r}, {dict(self._data)!r}, modifier={self._modifier!r})"
        return f"{type(self).__name__}({self._type!r}, {dict(self._data)!r})"


class CQText(CQTag):
    """纯文本片段，文本形式直接输出原文而不是 [CQ:text,...]"""

    def __init__(self, text: str):
        super().__init__("text", {"text": text})

    @property
    def text(self) -> str:
        return self._data["text"]

    def __str__(self) -> str:
        return str(self._data["text"])

    def __repr__(self) -> str:
        return f"CQText({self.text!r})"
