"""
已知 CQ 码类型的参数模型

每种类型一个 pydantic 模型，供 CQTag.view() 以类型化方式读取参数。
解析得到的参数值都是字符串，模型按声明类型做宽松转换（如 "1" → 1）。
参数值不做反转义，未声明的参数原样保留。
"""

from typing import Any, Dict, List, Literal, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field

from .tag import CQTag


class KindData(BaseModel):
    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)


class TextData(KindData):
    text: str = Field(..., description="纯文本内容")


class FaceData(KindData):
    id: int = Field(..., description="QQ 表情 ID")


class RecordData(KindData):
    file: str = Field(..., description="语音文件名或 URL")
    url: Optional[str] = Field(None, description="语音 URL")
    magic: Optional[bool] = Field(None, description="是否变声")
    cache: Optional[bool] = Field(None, description="是否使用已缓存的文件")
    proxy: Optional[bool] = Field(None, description="是否通过代理下载文件")
    timeout: Optional[int] = Field(None, description="下载超时秒数")


class VideoData(KindData):
    file: str = Field(..., description="视频文件名")
    url: Optional[str] = Field(None, description="视频 URL")


class AtData(KindData):
    qq: Union[Literal["all"], int] = Field(..., description="@的 QQ 号，all 表示全体成员")


class ShareData(KindData):
    url: str
    title: str
    content: Optional[str] = None
    image: Optional[str] = None


class MusicData(KindData):
    type: Literal["qq", "163", "xm"] = Field(..., description="QQ 音乐 / 网易云音乐 / 虾米音乐")
    id: int = Field(..., description="歌曲 ID")


class MusicCustomData(KindData):
    type: Literal["custom"] = "custom"
    url: str = Field(..., description="点击后跳转目标 URL")
    audio: str = Field(..., description="音乐 URL")
    title: str
    content: Optional[str] = None
    image: Optional[str] = None


class ImageData(KindData):
    file: str = Field(..., description="图片文件名")
    type: Optional[str] = Field(None, description="flash 闪照 / show 秀图")
    url: Optional[str] = None
    cache: Optional[int] = None
    id: Optional[int] = Field(None, description="秀图特效 ID")
    c: Optional[int] = Field(None, description="下载线程数")


class ReplyData(KindData):
    id: int = Field(..., description="被回复的消息 ID")


class PokeData(KindData):
    qq: int


class GiftData(KindData):
    qq: int
    id: int = Field(..., description="礼物类型")


class NodeData(KindData):
    name: str = Field(..., description="发送者显示名字")
    uin: str = Field(..., description="发送者 QQ 号")
    content: Union[str, List[CQTag]] = Field(..., description="具体消息")


class NodeRefData(KindData):
    id: int = Field(..., description="被转发的消息 ID")


class XmlData(KindData):
    data: str
    resid: Optional[int] = None


class JsonData(KindData):
    data: str
    resid: Optional[int] = None


class CardImageData(KindData):
    file: str
    minwidth: Optional[int] = None
    minheight: Optional[int] = None
    maxwidth: Optional[int] = None
    maxheight: Optional[int] = None
    source: Optional[str] = None
    icon: Optional[str] = None


class TtsData(KindData):
    text: str


KIND_MODELS: Dict[str, Type[KindData]] = {
    "text": TextData,
    "face": FaceData,
    "record": RecordData,
    "video": VideoData,
    "at": AtData,
    "share": ShareData,
    "music": MusicData,
    "image": ImageData,
    "reply": ReplyData,
    "poke": PokeData,
    "gift": GiftData,
    "node": NodeData,
    "xml": XmlData,
    "json": JsonData,
    "cardimage": CardImageData,
    "tts": TtsData,
}


def model_for(tag: CQTag) -> Type[KindData]:
    """
    按 CQ 码类型选择参数模型。

    music 的 type=custom 对应自定义音乐分享；node 只有 id 时对应消息引用节点。

    Raises:
        ValueError: 不在已知类型中
    """
    data: Dict[str, Any] = tag.merged()
    if tag.type == "music" and data.get("type") == "custom":
        return MusicCustomData
    if tag.type == "node" and "id" in data and "content" not in data:
        return NodeRefData
    try:
        return KIND_MODELS[tag.type]
    except KeyError:
        raise ValueError(f"未知的 CQ 码类型: {tag.type!r}，请显式指定模型") from None
