"""
已知 CQ 码类型的构造函数

用法:
    from cq_code import CQ

    msg = CQ.at(10001), CQ.text(" 你好"), CQ.face(1)
    "".join(str(tag) for tag in msg)     # [CQ:at,qq=10001] 你好[CQ:face,id=1]

可选参数默认为 UNSET，未传入时不会出现在任何序列化结果中。
构造函数不做转义，需要时请先对参数值调用 escape(value, True)。
"""

from typing import List, Mapping, Optional, Union

from .escape import escape as escape_text, unescape as unescape_text
from .parser import parse as parse_message
from .config import CodecConfig
from .tag import UNSET, AttrValue, CQTag, CQText


class CQBuilder:
    """CQ 码构造器，汇总解析、转义与各类型构造函数"""

    def __init__(self, config: Optional[CodecConfig] = None):
        self.config = config or CodecConfig()

    # -------- 解析与转义 --------

    def parse(self, message: str) -> List[CQTag]:
        """将携带 CQ 码的字符串转换为 CQ 码列表"""
        return parse_message(message)

    def escape(self, text: str, inside_cq: bool = False) -> str:
        return escape_text(text, inside_cq)

    def unescape(self, text: str) -> str:
        return unescape_text(text)

    # -------- 构造函数 --------

    def text(self, text) -> CQText:
        """纯文本"""
        return CQText(str(text))

    def face(self, id: int) -> CQTag:
        """QQ 表情，id 处于 [0, 221] 区间"""
        return CQTag("face", {"id": id})

    def record(self, file: str, magic=UNSET, cache=UNSET, proxy=UNSET, timeout=UNSET) -> CQTag:
        """
        语音

        Args:
            file:    语音文件名或 URL
            magic:   是否变声
            cache:   通过网络 URL 发送时是否使用已缓存的文件
            proxy:   通过网络 URL 发送时是否通过代理下载
            timeout: 通过网络 URL 发送时的下载超时秒数
        """
        return CQTag("record", {
            "file": file, "magic": magic, "cache": cache, "proxy": proxy, "timeout": timeout,
        })

    def at(self, qq: Union[int, str]) -> CQTag:
        """@某人，qq 为 "all" 表示全体成员"""
        return CQTag("at", {"qq": qq})

    def share(self, url: str, title: str, content=UNSET, image=UNSET) -> CQTag:
        """链接分享"""
        return CQTag("share", {"url": url, "title": title, "content": content, "image": image})

    def music(self, type: str, id: int) -> CQTag:
        """音乐分享，type 为 qq / 163 / xm"""
        return CQTag("music", {"type": type, "id": id})

    def music_custom(self, url: str, audio: str, title: str, content=UNSET, image=UNSET) -> CQTag:
        """音乐自定义分享"""
        return CQTag("music", {
            "type": "custom",
            "url": url,
            "audio": audio,
            "title": title,
            "content": content,
            "image": image,
        })

    def image(self, file: str, type=UNSET, url=UNSET, cache=UNSET, id=UNSET, c=UNSET) -> CQTag:
        """
        图片

        Args:
            file:  图片文件名
            type:  flash 表示闪照，show 表示秀图，默认普通图片
            url:   图片 URL
            cache: 通过网络 URL 发送时是否使用已缓存的文件
            id:    秀图特效 ID
            c:     通过网络下载图片时的线程数
        """
        return CQTag("image", {"file": file, "type": type, "url": url, "cache": cache, "id": id, "c": c})

    def reply(self, id: int) -> CQTag:
        """回复，id 为被引用的消息 ID"""
        return CQTag("reply", {"id": id})

    def poke(self, qq: int) -> CQTag:
        """戳一戳"""
        return CQTag("poke", {"qq": qq})

    def gift(self, qq: int, id: int) -> CQTag:
        """礼物"""
        return CQTag("gift", {"qq": qq, "id": id})

    def node_id(self, id: int) -> CQTag:
        """合并转发节点，直接引用已有消息"""
        return CQTag("node", {"id": id})

    def node(self, name: str, uin: Union[int, str], content: Union[List[CQTag], str]) -> CQTag:
        """
        合并转发节点

        Args:
            name:    发送者显示名字
            uin:     发送者 QQ 号
            content: 具体消息，不支持转发套娃与引用回复
        """
        return CQTag("node", {"name": name, "uin": str(uin), "content": content})

    def xml(self, data: str, resid=UNSET) -> CQTag:
        """XML 消息，data 需预先实体化处理"""
        return CQTag("xml", {"data": data, "resid": resid})

    def json(self, data: str, resid=UNSET) -> CQTag:
        """
        JSON 消息

        类型名取自 config.json_wire_type，默认为 xml 以兼容原有通道。
        resid 不填走小程序通道，填了走富文本通道。
        """
        return CQTag(self.config.json_wire_type, {"data": data, "resid": resid})

    def cardimage(
        self,
        file: str,
        minwidth=UNSET,
        minheight=UNSET,
        maxwidth=UNSET,
        maxheight=UNSET,
        source=UNSET,
        icon=UNSET,
    ) -> CQTag:
        """xml 形式的大图消息，file 与 image 的 file 字段一致"""
        return CQTag("cardimage", {
            "file": file,
            "minwidth": minwidth,
            "minheight": minheight,
            "maxwidth": maxwidth,
            "maxheight": maxheight,
            "source": source,
            "icon": icon,
        })

    def tts(self, text: str) -> CQTag:
        """文本转语音"""
        return CQTag("tts", {"text": text})

    def custom(self, type: str, data: Optional[Mapping[str, AttrValue]] = None) -> CQTag:
        """自定义 CQ 码"""
        return CQTag(type, data or {})


CQ = CQBuilder()
