"""
类型化参数模型单元测试
"""

import unittest

from pydantic import ValidationError

from cq_code import CQ, CQTag, parse
from cq_code.kinds import (
    AtData,
    FaceData,
    MusicCustomData,
    NodeData,
    NodeRefData,
    model_for,
)


class TestKindModels(unittest.TestCase):
    """
    参数模型测试类
    """

    def test_parsed_values_are_coerced(self):
        face = parse("[CQ:face,id=14]")[0].view()
        self.assertIsInstance(face, FaceData)
        self.assertEqual(face.id, 14)

    def test_at_all(self):
        self.assertEqual(parse("[CQ:at,qq=all]")[0].view().qq, "all")
        self.assertEqual(parse("[CQ:at,qq=10001]")[0].view().qq, 10001)

    def test_view_uses_modifier_and_drops_missing(self):
        tag = CQ.image("a.png").modify({"cache": "0"})
        image = tag.view()
        self.assertEqual(image.file, "a.png")
        self.assertEqual(image.cache, 0)
        self.assertIsNone(image.url)

    def test_extra_params_kept(self):
        face = parse("[CQ:face,id=1,large=1]")[0].view()
        self.assertEqual(face.model_extra, {"large": "1"})

    def test_variant_selection(self):
        self.assertIs(model_for(CQ.music_custom("u", "a", "t")), MusicCustomData)
        self.assertIs(model_for(CQ.node_id(5)), NodeRefData)
        self.assertIs(model_for(CQ.node("n", 1, "hi")), NodeData)

    def test_node_content_tags(self):
        node = CQ.node("n", 10001, [CQ.text("hi"), CQ.face(1)]).view()
        self.assertEqual(node.uin, "10001")
        self.assertEqual(len(node.content), 2)

    def test_explicit_model(self):
        at = CQTag("mention", {"qq": "1"}).view(AtData)
        self.assertEqual(at.qq, 1)

    def test_unknown_kind(self):
        with self.assertRaises(ValueError):
            CQTag("mention", {"qq": "1"}).view()

    def test_invalid_value(self):
        with self.assertRaises(ValidationError):
            parse("[CQ:face,id=abc]")[0].view()


if __name__ == "__main__":
    unittest.main()
