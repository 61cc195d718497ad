"""
配置模块单元测试
"""

import os
import tempfile
import unittest
from unittest.mock import patch

from pydantic import ValidationError

from cq_code import CodecConfig, LogConfig, setup_logging


class TestCodecConfig(unittest.TestCase):
    """
    配置测试类
    """

    def test_default_values(self):
        config = CodecConfig()
        self.assertEqual(config.json_wire_type, "xml")
        self.assertEqual(config.log.level, "INFO")
        self.assertIsNone(config.log.dir)

    def test_missing_file(self):
        config = CodecConfig.from_yaml("/nonexistent/cq_code.yaml")
        self.assertEqual(config, CodecConfig())

    def test_from_yaml(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "cq_code.yaml")
            with open(path, "w", encoding="utf-8") as f:
                f.write("json_wire_type: json\nlog:\n  level: debug\n  dir: logs\n")
            config = CodecConfig.from_yaml(path)
        self.assertEqual(config.json_wire_type, "json")
        self.assertEqual(config.log.level, "debug")
        self.assertEqual(config.log.dir, "logs")

    def test_empty_yaml(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "cq_code.yaml")
            open(path, "w", encoding="utf-8").close()
            self.assertEqual(CodecConfig.from_yaml(path), CodecConfig())

    def test_invalid_yaml_content(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "cq_code.yaml")
            with open(path, "w", encoding="utf-8") as f:
                f.write("log: 1\n")
            with self.assertRaises(ValidationError):
                CodecConfig.from_yaml(path)

    def test_apply_logging(self):
        config = CodecConfig.model_validate({"log": {"level": "debug", "dir": "logs"}})
        with patch("cq_code.config.setup_logging") as mock_setup:
            config.apply_logging()
        mock_setup.assert_called_once_with(config.log)


class TestSetupLogging(unittest.TestCase):
    """
    日志配置测试类
    """

    def test_creates_log_dir(self):
        """
        测试按 LogConfig 创建日志目录并追加文件输出
        """
        with tempfile.TemporaryDirectory() as tmp:
            log_dir = os.path.join(tmp, "nested", "logs")
            with patch("logging.basicConfig") as mock_basic:
                setup_logging(LogConfig(level="debug", dir=log_dir))
            self.assertTrue(os.path.isdir(log_dir))
            kwargs = mock_basic.call_args.kwargs
            self.assertEqual(kwargs["level"], "DEBUG")
            handlers = kwargs["handlers"]
            self.assertEqual(len(handlers), 2)
            self.assertTrue(os.path.basename(handlers[1].baseFilename).startswith("cq_code_"))
            for handler in handlers:
                handler.close()

    def test_console_only_by_default(self):
        with patch("logging.basicConfig") as mock_basic:
            setup_logging()
        kwargs = mock_basic.call_args.kwargs
        self.assertEqual(kwargs["level"], "INFO")
        self.assertEqual(len(kwargs["handlers"]), 1)


if __name__ == "__main__":
    unittest.main()
