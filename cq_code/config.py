"""
配置与日志

提供:
    CodecConfig     — pydantic 配置模型，可从 YAML 文件加载
    setup_logging() — 按 LogConfig 配置全局日志，可选同时输出到目录

本库不读取环境变量，所有配置项均来自调用方传入的模型或 YAML 文件。
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field
import yaml


class LogConfig(BaseModel):
    level: str = Field("INFO", description="日志级别")
    dir: Optional[str] = Field(None, description="日志输出目录，不指定则仅控制台")


class CodecConfig(BaseModel):
    json_wire_type: str = Field(
        "xml", description="json 消息使用的 CQ 码类型名，默认沿用 xml 通道"
    )
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def from_yaml(cls, path: Union[str, Path] = "cq_code.yaml") -> "CodecConfig":
        p = Path(path)
        if not p.exists():
            return cls()
        with open(p, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls.model_validate(data)

    def apply_logging(self):
        """按 log 配置初始化全局日志"""
        setup_logging(self.log)


LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _log_file(log_dir: str) -> Path:
    # 以初始化时间命名: cq_code_YYYYMMDD_HHMMSS.log
    dir_path = Path(log_dir)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path / datetime.now().strftime("cq_code_%Y%m%d_%H%M%S.log")


def setup_logging(log: Optional[LogConfig] = None):
    """
    按 LogConfig 配置全局日志。

    始终输出到控制台；log.dir 不为空时同时写入该目录下的日志文件，目录不存在会自动创建。

    Args:
        log: 日志配置，不传时使用 LogConfig 默认值（INFO，仅控制台）
    """
    log = log or LogConfig()
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log.dir:
        handlers.append(logging.FileHandler(_log_file(log.dir), encoding="utf-8"))

    logging.basicConfig(
        level=log.level.upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        handlers=handlers,
    )
