"""配置常量模块 -- 可通过环境变量覆盖

包含数据库路径、宏解析开关与名称长度限制。
"""

import os
from pathlib import Path

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()

# 移除宏之后名称的最小字符数
MIN_NAME_LENGTH: int = 4

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _get_base_dir() -> Path:
    """获取项目 data 基础目录"""
    return Path(os.environ.get("TODOLIST_DATA_DIR", "data"))


def get_db_path() -> str:
    """获取 SQLite 数据库路径"""
    return os.environ.get(
        "TODOLIST_DB_PATH",
        str(_get_base_dir() / "sqlite" / "todolist.db"),
    )


class MacroConfig(BaseModel):
    """宏解析配置

    环境变量:
        TODOLIST_STRICT_PRIORITY: !0 / !5-!9 是否直接拒绝（默认 false，保留在名称中）
    """

    strict_priority: bool = Field(
        default=False,
        description="超出 1-4 的 !N 是否报错",
    )


def load_macro_config() -> MacroConfig:
    """从环境变量加载宏解析配置

    无法识别的取值记录 warning 并回退到默认值，不阻塞启动。
    """
    kwargs: dict = {}

    if val := os.environ.get("TODOLIST_STRICT_PRIORITY"):
        normalized = val.strip().lower()
        if normalized in _TRUE_VALUES:
            kwargs["strict_priority"] = True
        elif normalized in _FALSE_VALUES:
            kwargs["strict_priority"] = False
        else:
            log.warning(
                "invalid_strict_priority_config",
                env_var="TODOLIST_STRICT_PRIORITY",
                value=val,
                fallback=False,
            )

    return MacroConfig(**kwargs)
