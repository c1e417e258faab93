"""
配置加载模块
"""

from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field, fields, replace

import yaml
from loguru import logger

from .ordering import SortPolicy
from .renderer import OutputFormat


DEFAULT_CONFIG_FILE = "dirindex.yaml"


@dataclass
class IndexConfig:
    """索引生成配置"""
    base_path: Path = field(default_factory=lambda: Path("."))
    sort: SortPolicy = SortPolicy.SEMVER
    format: OutputFormat = OutputFormat.HTML
    title: str = "Documentation"
    theme: str = "default"
    output: Optional[str] = None  # 输出文件名, 默认 index.html / index.json

    def __post_init__(self):
        self.base_path = Path(self.base_path)
        self.sort = SortPolicy.parse(self.sort)
        self.format = OutputFormat.parse(self.format)

    @property
    def output_filename(self) -> str:
        return self.output or self.format.default_filename

    @property
    def output_path(self) -> Path:
        return self.base_path / self.output_filename

    @classmethod
    def load(cls, path: Path) -> "IndexConfig":
        """从 YAML 文件加载配置"""
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"配置文件格式错误 (应为映射): {path}")

        unknown = set(data) - {f.name for f in fields(cls)}
        if unknown:
            logger.warning(f"忽略未知的配置项: {', '.join(sorted(unknown))}")

        # 相对路径以配置文件所在目录为准
        base_path = Path(_get_str(data, "base_path", "."))
        if not base_path.is_absolute():
            base_path = path.parent / base_path

        return cls(
            base_path=base_path,
            sort=_get_str(data, "sort", SortPolicy.SEMVER.value),
            format=_get_str(data, "format", OutputFormat.HTML.value),
            title=_get_str(data, "title", "Documentation", scalar=True),
            theme=_get_str(data, "theme", "default", scalar=True),
            output=_get_str(data, "output", None),
        )

    def merge(self, overrides: Dict[str, Any]) -> "IndexConfig":
        """用命令行参数覆盖配置, 值为 None 的项保持不变"""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


def _get_str(data: Dict[str, Any], key: str, default: Optional[str], scalar: bool = False) -> Optional[str]:
    """读取字符串配置项, 空值使用默认值

    scalar=True 时数字等标量会转为字符串 (如 title: 2024)。
    """
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if scalar and isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise ValueError(f"配置项 {key} 应为字符串: {value!r}")
