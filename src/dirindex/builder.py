"""
索引生成模块
扫描目录 -> 排序 -> 渲染 -> 写入文件
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .config import IndexConfig
from .lister import iter_directories
from .ordering import order_directories
from .renderer import IndexRenderer


@dataclass
class IndexResult:
    """一次生成的结果"""
    directories: List[str]
    generated: datetime
    output_path: Path


class IndexBuilder:
    """索引生成器"""

    def __init__(self, config: IndexConfig):
        self.config = config
        self.renderer = IndexRenderer(config.format, title=config.title, theme=config.theme)

    def collect(self) -> List[str]:
        """扫描并排序子目录"""
        names = iter_directories(self.config.base_path)
        return order_directories(names, self.config.sort)

    def build(self, now: Optional[datetime] = None) -> IndexResult:
        """生成索引文件, 已存在时直接覆盖"""
        base_path = self.config.base_path
        logger.info(f"扫描目录: {base_path}")

        directories = self.collect()
        generated = now or datetime.now().astimezone()

        content = self.renderer.render(directories, generated)

        output_path = self.config.output_path
        output_path.write_text(content, encoding="utf-8")
        logger.info(f"已生成: {output_path} ({len(directories)} 个目录)")

        return IndexResult(directories=directories, generated=generated, output_path=output_path)
