"""
目录扫描模块
列出基准目录下的直接子目录 (不递归)
"""

from pathlib import Path
from typing import Iterator, Optional, Set, Union

from loguru import logger


HIDDEN_PREFIX = "."


def iter_directories(base_path: Optional[Union[str, Path]] = None) -> Iterator[str]:
    """按文件系统返回的顺序逐个产出子目录名

    基准目录无法读取时抛出 OSError; 单个条目无法判断时直接跳过。
    """
    base = Path(base_path) if base_path is not None else Path.cwd()

    # iterdir 是惰性的, 先取出全部条目, 让基准目录的错误在这里抛出
    entries = list(base.iterdir())

    for entry in entries:
        if entry.name.startswith(HIDDEN_PREFIX):
            continue
        if _is_directory(entry):
            yield entry.name


def list_directories(base_path: Optional[Union[str, Path]] = None) -> Set[str]:
    """列出所有非隐藏子目录 (无序)"""
    return set(iter_directories(base_path))


def _is_directory(entry: Path) -> bool:
    try:
        return entry.is_dir()
    except OSError as e:
        logger.debug(f"无法检查条目, 已跳过: {entry.name} ({e})")
        return False
