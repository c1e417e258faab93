"""
dirindex - 目录索引生成工具
"""

__version__ = "0.1.0"
__author__ = "dirindex"

from .config import IndexConfig
from .lister import list_directories, iter_directories
from .ordering import SortPolicy, order_directories, parse_version, is_versioned
from .renderer import OutputFormat, IndexRenderer, render_html, render_json
from .builder import IndexBuilder, IndexResult

__all__ = [
    "IndexConfig",
    "list_directories",
    "iter_directories",
    "SortPolicy",
    "order_directories",
    "parse_version",
    "is_versioned",
    "OutputFormat",
    "IndexRenderer",
    "render_html",
    "render_json",
    "IndexBuilder",
    "IndexResult",
]
