"""
测试公共配置
"""

import sys
from pathlib import Path

import pytest

# 添加 src 目录到路径
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def make_tree(tmp_path):
    """按名称创建子目录和文件, 返回基准目录"""
    def _make(dirs=(), files=()):
        for name in dirs:
            (tmp_path / name).mkdir()
        for name in files:
            (tmp_path / name).write_text("x", encoding="utf-8")
        return tmp_path
    return _make
