#!/usr/bin/env python3
"""生成 index.html 的脚本 (在当前目录运行, 参数同 dirindex)"""
import sys
from pathlib import Path

# 未安装时从 src 目录导入
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dirindex.main import main

if __name__ == "__main__":
    main()
