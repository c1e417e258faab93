"""
目录排序模块
识别语义化版本目录 (v1.2.3) 并按策略排序
"""

import re
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from loguru import logger


# 只匹配前缀, 补丁号之后的字符 (如 "-rc1") 忽略
VERSION_PATTERN = re.compile(r"^v(\d+)\.(\d+)\.(\d+)")


class SortPolicy(str, Enum):
    """排序策略"""
    SEMVER = "semver"  # 普通目录在前 (字母序), 版本目录在后 (新版本在前)
    LEXICAL = "lexical"  # 全部按字母序
    LISTING = "listing"  # 保持文件系统返回的顺序

    @classmethod
    def parse(cls, value: str) -> "SortPolicy":
        """从字符串解析排序策略"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(f"未知的排序策略: {value} (可选: {choices})") from None


def parse_version(name: str) -> Optional[Tuple[int, int, int]]:
    """解析版本号, 不匹配时返回 None"""
    match = VERSION_PATTERN.match(name)
    if not match:
        return None
    major, minor, patch = match.groups()
    return int(major), int(minor), int(patch)


def is_versioned(name: str) -> bool:
    return VERSION_PATTERN.match(name) is not None


def order_directories(names: Iterable[str], policy: SortPolicy = SortPolicy.SEMVER) -> List[str]:
    """按排序策略生成最终的目录列表"""
    names = list(names)

    if policy == SortPolicy.LISTING:
        return names
    elif policy == SortPolicy.LEXICAL:
        return sorted(names)
    elif policy == SortPolicy.SEMVER:
        return _order_semver(names)

    raise ValueError(f"未知的排序策略: {policy}")


def _order_semver(names: List[str]) -> List[str]:
    """普通目录按字母序在前, 版本目录按版本号降序在后"""
    plain = []
    versioned = []

    for name in names:
        version = parse_version(name)
        if version is None:
            plain.append(name)
        else:
            versioned.append((version, name))

    plain.sort()

    # 版本号相同时按名称升序, 保证输出与目录枚举顺序无关
    versioned.sort(key=lambda pair: pair[1])
    versioned.sort(key=lambda pair: pair[0], reverse=True)

    logger.debug(f"版本目录 {len(versioned)} 个, 普通目录 {len(plain)} 个")

    return plain + [name for _, name in versioned]
