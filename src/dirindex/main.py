#!/usr/bin/env python3
"""
dirindex - 目录索引生成工具
主入口文件
"""

import argparse
import sys
from pathlib import Path

import yaml
from jinja2 import TemplateNotFound
from loguru import logger

from .builder import IndexBuilder
from .config import DEFAULT_CONFIG_FILE, IndexConfig
from .ordering import SortPolicy
from .renderer import OutputFormat


def parse_args(argv=None):
    """解析命令行参数"""
    parser = argparse.ArgumentParser(description="dirindex - 为子目录生成 HTML 索引页或 JSON 清单")
    parser.add_argument(
        "base_path",
        nargs="?",
        default=None,
        help="要扫描的目录 (默认: 当前目录)"
    )
    parser.add_argument(
        "-c", "--config",
        default=None,
        help=f"配置文件路径 (默认: 存在时读取 {DEFAULT_CONFIG_FILE})"
    )
    parser.add_argument(
        "-f", "--format",
        choices=[f.value for f in OutputFormat],
        default=None,
        help="输出格式 (默认: html)"
    )
    parser.add_argument(
        "-s", "--sort",
        choices=[p.value for p in SortPolicy],
        default=None,
        help="排序策略 (默认: semver)"
    )
    parser.add_argument(
        "-t", "--title",
        default=None,
        help="HTML 页面标题"
    )
    parser.add_argument(
        "--theme",
        default=None,
        help="HTML 模板主题 (默认: default)"
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="输出文件名 (默认: index.html / index.json)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="显示详细日志"
    )
    return parser.parse_args(argv)


def setup_logging(verbose: bool = False):
    """配置日志"""
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
    )


def load_config(args) -> IndexConfig:
    """读取配置文件并用命令行参数覆盖"""
    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            raise FileNotFoundError(f"配置文件不存在: {config_path}")
        config = IndexConfig.load(config_path)
        logger.info(f"已加载配置: {config_path}")
    elif Path(DEFAULT_CONFIG_FILE).exists():
        config = IndexConfig.load(Path(DEFAULT_CONFIG_FILE))
        logger.info(f"已加载配置: {DEFAULT_CONFIG_FILE}")
    else:
        config = IndexConfig()

    return config.merge({
        "base_path": args.base_path,
        "format": args.format,
        "sort": args.sort,
        "title": args.title,
        "theme": args.theme,
        "output": args.output,
    })


def main(argv=None):
    """主函数"""
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"配置错误: {e}")
        sys.exit(1)

    if not config.base_path.is_dir():
        logger.error(f"目录不存在: {config.base_path}")
        sys.exit(1)

    try:
        IndexBuilder(config).build()
    except TemplateNotFound as e:
        logger.error(f"模板不存在: {config.theme}/{e}")
        sys.exit(1)
    except (OSError, UnicodeError) as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
