"""
索引渲染模块
使用 Jinja2 模板生成 HTML 索引页, 或生成 JSON 清单
"""

import json
import os
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List
from urllib.parse import quote

from jinja2 import Environment, FileSystemLoader, select_autoescape
from loguru import logger


PACKAGE_TEMPLATES = Path(__file__).parent / "templates"


class OutputFormat(str, Enum):
    """输出格式"""
    HTML = "html"
    JSON = "json"

    @classmethod
    def parse(cls, value: str) -> "OutputFormat":
        """从字符串解析输出格式"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ValueError(f"未知的输出格式: {value} (可选: {choices})") from None

    @property
    def default_filename(self) -> str:
        return f"index.{self.value}"


def display_name(name: str) -> str:
    """无法按 UTF-8 解码的字节替换为 U+FFFD"""
    return os.fsencode(name).decode("utf-8", "replace")


def href(name: str) -> str:
    """目录名的 URL 编码 (按文件系统的原始字节)"""
    return quote(os.fsencode(name), safe="")


def render_json(directories: List[str], generated: datetime) -> str:
    """生成 JSON 清单"""
    payload = {
        "directories": [display_name(name) for name in directories],
        "generated": generated.isoformat(),
    }
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


def render_html(
    directories: List[str],
    generated: datetime,
    title: str = "Documentation",
    theme: str = "default",
) -> str:
    """用主题模板生成 HTML 索引页"""
    env = _get_env(theme)
    template = env.get_template("index.html")
    return template.render(
        title=title,
        directories=directories,
        count=len(directories),
        generated=generated,
        generated_at=generated.isoformat(),
    )


def _template_dir(theme: str) -> Path:
    """模板目录: 优先使用工作目录下的 templates/<theme>, 否则使用内置模板"""
    template_dir = Path("templates") / theme
    if not template_dir.exists():
        template_dir = PACKAGE_TEMPLATES / theme
    return template_dir


def _get_env(theme: str) -> Environment:
    template_dir = _template_dir(theme)
    logger.debug(f"使用模板目录: {template_dir}")

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml"]),
    )
    env.filters["date"] = _format_date
    env.filters["display"] = display_name
    env.filters["href"] = href
    return env


def _format_date(value, format="%Y-%m-%d %H:%M:%S"):
    """格式化日期

    字符串分支用于自定义模板对 generated_at (ISO 字符串) 使用 date 过滤器的情况
    """
    if isinstance(value, str):
        try:
            dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
            return dt.strftime(format)
        except ValueError:
            return value
    elif isinstance(value, datetime):
        return value.strftime(format)
    return str(value)


class IndexRenderer:
    """索引渲染器"""

    def __init__(self, format: OutputFormat = OutputFormat.HTML, title: str = "Documentation", theme: str = "default"):
        self.format = OutputFormat.parse(format)
        self.title = title
        self.theme = theme

    def render(self, directories: List[str], generated: datetime) -> str:
        """按输出格式渲染目录列表"""
        if self.format == OutputFormat.JSON:
            return render_json(directories, generated)
        return render_html(directories, generated, title=self.title, theme=self.theme)
