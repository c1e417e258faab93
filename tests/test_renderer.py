"""
渲染测试
"""

import json
import os
from datetime import datetime, timezone

import pytest
from jinja2 import TemplateNotFound

from dirindex.renderer import IndexRenderer, OutputFormat, render_html, render_json


GENERATED = datetime(2024, 5, 1, 12, 30, 45, tzinfo=timezone.utc)


def test_json_shape():
    text = render_json(["api", "v1.0.0"], GENERATED)
    data = json.loads(text)

    assert data == {
        "directories": ["api", "v1.0.0"],
        "generated": "2024-05-01T12:30:45+00:00",
    }
    assert text.endswith("\n")


def test_json_keeps_non_ascii_names():
    text = render_json(["文档"], GENERATED)

    assert "文档" in text


def test_json_empty():
    assert json.loads(render_json([], GENERATED))["directories"] == []


def test_html_lists_each_directory_as_link():
    html = render_html(["api", "v2.0.0"], GENERATED, title="Docs")

    assert '<a href="api/">api/</a>' in html
    assert '<a href="v2.0.0/">v2.0.0/</a>' in html
    assert html.index("api/") < html.index("v2.0.0/")
    assert "<h1>Docs</h1>" in html
    assert "<title>Docs</title>" in html


def test_html_reports_count_and_timestamp():
    html = render_html(["a", "b", "c"], GENERATED)

    assert "3 entries" in html
    assert "2024-05-01 12:30:45" in html
    assert 'datetime="2024-05-01T12:30:45+00:00"' in html


def test_html_single_entry_wording():
    assert "1 entry<" in render_html(["only"], GENERATED)


def test_html_empty_reports_zero():
    html = render_html([], GENERATED)

    assert "0 entries" in html
    assert "<li>" not in html


def test_html_escapes_names():
    html = render_html(["a&b", "<x>"], GENERATED, title="R&D")

    assert '<a href="a%26b/">a&amp;b/</a>' in html
    assert "&lt;x&gt;/" in html
    assert "<h1>R&amp;D</h1>" in html


def test_html_link_targets_are_percent_encoded():
    html = render_html(["C#", "a b?x", "100%"], GENERATED)

    assert '<a href="C%23/">C#/</a>' in html
    assert '<a href="a%20b%3Fx/">a b?x/</a>' in html
    assert '<a href="100%25/">100%/</a>' in html


def test_undecodable_name_renders_with_replacement():
    name = os.fsdecode(b"bad\xff")

    html = render_html([name], GENERATED)
    data = json.loads(render_json([name], GENERATED))

    assert '<a href="bad%FF/">bad\ufffd/</a>' in html
    assert data["directories"] == ["bad\ufffd"]


def test_dark_theme():
    html = render_html(["api"], GENERATED, theme="dark")

    assert "#1e1e1e" in html
    assert '<a href="api/">api/</a>' in html


def test_local_theme_overrides_bundled(tmp_path, monkeypatch):
    theme_dir = tmp_path / "templates" / "plain"
    theme_dir.mkdir(parents=True)
    (theme_dir / "index.html").write_text(
        "{{ title }}:{{ count }}:{{ directories | join(',') }}:{{ generated | date('%Y') }}:{{ generated_at | date('%H:%M') }}",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)

    assert render_html(["a", "b"], GENERATED, title="T", theme="plain") == "T:2:a,b:2024:12:30"


def test_unknown_theme_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(TemplateNotFound):
        render_html(["a"], GENERATED, theme="missing")


@pytest.mark.parametrize("value, expected, filename", [
    ("html", OutputFormat.HTML, "index.html"),
    ("JSON", OutputFormat.JSON, "index.json"),
])
def test_output_format_parse(value, expected, filename):
    fmt = OutputFormat.parse(value)

    assert fmt is expected
    assert fmt.default_filename == filename


def test_output_format_parse_rejects_unknown():
    with pytest.raises(ValueError, match="xml"):
        OutputFormat.parse("xml")


def test_index_renderer_dispatches_on_format():
    json_renderer = IndexRenderer("json")
    html_renderer = IndexRenderer(OutputFormat.HTML, title="Index")

    assert json.loads(json_renderer.render(["a"], GENERATED))["directories"] == ["a"]
    assert "<h1>Index</h1>" in html_renderer.render(["a"], GENERATED)
