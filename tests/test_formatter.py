"""Tests for ColoredFormatter wiring.

Covers:
- Color resolution: strings never see a terminal, sinks use their isatty()
- Per-call mode overrides and with_options()
- Invalid input rejected before any byte reaches the sink
- Text entry points keep number literals and surface parse errors
- Debug logging of the resolved color decision
- Sharing one formatter across threads
"""

from __future__ import annotations

import io
import json
import logging
import math
import sys
from concurrent.futures import ThreadPoolExecutor

import pytest

from colored_json.color import ColorMode
from colored_json.errors import DepthLimitError, InvalidValueError
from colored_json.formatter import ColoredFormatter
from colored_json.options import Layout, RenderOptions
from colored_json.styles import DEFAULT_THEME, Style, TokenClass
from colored_json.tree import TreeBuilder

DOC = {"name": "John Doe", "age": 43, "phones": ["+44 1234567", "+44 2345678"]}


class TTYBuffer(io.StringIO):
    def isatty(self) -> bool:
        return True


class RecordingBytes:
    def __init__(self) -> None:
        self.writes: list[bytes] = []

    def write(self, data: bytes) -> int:
        self.writes.append(data)
        return len(data)


@pytest.fixture
def color_friendly_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment in which AUTO colors a terminal."""
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("ANSI_COLORS_DISABLED", raising=False)
    monkeypatch.setenv("TERM", "xterm-256color")


@pytest.fixture
def formatter() -> ColoredFormatter:
    return ColoredFormatter()


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_defaults(self, formatter: ColoredFormatter) -> None:
        assert formatter.theme is DEFAULT_THEME
        assert formatter.options == RenderOptions()

    def test_with_options_keeps_theme(self) -> None:
        theme = DEFAULT_THEME.replace(comma=Style(dim=True))
        fmt = ColoredFormatter(theme=theme).with_options(layout=Layout.COMPACT)
        assert fmt.theme is theme
        assert fmt.options.layout is Layout.COMPACT

    def test_max_depth_option_applies(self) -> None:
        fmt = ColoredFormatter(options=RenderOptions(max_depth=1))
        with pytest.raises(DepthLimitError):
            fmt.to_colored_json([[1]])


# ---------------------------------------------------------------------------
# to_colored_json / to_colored_json_auto
# ---------------------------------------------------------------------------


class TestToColoredJson:
    def test_auto_never_colors_a_string(
        self, formatter: ColoredFormatter, color_friendly_env: None
    ) -> None:
        assert "\x1b" not in formatter.to_colored_json(DOC)

    def test_always_colors(self, formatter: ColoredFormatter) -> None:
        out = formatter.to_colored_json(DOC, mode=ColorMode.ALWAYS)
        assert DEFAULT_THEME[TokenClass.OBJECT_KEY].paint('"name"') in out

    def test_mode_accepts_strings(self, formatter: ColoredFormatter) -> None:
        assert "\x1b" in formatter.to_colored_json(DOC, mode="always")

    def test_options_color_mode_used_without_override(self) -> None:
        fmt = ColoredFormatter(options=RenderOptions(color_mode=ColorMode.ALWAYS))
        assert "\x1b" in fmt.to_colored_json(DOC)
        assert "\x1b" not in fmt.to_colored_json(DOC, mode=ColorMode.NEVER)

    def test_plain_output_is_pretty_json(self, formatter: ColoredFormatter) -> None:
        assert formatter.to_colored_json(DOC) == json.dumps(DOC, indent=2, ensure_ascii=False)

    def test_auto_variant_colors_for_terminal_stdout(
        self,
        formatter: ColoredFormatter,
        monkeypatch: pytest.MonkeyPatch,
        color_friendly_env: None,
    ) -> None:
        monkeypatch.setattr(sys, "stdout", TTYBuffer())
        assert "\x1b" in formatter.to_colored_json_auto(DOC)

    def test_auto_variant_plain_for_redirected_stdout(
        self, formatter: ColoredFormatter, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(sys, "stdout", io.StringIO())
        assert "\x1b" not in formatter.to_colored_json_auto(DOC)

    def test_invalid_value(self, formatter: ColoredFormatter) -> None:
        with pytest.raises(InvalidValueError):
            formatter.to_colored_json({"x": math.inf})


# ---------------------------------------------------------------------------
# write_colored_json
# ---------------------------------------------------------------------------


class TestWriteColoredJson:
    def test_auto_colors_terminal_sink(
        self, formatter: ColoredFormatter, color_friendly_env: None
    ) -> None:
        sink = TTYBuffer()
        formatter.write_colored_json(DOC, sink)
        assert "\x1b" in sink.getvalue()

    def test_auto_respects_no_color(
        self, formatter: ColoredFormatter, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        sink = TTYBuffer()
        formatter.write_colored_json(DOC, sink)
        assert "\x1b" not in sink.getvalue()

    def test_auto_plain_for_non_terminal(self, formatter: ColoredFormatter) -> None:
        sink = io.StringIO()
        formatter.write_colored_json(DOC, sink)
        assert sink.getvalue() == formatter.to_colored_json(DOC, mode=ColorMode.NEVER)

    def test_always_colors_files(self, formatter: ColoredFormatter) -> None:
        sink = io.BytesIO()
        formatter.write_colored_json(DOC, sink, mode=ColorMode.ALWAYS)
        expected = formatter.to_colored_json(DOC, mode=ColorMode.ALWAYS)
        assert sink.getvalue().decode("utf-8") == expected

    def test_never_on_terminal(self, formatter: ColoredFormatter, color_friendly_env: None) -> None:
        sink = TTYBuffer()
        formatter.write_colored_json(DOC, sink, mode=ColorMode.NEVER)
        assert "\x1b" not in sink.getvalue()

    def test_invalid_value_writes_nothing(self, formatter: ColoredFormatter) -> None:
        sink = RecordingBytes()
        with pytest.raises(InvalidValueError):
            formatter.write_colored_json({"ok": [1, 2], "bad": math.nan}, sink)
        assert sink.writes == []

    def test_sink_error_propagates(self, formatter: ColoredFormatter) -> None:
        class Broken:
            def write(self, data: bytes) -> int:
                raise BrokenPipeError("closed")

        with pytest.raises(BrokenPipeError):
            formatter.write_colored_json(DOC, Broken())

    def test_lone_surrogate_reaches_byte_sink_escaped(self) -> None:
        fmt = ColoredFormatter(options=RenderOptions(layout=Layout.COMPACT), buffer_size=0)
        value = json.loads('["ok","\\ud800"]')
        sink = io.BytesIO()
        fmt.write_colored_json(value, sink, mode=ColorMode.NEVER)
        assert sink.getvalue() == b'["ok","\\ud800"]'
        assert json.loads(sink.getvalue()) == value

    def test_large_document_streams_in_several_writes(self) -> None:
        fmt = ColoredFormatter(buffer_size=64)
        sink = RecordingBytes()
        doc = {f"key_{i}": list(range(10)) for i in range(20)}
        fmt.write_colored_json(doc, sink)
        assert len(sink.writes) > 1
        assert b"".join(sink.writes).decode() == fmt.to_colored_json(doc)


# ---------------------------------------------------------------------------
# Text entry points
# ---------------------------------------------------------------------------


class TestTextEntryPoints:
    def test_number_literals_kept(self, formatter: ColoredFormatter) -> None:
        text = '{"float": 3.14159260, "integer": 4398798674962568, "exp": 1E+2}'
        out = formatter.colorize_text(text, mode=ColorMode.NEVER)
        assert out == '{\n  "float": 3.14159260,\n  "integer": 4398798674962568,\n  "exp": 1E+2\n}'

    def test_bytes_input(self, formatter: ColoredFormatter) -> None:
        assert formatter.colorize_text(b'["a"]') == '[\n  "a"\n]'

    def test_parse_error_propagates(self, formatter: ColoredFormatter) -> None:
        with pytest.raises(json.JSONDecodeError):
            formatter.colorize_text('{"a": ')

    def test_nan_literal_rejected(self, formatter: ColoredFormatter) -> None:
        with pytest.raises(InvalidValueError, match="NaN"):
            formatter.colorize_text("[NaN]")

    def test_numbers_styled_as_numbers(self, formatter: ColoredFormatter) -> None:
        out = formatter.colorize_text("[1.50]", mode=ColorMode.ALWAYS)
        assert DEFAULT_THEME[TokenClass.NUMBER_VALUE].paint("1.50") in out

    def test_write_colorized_text(self, formatter: ColoredFormatter) -> None:
        sink = io.BytesIO()
        formatter.with_options(layout=Layout.COMPACT).write_colorized_text(
            '{ "b" : 1 , "a" : [ ] }', sink
        )
        assert sink.getvalue() == b'{"b":1,"a":[]}'


# ---------------------------------------------------------------------------
# render_node, logging, threads
# ---------------------------------------------------------------------------


class TestMisc:
    def test_render_node(self, formatter: ColoredFormatter) -> None:
        node = TreeBuilder().build([None])
        assert formatter.render_node(node, styled=False) == "[\n  null\n]"

    def test_resolution_logged_at_debug(
        self, formatter: ColoredFormatter, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="colored_json"):
            formatter.to_colored_json([], mode=ColorMode.ALWAYS)
        assert any("styled=True" in r.getMessage() for r in caplog.records)

    def test_shared_formatter_across_threads(self) -> None:
        fmt = ColoredFormatter(options=RenderOptions(color_mode=ColorMode.ALWAYS))
        docs = [{"i": i, "items": list(range(i))} for i in range(32)]
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(fmt.to_colored_json, docs))
        assert results == [fmt.to_colored_json(d) for d in docs]
