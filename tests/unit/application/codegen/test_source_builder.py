"""Tests for application/codegen/source_builder.py."""

import pytest

from injectgen.application.codegen.source_builder import SourceBuilder


class TestSourceBuilderLines:
    """Tests for line composition."""

    def test_single_line(self) -> None:
        assert SourceBuilder().line("x = 1").render() == "x = 1\n"

    def test_chaining(self) -> None:
        text = SourceBuilder().line("x = 1").blank().line("y = 2").render()
        assert text == "x = 1\n\ny = 2\n"

    def test_lines(self) -> None:
        assert SourceBuilder().lines(["a()", "b()"]).render() == "a()\nb()\n"

    def test_multiline_text_shifted_to_depth(self) -> None:
        builder = SourceBuilder()
        with builder.block("def f():"):
            builder.line("if x:\n    y()")
        assert builder.render() == "def f():\n    if x:\n        y()\n"

    def test_trailing_whitespace_stripped(self) -> None:
        assert SourceBuilder().line("x = 1   ").render() == "x = 1\n"

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_line_raises(self, text: str) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            SourceBuilder().line(text)

    def test_trailing_blanks_collapse(self) -> None:
        assert SourceBuilder().line("x = 1").blank(3).render() == "x = 1\n"


class TestSourceBuilderBlocks:
    """Tests for indented blocks."""

    def test_nested_blocks(self) -> None:
        builder = SourceBuilder()
        with builder.block("class Widget:"):
            assert builder.depth == 1
            with builder.block("def __init__(self, name: str) -> None:"):
                assert builder.depth == 2
                builder.line("self.name = name")
        assert builder.depth == 0
        assert builder.render() == (
            "class Widget:\n"
            "    def __init__(self, name: str) -> None:\n"
            "        self.name = name\n"
        )

    def test_empty_block_gets_pass(self) -> None:
        builder = SourceBuilder()
        with builder.block("class Empty:"):
            pass
        assert builder.render() == "class Empty:\n    pass\n"

    def test_block_with_only_blank_lines_gets_pass(self) -> None:
        builder = SourceBuilder()
        with builder.block("class Empty:"):
            builder.blank()
        assert "    pass\n" in builder.render()

    def test_custom_indent(self) -> None:
        builder = SourceBuilder(indent_width=2)
        with builder.block("if x:"):
            builder.line("y()")
        assert builder.render() == "if x:\n  y()\n"

    def test_header_without_colon_raises(self) -> None:
        with pytest.raises(ValueError, match="must end with ':'"):
            with SourceBuilder().block("class Widget"):
                pass

    def test_depth_restored_after_exception(self) -> None:
        builder = SourceBuilder()
        with pytest.raises(KeyError):
            with builder.block("if x:"):
                raise KeyError("boom")
        assert builder.depth == 0

    def test_render_with_open_block_raises(self) -> None:
        builder = SourceBuilder()
        with builder.block("if x:"):
            with pytest.raises(RuntimeError, match="open block"):
                builder.render()

    def test_indent_width_validated(self) -> None:
        with pytest.raises(ValueError, match="indent_width"):
            SourceBuilder(indent_width=0)
