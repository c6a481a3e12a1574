"""Unit tests for the Processor pipeline."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import io

import pytest

from mdliteral.ast import Document, LiteralChar, Paragraph, Text, extract_nodes
from mdliteral.options import MarkdownRendererOptions
from mdliteral.pipeline import Processor
from mdliteral.renderers import NodeHandler, ToMarkdownExtension
from mdliteral.transforms import disable_text_escape


@pytest.mark.unit
class TestProcessor:
    """Test plugin application and the parse/run/stringify stages."""

    def test_without_plugins_escapes(self):
        assert Processor().process("foo_bar") == "foo\\_bar"

    def test_with_plugin_keeps_literals(self):
        assert Processor().use(disable_text_escape).process("foo_bar [x]") == "foo_bar [x]"

    def test_use_returns_processor(self):
        processor = Processor()
        assert processor.use(disable_text_escape) is processor

    def test_use_passes_options(self):
        received = []

        def plugin(processor, options):
            received.append((processor, options))

        processor = Processor().use(plugin, {"key": "value"})
        assert received == [(processor, {"key": "value"})]
        assert processor.transforms == []

    def test_transforms_run_in_order(self):
        calls = []
        processor = (
            Processor()
            .use(lambda processor, options: lambda tree: calls.append("first"))
            .use(lambda processor, options: lambda tree: calls.append("second"))
        )

        processor.run(Document())

        assert calls == ["first", "second"]

    def test_run_mutates_in_place(self):
        processor = Processor().use(disable_text_escape)
        tree = processor.parse("a_b")

        assert processor.run(tree) is tree
        assert [node.content for node in extract_nodes(tree, LiteralChar)] == ["_"]

    def test_transform_errors_propagate(self):
        def failing(processor, options):
            def transform(tree):
                raise RuntimeError("boom")

            return transform

        with pytest.raises(RuntimeError, match="boom"):
            Processor().use(failing).process("x")

    def test_stringify_uses_extensions(self):
        processor = Processor()
        processor.to_markdown_extensions.append(
            ToMarkdownExtension(handlers={"text": NodeHandler(lambda node, parent, state, info: "!")})
        )
        assert processor.stringify(Document(children=[Paragraph(content=[Text(content="x")])])) == "!"

    def test_instances_are_independent(self):
        with_plugin = Processor().use(disable_text_escape)
        without_plugin = Processor()

        assert with_plugin.process("a_b") == "a_b"
        assert without_plugin.process("a_b") == "a\\_b"
        assert without_plugin.to_markdown_extensions == []

    def test_renderer_options(self):
        processor = Processor(renderer_options=MarkdownRendererOptions(resource_link=True))
        assert processor.process("<http://example.com>") == "[http://example.com](http://example.com)"

    def test_process_to_stream(self):
        output = io.StringIO()
        Processor().use(disable_text_escape).process_to("A & B", output)
        assert output.getvalue() == "A & B"

    def test_process_path(self, tmp_path):
        source = tmp_path / "in.md"
        source.write_bytes("a_b & c\n".encode("utf-8"))
        assert Processor().use(disable_text_escape).process(source) == "a_b & c"
