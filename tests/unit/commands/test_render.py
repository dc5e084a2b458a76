"""Tests for render command."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
import typer

from tabtree.commands.base import CommandContext
from tabtree.commands.render import (
    RenderCommand,
    RenderOptions,
    build_tree,
    handle_render_command,
    render_document,
)
from tabtree.config import SectionConfig, SortConfig, load_config, parse_config
from tabtree.errors import HeterogeneousColumnError, SchemaConflictError

FIRST_SECTION = "README.md |  40\nsrc       |   3\nsrc/b.py  |   7\nsrc/a.py  | 120\n"


class TestBuildTree:
    """Tests for build_tree."""

    def test_derived_layout(self) -> None:
        section = SectionConfig.model_validate(
            {"rows": [{"values": ["a", 1]}, {"values": ["bb", 22, "dropped"]}]}
        )
        root, count = build_tree(section)

        assert count == 2
        assert root.schema is not None
        assert root.schema.count == 2
        assert root.render() == " a  1\nbb 22\n"

    def test_configured_layout(self) -> None:
        section = SectionConfig.model_validate(
            {"columns": [{"width": 4}, {"left_align": True}], "rows": [{"values": ["a", "b"]}]}
        )
        root, _ = build_tree(section)
        assert root.render() == "   a b\n"

    def test_nested_rows_share_schema(self) -> None:
        section = SectionConfig.model_validate(
            {"rows": [{"values": ["a"], "children": [{"values": ["long"]}]}]}
        )
        root, count = build_tree(section)

        assert count == 2
        child = root.children[0]
        assert child.children[0].schema is root.schema
        assert root.render() == "   a\nlong\n"

    def test_sort_override(self) -> None:
        section = SectionConfig.model_validate(
            {"sort": {"column": 0}, "rows": [{"values": [1]}, {"values": [2]}]}
        )
        root, _ = build_tree(section, SortConfig(column=0, descending=True))
        assert root.render() == "2\n1\n"

    def test_sort_errors_propagate(self) -> None:
        section = SectionConfig.model_validate(
            {"sort": {"column": 0}, "rows": [{"values": [1]}, {"values": ["x"]}]}
        )
        with pytest.raises(HeterogeneousColumnError):
            build_tree(section)


class TestRenderCommand:
    """Tests for RenderCommand."""

    def test_renders_document(self, document_path: Path) -> None:
        result = render_document(load_config(document_path))

        assert result.sections == 2
        assert result.rows == 6
        assert result.output == FIRST_SECTION + "2020-01-02 |  x\n2019-05-06 | yy\n"

    def test_separator_override(self, document_path: Path) -> None:
        result = render_document(load_config(document_path), column_separator=" ")
        assert result.output.startswith("README.md  40\n")

    def test_terminator_override(self) -> None:
        config = parse_config({"sections": [{"rows": [{"values": ["a"]}, {"values": ["b"]}]}]})
        assert render_document(config, line_terminator=";").output == "a;b;"

    def test_sort_applies_to_every_section(self, document_path: Path) -> None:
        result = render_document(load_config(document_path), sort_column=0)
        assert result.output == FIRST_SECTION + "2019-05-06 | yy\n2020-01-02 |  x\n"

    def test_command_class(self, document_path: Path) -> None:
        context = CommandContext(config=load_config(document_path))
        cmd = RenderCommand(context, RenderOptions(sort_column=1, descending=True))

        assert cmd.get_sort() == SortConfig(column=1, descending=True)

        result = cmd.execute()
        assert result.output.startswith("README.md |  40\nsrc       |   3\n")
        assert result.output.endswith("2019-05-06 | yy\n2020-01-02 |  x\n")

    def test_default_options(self) -> None:
        cmd = RenderCommand(CommandContext(config=parse_config({})))
        assert cmd.get_sort() is None
        assert cmd.execute().output == ""


class TestHandleRenderCommand:
    """Tests for handle_render_command."""

    def test_writes_output(self, document_path: Path) -> None:
        console = MagicMock()
        error_console = MagicMock()

        handle_render_command(document_path, console, error_console)

        console.file.write.assert_called_once()
        assert console.file.write.call_args[0][0].startswith(FIRST_SECTION)
        error_console.print.assert_not_called()

    def test_terminator_override(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.yaml"
        path.write_text("sections:\n  - rows:\n      - values: [a]\n      - values: [b]\n")
        console = MagicMock()

        handle_render_command(path, console, MagicMock(), line_terminator="|")

        console.file.write.assert_called_once_with("a|b|")

    def test_reports_errors(self, tmp_path: Path) -> None:
        console = MagicMock()
        error_console = MagicMock()

        with pytest.raises(typer.Exit) as exc_info:
            handle_render_command(tmp_path / "missing.yaml", console, error_console)

        assert exc_info.value.exit_code == 1
        assert "Document not found" in error_console.print.call_args[0][0]
        console.file.write.assert_not_called()

    def test_schema_errors_reported(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        def conflict(*args: object, **kwargs: object) -> None:
            raise SchemaConflictError()

        monkeypatch.setattr("tabtree.commands.render.render_document", conflict)
        path = tmp_path / "doc.yaml"
        path.write_text("sections: []\n")
        error_console = MagicMock()

        with pytest.raises(typer.Exit):
            handle_render_command(path, MagicMock(), error_console)

        assert "same schema" in error_console.print.call_args[0][0]
