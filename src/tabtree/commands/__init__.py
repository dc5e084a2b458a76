"""tabtree commands."""

from tabtree.commands.base import CommandContext, SyncCommand
from tabtree.commands.render import (
    RenderCommand,
    RenderOptions,
    RenderResult,
    build_tree,
    handle_render_command,
    render_document,
)

__all__ = [
    # Base
    "SyncCommand",
    "CommandContext",
    # Render
    "RenderCommand",
    "RenderOptions",
    "RenderResult",
    "build_tree",
    "render_document",
    "handle_render_command",
]
