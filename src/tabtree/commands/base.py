"""Base command infrastructure."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

from tabtree.config import TabTreeConfig

TResult = TypeVar("TResult")


@dataclass
class CommandContext:
    """Context passed to all commands.

    Attributes:
        config: The loaded table document.
    """

    config: TabTreeConfig


class SyncCommand(ABC, Generic[TResult]):
    """Base class for synchronous commands.

    Commands encapsulate the logic for a specific operation.
    They receive a context and return a result.
    """

    def __init__(self, context: CommandContext) -> None:
        """Initialize command.

        Args:
            context: Command context.
        """
        self.context = context
        self.config = context.config

    @abstractmethod
    def execute(self) -> TResult:
        """Execute the command synchronously.

        Returns:
            Command-specific result.
        """
        ...
