"""
Results reported by the feature demo.

Collects the status lines a switch produces so the CLI can print them after
the label table.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from rich.console import Console

from . import console as cs


class ResultLevel(Enum):
    """Result severity levels."""

    SUCCESS = "success"
    WARNING = "warning"


@dataclass
class ResultMessage:
    """Single status line with an optional explanation."""

    level: ResultLevel
    message: str
    details: Optional[str] = None


@dataclass
class OperationResult:
    """Messages from one operation, plus the data it produced."""

    messages: List[ResultMessage] = field(default_factory=list)
    data: Optional[Any] = None

    def add_success(self, message: str, details: Optional[str] = None):
        self.messages.append(ResultMessage(ResultLevel.SUCCESS, message, details))

    def add_warning(self, message: str, details: Optional[str] = None):
        self.messages.append(ResultMessage(ResultLevel.WARNING, message, details))

    def has_warnings(self) -> bool:
        return any(m.level == ResultLevel.WARNING for m in self.messages)

    def emit_all(self, target: Optional[Console] = None):
        """Emit all messages as status lines."""
        for msg in self.messages:
            indicator = cs.StatusIndicator(msg.level.value, target=target)
            indicator.add_message(msg.message)
            if msg.details:
                indicator.with_explanation(msg.details)
            indicator.emit()
