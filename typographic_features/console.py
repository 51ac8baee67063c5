"""
Console status output.

StatusIndicator builds one styled status line (plus optional explanation)
and prints it through a shared rich console.
"""

from typing import List, Optional

from rich.console import Console
from rich.text import Text

console = Console(highlight=False)

INDICATOR_STYLES = {
    "info": ("INFO", "cyan"),
    "success": ("DONE", "green"),
    "warning": ("WARN", "yellow"),
    "error": ("FAIL", "bold red"),
}


class StatusIndicator:
    """Single status line with a labelled prefix."""

    def __init__(self, kind: str = "info", target: Optional[Console] = None):
        if kind not in INDICATOR_STYLES:
            raise ValueError(f"Unknown status indicator: {kind}")
        self.kind = kind
        self.console = target or console
        self.messages: List[str] = []
        self.explanation: Optional[str] = None

    def add_message(self, message: str) -> "StatusIndicator":
        self.messages.append(message)
        return self

    def with_explanation(self, explanation: str) -> "StatusIndicator":
        self.explanation = explanation
        return self

    def render(self) -> Text:
        label, style = INDICATOR_STYLES[self.kind]
        text = Text()
        text.append(f"[{label}] ", style=style)
        text.append(" ".join(self.messages))
        if self.explanation:
            text.append(f"\n  → {self.explanation}", style="dim")
        return text

    def emit(self):
        self.console.print(self.render())


def emit(message: str = ""):
    console.print(message)
