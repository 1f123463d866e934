"""
Console Output
Rich rendering of console text with a plain-text copy
"""

from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.errors import MarkupError
from rich.text import Text

from utils.logger import get_logger


class ConsoleOutput:
    """
    Append-only output of the console.

    Text may carry Rich console markup such as ``[b]bold[/b]`` or
    ``[red]error[/red]``. It is rendered to a Rich Console, and the markup
    is stripped for the plain-text log kept in memory and, if configured,
    appended to a file. Text whose markup does not parse is written literally.
    """

    def __init__(self, console: Optional[Console] = None, log_file: Optional[str] = None):
        self.logger = get_logger("Output")
        self.console = console or Console(highlight=False)
        self.log_path = Path(log_file) if log_file else None
        self._chunks: List[str] = []

    @staticmethod
    def to_text(markup: str) -> Text:
        """Parse markup, falling back to literal text when it is malformed."""
        try:
            return Text.from_markup(markup)
        except MarkupError:
            return Text(markup)

    def write(self, text: str) -> None:
        """Write text without a line break."""
        rendered = self.to_text(text)
        self.console.print(rendered, end="")
        self._append(rendered.plain)

    def write_line(self, text: str = "") -> None:
        """Write text followed by a line break."""
        rendered = self.to_text(text)
        self.console.print(rendered)
        self._append(rendered.plain + "\n")

    def clear(self) -> None:
        """Clear the visible output. The log file is kept."""
        self._chunks.clear()
        if self.console.is_terminal:
            self.console.clear()

    @property
    def plain_text(self) -> str:
        """Everything written since the last clear, without markup."""
        return "".join(self._chunks)

    def lines(self) -> List[str]:
        """Plain-text lines written since the last clear."""
        return self.plain_text.splitlines()

    def _append(self, plain: str) -> None:
        self._chunks.append(plain)
        if self.log_path is None:
            return
        try:
            with self.log_path.open("a", encoding="utf-8") as handle:
                handle.write(plain)
        except OSError as e:
            self.logger.error(f"Cannot write console log {self.log_path}: {e}")
            self.log_path = None
