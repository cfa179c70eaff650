"""Observer pattern for git operations."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from rich.console import Console
from rich.markup import escape

from .models import FileStatus


class GitOperationObserver(ABC):
    """Abstract base class for git operation observers."""

    @abstractmethod
    def on_changes_staged(self, files: List[FileStatus]) -> None:
        """Called when changes are staged on the user's behalf."""
        pass

    @abstractmethod
    def on_message_generated(self, message: str, model: str) -> None:
        """Called when a commit message has been generated."""
        pass

    @abstractmethod
    def on_commit_created(self, message: str) -> None:
        """Called when a commit is created."""
        pass


class ConsoleLogObserver(GitOperationObserver):
    """Observer that logs git operations to the console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def on_changes_staged(self, files: List[FileStatus]) -> None:
        self.console.print(f"[blue]Staged {len(files)} file(s)[/blue]")

    def on_message_generated(self, message: str, model: str) -> None:
        self.console.print(f"[dim]Generated with {escape(model)}[/dim]")

    def on_commit_created(self, message: str) -> None:
        self.console.print(f"[green]Created commit: {escape(message.strip())}[/green]")


class FileLogObserver(GitOperationObserver):
    """Observer that logs git operations to a file."""

    def __init__(self, log_file: Union[str, Path]):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a", encoding="utf-8") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_changes_staged(self, files: List[FileStatus]) -> None:
        paths = ", ".join(file.path for file in files)
        self._log(f"Staged {len(files)} file(s): {paths}")

    def on_message_generated(self, message: str, model: str) -> None:
        self._log(f"Generated message with {model}: {message.strip()}")

    def on_commit_created(self, message: str) -> None:
        self._log(f"Created commit: {message.strip()}")
