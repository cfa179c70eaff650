"""Yes/no prompts used by the interactive flows."""
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from rich.console import Console


class Prompter(ABC):
    """Asks the user a yes/no question."""

    @abstractmethod
    def confirm(self, question: str) -> bool:
        """Return True only for an affirmative answer."""
        pass


class ConsolePrompter(Prompter):
    """Prompter reading answers from the terminal.

    Only "y" or "Y" counts as yes; any other answer, including end of input,
    is no.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def confirm(self, question: str) -> bool:
        try:
            response = self.console.input(f"{question} (y/n): ", markup=False)
        except EOFError:
            return False
        return response.strip().lower() == "y"


class ScriptedPrompter(Prompter):
    """Prompter answering from a fixed list of responses (used in testing)."""

    def __init__(self, responses: Iterable[str]):
        self.responses = list(responses)
        self.questions: List[str] = []

    def confirm(self, question: str) -> bool:
        self.questions.append(question)
        if not self.responses:
            return False
        return self.responses.pop(0).strip().lower() == "y"
