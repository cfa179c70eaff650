"""Core functionality for ai-commit."""
from typing import Callable, List, Optional

from rich.console import Console

from .client import CompletionClient
from .commit_message import CommitMessageGenerator, CommitMessageValidator
from .config import ConfigStore
from .exceptions import NoStagedChanges
from .models import FileStatus
from .observers import GitOperationObserver
from .prompter import Prompter
from .prompts import DEFAULT_MODEL
from .repository import Repository

ClientFactory = Callable[[ConfigStore], CompletionClient]


class GitCommitter:
    """Creates the commit and notifies observers of git operations."""

    def __init__(self, repository: Repository, no_verify: bool = False):
        self.repository = repository
        self.no_verify = no_verify
        self.observers: List[GitOperationObserver] = []

    def add_observer(self, observer: GitOperationObserver) -> None:
        """Add an observer to be notified of git operations."""
        self.observers.append(observer)

    def remove_observer(self, observer: GitOperationObserver) -> None:
        """Remove an observer from the notification list."""
        self.observers.remove(observer)

    def notify_changes_staged(self, files: List[FileStatus]) -> None:
        for observer in self.observers:
            observer.on_changes_staged(files)

    def notify_message_generated(self, message: str, model: str) -> None:
        for observer in self.observers:
            observer.on_message_generated(message, model)

    def commit(self, message: str) -> None:
        """Commit the staged changes with the message, verbatim."""
        self.repository.commit(message, no_verify=self.no_verify)
        for observer in self.observers:
            observer.on_commit_created(message)


class CommitWorkflow:
    """The generate flow: stage, diff, generate, confirm, commit.

    Every collaborator is passed in. The prompter supplies the user's
    answers and the client factory builds the completion client from the
    configuration store.
    """

    def __init__(
        self,
        repository: Repository,
        config_store: ConfigStore,
        prompter: Prompter,
        committer: Optional[GitCommitter] = None,
        console: Optional[Console] = None,
        model: str = DEFAULT_MODEL,
        client_factory: ClientFactory = CompletionClient.from_config,
        dry_run: bool = False,
    ):
        self.repository = repository
        self.config_store = config_store
        self.prompter = prompter
        self.committer = committer or GitCommitter(repository)
        self.console = console or Console()
        self.model = model or DEFAULT_MODEL
        self.client_factory = client_factory
        self.dry_run = dry_run
        self.validator = CommitMessageValidator()

    def collect_diff(self) -> str:
        """Make sure changes are staged and return their diff.

        Raises:
            NoStagedChanges: If the staged diff is empty
        """
        self.repository.assert_is_repository()

        staged_now = self.repository.ensure_staged(self.prompter, self.console)
        if staged_now:
            self.committer.notify_changes_staged(staged_now)

        staged_files = self.repository.list_staged_files()
        diff = self.repository.diff(staged_files)
        if not diff:
            raise NoStagedChanges()
        return diff

    def generate(self, diff: str) -> str:
        """Generate a commit message for the diff."""
        with self.client_factory(self.config_store) as client:
            generator = CommitMessageGenerator(
                client,
                commit_prompt=self.config_store.get("COMMIT_PROMPT"),
                model=self.model,
            )
            with self.console.status("Generating commit message..."):
                message = generator.generate_commit_message(diff)

        self.committer.notify_message_generated(message, generator.model)

        if generator.uses_default_prompt:
            is_valid, reason = self.validator.validate(message)
            if not is_valid:
                self.console.print(
                    f"Warning: {reason}", style="yellow", markup=False, highlight=False
                )
        return message

    def run(self) -> Optional[str]:
        """Run the whole flow.

        Returns:
            Optional[str]: The committed message, or None when nothing was
            committed (dry run or the user declined)
        """
        diff = self.collect_diff()
        message = self.generate(diff)

        self.console.print("Generated Commit Message:\n")
        self.console.print(message, markup=False, highlight=False, soft_wrap=True)
        self.console.print()

        if self.dry_run:
            self.console.print("[yellow]Dry run: no commit created.[/yellow]")
            return None

        if not self.prompter.confirm("Do you want to use this commit message?"):
            self.console.print("Commit aborted.")
            return None

        self.committer.commit(message)
        self.console.print("[green]Changes committed successfully.[/green]")
        return message
