"""Git repository adapter.

All version-control access goes through a GitRunner, which runs one git
command and returns its stdout. Repository holds the parsing and the staging
flow on top of it, so the parsing can be exercised with canned output.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from git import Git
from git.exc import CommandError as GitPythonCommandError
from rich.console import Console

from .exceptions import CommandError, NoChanges, NotARepository, NothingStaged, StageError
from .models import FileState, FileStatus
from .prompter import Prompter

STATUS_LABELS = {
    "M": FileState.MODIFIED,
    "A": FileState.ADDED,
    "D": FileState.DELETED,
    "R": FileState.RENAMED,
    "C": FileState.COPIED,
    "U": FileState.UNMERGED,
    "??": FileState.UNTRACKED,
}


class GitRunner(ABC):
    """Runs a single git command."""

    @abstractmethod
    def run(self, *args: str) -> str:
        """Run `git <args>` and return its stdout.

        Raises:
            CommandError: If git cannot be started or exits non-zero
        """
        pass


class SubprocessGitRunner(GitRunner):
    """Runs git as a subprocess through GitPython's command wrapper."""

    def __init__(self, working_dir: Union[str, Path, None] = None):
        self.working_dir = str(working_dir) if working_dir is not None else None
        self.git = Git(self.working_dir)

    def run(self, *args: str) -> str:
        try:
            output = self.git.execute(["git", *args], stdout_as_string=False)
        except GitPythonCommandError as e:
            raise CommandError(args, str(e)) from e
        # invalid UTF-8 in file contents becomes U+FFFD
        return output.decode("utf-8", errors="replace")


class CannedGitRunner(GitRunner):
    """Runner answering from canned output (used in testing).

    Args:
        outputs: stdout keyed by the git argument tuple; commands not listed
            produce empty output
        failures: argument tuples that raise CommandError
    """

    def __init__(
        self,
        outputs: Optional[Dict[Tuple[str, ...], str]] = None,
        failures: Iterable[Tuple[str, ...]] = (),
    ):
        self.outputs = dict(outputs or {})
        self.failures = set(failures)
        self.calls: List[Tuple[str, ...]] = []

    def run(self, *args: str) -> str:
        self.calls.append(args)
        if args in self.failures:
            raise CommandError(args, "canned failure")
        return self.outputs.get(args, "")


def translate_status(code: str) -> FileState:
    """Map a porcelain status code to its label."""
    return STATUS_LABELS.get(code, FileState.UNKNOWN)


def parse_status_line(line: str) -> Optional[FileStatus]:
    """Parse one `git status --porcelain` line.

    The first two characters hold the status code and the path starts at the
    fourth. Lines too short to hold both are ignored.
    """
    if len(line) < 4:
        return None
    return FileStatus(path=line[3:].strip(), status=translate_status(line[:2].strip()))


class Repository:
    """Version-control operations needed to generate and create a commit."""

    def __init__(self, runner: GitRunner):
        self.runner = runner

    @classmethod
    def at(cls, path: Union[str, Path]) -> "Repository":
        """Create a repository backed by the real git binary."""
        return cls(SubprocessGitRunner(path))

    def assert_is_repository(self) -> None:
        try:
            output = self.runner.run("rev-parse", "--is-inside-work-tree")
        except CommandError as e:
            raise NotARepository() from e
        if output.strip() != "true":
            raise NotARepository()

    def list_staged_files(self) -> List[str]:
        output = self.runner.run("diff", "--name-only", "--cached")
        return [line for line in output.split("\n") if line]

    def list_changed_files(self) -> List[FileStatus]:
        output = self.runner.run("status", "--porcelain")
        changed_files = []
        for line in output.splitlines():
            file_status = parse_status_line(line)
            if file_status is not None:
                changed_files.append(file_status)
        return changed_files

    def diff(self, paths: Sequence[str]) -> str:
        """Return the staged diff of the given paths.

        Paths are relative to the top of the work tree, as listed by
        list_staged_files, whatever directory git runs in.
        """
        pathspecs = [f":(top,literal){path}" for path in paths]
        return self.runner.run("diff", "--staged", "--", *pathspecs)

    def stage_all(self) -> None:
        try:
            self.runner.run("add", ".")
        except CommandError as e:
            raise StageError(e) from e

    def commit(self, message: str, no_verify: bool = False) -> None:
        args = ["commit", "-m", message]
        if no_verify:
            args.append("--no-verify")
        self.runner.run(*args)

    def ensure_staged(self, prompter: Prompter, console: Optional[Console] = None) -> List[FileStatus]:
        """Make sure something is staged, offering to stage everything.

        Args:
            prompter: Source of the user's yes/no answer
            console: Console used to list the changed files

        Returns:
            List[FileStatus]: The files staged by this call, empty when the
            index already had staged changes

        Raises:
            NoChanges: If the working tree has no changes at all
            NothingStaged: If the user declines to stage the changes
            StageError: If staging fails
        """
        if self.list_staged_files():
            return []

        changed_files = self.list_changed_files()
        if not changed_files:
            raise NoChanges()

        console = console or Console()
        console.print("The following files have changes:")
        for file in changed_files:
            console.print(f"{file.status.value}: {file.path}", markup=False, highlight=False)

        if not prompter.confirm("Do you want to stage all these changes?"):
            raise NothingStaged()

        self.stage_all()
        console.print("Changes staged successfully.")
        return changed_files
