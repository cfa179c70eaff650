"""Errors raised by ai-commit.

Every failure is terminal for the current invocation. Errors are raised where
they are detected and reported once by the CLI.
"""
from typing import Sequence


class AICommitError(Exception):
    """Base class for all ai-commit errors."""


class NotARepository(AICommitError):
    def __init__(self, message: str = "not a Git repository"):
        super().__init__(message)


class CommandError(AICommitError):
    """A git subprocess could not be run or exited non-zero."""

    def __init__(self, args: Sequence[str], detail: str = ""):
        self.command = list(args)
        self.detail = detail.strip()
        message = f"git command failed: git {' '.join(self.command)}"
        if self.detail:
            message += f"\n{self.detail}"
        super().__init__(message)


class NoChanges(AICommitError):
    def __init__(self, message: str = "no changes detected"):
        super().__init__(message)


class NothingStaged(AICommitError):
    def __init__(self, message: str = "no staged files"):
        super().__init__(message)


class StageError(AICommitError):
    def __init__(self, cause: CommandError):
        self.cause = cause
        super().__init__(f"error staging files: {cause}")


class UnknownKey(AICommitError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown config key: {key}")


class ConfigError(AICommitError):
    """The configuration file exists but cannot be read, parsed or written."""


class MissingCredential(AICommitError):
    def __init__(self, message: str = "API_KEY not set. Run: ai-commit setConfig --key API_KEY --value <key>"):
        super().__init__(message)


class UpstreamError(AICommitError):
    """The completion endpoint answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"unexpected status code: {status_code}")


class EmptyResponse(AICommitError):
    def __init__(self, message: str = "no completion choices returned"):
        super().__init__(message)


class TransportError(AICommitError):
    """The completion request never produced an HTTP response."""


class NoStagedChanges(AICommitError):
    def __init__(
        self,
        message: str = (
            "No changes detected in the staged files. "
            "Please make some changes before generating a commit message."
        ),
    ):
        super().__init__(message)


class UnknownCommand(AICommitError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown command: {name}")
