"""Commit message validation."""
from typing import Sequence, Tuple

from ..prompts import COMMIT_TYPES
from .validation import create_validation_chain


class CommitMessageValidator:
    """Checks messages against the format requested by the default prompt."""

    def __init__(self, types: Sequence[str] = COMMIT_TYPES):
        self.validation_chain = create_validation_chain(types)

    def validate(self, message: str) -> Tuple[bool, str]:
        return self.validation_chain.handle(message)
