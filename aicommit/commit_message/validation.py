"""Commit message format checks using Chain of Responsibility pattern.

The checks describe the single-line format requested by the default prompt.
They are advisory: a failing check is reported, the message is never changed.
"""
import re
from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple

from ..prompts import COMMIT_TYPES


class ValidationHandler(ABC):
    """Abstract base class for validation handlers."""

    def __init__(self, next_handler: Optional['ValidationHandler'] = None):
        self.next_handler = next_handler

    def handle(self, message: str) -> Tuple[bool, str]:
        """Handle validation and pass to next handler if valid."""
        result = self.validate(message)
        if not result[0] or not self.next_handler:
            return result
        return self.next_handler.handle(message)

    @abstractmethod
    def validate(self, message: str) -> Tuple[bool, str]:
        """Validate the commit message."""
        pass


class EmptyMessageHandler(ValidationHandler):
    """Validates that the message is not empty."""

    def validate(self, message: str) -> Tuple[bool, str]:
        if not message.strip():
            return False, "Empty commit message"
        return True, ""


class SingleLineHandler(ValidationHandler):
    """Validates that the message is a single line."""

    def validate(self, message: str) -> Tuple[bool, str]:
        if len(message.strip().splitlines()) > 1:
            return False, "Commit message should be a single line"
        return True, ""


class PreambleHandler(ValidationHandler):
    """Rejects messages that introduce themselves instead of being the message."""

    PREAMBLE = re.compile(r"^\s*(here('s| is)|sure|certainly)\b", re.IGNORECASE)

    def validate(self, message: str) -> Tuple[bool, str]:
        if self.PREAMBLE.match(message):
            return False, "Commit message starts with an explanatory preamble"
        return True, ""


class TypeTagHandler(ValidationHandler):
    """Validates the leading [Type] tag."""

    def __init__(
        self,
        types: Sequence[str] = COMMIT_TYPES,
        next_handler: Optional[ValidationHandler] = None,
    ):
        super().__init__(next_handler)
        self.types = list(types)
        self.pattern = re.compile(
            r"^\[(%s)\] \S" % "|".join(re.escape(t) for t in self.types)
        )

    def validate(self, message: str) -> Tuple[bool, str]:
        if not self.pattern.match(message.strip()):
            tags = ", ".join(f"[{t}]" for t in self.types)
            return False, f"Commit message should start with one of {tags}"
        return True, ""


def create_validation_chain(types: Sequence[str] = COMMIT_TYPES) -> ValidationHandler:
    """Create the default validation chain."""
    type_tag = TypeTagHandler(types)
    preamble = PreambleHandler(type_tag)
    single_line = SingleLineHandler(preamble)
    empty_message = EmptyMessageHandler(single_line)

    return empty_message
