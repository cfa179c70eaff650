"""Commit message generation package."""

from .generator import CommitMessageGenerator
from .validator import CommitMessageValidator

__all__ = [
    'CommitMessageGenerator',
    'CommitMessageValidator',
]
