"""Shared models for ai-commit."""
from dataclasses import dataclass
from enum import Enum
from typing import List, Literal

from pydantic import BaseModel, Field


class FileState(str, Enum):
    MODIFIED = "Modified"
    ADDED = "Added"
    DELETED = "Deleted"
    RENAMED = "Renamed"
    COPIED = "Copied"
    UNMERGED = "Updated but unmerged"
    UNTRACKED = "Untracked"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class FileStatus:
    path: str
    status: FileState


class Message(BaseModel):
    role: Literal["system", "user"]
    content: str


class CompletionRequest(BaseModel):
    model: str
    messages: List[Message]


class ChoiceMessage(BaseModel):
    content: str


class Choice(BaseModel):
    message: ChoiceMessage


class CompletionResponse(BaseModel):
    choices: List[Choice] = Field(description="Generated choices, only the first is used")
