"""Commit message generation from a staged diff."""
from typing import List

from ..client import CompletionClient
from ..models import Message
from ..prompts import DEFAULT_COMMIT_PROMPT, DEFAULT_MODEL, DIFF_MESSAGE_TEMPLATE


class CommitMessageGenerator:
    """Builds the conversation for a diff and asks the client to complete it."""

    def __init__(
        self,
        client: CompletionClient,
        commit_prompt: str = "",
        model: str = DEFAULT_MODEL,
    ):
        self.client = client
        self.commit_prompt = commit_prompt or DEFAULT_COMMIT_PROMPT
        self.model = model or DEFAULT_MODEL

    @property
    def uses_default_prompt(self) -> bool:
        return self.commit_prompt == DEFAULT_COMMIT_PROMPT

    def build_messages(self, diff: str) -> List[Message]:
        return [
            Message(role="system", content=self.commit_prompt),
            Message(role="user", content=DIFF_MESSAGE_TEMPLATE.format(diff=diff)),
        ]

    def generate_commit_message(self, diff: str) -> str:
        """Return the generated message exactly as the model produced it."""
        return self.client.complete(self.build_messages(diff), self.model)
