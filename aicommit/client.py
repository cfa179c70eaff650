"""Chat completion client for the Groq API."""
from typing import Optional, Sequence

import httpx
from pydantic import ValidationError

from .config import ConfigStore
from .exceptions import EmptyResponse, MissingCredential, TransportError, UpstreamError
from .models import CompletionRequest, CompletionResponse, Message

GROQ_CHAT_COMPLETIONS_URL = "https://api.groq.com/openai/v1/chat/completions"
DEFAULT_TIMEOUT = 30.0


class CompletionClient:
    """Sends one chat request and returns the first choice's text.

    There are no retries and no streaming: one request, one response.
    """

    def __init__(
        self,
        api_key: str,
        endpoint: str = GROQ_CHAT_COMPLETIONS_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        if not api_key:
            raise MissingCredential()
        self.api_key = api_key
        self.endpoint = endpoint
        self.http = httpx.Client(timeout=timeout, transport=transport)

    @classmethod
    def from_config(cls, store: ConfigStore, **kwargs) -> "CompletionClient":
        """Create a client using the API key from the configuration store."""
        return cls(store.get("API_KEY"), **kwargs)

    def complete(self, messages: Sequence[Message], model: str) -> str:
        """Request a completion for the conversation.

        Args:
            messages: The conversation, in order
            model: Model identifier understood by the endpoint

        Returns:
            str: Content of the first returned choice, unmodified

        Raises:
            UpstreamError: If the endpoint answers with a non-2xx status
            EmptyResponse: If the body is malformed or has no choices
            TransportError: If no response was received
        """
        request = CompletionRequest(model=model, messages=list(messages))
        try:
            response = self.http.post(
                self.endpoint,
                content=request.model_dump_json(),
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
            )
        except httpx.HTTPError as e:
            raise TransportError(f"request failed: {e}") from e

        if not response.is_success:
            raise UpstreamError(response.status_code, response.text)

        try:
            completion = CompletionResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise EmptyResponse(f"failed to parse completion response: {e}") from e

        if not completion.choices:
            raise EmptyResponse()
        return completion.choices[0].message.content

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "CompletionClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
