"""
OpenAI chat-completions backend.
"""
import logging
import os
from typing import Any, Dict, List, Optional

import openai

from cag.errors import SessionUnavailable
from cag.interfaces import IModelProvider, IModelSession

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"


class OpenAIModelSession(IModelSession):
    """
    A chat conversation on an OpenAI model.

    The session keeps its own message history, so successive prompts on the
    same session see earlier turns.
    """

    def __init__(
        self,
        client: Any,
        model: str,
        temperature: float = 0.0,
        max_tokens: Optional[int] = None,
        system_prompt: Optional[str] = None
    ):
        self._client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.messages: List[Dict[str, str]] = []
        if system_prompt:
            self.messages.append({"role": "system", "content": system_prompt})
        self.released = False

    async def send(self, prompt: str) -> str:
        if self.released:
            raise SessionUnavailable("Cannot send on a released session")

        self.messages.append({"role": "user", "content": prompt})
        params: Dict[str, Any] = {
            "model": self.model,
            "messages": list(self.messages),
            "temperature": self.temperature,
        }
        if self.max_tokens:
            params["max_tokens"] = self.max_tokens

        response = await self._client.chat.completions.create(**params)
        content = response.choices[0].message.content or ""
        self.messages.append({"role": "assistant", "content": content})
        return content

    async def release(self) -> None:
        if self.released:
            return
        self.released = True
        self.messages = []


class OpenAIModelProvider(IModelProvider):
    """Creates OpenAIModelSession objects that share one async client."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.0,
        client: Any = None
    ):
        """
        Initialize the provider.

        Args:
            api_key: OpenAI API key. If not provided, OPENAI_API_KEY is used when a session is created.
            model: Default model for new sessions
            temperature: Default sampling temperature for new sessions
            client: Preconfigured AsyncOpenAI-compatible client
        """
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            api_key = self.api_key or os.environ.get("OPENAI_API_KEY")
            if not api_key:
                raise SessionUnavailable(
                    "OpenAI API key not found. Please set OPENAI_API_KEY in your .env file"
                )
            self._client = openai.AsyncOpenAI(api_key=api_key)
        return self._client

    async def create(self, options: Optional[Dict[str, Any]] = None) -> OpenAIModelSession:
        options = options or {}
        session = OpenAIModelSession(
            client=self._get_client(),
            model=options.get("model", self.model),
            temperature=options.get("temperature", self.temperature),
            max_tokens=options.get("max_tokens"),
            system_prompt=options.get("system_prompt")
        )
        logger.debug(f"Created OpenAI session for model {session.model}")
        return session
