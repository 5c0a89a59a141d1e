"""
Replicate backend for Llama, Mistral and other hosted models.
"""
import logging
import os
from typing import Any, Dict, Optional

import replicate

from cag.errors import SessionUnavailable
from cag.interfaces import IModelProvider, IModelSession

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "llama3:8b"

# Model mappings for easy reference
MODEL_MAPPINGS = {
    "mistral:instruct": "mistralai/mistral-7b-instruct-v0.2",
    "llama3:8b": "meta/meta-llama-3-8b-instruct",
    "llama3:70b": "meta/meta-llama-3-70b-instruct",
}

# Default system prompts for different model families
DEFAULT_SYSTEM_PROMPTS = {
    "llama3": "You are a helpful assistant that works through long documents one part at a time.",
    "mistral": "You are a helpful assistant.",
}


def get_model_id(model_name: str) -> str:
    """Map a short model name to its Replicate model ID, passing unknown names through."""
    return MODEL_MAPPINGS.get(model_name, model_name)


def get_model_family(model_id: str) -> str:
    """Determine the model family (e.g. "llama3", "mistral") from a model ID."""
    model_id_lower = model_id.lower()
    if "llama-3" in model_id_lower or "llama3" in model_id_lower:
        return "llama3"
    elif "mistral" in model_id_lower:
        return "mistral"
    return "generic"


async def _collect_output(output: Any) -> str:
    # Language models on Replicate stream their output as a sequence of strings
    if output is None:
        return ""
    if isinstance(output, str):
        return output
    if hasattr(output, "__aiter__"):
        return "".join([str(piece) async for piece in output if piece])
    return "".join(str(piece) for piece in output if piece)


class ReplicateModelSession(IModelSession):
    """A single-prompt session on a Replicate-hosted model."""

    def __init__(
        self,
        client: Any,
        model: str,
        temperature: float = 0.0,
        max_tokens: Optional[int] = None,
        system_prompt: Optional[str] = None
    ):
        self._client = client
        self.model_id = get_model_id(model)
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.system_prompt = system_prompt or DEFAULT_SYSTEM_PROMPTS.get(
            get_model_family(self.model_id), "You are a helpful assistant."
        )
        self.released = False

    async def send(self, prompt: str) -> str:
        if self.released:
            raise SessionUnavailable("Cannot send on a released session")

        input_params: Dict[str, Any] = {
            "prompt": prompt,
            "system_prompt": self.system_prompt,
            # Replicate rejects a temperature of exactly zero on most LLMs
            "temperature": max(self.temperature, 0.01),
        }
        if self.max_tokens:
            input_params["max_new_tokens"] = self.max_tokens

        output = await self._client.async_run(self.model_id, input=input_params)
        return await _collect_output(output)

    async def release(self) -> None:
        self.released = True


class ReplicateModelProvider(IModelProvider):
    """Creates ReplicateModelSession objects that share one client."""

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
            api_key: Replicate API token. If not provided, REPLICATE_API_TOKEN is used when a session is created.
            model: Default model for new sessions, either a short name or a Replicate model ID
            temperature: Default sampling temperature for new sessions
            client: Preconfigured replicate.Client
        """
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            api_key = self.api_key or os.environ.get("REPLICATE_API_TOKEN")
            if not api_key:
                raise SessionUnavailable(
                    "Replicate API key not found. Please set REPLICATE_API_TOKEN in your .env file"
                )
            self._client = replicate.Client(api_token=api_key)
        return self._client

    async def create(self, options: Optional[Dict[str, Any]] = None) -> ReplicateModelSession:
        options = options or {}
        session = ReplicateModelSession(
            client=self._get_client(),
            model=options.get("model", self.model),
            temperature=options.get("temperature", self.temperature),
            max_tokens=options.get("max_tokens"),
            system_prompt=options.get("system_prompt")
        )
        logger.debug(f"Created Replicate session for model {session.model_id}")
        return session
