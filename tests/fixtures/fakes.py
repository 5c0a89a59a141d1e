"""
In-memory stand-ins for model providers and splitters.
"""

import asyncio
from typing import Any, Callable, Dict, List, Optional, Union

from cag.interfaces import IModelProvider, IModelSession, ITextSplitter

Responder = Callable[[str], str]


class FakeSession(IModelSession):
    """Session that answers prompts with a responder function and records every call."""
    
    def __init__(self, responder: Responder, delay: float = 0.0):
        self.responder = responder
        self.delay = delay
        self.prompts: List[str] = []
        self.release_count = 0
    
    async def send(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.responder(prompt)
    
    async def release(self) -> None:
        self.release_count += 1


class FakeProvider(IModelProvider):
    """
    Provider that creates FakeSession objects.
    
    Args:
        responder: Function mapping a prompt to a response; may raise to simulate failures
        create_error: Exception raised by create() instead of returning a session
        delay: Seconds each send() waits before answering
    """
    
    def __init__(
        self,
        responder: Optional[Responder] = None,
        create_error: Optional[Exception] = None,
        delay: float = 0.0
    ):
        self.responder = responder or (lambda prompt: f"response to: {prompt}")
        self.create_error = create_error
        self.delay = delay
        self.sessions: List[FakeSession] = []
        self.create_options: List[Dict[str, Any]] = []
    
    async def create(self, options: Optional[Dict[str, Any]] = None) -> FakeSession:
        self.create_options.append(options)
        if self.create_error is not None:
            raise self.create_error
        session = FakeSession(self.responder, delay=self.delay)
        self.sessions.append(session)
        return session
    
    @property
    def prompts(self) -> List[str]:
        return [prompt for session in self.sessions for prompt in session.prompts]
    
    @property
    def release_counts(self) -> List[int]:
        return [session.release_count for session in self.sessions]


class DelimiterSplitter(ITextSplitter):
    """Splits on a fixed delimiter so tests control the exact chunks."""
    
    def __init__(self, delimiter: str = "|"):
        self.delimiter = delimiter
        self.calls: List[str] = []
    
    def split(self, text: str) -> List[str]:
        self.calls.append(text)
        if not text:
            return []
        return text.split(self.delimiter)


def failing_on(marker: str, error: Union[Exception, type] = RuntimeError) -> Responder:
    """Responder that raises for prompts containing marker and echoes the rest."""
    def responder(prompt: str) -> str:
        if marker in prompt:
            raise error(f"model failed on {marker}") if isinstance(error, type) else error
        return prompt.split(": ", 1)[-1].upper()
    return responder
