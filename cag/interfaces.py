"""
Interface definitions for chunked generation dependencies.

These interfaces define the contracts that must be satisfied by any dependency
implementations used by the ChunkedGenerator class. This allows for easy
dependency injection and testing.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional


class IModelSession(ABC):
    """A short-lived, stateful generation context on a model."""
    
    @abstractmethod
    async def send(self, prompt: str) -> str:
        """Send a prompt and return the model's textual response."""
        pass
    
    @abstractmethod
    async def release(self) -> None:
        """Release the session. Calling this more than once must be safe."""
        pass


class IModelProvider(ABC):
    """Interface for creating model sessions."""
    
    @abstractmethod
    async def create(self, options: Optional[Dict[str, Any]] = None) -> IModelSession:
        """
        Create a new model session.
        
        Raises:
            SessionUnavailable: If the provider cannot supply a session
        """
        pass


class ITextSplitter(ABC):
    """Interface for splitting text into overlapping chunks."""
    
    @abstractmethod
    def split(self, text: str) -> List[str]:
        """Split text into an ordered list of chunks."""
        pass
