"""
Exception hierarchy for chunked generation.

All errors raised by the package derive from CAGError so callers can catch
them as a group.
"""
from typing import Optional


class CAGError(Exception):
    """Base class for all chunked generation errors."""


class InvalidConfiguration(CAGError, ValueError):
    """Raised at construction time when configuration or a prompt template is malformed."""


class SessionUnavailable(CAGError):
    """Raised when the model provider cannot create a session."""


class ChunkProcessingFailure(CAGError):
    """
    A single chunk could not be processed.
    
    Attributes:
        chunk_index: Position of the chunk within the current pass
        chunk: The chunk text that failed
    """
    
    def __init__(self, message: str, chunk_index: Optional[int] = None, chunk: Optional[str] = None):
        super().__init__(message)
        self.chunk_index = chunk_index
        self.chunk = chunk


class SessionTimeout(ChunkProcessingFailure):
    """Raised when a model session does not answer within the configured timeout."""


class MissingTerminationCriterion(CAGError):
    """Raised when recursive generation is requested without any stopping condition."""
