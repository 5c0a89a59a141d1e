"""
Chunked Augmented Generation.

Runs a language model over text larger than its context window by splitting
the text into overlapping chunks, prompting a fresh model session per chunk,
and combining the responses in one pass or by recursive refinement.
"""

from cag.config import GenerationConfig, AppSettings, get_settings
from cag.errors import (
    CAGError,
    InvalidConfiguration,
    SessionUnavailable,
    ChunkProcessingFailure,
    SessionTimeout,
    MissingTerminationCriterion
)
from cag.generator import ChunkedGenerator, MAX_RECURSION_DEPTH
from cag.interfaces import IModelProvider, IModelSession, ITextSplitter
from cag.llm_backends import create_model_provider
from cag.prompts import PromptTemplate, PromptRegistry, template_registry
from cag.sessions import FailurePolicy, model_session
from cag.splitting import RecursiveSplitter

__version__ = "0.1.0"

__all__ = [
    'ChunkedGenerator',
    'GenerationConfig',
    'AppSettings',
    'get_settings',
    'FailurePolicy',
    'MAX_RECURSION_DEPTH',
    'CAGError',
    'InvalidConfiguration',
    'SessionUnavailable',
    'ChunkProcessingFailure',
    'SessionTimeout',
    'MissingTerminationCriterion',
    'IModelProvider',
    'IModelSession',
    'ITextSplitter',
    'create_model_provider',
    'PromptTemplate',
    'PromptRegistry',
    'template_registry',
    'model_session',
    'RecursiveSplitter'
]
