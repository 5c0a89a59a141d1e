import logging
from typing import Any, Dict, Optional

from cag.config.settings import AppSettings, get_settings
from cag.errors import InvalidConfiguration
from cag.interfaces import IModelProvider
from cag.llm_backends.openai_backend import OpenAIModelProvider, OpenAIModelSession
from cag.llm_backends.replicate_backend import ReplicateModelProvider, ReplicateModelSession

logger = logging.getLogger(__name__)

SUPPORTED_BACKENDS = ("openai", "replicate")


def create_model_provider(backend_type: str, **kwargs) -> IModelProvider:
    """
    Factory function to create a model provider based on configuration.

    Args:
        backend_type: The type of backend to create ('openai', 'replicate')
        **kwargs: Additional arguments to pass to the provider constructor

    Returns:
        An instance of the requested provider

    Raises:
        InvalidConfiguration: If the backend type is not supported
    """
    if backend_type == "openai":
        return OpenAIModelProvider(**kwargs)

    elif backend_type == "replicate":
        return ReplicateModelProvider(**kwargs)

    else:
        raise InvalidConfiguration(
            f"Unsupported model backend type: {backend_type}. Expected one of: {', '.join(SUPPORTED_BACKENDS)}"
        )


def provider_from_settings(settings: Optional[AppSettings] = None) -> IModelProvider:
    """
    Create the provider described by the application settings.

    Without a configured model each backend falls back to its own default.
    """
    settings = settings or get_settings()
    kwargs: Dict[str, Any] = {"temperature": settings.temperature}
    if settings.model:
        kwargs["model"] = settings.model
    provider = create_model_provider(settings.backend, **kwargs)
    logger.info(f"Using {settings.backend} backend with model {provider.model}")
    return provider


__all__ = [
    "OpenAIModelProvider",
    "OpenAIModelSession",
    "ReplicateModelProvider",
    "ReplicateModelSession",
    "SUPPORTED_BACKENDS",
    "create_model_provider",
    "provider_from_settings",
]
