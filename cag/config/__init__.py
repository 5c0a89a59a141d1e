from .settings import AppSettings, get_settings
from .generation_config import GenerationConfig, validate_config, MIN_ITERATION_LIMIT, MAX_ITERATION_LIMIT

__all__ = [
    'AppSettings',
    'get_settings',
    'GenerationConfig',
    'validate_config',
    'MIN_ITERATION_LIMIT',
    'MAX_ITERATION_LIMIT'
]
