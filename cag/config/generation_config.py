from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, Any, Mapping, Optional, Union
import yaml

from cag.errors import InvalidConfiguration

MIN_ITERATION_LIMIT = 2
MAX_ITERATION_LIMIT = 100

# Keys accepted from camelCase config files
_KEY_ALIASES = {
    'chunkSize': 'chunk_size',
    'chunkOverlap': 'chunk_overlap',
}


@dataclass(frozen=True)
class GenerationConfig:
    """Configuration for chunked generation."""

    # Window configuration
    chunk_size: int
    chunk_overlap: int = 0

    # Recursive termination criteria
    iteration_limit: Optional[int] = None
    iteration_output_token_limit: Optional[int] = None

    # Output and session settings
    sequential_separator: str = "<br>"
    session_timeout: Optional[float] = None
    session_options: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        validate_config(self)

    @property
    def has_termination_criterion(self) -> bool:
        """Whether recursive generation has at least one stopping condition."""
        return self.iteration_limit is not None or self.iteration_output_token_limit is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'GenerationConfig':
        """
        Create a config from a mapping.

        Unknown keys are rejected so typos in config files surface early.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            key = _KEY_ALIASES.get(key, key)
            if key not in known:
                raise InvalidConfiguration(f"Unknown configuration key: {key}")
            kwargs[key] = value
        if 'chunk_size' not in kwargs:
            raise InvalidConfiguration("chunk_size is required")
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'GenerationConfig':
        """
        Load a config from a YAML file.

        The parameters may live at the top level or under a ``generation`` section.
        """
        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise InvalidConfiguration(f"Could not parse config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise InvalidConfiguration(f"Config file {path} must contain a mapping")

        section = data.get('generation', data)
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise InvalidConfiguration(f"The generation section of {path} must be a mapping")
        return cls.from_dict(section)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return {
            "chunk_size": self.chunk_size,
            "chunk_overlap": self.chunk_overlap,
            "iteration_limit": self.iteration_limit,
            "iteration_output_token_limit": self.iteration_output_token_limit,
            "sequential_separator": self.sequential_separator,
            "session_timeout": self.session_timeout,
            "session_options": dict(self.session_options),
        }


def _is_int(value: Any) -> bool:
    # bool is a subclass of int but never a valid size or limit
    return isinstance(value, int) and not isinstance(value, bool)


def validate_config(config: GenerationConfig) -> None:
    """
    Validate configuration parameters.

    Raises:
        InvalidConfiguration: If any parameter has the wrong type or is out of range
    """
    if not _is_int(config.chunk_size) or config.chunk_size < 1:
        raise InvalidConfiguration("chunk_size must be an integer greater than 0")
    if not _is_int(config.chunk_overlap) or config.chunk_overlap < 0:
        raise InvalidConfiguration("chunk_overlap must be an integer greater than or equal to 0")
    if config.chunk_overlap >= config.chunk_size:
        raise InvalidConfiguration("chunk_overlap must be less than chunk_size")
    if config.iteration_limit is not None:
        if not _is_int(config.iteration_limit):
            raise InvalidConfiguration("iteration_limit must be an integer")
        if config.iteration_limit < MIN_ITERATION_LIMIT:
            raise InvalidConfiguration(f"iteration_limit must be greater than {MIN_ITERATION_LIMIT - 1}")
        if config.iteration_limit > MAX_ITERATION_LIMIT:
            raise InvalidConfiguration(f"iteration_limit must be less than or equal to {MAX_ITERATION_LIMIT}")
    if config.iteration_output_token_limit is not None:
        if not _is_int(config.iteration_output_token_limit) or config.iteration_output_token_limit < 1:
            raise InvalidConfiguration("iteration_output_token_limit must be an integer greater than 0")
    if config.session_timeout is not None:
        if not isinstance(config.session_timeout, (int, float)) or isinstance(config.session_timeout, bool):
            raise InvalidConfiguration("session_timeout must be a number of seconds")
        if config.session_timeout <= 0:
            raise InvalidConfiguration("session_timeout must be greater than 0")
