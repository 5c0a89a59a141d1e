from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

# Load environment variables at module import
load_dotenv()


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or value.strip() == "":
        return None
    return float(value)


@dataclass
class AppSettings:
    """Process-wide settings for model backends and logging, read from the environment."""
    backend: str = "openai"
    model: Optional[str] = None
    temperature: float = 0.0
    session_timeout: Optional[float] = None
    log_dir: Optional[str] = None
    log_level: str = "INFO"

    def __post_init__(self):
        self._load_env_vars()

    def _load_env_vars(self):
        self.backend = os.getenv("CAG_BACKEND", self.backend)
        self.model = os.getenv("CAG_MODEL", self.model)
        self.temperature = float(os.getenv("CAG_TEMPERATURE", self.temperature))
        timeout = _optional_float(os.getenv("CAG_SESSION_TIMEOUT"))
        if timeout is not None:
            self.session_timeout = timeout
        self.log_dir = os.getenv("CAG_LOG_DIR", self.log_dir)
        self.log_level = os.getenv("CAG_LOG_LEVEL", self.log_level).upper()


def get_settings() -> AppSettings:
    """Return a fresh settings snapshot so environment changes are picked up."""
    return AppSettings()
