"""
Utilities for loading test fixtures.
"""

from pathlib import Path
from typing import Dict, List, Any
import yaml

# Constants for test fixtures
FIXTURES_DIR = Path(__file__).parent
INPUT_DIR = FIXTURES_DIR / "input"


def load_text(name: str) -> str:
    """Load an input text file by name."""
    file_path = INPUT_DIR / "texts" / f"{name}.txt"
    with open(file_path, "r") as f:
        return f.read()


def load_config(name: str) -> Dict[str, Any]:
    """Load a test config file by name."""
    file_path = INPUT_DIR / "config" / f"{name}.yaml"
    with open(file_path, "r") as f:
        return yaml.safe_load(f)


def config_path(name: str) -> Path:
    """Path to a test config file."""
    return INPUT_DIR / "config" / f"{name}.yaml"


def get_all_texts() -> List[str]:
    """Get a list of all available input text names."""
    return sorted(f.stem for f in (INPUT_DIR / "texts").glob("*.txt"))
