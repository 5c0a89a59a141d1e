import logging
from pathlib import Path
from typing import Optional
import sys

from cag.config.settings import get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(name: str, log_file: Optional[Path] = None) -> logging.Logger:
    """Get a logger with console output and optional file output"""
    settings = get_settings()
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)  # Handlers filter, the logger passes everything through
    
    # Clear existing handlers to avoid duplicates
    if logger.handlers:
        logger.handlers = []
    
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(settings.log_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)
    
    # Fall back to a per-logger file under the configured log directory
    if log_file is None and settings.log_dir:
        log_file = Path(settings.log_dir) / f"{name.replace('.', '_')}.log"
    
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)
    
    return logger
