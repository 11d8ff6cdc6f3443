"""Configuration module for rich-domain.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_config(key: str, default=None) -> Any
    Flat-key configuration access function

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger for the application

Usage:
------
```python
from rich_domain.config import settings
length = settings.domain.short_id_length

from rich_domain.config import get_logger
logger = get_logger(__name__)
logger.info("Starting operation")
```
"""

from .logging import get_logger, setup_loguru_logger
from .settings import get_config, settings

__all__ = [
    "get_config",
    "get_logger",
    "settings",
    "setup_loguru_logger",
]
