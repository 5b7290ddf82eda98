"""
Miscellaneous utilities shared across interval-map.
"""

from .logging import logger
from .config import config

__all__ = ["logger", "config"]
