"""
Package-wide logger. Handlers are left to the application.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("interval_map")
logger.addHandler(logging.NullHandler())
