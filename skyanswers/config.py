"""
Configuration Module
Skysmart endpoints, client identities and limits, overridable through the environment.
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

AUTH_URL = os.getenv('SKYSMART_AUTH_URL', 'https://api-edu.skysmart.ru/api/v2/auth/auth/student')
ROOM_URL = os.getenv('SKYSMART_ROOM_URL', 'https://api-edu.skysmart.ru/api/v1/task/preview')
STEPS_URL = os.getenv('SKYSMART_STEPS_URL', 'https://api-edu.skysmart.ru/api/v1/content/step/load?stepUuid=')

# One of these is picked per session and kept for its lifetime
USER_AGENTS = [
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/98.0.4758.102 Safari/537.36',
    'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/15.3 Safari/605.1.15',
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:97.0) Gecko/20100101 Firefox/97.0',
]


def _read_max_tasks(default: int = 50) -> int:
    """Task cap from SKYANSWERS_MAX_TASKS, never below 1."""
    value = os.getenv('SKYANSWERS_MAX_TASKS')
    if not value:
        return default
    try:
        return max(1, int(value))
    except ValueError:
        logger.warning(f"Ignoring invalid SKYANSWERS_MAX_TASKS={value!r}, using {default}")
        return default


def _read_timeout() -> Optional[float]:
    value = os.getenv('SKYANSWERS_TIMEOUT')
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Ignoring invalid SKYANSWERS_TIMEOUT={value!r}")
        return None


MAX_TASKS = _read_max_tasks()
REQUEST_TIMEOUT = _read_timeout()
