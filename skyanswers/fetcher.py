"""
Task Fetcher Module
Downloads the rendered markup of a single task step.
"""

import logging

from .config import STEPS_URL
from .errors import FetchError, MissingContentError, SkyAnswersError
from .session import SkysmartSession, json_body

logger = logging.getLogger(__name__)


class TaskFetcher:
    """Fetches step content by identifier."""

    def __init__(self, session: SkysmartSession, steps_url: str = STEPS_URL):
        self.session = session
        self.steps_url = steps_url

    def fetch(self, task_id: str) -> str:
        """Return the raw markup of *task_id* exactly as the API serves it."""
        url = f"{self.steps_url}{task_id}"
        try:
            response = self.session.get(url)
            data = json_body(response, FetchError)
        except FetchError:
            raise
        except SkyAnswersError as e:
            raise FetchError(f"Fetching step {task_id} failed: {e}") from e

        content = data.get('content') if isinstance(data, dict) else None
        if not isinstance(content, str):
            raise MissingContentError(f"Content not found in response for step {task_id}")

        logger.debug(f"Fetched step {task_id}: {len(content)} chars")
        return content
