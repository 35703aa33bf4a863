"""
Answers Core Module
Resolves a task room and collects the answers of each of its steps.
"""

import logging
from typing import List, Optional

from .config import MAX_TASKS
from .errors import ResolutionError
from .extractor import AnswerExtractor
from .fetcher import TaskFetcher
from .models import TaskAnswer, TaskOutcome
from .parser import parse_task_markup
from .resolver import RoomResolver
from .session import SkysmartSession

logger = logging.getLogger(__name__)


class SkyAnswers:
    """Main answer collection engine: room lookup, then one step at a time."""

    def __init__(self, session: Optional[SkysmartSession] = None, max_tasks: int = MAX_TASKS):
        """
        Initialize the engine.

        Args:
            session: Shared credentialed session, a private one when omitted
            max_tasks: Upper bound on steps fetched per room, at least 1
        """
        self._owns_session = session is None
        self.session = session or SkysmartSession()
        self.max_tasks = max(1, max_tasks)
        self.resolver = RoomResolver(self.session)
        self.fetcher = TaskFetcher(self.session)
        self.extractor = AnswerExtractor()

    def get_answers(self, task_hash: str) -> List[TaskAnswer]:
        """
        Collect answers for every step of the room behind *task_hash*.

        Steps that fail are logged and left out; numbering counts only the
        steps that produced an answer. A room that cannot be resolved yields
        an empty list.
        """
        try:
            try:
                task_ids = self.resolver.resolve(task_hash)
            except ResolutionError as e:
                logger.error(f"Error resolving room {task_hash}: {e}")
                return []
            except Exception as e:
                logger.exception(f"Unexpected error resolving room {task_hash}: {e}")
                return []

            if len(task_ids) > self.max_tasks:
                logger.warning(f"Room {task_hash} has {len(task_ids)} steps, "
                               f"only the first {self.max_tasks} are processed")
                task_ids = task_ids[:self.max_tasks]

            outcomes: List[TaskOutcome] = []
            answered = 0
            for index, task_id in enumerate(task_ids, 1):
                outcome = self._process_task(task_id, answered + 1)
                if outcome.ok:
                    answered += 1
                else:
                    logger.error(f"Error processing step {index} ({task_id}): {outcome.error}")
                outcomes.append(outcome)
        finally:
            self._release()

        answers = [outcome.answer for outcome in outcomes if outcome.ok]
        logger.info(f"Room {task_hash}: {len(answers)}/{len(task_ids)} steps answered")
        return answers

    def _process_task(self, task_id: str, task_number: int) -> TaskOutcome:
        """Fetch, parse and extract one step, capturing any failure in the outcome."""
        try:
            markup = self.fetcher.fetch(task_id)
            document = parse_task_markup(markup)
            answer = self.extractor.build_task_answer(document, task_number)
        except Exception as e:
            return TaskOutcome(task_id=task_id, error=e)
        return TaskOutcome(task_id=task_id, answer=answer)

    def _release(self):
        if self._owns_session:
            self.session.close()
