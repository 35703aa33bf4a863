"""
Data Models Module
Result records produced for each task of a room.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class TaskAnswer:
    """Correct answers of one task together with its question text."""
    task_number: int
    question: str
    answers: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'task_number': self.task_number,
            'question': self.question,
            'answers': list(self.answers),
        }


@dataclass(frozen=True)
class TaskOutcome:
    """Result of processing one step: either an answer or the error that stopped it."""
    task_id: str
    answer: Optional[TaskAnswer] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.answer is not None
