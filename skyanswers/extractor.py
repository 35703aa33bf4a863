"""
Answer Extractor Module
Pulls correct answers out of task markup for every known Skysmart widget.
"""

import base64
import binascii
import logging
import re
from typing import Callable, List, Optional, Tuple

from .errors import DecodeError
from .models import TaskAnswer
from .parser import TaskDocument

logger = logging.getLogger(__name__)

Rule = Callable[[TaskDocument], List[str]]

NEWLINES_RE = re.compile(r'\n+')


def remove_extra_newlines(text: str) -> str:
    """Trim *text* and collapse every run of newlines into one."""
    return NEWLINES_RE.sub('\n', text.strip())


def decode_group_text(value: str) -> str:
    """
    Decode the Base64 payload of a grouping item.

    Raises:
        DecodeError: value is not Base64 or the bytes are not UTF-8
    """
    try:
        raw = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Invalid base64 text {value!r}: {e}") from e
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError as e:
        raise DecodeError(f"Decoded text is not UTF-8: {e}") from e


def _correct_items(tag: str, template: str = '{}') -> Rule:
    """Rule for widgets that flag their right options with correct="true"."""
    def rule(document: TaskDocument) -> List[str]:
        return [template.format(document.text_of(el))
                for el in document.select(tag, {'correct': 'true'})]
    rule.__name__ = f"correct_{tag}"
    return rule


def _all_items(tag: str) -> Rule:
    """Rule for widgets whose elements are all part of the answer."""
    def rule(document: TaskDocument) -> List[str]:
        return [document.text_of(el) for el in document.select(tag)]
    rule.__name__ = f"all_{tag}"
    return rule


def input_answers(document: TaskDocument) -> List[str]:
    answers = []
    for container in document.select('vim-input-answers'):
        # First item is the canonical answer, the rest are alternatives
        item = document.select_first('vim-input-item', scope=container)
        if item is not None:
            answers.append(document.text_of(item))
    return answers


def drag_and_drop(document: TaskDocument) -> List[str]:
    """Resolve each drop target to the text of the drag elements it references."""
    answers = []
    for drop in document.select('vim-dnd-text-drop', {'drag-ids': True}):
        drag_ids = document.attr(drop, 'drag-ids') or ''
        for drag_id in drag_ids.split(','):
            drag_id = drag_id.strip()
            if not drag_id:
                continue
            drag = document.select_first('vim-dnd-text-drag', {'answer-id': drag_id})
            if drag is None:
                logger.debug(f"No drag element for answer-id {drag_id}")
                continue
            answers.append(document.text_of(drag))
    return answers


def group_items(document: TaskDocument) -> List[str]:
    answers = []
    for item in document.select('vim-groups-item', {'text': True}):
        try:
            answers.append(decode_group_text(document.attr(item, 'text')))
        except DecodeError as e:
            logger.warning(f"Skipping grouping item: {e}")
    return answers


# Order matters: answers are reported rule by rule, in this sequence
EXTRACTION_RULES: List[Tuple[str, Rule]] = [
    ('test', _correct_items('vim-test-item')),
    ('order_sentence', _all_items('vim-order-sentence-verify-item')),
    ('input', input_answers),
    ('select', _correct_items('vim-select-item')),
    ('test_image', _correct_items('vim-test-image-item', '{} - Correct')),
    ('dnd_text', drag_and_drop),
    ('math_input', _all_items('math-input-answer')),
    ('groups', group_items),
]


class AnswerExtractor:
    """
    Applies every extraction rule to a task document.

    Rules do not exclude each other: a document may match several of them
    and all their answers are concatenated in rule order.
    """

    def __init__(self, rules: Optional[List[Tuple[str, Rule]]] = None):
        self.rules = rules if rules is not None else EXTRACTION_RULES

    def extract(self, document: TaskDocument) -> Tuple[str, List[str]]:
        """
        Extract question text and answers.

        Args:
            document: Parsed task markup

        Returns:
            Tuple of (normalized question text, answers in rule order)
        """
        answers: List[str] = []
        for name, rule in self.rules:
            found = rule(document)
            if found:
                logger.debug(f"Rule {name}: {len(found)} answers")
            answers.extend(found)

        question = remove_extra_newlines(document.text())
        return question, answers

    def build_task_answer(self, document: TaskDocument, task_number: int) -> TaskAnswer:
        question, answers = self.extract(document)
        return TaskAnswer(task_number=task_number, question=question, answers=tuple(answers))
