"""
Links Module
Turns a student task link into the task hash the API expects.
"""

from typing import Optional

STUDENT_PREFIXES = [
    'https://edu.skysmart.ru/student/',
    'http://edu.skysmart.ru/student/',
    'edu.skysmart.ru/student/',
]

MIN_HASH_LENGTH = 5


def extract_task_hash(link: str) -> Optional[str]:
    """
    Strip the student URL prefix from *link*.

    Returns:
        The task hash, or None when what is left is too short to be one
    """
    task_hash = link.strip()
    for prefix in STUDENT_PREFIXES:
        task_hash = task_hash.replace(prefix, '')
    if len(task_hash) < MIN_HASH_LENGTH:
        return None
    return task_hash
