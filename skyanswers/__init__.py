"""
SkyAnswers Module
Contains the session client, room lookup and answer extraction for Skysmart task rooms.
"""

from .session import SkysmartSession
from .resolver import RoomResolver
from .fetcher import TaskFetcher
from .parser import TaskDocument, parse_task_markup
from .extractor import AnswerExtractor, remove_extra_newlines, decode_group_text
from .models import TaskAnswer, TaskOutcome
from .links import extract_task_hash
from .answers import SkyAnswers
from .errors import (
    SkyAnswersError,
    AuthError,
    TransportError,
    RemoteError,
    ResolutionError,
    FetchError,
    MissingContentError,
    ParseError,
    DecodeError,
)

__version__ = '1.0.0'

__all__ = [
    'SkysmartSession',
    'RoomResolver',
    'TaskFetcher',
    'TaskDocument',
    'parse_task_markup',
    'AnswerExtractor',
    'remove_extra_newlines',
    'decode_group_text',
    'TaskAnswer',
    'TaskOutcome',
    'extract_task_hash',
    'SkyAnswers',
    'SkyAnswersError',
    'AuthError',
    'TransportError',
    'RemoteError',
    'ResolutionError',
    'FetchError',
    'MissingContentError',
    'ParseError',
    'DecodeError',
]
