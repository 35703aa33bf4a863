"""
Room Resolver Module
Turns a task hash into the ordered list of step identifiers of its room.
"""

import logging
from typing import List

from .config import ROOM_URL
from .errors import ResolutionError, SkyAnswersError
from .session import SkysmartSession, json_body

logger = logging.getLogger(__name__)


class RoomResolver:
    """Looks up a task room and lists its steps in server order."""

    def __init__(self, session: SkysmartSession, room_url: str = ROOM_URL):
        self.session = session
        self.room_url = room_url

    def resolve(self, task_hash: str) -> List[str]:
        """
        Resolve a task hash into step identifiers.

        Args:
            task_hash: Opaque hash taken from the student link

        Returns:
            Step identifiers in the order the room lists them

        Raises:
            ResolutionError: the call failed or meta.stepUuids is missing
        """
        try:
            response = self.session.post(self.room_url, json={'taskHash': task_hash})
            data = json_body(response, ResolutionError)
        except ResolutionError:
            raise
        except SkyAnswersError as e:
            raise ResolutionError(f"Room lookup for {task_hash} failed: {e}") from e

        meta = data.get('meta') if isinstance(data, dict) else None
        step_uuids = meta.get('stepUuids') if isinstance(meta, dict) else None
        if not isinstance(step_uuids, list):
            raise ResolutionError("Failed to extract step UUIDs from response")

        # Entries that are not strings are dropped, the rest keep their order
        uuids = [uuid for uuid in step_uuids if isinstance(uuid, str)]
        skipped = len(step_uuids) - len(uuids)
        if skipped:
            logger.warning(f"Skipped {skipped} non-string step ids in room {task_hash}")

        logger.info(f"Room {task_hash}: {len(uuids)} steps")
        return uuids
