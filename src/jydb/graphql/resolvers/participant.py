from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...database.connection import get_async_session
from ...dbmodels import Participants
from ...logging import get_logger
from ...store import repository

if TYPE_CHECKING:
    from ..types.group import Group
    from ..types.participant import Participant

logger = get_logger(__name__)


def to_participant_type(participant: Participants) -> Participant:
    from ..types.participant import Participant as ParticipantType

    return ParticipantType(
        id=strawberry.ID(str(participant.id)),
        name=participant.name,
        age=participant.age,
    )


# Group field resolver
async def resolve_group_participants(group: Group, info: strawberry.Info) -> list[Participant]:
    """Resolve the participants a group references with a single batched query."""
    if not group.participant_ids:
        return []

    async with get_async_session() as session:
        participants = await repository.get_participants(session, group.participant_ids)
        if len(participants) != len(group.participant_ids):
            logger.warning(
                "Group references missing participants",
                group_id=group.id,
                referenced=len(group.participant_ids),
                found=len(participants),
            )
        return [to_participant_type(participant) for participant in participants]
