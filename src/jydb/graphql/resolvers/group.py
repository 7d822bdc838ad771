from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from sqlalchemy.exc import IntegrityError

from ...database.connection import get_async_session
from ...dbmodels import Groups
from ...logging import get_logger
from ...store import repository
from ..conversions import (
    group_create_from_args,
    group_update_from_args,
    parse_id,
    to_invalid_args,
)
from ..errors import ValidationError

if TYPE_CHECKING:
    from ..mutations.root import AnimatorInput, ParticipantInput
    from ..types.group import Group

logger = get_logger(__name__)


def to_group_type(group: Groups) -> Group:
    """Convert a Groups row into the GraphQL type, keeping the reference lists."""
    from ..types.group import Group as GroupType

    return GroupType(
        id=strawberry.ID(str(group.id)),
        name=group.name,
        participant_ids=list(group.participant_ids or []),
        animator_ids=list(group.animator_ids or []),
    )


# Query resolvers
async def resolve_all_groups(info: strawberry.Info) -> list[Group]:
    """Resolve every group, in store order."""
    async with get_async_session() as session:
        groups = await repository.list_groups(session)
        return [to_group_type(group) for group in groups]


async def resolve_group_by_id(info: strawberry.Info, id: strawberry.ID) -> Group | None:
    """Resolve a group by its ID. Unknown or malformed ids resolve to None."""
    group_id = parse_id(id)
    if group_id is None:
        logger.info("Group not found", group_id=id)
        return None

    async with get_async_session() as session:
        group = await repository.get_group(session, group_id)
        if not group:
            logger.info("Group not found", group_id=id)
            return None
        return to_group_type(group)


# Mutation resolvers
async def add_group(
    info: strawberry.Info,
    name: str,
    participants: list[ParticipantInput | None] | None,
    animators: list[AnimatorInput],
) -> Group | None:
    """
    Create a group together with its participants and animators.

    The group row and every child row are written in one transaction; the
    mutation returns only after the commit, and any failure leaves nothing
    behind.
    """
    invalid_args = to_invalid_args(name=name, participants=participants, animators=animators)
    data = group_create_from_args(name, participants, animators, invalid_args)

    try:
        async with get_async_session() as session:
            group = await repository.create_group(session, data)
            result = to_group_type(group)
    except IntegrityError as e:
        logger.info("Group creation rejected", name=name, error=str(e.orig))
        raise ValidationError(f"Could not save group: {e.orig}", invalid_args) from e

    logger.info(
        "Group created",
        group_id=result.id,
        name=result.name,
        participants=len(result.participant_ids),
        animators=len(result.animator_ids),
    )
    return result


async def edit_group(
    info: strawberry.Info,
    group_id: strawberry.ID,
    name: str | None = None,
    participants: list[ParticipantInput | None] | None = None,
    animators: list[AnimatorInput | None] | None = None,
) -> Group | None:
    """
    Update the supplied fields of a group.

    An unknown group resolves to None before its input is validated.
    Supplied participants or animators replace the whole reference set with
    new records. The records they replace are left in the store unreferenced.
    """
    key = parse_id(group_id)
    if key is None:
        logger.info("Group not found", group_id=group_id)
        return None

    invalid_args = to_invalid_args(
        groupId=group_id, name=name, participants=participants, animators=animators
    )

    try:
        async with get_async_session() as session:
            group = await repository.get_group(session, key)
            if not group:
                logger.info("Group not found", group_id=group_id)
                return None

            data = group_update_from_args(name, participants, animators, invalid_args)
            previous = (list(group.participant_ids), list(group.animator_ids))
            await repository.update_group(session, group, data)
            result = to_group_type(group)
    except IntegrityError as e:
        logger.info("Group update rejected", group_id=group_id, error=str(e.orig))
        raise ValidationError(f"Could not save group: {e.orig}", invalid_args) from e

    orphaned = 0
    if data.participants is not None:
        orphaned += len(previous[0])
    if data.animators is not None:
        orphaned += len(previous[1])

    logger.info(
        "Group updated",
        group_id=result.id,
        updated_fields=data.updated_fields(),
        orphaned_children=orphaned,
    )
    return result


async def delete_group(info: strawberry.Info, group_id: strawberry.ID) -> Group | None:
    """
    Delete a group and return its state prior to deletion.

    Participants and animators it referenced are not deleted.
    """
    key = parse_id(group_id)
    if key is None:
        logger.info("Group not found", group_id=group_id)
        return None

    async with get_async_session() as session:
        group = await repository.get_group(session, key)
        if not group:
            logger.info("Group not found", group_id=group_id)
            return None

        result = to_group_type(group)
        await repository.delete_group(session, group)

    logger.info(
        "Group deleted",
        group_id=result.id,
        orphaned_children=len(result.participant_ids) + len(result.animator_ids),
    )
    return result
