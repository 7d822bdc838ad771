from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import strawberry
from sqlalchemy.exc import IntegrityError

from ...database.connection import get_async_session
from ...dbmodels import Animators
from ...logging import get_logger
from ...store import repository
from ..conversions import parse_id, to_invalid_args
from ..errors import OutOfRangeError, ValidationError

if TYPE_CHECKING:
    from ..types.animator import Animator
    from ..types.group import Group

logger = get_logger(__name__)


def to_animator_type(animator: Animators) -> Animator:
    from ..types.animator import Animator as AnimatorType

    return AnimatorType(
        id=strawberry.ID(str(animator.id)),
        name=animator.name,
        conversations=list(animator.conversations or []),
    )


# Group field resolver
async def resolve_group_animators(group: Group, info: strawberry.Info) -> list[Animator]:
    """
    Resolve the animators a group references with a single batched query.

    The order of the result is the store's, not the group's reference order.
    """
    if not group.animator_ids:
        return []

    async with get_async_session() as session:
        animators = await repository.get_animators(session, group.animator_ids)
        if len(animators) != len(group.animator_ids):
            logger.warning(
                "Group references missing animators",
                group_id=group.id,
                referenced=len(group.animator_ids),
                found=len(animators),
            )
        return [to_animator_type(animator) for animator in animators]


def _check_index(index: int, conversations: list[str], invalid_args: dict[str, Any]) -> None:
    if not 0 <= index < len(conversations):
        raise OutOfRangeError(index, len(conversations), invalid_args)


async def _update_conversations(
    animator_id: strawberry.ID,
    invalid_args: dict[str, Any],
    change: Callable[[list[str]], list[str]],
    event: str,
) -> Animator | None:
    """Load an animator, apply `change` to its conversation list and persist it."""
    key = parse_id(animator_id)
    if key is None:
        logger.info("Animator not found", animator_id=animator_id)
        return None

    try:
        async with get_async_session() as session:
            animator = await repository.get_animator(session, key)
            if not animator:
                logger.info("Animator not found", animator_id=animator_id)
                return None

            conversations = change(list(animator.conversations or []))
            await repository.set_conversations(session, animator, conversations)
            result = to_animator_type(animator)
    except IntegrityError as e:
        logger.info("Conversation update rejected", animator_id=animator_id, error=str(e.orig))
        raise ValidationError(f"Could not save animator: {e.orig}", invalid_args) from e

    logger.info(event, animator_id=result.id, conversations=len(result.conversations or []))
    return result


# Mutation resolvers
async def add_conversation(
    info: strawberry.Info, animator_id: strawberry.ID, summary: str
) -> Animator | None:
    """Append a conversation summary to an animator."""
    invalid_args = to_invalid_args(animatorId=animator_id, summary=summary)

    def append(conversations: list[str]) -> list[str]:
        return [*conversations, summary]

    return await _update_conversations(animator_id, invalid_args, append, "Conversation added")


async def edit_conversation(
    info: strawberry.Info, animator_id: strawberry.ID, summary: str, index: int
) -> Animator | None:
    """Replace the conversation at `index`; an index outside the list is an OutOfRange fault."""
    invalid_args = to_invalid_args(animatorId=animator_id, summary=summary, index=index)

    def replace(conversations: list[str]) -> list[str]:
        _check_index(index, conversations, invalid_args)
        conversations[index] = summary
        return conversations

    return await _update_conversations(animator_id, invalid_args, replace, "Conversation edited")


async def delete_conversation(
    info: strawberry.Info, animator_id: strawberry.ID, index: int
) -> Animator | None:
    """Remove the conversation at `index`; an index outside the list is an OutOfRange fault."""
    invalid_args = to_invalid_args(animatorId=animator_id, index=index)

    def remove(conversations: list[str]) -> list[str]:
        _check_index(index, conversations, invalid_args)
        del conversations[index]
        return conversations

    return await _update_conversations(animator_id, invalid_args, remove, "Conversation deleted")
