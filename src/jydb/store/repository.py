"""Repository helpers for groups and their participants and animators.

Every function takes the caller's session and never commits: the caller's
session is the unit of work, so a failure anywhere rolls back all of it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from uuid import UUID, uuid4

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..dbmodels import Animators, Groups, Participants
from ..schemas import AnimatorCreate, GroupCreate, GroupUpdate, ParticipantCreate


def _uuids(ids: Iterable[str | UUID]) -> list[UUID]:
    return [i if isinstance(i, UUID) else UUID(str(i)) for i in ids]


async def list_groups(session: AsyncSession) -> Sequence[Groups]:
    res = await session.execute(select(Groups))
    return res.scalars().all()


async def get_group(session: AsyncSession, group_id: UUID) -> Groups | None:
    return await session.get(Groups, group_id)


async def get_animator(session: AsyncSession, animator_id: UUID) -> Animators | None:
    return await session.get(Animators, animator_id)


async def get_participants(
    session: AsyncSession, participant_ids: Iterable[str | UUID]
) -> Sequence[Participants]:
    keys = _uuids(participant_ids)
    if not keys:
        return []
    res = await session.execute(select(Participants).where(Participants.id.in_(keys)))
    return res.scalars().all()


async def get_animators(
    session: AsyncSession, animator_ids: Iterable[str | UUID]
) -> Sequence[Animators]:
    keys = _uuids(animator_ids)
    if not keys:
        return []
    res = await session.execute(select(Animators).where(Animators.id.in_(keys)))
    return res.scalars().all()


def build_participants(records: Iterable[ParticipantCreate]) -> list[Participants]:
    return [Participants(id=uuid4(), name=r.name, age=r.age) for r in records]


def build_animators(records: Iterable[AnimatorCreate]) -> list[Animators]:
    return [
        Animators(id=uuid4(), name=r.name, conversations=list(r.conversations)) for r in records
    ]


async def add_children(
    session: AsyncSession,
    participants: Sequence[Participants],
    animators: Sequence[Animators],
) -> None:
    """Persist freshly built child records."""
    session.add_all(participants)
    session.add_all(animators)
    await session.flush()


async def create_group(session: AsyncSession, data: GroupCreate) -> Groups:
    """Create a group and its children.

    The group row is flushed first, then the children; both are pending in the
    same transaction until the caller's session commits.
    """
    participants = build_participants(data.participants)
    animators = build_animators(data.animators)

    group = Groups(
        id=uuid4(),
        name=data.name,
        participant_ids=[str(p.id) for p in participants],
        animator_ids=[str(a.id) for a in animators],
    )
    session.add(group)
    await session.flush()

    await add_children(session, participants, animators)
    return group


async def update_group(session: AsyncSession, group: Groups, data: GroupUpdate) -> Groups:
    """Apply a partial update. Supplied child lists replace the reference set."""
    if data.name is not None:
        group.name = data.name

    participants: list[Participants] = []
    animators: list[Animators] = []
    if data.participants is not None:
        participants = build_participants(data.participants)
        group.participant_ids = [str(p.id) for p in participants]
    if data.animators is not None:
        animators = build_animators(data.animators)
        group.animator_ids = [str(a.id) for a in animators]

    await session.flush()
    await add_children(session, participants, animators)
    return group


async def delete_group(session: AsyncSession, group: Groups) -> None:
    """Delete the group row only. Its children are left in place."""
    await session.delete(group)
    await session.flush()


async def set_conversations(
    session: AsyncSession, animator: Animators, conversations: list[str]
) -> Animators:
    # Assign a new list so the JSON column is marked dirty
    animator.conversations = list(conversations)
    await session.flush()
    return animator


async def collect_orphans(session: AsyncSession) -> tuple[int, int]:
    """Delete participants and animators that no group references.

    Returns:
        (participants removed, animators removed)
    """
    referenced_participants: set[UUID] = set()
    referenced_animators: set[UUID] = set()
    for group in await list_groups(session):
        referenced_participants.update(_uuids(group.participant_ids))
        referenced_animators.update(_uuids(group.animator_ids))

    participant_ids = (await session.execute(select(Participants.id))).scalars().all()
    animator_ids = (await session.execute(select(Animators.id))).scalars().all()
    orphan_participants = [i for i in participant_ids if i not in referenced_participants]
    orphan_animators = [i for i in animator_ids if i not in referenced_animators]

    if orphan_participants:
        await session.execute(delete(Participants).where(Participants.id.in_(orphan_participants)))
    if orphan_animators:
        await session.execute(delete(Animators).where(Animators.id.in_(orphan_animators)))
    await session.flush()

    return len(orphan_participants), len(orphan_animators)
