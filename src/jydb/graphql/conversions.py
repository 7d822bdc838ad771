"""
Typed conversion of GraphQL input objects into validated records.

Nothing reaches the store without passing through one of these functions.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any
from uuid import UUID

import pydantic

from ..schemas import AnimatorCreate, GroupCreate, GroupUpdate, ParticipantCreate
from .errors import ValidationError

if TYPE_CHECKING:
    from .mutations.root import AnimatorInput, ParticipantInput


def _describe(error: pydantic.ValidationError) -> str:
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        parts.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return "; ".join(parts)


def participant_from_input(participant: ParticipantInput) -> ParticipantCreate:
    return ParticipantCreate(name=participant.name, age=participant.age)


def animator_from_input(animator: AnimatorInput) -> AnimatorCreate:
    conversations = animator.conversations or []
    if any(entry is None for entry in conversations):
        raise ValueError("conversation entries must not be null")
    return AnimatorCreate(name=animator.name, conversations=conversations)


def _convert_all(
    items: Sequence[Any | None], convert: Callable[[Any], Any], label: str
) -> list[Any]:
    records = []
    for position, item in enumerate(items):
        if item is None:
            raise ValueError(f"{label}.{position}: entry must not be null")
        try:
            records.append(convert(item))
        except pydantic.ValidationError as e:
            raise ValueError(f"{label}.{position}: {_describe(e)}") from e
        except ValueError as e:
            raise ValueError(f"{label}.{position}: {e}") from e
    return records


def group_create_from_args(
    name: str,
    participants: Sequence[ParticipantInput | None] | None,
    animators: Sequence[AnimatorInput | None],
    invalid_args: dict[str, Any],
) -> GroupCreate:
    """Build a GroupCreate, raising ValidationError with the original arguments."""
    try:
        return GroupCreate(
            name=name,
            participants=_convert_all(participants or [], participant_from_input, "participants"),
            animators=_convert_all(animators, animator_from_input, "animators"),
        )
    except pydantic.ValidationError as e:
        raise ValidationError(_describe(e), invalid_args) from e
    except ValueError as e:
        raise ValidationError(str(e), invalid_args) from e


def group_update_from_args(
    name: str | None,
    participants: Sequence[ParticipantInput | None] | None,
    animators: Sequence[AnimatorInput | None] | None,
    invalid_args: dict[str, Any],
) -> GroupUpdate:
    """Build a GroupUpdate; arguments left as None stay None."""
    try:
        return GroupUpdate(
            name=name,
            participants=(
                None
                if participants is None
                else _convert_all(participants, participant_from_input, "participants")
            ),
            animators=(
                None
                if animators is None
                else _convert_all(animators, animator_from_input, "animators")
            ),
        )
    except pydantic.ValidationError as e:
        raise ValidationError(_describe(e), invalid_args) from e
    except ValueError as e:
        raise ValidationError(str(e), invalid_args) from e


def parse_id(value: str) -> UUID | None:
    """Parse an ID argument; a malformed id matches no record."""
    try:
        return UUID(str(value))
    except ValueError:
        return None


def to_invalid_args(**arguments: Any) -> dict[str, Any]:
    """Render mutation arguments as plain data for the error payload."""
    return {
        key: _plain(value) for key, value in arguments.items() if value is not None
    }


def _plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value
