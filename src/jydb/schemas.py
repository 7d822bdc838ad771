"""Pydantic records validated at the GraphQL boundary before any store write."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .dbmodels import NAME_MIN_LENGTH


class ParticipantCreate(BaseModel):
    name: str = Field(min_length=NAME_MIN_LENGTH)
    # Participant.age is exposed as Int!, so it is required on the way in
    age: int


class AnimatorCreate(BaseModel):
    name: str = Field(min_length=NAME_MIN_LENGTH)
    conversations: list[str] = []


class GroupCreate(BaseModel):
    name: str = Field(min_length=NAME_MIN_LENGTH)
    participants: list[ParticipantCreate] = []
    animators: list[AnimatorCreate] = []


class GroupUpdate(BaseModel):
    """Partial group update. A field left as None is not touched."""

    name: str | None = Field(default=None, min_length=NAME_MIN_LENGTH)
    participants: list[ParticipantCreate] | None = None
    animators: list[AnimatorCreate] | None = None

    def updated_fields(self) -> list[str]:
        return [
            field
            for field in ("name", "participants", "animators")
            if getattr(self, field) is not None
        ]
