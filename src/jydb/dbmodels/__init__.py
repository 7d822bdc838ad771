"""
Database models for jydb (authoritative ORM definitions).

This module defines the SQLAlchemy Base with a naming convention for stable
Alembic autogenerate diffs, and exposes `target_metadata` for Alembic.

Groups reference their participants and animators by identifier. The
reference lists live on the group row as JSON arrays; there are no foreign
keys, so a child row can outlive every group that referenced it.
"""

from uuid import UUID, uuid4

from sqlalchemy import (
    JSON,
    CheckConstraint,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for deterministic constraint/index names in Alembic diffs
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

NAME_MIN_LENGTH = 2

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JSONList = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Participants(Base):
    __tablename__ = "participants"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="participants_pkey"),
        CheckConstraint(f"length(name) >= {NAME_MIN_LENGTH}", name="name_length"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    name: Mapped[str] = mapped_column(String, nullable=False)
    age: Mapped[int | None] = mapped_column(Integer)


class Animators(Base):
    __tablename__ = "animators"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="animators_pkey"),
        CheckConstraint(f"length(name) >= {NAME_MIN_LENGTH}", name="name_length"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    name: Mapped[str] = mapped_column(String, nullable=False)
    conversations: Mapped[list[str]] = mapped_column(JSONList, nullable=False, default=list)


class Groups(Base):
    __tablename__ = "groups"
    __table_args__ = (
        PrimaryKeyConstraint("id", name="groups_pkey"),
        UniqueConstraint("name", name="groups_name_key"),
        CheckConstraint(f"length(name) >= {NAME_MIN_LENGTH}", name="name_length"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, default=uuid4)
    name: Mapped[str] = mapped_column(String, nullable=False)
    participant_ids: Mapped[list[str]] = mapped_column(JSONList, nullable=False, default=list)
    animator_ids: Mapped[list[str]] = mapped_column(JSONList, nullable=False, default=list)


target_metadata = Base.metadata
