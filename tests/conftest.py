"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio

from tests.documents import ADD_GROUP

os.environ.setdefault("JYDB_DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("JYDB_DEBUG", "true")


@pytest_asyncio.fixture(scope="function")
async def database(tmp_path: Path) -> AsyncGenerator[str, None]:
    """Point the shared engine at a fresh SQLite file with all tables created."""
    from jydb.database.connection import (
        create_all_tables,
        dispose_database,
        init_database,
    )

    dsn = f"sqlite:///{tmp_path / 'jydb.db'}"
    init_database(dsn, force_reinit=True)
    await create_all_tables()

    yield dsn

    await dispose_database()


@pytest.fixture
def execute(database: str):
    """Run a GraphQL document against the schema and return the result."""
    from jydb.graphql.schema import schema

    async def _execute(query: str, **variables: Any):
        return await schema.execute(
            query, variable_values=variables or None, context_value={"request": None}
        )

    return _execute


@pytest.fixture
def add_group(execute):
    """Create a group through the addGroup mutation and return its payload."""

    async def _add_group(
        name: str = "G1",
        participants: list[dict] | None = None,
        animators: list[dict] | None = None,
    ) -> dict:
        result = await execute(
            ADD_GROUP,
            name=name,
            participants=(
                participants if participants is not None else [{"name": "Ann", "age": 30}]
            ),
            animators=(
                animators
                if animators is not None
                else [{"name": "Bo", "conversations": ["hi"]}]
            ),
        )
        assert result.errors is None, result.errors
        return result.data["addGroup"]

    return _add_group


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
