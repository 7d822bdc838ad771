"""
Animator GraphQL type definitions
"""

import strawberry


@strawberry.type
class Animator:
    """Animator type for GraphQL API."""

    name: str
    conversations: list[str | None] | None
    id: strawberry.ID
