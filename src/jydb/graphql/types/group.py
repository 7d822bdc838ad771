"""
Group GraphQL type definitions
"""

import strawberry

from .animator import Animator
from .participant import Participant


@strawberry.type
class Group:
    """Group type for GraphQL API."""

    name: str
    id: strawberry.ID

    # Ownership references, resolved lazily by the field resolvers below
    participant_ids: strawberry.Private[list[str]]
    animator_ids: strawberry.Private[list[str]]

    @strawberry.field
    async def participants(self, info: strawberry.Info) -> list[Participant]:
        """Get the participants of this group."""
        from ..resolvers.participant import resolve_group_participants

        return await resolve_group_participants(self, info)

    @strawberry.field
    async def animators(self, info: strawberry.Info) -> list[Animator]:
        """Get the animators of this group."""
        from ..resolvers.animator import resolve_group_animators

        return await resolve_group_animators(self, info)
