"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.animator import Animator
from ..types.group import Group


# Input types for mutations
@strawberry.input
class ParticipantInput:
    """Input for a participant created along with its group."""

    name: str | None = None
    age: int | None = None


@strawberry.input
class AnimatorInput:
    """Input for an animator created along with its group."""

    name: str | None = None
    conversations: list[str | None] | None = None


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Group mutations
    @strawberry.mutation
    async def add_group(
        self,
        info: strawberry.Info,
        name: str,
        animators: list[AnimatorInput],
        participants: list[ParticipantInput | None] | None = None,
    ) -> Group | None:
        """Create a group with its participants and animators."""
        from ..resolvers.group import add_group

        return await add_group(info, name, participants, animators)

    @strawberry.mutation
    async def edit_group(
        self,
        info: strawberry.Info,
        group_id: strawberry.ID,
        name: str | None = None,
        participants: list[ParticipantInput | None] | None = None,
        animators: list[AnimatorInput | None] | None = None,
    ) -> Group | None:
        """Update a group; supplied child lists replace the existing ones."""
        from ..resolvers.group import edit_group

        return await edit_group(info, group_id, name, participants, animators)

    @strawberry.mutation
    async def delete_group(self, info: strawberry.Info, group_id: strawberry.ID) -> Group | None:
        """Delete a group and return it as it was."""
        from ..resolvers.group import delete_group

        return await delete_group(info, group_id)

    # Conversation mutations
    @strawberry.mutation
    async def add_conversation(
        self, info: strawberry.Info, animator_id: strawberry.ID, summary: str
    ) -> Animator | None:
        """Append a conversation summary to an animator."""
        from ..resolvers.animator import add_conversation

        return await add_conversation(info, animator_id, summary)

    @strawberry.mutation
    async def edit_conversation(
        self, info: strawberry.Info, animator_id: strawberry.ID, summary: str, index: int
    ) -> Animator | None:
        """Replace the conversation summary at a position."""
        from ..resolvers.animator import edit_conversation

        return await edit_conversation(info, animator_id, summary, index)

    @strawberry.mutation
    async def delete_conversation(
        self, info: strawberry.Info, animator_id: strawberry.ID, index: int
    ) -> Animator | None:
        """Remove the conversation summary at a position."""
        from ..resolvers.animator import delete_conversation

        return await delete_conversation(info, animator_id, index)
