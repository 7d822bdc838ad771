"""
Root GraphQL query definitions
"""

import strawberry

from ..types.group import Group


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def all_groups(self, info: strawberry.Info) -> list[Group]:
        """Get every group."""
        from ..resolvers.group import resolve_all_groups

        return await resolve_all_groups(info)

    @strawberry.field
    async def find_group(self, info: strawberry.Info, id: strawberry.ID) -> Group | None:
        """Get a group by ID."""
        from ..resolvers.group import resolve_group_by_id

        return await resolve_group_by_id(info, id)
