"""
Participant GraphQL type definitions
"""

import strawberry


@strawberry.type
class Participant:
    """Participant type for GraphQL API."""

    name: str
    age: int
    id: strawberry.ID
