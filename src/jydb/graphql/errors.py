"""
User-facing GraphQL faults
"""

from typing import Any

from graphql import GraphQLError


class ValidationError(GraphQLError):
    """A field constraint (required, minimum length, uniqueness) was violated.

    Carries the original mutation arguments so the caller can correct them.
    """

    def __init__(self, message: str, invalid_args: dict[str, Any]):
        super().__init__(
            message,
            extensions={"code": "BAD_USER_INPUT", "invalidArgs": invalid_args},
        )
        self.invalid_args = invalid_args


class OutOfRangeError(GraphQLError):
    """A conversation index fell outside [0, length)."""

    def __init__(self, index: int, length: int, invalid_args: dict[str, Any]):
        super().__init__(
            f"Conversation index {index} is out of range for {length} entries",
            extensions={"code": "OUT_OF_RANGE", "invalidArgs": invalid_args, "length": length},
        )
        self.index = index
        self.length = length
        self.invalid_args = invalid_args
