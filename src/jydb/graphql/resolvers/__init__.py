"""Resolver package for the GraphQL schema.

Each module opens its own session per call and converts ORM rows into the
GraphQL types defined in ``..types``.
"""
