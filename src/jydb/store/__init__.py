"""
Persistence interface consumed by the GraphQL resolvers
"""
