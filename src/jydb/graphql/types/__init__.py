"""GraphQL types"""
