"""
GraphQL API for groups, participants and animators
"""
