"""GraphQL query root"""
