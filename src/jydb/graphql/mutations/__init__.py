"""GraphQL mutation root"""
