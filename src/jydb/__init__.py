"""
jydb backend
GraphQL API for discussion groups, their participants and animators
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
