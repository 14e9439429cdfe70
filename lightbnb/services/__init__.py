"""
Service layer exposing the query gateway.
"""

from .gateway import QueryGateway

__all__ = [
    "QueryGateway",
]
