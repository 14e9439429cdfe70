"""
Utility modules for the LightBnB data layer.
"""

from lightbnb.utils.exceptions import GatewayError, QueryFailure, QueryTimeout
from lightbnb.utils.money import to_cents, from_cents

__all__ = [
    "GatewayError",
    "QueryFailure",
    "QueryTimeout",
    "to_cents",
    "from_cents",
]
