# Business rules sitting between the routers and the persistence gateways.
# Nothing in here knows about HTTP or SQL.
from .accounts import AccountRules
from .errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    RulesError,
    StorageError,
    ValidationError,
)
from .gateway import AccountGateway, CrudGateway, MessageGateway
from .messages import MessageRules

__all__ = [
    "AccountGateway",
    "AccountRules",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "CrudGateway",
    "MessageGateway",
    "MessageRules",
    "NotFoundError",
    "RulesError",
    "StorageError",
    "ValidationError",
]
