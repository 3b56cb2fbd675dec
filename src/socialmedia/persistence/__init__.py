from .accounts import SqlAccountGateway
from .messages import SqlMessageGateway

__all__ = ["SqlAccountGateway", "SqlMessageGateway"]
