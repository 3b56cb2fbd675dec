from .accounts import router as accounts_router
from .auth import router as auth_router
from .messages import router as messages_router

_routers = [auth_router, accounts_router, messages_router]

__all__ = ["get_routers"]


def get_routers():
    return _routers
