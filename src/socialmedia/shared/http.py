from contextlib import contextmanager

from fastapi import HTTPException

from socialmedia.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    RulesError,
    StorageError,
    ValidationError,
)
from socialmedia.shared import Logger

__all__ = ["DEFAULT_STATUS_CODES", "rules_error_handler"]

logger = Logger(__name__).get_logger()

DEFAULT_STATUS_CODES: dict[type[RulesError], int] = {
    ValidationError: 400,
    AuthorizationError: 400,
    ConflictError: 400,
    NotFoundError: 400,
    AuthenticationError: 401,
    StorageError: 500,
}


@contextmanager
def rules_error_handler(overrides: dict[type[RulesError], int] | None = None, stacklevel=1):
    """Translate rules errors raised inside the block into HTTPException."""
    # Go 3 levels up to escape @contextmanager methods and current function
    kw = {"stacklevel": 2 + stacklevel}
    status_codes = {**DEFAULT_STATUS_CODES, **(overrides or {})}
    try:
        yield

    except HTTPException:
        raise

    except RulesError as e:
        status_code = next(
            (code for kind, code in status_codes.items() if isinstance(e, kind)),
            500,
        )
        if status_code >= 500:
            logger.error("Failed to process request: %s", e, **kw)
        else:
            logger.warning("Rejected request (%s): %s", type(e).__name__, e, **kw)
        raise HTTPException(status_code=status_code, detail=e.message) from e

    except Exception as e:
        logger.error("Failed to process request: %s", e, **kw)
        raise HTTPException(status_code=500, detail=str(e)) from e
