import logging
from contextlib import contextmanager

from .errors import StorageError

__all__ = ["storage_guard"]


@contextmanager
def storage_guard(logger: logging.Logger, description: str, stacklevel=1):
    """Re-raise a gateway failure as ``StorageError`` carrying ``description``."""
    # Skip the @contextmanager frames so the record points at the caller
    kw = {"stacklevel": 2 + stacklevel}
    try:
        yield

    except StorageError as e:
        message = f"Error occurred during {description}"
        logger.error("%s: %s", message, e, **kw)
        raise StorageError(message, e) from e
