from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from socialmedia.core.errors import StorageError
from socialmedia.shared import Logger

__all__ = ["open_session"]

logger = Logger(__name__).get_logger()


@contextmanager
def open_session(engine: Engine, description: str) -> Iterator[Session]:
    """
    Yield a session for a single gateway call.

    Any SQLAlchemy failure is rolled back, logged and re-raised as
    ``StorageError`` so callers never see driver exceptions.
    """
    # Go 3 levels up to escape @contextmanager and this function
    kw = {"stacklevel": 3}
    with Session(engine) as session:
        try:
            yield session

        except SQLAlchemyError as e:
            session.rollback()
            logger.error("SQL error while %s: %s", description, e, **kw)
            raise StorageError(f"Error {description}", e) from e
