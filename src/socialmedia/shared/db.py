from sqlalchemy import Engine
from sqlmodel import SQLModel, create_engine

from socialmedia.models.schema import *  # noqa: F403 # SQLModel subclasses need to be in memory
from socialmedia.shared import Logger, load_config

logger = Logger(__name__).get_logger()

config = load_config()


def build_engine(url: str, echo: bool = False) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # Requests are served from a threadpool
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=echo, connect_args=connect_args)


def init_db(target: Engine) -> None:
    SQLModel.metadata.create_all(target)


engine: Engine = build_engine(config.database.path, echo=config.database.echo)
init_db(engine)
logger.debug("Database ready at %s", config.database.path)
