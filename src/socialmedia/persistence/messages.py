from sqlalchemy import Engine
from sqlmodel import select

from socialmedia.models.schema import Message

from .session import open_session


class SqlMessageGateway:
    """SQLModel-backed implementation of ``MessageGateway``."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_by_id(self, entity_id: int) -> Message | None:
        with open_session(self._engine, f"retrieving message with ID {entity_id}") as session:
            return session.get(Message, entity_id)

    def get_all(self) -> list[Message]:
        with open_session(self._engine, "retrieving all messages") as session:
            return list(session.exec(select(Message).order_by(Message.message_id)).all())

    def get_messages_by_account_id(self, account_id: int) -> list[Message]:
        description = f"retrieving messages for account ID {account_id}"
        with open_session(self._engine, description) as session:
            return list(
                session.exec(
                    select(Message)
                    .where(Message.posted_by == account_id)
                    .order_by(Message.message_id)
                ).all()
            )

    def insert(self, entity: Message) -> Message:
        row = Message(
            posted_by=entity.posted_by,
            message_text=entity.message_text,
            time_posted_epoch=entity.time_posted_epoch,
        )
        with open_session(self._engine, "inserting message") as session:
            session.add(row)
            session.commit()
            session.refresh(row)
            return row

    def update(self, entity: Message) -> bool:
        description = f"updating message with ID {entity.message_id}"
        with open_session(self._engine, description) as session:
            row = session.get(Message, entity.message_id)
            if row is None:
                return False
            row.posted_by = entity.posted_by
            row.message_text = entity.message_text
            row.time_posted_epoch = entity.time_posted_epoch
            session.add(row)
            session.commit()
            return True

    def delete(self, entity: Message) -> bool:
        description = f"deleting message with ID {entity.message_id}"
        with open_session(self._engine, description) as session:
            row = session.get(Message, entity.message_id)
            if row is None:
                return False
            session.delete(row)
            session.commit()
            return True
