from sqlalchemy import Engine
from sqlmodel import select

from socialmedia.models.schema import Account

from .session import open_session


class SqlAccountGateway:
    """SQLModel-backed implementation of ``AccountGateway``."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_by_id(self, entity_id: int) -> Account | None:
        with open_session(self._engine, f"retrieving account with ID {entity_id}") as session:
            return session.get(Account, entity_id)

    def get_all(self) -> list[Account]:
        with open_session(self._engine, "retrieving all accounts") as session:
            return list(session.exec(select(Account).order_by(Account.account_id)).all())

    def find_by_username(self, username: str) -> Account | None:
        with open_session(self._engine, f"finding account {username!r}") as session:
            return session.exec(
                select(Account).where(Account.username == username)
            ).first()

    def username_exists(self, username: str) -> bool:
        with open_session(self._engine, f"checking username {username!r}") as session:
            found = session.exec(
                select(Account.account_id).where(Account.username == username)
            ).first()
            return found is not None

    def insert(self, entity: Account) -> Account:
        row = Account(username=entity.username, password=entity.password)
        with open_session(self._engine, "inserting account") as session:
            session.add(row)
            session.commit()
            session.refresh(row)
            return row

    def update(self, entity: Account) -> bool:
        description = f"updating account with ID {entity.account_id}"
        with open_session(self._engine, description) as session:
            row = session.get(Account, entity.account_id)
            if row is None:
                return False
            row.username = entity.username
            row.password = entity.password
            session.add(row)
            session.commit()
            return True

    def delete(self, entity: Account) -> bool:
        description = f"deleting account with ID {entity.account_id}"
        with open_session(self._engine, description) as session:
            row = session.get(Account, entity.account_id)
            if row is None:
                return False
            session.delete(row)
            session.commit()
            return True
