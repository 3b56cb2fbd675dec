from typing import Protocol, TypeVar

from socialmedia.models.schema import Account, Message

T = TypeVar("T")


class CrudGateway(Protocol[T]):
    """
    CRUD contract the persistence layer provides for one entity type.

    Implementations raise ``StorageError`` for any underlying failure.
    """

    def get_by_id(self, entity_id: int) -> T | None: ...

    def get_all(self) -> list[T]: ...

    def insert(self, entity: T) -> T:
        """Persist ``entity`` and return a copy carrying its assigned id."""
        ...

    def update(self, entity: T) -> bool:
        """Overwrite the stored row; False when no row matched the id."""
        ...

    def delete(self, entity: T) -> bool:
        """Remove the stored row; False when no row matched the id."""
        ...


class AccountGateway(CrudGateway[Account], Protocol):
    def find_by_username(self, username: str) -> Account | None: ...

    def username_exists(self, username: str) -> bool: ...


class MessageGateway(CrudGateway[Message], Protocol):
    def get_messages_by_account_id(self, account_id: int) -> list[Message]: ...
