from socialmedia.models.schema import Account

from .serde_base import SerdeBase


class RegisterAccount(SerdeBase):
    username: str | None = None
    password: str | None = None

    def to_account(self, account_id: int | None = None) -> Account:
        return Account(
            account_id=account_id,
            username=self.username or "",
            password=self.password or "",
        )


class LoginRequest(SerdeBase):
    username: str = ""
    password: str = ""


class AccountResponse(SerdeBase):
    account_id: int
    username: str
    password: str


class DeleteAccountResponse(SerdeBase):
    deleted: bool
