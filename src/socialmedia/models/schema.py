from sqlmodel import Field, SQLModel


class Account(SQLModel, table=True):
    account_id: int | None = Field(default=None, primary_key=True)
    username: str = Field(..., unique=True, index=True, description="Unique username")
    password: str = Field(..., description="Plain-text password, compared for equality")


class Message(SQLModel, table=True):
    message_id: int | None = Field(default=None, primary_key=True)
    posted_by: int = Field(
        ...,
        foreign_key="account.account_id",
        index=True,
        description="Foreign key to Account.account_id (author)",
    )
    message_text: str = Field(..., description="Message body")
    time_posted_epoch: int = Field(..., description="Caller-supplied posting timestamp")
