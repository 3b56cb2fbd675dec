from fastapi import APIRouter, HTTPException

from socialmedia.core import NotFoundError
from socialmedia.models.requests import (
    AccountResponse,
    DeleteAccountResponse,
    MessageResponse,
    RegisterAccount,
)
from socialmedia.models.schema import Account
from socialmedia.shared import Logger
from socialmedia.shared.http import rules_error_handler

from .dependencies import AccountRulesDep, MessageRulesDep

logger = Logger(__name__).get_logger()

router = APIRouter()


@router.get("/accounts", response_model=list[AccountResponse])
async def list_accounts(accounts: AccountRulesDep):
    with rules_error_handler():
        return [AccountResponse.model_validate(a) for a in accounts.get_all()]


@router.get("/accounts/{account_id}", response_model=AccountResponse)
async def get_account(account_id: int, accounts: AccountRulesDep):
    with rules_error_handler():
        account = accounts.get_by_id(account_id)

    if account is None:
        raise HTTPException(status_code=404, detail=f"Account {account_id} not found")
    return AccountResponse.model_validate(account)


@router.put("/accounts/{account_id}", response_model=AccountResponse)
async def update_account(
    account_id: int, data: RegisterAccount, accounts: AccountRulesDep
):
    """Replace username and password of an existing account."""
    account: Account = data.to_account(account_id=account_id)

    with rules_error_handler({NotFoundError: 404}):
        if not accounts.update(account):
            raise NotFoundError("Account", account_id)

    return AccountResponse.model_validate(account)


@router.delete("/accounts/{account_id}", response_model=DeleteAccountResponse)
async def delete_account(account_id: int, accounts: AccountRulesDep):
    with rules_error_handler():
        deleted = accounts.delete(Account(account_id=account_id, username="", password=""))

    logger.info("Delete of account %s: %s", account_id, "done" if deleted else "no such row")
    return DeleteAccountResponse(deleted=deleted)


@router.get("/accounts/{account_id}/messages", response_model=list[MessageResponse])
async def list_account_messages(account_id: int, messages: MessageRulesDep):
    with rules_error_handler():
        return [
            MessageResponse.model_validate(m)
            for m in messages.get_by_account_id(account_id)
        ]
