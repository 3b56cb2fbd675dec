from fastapi import APIRouter

from socialmedia.models.requests import AccountResponse, LoginRequest, RegisterAccount
from socialmedia.shared import Logger
from socialmedia.shared.http import rules_error_handler

from .dependencies import AccountRulesDep

logger = Logger(__name__).get_logger()

router = APIRouter()


@router.post("/register", response_model=AccountResponse)
async def register(data: RegisterAccount, accounts: AccountRulesDep):
    """
    Register a new account.

    username must be non-blank and unused; password must be at least
    four characters. Any rejection is a 400.
    """
    logger.debug("Register request for username: %s", data.username)

    with rules_error_handler():
        account = accounts.register(data.to_account())

    return AccountResponse.model_validate(account)


@router.post("/login", response_model=AccountResponse)
async def login(data: LoginRequest, accounts: AccountRulesDep):
    """Check credentials. No session or token is issued."""
    with rules_error_handler():
        account = accounts.login(data.username, data.password)

    return AccountResponse.model_validate(account)
