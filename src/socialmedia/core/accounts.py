from socialmedia.models.schema import Account
from socialmedia.shared import Logger

from .errors import AuthenticationError, ConflictError, ValidationError
from .gateway import AccountGateway
from .guard import storage_guard

logger = Logger(__name__).get_logger()

PASSWORD_MIN_LENGTH = 4


class AccountRules:
    """
    Gatekeeper for account state changes.

    Sole authority on username uniqueness and credential validity. Holds
    nothing but the gateway, so one instance can serve concurrent requests.
    """

    def __init__(self, gateway: AccountGateway) -> None:
        self._gateway = gateway

    def get_by_id(self, account_id: int) -> Account | None:
        logger.info("Fetching account with ID: %s", account_id)
        with storage_guard(logger, "fetching account"):
            return self._gateway.get_by_id(account_id)

    def get_all(self) -> list[Account]:
        logger.info("Fetching all accounts")
        with storage_guard(logger, "fetching all accounts"):
            return self._gateway.get_all()

    def find_by_username(self, username: str) -> Account | None:
        logger.info("Finding account by username: %s", username)
        with storage_guard(logger, "finding account by username"):
            return self._gateway.find_by_username(username)

    def exists(self, account_id: int) -> bool:
        logger.info("Checking existence of account with ID: %s", account_id)
        return self.get_by_id(account_id) is not None

    def register(self, candidate: Account) -> Account:
        logger.info("Registering account: %s", candidate.username)
        self._validate(candidate)

        # Not atomic with the insert; the unique index catches a lost race
        with storage_guard(logger, "checking username uniqueness"):
            taken = self._gateway.username_exists(candidate.username)
        if taken:
            logger.warning("Username already taken: %s", candidate.username)
            raise ConflictError(f"Username {candidate.username!r} already exists")

        with storage_guard(logger, "creating account"):
            created = self._gateway.insert(candidate)

        logger.info("Registered account %s with ID %s", created.username, created.account_id)
        return created

    def login(self, username: str, password: str) -> Account:
        logger.info("Validating login for username: %s", username)
        account = self.find_by_username(username)
        if account is None or account.password != password:
            logger.warning("Rejected login for username: %s", username)
            raise AuthenticationError()
        return account

    def update(self, account: Account) -> bool:
        """
        Overwrite an account after re-running the registration field checks.

        Uniqueness is not re-checked here, so renaming onto an existing
        username is only stopped by the store's unique index.
        """
        logger.info("Updating account with ID: %s", account.account_id)
        self._validate(account)
        with storage_guard(logger, "updating account"):
            return self._gateway.update(account)

    def delete(self, account: Account) -> bool:
        logger.info("Deleting account with ID: %s", account.account_id)
        if account.account_id is None or account.account_id <= 0:
            raise ValidationError("Account ID must be a positive integer")
        with storage_guard(logger, "deleting account"):
            return self._gateway.delete(account)

    @staticmethod
    def _validate(account: Account) -> None:
        username = (account.username or "").strip()
        password = (account.password or "").strip()

        if not username:
            raise ValidationError("Username cannot be empty")
        if not password:
            raise ValidationError("Password cannot be empty")
        if len(password) < PASSWORD_MIN_LENGTH:
            raise ValidationError(
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
            )
