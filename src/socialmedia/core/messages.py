from socialmedia.models.schema import Account, Message
from socialmedia.shared import Logger

from .accounts import AccountRules
from .errors import AuthorizationError, NotFoundError, ValidationError
from .gateway import MessageGateway
from .guard import storage_guard

logger = Logger(__name__).get_logger()

MESSAGE_MAX_LENGTH = 254


class MessageRules:
    """
    Gatekeeper for message content and authorship.

    Only creation checks authorship. Update and delete act on whatever id
    they are handed; the caller is expected to have authorized the request.
    """

    def __init__(self, gateway: MessageGateway, accounts: AccountRules) -> None:
        self._gateway = gateway
        self._accounts = accounts

    def find_by_id(self, message_id: int) -> Message | None:
        """Return the message, or None when no such message exists."""
        logger.info("Looking up message with ID: %s", message_id)
        with storage_guard(logger, "fetching message"):
            return self._gateway.get_by_id(message_id)

    def get_by_id(self, message_id: int) -> Message:
        """Return the message, raising NotFoundError when it does not exist."""
        message = self.find_by_id(message_id)
        if message is None:
            logger.warning("Message with ID %s not found", message_id)
            raise NotFoundError("Message", message_id)
        return message

    def get_all(self) -> list[Message]:
        logger.info("Fetching all messages")
        with storage_guard(logger, "fetching all messages"):
            return self._gateway.get_all()

    def get_by_account_id(self, account_id: int) -> list[Message]:
        logger.info("Fetching messages posted by account ID: %s", account_id)
        with storage_guard(logger, "fetching messages by account"):
            return self._gateway.get_messages_by_account_id(account_id)

    def create(self, draft: Message, author: Account | None) -> Message:
        logger.info("Creating message posted by account ID: %s", draft.posted_by)

        if author is None:
            raise AuthorizationError("Account must exist when posting a new message")
        self._validate_text(draft.message_text)
        if author.account_id != draft.posted_by:
            logger.warning(
                "Account %s tried to post as account %s",
                author.account_id,
                draft.posted_by,
            )
            raise AuthorizationError("Account not authorized to post this message")

        with storage_guard(logger, "creating message"):
            return self._gateway.insert(draft)

    def post(self, draft: Message) -> Message:
        """Create ``draft`` on behalf of the account named by its ``posted_by``."""
        author = self._accounts.get_by_id(draft.posted_by)
        return self.create(draft, author)

    def update(self, patch: Message) -> Message:
        logger.info("Updating message with ID: %s", patch.message_id)
        existing = self.get_by_id(patch.message_id)

        # posted_by and time_posted_epoch are fixed at creation
        existing.message_text = patch.message_text
        self._validate_text(existing.message_text)

        with storage_guard(logger, "updating message"):
            updated = self._gateway.update(existing)
        if not updated:
            # Deleted between the lookup and the write
            raise NotFoundError("Message", patch.message_id)
        return existing

    def delete(self, message: Message) -> bool:
        logger.info("Deleting message with ID: %s", message.message_id)
        with storage_guard(logger, "deleting message"):
            deleted = self._gateway.delete(message)
        if not deleted:
            logger.info("Message with ID %s was already absent", message.message_id)
        return deleted

    @staticmethod
    def _validate_text(text: str | None) -> None:
        if text is None or not text.strip():
            raise ValidationError("Message text cannot be empty")
        if len(text) > MESSAGE_MAX_LENGTH:
            raise ValidationError(
                f"Message text cannot exceed {MESSAGE_MAX_LENGTH} characters"
            )
