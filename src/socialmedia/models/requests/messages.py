from socialmedia.models.schema import Message

from .serde_base import SerdeBase


class CreateMessageRequest(SerdeBase):
    posted_by: int
    message_text: str | None = None
    time_posted_epoch: int = 0

    def to_message(self) -> Message:
        return Message(
            posted_by=self.posted_by,
            message_text=self.message_text or "",
            time_posted_epoch=self.time_posted_epoch,
        )


class UpdateMessageRequest(SerdeBase):
    # Only the text is applied; other fields are accepted and ignored
    message_text: str | None = None


class MessageResponse(SerdeBase):
    message_id: int
    posted_by: int
    message_text: str
    time_posted_epoch: int
