from fastapi import APIRouter, Response

from socialmedia.models.requests import (
    CreateMessageRequest,
    MessageResponse,
    UpdateMessageRequest,
)
from socialmedia.models.schema import Message
from socialmedia.shared import Logger
from socialmedia.shared.http import rules_error_handler

from .dependencies import MessageRulesDep

logger = Logger(__name__).get_logger()

router = APIRouter()


@router.post("/messages", response_model=MessageResponse)
async def create_message(data: CreateMessageRequest, messages: MessageRulesDep):
    """
    Post a message as the account in ``posted_by``.

    Fails with 400 when that account does not exist or the text is blank
    or longer than 254 characters.
    """
    with rules_error_handler():
        message = messages.post(data.to_message())

    return MessageResponse.model_validate(message)


@router.get("/messages", response_model=list[MessageResponse])
async def list_messages(messages: MessageRulesDep):
    with rules_error_handler():
        return [MessageResponse.model_validate(m) for m in messages.get_all()]


@router.get("/messages/{message_id}", response_model=MessageResponse | None)
async def get_message(message_id: int, messages: MessageRulesDep):
    # An unknown id is not an error here: 200 with an empty body
    with rules_error_handler():
        message = messages.find_by_id(message_id)

    if message is None:
        return Response(status_code=200)
    return MessageResponse.model_validate(message)


@router.patch("/messages/{message_id}", response_model=MessageResponse)
async def update_message(
    message_id: int, data: UpdateMessageRequest, messages: MessageRulesDep
):
    patch = Message(
        message_id=message_id,
        posted_by=0,
        message_text=data.message_text or "",
        time_posted_epoch=0,
    )

    with rules_error_handler():
        message = messages.update(patch)

    return MessageResponse.model_validate(message)


@router.delete("/messages/{message_id}", response_model=MessageResponse | None)
async def delete_message(message_id: int, messages: MessageRulesDep):
    """Delete a message and echo it back; 200 with an empty body if it was absent."""
    with rules_error_handler():
        message = messages.find_by_id(message_id)
        if message is None or not messages.delete(message):
            logger.debug("Nothing to delete for message ID: %s", message_id)
            return Response(status_code=200)

    return MessageResponse.model_validate(message)
