import pytest

from socialmedia.core import (
    AccountRules,
    AuthorizationError,
    ConflictError,
    MessageRules,
    NotFoundError,
    StorageError,
    ValidationError,
)
from socialmedia.models.schema import Account, Message

from fakes import BrokenGateway, InMemoryAccountGateway


def draft(posted_by, text="hi", epoch=1669947792):
    return Message(posted_by=posted_by, message_text=text, time_posted_epoch=epoch)


@pytest.fixture
def alice(accounts):
    return accounts.register(Account(username="alice", password="secret"))


def test_create_then_get_round_trip(messages, bob):
    created = messages.create(draft(bob.account_id), bob)

    assert created.message_id is not None
    fetched = messages.get_by_id(created.message_id)
    assert fetched.model_dump() == created.model_dump()
    assert fetched.posted_by == bob.account_id
    assert fetched.time_posted_epoch == 1669947792


def test_create_requires_author(messages, message_gateway):
    with pytest.raises(AuthorizationError):
        messages.create(draft(1), None)

    assert message_gateway.rows == {}


def test_missing_author_wins_over_bad_text(messages):
    with pytest.raises(AuthorizationError):
        messages.create(draft(1, text=""), None)


@pytest.mark.parametrize("text", ["", "   ", "\n\t", "x" * 255])
def test_create_rejects_bad_text(messages, bob, text):
    with pytest.raises(ValidationError):
        messages.create(draft(bob.account_id, text=text), bob)


def test_create_accepts_text_at_limit(messages, bob):
    created = messages.create(draft(bob.account_id, text="x" * 254), bob)
    assert len(created.message_text) == 254


def test_bad_text_wins_over_wrong_author(messages, bob, alice):
    with pytest.raises(ValidationError):
        messages.create(draft(alice.account_id, text=""), bob)


def test_account_may_only_post_as_itself(messages, message_gateway, bob, alice):
    with pytest.raises(AuthorizationError):
        messages.create(draft(alice.account_id), bob)

    assert message_gateway.rows == {}


def test_post_resolves_author(messages, bob):
    created = messages.post(draft(bob.account_id))
    assert created.posted_by == bob.account_id


def test_post_for_unknown_account(messages):
    with pytest.raises(AuthorizationError):
        messages.post(draft(9999))


def test_dual_read_modes(messages):
    assert messages.find_by_id(9999) is None
    with pytest.raises(NotFoundError) as excinfo:
        messages.get_by_id(9999)
    assert excinfo.value.identifier == 9999


def test_get_all_and_by_account(messages, bob, alice):
    messages.create(draft(bob.account_id, "one"), bob)
    messages.create(draft(bob.account_id, "two"), bob)
    messages.create(draft(alice.account_id, "three"), alice)

    assert len(messages.get_all()) == 3
    assert [m.message_text for m in messages.get_by_account_id(bob.account_id)] == ["one", "two"]
    assert messages.get_by_account_id(9999) == []


def test_update_changes_only_text(messages, bob):
    created = messages.create(draft(bob.account_id, "before"), bob)
    patch = Message(
        message_id=created.message_id,
        posted_by=12345,
        message_text="after",
        time_posted_epoch=0,
    )

    updated = messages.update(patch)

    assert updated.message_text == "after"
    stored = messages.get_by_id(created.message_id)
    assert stored.message_text == "after"
    assert stored.posted_by == bob.account_id
    assert stored.time_posted_epoch == created.time_posted_epoch


def test_update_unknown_message(messages):
    with pytest.raises(NotFoundError):
        messages.update(Message(message_id=9999, posted_by=1, message_text="hi", time_posted_epoch=0))


@pytest.mark.parametrize("text", ["", " ", "y" * 255])
def test_update_rejects_bad_text(messages, bob, text):
    created = messages.create(draft(bob.account_id, "keep me"), bob)
    patch = Message(message_id=created.message_id, posted_by=bob.account_id, message_text=text, time_posted_epoch=0)

    with pytest.raises(ValidationError):
        messages.update(patch)

    assert messages.get_by_id(created.message_id).message_text == "keep me"


def test_update_does_not_check_ownership(messages, bob, alice):
    created = messages.create(draft(bob.account_id, "bob's"), bob)
    patch = Message(message_id=created.message_id, posted_by=alice.account_id, message_text="edited", time_posted_epoch=0)

    assert messages.update(patch).posted_by == bob.account_id


def test_delete(messages, bob):
    created = messages.create(draft(bob.account_id), bob)

    assert messages.delete(created) is True
    assert messages.find_by_id(created.message_id) is None
    assert messages.delete(created) is False


def test_delete_unknown_message_returns_false(messages):
    assert messages.delete(Message(message_id=9999, posted_by=1, message_text="", time_posted_epoch=0)) is False


def test_scenario(accounts, messages):
    bob = accounts.register(Account(username="bob", password="password"))
    assert bob.account_id > 0

    with pytest.raises(ConflictError):
        accounts.register(Account(username="bob", password="other"))

    assert messages.create(draft(bob.account_id, "hi"), bob).message_id is not None
    with pytest.raises(ValidationError):
        messages.create(draft(bob.account_id, ""), bob)

    assert messages.delete(Message(message_id=9999, posted_by=bob.account_id, message_text="", time_posted_epoch=0)) is False


def test_gateway_failure_is_wrapped_as_storage_error():
    messages = MessageRules(BrokenGateway(), AccountRules(InMemoryAccountGateway()))

    with pytest.raises(StorageError) as excinfo:
        messages.get_all()

    assert excinfo.value.message == "Error occurred during fetching all messages"
    assert isinstance(excinfo.value.cause.cause, ConnectionError)


def test_get_by_id_storage_error_is_not_not_found():
    messages = MessageRules(BrokenGateway(), AccountRules(InMemoryAccountGateway()))

    with pytest.raises(StorageError):
        messages.get_by_id(1)
