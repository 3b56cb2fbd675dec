import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from socialmedia.core import AccountRules, MessageRules
from socialmedia.main import create_app
from socialmedia.models.schema import Account
from socialmedia.persistence import SqlAccountGateway, SqlMessageGateway
from socialmedia.routers.dependencies import get_account_rules, get_message_rules
from socialmedia.shared.db import init_db

from fakes import InMemoryAccountGateway, InMemoryMessageGateway


@pytest.fixture
def account_gateway():
    return InMemoryAccountGateway()


@pytest.fixture
def message_gateway():
    return InMemoryMessageGateway()


@pytest.fixture
def accounts(account_gateway):
    return AccountRules(account_gateway)


@pytest.fixture
def messages(message_gateway, accounts):
    return MessageRules(message_gateway, accounts)


@pytest.fixture
def bob(accounts):
    return accounts.register(Account(username="bob", password="password"))


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def client(engine):
    app = create_app(rate_limit=False)

    def account_rules():
        return AccountRules(SqlAccountGateway(engine))

    def message_rules():
        return MessageRules(SqlMessageGateway(engine), account_rules())

    app.dependency_overrides[get_account_rules] = account_rules
    app.dependency_overrides[get_message_rules] = message_rules

    with TestClient(app) as test_client:
        yield test_client
