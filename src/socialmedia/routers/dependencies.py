from typing import Annotated

from fastapi import Depends

from socialmedia.core import AccountRules, MessageRules
from socialmedia.persistence import SqlAccountGateway, SqlMessageGateway
from socialmedia.shared.db import engine

__all__ = ["AccountRulesDep", "MessageRulesDep", "get_account_rules", "get_message_rules"]


def get_account_rules() -> AccountRules:
    return AccountRules(SqlAccountGateway(engine))


def get_message_rules(
    accounts: Annotated[AccountRules, Depends(get_account_rules)],
) -> MessageRules:
    return MessageRules(SqlMessageGateway(engine), accounts)


AccountRulesDep = Annotated[AccountRules, Depends(get_account_rules)]
MessageRulesDep = Annotated[MessageRules, Depends(get_message_rules)]
