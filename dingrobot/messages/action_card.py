"""Action card message builder."""

from typing import Mapping, Union

from pydantic import TypeAdapter

from dingrobot.messages import MessagePayload
from dingrobot.schemas.message import (
    ActionCardRequest,
    MultiActionCardRequest,
    SingleActionCardRequest,
)

_adapter = TypeAdapter(ActionCardRequest)


def format_action_card(req: Union[ActionCardRequest, Mapping]) -> MessagePayload:
    """
    Build an action card.

    Either form is sent as given:
        - single action: title, text, singleTitle, singleURL
        - buttons: title, text, btnOrientation ("0" or "1"), btns
    """
    if not isinstance(req, (SingleActionCardRequest, MultiActionCardRequest)):
        req = _adapter.validate_python(req)
    return MessagePayload(msgtype="actionCard", content=req.wire())
