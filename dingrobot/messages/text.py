"""Plain text message builder."""

from typing import Mapping, Union

from dingrobot.messages import MessagePayload
from dingrobot.schemas.message import TextRequest


def format_text(arg: Union[str, TextRequest, Mapping]) -> MessagePayload:
    """
    Build a text message.

    Accepts the content string alone, or a request with ``content`` and
    optional ``at`` mentions.
    """
    if isinstance(arg, str):
        req = TextRequest(content=arg)
    elif isinstance(arg, TextRequest):
        req = arg
    else:
        req = TextRequest.model_validate(arg)

    return MessagePayload(msgtype="text", content=req.wire())
