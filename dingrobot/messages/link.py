"""Link message builder."""

from typing import Mapping, Union

from dingrobot.messages import MessagePayload
from dingrobot.schemas.message import LinkRequest


def format_link(req: Union[LinkRequest, Mapping]) -> MessagePayload:
    if not isinstance(req, LinkRequest):
        req = LinkRequest.model_validate(req)
    return MessagePayload(msgtype="link", content=req.wire())
