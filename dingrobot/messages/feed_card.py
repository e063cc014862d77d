"""Feed card message builder."""

from typing import Mapping, Union

from dingrobot.messages import MessagePayload
from dingrobot.schemas.message import FeedCardRequest


def format_feed_card(req: Union[FeedCardRequest, Mapping]) -> MessagePayload:
    if not isinstance(req, FeedCardRequest):
        req = FeedCardRequest.model_validate(req)
    return MessagePayload(msgtype="feedCard", content=req.wire())
