"""Markdown message builder."""

from typing import Mapping, Optional, Union

from dingrobot.messages import MessagePayload
from dingrobot.schemas.message import MarkdownRequest


def format_markdown(
    arg1: Union[str, MarkdownRequest, Mapping],
    arg2: Optional[str] = None,
) -> MessagePayload:
    """
    Build a markdown message.

    Call as ``format_markdown(title, text)`` or with a single request
    carrying ``title``, ``text`` and optional ``at`` mentions.
    """
    if isinstance(arg1, str):
        if arg2 is None:
            raise TypeError("markdown shorthand requires both title and text")
        req = MarkdownRequest(title=arg1, text=arg2)
    elif isinstance(arg1, MarkdownRequest):
        req = arg1
    else:
        req = MarkdownRequest.model_validate(arg1)

    return MessagePayload(msgtype="markdown", content=req.wire())
