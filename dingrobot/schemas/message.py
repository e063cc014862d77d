"""Pydantic schemas for robot message requests.

Attribute names are snake_case; the wire names the robot expects are set as
aliases and are accepted on input as well.
"""

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Request(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class _PassThroughRequest(_Request):
    # Unknown keys are kept and sent unchanged.
    model_config = ConfigDict(populate_by_name=True, extra="allow")


# ---------------------------------------------------------------------------
# Text / Markdown
# ---------------------------------------------------------------------------

class Mentions(_Request):
    at_mobiles: Optional[list[str]] = Field(None, alias="atMobiles")
    at_user_ids: Optional[list[str]] = Field(None, alias="atUserIds")
    is_at_all: Optional[bool] = Field(None, alias="isAtAll")


class TextRequest(_Request):
    content: str
    at: Optional[Mentions] = None


class MarkdownRequest(_Request):
    title: str
    text: str
    at: Optional[Mentions] = None


# ---------------------------------------------------------------------------
# Link
# ---------------------------------------------------------------------------

class LinkRequest(_PassThroughRequest):
    title: str
    text: str
    message_url: str = Field(..., alias="messageUrl")
    pic_url: Optional[str] = Field(None, alias="picUrl")


# ---------------------------------------------------------------------------
# Action card
# ---------------------------------------------------------------------------

class ActionCardButton(_PassThroughRequest):
    title: str
    action_url: str = Field(..., alias="actionURL")


class SingleActionCardRequest(_PassThroughRequest):
    """Card with one default action covering the whole card."""

    title: str
    text: str
    single_title: str = Field(..., alias="singleTitle")
    single_url: str = Field(..., alias="singleURL")


class MultiActionCardRequest(_PassThroughRequest):
    """Card with its own row (``"0"``) or column (``"1"``) of buttons."""

    title: str
    text: str
    btn_orientation: Literal["0", "1"] = Field(..., alias="btnOrientation")
    btns: list[ActionCardButton]


ActionCardRequest = Union[SingleActionCardRequest, MultiActionCardRequest]


# ---------------------------------------------------------------------------
# Feed card
# ---------------------------------------------------------------------------

class FeedCardLink(_PassThroughRequest):
    title: str
    message_url: str = Field(..., alias="messageURL")
    pic_url: str = Field(..., alias="picURL")


class FeedCardRequest(_PassThroughRequest):
    links: list[FeedCardLink]
