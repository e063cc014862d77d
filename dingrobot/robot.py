"""Robot facade: one coroutine per message type."""

from typing import Mapping, Optional, Union

from dingrobot.config import RobotConfig, RobotSettings
from dingrobot.dispatcher import Dispatcher
from dingrobot.messages import MessagePayload
from dingrobot.messages.action_card import format_action_card
from dingrobot.messages.feed_card import format_feed_card
from dingrobot.messages.link import format_link
from dingrobot.messages.markdown import format_markdown
from dingrobot.messages.text import format_text
from dingrobot.schemas.message import (
    ActionCardRequest,
    FeedCardRequest,
    LinkRequest,
    MarkdownRequest,
    TextRequest,
)


class Robot:
    """
    Send messages to a custom group robot.

    Usage:
        async with Robot(access_token="...", secret="SEC...") as robot:
            await robot.text("deploy finished")
            await robot.markdown("Deploy", "**api** is live")
    """

    def __init__(
        self,
        config: Optional[RobotConfig] = None,
        *,
        dispatcher: Optional[Dispatcher] = None,
        **options,
    ):
        if dispatcher is None:
            if config is None:
                config = RobotConfig(**options)
            elif options:
                raise TypeError("pass either a RobotConfig or keyword options, not both")
            dispatcher = Dispatcher(config)
        self._dispatcher = dispatcher

    @classmethod
    def from_settings(cls, settings: Optional[RobotSettings] = None) -> "Robot":
        """Build from DINGTALK_* settings, read from the environment now if not given."""
        if settings is None:
            settings = RobotSettings()
        return cls(settings.robot_config())

    @property
    def enabled(self) -> bool:
        return self._dispatcher.enabled

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    async def aclose(self) -> None:
        await self._dispatcher.aclose()

    async def __aenter__(self) -> "Robot":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def send(self, payload: Union[MessagePayload, Mapping]) -> None:
        await self._dispatcher.send(payload)

    async def text(self, arg: Union[str, TextRequest, Mapping]) -> None:
        await self.send(format_text(arg))

    async def markdown(
        self,
        arg1: Union[str, MarkdownRequest, Mapping],
        arg2: Optional[str] = None,
    ) -> None:
        await self.send(format_markdown(arg1, arg2))

    async def link(self, req: Union[LinkRequest, Mapping]) -> None:
        await self.send(format_link(req))

    async def action_card(self, req: Union[ActionCardRequest, Mapping]) -> None:
        await self.send(format_action_card(req))

    async def feed_card(self, req: Union[FeedCardRequest, Mapping]) -> None:
        await self.send(format_feed_card(req))
