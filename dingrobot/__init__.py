"""
dingrobot - send messages to DingTalk custom group robots.

- Robot: text, markdown, link, action card and feed card messages
- Dispatcher: signed requests, retries, response envelope checks
"""

from dingrobot.config import RobotConfig, RobotSettings
from dingrobot.dispatcher import Dispatcher
from dingrobot.errors import RemoteRejectedError, RobotError, TransportError
from dingrobot.messages import MessagePayload
from dingrobot.retry import FailureKind, RetryPolicy
from dingrobot.robot import Robot
from dingrobot.security import sign

__all__ = [
    "Dispatcher",
    "FailureKind",
    "MessagePayload",
    "RemoteRejectedError",
    "RetryPolicy",
    "Robot",
    "RobotConfig",
    "RobotError",
    "RobotSettings",
    "TransportError",
    "sign",
]
