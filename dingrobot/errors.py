"""Exceptions raised by robot message delivery."""

from typing import Optional

from dingrobot.retry import FailureKind


class RobotError(Exception):
    """Base class for delivery failures."""


class TransportError(RobotError):
    """
    The request never produced a 2xx response.

    Raised once the retry budget is spent, or immediately for failures the
    retry policy does not cover (4xx, unexpected status codes).
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        attempts: int = 1,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.attempts = attempts
        self.status_code = status_code
        self.response_text = response_text


class RemoteRejectedError(RobotError):
    """The robot answered 2xx but reported ``errcode != 0``."""

    def __init__(self, errcode: Optional[int], errmsg: str):
        super().__init__(
            f"request dingtalk fail, errorcode '{errcode}', errormsg '{errmsg}'"
        )
        self.errcode = errcode
        self.errmsg = errmsg
