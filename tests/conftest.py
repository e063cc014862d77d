from __future__ import annotations

from collections.abc import Callable, Iterable

import httpx
import pytest

from dingrobot.config import RobotConfig
from dingrobot.dispatcher import Dispatcher
from dingrobot.retry import RetryPolicy

WEBHOOK_URL = "https://robot.example.com/send?access_token=abc"


class RecordingTransport(httpx.MockTransport):
    """Mock transport replaying a script of responses or exceptions.

    Responses are given as ``(status, body)``; a dict body is sent as JSON.
    The last entry repeats once the script is exhausted.
    """

    def __init__(self, script: Iterable[tuple[int, dict | str] | Exception]) -> None:
        self.requests: list[httpx.Request] = []
        self._script = list(script)
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self._script.pop(0) if len(self._script) > 1 else self._script[0]
        if isinstance(item, Exception):
            raise item
        status, body = item
        if isinstance(body, dict):
            return httpx.Response(status, json=body)
        return httpx.Response(status, text=body)


def ok(errcode: int = 0, errmsg: str = "ok") -> tuple[int, dict]:
    return 200, {"errcode": errcode, "errmsg": errmsg}


class SleepRecorder:
    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def sleeper() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def make_dispatcher(sleeper: SleepRecorder) -> Callable[..., Dispatcher]:
    def factory(
        transport: httpx.AsyncBaseTransport,
        *,
        policy: RetryPolicy | None = None,
        clock: Callable[[], int] | None = None,
        **config,
    ) -> Dispatcher:
        config.setdefault("url", WEBHOOK_URL)
        kwargs = {"transport": transport, "policy": policy, "sleep": sleeper}
        if clock is not None:
            kwargs["clock"] = clock
        return Dispatcher(RobotConfig(**config), **kwargs)

    return factory
