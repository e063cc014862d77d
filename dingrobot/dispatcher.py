"""Signed, retried delivery of robot messages."""

import asyncio
import logging
from typing import Awaitable, Callable, Mapping, Optional, Union

import httpx

from dingrobot.config import RobotConfig
from dingrobot.errors import RemoteRejectedError, TransportError
from dingrobot.messages import MessagePayload
from dingrobot.retry import RetryPolicy, classify_exception, classify_status
from dingrobot.security import current_millis, sign

logger = logging.getLogger(__name__)

# Truncation for response bodies carried on errors
_MAX_BODY_CHARS = 200


class Dispatcher:
    """
    Posts message payloads to a single robot endpoint.

    Without a resolvable endpoint the dispatcher is disabled for good and
    every send is a silent no-op.
    """

    def __init__(
        self,
        config: RobotConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        policy: Optional[RetryPolicy] = None,
        clock: Callable[[], int] = current_millis,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._config = config
        self._policy = policy or RetryPolicy(max_retries=config.max_retries)
        self._clock = clock
        self._sleep = sleep
        self._timeout = httpx.Timeout(config.timeout_ms / 1000)
        self._client: Optional[httpx.AsyncClient] = None

        if not config.enabled:
            logger.warning("url is empty, all operations will ignore")
            return

        self._client = httpx.AsyncClient(
            timeout=self._timeout,
            follow_redirects=False,
            transport=transport,
        )

    @property
    def config(self) -> RobotConfig:
        return self._config

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    @property
    def enabled(self) -> bool:
        return self._client is not None

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()

    async def __aenter__(self) -> "Dispatcher":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def send(self, payload: Union[MessagePayload, Mapping]) -> None:
        """
        Deliver one message.

        Raises:
            TransportError: no 2xx response within the retry budget, or a
                failure the policy does not retry (4xx, 3xx).
            RemoteRejectedError: 2xx response whose envelope has
                ``errcode != 0``.
        """
        if self._client is None:
            return

        if not isinstance(payload, MessagePayload):
            payload = MessagePayload.from_dict(dict(payload))
        body = payload.to_json()

        now = self._clock()
        params: dict[str, str] = {}
        if self._config.secret:
            params["timestamp"] = str(now)
            params["sign"] = sign(self._config.secret, now)

        attempt = 0
        while True:
            attempt += 1
            # Cache buster, refreshed on every attempt
            cache_bust = now if attempt == 1 else self._clock()
            url = self._build_url({**params, "_": str(cache_bust)})

            try:
                response = await self._client.post(
                    url,
                    content=body,
                    headers={"Content-Type": "application/json"},
                    timeout=self._timeout,
                )
            except httpx.RequestError as exc:
                error = TransportError(
                    classify_exception(exc),
                    f"request dingtalk fail: {exc!r}",
                    attempts=attempt,
                )
                cause: Optional[BaseException] = exc
            else:
                kind = classify_status(response.status_code)
                if kind is None:
                    break
                text = response.text[:_MAX_BODY_CHARS]
                error = TransportError(
                    kind,
                    f"request dingtalk fail, status {response.status_code}: {text}",
                    attempts=attempt,
                    status_code=response.status_code,
                    response_text=text,
                )
                cause = None

            if not self._policy.should_retry(error.kind, attempt):
                raise error from cause

            delay = self._policy.delay_for(attempt)
            logger.warning(
                "Robot %s %s failure on attempt %d, retrying in %.1fs",
                payload.msgtype, error.kind.value, attempt, delay,
            )
            await self._sleep(delay)

        self._check_envelope(response)
        logger.debug("Robot %s message delivered after %d attempt(s)", payload.msgtype, attempt)

    def _build_url(self, params: Mapping[str, str]) -> str:
        # sign is already percent-encoded and must not be encoded again
        endpoint = self._config.endpoint
        query = "&".join(f"{k}={v}" for k, v in params.items())
        sep = "&" if "?" in endpoint else "?"
        return f"{endpoint}{sep}{query}"

    @staticmethod
    def _check_envelope(response: httpx.Response) -> None:
        try:
            data = response.json()
        except ValueError:
            data = None

        if not isinstance(data, dict) or not isinstance(data.get("errcode"), int):
            raise RemoteRejectedError(None, response.text[:_MAX_BODY_CHARS])

        errcode = data["errcode"]
        if errcode != 0:
            raise RemoteRejectedError(errcode, str(data.get("errmsg", "")))
