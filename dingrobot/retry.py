"""Retry policy for robot requests.

Only transient failures are retried: network errors, client-side timeouts
and 5xx responses. A 4xx response or an ``errcode`` rejection is final.
"""

import enum
from dataclasses import dataclass
from typing import Optional

import httpx


class FailureKind(str, enum.Enum):
    NETWORK = "network"
    TIMEOUT = "timeout"
    SERVER_ERROR = "server_error"
    CLIENT_ERROR = "client_error"
    UNEXPECTED_STATUS = "unexpected_status"


RETRYABLE_KINDS = frozenset(
    {FailureKind.NETWORK, FailureKind.TIMEOUT, FailureKind.SERVER_ERROR}
)


@dataclass(frozen=True)
class RetryPolicy:
    max_retries: int = 10
    delay: float = 1.0

    def is_retryable(self, kind: FailureKind) -> bool:
        return kind in RETRYABLE_KINDS

    def delay_for(self, attempt: int) -> float:
        """Seconds to wait before the attempt after ``attempt``. Fixed."""
        return self.delay

    def should_retry(self, kind: FailureKind, attempt: int) -> bool:
        """``attempt`` counts from 1; the first attempt is not a retry."""
        return self.is_retryable(kind) and attempt <= self.max_retries


def classify_status(status_code: int) -> Optional[FailureKind]:
    """Return None for a 2xx status, otherwise the kind of failure."""
    if 200 <= status_code < 300:
        return None
    if status_code >= 500:
        return FailureKind.SERVER_ERROR
    if 400 <= status_code < 500:
        return FailureKind.CLIENT_ERROR
    return FailureKind.UNEXPECTED_STATUS


def classify_exception(exc: httpx.RequestError) -> FailureKind:
    """Timeouts are TIMEOUT; every other request failure, including an
    undecodable response body, is NETWORK."""
    if isinstance(exc, httpx.TimeoutException):
        return FailureKind.TIMEOUT
    return FailureKind.NETWORK
