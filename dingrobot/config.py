from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings

from dingrobot.validate import validate_webhook_url

ROBOT_SEND_URL = "https://oapi.dingtalk.com/robot/send"


class RobotConfig(BaseModel):
    """Endpoint configuration, fixed for the lifetime of a dispatcher."""

    model_config = ConfigDict(frozen=True)

    url: Optional[str] = None
    access_token: Optional[str] = None
    secret: Optional[str] = None
    timeout_ms: int = Field(3000, gt=0)
    max_retries: int = Field(10, ge=0)

    @field_validator("url", "access_token", "secret", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        err = validate_webhook_url(value)
        if err:
            raise ValueError(err)
        return value

    @property
    def endpoint(self) -> Optional[str]:
        # An access token always wins over an explicit url.
        if self.access_token:
            return f"{ROBOT_SEND_URL}?access_token={self.access_token}"
        return self.url

    @property
    def enabled(self) -> bool:
        return self.endpoint is not None


class RobotSettings(BaseSettings):
    url: str = ""
    access_token: str = ""
    secret: str = ""

    timeout_ms: int = 3000
    max_retries: int = 10

    # Only used by scripts that configure logging themselves
    log_level: str = "INFO"

    model_config = {"env_prefix": "DINGTALK_", "env_file": ".env", "extra": "ignore"}

    def robot_config(self) -> RobotConfig:
        return RobotConfig(
            url=self.url,
            access_token=self.access_token,
            secret=self.secret,
            timeout_ms=self.timeout_ms,
            max_retries=self.max_retries,
        )
