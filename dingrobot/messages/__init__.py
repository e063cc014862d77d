"""Base types for robot message builders."""

import json
from dataclasses import dataclass
from typing import Any


def _drop_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _drop_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_drop_none(v) for v in value]
    return value


@dataclass(frozen=True)
class MessagePayload:
    """A message ready for the robot: ``{"msgtype": ..., <msgtype>: content}``."""
    msgtype: str
    content: dict

    def to_dict(self) -> dict:
        return {"msgtype": self.msgtype, self.msgtype: _drop_none(self.content)}

    def to_json(self) -> bytes:
        return json.dumps(
            self.to_dict(), ensure_ascii=False, separators=(",", ":")
        ).encode("utf-8")

    @classmethod
    def from_dict(cls, data: dict) -> "MessagePayload":
        """Wrap an already shaped ``{"msgtype": ..., ...}`` mapping."""
        msgtype = data.get("msgtype")
        if not isinstance(msgtype, str) or not msgtype:
            raise ValueError("payload requires a msgtype")
        content = data.get(msgtype)
        if not isinstance(content, dict):
            raise ValueError(f"payload is missing the '{msgtype}' object")
        return cls(msgtype=msgtype, content=content)
