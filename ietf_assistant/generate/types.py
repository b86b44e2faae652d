# Typed value objects shared by the completion proxy and its clients.

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


@dataclass
class Message:
    """Single chat turn: system or user."""
    role: str
    content: str


@dataclass
class ModelParams:
    """Generation parameters sent upstream."""
    temperature: float = 0.2
    max_tokens: int = 512


@dataclass
class ChatRequest:
    """Validated client payload."""
    prompt: str
    audience: Optional[str] = None


@dataclass
class UpstreamReply:
    """Raw gateway response: status code plus body text."""
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class ErrorKind(str, Enum):
    INVALID_INPUT = "InvalidInput"
    MISCONFIGURED = "Misconfigured"
    UPSTREAM_ERROR = "UpstreamError"
    UNEXPECTED_ERROR = "UnexpectedError"


ERROR_STATUS = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.MISCONFIGURED: 500,
    ErrorKind.UPSTREAM_ERROR: 502,
    ErrorKind.UNEXPECTED_ERROR: 500,
}


@dataclass(frozen=True)
class CompletionResult:
    """Outcome of one proxied chat call.

    Exactly one of ``content`` / ``kind`` is set. ``error`` is the
    human-readable category, ``detail`` optional diagnostics.
    """
    content: Optional[str] = None
    kind: Optional[ErrorKind] = None
    error: Optional[str] = None
    detail: Optional[str] = None

    @classmethod
    def success(cls, content: str) -> "CompletionResult":
        return cls(content=content)

    @classmethod
    def failure(cls, kind: ErrorKind, error: str, detail: Optional[str] = None) -> "CompletionResult":
        return cls(kind=kind, error=error, detail=detail)

    @property
    def ok(self) -> bool:
        return self.kind is None

    @property
    def status_code(self) -> int:
        return 200 if self.kind is None else ERROR_STATUS[self.kind]

    def to_payload(self) -> Dict[str, Any]:
        if self.kind is None:
            return {"content": self.content}
        body: Dict[str, Any] = {"error": self.error}
        if self.detail is not None:
            body["detail"] = self.detail
        return body
