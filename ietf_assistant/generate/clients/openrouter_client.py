# Client for the OpenRouter chat-completions endpoint.
# One POST per call: no retries, no streaming.

from typing import Any, Dict, List, Optional

import requests

from ..types import Message, ModelParams, UpstreamReply

DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
CLIENT_TITLE = "IETF AI Assistant"


class OpenRouterClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        site_url: str = "http://localhost:3000",
        title: str = CLIENT_TITLE,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.site_url = site_url
        self.title = title
        self.timeout = timeout
        # only set by tests; the default path opens a fresh connection per call
        self.session = session

    @property
    def url(self) -> str:
        return f"{self.base_url}/chat/completions"

    def headers(self, api_key: str) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": self.site_url,
            "X-Title": self.title,
        }

    def build_payload(self, model: str, messages: List[Message], params: ModelParams) -> Dict[str, Any]:
        return {
            "model": model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
            "temperature": params.temperature,
            "max_tokens": params.max_tokens,
        }

    def generate(self, api_key: str, model: str, messages: List[Message], params: ModelParams) -> UpstreamReply:
        post = self.session.post if self.session is not None else requests.post
        resp = post(
            self.url,
            json=self.build_payload(model, messages, params),
            headers=self.headers(api_key),
            timeout=self.timeout,
        )
        return UpstreamReply(status_code=resp.status_code, text=resp.text)
