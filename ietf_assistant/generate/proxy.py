# Completion proxy: validate -> build prompt -> one upstream call -> map result.
#
# Never raises for request-level problems; every failure comes back as a
# CompletionResult carrying its kind, message and HTTP status.

from __future__ import annotations
import json
import logging
from typing import Any, List, Optional, Union

from ietf_assistant.settings import Settings
from .clients.openrouter_client import OpenRouterClient
from .prompts import build_system_prompt
from .types import ChatRequest, CompletionResult, ErrorKind, Message, ModelParams

logger = logging.getLogger("ietf_assistant.proxy")

MISSING_PROMPT = "Missing prompt"
MISCONFIGURED = "Server is not configured with OPENROUTER_API_KEY"
UPSTREAM_ERROR = "OpenRouter error"
UNEXPECTED_ERROR = "Unexpected server error"


def parse_chat_request(body: Any) -> Optional[ChatRequest]:
    """Return a ChatRequest, or None when there is no usable prompt."""
    if not isinstance(body, dict):
        return None
    prompt = body.get("prompt")
    if not prompt or not isinstance(prompt, str):
        return None
    audience = body.get("audience")
    if not isinstance(audience, str):
        audience = None
    return ChatRequest(prompt=prompt, audience=audience or None)


def extract_content(data: Any) -> str:
    """choices[0].message.content, or "" when any step of the path is missing."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    return content if isinstance(content, str) else ""


class CompletionProxy:
    def __init__(self, settings: Settings, client: Optional[OpenRouterClient] = None):
        self.settings = settings
        self.client = client or OpenRouterClient(
            base_url=settings.OPENROUTER_BASE_URL,
            site_url=settings.OPENROUTER_SITE_URL,
            timeout=settings.OPENROUTER_TIMEOUT,
        )
        self.params = ModelParams(temperature=0.2, max_tokens=512)

    def build_messages(self, req: ChatRequest) -> List[Message]:
        return [
            Message(role="system", content=build_system_prompt(req.audience)),
            Message(role="user", content=req.prompt),
        ]

    def handle(self, raw: Union[bytes, str]) -> CompletionResult:
        """Decode a raw request body and run it through `complete`."""
        try:
            body = json.loads(raw)
        except Exception as e:
            logger.warning("Chat request body is not valid JSON: %s", e)
            return CompletionResult.failure(ErrorKind.UNEXPECTED_ERROR, UNEXPECTED_ERROR, str(e))
        return self.complete(body)

    def complete(self, body: Any) -> CompletionResult:
        """Run one chat exchange for an already-decoded JSON body."""
        try:
            req = parse_chat_request(body)
            if req is None:
                return CompletionResult.failure(ErrorKind.INVALID_INPUT, MISSING_PROMPT)

            if not self.settings.has_api_key:
                logger.error("Chat request rejected: OPENROUTER_API_KEY is not set")
                return CompletionResult.failure(ErrorKind.MISCONFIGURED, MISCONFIGURED)

            model = self.settings.OPENROUTER_MODEL or "openrouter/auto"
            logger.info("Forwarding chat: model=%s audience=%s", model, req.audience or "-")
            reply = self.client.generate(
                api_key=self.settings.OPENROUTER_API_KEY,
                model=model,
                messages=self.build_messages(req),
                params=self.params,
            )

            if not reply.ok:
                logger.warning("OpenRouter returned status %s", reply.status_code)
                return CompletionResult.failure(ErrorKind.UPSTREAM_ERROR, UPSTREAM_ERROR, reply.text)

            return CompletionResult.success(extract_content(json.loads(reply.text)))
        except Exception as e:
            logger.exception("Chat completion failed")
            return CompletionResult.failure(ErrorKind.UNEXPECTED_ERROR, UNEXPECTED_ERROR, str(e))
