# ===============================================
# OpenRouter client: outbound request shape
# ===============================================

import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from ietf_assistant.generate import CompletionProxy
from ietf_assistant.generate.clients.openrouter_client import OpenRouterClient
from ietf_assistant.generate.types import Message, ModelParams

from conftest import make_settings


class FakeResponse:
    status_code = 200
    text = '{"choices":[]}'


class FakeSession:
    def __init__(self):
        self.calls = []

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        return FakeResponse()


def test_generate_posts_chat_completion():
    session = FakeSession()
    client = OpenRouterClient(site_url="https://example.org", session=session)
    messages = [Message("system", "sys"), Message("user", "hi")]

    reply = client.generate("sk-test", "openrouter/auto", messages, ModelParams())

    assert reply.ok
    assert reply.text == '{"choices":[]}'
    call = session.calls[0]
    assert call["url"] == "https://openrouter.ai/api/v1/chat/completions"
    assert call["headers"] == {
        "Authorization": "Bearer sk-test",
        "Content-Type": "application/json",
        "HTTP-Referer": "https://example.org",
        "X-Title": "IETF AI Assistant",
    }
    assert call["json"] == {
        "model": "openrouter/auto",
        "messages": [{"role": "system", "content": "sys"}, {"role": "user", "content": "hi"}],
        "temperature": 0.2,
        "max_tokens": 512,
    }
    assert call["timeout"] is None


def test_base_url_trailing_slash_and_timeout():
    session = FakeSession()
    client = OpenRouterClient(base_url="http://gw.local/v1/", timeout=5.0, session=session)
    client.generate("k", "m", [], ModelParams())
    assert session.calls[0]["url"] == "http://gw.local/v1/chat/completions"
    assert session.calls[0]["timeout"] == 5.0


# -----------------------------------------------
# Independent calls share no cookie state
# -----------------------------------------------

class CookieGateway(BaseHTTPRequestHandler):
    """Answers every completion with a Set-Cookie and records the Cookie it got."""
    seen = []

    def do_POST(self):
        self.rfile.read(int(self.headers.get("Content-Length", 0)))
        CookieGateway.seen.append(self.headers.get("Cookie"))
        body = b'{"choices":[{"message":{"content":"ok"}}]}'
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Set-Cookie", "session=user-A; Path=/")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture
def gateway_url():
    CookieGateway.seen = []
    server = ThreadingHTTPServer(("127.0.0.1", 0), CookieGateway)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}/api/v1"
    server.shutdown()
    server.server_close()


def test_calls_do_not_replay_upstream_cookies(gateway_url):
    proxy = CompletionProxy(make_settings(OPENROUTER_BASE_URL=gateway_url, OPENROUTER_TIMEOUT=5.0))

    first = proxy.complete({"prompt": "first caller"})
    second = proxy.complete({"prompt": "second caller"})

    assert first.to_payload() == {"content": "ok"}
    assert second.to_payload() == {"content": "ok"}
    assert CookieGateway.seen == [None, None]
    assert proxy.client.session is None
