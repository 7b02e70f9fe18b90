import json
import os
import sys
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import pytest
import requests

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("ANTHROPIC_API_KEY", "test-key")

import generation  # noqa: E402
from errors import ErrorKind, PipelineError  # noqa: E402
from models import Headshot  # noqa: E402


class FakeResponse:
    raw = None

    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self.body = json.dumps(payload).encode() if payload is not None else text.encode()
        self.closed = False

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.body), chunk_size):
            yield self.body[i : i + chunk_size]

    def close(self):
        self.closed = True


TEXT_KWARGS = dict(
    api_key="sk-test",
    base_url="https://api.example.test/v1",
    model="text-model",
    version="2023-06-01",
    max_tokens=2000,
    timeout_s=30,
)
IMAGE_KWARGS = dict(
    api_key="g-test",
    base_url="https://images.example.test/v1beta",
    model="image-model",
    aspect_ratio="16:9",
    timeout_s=60,
)


def test_text_call_shape(monkeypatch):
    captured = {}

    def fake_post(url, json=None, headers=None, timeout=None, **kwargs):
        captured.update(url=url, json=json, headers=headers, timeout=timeout, stream=kwargs.get("stream"))
        return FakeResponse(payload={"content": []})

    monkeypatch.setattr(generation.requests, "post", fake_post)
    generation.invoke_text_model("hello", **TEXT_KWARGS)

    assert captured["url"] == "https://api.example.test/v1/messages"
    assert captured["timeout"] == 30
    assert captured["stream"] is True
    assert captured["headers"]["x-api-key"] == "sk-test"
    assert captured["headers"]["anthropic-version"] == "2023-06-01"
    assert captured["json"]["max_tokens"] == 2000
    assert captured["json"]["messages"] == [{"role": "user", "content": "hello"}]


def test_image_call_puts_headshot_before_prompt(monkeypatch):
    captured = {}

    def fake_post(url, json=None, headers=None, timeout=None, **kwargs):
        captured.update(url=url, json=json, headers=headers)
        return FakeResponse(payload={"candidates": []})

    monkeypatch.setattr(generation.requests, "post", fake_post)
    generation.invoke_image_model(
        "draw it", Headshot(base64="QUJD", mime_type="image/jpeg"), **IMAGE_KWARGS
    )

    assert captured["url"] == "https://images.example.test/v1beta/models/image-model:generateContent"
    assert captured["headers"]["x-goog-api-key"] == "g-test"
    parts = captured["json"]["contents"][0]["parts"]
    assert parts[0] == {"inline_data": {"mime_type": "image/jpeg", "data": "QUJD"}}
    assert parts[1] == {"text": "draw it"}
    config = captured["json"]["generationConfig"]
    assert config["responseModalities"] == ["Image"]
    assert config["imageConfig"]["aspectRatio"] == "16:9"


def test_image_call_without_headshot_sends_text_only(monkeypatch):
    captured = {}

    def fake_post(url, json=None, headers=None, timeout=None, **kwargs):
        captured["json"] = json
        return FakeResponse(payload={})

    monkeypatch.setattr(generation.requests, "post", fake_post)
    generation.invoke_image_model("draw it", **IMAGE_KWARGS)

    assert captured["json"]["contents"][0]["parts"] == [{"text": "draw it"}]


@pytest.mark.parametrize(
    "status, kind, http_status",
    [
        (400, ErrorKind.UPSTREAM_REJECTED, 400),
        (401, ErrorKind.CONFIGURATION, 500),
        (403, ErrorKind.CONFIGURATION, 500),
        (429, ErrorKind.UPSTREAM_RATE_LIMITED, 429),
        (503, ErrorKind.UPSTREAM_ERROR, 500),
    ],
)
def test_upstream_status_classification(monkeypatch, status, kind, http_status):
    monkeypatch.setattr(
        generation.requests,
        "post",
        lambda *a, **k: FakeResponse(status_code=status, text="upstream said no: secret prompt echo"),
    )
    with pytest.raises(PipelineError) as exc:
        generation.invoke_text_model("hello", **TEXT_KWARGS)

    assert exc.value.kind == kind
    assert exc.value.status_code == http_status
    assert "secret prompt echo" not in exc.value.message


def test_service_specific_upstream_message():
    assert "excuses" in generation.classify_upstream_status(500, "text").message
    assert "image" in generation.classify_upstream_status(500, "image").message


def test_timeout_maps_to_504(monkeypatch):
    def slow_post(*args, **kwargs):
        raise requests.Timeout("read timed out")

    monkeypatch.setattr(generation.requests, "post", slow_post)
    with pytest.raises(PipelineError) as exc:
        generation.invoke_image_model("draw it", **IMAGE_KWARGS)

    assert exc.value.kind == ErrorKind.TIMEOUT
    assert exc.value.status_code == 504


def test_connection_failure_is_a_network_error(monkeypatch):
    def broken_post(*args, **kwargs):
        raise requests.ConnectionError("dns failure")

    monkeypatch.setattr(generation.requests, "post", broken_post)
    with pytest.raises(PipelineError) as exc:
        generation.invoke_text_model("hello", **TEXT_KWARGS)

    assert exc.value.kind == ErrorKind.NETWORK_ERROR


def test_non_json_success_body_is_a_parse_error(monkeypatch):
    monkeypatch.setattr(generation.requests, "post", lambda *a, **k: FakeResponse(payload=None, text="<html>"))
    with pytest.raises(PipelineError) as exc:
        generation.invoke_text_model("hello", **TEXT_KWARGS)

    assert exc.value.kind == ErrorKind.PARSE_ERROR


# ----------------------------
# Wall-clock deadline against a real socket
# ----------------------------

class TrickleHandler(BaseHTTPRequestHandler):
    """Valid JSON body, sent one byte every 0.1s."""

    body = b'{"content": [{"type": "text", "text": "ok"}]}'

    def do_POST(self):
        self.rfile.read(int(self.headers.get("Content-Length", 0)))
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(self.body)))
        self.end_headers()
        try:
            for i in range(len(self.body)):
                self.wfile.write(self.body[i : i + 1])
                self.wfile.flush()
                time.sleep(0.1)
        except (BrokenPipeError, ConnectionResetError):
            return

    def log_message(self, format, *args):
        pass


class FastHandler(TrickleHandler):
    def do_POST(self):
        self.rfile.read(int(self.headers.get("Content-Length", 0)))
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(self.body)))
        self.end_headers()
        self.wfile.write(self.body)


@pytest.fixture
def local_server():
    servers = []

    def start(handler):
        server = ThreadingHTTPServer(("127.0.0.1", 0), handler)
        server.daemon_threads = True
        threading.Thread(target=server.serve_forever, daemon=True).start()
        servers.append(server)
        return f"http://127.0.0.1:{server.server_address[1]}/v1"

    yield start
    for server in servers:
        server.shutdown()
        server.server_close()


def test_slow_body_hits_the_wall_clock_deadline(local_server):
    base_url = local_server(TrickleHandler)
    kwargs = dict(TEXT_KWARGS, base_url=base_url, timeout_s=1.0)

    started = time.monotonic()
    with pytest.raises(PipelineError) as exc:
        generation.invoke_text_model("hello", **kwargs)
    elapsed = time.monotonic() - started

    assert exc.value.kind == ErrorKind.TIMEOUT
    assert exc.value.status_code == 504
    assert elapsed < 2.0


def test_prompt_body_is_read_within_the_deadline(local_server):
    base_url = local_server(FastHandler)
    kwargs = dict(TEXT_KWARGS, base_url=base_url, timeout_s=5.0)

    data = generation.invoke_text_model("hello", **kwargs)

    assert data == {"content": [{"type": "text", "text": "ok"}]}
