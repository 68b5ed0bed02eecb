import asyncio
import json
from types import SimpleNamespace

import httpx
import pytest

from quick_news.newsapi import client


def envelope(status="ok", articles=None, code=None, **extra) -> bytes:
    data = {"status": status, "articles": articles if articles is not None else [], "code": code}
    data.update(extra)
    return json.dumps(data).encode()


@pytest.fixture
def fake_requests(monkeypatch):
    """Replace ``requests.get`` with a recorder returning a canned response."""
    calls = []
    reply = {"status_code": 200, "content": envelope()}

    def fake_get(url, headers=None, **kwargs):
        calls.append({"url": url, "headers": headers or {}})
        if "raise" in reply:
            raise reply["raise"]
        return SimpleNamespace(status_code=reply["status_code"], content=reply["content"])

    monkeypatch.setattr(client.requests, "get", fake_get)
    return SimpleNamespace(calls=calls, reply=reply)


@pytest.fixture
def fake_httpx(monkeypatch):
    """Run ``httpx.AsyncClient`` over a MockTransport with a canned response."""
    requests_seen = []
    reply = {"status_code": 200, "content": envelope()}
    real = httpx.AsyncClient

    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        if "raise" in reply:
            raise reply["raise"]
        return httpx.Response(reply["status_code"], content=reply["content"])

    def factory(*args, **kwargs):
        return real(*args, transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr(client.httpx, "AsyncClient", factory)
    return SimpleNamespace(requests=requests_seen, reply=reply)


@pytest.fixture(params=["sync", "async"])
def transport(request, fake_requests, fake_httpx):
    """Same canned reply, served through either the blocking or the async client."""
    fake = fake_requests if request.param == "sync" else fake_httpx

    def run(api):
        if request.param == "sync":
            return api.fetch()
        return asyncio.run(api.fetch_async())

    def sent():
        return fake_requests.calls + fake_httpx.requests

    return SimpleNamespace(mode=request.param, reply=fake.reply, run=run, sent=sent)
