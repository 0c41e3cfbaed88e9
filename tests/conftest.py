from __future__ import annotations

import json

import pytest
import requests
from requests.structures import CaseInsensitiveDict


def make_response(status_code=200, payload=None, headers=None, text=None, url="https://api.github.com/"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    response.headers = CaseInsensitiveDict(headers or {})
    body = text if text is not None else json.dumps(payload if payload is not None else [])
    response._content = body.encode("utf-8")
    return response


class FakeSession:
    """Stands in for requests.Session, replaying queued responses in order."""

    def __init__(self, responses=None):
        self.headers = CaseInsensitiveDict()
        self.responses = list(responses or [])
        self.calls = []
        self.closed = False

    def request(self, method, url, params=None, timeout=None):
        self.calls.append((method, url, params))
        if not self.responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    def close(self):
        self.closed = True


def make_issue(number, labels, total_count=0, owner="acme", repo="widgets", title=None):
    return {
        "id": 1000 + number,
        "number": number,
        "title": title or f"Issue {number}",
        "html_url": f"https://github.com/{owner}/{repo}/issues/{number}",
        "labels": [{"name": name} for name in labels],
        "reactions": {"total_count": total_count},
    }


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def sleeps():
    return []
