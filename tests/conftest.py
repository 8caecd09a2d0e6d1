"""Global pytest fixtures & helpers.

Adds project root to path and provides fake HTTP objects so client tests never
touch the network.
"""
from __future__ import annotations

import json
import os
import sys
from typing import Any, Dict, List

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from nikeplus.nike_client.session import NikeSession


class FakeResp:
    """Minimal fake response matching needed parts of requests.Response."""

    def __init__(self, status_code=200, data=None, text=None, url=""):
        self.status_code = status_code
        self._data = data
        self._text = text
        self.url = url
        self.closed = False

    @property
    def text(self):
        if self._text is not None:
            return self._text
        return json.dumps(self._data)

    def close(self):
        self.closed = True


class FakeHTTP:
    """Stand-in for requests.Session that replays queued responses."""

    def __init__(self, responses=None):
        self.responses: List[FakeResp] = list(responses or [])
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def queue(self, *responses):
        self.responses.extend(responses)

    def _next(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self.responses:
            raise AssertionError(f"Unexpected {method} {url}")
        resp = self.responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp

    def get(self, url, **kwargs):
        return self._next("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._next("POST", url, **kwargs)

    def close(self):
        self.closed = True


def make_activity(activity_id="c8f65c19-6fe6-43fe-9393-90f52246e111"):
    return {
        "activityId": activity_id,
        "activityType": "RUN",
        "startTime": "2013-05-01T06:32:10Z",
        "activityTimeZone": "GMT-07:00",
        "status": "COMPLETE",
        "deviceType": "IPOD",
        "metricSummary": {
            "calories": 412,
            "fuel": 1380,
            "distance": 5.0213,
            "steps": 0,
            "duration": "0:27:44.000",
        },
        "tags": [
            {"tagType": "TERRAIN", "tagValue": "ROAD"},
            {"tagType": "NOTE", "tagValue": "easy loop"},
        ],
        "metrics": [
            {
                "intervalMetric": 10,
                "intervalUnit": "SEC",
                "metricType": "DISTANCE",
                "values": ["0.0243", "0.0511", "0.0779"],
            }
        ],
        "isGpsActivity": True,
    }


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def fake_http():
    return FakeHTTP()


@pytest.fixture
def nike_session(fake_http):
    return NikeSession(access_token="abc123", http=fake_http)


@pytest.fixture
def activity_body():
    return make_activity()
