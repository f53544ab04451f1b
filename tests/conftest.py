"""Shared fixtures: settings, sample upstream bodies and a fake urlopen."""
from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest

from core.config import Settings

TOKYO_RECORD = {
    "postal_code": "1000001",
    "prefecture": "東京都",
    "city": "千代田区",
    "town": "千代田",
    "prefecture_kana": "トウキョウト",
    "city_kana": "チヨダク",
    "town_kana": "チヨダ",
    "koaza": "",
    "kyoto_street": "",
    "building": "",
    "floor": "",
    "town_partial": False,
    "town_addressed_koaza": False,
    "town_chome": False,
    "town_multi": False,
    "town_raw": "千代田",
}

OSAKA_RECORD = {
    "postal_code": "5300001",
    "prefecture": "大阪府",
    "city": "大阪市北区",
    "town": "梅田",
    "prefecture_kana": "オオサカフ",
    "city_kana": "オオサカシキタク",
    "town_kana": "ウメダ",
    "koaza": "",
    "kyoto_street": "",
    "building": "",
    "floor": "",
    "town_partial": False,
    "town_addressed_koaza": False,
    "town_chome": True,
    "town_multi": False,
    "town_raw": "梅田",
}


def upstream_body(*records: dict) -> dict:
    return {"version": "2024-01-31", "data": list(records)}


def fake_response(payload) -> MagicMock:
    """A context-manager response whose read() returns ``payload`` as JSON."""
    resp = MagicMock()
    resp.__enter__.return_value = resp
    resp.__exit__.return_value = False
    body = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
    resp.read.return_value = body
    return resp


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key", base_url="https://api.example.test/v1")


@pytest.fixture
def urlopen():
    """Patch urllib's urlopen; configure return_value / side_effect per test."""
    with patch("urllib.request.urlopen") as mocked:
        yield mocked


def sent_request(mocked):
    """The urllib Request passed to the (single) urlopen call."""
    assert mocked.call_count == 1
    return mocked.call_args[0][0]
