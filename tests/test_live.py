import json
import time

import pytest
import requests
import responses

from pocket48cli.live import (
    format_time,
    format_value,
    live,
    live_type,
    live_type_label,
    next_value,
    render_table,
    run_live,
    video,
)
from pocket48cli.live_list import LIVE_LIST_URL, LiveListResponse

SAMPLE = {
    "message": "success",
    "status": 200,
    "success": True,
    "content": {
        "next": "1157459593784004608",
        "slideUpAndDown": False,
        "liveList": [
            {
                "coverPath": "/cover.jpg",
                "ctime": "1753969370754",
                "liveId": "1157459593784004608",
                "roomId": "room-1",
                "liveType": 2,
                "liveMode": 0,
                "title": "陪我玩！！！🍬",
                "inMicrophoneConnection": False,
                "status": 2,
                "userInfo": {
                    "avatar": "/a.png",
                    "nickname": "BEJ48-马欣宇",
                    "teamLogo": "/t.png",
                    "userId": "1",
                },
            }
        ],
    },
}


@pytest.fixture
def shanghai_tz(monkeypatch):
    monkeypatch.setenv("TZ", "Asia/Shanghai")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_format_time(shanghai_tz):
    assert format_time("1753969370754") == "2025-07-31 21:42:50"


def test_format_time_invalid(capsys):
    assert format_time("abc") == ""
    assert "abc" in capsys.readouterr().out


def test_format_time_rejects_whitespace():
    assert format_time(" 1753969370754") == ""


@pytest.mark.parametrize(
    "value, expected", [(5, "游戏"), (2, "电台"), (1, "直播"), (0, "直播")]
)
def test_live_type(value, expected):
    assert live_type(value) == expected


def test_live_type_label():
    assert live_type_label(True) == "直播"
    assert live_type_label(False) == "录播"


def test_next_value():
    assert next_value("") == "0"
    assert next_value("42") == "42"


@pytest.mark.parametrize(
    "given, expected",
    [("", "table"), ("JSON", "json"), ("json", "json"), ("Table", "table"), ("xml", "table")],
)
def test_format_value(given, expected):
    assert format_value(given) == expected


def test_render_table_contains_headers_and_row(shanghai_tz):
    table = render_table(LiveListResponse.from_dict(SAMPLE), False)
    for text in ("录播ID", "录播类型", "录播标题", "成员", "时间"):
        assert text in table
    assert "1157459593784004608" in table
    assert "BEJ48-马欣宇" in table
    assert "电台" in table
    assert "2025-07-31 21:42:50" in table


def test_run_live_json_prints_raw(mocked, capsys):
    raw = json.dumps(SAMPLE, ensure_ascii=False)
    mocked.add(responses.POST, LIVE_LIST_URL, body=raw.encode("utf-8"), status=200)
    run_live(False, "", "json")
    assert capsys.readouterr().out.strip() == raw
    sent = json.loads(mocked.calls[0].request.body)
    assert sent["next"] == "0"


def test_video_table_prints_next(mocked, capsys):
    mocked.add(responses.POST, LIVE_LIST_URL, json=SAMPLE, status=200)
    video("7", "")
    out = capsys.readouterr().out
    assert "录播标题" in out
    assert out.strip().endswith("Next: 1157459593784004608")
    sent = json.loads(mocked.calls[0].request.body)
    assert sent["next"] == "7"


def test_live_table_has_no_next(mocked, capsys):
    mocked.add(responses.POST, LIVE_LIST_URL, json=SAMPLE, status=200)
    live("table")
    out = capsys.readouterr().out
    assert "直播标题" in out
    assert "Next:" not in out
    sent = json.loads(mocked.calls[0].request.body)
    assert sent["groupId"] == 0
    assert sent["record"] is False


def test_unsuccessful_response_prints_raw(mocked, capsys):
    raw = json.dumps({"message": "fail", "status": 401, "success": False})
    mocked.add(responses.POST, LIVE_LIST_URL, body=raw, status=200)
    run_live(True, "0", "table")
    assert capsys.readouterr().out.strip() == raw


def test_network_error_is_printed(mocked, capsys):
    mocked.add(
        responses.POST, LIVE_LIST_URL, body=requests.ConnectionError("connection refused")
    )
    run_live(True, "0", "json")
    assert "connection refused" in capsys.readouterr().out