"""Loading of live and recorded stream lists from the Pocket48 API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from pocket48cli.request import TIMEOUT, create_session

LIVE_LIST_URL = "https://pocketapi.48.cn/live/api/v1/live/getLiveList"


class LiveListError(Exception):
    """The API returned an unusable or unsuccessful response."""

    def __init__(self, message: str, raw: str = "") -> None:
        super().__init__(message)
        self.raw = raw


@dataclass
class UserInfo:
    avatar: str = ""
    nickname: str = ""
    team_logo: str = ""
    user_id: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "UserInfo":
        data = data or {}
        return cls(
            avatar=data.get("avatar", ""),
            nickname=data.get("nickname", ""),
            team_logo=data.get("teamLogo", ""),
            user_id=data.get("userId", ""),
        )


@dataclass
class LiveListContentInfo:
    cover_path: str = ""
    ctime: str = ""
    live_id: str = ""
    room_id: str = ""
    live_type: int = 0  # 1: live, 2: radio, 5: game
    live_mode: int = 0  # 0: normal, 1: screen recording
    title: str = ""
    in_microphone_connection: bool = False
    status: int = 0
    user_info: UserInfo = field(default_factory=UserInfo)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "LiveListContentInfo":
        data = data or {}
        return cls(
            cover_path=data.get("coverPath", ""),
            ctime=data.get("ctime", ""),
            live_id=data.get("liveId", ""),
            room_id=data.get("roomId", ""),
            live_type=int(data.get("liveType", 0)),
            live_mode=int(data.get("liveMode", 0)),
            title=data.get("title", ""),
            in_microphone_connection=bool(data.get("inMicrophoneConnection", False)),
            status=int(data.get("status", 0)),
            user_info=UserInfo.from_dict(data.get("userInfo")),
        )


@dataclass
class LiveListContent:
    next: str = ""
    slide_up_and_down: bool = False
    live_list: list[LiveListContentInfo] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "LiveListContent":
        data = data or {}
        return cls(
            next=data.get("next", ""),
            slide_up_and_down=bool(data.get("slideUpAndDown", False)),
            live_list=[
                LiveListContentInfo.from_dict(item)
                for item in data.get("liveList") or []
            ],
        )


@dataclass
class LiveListResponse:
    message: str = ""
    status: int = 0
    success: bool = False
    content: LiveListContent = field(default_factory=LiveListContent)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "LiveListResponse":
        data = data or {}
        return cls(
            message=data.get("message", ""),
            status=int(data.get("status", 0)),
            success=bool(data.get("success", False)),
            content=LiveListContent.from_dict(data.get("content")),
        )


def build_body(
    in_live: bool, next_page: str, group_id: str = "", user_id: str = ""
) -> dict[str, Any]:
    """Build the request body for a live or recorded list query.

    When a user id is given with ``next_page == "0"`` the API cannot find
    that user's records, so the newest live id is fetched first and used
    as the starting point.
    """
    body: dict[str, Any] = {"debug": True, "next": next_page}

    if in_live:
        body["groupId"] = 0
        body["record"] = False
        return body

    if not user_id:
        if group_id:
            body["groupId"] = group_id
        return body

    body["userId"] = user_id

    if next_page != "0":
        return body

    first, raw = request_live_list(False, "0", "", "")
    if not first.success:
        raise LiveListError(raw, raw)
    if not first.content.live_list:
        raise LiveListError("live list is empty", raw)
    body["next"] = first.content.live_list[0].live_id
    return body


def request_live_list(
    in_live: bool, next_page: str, group_id: str = "", user_id: str = ""
) -> tuple[LiveListResponse, str]:
    """Fetch a live or recorded list; return the parsed response and raw JSON."""
    body = build_body(in_live, next_page, group_id, user_id)

    with create_session() as session:
        response = session.post(LIVE_LIST_URL, json=body, timeout=TIMEOUT)
    raw = response.text

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise LiveListError(f"invalid JSON response: {exc}", raw) from exc
    if not isinstance(data, dict):
        raise LiveListError("unexpected JSON response", raw)

    return LiveListResponse.from_dict(data), raw