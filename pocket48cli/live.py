"""Listing of Pocket48 live and recorded streams."""

from __future__ import annotations

import re
from datetime import datetime

import requests
from tabulate import tabulate

from pocket48cli.live_list import LiveListError, LiveListResponse, request_live_list

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MAX = 2**63 - 1
_INT64_MIN = -(2**63)


def format_time(timestamp: str) -> str:
    """Format a millisecond timestamp string as local ``YYYY-MM-DD HH:MM:SS``.

    Prints the problem and returns an empty string when the value is invalid.
    """
    if not _INT_RE.fullmatch(timestamp):
        print(f'strconv.ParseInt: parsing "{timestamp}": invalid syntax')
        return ""
    millis = int(timestamp)
    if not _INT64_MIN <= millis <= _INT64_MAX:
        print(f'strconv.ParseInt: parsing "{timestamp}": value out of range')
        return ""
    try:
        moment = datetime.fromtimestamp(millis // 1000)
    except (OverflowError, OSError, ValueError) as exc:
        print(exc)
        return ""
    return moment.strftime("%Y-%m-%d %H:%M:%S")


def live_type(value: int) -> str:
    """Return the Chinese name of a live type code."""
    if value == 5:
        return "游戏"
    if value == 2:
        return "电台"
    return "直播"


def live_type_label(in_live: bool) -> str:
    """Return the label for live (``直播``) or recorded (``录播``) streams."""
    return "直播" if in_live else "录播"


def next_value(next_page: str) -> str:
    """Return the page cursor, ``"0"`` when none is given."""
    return next_page or "0"


def format_value(output_format: str) -> str:
    """Normalise the output format to ``json`` or ``table``."""
    value = output_format.lower()
    return value if value in ("json", "table") else "table"


def render_table(response: LiveListResponse, in_live: bool) -> str:
    """Render the stream list of ``response`` as a text table."""
    label = live_type_label(in_live)
    headers = [label + "ID", label + "类型", label + "标题", "成员", "时间"]
    rows = [
        [
            item.live_id,
            live_type(item.live_type),
            item.title,
            item.user_info.nickname,
            format_time(item.ctime),
        ]
        for item in response.content.live_list
    ]
    return tabulate(rows, headers=headers, tablefmt="grid", disable_numparse=True)


def run_live(in_live: bool, next_page: str, output_format: str) -> None:
    """Fetch a stream list and print it as JSON or a table."""
    label_in_live = in_live
    cursor = next_value(next_page)
    fmt = format_value(output_format)

    try:
        response, raw = request_live_list(in_live, cursor, "", "")
    except (LiveListError, requests.RequestException) as exc:
        print(exc)
        return

    if not response.success:
        print(raw)
        return

    if fmt == "json":
        print(raw)
        return

    print(render_table(response, label_in_live))
    if not in_live:
        print("Next: " + response.content.next)


def live(output_format: str) -> None:
    """Print the streams that are live now."""
    run_live(True, "0", output_format)


def video(next_page: str, output_format: str) -> None:
    """Print a page of recorded streams."""
    run_live(False, next_page, output_format)