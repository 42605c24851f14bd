"""HTTP session preconfigured for the Pocket48 API."""

from __future__ import annotations

import requests

from pocket48cli.headers import create_app_info

TIMEOUT = 30

USER_AGENT = "PocketFans201807/6.0.16 (iPhone; iOS 13.5.1; Scale/2.00)"
ACCEPT_LANGUAGE = "zh-Hans-AW;q=1"
HOST = "pocketapi.48.cn"


def create_session() -> requests.Session:
    """Return a session carrying the headers the API expects."""
    session = requests.Session()
    session.headers.update(
        {
            "User-Agent": USER_AGENT,
            "Accept-Language": ACCEPT_LANGUAGE,
            "Host": HOST,
            "appInfo": create_app_info(),
        }
    )
    return session