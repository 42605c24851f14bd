"""Construction of the ``appInfo`` request header."""

from __future__ import annotations

import json
import secrets
from dataclasses import dataclass


def random_hex(length: int) -> str:
    """Return a random string of ``length`` hexadecimal characters.

    Odd lengths are rounded down, since every random byte yields two characters.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    return secrets.token_hex(length // 2)


@dataclass(frozen=True)
class DeviceInfo:
    """Device description sent to the API in the ``appInfo`` header."""

    device_id: str
    vendor: str = "apple"
    app_version: str = "7.0.4"
    app_build: str = "23011601"
    os_version: str = "16.3.1"
    os_type: str = "ios"
    device_name: str = "iPhone XR"
    os: str = "ios"

    def to_json(self) -> str:
        """Serialise to compact JSON with the API's field names."""
        payload = {
            "vendor": self.vendor,
            "deviceId": self.device_id,
            "appVersion": self.app_version,
            "appBuild": self.app_build,
            "osVersion": self.os_version,
            "osType": self.os_type,
            "deviceName": self.device_name,
            "os": self.os,
        }
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def create_app_info() -> str:
    """Build a fresh ``appInfo`` header value with a random device id."""
    device_id = "-".join(random_hex(n) for n in (8, 4, 4, 4, 12))
    return DeviceInfo(device_id=device_id).to_json()