"""Loading of the YAML configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_NAME = "config.yaml"


class ConfigError(Exception):
    """The configuration file is missing, unreadable or malformed."""


def _mapping(data: Any, section: str) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"解析YAML失败: {section} 必须是映射")
    return data


@dataclass
class Pocket48LiveConfig:
    auto_record: bool = False
    record_name: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Pocket48LiveConfig":
        data = _mapping(data, "pocket48.live")
        names = data.get("recordName") or []
        if not isinstance(names, list):
            raise ConfigError("解析YAML失败: recordName 必须是列表")
        return cls(
            auto_record=bool(data.get("autoRecord", False)),
            record_name=[str(name) for name in names],
        )


@dataclass
class Pocket48Config:
    live: Pocket48LiveConfig = field(default_factory=Pocket48LiveConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Pocket48Config":
        data = _mapping(data, "pocket48")
        return cls(live=Pocket48LiveConfig.from_dict(data.get("live")))


@dataclass
class Config:
    ffmpeg: str = ""
    pocket48: Pocket48Config = field(default_factory=Pocket48Config)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Config":
        data = _mapping(data, "config")
        ffmpeg = data.get("ffmpeg")
        return cls(
            ffmpeg="" if ffmpeg is None else str(ffmpeg),
            pocket48=Pocket48Config.from_dict(data.get("pocket48")),
        )


def load_yaml_config(name: str = "") -> Config:
    """Read the configuration file ``name`` from the parent of the working directory.

    ``config.yaml`` is used when no name is given.
    """
    config_name = name or DEFAULT_CONFIG_NAME

    try:
        cwd = Path.cwd()
    except OSError as exc:
        raise ConfigError(f"无法获取当前执行路径: {exc}") from exc

    config_path = cwd.parent / config_name
    if not config_path.exists():
        raise ConfigError(f"配置文件不存在: {config_path}")

    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"读取文件失败: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"解析YAML失败: {exc}") from exc

    return Config.from_dict(data)