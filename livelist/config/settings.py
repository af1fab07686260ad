"""Application settings configuration."""

import logging
from dataclasses import dataclass
from typing import Optional

import yaml

logger = logging.getLogger("LiveList.Settings")


@dataclass(frozen=True)
class ApiSettings:
    base_url: str = "http://localhost:8000"
    list_path: str = "/live/api/v1/live/getLiveList"
    timeout_seconds: float = 10.0


@dataclass(frozen=True)
class DisplaySettings:
    prefetch_distance: int = 5
    empty_title_text: str = "no title"


@dataclass(frozen=True)
class WindowSettings:
    title: str = "Live List"
    default_width: int = 420
    default_height: int = 760


@dataclass(frozen=True)
class AppSettings:
    api: ApiSettings
    display: DisplaySettings
    window: WindowSettings

    @classmethod
    def defaults(cls) -> "AppSettings":
        return cls(api=ApiSettings(), display=DisplaySettings(), window=WindowSettings())

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AppSettings":
        if path is None:
            path = "settings.yml"

        config = cls._load_yaml(path)
        api = cls._section(config, "api")
        display = cls._section(config, "display")
        window = cls._section(config, "window")
        return cls(
            api=ApiSettings(
                base_url=api.get("base_url", ApiSettings.base_url),
                list_path=api.get("list_path", ApiSettings.list_path),
                timeout_seconds=cls._number(
                    api, "timeout_seconds", float, ApiSettings.timeout_seconds
                ),
            ),
            display=DisplaySettings(
                prefetch_distance=max(
                    0, cls._number(display, "prefetch_distance", int, DisplaySettings.prefetch_distance)
                ),
                empty_title_text=display.get("empty_title_text", "no title"),
            ),
            window=WindowSettings(
                title=window.get("title", "Live List"),
                default_width=cls._number(window, "default_width", int, WindowSettings.default_width),
                default_height=cls._number(window, "default_height", int, WindowSettings.default_height),
            ),
        )

    @staticmethod
    def _section(config: dict, name: str) -> dict:
        section = config.get(name) or {}
        if not isinstance(section, dict):
            logger.warning(f"Ignoring settings section {name}: expected a mapping")
            return {}
        return section

    @staticmethod
    def _number(section: dict, key: str, cast, default):
        value = section.get(key, default)
        try:
            return cast(value)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring invalid value for {key}: {value!r}")
            return default

    @staticmethod
    def _load_yaml(path: str) -> dict:
        try:
            with open(path, "r") as f:
                config = yaml.safe_load(f) or {}
        except FileNotFoundError:
            return {}
        except yaml.YAMLError as e:
            logger.warning(f"Ignoring malformed settings file {path}: {e}")
            return {}

        if not isinstance(config, dict):
            logger.warning(f"Ignoring settings file {path}: expected a mapping")
            return {}
        return config
