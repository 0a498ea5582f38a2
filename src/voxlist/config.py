"""Configuration loading utilities for voxlist."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from voxlist.session.capture import SessionSettings

_INT_KEYS = {"api_port"}
_FLOAT_KEYS = {"silence_timeout_sec", "max_session_sec", "restart_cooldown_sec", "undo_window_sec"}
_STR_KEYS = {"log_level", "locale", "review_mode", "api_host"}
_REVIEW_MODES = {"review", "direct"}


@dataclass(frozen=True)
class AppConfig:
    """Application configuration resolved from profile + environment variables."""

    env: str
    log_level: str
    locale: str
    silence_timeout_sec: float
    max_session_sec: float
    restart_cooldown_sec: float
    undo_window_sec: float
    review_mode: str
    api_host: str
    api_port: int

    def session_settings(self) -> SessionSettings:
        return SessionSettings(
            silence_timeout_sec=self.silence_timeout_sec,
            max_session_sec=self.max_session_sec,
            restart_cooldown_sec=self.restart_cooldown_sec,
            review_mode=self.review_mode,  # type: ignore[arg-type]
        )


def load_config(env_name: str | None = None, config_dir: Path | None = None) -> AppConfig:
    """Load configuration from `configs/<env>.toml` and environment overrides."""
    env = env_name or os.getenv("VOXLIST_ENV", "dev")
    resolved_dir = config_dir or _default_config_dir()
    profile_path = resolved_dir / f"{env}.toml"

    defaults: dict[str, str | int | float] = {
        "log_level": "INFO",
        "locale": "en",
        "silence_timeout_sec": 3.0,
        "max_session_sec": 90.0,
        "restart_cooldown_sec": 0.3,
        "undo_window_sec": 3.0,
        "review_mode": "review",
        "api_host": "127.0.0.1",
        "api_port": 8000,
    }
    defaults.update(_load_profile(profile_path))

    values: dict[str, str | int | float] = {}
    for key, default in defaults.items():
        env_key = f"VOXLIST_{key.upper()}"
        raw = os.getenv(env_key)
        if key in _INT_KEYS:
            values[key] = _coerce_int(env_key, default if raw is None else raw)
        elif key in _FLOAT_KEYS:
            values[key] = _coerce_float(env_key, default if raw is None else raw)
        else:
            values[key] = _coerce_str(env_key, default if raw is None else raw)

    if values["review_mode"] not in _REVIEW_MODES:
        raise ValueError(
            f"VOXLIST_REVIEW_MODE must be one of {sorted(_REVIEW_MODES)}, got {values['review_mode']!r}"
        )
    for key in ("silence_timeout_sec", "max_session_sec", "undo_window_sec"):
        if float(values[key]) <= 0:
            raise ValueError(f"VOXLIST_{key.upper()} must be positive, got {values[key]!r}")

    return AppConfig(env=env, **values)  # type: ignore[arg-type]


def _default_config_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "configs"


def _load_profile(path: Path) -> dict[str, str | int | float]:
    if not path.exists():
        return {}

    with path.open("rb") as handle:
        payload = tomllib.load(handle)

    resolved: dict[str, str | int | float] = {}
    for key, raw in payload.items():
        if key in _INT_KEYS:
            resolved[key] = _coerce_int(key, raw)
        elif key in _FLOAT_KEYS:
            resolved[key] = _coerce_float(key, raw)
        elif key in _STR_KEYS:
            resolved[key] = _coerce_str(key, raw)
    return resolved


def _coerce_int(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got type bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    raise ValueError(f"{name} must be an integer, got type {type(value).__name__}")


def _coerce_float(name: str, value: object) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got type bool")
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError as exc:
            raise ValueError(f"{name} must be a number, got {value!r}") from exc
    raise ValueError(f"{name} must be a number, got type {type(value).__name__}")


def _coerce_str(name: str, value: object) -> str:
    if isinstance(value, str):
        return value
    raise ValueError(f"{name} must be a string, got type {type(value).__name__}")
