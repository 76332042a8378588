"""Application configuration primitives."""

from __future__ import annotations

import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SECRETS_PATH = Path(".secrets/secrets.toml")


class Settings(BaseSettings):
    """Central configuration for talking to the CKAN portal."""

    ckan_url: HttpUrl = "http://localhost:5000"
    ckan_api_key: str | None = None
    request_timeout: float = 30.0
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = SettingsConfigDict(env_prefix="DCATDE_CKAN_", env_file=(), extra="ignore")

    @property
    def ckan_base_url(self) -> str:
        """Return the CKAN URL without a trailing slash."""
        return str(self.ckan_url).rstrip("/")

    @property
    def authorization_header(self) -> dict[str, str]:
        # CKAN expects the bare API token, no scheme prefix.
        if not self.ckan_api_key:
            return {}
        return {"Authorization": self.ckan_api_key}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance."""
    overrides = _load_settings_overrides()
    return Settings(**overrides)


def load_settings(secrets_path: Path) -> Settings:
    """Build settings from an explicit secrets file, bypassing the cache."""
    return Settings(**_load_settings_overrides(secrets_path))


def _load_settings_overrides(secrets_path: Path = DEFAULT_SECRETS_PATH) -> dict[str, Any]:
    """Load configuration overrides from the secrets TOML file."""
    if not secrets_path.exists():
        return {}
    data = _read_toml(secrets_path)
    overrides: dict[str, Any] = {}

    ckan_cfg = _extract_section(data, "ckan", "portal")
    if ckan_cfg:
        overrides["ckan_url"] = ckan_cfg.get("url")
        api_key = _sanitize_api_key(ckan_cfg.get("api_key") or ckan_cfg.get("authorization"))
        if api_key is not None:
            overrides["ckan_api_key"] = api_key
        timeout_value = _coerce_float(ckan_cfg.get("timeout"))
        if timeout_value is not None:
            overrides["request_timeout"] = timeout_value

    general_cfg = data.get("dcatde_ckan") or {}
    overrides.update(
        {key: value for key, value in general_cfg.items() if key in Settings.model_fields}
    )
    return {key: value for key, value in overrides.items() if value is not None}


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _extract_section(data: dict[str, Any], *candidates: str) -> dict[str, Any] | None:
    for key in candidates:
        section = data.get(key)
        if isinstance(section, dict):
            return section
    return None


def _sanitize_api_key(value: str | None) -> str | None:
    if not value:
        return None
    token = value.strip()
    if token.lower().startswith("bearer "):
        token = token[7:].strip()
    return token or None


def _coerce_float(value: Any) -> float | None:
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return float(text)
        except ValueError:
            return None
    return None
