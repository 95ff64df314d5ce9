# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Configuration loading from YAML/TOML files and environment variables.

Header settings live under the ``pyshield`` key, for example::

    pyshield:
      headers:
        hsts:
          max_age: 31536000
          include_subdomains: true
      logging:
        level:
          root: INFO
"""

from __future__ import annotations

import dataclasses
import os
import re
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, get_type_hints

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ValidationError

from pyshield.kernel.exceptions import ConfigurationException

T = TypeVar("T")

_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")

_CONFIG_PROPERTIES_ATTR = "__pyshield_config_prefix__"

_ENV_PREFIX = "PYSHIELD_"


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a dataclass or Pydantic model as bindable to a configuration prefix.

    Usage:
        @config_properties(prefix="pyshield.headers")
        class SecurityHeadersProperties(BaseModel):
            ...
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _CONFIG_PROPERTIES_ATTR, prefix)
        return cls

    return decorator


class Config:
    """Hierarchical configuration with dot-notation access and env var overrides.

    Priority (highest wins):
    1. Environment variables (``PYSHIELD_SECTION_KEY`` format)
    2. Profile overlay files, in the order the profiles are given
    3. The base configuration file or dict
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._loaded_sources: list[str] = []

    @property
    def loaded_sources(self) -> list[str]:
        """Config file paths that were loaded, in merge order."""
        return list(self._loaded_sources)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    @classmethod
    def from_file(cls, path: str | Path, active_profiles: list[str] | None = None) -> Config:
        """Load a YAML or TOML file plus any ``<stem>-<profile><suffix>`` overlays.

        A missing base file yields an empty configuration so that defaults
        and environment variables still apply.
        """
        path = Path(path)
        data: dict[str, Any] = {}
        sources: list[str] = []

        if path.exists():
            data = cls._load_config_data(path)
            sources.append(str(path))

        for profile in active_profiles or []:
            profile_path = path.parent / f"{path.stem}-{profile}{path.suffix}"
            if profile_path.exists():
                data = cls._deep_merge(data, cls._load_config_data(profile_path))
                sources.append(f"{profile_path} (profile: {profile})")

        instance = cls(data)
        instance._loaded_sources = sources
        return instance

    @staticmethod
    def _load_config_data(path: Path) -> dict[str, Any]:
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f) or {}
        with open(path) as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge override into base, with override values winning."""
        merged = dict(base)
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = Config._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    @staticmethod
    def env_key(key: str) -> str:
        """Environment variable consulted for *key*: pyshield.headers.hsts.max_age -> PYSHIELD_HEADERS_HSTS_MAX_AGE."""
        base = key.removeprefix("pyshield.")
        return _ENV_PREFIX + base.upper().replace(".", "_").replace("-", "_")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key, checking env vars first.

        String values containing ``${ENV_VAR}`` or ``${ENV_VAR:default}``
        placeholders are resolved from the environment.
        """
        env_val = os.environ.get(self.env_key(key))
        if env_val is not None:
            return env_val

        current = self._walk(key.split("."))
        if current is None:
            return default
        if isinstance(current, str) and "${" in current:
            return self._resolve_placeholders(current)
        return current

    def _walk(self, parts: list[str]) -> Any:
        current: Any = self._data
        for part in parts:
            if not isinstance(current, dict):
                return None
            current = current.get(part)
            if current is None:
                return None
        return current

    def _resolve_placeholders(self, value: str) -> str:
        def _replace(match: re.Match[str]) -> str:
            name, sep, default = match.group(1).partition(":")
            env_val = os.environ.get(name)
            if env_val is not None:
                return env_val
            if sep:
                return default
            raise ConfigurationException(
                f"Cannot resolve placeholder '${{{name}}}': not set in the environment",
                code="UNRESOLVED_PLACEHOLDER",
                context={"placeholder": name},
            )

        return _PLACEHOLDER_RE.sub(_replace, value)

    def get_section(self, prefix: str) -> dict[str, Any]:
        """Get the nested dict under *prefix* with env overrides and placeholders applied."""
        section = self._walk(prefix.split("."))
        if not isinstance(section, dict):
            return {}
        return self._resolve_section(prefix, section)

    def _resolve_section(self, prefix: str, section: dict[str, Any]) -> dict[str, Any]:
        resolved: dict[str, Any] = {}
        for name, value in section.items():
            key = f"{prefix}.{name}"
            if isinstance(value, dict):
                resolved[name] = self._resolve_section(key, value)
                continue
            env_val = os.environ.get(self.env_key(key))
            if env_val is not None:
                resolved[name] = env_val
            elif isinstance(value, str) and "${" in value:
                resolved[name] = self._resolve_placeholders(value)
            else:
                resolved[name] = value
        return resolved

    def _overlay_env(self, prefix: str, model_cls: type[BaseModel], section: dict[str, Any]) -> dict[str, Any]:
        """Add env overrides for model fields the config data does not mention, recursing into nested models."""
        overlaid = dict(section)
        for name, field in model_cls.model_fields.items():
            key = f"{prefix}.{name}"
            annotation = field.annotation
            if isinstance(annotation, type) and issubclass(annotation, BaseModel):
                nested = overlaid.get(name)
                overlaid[name] = self._overlay_env(key, annotation, nested if isinstance(nested, dict) else {})
                continue
            env_val = os.environ.get(self.env_key(key))
            if env_val is not None:
                overlaid[name] = env_val
        return overlaid

    def bind(self, config_cls: type[T]) -> T:
        """Bind configuration to a @config_properties dataclass or Pydantic model."""
        prefix = getattr(config_cls, _CONFIG_PROPERTIES_ATTR, None)
        if prefix is None:
            raise ConfigurationException(
                f"{config_cls.__name__} is not decorated with @config_properties",
                code="NOT_BINDABLE",
            )

        section = self.get_section(prefix)

        if issubclass(config_cls, BaseModel):
            section = self._overlay_env(prefix, config_cls, section)
            try:
                return config_cls.model_validate(section)
            except ValidationError as exc:
                raise ConfigurationException(
                    f"Configuration validation failed for '{config_cls.__name__}' (prefix='{prefix}'):\n{exc}",
                    code="INVALID_CONFIGURATION",
                    context={"prefix": prefix},
                ) from exc

        hints = get_type_hints(config_cls)
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(config_cls):  # type: ignore[arg-type]
            if field.name in section:
                value = section[field.name]
                expected_type = hints.get(field.name)
                if expected_type is int and isinstance(value, str):
                    value = int(value)
                elif expected_type is bool and isinstance(value, str):
                    value = value.lower() in ("true", "1", "yes")
                kwargs[field.name] = value

        return config_cls(**kwargs)
