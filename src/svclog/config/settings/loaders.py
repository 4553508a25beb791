"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from svclog.config.errors import ConfigError, MissingRequiredSettingError

T = TypeVar("T")

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class SettingsLoader(abc.ABC):
    """Port: build a settings dataclass from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Fill a settings dataclass from OS environment variables.

    Field ``name`` is read from ``<_prefix>_<NAME>``.  ``bool`` fields accept
    ``1/true/yes/on`` (any case) as true and everything else as false; all
    other fields receive the raw string.  Unset variables leave the field
    default in place.
    """

    def load(self, settings_class: type[T]) -> T:
        prefix = getattr(settings_class, "_prefix", "")
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = os.environ.get(env_key)
            if raw is None:
                if field.default is dataclasses.MISSING:
                    raise MissingRequiredSettingError(env_key)
                continue
            values[field.name] = _from_env(raw, field.type)

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to build {settings_class.__name__}: {exc}", cause=exc) from exc


def _from_env(raw: str, annotation: Any) -> Any:
    # Annotations are strings under ``from __future__ import annotations``.
    if annotation is bool or annotation == "bool":
        return raw.strip().lower() in _TRUTHY
    return raw


class DotenvSettingsLoader(SettingsLoader):
    """Read a ``.env`` file into ``os.environ``, then load like :class:`EnvSettingsLoader`.

    Variables already present in the environment win unless *override* is set.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        try:
            from dotenv import load_dotenv  # type: ignore[import-untyped]
        except ImportError as exc:
            raise ImportError("Install 'svclog[dotenv]' to use DotenvSettingsLoader") from exc
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
