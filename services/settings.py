"""Configuração lida do ambiente."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from components.simple_date import DateOrder

DEFAULT_DATE_ORDER = DateOrder.DMY
DEFAULT_LOCALE = "en"
DEFAULT_LOG_LEVEL = "INFO"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


@dataclass(frozen=True)
class Settings:
    date_order: DateOrder = DEFAULT_DATE_ORDER
    locale: str = DEFAULT_LOCALE
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_environment(cls, env: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if env is None else env

        raw_order = (env.get("DATE_FIELD_ORDER") or "").strip()
        try:
            order = DateOrder.parse(raw_order) if raw_order else DEFAULT_DATE_ORDER
        except ValueError as ex:
            raise ConfigurationError(f"DATE_FIELD_ORDER inválido: {raw_order!r}") from ex

        level = (env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
        if level not in _LOG_LEVELS:
            raise ConfigurationError(f"LOG_LEVEL inválido: {level!r}")

        locale = (env.get("APP_LOCALE") or DEFAULT_LOCALE).strip()
        return cls(date_order=order, locale=locale, log_level=level)
