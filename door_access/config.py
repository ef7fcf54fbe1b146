"""Configuración de la aplicación leída desde variables de entorno."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger("door_access.config")

DEFAULT_API_BASE = "https://jsonplaceholder.typicode.com"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "INFO"

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ApiConfig:
    """Parámetros del cliente HTTP y de la interfaz."""

    base_url: str = DEFAULT_API_BASE
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL
    load_images: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @property
    def users_url(self) -> str:
        return f"{self.base_url}/users"

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "ApiConfig":
        """Construye la configuración a partir de ``DOOR_ACCESS_*``."""

        env = os.environ if environ is None else environ

        base_url = env.get("DOOR_ACCESS_API_BASE") or DEFAULT_API_BASE

        timeout = DEFAULT_TIMEOUT
        raw_timeout = env.get("DOOR_ACCESS_TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                logger.warning("Invalid DOOR_ACCESS_TIMEOUT %r, using %s", raw_timeout, DEFAULT_TIMEOUT)
            else:
                if not math.isfinite(timeout) or timeout <= 0:
                    logger.warning("DOOR_ACCESS_TIMEOUT must be a positive finite number, using %s", DEFAULT_TIMEOUT)
                    timeout = DEFAULT_TIMEOUT

        log_level = (env.get("DOOR_ACCESS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()

        raw_images = env.get("DOOR_ACCESS_LOAD_IMAGES")
        load_images = True
        if raw_images is not None:
            load_images = raw_images.strip().lower() not in _FALSE_VALUES

        return ApiConfig(
            base_url=base_url,
            timeout=timeout,
            log_level=log_level,
            load_images=load_images,
        )


__all__ = ["ApiConfig", "DEFAULT_API_BASE", "DEFAULT_TIMEOUT"]
