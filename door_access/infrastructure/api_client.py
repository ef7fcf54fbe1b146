"""Cliente HTTP del directorio de usuarios.

Encapsula la única petición de la aplicación (``GET <base>/users``) y traduce
los fallos a una jerarquía de excepciones propia. El *opener* es inyectable
para que las pruebas sustituyan el transporte sin tocar la red.
"""

from __future__ import annotations

import json
import logging
import socket
from typing import Any, Callable, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from door_access.config import ApiConfig

logger = logging.getLogger("door_access.api")

Opener = Callable[..., Any]


class APIError(Exception):
    """Error base del cliente del directorio."""


class HttpStatusError(APIError):
    """La petición terminó con un código de estado no exitoso."""

    def __init__(self, code: int) -> None:
        super().__init__(f"HTTP {code}")
        self.code = code


class TransportError(APIError):
    """La petición no pudo completarse o la respuesta no es interpretable."""


class APIClient:
    """Provee acceso a los datos crudos de usuarios."""

    def __init__(self, config: ApiConfig | None = None, *, opener: Opener | None = None) -> None:
        self.config = config or ApiConfig()
        self._opener = opener or urlopen

    def obtener_usuarios(self) -> list[dict]:
        """Recupera los usuarios del backend como diccionarios."""

        url = self.config.users_url
        request = Request(url, headers={"Accept": "application/json"}, method="GET")
        logger.debug("--> GET %s", url)

        try:
            with self._opener(request, timeout=self.config.timeout) as response:
                status = _status_of(response)
                raw = response.read()
        except HTTPError as exc:
            logger.debug("<-- %s %s", exc.code, url)
            raise HttpStatusError(exc.code) from exc
        except URLError as exc:
            if isinstance(exc.reason, socket.timeout):
                raise TransportError(f"Timeout contacting {url}") from exc
            raise TransportError(f"Cannot reach {url}: {exc.reason}") from exc
        except (TimeoutError, OSError) as exc:
            raise TransportError(f"Connection to {url} failed: {exc}") from exc

        logger.debug("<-- %s %s (%d bytes)", status, url, len(raw))
        if status is not None and not 200 <= status < 300:
            raise HttpStatusError(status)

        return _decode_usuarios(raw)


def _status_of(response: Any) -> Optional[int]:
    status = getattr(response, "status", None)
    if status is None and hasattr(response, "getcode"):
        status = response.getcode()
    return status


def _decode_usuarios(raw: bytes) -> list[dict]:
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise TransportError(f"Invalid JSON in users response: {exc}") from exc

    # Un cuerpo ``null`` equivale a un listado vacío.
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise TransportError("Users response is not a JSON array")
    if not all(isinstance(item, dict) for item in payload):
        raise TransportError("Users response contains non-object entries")
    return payload


__all__ = ["APIClient", "APIError", "HttpStatusError", "TransportError"]
