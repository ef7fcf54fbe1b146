"""Rutas de navegación entre el listado y el detalle."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List, Optional

LIST = "list"
DETAIL = "detail"
DEFAULT_USER_ID = 1

_ENTERO = re.compile(r"[+-]?\d+", re.ASCII)


@dataclass(frozen=True, slots=True)
class Route:
    destino: str
    user_id: Optional[int] = None

    @property
    def path(self) -> str:
        if self.destino == DETAIL:
            return ruta_detalle(self.user_id if self.user_id is not None else DEFAULT_USER_ID)
        return LIST


def ruta_detalle(user_id: int) -> str:
    return f"{DETAIL}/{user_id}"


def parse_user_id(raw: Optional[str]) -> int:
    """Convierte el segmento de la ruta; ausente o inválido equivale a ``1``."""

    if raw is None:
        return DEFAULT_USER_ID
    segmento = raw.strip()
    # Solo enteros con dígitos ASCII, sin separadores "_".
    if not _ENTERO.fullmatch(segmento):
        return DEFAULT_USER_ID
    return int(segmento)


def parse_ruta(path: str) -> Route:
    """Interpreta ``list`` o ``detail/{userId}``; cualquier otra ruta vuelve al listado."""

    partes = [parte for parte in path.strip().strip("/").split("/") if parte]
    if partes and partes[0] == DETAIL:
        segmento = partes[1] if len(partes) > 1 else None
        return Route(DETAIL, parse_user_id(segmento))
    return Route(LIST)


class Navigator:
    """Pila de rutas con el listado como destino inicial."""

    def __init__(self) -> None:
        self._pila: List[Route] = [Route(LIST)]
        self._observadores: List[Callable[[Route], None]] = []

    @property
    def actual(self) -> Route:
        return self._pila[-1]

    @property
    def profundidad(self) -> int:
        return len(self._pila)

    def suscribir(self, callback: Callable[[Route], None]) -> None:
        self._observadores.append(callback)

    def navegar(self, path: str) -> Route:
        ruta = parse_ruta(path)
        if ruta.destino == LIST:
            del self._pila[1:]
        else:
            self._pila.append(ruta)
        self._notificar()
        return ruta

    def volver(self) -> bool:
        """Regresa a la ruta anterior; el destino inicial nunca se descarta."""

        if len(self._pila) <= 1:
            return False
        self._pila.pop()
        self._notificar()
        return True

    def _notificar(self) -> None:
        for callback in list(self._observadores):
            callback(self.actual)


__all__ = [
    "DEFAULT_USER_ID",
    "DETAIL",
    "LIST",
    "Navigator",
    "Route",
    "parse_ruta",
    "parse_user_id",
    "ruta_detalle",
]
