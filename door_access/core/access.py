"""Valores de presentación derivados del id de usuario.

Son funciones puras: se recalculan en cada renderizado y no se almacenan.
El indicador de acceso es cosmético, no una decisión de autorización.
"""

from __future__ import annotations

AVATAR_URL_TEMPLATE = "https://i.pravatar.cc/{size}?img={user_id}"
AVATAR_SIZE_LIST = 150
AVATAR_SIZE_DETAIL = 300

COLOR_GRANTED = "#4CAF50"
COLOR_DENIED = "#F44336"
BADGE_BG_GRANTED = "#E8F5E9"
BADGE_BG_DENIED = "#FFEBEE"

LAST_ACCESS_TEXT = "Today, 10:30 AM"


def acceso_concedido(user_id: int) -> bool:
    return user_id % 2 == 0


def nivel_acceso(user_id: int) -> str:
    return "Admin" if user_id % 3 == 0 else "Standard"


def avatar_url(user_id: int, size: int = AVATAR_SIZE_LIST) -> str:
    return AVATAR_URL_TEMPLATE.format(size=size, user_id=user_id)


def etiqueta_acceso(user_id: int, *, detalle: bool = False) -> str:
    """Texto del indicador: en tarjetas va en minúsculas y en el detalle en mayúsculas."""

    texto = "Access granted" if acceso_concedido(user_id) else "Access denied"
    return texto.upper() if detalle else texto


def color_acceso(user_id: int) -> str:
    return COLOR_GRANTED if acceso_concedido(user_id) else COLOR_DENIED


def fondo_insignia(user_id: int) -> str:
    return BADGE_BG_GRANTED if acceso_concedido(user_id) else BADGE_BG_DENIED


__all__ = [
    "AVATAR_SIZE_DETAIL",
    "AVATAR_SIZE_LIST",
    "LAST_ACCESS_TEXT",
    "acceso_concedido",
    "avatar_url",
    "color_acceso",
    "etiqueta_acceso",
    "fondo_insignia",
    "nivel_acceso",
]
