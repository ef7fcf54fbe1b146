"""Definiciones de modelos de dominio."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    """Entrada del directorio de accesos."""

    id: int
    name: str
    email: str
    avatar: str = ""


def usuario_desconocido(user_id: int) -> User:
    """Registro sustituto para ids que no están en el lote cargado."""

    return User(id=user_id, name="Unknown User", email="unknown@example.com")


__all__ = ["User", "usuario_desconocido"]
