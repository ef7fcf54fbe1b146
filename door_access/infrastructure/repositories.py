"""Implementaciones de repositorios para acceso a datos."""

from __future__ import annotations

from door_access.infrastructure.api_client import APIClient, TransportError
from door_access.models.user import User


class UserRepository:
    """Repositorio de usuarios basado en un cliente API."""

    def __init__(self, api_client: APIClient) -> None:
        self._api_client = api_client

    def obtener_usuarios(self) -> list[User]:
        """Devuelve los usuarios en el orden de la respuesta."""

        usuarios_crudos = self._api_client.obtener_usuarios()
        return [_a_usuario(datos) for datos in usuarios_crudos]


def _a_usuario(datos: dict) -> User:
    user_id = datos.get("id")
    # bool es subclase de int; no es un id válido.
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise TransportError(f"User entry without integer id: {datos!r}")

    nombre = datos.get("name")
    email = datos.get("email")
    if not isinstance(nombre, str) or not isinstance(email, str):
        raise TransportError(f"User {user_id} lacks name or email")

    avatar = datos.get("avatar")
    return User(
        id=user_id,
        name=nombre,
        email=email,
        avatar=avatar if isinstance(avatar, str) else "",
    )


__all__ = ["UserRepository"]
