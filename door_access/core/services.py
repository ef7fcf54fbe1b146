"""Servicios de aplicación que coordinan el acceso a datos."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from door_access.infrastructure.api_client import HttpStatusError
from door_access.infrastructure.mock_data import MOCK_USERS
from door_access.infrastructure.repositories import UserRepository
from door_access.models.user import User, usuario_desconocido

logger = logging.getLogger("door_access.services")

MAX_USUARIOS = 12
NETWORK_ERROR_MESSAGE = "Network error"


class DataSource(enum.Enum):
    LIVE = "live"
    MOCK = "mock"


@dataclass(frozen=True, slots=True)
class DirectoryResult:
    """Resultado de una carga del directorio."""

    usuarios: tuple[User, ...]
    origen: DataSource
    error: Optional[str] = None


def truncar(usuarios: Sequence[User], limite: int = MAX_USUARIOS) -> tuple[User, ...]:
    """Conserva los primeros ``limite`` usuarios en su orden original."""

    return tuple(usuarios[:limite])


class UserService:
    """Orquesta la carga del directorio con respaldo en datos simulados."""

    def __init__(self, repository: UserRepository, mock_users: Sequence[User] = MOCK_USERS) -> None:
        self._repository = repository
        self._mock_users = tuple(mock_users)

    def obtener_directorio(self) -> DirectoryResult:
        """Consulta el backend una vez y nunca lanza excepciones."""

        logger.info("Fetching users...")
        try:
            usuarios = self._repository.obtener_usuarios()
        except HttpStatusError as exc:
            logger.warning("Users endpoint answered with status %s", exc.code)
            return self._respaldo(f"Error: {exc.code}")
        except Exception as exc:
            logger.error("Failed: %s", exc)
            return self._respaldo(NETWORK_ERROR_MESSAGE)

        cargados = truncar(usuarios)
        logger.info("Loaded %d users", len(cargados))
        return DirectoryResult(usuarios=cargados, origen=DataSource.LIVE)

    def _respaldo(self, mensaje: str) -> DirectoryResult:
        return DirectoryResult(
            usuarios=truncar(self._mock_users),
            origen=DataSource.MOCK,
            error=mensaje,
        )


def buscar_usuario(usuarios: Sequence[User], user_id: int) -> User:
    """Devuelve el usuario con ``user_id`` o un registro sustituto."""

    for usuario in usuarios:
        if usuario.id == user_id:
            return usuario
    return usuario_desconocido(user_id)


__all__ = [
    "DataSource",
    "DirectoryResult",
    "MAX_USUARIOS",
    "NETWORK_ERROR_MESSAGE",
    "UserService",
    "buscar_usuario",
    "truncar",
]
