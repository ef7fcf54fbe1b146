"""Estado compartido de la aplicación."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from door_access.core.services import DirectoryResult, buscar_usuario
from door_access.models.user import User


@dataclass(frozen=True, slots=True)
class Loading:
    pass


@dataclass(frozen=True, slots=True)
class Ready:
    usuarios: tuple[User, ...]


@dataclass(frozen=True, slots=True)
class Failed:
    mensaje: str


ListState = Union[Loading, Ready, Failed]


class ListScreenState:
    """Máquina de estados de la pantalla de listado.

    ``activar`` entra en ``Loading`` y devuelve un token; el llamador debe
    programar exactamente una carga para ese token. ``completar`` solo acepta
    el resultado si la pantalla sigue en ``Loading`` con el mismo token, de lo
    contrario lo descarta.
    """

    def __init__(self) -> None:
        self.estado: Optional[ListState] = None
        self._token = 0

    @property
    def cargando(self) -> bool:
        return isinstance(self.estado, Loading)

    def activar(self) -> int:
        self._token += 1
        self.estado = Loading()
        return self._token

    def completar(self, token: int, resultado: DirectoryResult) -> bool:
        if token != self._token or not self.cargando:
            return False

        if resultado.error:
            self.estado = Failed(resultado.error)
        else:
            self.estado = Ready(resultado.usuarios)
        return True

    def descartar(self) -> None:
        self._token += 1
        self.estado = None


@dataclass
class AppState:
    """Mantiene el lote cargado, el estado del listado y la selección actual."""

    usuarios: List[User] = field(default_factory=list)
    listado: ListScreenState = field(default_factory=ListScreenState)
    usuario_seleccionado: Optional[int] = None

    def aplicar_resultado(self, token: int, resultado: DirectoryResult) -> bool:
        """Registra el lote si la activación sigue vigente."""

        if not self.listado.completar(token, resultado):
            return False
        # El lote simulado se conserva aunque la pantalla muestre el error.
        self.usuarios = list(resultado.usuarios)
        return True

    def seleccionar_usuario(self, user_id: int | None) -> None:
        self.usuario_seleccionado = user_id

    def resolver_usuario(self, user_id: int) -> User:
        return buscar_usuario(self.usuarios, user_id)


__all__ = ["AppState", "Failed", "ListScreenState", "ListState", "Loading", "Ready"]
