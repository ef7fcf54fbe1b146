"""Pantalla de listado de usuarios."""

from __future__ import annotations

from typing import Optional, Sequence

from PyQt6 import sip
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QKeyEvent, QMouseEvent, QPixmap
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from door_access.core.access import (
    AVATAR_SIZE_LIST,
    avatar_url,
    color_acceso,
    etiqueta_acceso,
)
from door_access.core.state import Failed, ListState, Loading, Ready
from door_access.models.user import User
from door_access.ui.avatars import AvatarLoader, avatar_circular, avatar_vacio

AVATAR_PX = 56
ERROR_COLOR = "#b91c1c"


def asignar_avatar(
    label: QLabel,
    loader: Optional[AvatarLoader],
    user_id: int,
    *,
    size: int,
    url_size: int,
) -> None:
    """Pinta un círculo vacío y lo reemplaza cuando llega la imagen."""

    label.setPixmap(avatar_vacio(size))
    if loader is None:
        return

    def _aplicar(pixmap: QPixmap) -> None:
        # La tarjeta pudo destruirse antes de que terminara la descarga.
        if sip.isdeleted(label):
            return
        label.setPixmap(avatar_circular(pixmap, size))

    loader.cargar(avatar_url(user_id, url_size), _aplicar)


class UserCard(QFrame):
    """Tarjeta clicable con avatar, datos y el indicador de acceso."""

    clicked = pyqtSignal(int)

    def __init__(self, usuario: User, avatar_loader: Optional[AvatarLoader] = None, parent=None) -> None:
        super().__init__(parent)
        self.usuario = usuario
        self.setObjectName("userCard")
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        self.lbl_avatar = QLabel()
        self.lbl_avatar.setFixedSize(AVATAR_PX, AVATAR_PX)
        asignar_avatar(
            self.lbl_avatar,
            avatar_loader,
            usuario.id,
            size=AVATAR_PX,
            url_size=AVATAR_SIZE_LIST,
        )

        self.lbl_name = QLabel(usuario.name)
        self.lbl_name.setObjectName("cardName")
        self.lbl_email = QLabel(usuario.email)
        self.lbl_email.setObjectName("cardEmail")

        color = color_acceso(usuario.id)
        dot = QLabel()
        dot.setFixedSize(10, 10)
        dot.setStyleSheet(f"background: {color}; border-radius: 5px;")
        self.lbl_access = QLabel(etiqueta_acceso(usuario.id))
        self.lbl_access.setStyleSheet(f"color: {color}; font-size: 8pt;")

        access_row = QHBoxLayout()
        access_row.setSpacing(6)
        access_row.addWidget(dot)
        access_row.addWidget(self.lbl_access)
        access_row.addStretch(1)

        text_box = QVBoxLayout()
        text_box.setSpacing(2)
        text_box.addWidget(self.lbl_name)
        text_box.addWidget(self.lbl_email)
        text_box.addSpacing(4)
        text_box.addLayout(access_row)

        arrow = QLabel("→")
        arrow.setObjectName("cardArrow")
        arrow.setToolTip("View details")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(16)
        layout.addWidget(self.lbl_avatar)
        layout.addLayout(text_box, 1)
        layout.addWidget(arrow)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton and self.rect().contains(event.position().toPoint()):
            self.clicked.emit(self.usuario.id)
            return
        super().mouseReleaseEvent(event)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter, Qt.Key.Key_Space):
            self.clicked.emit(self.usuario.id)
            return
        super().keyPressEvent(event)


class UserListPage(QWidget):
    """Muestra carga, error o el listado según el estado recibido."""

    usuario_elegido = pyqtSignal(int)

    def __init__(self, avatar_loader: Optional[AvatarLoader] = None, parent=None) -> None:
        super().__init__(parent)
        self._avatar_loader = avatar_loader
        self.cards: list[UserCard] = []

        self._stack = QStackedWidget()
        self._stack.addWidget(self._build_loading())
        self._stack.addWidget(self._build_error())
        self._stack.addWidget(self._build_list())

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._stack)

    # ------------------------------------------------------------------ UI
    def _build_loading(self) -> QWidget:
        self._loading_view = QWidget()
        progress = QProgressBar()
        progress.setRange(0, 0)
        progress.setTextVisible(False)
        progress.setFixedWidth(160)

        layout = QVBoxLayout(self._loading_view)
        layout.addStretch(1)
        layout.addWidget(progress, 0, Qt.AlignmentFlag.AlignHCenter)
        layout.addSpacing(16)
        layout.addWidget(QLabel("Loading users..."), 0, Qt.AlignmentFlag.AlignHCenter)
        layout.addStretch(1)
        return self._loading_view

    def _build_error(self) -> QWidget:
        self._error_view = QWidget()
        self.lbl_error = QLabel("")
        self.lbl_error.setStyleSheet(f"color: {ERROR_COLOR}; font-weight: 600;")
        self.lbl_error.setAlignment(Qt.AlignmentFlag.AlignCenter)

        layout = QVBoxLayout(self._error_view)
        layout.addStretch(1)
        layout.addWidget(self.lbl_error)
        layout.addStretch(1)
        return self._error_view

    def _build_list(self) -> QWidget:
        self._cards_container = QWidget()
        self._cards_layout = QVBoxLayout(self._cards_container)
        self._cards_layout.setContentsMargins(16, 16, 16, 16)
        self._cards_layout.setSpacing(12)
        self._cards_layout.addStretch(1)

        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        self._scroll.setFrameShape(QFrame.Shape.NoFrame)
        self._scroll.setWidget(self._cards_container)
        return self._scroll

    # ----------------------------------------------------------- renderizado
    def mostrar_estado(self, estado: ListState) -> None:
        if isinstance(estado, Loading):
            self._stack.setCurrentWidget(self._loading_view)
        elif isinstance(estado, Failed):
            self.lbl_error.setText(estado.mensaje)
            self._stack.setCurrentWidget(self._error_view)
        elif isinstance(estado, Ready):
            self._populate(estado.usuarios)
            self._stack.setCurrentWidget(self._scroll)

    @property
    def vista_actual(self) -> str:
        actual = self._stack.currentWidget()
        if actual is self._loading_view:
            return "loading"
        if actual is self._error_view:
            return "error"
        return "list"

    def _populate(self, usuarios: Sequence[User]) -> None:
        for card in self.cards:
            self._cards_layout.removeWidget(card)
            card.deleteLater()
        self.cards = []

        for usuario in usuarios:
            card = UserCard(usuario, self._avatar_loader)
            card.clicked.connect(self.usuario_elegido)
            self._cards_layout.insertWidget(self._cards_layout.count() - 1, card)
            self.cards.append(card)


__all__ = ["UserCard", "UserListPage", "asignar_avatar"]
