"""Pantalla de detalle de acceso de un usuario."""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from door_access.core.access import (
    AVATAR_SIZE_DETAIL,
    LAST_ACCESS_TEXT,
    color_acceso,
    etiqueta_acceso,
    fondo_insignia,
    nivel_acceso,
)
from door_access.models.user import User
from door_access.ui.avatars import AvatarLoader
from door_access.ui.list_view import asignar_avatar

AVATAR_PX = 100


class InfoRow(QWidget):
    """Fila etiqueta/valor de la sección de información."""

    def __init__(self, label: str, parent=None) -> None:
        super().__init__(parent)
        self.lbl_label = QLabel(label)
        self.lbl_label.setObjectName("infoLabel")
        self.lbl_value = QLabel("")
        self.lbl_value.setObjectName("infoValue")
        self.lbl_value.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 8, 0, 8)
        layout.addWidget(self.lbl_label)
        layout.addStretch(1)
        layout.addWidget(self.lbl_value)

    def set_value(self, value: str) -> None:
        self.lbl_value.setText(value)


class DetailPage(QWidget):
    """Tarjeta de perfil con insignia de acceso e información del usuario."""

    volver = pyqtSignal()

    def __init__(self, avatar_loader: Optional[AvatarLoader] = None, parent=None) -> None:
        super().__init__(parent)
        self._avatar_loader = avatar_loader
        self.usuario: Optional[User] = None

        self.btn_back = QPushButton("← Back")
        self.btn_back.setObjectName("backButton")
        self.btn_back.clicked.connect(self.volver)

        title = QLabel("Access Details")
        title.setObjectName("detailTitle")

        self.lbl_avatar = QLabel()
        self.lbl_avatar.setFixedSize(AVATAR_PX, AVATAR_PX)
        self.lbl_name = QLabel("")
        self.lbl_name.setObjectName("detailName")
        self.lbl_email = QLabel("")
        self.lbl_email.setObjectName("detailEmail")
        self.lbl_badge = QLabel("")
        self.lbl_badge.setObjectName("accessBadge")

        profile = QFrame()
        profile.setObjectName("profileCard")
        profile_layout = QVBoxLayout(profile)
        profile_layout.setContentsMargins(24, 24, 24, 24)
        for widget in (self.lbl_avatar, self.lbl_name, self.lbl_email):
            profile_layout.addWidget(widget, 0, Qt.AlignmentFlag.AlignHCenter)
        profile_layout.addSpacing(16)
        profile_layout.addWidget(self.lbl_badge, 0, Qt.AlignmentFlag.AlignHCenter)

        info_title = QLabel("User Information")
        info_title.setObjectName("sectionTitle")

        self.row_id = InfoRow("User ID")
        self.row_email = InfoRow("Email")
        self.row_level = InfoRow("Access Level")
        self.row_last = InfoRow("Last Access")

        info = QFrame()
        info.setObjectName("infoCard")
        info_layout = QVBoxLayout(info)
        info_layout.setContentsMargins(16, 16, 16, 16)
        for row in (self.row_id, self.row_email, self.row_level, self.row_last):
            info_layout.addWidget(row)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.addWidget(self.btn_back, 0, Qt.AlignmentFlag.AlignLeft)
        layout.addWidget(title)
        layout.addSpacing(24)
        layout.addWidget(profile)
        layout.addSpacing(24)
        layout.addWidget(info_title)
        layout.addWidget(info)
        layout.addStretch(1)

    def mostrar_usuario(self, usuario: User) -> None:
        """Renderiza ``usuario``; los valores de acceso se derivan de su id."""

        self.usuario = usuario
        asignar_avatar(
            self.lbl_avatar,
            self._avatar_loader,
            usuario.id,
            size=AVATAR_PX,
            url_size=AVATAR_SIZE_DETAIL,
        )
        self.lbl_name.setText(usuario.name)
        self.lbl_email.setText(usuario.email)

        self.lbl_badge.setText(etiqueta_acceso(usuario.id, detalle=True))
        self.lbl_badge.setStyleSheet(
            f"background: {fondo_insignia(usuario.id)}; color: {color_acceso(usuario.id)};"
            " border-radius: 12px; padding: 6px 12px; font-weight: 600;"
        )

        self.row_id.set_value(str(usuario.id))
        self.row_email.set_value(usuario.email)
        self.row_level.set_value(nivel_acceso(usuario.id))
        self.row_last.set_value(LAST_ACCESS_TEXT)


__all__ = ["DetailPage", "InfoRow"]
