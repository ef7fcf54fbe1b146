"""Carga asíncrona de avatares por URL."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List

from PyQt6.QtCore import QObject, QRectF, Qt, QUrl
from PyQt6.QtGui import QColor, QPainter, QPainterPath, QPixmap
from PyQt6.QtNetwork import QNetworkAccessManager, QNetworkReply, QNetworkRequest

logger = logging.getLogger("door_access.ui.avatars")

AvatarCallback = Callable[[QPixmap], None]


def avatar_circular(pixmap: QPixmap, size: int) -> QPixmap:
    """Recorta ``pixmap`` en un círculo de ``size`` píxeles."""

    escalado = pixmap.scaled(
        size,
        size,
        Qt.AspectRatioMode.KeepAspectRatioByExpanding,
        Qt.TransformationMode.SmoothTransformation,
    )
    resultado = QPixmap(size, size)
    resultado.fill(Qt.GlobalColor.transparent)

    painter = QPainter(resultado)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    path = QPainterPath()
    path.addEllipse(QRectF(0, 0, size, size))
    painter.setClipPath(path)
    painter.drawPixmap(0, 0, escalado)
    painter.end()
    return resultado


def avatar_vacio(size: int, color: str = "#d1d5db") -> QPixmap:
    """Círculo gris mostrado mientras llega la imagen."""

    resultado = QPixmap(size, size)
    resultado.fill(Qt.GlobalColor.transparent)
    painter = QPainter(resultado)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setPen(Qt.PenStyle.NoPen)
    painter.setBrush(QColor(color))
    painter.drawEllipse(0, 0, size, size)
    painter.end()
    return resultado


class AvatarLoader(QObject):
    """Descarga imágenes con ``QNetworkAccessManager`` y las cachea por URL."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._manager = QNetworkAccessManager(self)
        self._manager.finished.connect(self._on_finished)
        self._cache: Dict[str, QPixmap] = {}
        self._pendientes: Dict[str, List[AvatarCallback]] = {}

    def cargar(self, url: str, callback: AvatarCallback) -> None:
        cached = self._cache.get(url)
        if cached is not None:
            callback(cached)
            return

        if url in self._pendientes:
            self._pendientes[url].append(callback)
            return

        self._pendientes[url] = [callback]
        self._manager.get(QNetworkRequest(QUrl(url)))

    def _on_finished(self, reply: QNetworkReply) -> None:
        url = reply.request().url().toString()
        callbacks = self._pendientes.pop(url, [])
        try:
            if reply.error() != QNetworkReply.NetworkError.NoError:
                logger.warning("Avatar %s failed: %s", url, reply.errorString())
                return

            pixmap = QPixmap()
            if not pixmap.loadFromData(bytes(reply.readAll())):
                logger.warning("Avatar %s is not a valid image", url)
                return

            self._cache[url] = pixmap
            for callback in callbacks:
                callback(pixmap)
        finally:
            reply.deleteLater()


__all__ = ["AvatarLoader", "avatar_circular", "avatar_vacio"]
