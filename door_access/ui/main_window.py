"""Ventana principal de la aplicación."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from PyQt6.QtCore import QObject, QThread, pyqtSignal
from PyQt6.QtGui import QCloseEvent, QKeySequence, QShortcut
from PyQt6.QtWidgets import QMainWindow, QStackedWidget

from door_access.core.navigation import DEFAULT_USER_ID, DETAIL, LIST, Navigator, Route, ruta_detalle
from door_access.core.services import DirectoryResult, UserService
from door_access.core.state import AppState
from door_access.ui.avatars import AvatarLoader
from door_access.ui.detail_view import DetailPage
from door_access.ui.list_view import UserListPage

logger = logging.getLogger("door_access.ui")


class _FetchWorker(QObject):
    finished = pyqtSignal(int, object)

    def __init__(self, token: int, user_service: UserService) -> None:
        super().__init__()
        self.token = token
        self.user_service = user_service

    def run(self) -> None:
        # obtener_directorio nunca lanza: los fallos llegan como resultado simulado.
        resultado = self.user_service.obtener_directorio()
        self.finished.emit(self.token, resultado)


class MainWindow(QMainWindow):
    """Ventana con el listado y el detalle apilados, guiados por el navegador."""

    def __init__(
        self,
        *,
        state: AppState,
        user_service: UserService,
        avatar_loader: Optional[AvatarLoader] = None,
        navigator: Optional[Navigator] = None,
        auto_load: bool = True,
    ) -> None:
        super().__init__()
        self.state = state
        self.user_service = user_service
        self.navigator = navigator or Navigator()
        self._cargas: Dict[QThread, _FetchWorker] = {}

        self.setWindowTitle("Door Access Viewer")
        self.resize(420, 760)

        self.list_page = UserListPage(avatar_loader)
        self.list_page.usuario_elegido.connect(self._on_user_selected)
        self.detail_page = DetailPage(avatar_loader)
        self.detail_page.volver.connect(self.navigator.volver)

        self._pages = QStackedWidget()
        self._pages.addWidget(self.list_page)
        self._pages.addWidget(self.detail_page)
        self.setCentralWidget(self._pages)

        for sequence in (QKeySequence("Alt+Left"), QKeySequence("Escape")):
            QShortcut(sequence, self, activated=self.navigator.volver)

        self._apply_styles()
        self.navigator.suscribir(self._render)
        if auto_load:
            self._render(self.navigator.actual)

    # ------------------------------------------------------------------
    # Navegación
    # ------------------------------------------------------------------
    def abrir_ruta(self, path: str) -> None:
        self.navigator.navegar(path)

    def _on_user_selected(self, user_id: int) -> None:
        self.navigator.navegar(ruta_detalle(user_id))

    def _render(self, ruta: Route) -> None:
        if ruta.destino == LIST:
            self._pages.setCurrentWidget(self.list_page)
            self._activar_listado()
        elif ruta.destino == DETAIL:
            # Salir del listado equivale a desmontarlo: un resultado tardío se descarta.
            self.state.listado.descartar()
            user_id = ruta.user_id if ruta.user_id is not None else DEFAULT_USER_ID
            self.state.seleccionar_usuario(user_id)
            self.detail_page.mostrar_usuario(self.state.resolver_usuario(user_id))
            self._pages.setCurrentWidget(self.detail_page)

    # ------------------------------------------------------------------
    # Carga del directorio
    # ------------------------------------------------------------------
    def _activar_listado(self) -> None:
        token = self.state.listado.activar()
        self.list_page.mostrar_estado(self.state.listado.estado)
        self._iniciar_carga_async(token)

    def _iniciar_carga_async(self, token: int) -> None:
        thread = QThread(self)
        worker = _FetchWorker(token, self.user_service)
        worker.moveToThread(thread)

        thread.started.connect(worker.run)
        worker.finished.connect(thread.quit)
        worker.finished.connect(self._on_fetch_completed)
        thread.finished.connect(self._limpiar_hilos)

        self._cargas[thread] = worker
        thread.start()

    def _on_fetch_completed(self, token: int, resultado: DirectoryResult) -> None:
        if not self.state.aplicar_resultado(token, resultado):
            logger.debug("Discarding stale directory result for activation %s", token)
            return
        self.list_page.mostrar_estado(self.state.listado.estado)

    def _limpiar_hilos(self) -> None:
        for thread in [hilo for hilo in self._cargas if hilo.isFinished()]:
            worker = self._cargas.pop(thread)
            worker.deleteLater()
            thread.deleteLater()

    def detener_cargas(self) -> None:
        """Descarta la activación actual y espera a los hilos en curso."""

        self.state.listado.descartar()
        # La petición en curso termina como mucho al vencer el timeout del cliente.
        for thread in list(self._cargas):
            thread.quit()
            thread.wait()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.detener_cargas()
        super().closeEvent(event)

    # ------------------------------------------------------------------
    # Estilos
    # ------------------------------------------------------------------
    def _apply_styles(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow, QWidget {
                background-color: #f8fafc;
                color: #0f172a;
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 10pt;
            }
            #userCard {
                background: #eef2f7;
                border-radius: 12px;
            }
            #userCard:focus {
                border: 2px solid #6366f1;
            }
            #userCard QLabel, #profileCard QLabel, #infoCard QLabel {
                background: transparent;
            }
            #cardName {
                font-size: 11pt;
                font-weight: 500;
            }
            #cardEmail, #detailEmail, #infoLabel, #cardArrow {
                color: #475569;
            }
            #detailTitle {
                font-size: 18pt;
                font-weight: 700;
            }
            #detailName {
                font-size: 14pt;
                font-weight: 600;
            }
            #sectionTitle {
                font-size: 12pt;
                font-weight: 500;
            }
            #infoValue {
                font-weight: 500;
            }
            #profileCard {
                background: #ffffff;
                border-radius: 20px;
            }
            #infoCard {
                background: #eef2f7;
                border-radius: 12px;
            }
            #backButton {
                background: transparent;
                border: none;
                color: #4f46e5;
                font-weight: 600;
                padding: 4px 0;
            }
            QProgressBar {
                background-color: #e0e7ff;
                border: none;
                border-radius: 4px;
                max-height: 8px;
            }
            QProgressBar::chunk {
                background-color: #6366f1;
                border-radius: 4px;
            }
            """
        )


__all__ = ["MainWindow"]
