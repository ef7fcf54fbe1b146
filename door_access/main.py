"""Punto de entrada de la aplicación.

Crea los componentes de infraestructura, servicios y estado, y arranca la
interfaz gráfica principal.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Sequence

from PyQt6.QtWidgets import QApplication

from door_access.config import ApiConfig
from door_access.core.services import UserService
from door_access.core.state import AppState
from door_access.infrastructure.api_client import APIClient
from door_access.infrastructure.repositories import UserRepository
from door_access.ui.avatars import AvatarLoader
from door_access.ui.main_window import MainWindow

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configura el logging raíz; niveles desconocidos equivalen a INFO."""

    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format=LOG_FORMAT)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Door access viewer")
    parser.add_argument(
        "--route",
        default=None,
        help="Ruta inicial, por ejemplo 'detail/4' (por defecto el listado)",
    )
    parser.add_argument("--api-base", default=None, help="URL base del API de usuarios")
    # Qt consume sus propios argumentos (-style, -platform, ...).
    args, _ = parser.parse_known_args(argv)
    return args


def main(argv: Sequence[str] | None = None) -> None:
    """Arranca la aplicación PyQt6 con las dependencias configuradas."""

    args = _parse_args(sys.argv[1:] if argv is None else argv)
    config = ApiConfig.from_env()
    if args.api_base:
        config = replace(config, base_url=args.api_base)
    configure_logging(config.log_level)

    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    api_client = APIClient(config)
    repository = UserRepository(api_client)
    user_service = UserService(repository)
    state = AppState()
    avatar_loader = AvatarLoader(app) if config.load_images else None

    window = MainWindow(state=state, user_service=user_service, avatar_loader=avatar_loader)
    if args.route:
        window.abrir_ruta(args.route)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":  # pragma: no cover - punto de entrada interactivo
    main()
