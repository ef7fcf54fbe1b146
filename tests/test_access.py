from __future__ import annotations

import pytest

from door_access.core.access import (
    acceso_concedido,
    avatar_url,
    color_acceso,
    etiqueta_acceso,
    fondo_insignia,
    nivel_acceso,
)


@pytest.mark.parametrize(
    ("user_id", "concedido", "nivel"),
    [
        (4, True, "Standard"),
        (9, False, "Admin"),
        (6, True, "Admin"),
        (1, False, "Standard"),
        (0, True, "Admin"),
        (-3, False, "Admin"),
    ],
)
def test_derived_access_values(user_id, concedido, nivel) -> None:
    assert acceso_concedido(user_id) is concedido
    assert nivel_acceso(user_id) == nivel


def test_labels_and_colors() -> None:
    assert etiqueta_acceso(2) == "Access granted"
    assert etiqueta_acceso(3) == "Access denied"
    assert etiqueta_acceso(2, detalle=True) == "ACCESS GRANTED"
    assert color_acceso(2) == "#4CAF50"
    assert color_acceso(3) == "#F44336"
    assert fondo_insignia(3) == "#FFEBEE"


def test_avatar_url_sizes() -> None:
    assert avatar_url(5) == "https://i.pravatar.cc/150?img=5"
    assert avatar_url(5, 300) == "https://i.pravatar.cc/300?img=5"
