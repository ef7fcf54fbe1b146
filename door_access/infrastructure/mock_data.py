"""Lote fijo de usuarios usado cuando la consulta remota falla."""

from __future__ import annotations

from door_access.models.user import User

MOCK_USERS: tuple[User, ...] = (
    User(1, "John Resident", "john@door.com", ""),
    User(2, "Unknown Person", "unknown@example.com", ""),
    User(3, "Mary Johnson", "mary@door.com", ""),
    User(4, "Delivery Person", "delivery@service.com", ""),
    User(5, "Security Guard", "security@building.com", ""),
    User(6, "Maintenance", "maintenance@building.com", ""),
    User(7, "Guest Visitor", "guest@visitor.com", ""),
    User(8, "Admin User", "admin@system.com", ""),
    User(9, "Test User", "test@example.com", ""),
    User(10, "Backup User", "backup@system.com", ""),
    User(11, "Alex Manager", "alex@office.com", ""),
    User(12, "Sarah Owner", "sarah@home.com", ""),
    User(13, "David Guest", "david@guest.com", ""),
    User(14, "Lisa Cleaner", "lisa@clean.com", ""),
    User(15, "Mike Engineer", "mike@tech.com", ""),
)


__all__ = ["MOCK_USERS"]
