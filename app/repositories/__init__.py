"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.core import MpRepository, PostcodeRepository
from app.repositories.db import (
    close_db,
    get_db,
    get_write_connection,
    init_tables,
    reconnect_db,
)

__all__ = [
    # DB
    "get_db",
    "close_db",
    "reconnect_db",
    "init_tables",
    "get_write_connection",
    # Base
    "BaseRepository",
    # Core
    "MpRepository",
    "PostcodeRepository",
]
