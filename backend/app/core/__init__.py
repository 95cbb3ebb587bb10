from .database import Base, get_db, init_db
from .logging_config import setup_logging

__all__ = [
    "Base",
    "get_db",
    "init_db",
    "setup_logging",
]
