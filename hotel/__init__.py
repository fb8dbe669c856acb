"""Hotel management CLI: menu-driven access to a PostgreSQL hotel database."""

from .connection import HotelDatabase, open_database
from .prompt import Prompter

__all__ = ["HotelDatabase", "open_database", "Prompter"]
