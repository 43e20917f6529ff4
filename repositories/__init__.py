"""
Repository layer: persistence per resource.
Services depend on these; routes never touch them directly.
"""

from repositories.furniture_repository import FurnitureRepository
from repositories.user_repository import UserRepository

__all__ = ["FurnitureRepository", "UserRepository"]
