from .mongo_connection import get_database, get_user_collection, close_database
from .mongo_user_repository import MongoUserRepository
from .in_memory_user_repository import InMemoryUserRepository

__all__ = [
    "get_database",
    "get_user_collection",
    "close_database",
    "MongoUserRepository",
    "InMemoryUserRepository",
]
