from src.core.database.session import async_session, engine, get_db
from src.core.database.base import Base, BaseModel, new_uuid

__all__ = ["async_session", "engine", "get_db", "Base", "BaseModel", "new_uuid"]
