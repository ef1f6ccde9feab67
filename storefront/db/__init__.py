"""Database package: async SQLAlchemy engine, session factory, Base."""
from storefront.db.base import (
    Base,
    async_session_factory,
    check_database,
    engine,
    get_session_factory,
    init_models,
)

__all__ = [
    "Base",
    "async_session_factory",
    "check_database",
    "engine",
    "get_session_factory",
    "init_models",
]
