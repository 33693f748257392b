"""Database session dependency.

The generator is used as-is so FastAPI throws handler errors into it and the
session is rolled back.
"""

from loyalize.infrastructure.database.session import get_session as get_db_session

__all__ = ["get_db_session"]
