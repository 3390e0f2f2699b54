"""bindQL driver layer: the prepare / bind / execute collaborator."""
from bindql.driver.base import Driver, PreparedStatement, StatementResult
from bindql.driver.sqlalchemy import SQLAlchemyDriver

__all__ = [
    "Driver",
    "PreparedStatement",
    "SQLAlchemyDriver",
    "StatementResult",
]
