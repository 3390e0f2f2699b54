"""bindQL statement builders."""
from bindql.statements.base import StatementBuilder
from bindql.statements.delete import Delete
from bindql.statements.insert import Insert
from bindql.statements.select import Select
from bindql.statements.update import Update

__all__ = [
    "Delete",
    "Insert",
    "Select",
    "StatementBuilder",
    "Update",
]
